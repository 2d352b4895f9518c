"""Locate (and create) the per-user configuration directory for an app."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from .errors import ConfigIOError, NoConfigRootError, PathOccupiedError

logger = logging.getLogger(__name__)


def _platform_root() -> Path:
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME", "").strip()
    # XDG says relative values are invalid and must be ignored.
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return Path.home() / ".config"


def config_root() -> Path:
    """
    Return the host's per-user configuration root.

    Raises ``NoConfigRootError`` when the home directory cannot be determined
    or the platform root is not an existing directory. There is no sensible
    fallback location, so callers should treat this as fatal or pass an
    explicit ``root`` to :func:`resolve_directory`.
    """
    try:
        root = _platform_root()
    except RuntimeError as exc:
        raise NoConfigRootError(
            "There is no home directory, please ensure your PC has a home directory."
        ) from exc

    if not root.is_dir():
        raise NoConfigRootError(f"Configuration root {root} does not exist.")
    return root


def resolve_directory(logical_name: str, root: str | Path | None = None) -> Path:
    """
    Return ``<root>/<logical_name>``, creating it when missing.

    ``root`` defaults to :func:`config_root`.
    """
    name = Path(logical_name)
    if not logical_name or name.is_absolute() or ".." in name.parts:
        raise ValueError(f"logical_name must be a relative name inside the config root, got {logical_name!r}")

    base = Path(root) if root is not None else config_root()
    directory = base / name

    if directory.exists() and not directory.is_dir():
        raise PathOccupiedError(directory, "directory")

    if not directory.is_dir():
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigIOError(f"Could not create config folder {directory}: {exc}") from exc
        logger.info("Created config directory %s", directory)

    return directory


__all__ = ["config_root", "resolve_directory"]
