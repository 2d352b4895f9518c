"""
File provisioning and raw reads.

``ensure_file`` implements the create-if-absent / populate-if-empty rule shared
by config files and auxiliary assets: a sane default is written on first run,
and anything the user has put in the file afterwards is left alone.
``read_specific_file`` is the opposite end: the caller names an exact file and
gets its text or a ``ReadConfigFileError``, never a default.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import ConfigIOError, PathOccupiedError, ReadConfigFileError

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
# Tolerates the byte-order mark some Windows editors prepend.
CONFIG_ENCODING = "utf-8-sig"


def ensure_file(directory: str | Path, file_name: str, default_content: str) -> Path:
    """Guarantee ``directory/file_name`` exists and is non-empty; return its path."""

    path = Path(directory) / file_name

    if path.exists() and not path.is_file():
        raise PathOccupiedError(path, "file")

    try:
        if not path.is_file():
            path.touch()
        needs_default = bool(default_content) and path.stat().st_size == 0
        if needs_default:
            path.write_text(default_content, encoding=ENCODING)
    except OSError as exc:
        raise ConfigIOError(f"Could not provision {path}: {exc}") from exc

    if needs_default:
        logger.info("Wrote default content to %s", path)
    return path


def create_asset(directory: str | Path, file_name: str, default_content: str) -> Path:
    """Provision an auxiliary text asset (e.g. a stylesheet) next to the config."""

    return ensure_file(directory, file_name, default_content)


def read_specific_file(path: str | os.PathLike[str], encoding: str = ENCODING) -> str:
    """Read ``path`` as text with no fallback."""

    target = Path(path)
    if not target.is_file():
        raise ReadConfigFileError()
    try:
        text = target.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadConfigFileError() from exc
    logger.debug("Read %d characters from %s", len(text), target)
    return text


__all__ = ["ENCODING", "CONFIG_ENCODING", "ensure_file", "create_asset", "read_specific_file"]
