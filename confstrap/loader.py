"""
Bootstrap a complete configuration from a TOML file.

``create_config`` is the full pipeline: provision the file, re-read it, parse
it into a partial (falling back to the default text when the user's text is
malformed) and hand the partial to the type's merger. Nothing is cached, so
each call observes the file as it is on disk right now.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TypeVar

from .errors import MalformedConfigError, ReadConfigFileError
from .files import CONFIG_ENCODING, ensure_file, read_specific_file
from .merge import Merger
from .partial import load_partial, parse_partial

logger = logging.getLogger(__name__)

P = TypeVar("P")
C = TypeVar("C")


def create_config(
    directory: str | Path,
    file_name: str,
    default_content: str,
    partial_type: type[P],
    merge: Merger[P, C],
) -> C:
    """
    Load ``directory/file_name`` into a complete config, provisioning it first.

    An existing non-empty file always wins over ``default_content``; it is
    never rewritten, even when it fails to parse.
    """
    path = ensure_file(directory, file_name, default_content)

    try:
        text = path.read_text(encoding=CONFIG_ENCODING)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read %s, using defaults instead: %s", path, exc)
        text = default_content

    if not text:
        text = default_content

    partial = parse_partial(text, default_content, partial_type)
    return merge(partial)


def read_specific_config(
    path: str | os.PathLike[str],
    partial_type: type[P],
    merge: Merger[P, C],
) -> C:
    """
    Load an existing config file with no provisioning and no default fallback.

    Raises ``ReadConfigFileError`` when the file is missing, unreadable or
    malformed. An empty file yields the all-absent partial.
    """
    text = read_specific_file(path, encoding=CONFIG_ENCODING)
    try:
        partial = load_partial(text, partial_type)
    except MalformedConfigError as exc:
        raise ReadConfigFileError() from exc
    return merge(partial)


__all__ = ["create_config", "read_specific_config"]
