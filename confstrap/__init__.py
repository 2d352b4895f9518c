"""Typed TOML configuration bootstrap with per-field defaults."""

from .directory import config_root, resolve_directory
from .errors import (
    ConfigError,
    ConfigIOError,
    InvalidDefaultConfigError,
    MalformedConfigError,
    NoConfigRootError,
    PathOccupiedError,
    ReadConfigFileError,
)
from .files import create_asset, ensure_file, read_specific_file
from .loader import create_config, read_specific_config
from .merge import Merger, value_or
from .partial import PartialConfig, load_partial, parse_partial

__version__ = "0.1.0"

__all__ = [
    "config_root",
    "resolve_directory",
    "ensure_file",
    "create_asset",
    "read_specific_file",
    "PartialConfig",
    "load_partial",
    "parse_partial",
    "Merger",
    "value_or",
    "create_config",
    "read_specific_config",
    "ConfigError",
    "ConfigIOError",
    "InvalidDefaultConfigError",
    "MalformedConfigError",
    "NoConfigRootError",
    "PathOccupiedError",
    "ReadConfigFileError",
]
