"""Exception taxonomy shared by every confstrap entry point."""

from __future__ import annotations


class ConfigError(Exception):
    """Base class for all configuration bootstrap failures."""


class NoConfigRootError(ConfigError):
    """The host has no usable per-user configuration directory."""


class PathOccupiedError(ConfigError):
    """A path expected to be a directory (or file) holds something else."""

    def __init__(self, path, expected: str) -> None:
        self.path = path
        self.expected = expected
        super().__init__(f"{path} exists but is not a {expected}")


class ConfigIOError(ConfigError, OSError):
    """Creating or writing a provisioned file or directory failed."""


class MalformedConfigError(ConfigError, ValueError):
    """Raw TOML text could not be parsed into the partial schema."""


class InvalidDefaultConfigError(ConfigError):
    """The caller-supplied default text does not parse.

    This is always a bug at the call site: the default is the last fallback.
    """


class ReadConfigFileError(ConfigError):
    """An explicitly named file could not be read or parsed."""

    def __init__(self, message: str = "Error on reading File.") -> None:
        super().__init__(message)


__all__ = [
    "ConfigError",
    "NoConfigRootError",
    "PathOccupiedError",
    "ConfigIOError",
    "MalformedConfigError",
    "InvalidDefaultConfigError",
    "ReadConfigFileError",
]
