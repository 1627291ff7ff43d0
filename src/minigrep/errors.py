from __future__ import annotations

"""Exception types raised by minigrep."""

from pathlib import Path

__all__ = [
    "MinigrepError",
    "ConfigError",
    "MissingArgument",
    "FileReadError",
    "SettingsError",
]


class MinigrepError(Exception):
    """Base class for every error minigrep reports to the user."""


class ConfigError(MinigrepError):
    """The search configuration could not be built from the raw arguments."""


class MissingArgument(ConfigError):
    """A required positional argument was not supplied; ``argument`` names it."""

    def __init__(self, argument: str, message: str):
        super().__init__(message)
        self.argument = argument


class FileReadError(MinigrepError):
    """The target file could not be opened, read or decoded."""

    def __init__(self, path: str | Path, cause: BaseException):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"{self.path}: {_describe(cause)}")


class SettingsError(MinigrepError):
    """The settings file is missing, unreadable or holds invalid values."""


def _describe(cause: BaseException) -> str:
    # OSError 自带 filename，strerror 更简洁
    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror
    return str(cause) or type(cause).__name__
