"""Custom exception types raised while creating class stubs."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .scaffold import StubWriteResult

__all__ = [
    "ClassNameError",
    "ConfigError",
    "CreationAborted",
    "DirectoryErrorKind",
    "NameErrorKind",
    "ScaffoldError",
    "StubWriteError",
    "TargetDirectoryError",
]


class NameErrorKind(str, Enum):
    """Reasons a class name can be rejected."""

    EMPTY = "empty"
    TOO_LONG = "too_long"
    CONTAINS_WHITESPACE = "contains_whitespace"


class DirectoryErrorKind(str, Enum):
    """Reasons a target directory cannot receive the stub files."""

    NOT_A_DIRECTORY = "not_a_directory"
    MISSING_PARENT = "missing_parent"
    CREATE_FAILED = "create_failed"
    UNRESOLVABLE = "unresolvable"


class ScaffoldError(RuntimeError):
    """Base class for every error raised by :mod:`cppscaffold`."""


class ClassNameError(ScaffoldError, ValueError):
    """Raised when a class name cannot be used."""

    def __init__(self, kind: NameErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class TargetDirectoryError(ScaffoldError):
    """Raised when the target directory cannot be used or created."""

    def __init__(self, kind: DirectoryErrorKind, path: Path, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.path = path


class StubWriteError(ScaffoldError):
    """Raised when at least one of the stub files could not be written.

    ``result`` holds the outcome of both writes so callers can tell which file,
    if any, made it to disk.
    """

    def __init__(self, result: "StubWriteResult", message: str) -> None:
        super().__init__(message)
        self.result = result


class ConfigError(ScaffoldError):
    """Raised when a settings file cannot be read or validated."""


class CreationAborted(ScaffoldError):
    """Raised when the user dismisses a prompt before any file is written."""
