"""Exception types raised while scaffolding a project."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "CCInitError",
    "ConfigError",
    "DirectoryCreationError",
    "FileWriteError",
    "WorkingDirectoryError",
]


class CCInitError(RuntimeError):
    """Base class for every failure reported by the command line tool."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class WorkingDirectoryError(CCInitError):
    """Raised when the current working directory cannot be resolved."""


class ConfigError(CCInitError):
    """Raised when the settings file or project configuration is invalid."""


class DirectoryCreationError(CCInitError):
    """Raised when a directory of the scaffold cannot be created."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"failed to create directory {path}: {reason}")


class FileWriteError(CCInitError):
    """Raised when a generated file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"failed to write {path}: {reason}")
