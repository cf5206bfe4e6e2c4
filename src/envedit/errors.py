"""Exceptions raised by envedit.

A missing key is never an error: lookups return ``None`` instead.
"""

from pathlib import Path


class EnvEditError(Exception):
    """Base class for every error envedit raises on purpose."""


class StorageError(EnvEditError):
    """Raised when a file cannot be read or written."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = path


class NonExistentFileError(StorageError):
    """Raised when an operation needs a file that does not exist."""


class FilePermissionError(StorageError):
    """Raised when the required read or write permission is missing."""


class DocumentNotLoadedError(EnvEditError):
    """Raised when lines are accessed before ``EnvFile.load`` was called."""


class ConfigError(EnvEditError):
    """Raised when the preferences file exists but cannot be parsed or validated."""
