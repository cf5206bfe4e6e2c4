"""Storage backends that ``EnvFile`` reads from and writes to.

The document layer never touches the filesystem itself; it goes through an
object satisfying the ``Storage`` protocol.  ``LocalStorage`` is the real
filesystem, ``MemoryStorage`` keeps files in a dict for tests and dry runs.

Any ``OSError`` is re-raised as ``StorageError`` carrying the path.
"""

import logging
import os
from pathlib import Path
from typing import Protocol

from envedit.errors import NonExistentFileError, StorageError

logger = logging.getLogger(__name__)


class Storage(Protocol):
    """Protocol that all storage backends must satisfy."""

    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, text: str) -> int:
        """Replace the file contents and return the number of characters written."""
        ...

    def exists(self, path: Path) -> bool: ...

    def is_readable(self, path: Path) -> bool: ...

    def is_writable(self, path: Path) -> bool: ...

    def touch(self, path: Path) -> None:
        """Create an empty file (and its parent directories) if it is missing."""
        ...


class LocalStorage:
    """Reads and writes files on the local filesystem as UTF-8.

    Line endings are passed through untranslated.
    """

    encoding = "utf-8"

    def read_text(self, path: Path) -> str:
        logger.debug("Reading %s", path)
        try:
            with Path(path).open(encoding=self.encoding, newline="") as f:
                return f.read()
        except FileNotFoundError as exc:
            raise NonExistentFileError(f"File does not exist at {path}", path) from exc
        except OSError as exc:
            raise StorageError(f"Could not read {path}: {exc.strerror}", path) from exc

    def write_text(self, path: Path, text: str) -> int:
        logger.debug("Writing %d characters to %s", len(text), path)
        try:
            with Path(path).open("w", encoding=self.encoding, newline="") as f:
                return f.write(text)
        except OSError as exc:
            raise StorageError(f"Could not write {path}: {exc.strerror}", path) from exc

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_readable(self, path: Path) -> bool:
        return os.access(path, os.R_OK)

    def is_writable(self, path: Path) -> bool:
        return os.access(path, os.W_OK)

    def touch(self, path: Path) -> None:
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Could not create {path}: {exc.strerror}", path) from exc
        logger.info("Created %s", path)


class MemoryStorage:
    """In-memory storage keyed by path.

    Files listed in ``read_only`` exist but refuse writes; files listed in
    ``unreadable`` exist but refuse reads.
    """

    def __init__(
        self,
        files: dict[str, str] | None = None,
        read_only: set[str] | None = None,
        unreadable: set[str] | None = None,
    ) -> None:
        self.files: dict[str, str] = {str(k): v for k, v in (files or {}).items()}
        self.read_only: set[str] = {str(p) for p in (read_only or set())}
        self.unreadable: set[str] = {str(p) for p in (unreadable or set())}

    def read_text(self, path: Path) -> str:
        if not self.exists(path):
            raise NonExistentFileError(f"File does not exist at {path}", path)
        if not self.is_readable(path):
            raise StorageError(f"Could not read {path}: Permission denied", path)
        return self.files[str(path)]

    def write_text(self, path: Path, text: str) -> int:
        if str(path) in self.read_only:
            raise StorageError(f"Could not write {path}: Permission denied", path)
        self.files[str(path)] = text
        return len(text)

    def exists(self, path: Path) -> bool:
        return str(path) in self.files

    def is_readable(self, path: Path) -> bool:
        return self.exists(path) and str(path) not in self.unreadable

    def is_writable(self, path: Path) -> bool:
        return str(path) not in self.read_only

    def touch(self, path: Path) -> None:
        self.files.setdefault(str(path), "")
