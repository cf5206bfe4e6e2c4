"""A .env file bound to a path.

``EnvFile`` owns a single ``LineCollection``.  It reads it through a
``Storage`` backend on ``load`` and writes it back on ``save``; everything
in between only mutates the in-memory lines.

Use the factories to check the file up front:

    env = EnvFile.writable(".env").load()
    env.set("DEBUG", "true").save()
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from envedit.domain.lines import LineCollection
from envedit.errors import DocumentNotLoadedError, FilePermissionError, NonExistentFileError
from envedit.models import KeyValue
from envedit.storage import LocalStorage, Storage

logger = logging.getLogger(__name__)


class EnvFile:
    """A .env document: path, storage backend and the loaded lines."""

    def __init__(self, path: Path | str, storage: Storage | None = None) -> None:
        self.path = Path(path)
        self.storage: Storage = storage if storage is not None else LocalStorage()
        self._lines: LineCollection | None = None

    def __repr__(self) -> str:
        return f"EnvFile({str(self.path)!r})"

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def at(cls, path: Path | str, storage: Storage | None = None) -> "EnvFile":
        """Return an instance for ``path``, ensuring the file exists and is readable."""
        env = cls(path, storage)
        if not env.exists():
            raise NonExistentFileError(f"File does not exist at {env.path}", env.path)
        if not env.is_readable():
            raise FilePermissionError(f"File not readable at {env.path}", env.path)
        return env

    @classmethod
    def writable(cls, path: Path | str, storage: Storage | None = None) -> "EnvFile":
        """Like ``at``, but also ensure the file can be written."""
        env = cls.at(path, storage)
        if not env.is_writable():
            raise FilePermissionError(f"File not writable at {env.path}", env.path)
        return env

    @classmethod
    def create(
        cls, path: Path | str, contents: str = "", storage: Storage | None = None
    ) -> "EnvFile":
        """Create the file (and parent directories) if missing.

        ``contents`` is only written when the file did not exist yet.
        """
        env = cls(path, storage)
        if not env.exists():
            env.storage.touch(env.path)
            if contents:
                env.storage.write_text(env.path, contents)
            logger.info("Initialised %s", env.path)
        return env

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    def exists(self) -> bool:
        return self.storage.exists(self.path)

    def is_readable(self) -> bool:
        return self.storage.is_readable(self.path)

    def is_writable(self) -> bool:
        return self.storage.is_writable(self.path)

    def load(self) -> "EnvFile":
        self._lines = LineCollection.parse(self.storage.read_text(self.path))
        logger.debug("Loaded %d lines from %s", self._lines.count(), self.path)
        return self

    def save(self) -> int:
        """Write the lines back and return the number of characters written."""
        written = self.storage.write_text(self.path, self.lines.to_string())
        logger.debug("Saved %d lines to %s", self.lines.count(), self.path)
        return written

    @property
    def lines(self) -> LineCollection:
        if self._lines is None:
            raise DocumentNotLoadedError(f"{self.path} has not been loaded")
        return self._lines

    @property
    def loaded(self) -> bool:
        return self._lines is not None

    # ------------------------------------------------------------------
    # Variables
    # ------------------------------------------------------------------

    def line_count(self) -> int:
        return self.lines.count()

    def get(self, key: str) -> str | None:
        """Return the value defined for ``key``, or None if it is not defined."""
        return self.lines.get_definition(key)

    def set(self, key: str, value: str, quote: str = "") -> "EnvFile":
        """Define ``key``, replacing the first existing definition in place."""
        self.lines.update_or_add(KeyValue(key, value, quote))
        logger.debug("Set %s in %s", key, self.path)
        return self

    def remove(self, key: str) -> int:
        """Remove every definition of ``key`` and return how many lines went."""
        removed = self.lines.remove_definition(key)
        logger.debug("Removed %d definition(s) of %s from %s", removed, key, self.path)
        return removed

    def has_key(self, key: str) -> bool:
        return self.lines.has_definition(key)

    def dictionary(self) -> dict[str, str]:
        return self.lines.to_dictionary()

    def dictionary_with_keys_matching(self, patterns: str | Iterable[str]) -> dict[str, str]:
        """Return ``key -> value`` for keys matching any of the glob ``patterns``."""
        return self.lines.where_keys_like(patterns).to_dictionary()

    def to_string(self) -> str:
        return self.lines.to_string()
