"""The ordered line store behind a .env file.

``LineCollection`` keeps every physical line of a file in order, keyed by
position.  Key-based operations are layered on top as linear searches over
the ``KeyValue`` entries; the positional order is authoritative and is what
gets written back.

Duplicate keys are handled asymmetrically: ``update_or_add`` replaces only
the first matching pair, while ``remove_definition`` drops every one.
"""

from collections.abc import Iterable
from fnmatch import fnmatchcase

from envedit.constants import CRLF, LINE_BREAK
from envedit.domain.collection import Collection
from envedit.models import EnvLine, KeyValue, parse_line


def matches_any(key: str, patterns: str | Iterable[str]) -> bool:
    """Return True if ``key`` matches at least one shell-style glob pattern."""
    if isinstance(patterns, str):
        patterns = [patterns]
    return any(fnmatchcase(key, pattern) for pattern in patterns)


def _defines(key: str):
    return lambda line, _: isinstance(line, KeyValue) and line.key == key


class LineCollection(Collection):
    """Positional sequence of ``Line`` / ``KeyValue`` entries.

    ``line_break`` is the separator used by ``to_string``; files using
    ``\\r\\n`` are written back with ``\\r\\n``.
    """

    line_break: str = LINE_BREAK

    @classmethod
    def parse(cls, text: str) -> "LineCollection":
        """Split raw file text into typed lines.  Never raises."""
        line_break = CRLF if CRLF in text else LINE_BREAK
        lines = cls([parse_line(raw) for raw in text.split(line_break)])
        lines.line_break = line_break
        return lines

    def lines(self) -> list[EnvLine]:
        return list(self)

    def pairs(self) -> "LineCollection":
        return self.filter(lambda line, _: isinstance(line, KeyValue))

    def get_definition(self, key: str) -> str | None:
        """Return the value of the first pair defining ``key``, or None."""
        pair = self.first(_defines(key))
        return pair.value if pair is not None else None

    def has_definition(self, key: str) -> bool:
        return self.contains(_defines(key))

    def update_or_add(self, pair: KeyValue) -> "LineCollection":
        """Replace the first pair with the same key in place, or append ``pair``."""
        index = self.search(_defines(pair.key))
        if index is None:
            self.push(pair)
        else:
            self.put(index, pair)
        return self

    def remove_definition(self, key: str) -> int:
        """Remove every pair defining ``key`` and return how many were dropped."""
        before = self.count()
        kept = self.reject(_defines(key))
        self._items = dict(enumerate(kept))
        return before - self.count()

    def where_keys_like(self, patterns: str | Iterable[str]) -> "LineCollection":
        """Return only the pairs whose key matches any of ``patterns``."""
        if not isinstance(patterns, str):
            patterns = list(patterns)
        return self.pairs().filter(lambda line, _: matches_any(line.key, patterns))

    def to_dictionary(self) -> dict[str, str]:
        """Project the pairs onto a dict; later duplicates win."""
        return {pair.key: pair.value for pair in self.pairs()}

    def to_string(self) -> str:
        return self.line_break.join(line.to_string() for line in self)

    def __str__(self) -> str:
        return self.to_string()
