"""Line models for .env files.

A file is a sequence of physical lines, each of which is either a plain
``Line`` (comment, blank or anything that is not an assignment) kept
verbatim, or a ``KeyValue`` pair rebuilt from its key, value and quote.
"""

from dataclasses import dataclass

from envedit.constants import COMMENT_PREFIX, QUOTE_CHARS, SEPARATOR


def _split(text: str) -> list[str]:
    return [piece.strip() for piece in text.split(SEPARATOR, 1)]


def wraps_value(char: str, value: str | None) -> bool:
    """Return True if ``char`` is both the first and last character of ``value``."""
    value = value or ""
    return value[:1] == char and value[-1:] == char


def wrapping_quote_for(value: str | None) -> str:
    """Return the quote character wrapping ``value``, single quote first."""
    return next((quote for quote in QUOTE_CHARS if wraps_value(quote, value)), "")


def clean_quotes(value: str | None) -> str:
    """Strip one layer of matching surrounding quotes."""
    value = value or ""
    if wrapping_quote_for(value):
        return value[1:-1]
    return value


@dataclass(frozen=True)
class Line:
    """A physical line of text, kept exactly as read.

    Key, value and quote are always derived from ``text``; nothing is cached.
    """

    text: str | None = None

    def key(self) -> str:
        if not self.text or SEPARATOR not in self.text:
            return ""
        return _split(self.text)[0]

    def value_raw(self) -> str | None:
        if not self.text:
            return self.text
        return _split(self.text)[-1]

    def value(self) -> str:
        return clean_quotes(self.value_raw())

    def quote(self) -> str:
        return wrapping_quote_for(self.value_raw())

    def is_pair(self) -> bool:
        """Return True if the text is a ``KEY=VALUE`` assignment.

        Comments never count, even when they contain ``=``.
        """
        text = self.text or ""
        if text.strip().startswith(COMMENT_PREFIX):
            return False
        return len(_split(text)) == 2

    def to_string(self) -> str:
        return self.text or ""

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class KeyValue:
    """A ``KEY=VALUE`` assignment with the quote style used for the value.

    Rendering is canonical: whitespace around ``=`` in the source line is
    not preserved, only key, value content and quote character.
    """

    key: str
    value: str
    quote: str = ""

    def is_pair(self) -> bool:
        return True

    def to_string(self) -> str:
        return f"{self.key}{SEPARATOR}{self.quote}{self.value}{self.quote}"

    def __str__(self) -> str:
        return self.to_string()


EnvLine = Line | KeyValue


def parse_line(text: str | None) -> EnvLine:
    """Turn one physical line into a ``KeyValue`` or a verbatim ``Line``."""
    line = Line(text)
    if not line.is_pair():
        return line
    return KeyValue(line.key(), line.value(), line.quote())
