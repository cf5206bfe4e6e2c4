"""Application-wide constants."""

from pathlib import Path

APP_NAME = "envedit"

DEFAULT_ENV_FILE: str = ".env"

SEPARATOR = "="
COMMENT_PREFIX = "#"
LINE_BREAK = "\n"
CRLF = "\r\n"

# Checked in this order when deciding which quote wraps a value.
QUOTE_CHARS: tuple[str, ...] = ("'", '"')

CONFIG_ENV_VAR = "ENVEDIT_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/envedit/config.json").expanduser()

LIST_FORMATS: list[str] = ["table", "json", "dotenv"]
