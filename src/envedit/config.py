"""User preferences: loading, validation, and persistence.

Schema on disk (~/.config/envedit/config.json, or the path in
``$ENVEDIT_CONFIG``):

    {
        "default_file": ".env",
        "default_quote": "'",
        "list_format": "table"
    }

Every field is optional.  Keys prefixed with "_" are reserved (e.g.
"_comment") and are stripped on load.
"""

import json
import logging
import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, ValidationError

from envedit.constants import CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH, DEFAULT_ENV_FILE
from envedit.errors import ConfigError

logger = logging.getLogger(__name__)


class Preferences(BaseModel):
    """Defaults applied by the CLI when an option is not given."""

    model_config = ConfigDict(extra="forbid")

    default_file: str = DEFAULT_ENV_FILE
    default_quote: Literal["", "'", '"'] = ""
    list_format: Literal["table", "json", "dotenv"] = "table"


def config_path() -> Path:
    """Return the preferences file location, honouring ``$ENVEDIT_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def load_preferences(path: Path | None = None) -> Preferences:
    """Load and validate the preferences file.

    Returns defaults if the file is missing or empty.  Raises ConfigError if
    the file exists but is malformed.
    """
    path = path or config_path()
    if not path.exists():
        logger.debug("No preferences at %s, using defaults", path)
        return Preferences()

    try:
        text = path.read_text()
    except OSError as exc:
        raise ConfigError(f"Could not read {path}: {exc.strerror}") from exc
    if not text.strip():
        return Preferences()

    try:
        raw: object = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path.name} is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"{path.name} must be a JSON object at the top level")

    # Strip reserved/comment keys.
    data = {k: v for k, v in raw.items() if not k.startswith("_")}

    try:
        return Preferences.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid preferences in {path}: {exc}") from exc


def save_preferences(prefs: Preferences, path: Path | None = None) -> None:
    """Persist preferences to disk, creating directories as needed."""
    path = path or config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(prefs.model_dump(), indent=2))
    except OSError as exc:
        raise ConfigError(f"Could not write {path}: {exc.strerror}") from exc
    logger.info("Saved preferences to %s", path)
