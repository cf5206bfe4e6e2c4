from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch) -> Path:
    """Point the preferences file at a per-test location that does not exist yet."""
    path = tmp_path / "config" / "config.json"
    monkeypatch.setenv("ENVEDIT_CONFIG", str(path))
    return path
