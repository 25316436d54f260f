# tests/conftest.py
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_paths(monkeypatch, tmp_path: Path):
    # Keep tests away from the real settings.yaml and .cache/tts
    monkeypatch.setenv("ROMANIZER_SETTINGS_PATH", str(tmp_path / "settings.yaml"))
    monkeypatch.setenv("ROMANIZER_TTS_CACHE_DIR", str(tmp_path / "tts"))
    return tmp_path
