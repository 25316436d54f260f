from pathlib import Path

import pytest
import yaml

from romanizer.services.settings_store import SettingsStore, TtsSettings


def test_default_path_comes_from_env(tmp_path: Path):
    store = SettingsStore()
    assert store.path == tmp_path / "settings.yaml"


def test_load_missing_file_returns_empty(tmp_path: Path):
    store = SettingsStore(str(tmp_path / "nope" / "settings.yaml"))
    assert store.load() == {}


def test_save_and_load_roundtrip(tmp_path: Path):
    """
    save should write a UTF-8 YAML file and load should reconstruct the
    same dictionary.
    """
    store = SettingsStore(str(tmp_path / "settings.yaml"))
    payload = {
        "tts": {
            "language_code": "en-GB",
            "voice_name": "en-GB-Standard-A",
            "wpm": 80,
            "romanize": False,
        },
        "note": "김철수",
    }

    store.save(payload)
    loaded = store.load()

    assert loaded == payload
    raw = (tmp_path / "settings.yaml").read_text(encoding="utf-8")
    assert "김철수" in raw


def test_malformed_or_non_mapping_yaml_loads_empty(tmp_path: Path):
    path = tmp_path / "settings.yaml"
    path.write_text("tts: [unclosed\n", encoding="utf-8")
    assert SettingsStore(str(path)).load() == {}

    path.write_text("- just\n- a list\n", encoding="utf-8")
    assert SettingsStore(str(path)).load() == {}


def test_tts_settings_defaults_when_empty():
    assert SettingsStore().get_tts_settings() == TtsSettings()


def test_tts_settings_invalid_values_fall_back(tmp_path: Path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        yaml.safe_dump({"tts": {"voice_name": "", "wpm": "fast", "romanize": "yes"}}),
        encoding="utf-8",
    )
    s = SettingsStore(str(path)).get_tts_settings()
    assert s.voice_name == TtsSettings().voice_name
    assert s.wpm == 120
    assert s.romanize is True


def test_wpm_is_clamped():
    store = SettingsStore()
    store.set_wpm(500)
    assert store.get_tts_settings().wpm == 160
    store.set_wpm(1)
    assert store.get_tts_settings().wpm == 40


def test_update_preserves_other_keys():
    """
    Load -> update one key -> save must keep previously saved keys.
    """
    store = SettingsStore()
    store.save({"theme": "hanji", "tts": {"wpm": 100}})

    store.set_tts_voice("en-AU", "en-AU-Standard-B")
    store.set_romanize(False)

    loaded = store.load()
    assert loaded["theme"] == "hanji"
    assert loaded["tts"]["wpm"] == 100

    s = store.get_tts_settings()
    assert s.language_code == "en-AU"
    assert s.voice_name == "en-AU-Standard-B"
    assert s.romanize is False


def test_invalid_utf8_loads_empty(tmp_path: Path):
    path = tmp_path / "settings.yaml"
    path.write_bytes(b"tts:\n  voice_name: \xff\xfe\n")
    store = SettingsStore(str(path))
    assert store.load() == {}
    assert store.get_tts_settings() == TtsSettings()


@pytest.mark.parametrize("raw", [".nan", ".inf", "-.inf"])
def test_non_finite_wpm_falls_back(tmp_path: Path, raw):
    path = tmp_path / "settings.yaml"
    path.write_text("tts:\n  wpm: {}\n".format(raw), encoding="utf-8")
    assert SettingsStore(str(path)).get_tts_settings().wpm == 120
