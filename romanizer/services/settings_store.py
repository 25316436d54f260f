from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "ROMANIZER_SETTINGS_PATH"

WPM_MIN = 40
WPM_MAX = 160


@dataclass(frozen=True)
class TtsSettings:
    language_code: str = "en-US"
    voice_name: str = "en-US-Standard-C"
    wpm: int = 120
    romanize: bool = True


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the `tts` section

    Notes:
      - ROMANIZER_SETTINGS_PATH overrides the default location.
      - WPM is clamped to 40..160 (the range the speaking-rate mapping covers).
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            env = (os.environ.get(SETTINGS_ENV_VAR) or "").strip()
            if env:
                self._path = Path(env).expanduser()
            else:
                # <project_root>/settings.yaml
                project_root = Path(__file__).resolve().parents[2]
                self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        p = self._path
        if not p.exists():
            return {}
        try:
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings %s: %s", p, e)
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, data: dict[str, Any]) -> None:
        p = self._path
        tmp = p.with_suffix(p.suffix + ".tmp")
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
        except (OSError, yaml.YAMLError) as e:
            # Best-effort persistence; callers should not crash on save failures.
            logger.warning("Failed to persist settings %s: %s", p, e)

    def _tts_section(self, s: dict[str, Any]) -> dict[str, Any]:
        t = s.get("tts") or {}
        return t if isinstance(t, dict) else {}

    def _update_tts(self, **values: Any) -> None:
        s = self.load()
        t = self._tts_section(s)
        t.update(values)
        s["tts"] = t
        self.save(s)

    def get_tts_settings(self) -> TtsSettings:
        t = self._tts_section(self.load())
        defaults = TtsSettings()

        def _sval(key: str, default: str) -> str:
            v = t.get(key)
            if isinstance(v, str) and v.strip():
                return v.strip()
            return default

        wpm = t.get("wpm", defaults.wpm)
        if isinstance(wpm, bool) or not isinstance(wpm, (int, float)) or not math.isfinite(wpm):
            logger.debug("Invalid WPM in settings (%r); using default", wpm)
            wpm = defaults.wpm

        romanize = t.get("romanize", defaults.romanize)
        if not isinstance(romanize, bool):
            romanize = defaults.romanize

        return TtsSettings(
            language_code=_sval("language_code", defaults.language_code),
            voice_name=_sval("voice_name", defaults.voice_name),
            wpm=max(WPM_MIN, min(WPM_MAX, int(wpm))),
            romanize=romanize,
        )

    def set_tts_voice(self, language_code: str, voice_name: str) -> None:
        self._update_tts(language_code=str(language_code), voice_name=str(voice_name))

    def set_wpm(self, value: int) -> None:
        self._update_tts(wpm=max(WPM_MIN, min(WPM_MAX, int(value))))

    def set_romanize(self, enabled: bool) -> None:
        self._update_tts(romanize=bool(enabled))
