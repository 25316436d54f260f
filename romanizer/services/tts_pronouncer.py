"""Speak Korean text through a Latin-alphabet voice.

Text is romanized first (see `convert_to_romanization()`), then the spoken
form is synthesized once and kept in a WAV cache. The cache key covers the
spoken text and the voice, so two Hangul spellings that romanize the same
share one file.

Tests inject a `synthesizer` callable to stay off the network.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import hashlib
import logging
import os

from romanizer.domain.romanization import convert_to_romanization
from romanizer.services.settings_store import TtsSettings, WPM_MAX, WPM_MIN

logger = logging.getLogger(__name__)


Synthesizer = Callable[[str], bytes]

CACHE_ENV_VAR = "ROMANIZER_TTS_CACHE_DIR"

# Keeps the most recent QSoundEffect alive while it plays
_current_effect = None


@dataclass(frozen=True)
class Utterance:
    """One thing to say: the source text and the form the voice actually reads."""

    source: str
    spoken: str
    language_code: str = "en-US"
    voice_name: str = "en-US-Standard-C"
    speaking_rate: float | None = None

    @property
    def cache_key(self) -> str:
        rate = "" if self.speaking_rate is None else repr(float(self.speaking_rate))
        material = "\n".join((self.language_code, self.voice_name, rate, self.spoken))
        return hashlib.sha1(material.encode("utf-8")).hexdigest()

    @property
    def cache_filename(self) -> str:
        return "tts_{}_{}.wav".format(self.cache_key, _safe_component(self.voice_name))


def _safe_component(value: str) -> str:
    return "".join(c if c.isalnum() or c in "-_." else "_" for c in value)


def build_utterance(
    text: str,
    *,
    language_code: str = "en-US",
    voice_name: str = "en-US-Standard-C",
    speaking_rate: float | None = None,
    romanize: bool = True,
) -> Utterance:
    source = text or ""
    spoken = convert_to_romanization(source) if romanize else source
    return Utterance(
        source=source,
        spoken=spoken,
        language_code=language_code,
        voice_name=voice_name,
        speaking_rate=speaking_rate,
    )


def utterance_from_settings(text: str, settings: TtsSettings) -> Utterance:
    return build_utterance(
        text,
        language_code=settings.language_code,
        voice_name=settings.voice_name,
        speaking_rate=wpm_to_speaking_rate(settings.wpm),
        romanize=settings.romanize,
    )


def wpm_to_speaking_rate(wpm: int) -> float:
    # 40..160 WPM -> 0.6..1.6
    w = max(WPM_MIN, min(WPM_MAX, int(wpm)))
    return round(0.6 + (w - WPM_MIN) / 120.0, 2)


def cache_dir() -> Path:
    """Return (and create) the WAV cache directory.

    ROMANIZER_TTS_CACHE_DIR wins; otherwise ~/.cache/romanizer/tts.
    """
    env = (os.environ.get(CACHE_ENV_VAR) or "").strip()
    base = Path(env).expanduser() if env else Path.home() / ".cache" / "romanizer" / "tts"
    base.mkdir(parents=True, exist_ok=True)
    return base


def cache_path(utt: Utterance) -> Path:
    return cache_dir() / utt.cache_filename


def google_synthesizer(utt: Utterance) -> bytes:
    """Synthesize LINEAR16 WAV bytes for `utt.spoken` with Google Cloud TTS.

    Raises RuntimeError if google-cloud-texttospeech is not installed.
    """
    try:
        from google.cloud import texttospeech  # type: ignore
    except ImportError as e:
        raise RuntimeError("Google Cloud TTS backend unavailable: {}".format(e)) from e

    audio_kwargs = {"audio_encoding": texttospeech.AudioEncoding.LINEAR16}
    if utt.speaking_rate is not None:
        audio_kwargs["speaking_rate"] = float(utt.speaking_rate)

    response = texttospeech.TextToSpeechClient().synthesize_speech(
        input=texttospeech.SynthesisInput(text=utt.spoken),
        voice=texttospeech.VoiceSelectionParams(
            language_code=utt.language_code,
            name=utt.voice_name,
        ),
        audio_config=texttospeech.AudioConfig(**audio_kwargs),
    )
    return bytes(response.audio_content)


def ensure_cached_wav(utt: Utterance, synthesizer: Optional[Synthesizer] = None) -> Path:
    """Return the cached WAV for `utt`, synthesizing it on a miss.

    `synthesizer` receives the spoken text and returns WAV bytes; when None,
    `google_synthesizer()` is used. A failed write removes the temp file and
    re-raises.
    """
    out_path = cache_path(utt)
    if out_path.is_file() and out_path.stat().st_size > 0:
        logger.debug("TTS cache hit for %r: %s", utt.source, out_path.name)
        return out_path

    logger.info("Synthesizing %r as %r (%s)", utt.source, utt.spoken, utt.voice_name)
    wav_bytes = google_synthesizer(utt) if synthesizer is None else synthesizer(utt.spoken)

    tmp_path = out_path.with_name(out_path.name + ".tmp")
    try:
        with open(tmp_path, "wb") as f:
            f.write(wav_bytes)
        os.replace(str(tmp_path), str(out_path))
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise

    return out_path


def play_wav(path: Path) -> bool:
    """Start playing `path` through QtMultimedia.

    Returns False without raising when PyQt6 is not installed or playback fails.
    A running Qt application is the caller's responsibility.
    """
    global _current_effect

    try:
        from PyQt6.QtCore import QUrl  # type: ignore
        from PyQt6.QtMultimedia import QSoundEffect  # type: ignore
    except ImportError:
        logger.debug("QtMultimedia unavailable; not playing %s", path)
        return False

    try:
        effect = QSoundEffect()
        effect.setSource(QUrl.fromLocalFile(str(path)))
        effect.play()
    except Exception as e:
        logger.warning("Failed to play %s: %s", path, e)
        return False

    _current_effect = effect
    return True


def pronounce(
    text: str,
    *,
    settings: Optional[TtsSettings] = None,
    synthesizer: Optional[Synthesizer] = None,
    play: bool = True,
) -> Path:
    """Romanize `text` per `settings`, make sure audio exists, optionally play it."""
    utt = utterance_from_settings(text, settings or TtsSettings())
    path = ensure_cached_wav(utt, synthesizer)
    if play:
        play_wav(path)
    return path


__all__ = [
    "Synthesizer",
    "Utterance",
    "build_utterance",
    "utterance_from_settings",
    "wpm_to_speaking_rate",
    "cache_dir",
    "cache_path",
    "google_synthesizer",
    "ensure_cached_wav",
    "play_wav",
    "pronounce",
]
