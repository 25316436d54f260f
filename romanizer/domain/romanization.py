from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from romanizer.domain.hangul_unicode import (
    CHOSEONG,
    JONGSEONG,
    JUNGSEONG,
    SyllableIndices,
    decompose_syllable,
    is_hangul_syllable,
)
from romanizer.domain.romanization_tables import (
    CHOSEONG_RR,
    JONGSEONG_RR,
    VOWEL_RR,
    family_name_rr,
)


@dataclass(frozen=True)
class RomanizedSyllable:
    syllable: str
    indices: SyllableIndices
    jamo: tuple[str, str, str]
    lead: str
    vowel: str
    tail: str

    @property
    def text(self) -> str:
        return "{}{}{}".format(self.lead, self.vowel, self.tail)


_HYPHEN_RUN = re.compile(r"-+")
_HYPHEN_BEFORE_SPACE = re.compile(r"-(\s)")


def romanize_syllable(ch: str) -> RomanizedSyllable:
    """Render one Hangul syllable phonetically.

    No family-name spelling and no hyphenation is applied here; that belongs to
    `convert_to_romanization()`.

    Raises:
        ValueError: if `ch` is not a Hangul syllable.
    """
    idx = decompose_syllable(ch)
    lead = "" if idx.has_null_lead else CHOSEONG_RR[idx.lead]
    tail = JONGSEONG_RR[idx.tail] if idx.has_tail else ""
    return RomanizedSyllable(
        syllable=ch,
        indices=idx,
        jamo=(CHOSEONG[idx.lead], JUNGSEONG[idx.vowel], JONGSEONG[idx.tail]),
        lead=lead,
        vowel=VOWEL_RR[idx.vowel],
        tail=tail,
    )


def cleanup_hyphens(text: str) -> str:
    """Normalise hyphenation produced by the conversion pass.

    - runs of hyphens collapse to one
    - a hyphen directly before whitespace is dropped (the whitespace is kept as-is)
    - trailing hyphens are removed
    """
    text = _HYPHEN_RUN.sub("-", text or "")
    text = _HYPHEN_BEFORE_SPACE.sub(r"\1", text)
    return text.rstrip("-")


def convert_to_romanization(text: Optional[str]) -> str:
    """Transliterate Hangul in `text` to Latin letters.

    Syllables inside a word are joined with "-". A family-name character at the
    start of a word gets its conventional spelling (e.g. 김 -> "kim") instead of
    a phonetic one. Everything that is not a Hangul syllable passes through.

    Known quirk: any non-Hangul, non-whitespace character (punctuation, digits,
    Latin letters) also counts as a word boundary, so "(김" spells 김 as "kim".

    Examples:
        >>> convert_to_romanization("한글")
        'han-geul'
        >>> convert_to_romanization("김철수")
        'kim-cheol-su'
    """
    if not text:
        return ""

    out: list[str] = []
    is_word_start = True
    last = len(text) - 1

    for i, ch in enumerate(text):
        if ch.isspace():
            out.append(ch)
            is_word_start = True
            continue

        if is_word_start:
            surname = family_name_rr(ch)
            if surname is not None:
                out.append(surname)
                out.append("-")
                is_word_start = False
                continue

        if is_hangul_syllable(ch):
            out.append(romanize_syllable(ch).text)
            if i < last and is_hangul_syllable(text[i + 1]):
                out.append("-")
            is_word_start = False
        else:
            out.append(ch)
            is_word_start = True

    return cleanup_hyphens("".join(out))
