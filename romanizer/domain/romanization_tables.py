from __future__ import annotations

"""Latin renderings for Hangul phonemes and common family names.

DOMAIN DATA, indexed the same way as the jamo tables in
`romanizer/domain/hangul_unicode.py`. These are phonetic spellings for speech
output, not Revised Romanization.
"""

from types import MappingProxyType
from typing import Final, Mapping


# Leading consonants; index 11 (ㅇ) is silent
CHOSEONG_RR: Final[tuple[str, ...]] = (
    "g", "kk", "n", "d", "tt", "r", "m", "b", "pp", "s",
    "ss", "", "j", "jj", "ch", "k", "t", "p", "h",
)

VOWEL_RR: Final[tuple[str, ...]] = (
    "a", "ae", "ya", "yae", "eo", "e", "yeo", "ye", "o",
    "wa", "wae", "oe", "yo", "u", "wo", "we", "wi",
    "yu", "eu", "ui", "i",
)

# Trailing consonants; index 0 means "no final"
JONGSEONG_RR: Final[tuple[str, ...]] = (
    "", "k", "g", "gs", "n", "nj", "nh", "d", "l", "lg",
    "lm", "lb", "ls", "lt", "lp", "lh", "m", "b", "bs",
    "s", "ss", "ng", "j", "ch", "k", "t", "p", "h",
)

# Surnames spelled the conventional way instead of phonetically.
FAMILY_NAMES: Final[Mapping[str, str]] = MappingProxyType({
    "김": "kim",
    "박": "park",
    "이": "lee",
    "최": "choi",
    "정": "jung",
    "강": "kang",
    "조": "cho",
    "윤": "yoon",
    "장": "jang",
    "임": "lim",
})


def family_name_rr(ch: str) -> str | None:
    """Return the conventional spelling for a family-name character, or None."""
    return FAMILY_NAMES.get(ch)
