from __future__ import annotations

"""Hangul Unicode decomposition helpers.

This module is *domain* logic (no I/O, no logging).

It provides:
  - The Hangul Syllables block bounds and the strides used to decode a syllable
  - `decompose_syllable()` for splitting a syllable into its (lead, vowel, tail) indices
  - The compatibility jamo for each index, for display and diagnostics

Notes:
  - The Latin renderings live in `romanizer/domain/romanization_tables.py`.
"""

from dataclasses import dataclass
from typing import Final


# -----------------------------------------------------------------------------
# Unicode Hangul syllable constants
# -----------------------------------------------------------------------------

HANGUL_BASE: Final[int] = 0xAC00
HANGUL_END: Final[int] = 0xD7A3

# Codepoints per leading consonant (21 vowels * 28 tails) and per vowel
CHOSEONG_STRIDE: Final[int] = 588
JUNGSEONG_STRIDE: Final[int] = 28

# ㅇ in lead position carries no sound
NULL_CHOSEONG_INDEX: Final[int] = 11


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo ordering
# -----------------------------------------------------------------------------

# Leading consonants (Choseong) in standard Unicode Hangul order
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong) in standard Unicode Hangul order
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong) in standard Unicode Hangul order
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)


@dataclass(frozen=True)
class SyllableIndices:
    lead: int
    vowel: int
    tail: int

    @property
    def has_null_lead(self) -> bool:
        return self.lead == NULL_CHOSEONG_INDEX

    @property
    def has_tail(self) -> bool:
        return self.tail != 0


# -----------------------------------------------------------------------------
# Domain logic
# -----------------------------------------------------------------------------

def is_hangul_syllable(ch: str) -> bool:
    """Return True if `ch` is a single character inside the Hangul Syllables block."""
    if not isinstance(ch, str) or len(ch) != 1:
        return False
    return HANGUL_BASE <= ord(ch) <= HANGUL_END


def decompose_syllable(ch: str) -> SyllableIndices:
    """Split a Hangul syllable into its (lead, vowel, tail) table indices.

    Args:
        ch: A precomposed Hangul syllable (e.g., "한")

    Returns:
        The index triple (e.g., SyllableIndices(lead=18, vowel=0, tail=4)).

    Raises:
        ValueError: if `ch` is not a Hangul syllable.

    Notes:
        This inverts the Unicode Hangul Syllables algorithm:
        SBase + (LIndex * VCount + VIndex) * TCount + TIndex
    """
    if not is_hangul_syllable(ch):
        raise ValueError("Not a Hangul syllable: %r" % (ch,))

    offset = ord(ch) - HANGUL_BASE
    return SyllableIndices(
        lead=offset // CHOSEONG_STRIDE,
        vowel=(offset % CHOSEONG_STRIDE) // JUNGSEONG_STRIDE,
        tail=offset % JUNGSEONG_STRIDE,
    )


def syllable_jamo(ch: str) -> tuple[str, str, str]:
    """Return the compatibility jamo (lead, vowel, tail) for a syllable.

    The tail is "" when the syllable has no final consonant.
    """
    idx = decompose_syllable(ch)
    return CHOSEONG[idx.lead], JUNGSEONG[idx.vowel], JONGSEONG[idx.tail]
