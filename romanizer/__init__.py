"""
Package exports.

`convert_to_romanization` is the stable import surface for callers that only
need the Hangul -> Latin transform.
"""

from .domain.romanization import convert_to_romanization  # noqa: F401

__all__ = [
    "convert_to_romanization",
]
