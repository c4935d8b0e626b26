"""Grapheme cluster segmentation and column counting.

One grapheme cluster occupies one terminal column: a letter with combining
marks, a flag built from two regional indicators, or a ZWJ emoji sequence
each count once.
"""

from __future__ import annotations

import regex

_GRAPHEME_PATTERN = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split *text* into extended grapheme clusters."""
    return _GRAPHEME_PATTERN.findall(text)


def width(text: str) -> int:
    """Return the display width of *text* in grapheme clusters."""
    return len(graphemes(text))
