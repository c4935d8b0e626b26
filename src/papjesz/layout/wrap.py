"""Greedy word wrapping measured in grapheme clusters."""

from __future__ import annotations

from papjesz.constants.layout import WORD_SEPARATOR
from papjesz.layout.graphemes import graphemes


def wrap(text: str, width: int) -> list[str]:
    """Wrap *text* into lines at most *width* columns wide.

    Each newline-separated paragraph is wrapped on its own, so existing line
    breaks survive. Lines break only at clusters that are a lone space; a
    word wider than *width* is left whole on a line of its own. Empty input
    yields no lines.
    """
    if width < 1:
        raise ValueError(f"wrap width must be at least 1, got {width}")
    if not text:
        return []

    lines: list[str] = []
    for paragraph in text.split("\n"):
        lines.extend(_wrap_paragraph(paragraph, width))
    return lines


def _wrap_paragraph(paragraph: str, width: int) -> list[str]:
    """First-fit wrap of a single paragraph."""
    fragments = _split_fragments(paragraph)
    if not fragments:
        return [""]

    lines: list[str] = []
    current: list[tuple[list[str], list[str]]] = []
    current_width = 0
    for word, whitespace in fragments:
        if current and current_width + len(word) > width:
            lines.append(_join_line(current))
            current = []
            current_width = 0
        current.append((word, whitespace))
        current_width += len(word) + len(whitespace)

    lines.append(_join_line(current))
    return lines


def _split_fragments(paragraph: str) -> list[tuple[list[str], list[str]]]:
    """Split a paragraph into ``(word, trailing_whitespace)`` cluster lists.

    Only a cluster that is exactly one space separates words, so a space
    carrying combining marks stays inside its word.
    """
    fragments: list[tuple[list[str], list[str]]] = []
    word: list[str] = []
    whitespace: list[str] = []
    for cluster in graphemes(paragraph):
        if cluster == WORD_SEPARATOR:
            whitespace.append(cluster)
            continue
        if whitespace:
            fragments.append((word, whitespace))
            word, whitespace = [], []
        word.append(cluster)
    if word or whitespace:
        fragments.append((word, whitespace))
    return fragments


def _join_line(fragments: list[tuple[list[str], list[str]]]) -> str:
    """Join fragments into a line, dropping the trailing whitespace."""
    body = "".join("".join(word) + "".join(whitespace) for word, whitespace in fragments[:-1])
    return body + "".join(fragments[-1][0])
