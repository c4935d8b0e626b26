"""Speech-bubble composition around wrapped lines."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from papjesz.constants.layout import (
    BOTTOM_BORDER_CHAR,
    EMPTY_BUBBLE_ROW,
    FIRST_LINE_FRAME,
    LAST_LINE_FRAME,
    MIDDLE_LINE_FRAME,
    SINGLE_LINE_FRAME,
    TOP_BORDER_CHAR,
)
from papjesz.layout.graphemes import width


@dataclass(frozen=True)
class Layout:
    """Wrapped lines plus the column count every content row is padded to."""

    lines: tuple[str, ...]
    n_cols: int

    def pad(self, line: str) -> str:
        """Right-pad *line* with spaces to ``n_cols`` columns."""
        return line + " " * max(0, self.n_cols - width(line))


def build_layout(lines: Sequence[str]) -> Layout:
    """Measure *lines* and return their layout."""
    return Layout(lines=tuple(lines), n_cols=max((width(line) for line in lines), default=0))


def compose_bubble(lines: Sequence[str]) -> str:
    """Render wrapped *lines* as a bordered speech bubble.

    Every row, border included, is ``n_cols + 4`` columns wide. An empty
    bubble is the only exception: its content row is the bare ``< >``.
    """
    layout = build_layout(lines)
    top_border = f" {TOP_BORDER_CHAR * (layout.n_cols + 2)} "
    bottom_border = f" {BOTTOM_BORDER_CHAR * (layout.n_cols + 2)} "
    return "\n".join((top_border, _compose_content(layout), bottom_border))


def _compose_content(layout: Layout) -> str:
    lines = layout.lines
    if not lines:
        return EMPTY_BUBBLE_ROW
    if len(lines) == 1:
        return _frame(SINGLE_LINE_FRAME, lines[0])

    first_row = _frame(FIRST_LINE_FRAME, layout.pad(lines[0]))
    middle_rows = "".join(f"{_frame(MIDDLE_LINE_FRAME, layout.pad(line))}\n" for line in lines[1:-1])
    last_row = _frame(LAST_LINE_FRAME, layout.pad(lines[-1]))
    return f"{first_row}\n{middle_rows}{last_row}"


def _frame(frame: tuple[str, str], content: str) -> str:
    left, right = frame
    return f"{left} {content} {right}"
