"""Bubble layout constants."""

from __future__ import annotations

WRAP_WIDTH: int = 40
TAB_REPLACEMENT: str = "    "
WORD_SEPARATOR: str = " "

EMPTY_BUBBLE_ROW: str = "< >"
TOP_BORDER_CHAR: str = "_"
BOTTOM_BORDER_CHAR: str = "-"

SINGLE_LINE_FRAME: tuple[str, str] = ("<", ">")
FIRST_LINE_FRAME: tuple[str, str] = ("/", "\\")
MIDDLE_LINE_FRAME: tuple[str, str] = ("|", "|")
LAST_LINE_FRAME: tuple[str, str] = ("\\", "/")
