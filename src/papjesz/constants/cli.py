"""Command-line constants."""

from __future__ import annotations

COMPLETION_SHELLS: tuple[str, ...] = ("bash", "zsh", "tcsh")

EXIT_OK: int = 0
EXIT_INPUT_ERROR: int = 1
EXIT_CONFIG_ERROR: int = 2
