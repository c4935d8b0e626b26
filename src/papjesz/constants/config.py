"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "papjesz.yaml"

DEFAULT_EXCERPT_MEAN_LINES: float = 3.0
DEFAULT_EXCERPT_STDDEV_LINES: float = 1.0

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "mascot",
        "mascot_file",
        "corpus_file",
        "excerpt_mean_lines",
        "excerpt_stddev_lines",
    }
)
