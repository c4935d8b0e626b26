"""Bundled mascot presets and data resource names."""

from __future__ import annotations

from papjesz.types.mascot import MascotPreset

DATA_PACKAGE: str = "papjesz.data"

DEFAULT_MASCOT: MascotPreset = "ascii"
MASCOT_PRESET_FILES: dict[MascotPreset, str] = {
    "ascii": "papjesz.pap",
    "unicode": "papjesz_unicode.pap",
}
VALID_MASCOT_PRESETS: frozenset[str] = frozenset(MASCOT_PRESET_FILES)

CORPUS_RESOURCE: str = "corpus.txt"
