"""Config data model for Papjesz."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from papjesz.constants.config import DEFAULT_EXCERPT_MEAN_LINES, DEFAULT_EXCERPT_STDDEV_LINES
from papjesz.constants.mascots import DEFAULT_MASCOT
from papjesz.types import MascotFile, MascotPreset, MascotSource


@dataclass(frozen=True)
class PapjeszConfig:
    """Resolved papjesz config."""

    mascot: MascotPreset = DEFAULT_MASCOT
    mascot_file: Path | None = None
    corpus_file: Path | None = None
    excerpt_mean_lines: float = DEFAULT_EXCERPT_MEAN_LINES
    excerpt_stddev_lines: float = DEFAULT_EXCERPT_STDDEV_LINES

    @property
    def mascot_source(self) -> MascotSource:
        """Mascot file when one is configured, otherwise the preset."""
        if self.mascot_file is not None:
            return MascotFile(self.mascot_file)
        return self.mascot
