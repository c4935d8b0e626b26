"""Mascot source variants, resolved to text before rendering."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, TypeAlias

MascotPreset: TypeAlias = Literal["ascii", "unicode"]


@dataclass(frozen=True)
class MascotFile:
    """A user-supplied mascot file."""

    path: Path


MascotSource: TypeAlias = MascotPreset | MascotFile
