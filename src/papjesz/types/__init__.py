"""Shared type definitions."""

from __future__ import annotations

from .mascot import MascotFile, MascotPreset, MascotSource

__all__ = ["MascotFile", "MascotPreset", "MascotSource"]
