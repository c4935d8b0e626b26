"""Shared exception hierarchy for Papjesz."""

from __future__ import annotations

from .base import PapjeszError
from .config import ConfigError
from .input import CorpusLoadError, MascotLoadError, MessageInputError

__all__ = [
    "ConfigError",
    "CorpusLoadError",
    "MascotLoadError",
    "MessageInputError",
    "PapjeszError",
]
