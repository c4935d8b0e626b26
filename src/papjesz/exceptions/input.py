"""Exceptions raised while acquiring message, mascot, or corpus text."""

from __future__ import annotations

from papjesz.exceptions.base import PapjeszError


class MessageInputError(PapjeszError):
    """Raised when the message cannot be read or decoded."""


class MascotLoadError(PapjeszError):
    """Raised when a mascot file cannot be read."""


class CorpusLoadError(PapjeszError):
    """Raised when a corpus file cannot be read."""
