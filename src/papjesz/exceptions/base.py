"""Base exception for Papjesz."""

from __future__ import annotations


class PapjeszError(Exception):
    """Base class for all errors raised by Papjesz."""
