"""Configuration-related exceptions."""

from __future__ import annotations

from papjesz.exceptions.base import PapjeszError


class ConfigError(PapjeszError, ValueError):
    """Raised when the papjesz configuration is invalid."""
