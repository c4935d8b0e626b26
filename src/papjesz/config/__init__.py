"""Configuration loading and normalization for Papjesz."""

from __future__ import annotations

from papjesz.config.loader import load_config
from papjesz.config.model import PapjeszConfig

__all__ = ["PapjeszConfig", "load_config"]
