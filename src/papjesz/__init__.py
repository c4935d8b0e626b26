"""Papjesz package."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from papjesz.render import render

__all__ = ["__version__", "render"]

try:
    __version__ = version("papjesz")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
