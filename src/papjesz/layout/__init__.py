"""Text measurement, wrapping and bubble composition."""

from __future__ import annotations

from .bubble import Layout, build_layout, compose_bubble
from .graphemes import graphemes, width
from .wrap import wrap

__all__ = ["Layout", "build_layout", "compose_bubble", "graphemes", "width", "wrap"]
