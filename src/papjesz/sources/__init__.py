"""Acquisition of the message and mascot text handed to the renderer."""

from __future__ import annotations

from .corpus import Corpus, load_corpus, sample_excerpt
from .mascot import load_mascot
from .message import read_stdin_message, resolve_message

__all__ = [
    "Corpus",
    "load_corpus",
    "load_mascot",
    "read_stdin_message",
    "resolve_message",
    "sample_excerpt",
]
