"""Resolve the message from an argument, piped stdin, or the corpus."""

from __future__ import annotations

import logging
import random
from typing import BinaryIO, TextIO

from papjesz.constants.config import DEFAULT_EXCERPT_MEAN_LINES, DEFAULT_EXCERPT_STDDEV_LINES
from papjesz.exceptions import MessageInputError
from papjesz.sources.corpus import Corpus, sample_excerpt

logger = logging.getLogger(__name__)


def read_stdin_message(stream: BinaryIO) -> str:
    """Read *stream* fully as UTF-8 and strip trailing whitespace."""
    data = stream.read()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MessageInputError(f"Standard input is not valid UTF-8: {exc}") from exc
    return text.rstrip()


def resolve_message(
    argument: str | None,
    stdin: TextIO | None,
    corpus: Corpus,
    rng: random.Random,
    *,
    mean: float = DEFAULT_EXCERPT_MEAN_LINES,
    stddev: float = DEFAULT_EXCERPT_STDDEV_LINES,
) -> str:
    """Pick the message to render.

    A literal argument always wins. Otherwise piped stdin is read, and when
    stdin is an interactive terminal, or closed altogether, a random corpus
    excerpt is used.
    """
    if argument is not None:
        return argument
    if stdin is not None and not stdin.isatty():
        logger.debug("Reading message from standard input")
        return read_stdin_message(stdin.buffer)
    logger.debug("No message given; sampling the corpus")
    return sample_excerpt(corpus, rng, mean=mean, stddev=stddev)
