"""Bundled line corpus and random excerpt sampling."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from importlib.resources import files
from pathlib import Path

from papjesz.constants.config import DEFAULT_EXCERPT_MEAN_LINES, DEFAULT_EXCERPT_STDDEV_LINES
from papjesz.constants.mascots import CORPUS_RESOURCE, DATA_PACKAGE
from papjesz.exceptions import CorpusLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Corpus:
    """Lines available for random excerpts."""

    lines: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.lines)


def load_corpus(path: Path | None = None) -> Corpus:
    """Load a corpus from *path*, or the bundled corpus when omitted."""
    if path is None:
        text = files(DATA_PACKAGE).joinpath(CORPUS_RESOURCE).read_text(encoding="utf-8")
        source = f"bundled {CORPUS_RESOURCE}"
    else:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CorpusLoadError(f"Cannot read corpus file {path}: {exc.strerror or exc}") from exc
        except UnicodeDecodeError as exc:
            raise CorpusLoadError(f"Corpus file {path} is not valid UTF-8: {exc}") from exc
        source = str(path)

    corpus = Corpus(lines=tuple(text.splitlines()))
    logger.debug("Loaded corpus with %d lines from %s", len(corpus), source)
    return corpus


def sample_excerpt(
    corpus: Corpus,
    rng: random.Random,
    *,
    mean: float = DEFAULT_EXCERPT_MEAN_LINES,
    stddev: float = DEFAULT_EXCERPT_STDDEV_LINES,
) -> str:
    """Pick a run of consecutive corpus lines and join them with newlines.

    The run length is drawn from a normal distribution and rounded. Only the
    end of the run is clamped to the corpus, so a non-positive draw yields an
    empty excerpt.
    """
    if not corpus.lines:
        return ""

    count = round(rng.gauss(mean, stddev))
    start = rng.randrange(len(corpus.lines))
    end = max(start, min(start + count, len(corpus.lines)))
    logger.debug("Sampled excerpt lines [%d:%d] (drawn length %d)", start, end, count)
    return "\n".join(corpus.lines[start:end])
