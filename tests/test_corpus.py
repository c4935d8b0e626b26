"""Tests for corpus loading and excerpt sampling."""

from __future__ import annotations

import random
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from papjesz.exceptions import CorpusLoadError
from papjesz.sources import Corpus, load_corpus, sample_excerpt


def test_bundled_corpus_has_lines() -> None:
    corpus = load_corpus()

    assert len(corpus) > 10
    assert all(line.strip() for line in corpus.lines)


def test_load_corpus_from_file(tmp_path: Path) -> None:
    path = tmp_path / "lines.txt"
    path.write_text("alpha\nbeta\r\ngamma\n", encoding="utf-8")

    assert load_corpus(path).lines == ("alpha", "beta", "gamma")


def test_missing_corpus_file_raises(tmp_path: Path) -> None:
    with pytest.raises(CorpusLoadError, match="Cannot read corpus file"):
        load_corpus(tmp_path / "absent.txt")


def test_non_utf8_corpus_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes("zażółć".encode("iso-8859-2"))

    with pytest.raises(CorpusLoadError, match="not valid UTF-8"):
        load_corpus(path)


@pytest.mark.parametrize(
    ("draw", "start", "expected"),
    [
        pytest.param(2.6, 1, "two\nthree\nfour", id="rounded-up"),
        pytest.param(1.2, 0, "one", id="rounded-down"),
        pytest.param(3.0, 3, "four\nfive", id="end-clamped"),
        pytest.param(0.4, 2, "", id="zero-lines"),
        pytest.param(-1.7, 4, "", id="negative-lines"),
        pytest.param(9.0, 0, "one\ntwo\nthree\nfour\nfive", id="whole-corpus"),
    ],
)
def test_sample_excerpt_clamps_only_the_end(
    small_corpus: Corpus, make_random: Callable[..., Any], draw: float, start: int, expected: str
) -> None:
    assert sample_excerpt(small_corpus, make_random(draw, start)) == expected


def test_sample_excerpt_passes_distribution_parameters(
    small_corpus: Corpus,
    make_random: Callable[..., Any],
) -> None:
    rng = make_random(1.0, 0)

    sample_excerpt(small_corpus, rng, mean=5.0, stddev=0.5)

    assert rng.gauss_calls == [(5.0, 0.5)]


def test_sample_excerpt_defaults_to_three_lines_mean(
    small_corpus: Corpus,
    make_random: Callable[..., Any],
) -> None:
    rng = make_random(1.0, 0)

    sample_excerpt(small_corpus, rng)

    assert rng.gauss_calls == [(3.0, 1.0)]


def test_sample_excerpt_of_empty_corpus() -> None:
    assert sample_excerpt(Corpus(lines=()), random.Random(0)) == ""


def test_sample_excerpt_is_reproducible_with_a_seed() -> None:
    corpus = load_corpus()

    first = sample_excerpt(corpus, random.Random(42))
    second = sample_excerpt(corpus, random.Random(42))

    assert first == second
    assert set(first.splitlines()) <= set(corpus.lines)
