"""Shared pytest fixtures for papjesz tests."""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest

from papjesz.sources import Corpus


class FakeStdin:
    """Stand-in for ``sys.stdin`` with a byte buffer and a TTY flag."""

    def __init__(self, data: bytes = b"", *, tty: bool = False) -> None:
        self.buffer = io.BytesIO(data)
        self._tty = tty

    def isatty(self) -> bool:
        return self._tty


class StubRandom:
    """Random source returning a fixed normal draw and a fixed start index."""

    def __init__(self, draw: float, start: int) -> None:
        self.draw = draw
        self.start = start
        self.gauss_calls: list[tuple[float, float]] = []

    def gauss(self, mu: float, sigma: float) -> float:
        self.gauss_calls.append((mu, sigma))
        return self.draw

    def randrange(self, stop: int) -> int:
        assert 0 <= self.start < stop
        return self.start


@pytest.fixture
def mascot() -> str:
    """Return a small mascot block."""
    return "  \\\n   (o_o)\n"


@pytest.fixture
def small_corpus() -> Corpus:
    """Return a five-line corpus."""
    return Corpus(lines=("one", "two", "three", "four", "five"))


@pytest.fixture
def make_stdin() -> Callable[..., FakeStdin]:
    """Return a factory for fake stdin streams."""
    return FakeStdin


@pytest.fixture
def make_random() -> Callable[[float, int], StubRandom]:
    """Return a factory for deterministic random sources."""
    return StubRandom


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
