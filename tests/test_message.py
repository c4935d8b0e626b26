"""Tests for message acquisition."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from papjesz.exceptions import MessageInputError
from papjesz.sources import Corpus, read_stdin_message, resolve_message


def test_argument_wins_over_stdin(
    small_corpus: Corpus,
    make_stdin: Callable[..., Any],
    make_random: Callable[..., Any],
) -> None:
    stdin = make_stdin(b"from stdin")

    message = resolve_message("from argv", stdin, small_corpus, make_random(1.0, 0))

    assert message == "from argv"
    assert stdin.buffer.tell() == 0


def test_empty_argument_is_still_a_message(
    small_corpus: Corpus,
    make_stdin: Callable[..., Any],
    make_random: Callable[..., Any],
) -> None:
    assert resolve_message("", make_stdin(b"ignored"), small_corpus, make_random(1.0, 0)) == ""


def test_piped_stdin_is_decoded_and_right_stripped(
    small_corpus: Corpus,
    make_stdin: Callable[..., Any],
    make_random: Callable[..., Any],
) -> None:
    stdin = make_stdin("  cześć\tświecie \n\n".encode())

    assert resolve_message(None, stdin, small_corpus, make_random(1.0, 0)) == "  cześć\tświecie"


def test_terminal_stdin_falls_back_to_corpus(
    small_corpus: Corpus,
    make_stdin: Callable[..., Any],
    make_random: Callable[..., Any],
) -> None:
    rng = make_random(2.0, 3)

    message = resolve_message(None, make_stdin(tty=True), small_corpus, rng, mean=4.0, stddev=2.0)

    assert message == "four\nfive"
    assert rng.gauss_calls == [(4.0, 2.0)]


def test_invalid_utf8_stdin_fails(make_stdin: Callable[..., Any]) -> None:
    with pytest.raises(MessageInputError, match="not valid UTF-8"):
        read_stdin_message(make_stdin(b"ok \xff\xfe").buffer)


def test_empty_stdin_gives_empty_message(make_stdin: Callable[..., Any]) -> None:
    assert read_stdin_message(make_stdin(b" \n").buffer) == ""


def test_closed_stdin_falls_back_to_corpus(
    small_corpus: Corpus,
    make_random: Callable[..., Any],
) -> None:
    assert resolve_message(None, None, small_corpus, make_random(1.0, 2)) == "three"
