"""Coverage and termination over fuzzed input for every dialect."""

from __future__ import annotations

import random

import pytest

from retrolex.dialects import DIALECTS, PLAIN_TEXT
from retrolex.lexer import tokenize_line, tokenize_lines
from retrolex.tokens import Category, ScanState, initial_scan_state

from tests.conftest import assert_partition

_ALPHABET = (
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
    " \t\r\x00\x0b_.@?$%&#!'\";:*+-/\\^=<>(),[]{}|~`"
    "éßΩ漢😀 ​"
)
_STATES = [
    initial_scan_state(),
    ScanState(in_string=True, delimiter='"'),
    ScanState(in_string=True, delimiter="'"),
    ScanState(at_line_start=False),
]


def _random_line(rng: random.Random) -> str:
    return "".join(rng.choice(_ALPHABET) for _ in range(rng.randint(0, 60)))


@pytest.mark.parametrize("dialect_name", sorted(DIALECTS))
@pytest.mark.parametrize("seed", range(25))
def test_spans_partition_line(dialect_name: str, seed: int) -> None:
    rng = random.Random(seed)
    dialect = DIALECTS[dialect_name]
    for _ in range(20):
        line = _random_line(rng)
        state = rng.choice(_STATES)
        spans, next_state = tokenize_line(line, state, dialect)
        assert_partition(line, spans)
        assert isinstance(next_state, ScanState)
        if next_state.in_string:
            assert next_state.delimiter in dialect.string_delimiters


@pytest.mark.parametrize("dialect_name", sorted(DIALECTS))
def test_empty_line(dialect_name: str) -> None:
    spans, state = tokenize_line("", initial_scan_state(), DIALECTS[dialect_name])
    assert spans == []
    assert state == initial_scan_state()


@pytest.mark.parametrize("dialect_name", sorted(DIALECTS))
def test_long_line_completes(dialect_name: str) -> None:
    line = ("LDA #$10,X " * 2000) + '"' + ("x" * 5000)
    spans, _ = tokenize_line(line, initial_scan_state(), DIALECTS[dialect_name])
    assert_partition(line, spans)


@pytest.mark.parametrize("dialect_name", sorted(DIALECTS))
def test_document_threading(dialect_name: str) -> None:
    rng = random.Random(dialect_name)
    lines = [_random_line(rng) for _ in range(50)]
    for line, (spans, _state) in zip(lines, tokenize_lines(lines, DIALECTS[dialect_name])):
        assert_partition(line, spans)


def test_plain_text_is_all_none() -> None:
    rng = random.Random(7)
    for _ in range(50):
        line = _random_line(rng)
        spans, _ = tokenize_line(line, initial_scan_state(), PLAIN_TEXT)
        assert all(s.category is Category.NONE for s in spans)
        assert len(spans) <= 1


def test_adjacent_none_spans_are_merged() -> None:
    rng = random.Random(11)
    for dialect in DIALECTS.values():
        for _ in range(50):
            line = _random_line(rng)
            spans, _ = tokenize_line(line, initial_scan_state(), dialect)
            for prev, cur in zip(spans, spans[1:]):
                assert not (prev.category is Category.NONE and cur.category is Category.NONE)
