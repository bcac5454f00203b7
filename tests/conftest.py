"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from retrolex.lexer import tokenize_line
from retrolex.modes import resolve_dialect
from retrolex.tokens import Category, ScanState, TokenSpan, initial_scan_state


@pytest.fixture
def lex():
    """Return a helper that tokenizes one line and returns its spans."""

    def _lex(
        line: str, dialect: str = "asm6502", state: ScanState | None = None
    ) -> list[TokenSpan]:
        spans, _ = tokenize_line(line, state or initial_scan_state(), resolve_dialect(dialect))
        return spans

    return _lex


@pytest.fixture
def classify():
    """Return a helper that tokenizes one line into (text, category) pairs."""

    def _classify(line: str, dialect: str = "asm6502") -> list[tuple[str, Category]]:
        spans, _ = tokenize_line(line, initial_scan_state(), resolve_dialect(dialect))
        return [(span.text(line), span.category) for span in spans]

    return _classify


def significant(pairs: list[tuple[str, Category]]) -> list[tuple[str, Category]]:
    """Drop NONE (whitespace / unclassified) pairs."""
    return [(text, cat) for text, cat in pairs if cat is not Category.NONE]


def assert_categories(
    pairs: list[tuple[str, Category]], expected: list[tuple[str, Category]]
) -> None:
    """Assert that the significant (text, category) pairs match."""
    actual = significant(pairs)
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_partition(line: str, spans: list[TokenSpan]) -> None:
    """Assert spans are contiguous, non-empty, and cover the line exactly."""
    pos = 0
    for span in spans:
        assert span.start == pos, f"gap or overlap at {pos}: {span}"
        assert span.end > span.start, f"empty span {span}"
        pos = span.end
    assert pos == len(line), f"spans end at {pos}, line length {len(line)}"
