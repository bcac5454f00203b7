"""retrolex — incremental syntax tokenizer for 8-bit assembly and BASIC dialects."""

from __future__ import annotations

from retrolex.errors import UnknownDialect
from retrolex.lexer import tokenize_line, tokenize_lines
from retrolex.modes import resolve_dialect
from retrolex.tokens import Category, ScanState, TokenSpan, initial_scan_state

__version__ = "0.1.0"

__all__ = [
    "Category",
    "ScanState",
    "TokenSpan",
    "UnknownDialect",
    "initial_scan_state",
    "resolve_dialect",
    "tokenize_line",
    "tokenize_lines",
]
