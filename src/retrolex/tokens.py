"""Token categories, spans, scan state, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Category(Enum):
    KEYWORD = "keyword"  # mnemonics, BASIC statements and functions
    DIRECTIVE = "directive"  # assembler pseudo-ops
    LABEL = "label"
    NUMBER = "number"
    STRING = "string"
    COMMENT = "comment"
    OPERATOR = "operator"
    IDENTIFIER = "identifier"
    REGISTER = "register"
    NONE = "none"  # whitespace / unclassified


@dataclass(frozen=True, slots=True)
class TokenSpan:
    """Half-open range [start, end) of a line, tagged with one category."""

    start: int
    end: int
    category: Category

    @property
    def length(self) -> int:
        return self.end - self.start

    def text(self, line: str) -> str:
        return line[self.start : self.end]


@dataclass(frozen=True, slots=True)
class ScanState:
    """Carry-over between successive line scans of one buffer.

    ``delimiter`` is meaningful only while ``in_string`` is set; the
    constructor rejects inconsistent combinations.
    """

    in_string: bool = False
    delimiter: str = ""
    at_line_start: bool = True

    def __post_init__(self) -> None:
        if self.in_string and len(self.delimiter) != 1:
            raise ValueError("an open string needs a single-character delimiter")
        if not self.in_string and self.delimiter:
            raise ValueError("delimiter set on a state outside a string")

    def to_dict(self) -> dict[str, Any]:
        return {
            "in_string": self.in_string,
            "delimiter": self.delimiter,
            "at_line_start": self.at_line_start,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ScanState:
        return cls(
            in_string=bool(data.get("in_string", False)),
            delimiter=str(data.get("delimiter", "")),
            at_line_start=bool(data.get("at_line_start", True)),
        )


_INITIAL_STATE = ScanState()


def initial_scan_state() -> ScanState:
    """Return the state for line 1 of a buffer, or after a dialect switch."""
    return _INITIAL_STATE


def is_space(ch: str) -> bool:
    """Return True for horizontal whitespace (spaces, tabs, and friends)."""
    return ch.isspace()


def is_digit(ch: str) -> bool:
    """Return True only for ASCII decimal digits."""
    return "0" <= ch <= "9"


def is_ascii_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")
