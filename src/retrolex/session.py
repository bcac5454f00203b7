"""Per-buffer scan sessions: cached line states and incremental re-derivation."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from retrolex.dialects import DialectDescriptor
from retrolex.lexer import tokenize_line
from retrolex.tokens import ScanState, TokenSpan, initial_scan_state

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split on LF, CRLF, or CR; a trailing break yields a final empty line."""
    return _LINE_BREAK.split(text)


class BufferSession:
    """Own the lines of one buffer and the scan state at the start of each line.

    ``_states[i]`` is the state at the start of line ``i``; only a prefix of
    the document is cached at any time. Anything past the cache is re-derived
    by replaying the lexer from the last cached line, so the top of the
    document is always a safe boundary.

    A session has a single writer; it is not safe to share between threads.
    """

    def __init__(self, dialect: DialectDescriptor, text: str = "") -> None:
        self._dialect = dialect
        self._lines = split_lines(text)
        self._states: list[ScanState] = [initial_scan_state()]

    @property
    def dialect(self) -> DialectDescriptor:
        return self._dialect

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_text(self, text: str) -> None:
        """Replace the whole buffer, keeping states for the unchanged leading lines."""
        new_lines = split_lines(text)
        common = 0
        for old, new in zip(self._lines, new_lines):
            if old != new:
                break
            common += 1
        self._lines = new_lines
        self._invalidate(common)

    def edit(self, start: int, end: int, new_lines: Iterable[str]) -> None:
        """Replace lines [start, end) with new_lines."""
        if not 0 <= start <= end <= len(self._lines):
            raise IndexError(f"edit range {start}:{end} outside 0:{len(self._lines)}")
        self._lines[start:end] = list(new_lines)
        if not self._lines:
            self._lines = [""]
        self._invalidate(start)

    def set_dialect(self, dialect: DialectDescriptor) -> None:
        """Switch dialect; every cached state is reset to the initial state."""
        if dialect is not self._dialect:
            logger.debug("dialect %s -> %s, resetting scan state", self._dialect.name, dialect.name)
        self._dialect = dialect
        self._states = [initial_scan_state()]

    def _invalidate(self, line_no: int) -> None:
        # The state at the start of line_no depends only on the lines before it.
        del self._states[line_no + 1 :]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def safe_boundary(self, line_no: int) -> int:
        """Return the nearest line at or before line_no whose start state is known."""
        return min(line_no, len(self._states) - 1)

    def state_at(self, line_no: int) -> ScanState:
        """Return the scan state at the start of line_no (0-based)."""
        if not 0 <= line_no <= len(self._lines):
            raise IndexError(f"line {line_no} outside 0:{len(self._lines)}")
        start = self.safe_boundary(line_no)
        state = self._states[start]
        for i in range(start, line_no):
            _, state = tokenize_line(self._lines[i], state, self._dialect)
            self._states.append(state)
        return state

    def tokenize_line(self, line_no: int) -> list[TokenSpan]:
        """Return the spans of one line, deriving its start state as needed."""
        if not 0 <= line_no < len(self._lines):
            raise IndexError(f"line {line_no} outside 0:{len(self._lines)}")
        state = self.state_at(line_no)
        spans, next_state = tokenize_line(self._lines[line_no], state, self._dialect)
        if len(self._states) == line_no + 1:
            self._states.append(next_state)
        return spans

    def tokenize_range(
        self, start: int, stop: int, margin: int = 0
    ) -> list[tuple[int, list[TokenSpan]]]:
        """Tokenize lines [start - margin, stop + margin), clamped to the buffer."""
        lo = max(0, start - margin)
        hi = min(len(self._lines), stop + margin)
        return [(n, self.tokenize_line(n)) for n in range(lo, hi)]

    def tokenize_all(self) -> list[list[TokenSpan]]:
        return [spans for _, spans in self.tokenize_range(0, len(self._lines))]
