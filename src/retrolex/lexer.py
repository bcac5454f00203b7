"""retrolex lexer — classifies one line of source text into token spans."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from retrolex.dialects import DialectDescriptor, lookup
from retrolex.tokens import (
    Category,
    ScanState,
    TokenSpan,
    initial_scan_state,
    is_ascii_letter,
    is_digit,
    is_space,
)

logger = logging.getLogger(__name__)


class LineLexer:
    """Tokenize a single line, continuing from the previous line's ScanState.

    Productions are tried in a fixed order at every cursor position; each one
    consumes at least one character, and the final fallback consumes exactly
    one, so a line of length n is scanned in O(n) steps and never fails.
    """

    def __init__(self, line: str, state: ScanState, dialect: DialectDescriptor) -> None:
        self._line = line
        self._dialect = dialect
        self._pos = 0
        self._spans: list[TokenSpan] = []
        self._in_string = state.in_string
        self._delimiter = state.delimiter
        self._at_line_start = state.at_line_start

        if self._in_string and self._delimiter not in dialect.string_delimiters:
            # State carried over from another dialect; start clean.
            logger.debug(
                "discarding open %r string: not a %s delimiter", self._delimiter, dialect.name
            )
            self._in_string = False
            self._delimiter = ""

    def tokenize(self) -> tuple[list[TokenSpan], ScanState]:
        """Tokenize the line and return (spans, state for the next line)."""
        if self._in_string:
            self._lex_string_body(0, self._delimiter)

        while self._pos < len(self._line):
            self._lex_next()

        if self._in_string:
            return self._spans, ScanState(in_string=True, delimiter=self._delimiter)
        return self._spans, initial_scan_state()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._line):
            return self._line[idx]
        return ""

    def _emit(self, start: int, category: Category) -> None:
        if self._pos == start:
            return
        if category is not Category.NONE or not self._is_blank(start):
            self._at_line_start = False
        last = self._spans[-1] if self._spans else None
        if (
            category is Category.NONE
            and last is not None
            and last.category is Category.NONE
            and last.end == start
        ):
            self._spans[-1] = TokenSpan(last.start, self._pos, Category.NONE)
            return
        self._spans.append(TokenSpan(start, self._pos, category))

    def _is_blank(self, start: int) -> bool:
        return all(is_space(ch) for ch in self._line[start : self._pos])

    def _is_bare_prefix(self, word: str) -> bool:
        # "." or "@1" is a local-label prefix with no name after it.
        return word[0] in self._dialect.label_rule.local_prefixes and not any(
            is_ascii_letter(ch) for ch in word[1:]
        )

    def _word_end(self, start: int) -> int:
        end = start + 1
        while end < len(self._line) and self._dialect.is_word_char(self._line[end]):
            end += 1
        return end

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _lex_next(self) -> None:
        ch = self._peek()
        d = self._dialect

        if is_space(ch):
            self._lex_whitespace()
            return

        if self._at_line_start and self._pos == 0 and self._lex_line_prefix():
            return

        if self._lex_comment():
            return

        if ch in d.string_delimiters:
            self._lex_string_open()
            return

        if self._lex_number():
            return

        if d.is_word_start(ch):
            self._lex_word()
            return

        if self._lex_operator():
            return

        start = self._pos
        self._pos += 1
        self._emit(start, Category.NONE)

    def _lex_whitespace(self) -> None:
        start = self._pos
        while self._pos < len(self._line) and is_space(self._line[self._pos]):
            self._pos += 1
        self._emit(start, Category.NONE)

    # ------------------------------------------------------------------
    # Start-of-line prefixes: BASIC line numbers, assembly labels
    # ------------------------------------------------------------------

    def _lex_line_prefix(self) -> bool:
        d = self._dialect
        start = self._pos

        if d.line_numbers:
            end = start
            while end < len(self._line) and is_digit(self._line[end]):
                end += 1
            if end == start:
                return False
            self._pos = end
            self._emit(start, Category.NUMBER)
            return True

        rule = d.label_rule
        if not rule.column_zero or not d.is_word_start(self._peek()):
            return False

        end = self._word_end(start)
        if self._is_bare_prefix(self._line[start:end]):
            return False
        if rule.colon and end < len(self._line) and self._line[end] == ":":
            self._pos = end + 1
            self._emit(start, Category.LABEL)
            return True

        word = self._line[start:end]
        if lookup(word, d) is not None and not self._defines_label(end):
            return False

        self._pos = end
        self._emit(start, Category.LABEL)
        return True

    def _defines_label(self, pos: int) -> bool:
        """Return True if the word after pos is a definition word such as EQU."""
        words = self._dialect.label_rule.definition_words
        if not words:
            return False
        while pos < len(self._line) and is_space(self._line[pos]):
            pos += 1
        if pos >= len(self._line) or not self._dialect.is_word_start(self._line[pos]):
            return False
        end = self._word_end(pos)
        return self._dialect.normalize(self._line[pos:end]) in words

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _lex_comment(self) -> bool:
        for intro in self._dialect.comment_introducers:
            if intro.line_start_only and self._pos != 0:
                continue
            end = self._pos + len(intro.text)
            if self._line[self._pos : end].upper() != intro.text.upper():
                continue
            if intro.whole_word and self._dialect.is_word_char(self._line[end : end + 1] or " "):
                continue
            start = self._pos
            self._pos = len(self._line)
            self._emit(start, Category.COMMENT)
            return True
        return False

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    def _lex_string_open(self) -> None:
        start = self._pos
        delimiter = self._line[start]
        if (
            delimiter in self._dialect.char_constant_delimiters
            and self._is_char_constant(start)
        ):
            # 'x is a character constant, not a multi-line string.
            self._pos = min(start + 2, len(self._line))
            self._emit(start, Category.STRING)
            return
        self._pos = start + 1
        self._lex_string_body(start, delimiter)

    def _is_char_constant(self, start: int) -> bool:
        """Return True unless a closing quote follows with no comment in between."""
        delimiter = self._line[start]
        if self._line[start + 2 : start + 3] == delimiter:
            return False  # 'x'
        close = self._line.find(delimiter, start + 1)
        if close < 0:
            return True
        body = self._line[start + 1 : close].upper()
        return any(
            intro.text.upper() in body
            for intro in self._dialect.comment_introducers
            if not intro.line_start_only
        )

    def _lex_string_body(self, start: int, delimiter: str) -> None:
        """Consume through the closing delimiter, or to end of line if there is none."""
        close = self._line.find(delimiter, self._pos)
        if close < 0:
            self._pos = len(self._line)
            self._in_string = True
            self._delimiter = delimiter
        else:
            self._pos = close + 1
            self._in_string = False
            self._delimiter = ""
        self._emit(start, Category.STRING)

    # ------------------------------------------------------------------
    # Numbers, words, operators
    # ------------------------------------------------------------------

    def _lex_number(self) -> bool:
        start = self._pos
        best = start
        for grammar in self._dialect.numeric_grammars:
            end = grammar.match_end(self._line, start)
            if end > best:
                best = end
        if best == start:
            return False
        self._pos = best
        self._emit(start, Category.NUMBER)
        return True

    def _lex_word(self) -> None:
        d = self._dialect
        start = self._pos
        end = self._word_end(start)
        word = self._line[start:end]
        if self._is_bare_prefix(word) and lookup(word, d) is None:
            self._pos = start + 1
            self._emit(start, Category.NONE)
            return
        category = lookup(word, d)

        # One-character type sigil: LEFT$, PRINT# ... only when reserved as a unit.
        sigil = self._line[end : end + 1]
        if sigil and sigil in d.type_sigils:
            extended = lookup(word + sigil, d)
            if extended is not None:
                end += 1
                category = extended

        if category is None:
            if word[0] in d.label_rule.local_prefixes:
                category = Category.LABEL
            else:
                category = Category.IDENTIFIER

        self._pos = end
        self._emit(start, category)

    def _lex_operator(self) -> bool:
        for op in self._dialect.operators:
            if self._line.startswith(op, self._pos):
                start = self._pos
                self._pos += len(op)
                self._emit(start, Category.OPERATOR)
                return True
        return False


def tokenize_line(
    line: str, state: ScanState, dialect: DialectDescriptor
) -> tuple[list[TokenSpan], ScanState]:
    """Tokenize one line; returns its spans and the state for the next line."""
    return LineLexer(line, state, dialect).tokenize()


def tokenize_lines(
    lines: Iterable[str],
    dialect: DialectDescriptor,
    state: ScanState | None = None,
) -> Iterator[tuple[list[TokenSpan], ScanState]]:
    """Tokenize lines in document order, threading the scan state through."""
    if state is None:
        state = initial_scan_state()
    for line in lines:
        spans, state = tokenize_line(line, state, dialect)
        yield spans, state
