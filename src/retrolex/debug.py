"""--dump span listing to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from retrolex.dialects import DialectDescriptor
from retrolex.lexer import tokenize_lines
from retrolex.session import split_lines


def dump_spans(text: str, dialect: DialectDescriptor, *, file: TextIO = sys.stderr) -> None:
    """Print one row per span: ``line:start-end CATEGORY 'text'`` (1-based line)."""
    file.write(f"dialect {dialect.name}\n")
    lines = split_lines(text)
    for line_no, (line, (spans, state)) in enumerate(
        zip(lines, tokenize_lines(lines, dialect)), start=1
    ):
        for span in spans:
            file.write(
                f"{line_no}:{span.start}-{span.end} {span.category.name} {span.text(line)!r}\n"
            )
        if state.in_string:
            file.write(f"{line_no}: string open ({state.delimiter})\n")
