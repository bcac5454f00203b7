"""HTML renderer — turns classified spans into highlighted markup."""

from __future__ import annotations

from collections.abc import Iterable

from retrolex.dialects import DialectDescriptor
from retrolex.lexer import tokenize_lines
from retrolex.session import split_lines
from retrolex.theme import css_class, stylesheet
from retrolex.tokens import Category


def render(text: str, dialect: DialectDescriptor, title: str | None = None) -> str:
    """Render source text to a complete HTML document."""
    parts: list[str] = ["<!DOCTYPE html>\n", "<html>\n", "<head>\n"]
    parts.append('<meta charset="utf-8">\n')
    if title:
        parts.append(f"<title>{_escape_html(title)}</title>\n")
    parts.append("<style>\n")
    parts.append(stylesheet())
    parts.append("</style>\n")
    parts.append("</head>\n")
    parts.append("<body>\n")
    parts.append(render_lines(split_lines(text), dialect))
    parts.append("</body>\n")
    parts.append("</html>\n")
    return "".join(parts)


def render_lines(lines: Iterable[str], dialect: DialectDescriptor) -> str:
    """Render lines to a <pre> block; unclassified text is left unwrapped."""
    lines = list(lines)
    out: list[str] = [f'<pre class="retrolex" data-dialect="{_escape_attr(dialect.name)}"><code>']
    for line, (spans, _state) in zip(lines, tokenize_lines(lines, dialect)):
        for span in spans:
            text = _escape_html(span.text(line))
            if span.category is Category.NONE:
                out.append(text)
            else:
                out.append(f'<span class="{css_class(span.category)}">{text}</span>')
        out.append("\n")
    out.append("</code></pre>\n")
    return "".join(out)


# ---------------------------------------------------------------------------
# HTML escaping
# ---------------------------------------------------------------------------


def _escape_html(text: str) -> str:
    """Escape text for HTML body content. Also encodes non-ASCII as entities."""
    result: list[str] = []
    for ch in text:
        if ch == "&":
            result.append("&amp;")
        elif ch == "<":
            result.append("&lt;")
        elif ch == ">":
            result.append("&gt;")
        elif ord(ch) > 0x7F:
            result.append(f"&#x{ord(ch):X};")
        else:
            result.append(ch)
    return "".join(result)


def _escape_attr(text: str) -> str:
    return _escape_html(text).replace('"', "&quot;")
