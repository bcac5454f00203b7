"""Category styling shared by the HTML renderer and editor hosts."""

from __future__ import annotations

from dataclasses import dataclass

from retrolex.tokens import Category


@dataclass(frozen=True, slots=True)
class Style:
    variable: str  # CSS custom property the colour is read from
    color: str  # fallback colour
    bold: bool = False
    italic: bool = False


# Colours follow a dark retro palette; hosts override the custom properties.
DEFAULT_STYLES: dict[Category, Style] = {
    Category.KEYWORD: Style("--syntax-keyword", "#c678dd"),
    Category.DIRECTIVE: Style("--syntax-macro", "#e5c07b"),
    Category.LABEL: Style("--syntax-label", "#61afef", bold=True),
    Category.NUMBER: Style("--syntax-number", "#d19a66"),
    Category.STRING: Style("--syntax-string", "#98c379"),
    Category.COMMENT: Style("--syntax-comment", "#7f848e", italic=True),
    Category.OPERATOR: Style("--syntax-operator", "#56b6c2"),
    Category.IDENTIFIER: Style("--text-primary", "#abb2bf"),
    Category.REGISTER: Style("--syntax-register", "#e06c75"),
}


def css_class(category: Category) -> str:
    return f"tok-{category.value}"


def stylesheet(styles: dict[Category, Style] | None = None) -> str:
    """Return CSS rules for every styled category."""
    styles = DEFAULT_STYLES if styles is None else styles
    rules: list[str] = [
        "pre.retrolex { background: var(--bg-primary, #282c34); "
        "color: var(--text-primary, #abb2bf); padding: 8px; }"
    ]
    for category, style in styles.items():
        decls = [f"color: var({style.variable}, {style.color});"]
        if style.bold:
            decls.append("font-weight: bold;")
        if style.italic:
            decls.append("font-style: italic;")
        rules.append(f".{css_class(category)} {{ {' '.join(decls)} }}")
    return "\n".join(rules) + "\n"
