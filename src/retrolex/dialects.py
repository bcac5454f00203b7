"""Dialect descriptors: comment, string, number, word and label syntax per dialect."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from retrolex import tables
from retrolex.tables import SymbolTable
from retrolex.tokens import Category, is_ascii_letter, is_digit

# Reserved-word categories in lookup priority order.
_TABLE_PRIORITY = (Category.KEYWORD, Category.DIRECTIVE, Category.REGISTER)


@dataclass(frozen=True, slots=True)
class CommentIntroducer:
    """Text that starts a comment running to end of line (matched case-insensitively)."""

    text: str
    line_start_only: bool = False  # only in column 0, e.g. 6809 "*"
    whole_word: bool = False  # must not run into a word character, e.g. REM

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("comment introducer must not be empty")


@dataclass(frozen=True, slots=True)
class NumericGrammar:
    name: str
    pattern: re.Pattern[str]

    def match_end(self, line: str, pos: int) -> int:
        """Return the end offset of a match at pos, or pos when nothing matches."""
        m = self.pattern.match(line, pos)
        return m.end() if m else pos


def _grammar(name: str, regex: str) -> NumericGrammar:
    return NumericGrammar(name, re.compile(regex))


@dataclass(frozen=True, slots=True)
class LabelRule:
    """How labels are recognised in assembly dialects."""

    column_zero: bool = False  # unreserved words in column 0 are labels
    colon: bool = False  # "name:" in column 0 is a label even if name is reserved
    definition_words: frozenset[str] = frozenset()  # "NAME EQU 1" defines NAME
    local_prefixes: str = ""  # "@loop" / ".loop" are labels anywhere


@dataclass(frozen=True, slots=True)
class DialectDescriptor:
    """Immutable description of one dialect's lexical syntax.

    ``keyword_tables`` is priority ordered: keyword (mnemonic) tables come
    before directive tables, which come before register tables. When a word
    appears in more than one table the first table wins.
    """

    name: str
    display_name: str
    family: str  # "asm", "basic" or "text"
    comment_introducers: tuple[CommentIntroducer, ...] = ()
    string_delimiters: str = ""
    char_constant_delimiters: str = ""
    numeric_grammars: tuple[NumericGrammar, ...] = ()
    keyword_tables: tuple[SymbolTable, ...] = ()
    label_rule: LabelRule = field(default_factory=LabelRule)
    case_normalization: str = "upper"  # "upper" or "none"
    words: bool = True
    word_start: str = ""  # extra word-start characters besides ASCII letters
    word_chars: str = ""  # extra word characters besides ASCII letters and digits
    type_sigils: str = ""
    operators: tuple[str, ...] = ()  # longest first
    line_numbers: bool = False

    def __post_init__(self) -> None:
        if self.case_normalization not in ("upper", "none"):
            raise ValueError(f"invalid case normalization: {self.case_normalization!r}")
        ranks = []
        for table in self.keyword_tables:
            if table.category not in _TABLE_PRIORITY:
                raise ValueError(f"table {table.name!r} has non-reserved category")
            ranks.append(_TABLE_PRIORITY.index(table.category))
        if ranks != sorted(ranks):
            raise ValueError(
                f"{self.name}: keyword tables must be ordered keyword, directive, register"
            )
        if any(not op for op in self.operators):
            raise ValueError("operators must not be empty")
        for ch in self.char_constant_delimiters:
            if ch not in self.string_delimiters:
                raise ValueError(f"char constant delimiter {ch!r} is not a string delimiter")

    def normalize(self, word: str) -> str:
        return word.upper() if self.case_normalization == "upper" else word

    def is_word_start(self, ch: str) -> bool:
        return self.words and (is_ascii_letter(ch) or ch in self.word_start)

    def is_word_char(self, ch: str) -> bool:
        return is_ascii_letter(ch) or is_digit(ch) or ch in self.word_chars


def lookup(word: str, dialect: DialectDescriptor) -> Category | None:
    """Return the category of a reserved word, or None if it is not reserved."""
    key = dialect.normalize(word)
    for table in dialect.keyword_tables:
        if key in table.words:
            return table.category
    return None


def _operators(multi: list[str], single: str) -> tuple[str, ...]:
    return tuple(sorted(multi, key=len, reverse=True)) + tuple(single)


# ---------------------------------------------------------------------------
# Shared syntax pieces
# ---------------------------------------------------------------------------

_HEX_DOLLAR = _grammar("hex-dollar", r"\$[0-9A-Fa-f]+")
_HEX_C = _grammar("hex-c", r"0[xX][0-9A-Fa-f]+")
_HEX_AMP = _grammar("hex-amp", r"&[Hh][0-9A-Fa-f]+")
_OCT_AMP = _grammar("octal-amp", r"&[Oo][0-7]+")
_OCT_AT = _grammar("octal-at", r"@[0-7]+")
_BIN_AMP = _grammar("binary-amp", r"&[Bb][01]+")
_BIN_PERCENT = _grammar("binary-percent", r"%[01]+")
_DECIMAL = _grammar("decimal", r"[0-9]+")
_BASIC_DECIMAL = _grammar(
    "decimal-float", r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[Ee][+-]?[0-9]+)?[!#%&]?"
)

_ASM_OPERATORS = _operators(
    ["<<", ">>", "<=", ">=", "<>", "!=", "==", "&&", "||", "++", "--"],
    "+-*/<>=&|^!~,()[]#",
)

_BASIC_OPERATORS = _operators(
    ["<>", "><", "<=", "=<", ">=", "=>"],
    "+-*/\\^=<>(),:;@#$%!&",
)

_BASIC_COMMENTS = (
    CommentIntroducer("REM", whole_word=True),
    CommentIntroducer("'"),
)


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------

ASM6502 = DialectDescriptor(
    name="asm6502",
    display_name="6502 Assembly",
    family="asm",
    comment_introducers=(CommentIntroducer(";"),),
    string_delimiters="\"'",
    char_constant_delimiters="'",
    numeric_grammars=(_HEX_DOLLAR, _HEX_C, _BIN_PERCENT, _DECIMAL),
    keyword_tables=(
        tables.OPCODES_6502,
        tables.OPCODES_65C02,
        tables.DIRECTIVES_6502,
        tables.REGISTERS_6502,
    ),
    label_rule=LabelRule(column_zero=True, colon=True, local_prefixes="@."),
    word_start="_@.",
    word_chars="_@",
    operators=_ASM_OPERATORS,
)

ASM6809 = DialectDescriptor(
    name="asm6809",
    display_name="6809 Assembly",
    family="asm",
    comment_introducers=(
        CommentIntroducer(";"),
        CommentIntroducer("*", line_start_only=True),
    ),
    string_delimiters="\"'",
    char_constant_delimiters="'",
    numeric_grammars=(_HEX_DOLLAR, _HEX_AMP, _HEX_C, _BIN_PERCENT, _OCT_AT, _DECIMAL),
    keyword_tables=(
        tables.OPCODES_6809,
        tables.OPCODES_6309,
        tables.DIRECTIVES_6809,
        tables.REGISTERS_6809,
    ),
    label_rule=LabelRule(
        column_zero=True,
        colon=True,
        definition_words=frozenset({"EQU"}),
    ),
    word_start="_.",
    word_chars="_@?",
    operators=_ASM_OPERATORS,
)

_BASIC_COMMON = dict(
    family="basic",
    comment_introducers=_BASIC_COMMENTS,
    string_delimiters='"',
    numeric_grammars=(_HEX_AMP, _OCT_AMP, _BIN_AMP, _BASIC_DECIMAL),
    type_sigils="$#",
    operators=_BASIC_OPERATORS,
    line_numbers=True,
)

BASIC_MS = DialectDescriptor(
    name="basic-ms",
    display_name="Microsoft BASIC",
    keyword_tables=(tables.BASIC_CORE, tables.BASIC_FUNCTIONS),
    **_BASIC_COMMON,
)

BASIC_ECB = DialectDescriptor(
    name="basic-ecb",
    display_name="Extended Color BASIC",
    keyword_tables=(tables.BASIC_CORE, tables.BASIC_ECB, tables.BASIC_FUNCTIONS),
    **_BASIC_COMMON,
)

BASIC_CBM = DialectDescriptor(
    name="basic-cbm",
    display_name="Commodore BASIC",
    keyword_tables=(tables.BASIC_CORE, tables.BASIC_CBM, tables.BASIC_FUNCTIONS),
    **_BASIC_COMMON,
)

PLAIN_TEXT = DialectDescriptor(
    name="text",
    display_name="Plain Text",
    family="text",
    case_normalization="none",
    words=False,
)

DIALECTS: dict[str, DialectDescriptor] = {
    d.name: d for d in (ASM6502, ASM6809, BASIC_MS, BASIC_ECB, BASIC_CBM, PLAIN_TEXT)
}
