"""Reserved-word tables for the supported assembly and BASIC dialects.

Every table is built once at import time and never mutated. Dialect
descriptors reference tables rather than copying them, so one table may be
shared by several dialects.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from retrolex.tokens import Category


@dataclass(frozen=True, slots=True)
class SymbolTable:
    """A named, immutable set of uppercase words tagged with one category."""

    name: str
    category: Category
    words: frozenset[str]

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.upper() in self.words

    def __len__(self) -> int:
        return len(self.words)


def _table(name: str, category: Category, words: Iterable[str]) -> SymbolTable:
    return SymbolTable(name, category, frozenset(w.upper() for w in words))


def _numbered(*stems: str) -> list[str]:
    """Expand bit-numbered 65C02 mnemonics: BBR -> BBR0 .. BBR7."""
    return [f"{stem}{bit}" for stem in stems for bit in range(8)]


# ---------------------------------------------------------------------------
# MOS 6502 / WDC 65C02
# ---------------------------------------------------------------------------

OPCODES_6502 = _table(
    "6502 opcodes",
    Category.KEYWORD,
    # fmt: off
    [
        # Load/Store
        "LDA", "LDX", "LDY", "STA", "STX", "STY",
        # Transfer
        "TAX", "TAY", "TXA", "TYA", "TSX", "TXS",
        # Stack
        "PHA", "PHP", "PLA", "PLP",
        # Arithmetic
        "ADC", "SBC", "INC", "INX", "INY", "DEC", "DEX", "DEY",
        # Logic
        "AND", "ORA", "EOR", "BIT",
        # Shift/Rotate
        "ASL", "LSR", "ROL", "ROR",
        # Compare
        "CMP", "CPX", "CPY",
        # Branch
        "BCC", "BCS", "BEQ", "BMI", "BNE", "BPL", "BVC", "BVS",
        # Jump
        "JMP", "JSR", "RTS", "RTI", "BRK",
        # Flags
        "CLC", "CLD", "CLI", "CLV", "SEC", "SED", "SEI",
        "NOP",
    ],
    # fmt: on
)

OPCODES_65C02 = _table(
    "65C02 opcode extensions",
    Category.KEYWORD,
    ["BRA", "PHX", "PHY", "PLX", "PLY", "STZ", "TRB", "TSB"]
    + _numbered("BBR", "BBS", "RMB", "SMB"),
)

DIRECTIVES_6502 = _table(
    "6502 directives",
    Category.DIRECTIVE,
    # fmt: off
    [
        ".ORG", ".BYTE", ".WORD", ".DWORD", ".FILL", ".ALIGN",
        ".DB", ".DW", ".DD", ".DS", ".EQU", ".SET",
        ".INCLUDE", ".INCBIN", ".IF", ".ELSE", ".ENDIF", ".IFDEF", ".IFNDEF",
        ".MACRO", ".ENDM", ".ENDMACRO", ".REPT", ".ENDR",
        ".SEGMENT", ".CODE", ".DATA", ".BSS", ".RODATA",
        ".PROC", ".ENDPROC", ".SCOPE", ".ENDSCOPE",
        ".EXPORT", ".IMPORT", ".GLOBAL", ".LOCAL",
        ".ASSERT", ".WARNING", ".ERROR", ".RES", ".ASCIIZ", ".ASCII",
        "ORG", "EQU", "DB", "DW", "DS", "BYTE", "WORD", "END",
    ],
    # fmt: on
)

REGISTERS_6502 = _table("6502 registers", Category.REGISTER, ["A", "X", "Y", "S", "SP", "PC"])


# ---------------------------------------------------------------------------
# Motorola 6809 / Hitachi 6309
# ---------------------------------------------------------------------------

OPCODES_6809 = _table(
    "6809 opcodes",
    Category.KEYWORD,
    # fmt: off
    [
        # Load/Store
        "LDA", "LDB", "STA", "STB",
        "LDD", "LDX", "LDY", "LDU", "LDS",
        "STD", "STX", "STY", "STU", "STS",
        "LEAX", "LEAY", "LEAU", "LEAS",
        # Transfer/Exchange and stack
        "TFR", "EXG", "PSHS", "PULS", "PSHU", "PULU",
        # Arithmetic
        "ADDA", "ADDB", "ADCA", "ADCB",
        "SUBA", "SUBB", "SBCA", "SBCB",
        "INCA", "INCB", "DECA", "DECB",
        "NEGA", "NEGB", "CLRA", "CLRB",
        "COMA", "COMB", "TSTA", "TSTB",
        "DAA", "SEX", "MUL", "ABX",
        "ADDD", "SUBD", "CMPD",
        # Compare
        "CMPA", "CMPB", "CMPX", "CMPY", "CMPU", "CMPS",
        # Logic
        "ANDA", "ANDB", "ORA", "ORB", "EORA", "EORB",
        "BITA", "BITB", "ANDCC", "ORCC",
        # Shift/Rotate
        "ASLA", "ASLB", "ASL", "ASRA", "ASRB", "ASR",
        "LSLA", "LSLB", "LSL", "LSRA", "LSRB", "LSR",
        "ROLA", "ROLB", "ROL", "RORA", "RORB", "ROR",
        # Memory
        "INC", "DEC", "NEG", "CLR", "COM", "TST",
        # Short branches
        "BRA", "BRN", "BHI", "BLS", "BCC", "BHS", "BCS", "BLO",
        "BNE", "BEQ", "BVC", "BVS", "BPL", "BMI", "BGE", "BLT",
        "BGT", "BLE", "BSR",
        # Long branches
        "LBRA", "LBRN", "LBHI", "LBLS", "LBCC", "LBHS", "LBCS", "LBLO",
        "LBNE", "LBEQ", "LBVC", "LBVS", "LBPL", "LBMI", "LBGE", "LBLT",
        "LBGT", "LBLE", "LBSR",
        # Jump/Return and interrupts
        "JMP", "JSR", "RTS", "RTI",
        "SWI", "SWI2", "SWI3", "CWAI", "SYNC",
        "NOP",
    ],
    # fmt: on
)

OPCODES_6309 = _table(
    "6309 opcode extensions",
    Category.KEYWORD,
    # fmt: off
    [
        "LDMD", "BITMD", "LDBT", "STBT",
        "ADCD", "SBCD", "ANDD", "ORD", "EORD",
        "MULD", "DIVD", "DIVQ",
        "ADCR", "SBCR", "ADDR", "SUBR", "ANDR", "ORR", "EORR", "CMPR",
        "LDW", "STW", "LDQ", "STQ",
        "ADDW", "SUBW", "CMPW",
        "ADDE", "ADDF", "SUBE", "SUBF", "CMPE", "CMPF",
        "LDE", "LDF", "STE", "STF",
        "TFM", "PSHSW", "PULSW", "PSHUW", "PULUW",
        "ASLD", "ASRD", "LSRD", "ROLD", "RORD",
        "CLRD", "CLRW", "COMD", "COMW",
        "DECD", "DECW", "INCD", "INCW",
        "NEGD", "NEGW", "TSTD", "TSTW",
        "SEXW", "BAND", "BIAND", "BOR", "BIOR",
        "BEOR", "BIEOR",
    ],
    # fmt: on
)

DIRECTIVES_6809 = _table(
    "6809 directives",
    Category.DIRECTIVE,
    # fmt: off
    [
        "ORG", "EQU", "SET", "RMB", "FCB", "FCC", "FDB", "END",
        "SETDP", "INCLUDE", "INCBIN",
        ".ORG", ".EQU", ".SET", ".RMB", ".FCB", ".FCC", ".FDB", ".END",
        ".BYTE", ".WORD", ".ASCII", ".ASCIIZ", ".FILL", ".ALIGN",
        ".IF", ".ELSE", ".ENDIF", ".IFDEF", ".IFNDEF",
        ".MACRO", ".ENDM",
        ".EXPORT", ".IMPORT", ".GLOBAL",
        "NAM", "TTL", "OPT", "PAGE", "SPC",
    ],
    # fmt: on
)

REGISTERS_6809 = _table(
    "6809/6309 registers",
    Category.REGISTER,
    ["A", "B", "D", "E", "F", "W", "X", "Y", "U", "S", "PC", "DP", "CC", "V", "Q"],
)


# ---------------------------------------------------------------------------
# BASIC
# ---------------------------------------------------------------------------

BASIC_CORE = _table(
    "BASIC core keywords",
    Category.KEYWORD,
    # fmt: off
    [
        # Program control
        "GOTO", "GOSUB", "RETURN", "IF", "THEN", "ELSE", "FOR", "TO", "STEP",
        "NEXT", "WHILE", "WEND", "DO", "LOOP", "UNTIL", "END", "STOP", "ON",
        # I/O
        "PRINT", "INPUT", "READ", "DATA", "RESTORE", "GET", "PUT",
        # Variables
        "LET", "DIM", "DEF", "FN", "DEFINT", "DEFSNG", "DEFDBL", "DEFSTR",
        # Strings
        "LEFT$", "RIGHT$", "MID$", "LEN", "CHR$", "ASC", "VAL", "STR$",
        "INSTR", "STRING$", "SPACE$",
        # Math
        "ABS", "INT", "SGN", "SQR", "SIN", "COS", "TAN", "ATN", "LOG", "EXP",
        "RND", "FIX", "CINT", "CSNG", "CDBL",
        # Misc
        "REM", "NEW", "RUN", "LIST", "CLEAR", "CLR", "CLS",
        "CONT", "LOAD", "SAVE", "VERIFY",
        "TAB", "SPC", "USING", "POS",
        "AND", "OR", "NOT", "XOR", "EQV", "IMP", "MOD",
        "PEEK", "POKE", "USR", "CALL", "WAIT",
    ],
    # fmt: on
)

BASIC_FUNCTIONS = _table(
    "BASIC built-in functions",
    Category.KEYWORD,
    # fmt: off
    [
        "ABS", "ASC", "ATN", "CHR$", "COS", "EXP", "FRE", "INT", "LEFT$",
        "LEN", "LOG", "MID$", "PEEK", "POS", "RIGHT$", "RND", "SGN", "SIN",
        "SPC", "SQR", "STR$", "TAB", "TAN", "USR", "VAL", "VARPTR",
        "INKEY$", "POINT", "JOYSTK", "MEM", "TIMER", "ERR", "ERL",
        "STRING$", "HEX$", "OCT$", "BIN$", "INSTR",
    ],
    # fmt: on
)

# Multi-word statements (LINE INPUT#, DEF USR) are covered by their parts.
BASIC_ECB = _table(
    "Extended Color BASIC keywords",
    Category.KEYWORD,
    # fmt: off
    [
        # Graphics
        "PMODE", "PCLS", "PCLEAR", "SCREEN", "COLOR", "SET", "RESET", "POINT",
        "LINE", "PSET", "PRESET", "CIRCLE", "PAINT", "DRAW", "GET", "PUT",
        "PALETTE",
        # Sound
        "SOUND", "PLAY", "AUDIO",
        # Disk I/O
        "OPEN", "CLOSE", "PRINT#", "INPUT#",
        "LOF", "LOC", "EOF", "FIELD", "LSET", "RSET",
        "WRITE", "WRITE#", "APPEND",
        "KILL", "NAME", "FILES", "DSKI$", "DSKO$",
        "DRIVE", "DIR", "COPY", "BACKUP", "UNLOAD",
        # Extended
        "EXEC", "VARPTR", "INKEY$", "TIMER",
        "ATTR$", "BUTTON", "JOYSTK",
        "HSCREEN", "HSET", "HRESET", "HPOINT", "HLINE", "HCIRCLE",
        "HDRAW", "HPAINT", "HCOLOR", "HBUFF", "HGET", "HPUT", "HCLS", "HPRINT",
        "LOCATE", "WIDTH", "EDIT", "TRON", "TROFF",
        "MOTOR", "SKIPF", "RENUM", "HEXS", "DELETE", "AUTO",
        "CSAVE", "CLOAD", "LLIST", "LPRINT",
    ],
    # fmt: on
)

BASIC_CBM = _table(
    "Commodore BASIC keywords",
    Category.KEYWORD,
    # fmt: off
    [
        # Graphics/Screen
        "COLOR", "GRAPHIC", "SCNCLR", "CHAR", "BOX", "CIRCLE", "DRAW", "PAINT",
        "LOCATE", "SCALE", "GSHAPE", "SSHAPE", "COLLISION", "SPRITE", "MOVSPR",
        "SPRSAV", "SPRDEF", "SPRCOLOR", "BUMP", "RSPRITE", "RSPPOS", "RSPCOL",
        # Sound
        "SOUND", "VOL", "ENVELOPE", "TEMPO", "PLAY", "FILTER",
        # I/O
        "OPEN", "CLOSE", "PRINT#", "INPUT#", "GET#", "CMD",
        "STATUS", "ST", "DS", "DS$",
        # Disk
        "LOAD", "SAVE", "VERIFY", "DLOAD", "DSAVE", "CATALOG", "DIRECTORY",
        "SCRATCH", "RENAME", "COPY", "CONCAT", "COLLECT", "BACKUP", "HEADER",
        "DCLEAR", "DOPEN", "DCLOSE", "RECORD", "APPEND",
        # Extended
        "SYS", "WAIT", "BANK", "FRE", "TI", "TI$",
        "RWINDOW", "WINDOW", "RREG",
        "TRAP", "RESUME", "SLEEP", "BEGIN", "BEND",
        "BLOAD", "BSAVE", "BOOT", "FETCH", "STASH", "SWAP",
        "DEC", "HEX$", "ERR$", "EL", "ER", "INSTR",
        "JOY", "POT", "PEN", "RCLR", "RDOT", "RGR", "RLUM",
        "POINTER", "KEY", "FAST", "SLOW",
    ],
    # fmt: on
)
