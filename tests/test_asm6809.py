"""Test 6809/6309 assembly classification."""

from retrolex.tokens import Category

from tests.conftest import assert_categories

K = Category.KEYWORD
D = Category.DIRECTIVE
L = Category.LABEL
N = Category.NUMBER
S = Category.STRING
C = Category.COMMENT
O = Category.OPERATOR
I = Category.IDENTIFIER  # noqa: E741
R = Category.REGISTER


class TestComments:
    def test_star_in_column_zero(self, classify):
        assert_categories(classify("* SCREEN SETUP", "asm6809"), [("* SCREEN SETUP", C)])

    def test_star_elsewhere_is_operator(self, classify):
        assert_categories(
            classify("  LDA #2*3", "asm6809"),
            [("LDA", K), ("#", O), ("2", N), ("*", O), ("3", N)],
        )

    def test_semicolon(self, classify):
        assert_categories(classify("  RTS ; done", "asm6809"), [("RTS", K), ("; done", C)])


class TestLabels:
    def test_equ_definition(self, classify):
        assert_categories(
            classify("SCREEN EQU $0400", "asm6809"),
            [("SCREEN", L), ("EQU", D), ("$0400", N)],
        )

    def test_reserved_name_defined_with_equ(self, classify):
        assert_categories(
            classify("CLR equ 1", "asm6809"),
            [("CLR", L), ("equ", D), ("1", N)],
        )

    def test_reserved_word_without_equ(self, classify):
        assert_categories(classify("CLR", "asm6809"), [("CLR", K)])

    def test_label_characters(self, classify):
        assert_categories(
            classify("done?@1 BRA done?@1", "asm6809"),
            [("done?@1", L), ("BRA", K), ("done?@1", I)],
        )


class TestInstructions:
    def test_auto_increment(self, classify):
        assert_categories(
            classify("  LEAX ,X++", "asm6809"),
            [("LEAX", K), (",", O), ("X", R), ("++", O)],
        )

    def test_register_pair(self, classify):
        assert_categories(
            classify("  TFR A,DP", "asm6809"),
            [("TFR", K), ("A", R), (",", O), ("DP", R)],
        )

    def test_6309_extension(self, classify):
        assert_categories(classify("  LDQ #0", "asm6809"), [("LDQ", K), ("#", O), ("0", N)])

    def test_6502_only_mnemonic(self, classify):
        assert_categories(classify("  TAX", "asm6809"), [("TAX", I)])


class TestNumbers:
    def test_radix_forms(self, classify):
        assert_categories(
            classify("  FCB $FF,&H1F,0x10,%101,@17,99", "asm6809"),
            [
                ("FCB", D),
                ("$FF", N),
                (",", O),
                ("&H1F", N),
                (",", O),
                ("0x10", N),
                (",", O),
                ("%101", N),
                (",", O),
                ("@17", N),
                (",", O),
                ("99", N),
            ],
        )


class TestStrings:
    def test_fcc_string(self, classify):
        assert_categories(
            classify('  FCC "HELLO"', "asm6809"),
            [("FCC", D), ('"HELLO"', S)],
        )

    def test_char_constant(self, classify):
        assert_categories(
            classify("  LDB #'Z", "asm6809"),
            [("LDB", K), ("#", O), ("'Z", S)],
        )

    def test_dot_directive(self, classify):
        assert_categories(
            classify("  .ascii \"HI\"", "asm6809"),
            [(".ascii", D), ('"HI"', S)],
        )
