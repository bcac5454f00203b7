"""Tests for error formatting."""

from __future__ import annotations

from retrolex.errors import RetrolexError, UnknownDialect, UnknownPlatform


class TestUnknownDialect:
    def test_fields(self) -> None:
        err = UnknownDialect("z80", ["text", "asm6502"])
        assert err.name == "z80"
        assert err.supported == ("asm6502", "text")
        assert err.message == "unknown dialect 'z80'"

    def test_format(self) -> None:
        err = UnknownDialect("z80", ["text", "asm6502"])
        assert err.format() == (
            "error: unknown dialect 'z80'\n  = help: expected one of: asm6502, text"
        )
        assert str(err) == err.format()

    def test_is_retrolex_error(self) -> None:
        assert isinstance(UnknownDialect("x", []), RetrolexError)


class TestUnknownPlatform:
    def test_format(self) -> None:
        err = UnknownPlatform("zx", {"c64": 1, "coco": 2})
        assert err.format() == "error: unknown platform 'zx'\n  = help: expected one of: c64, coco"
