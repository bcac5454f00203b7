"""Tests for dialect resolution, platforms, and file-type detection."""

from __future__ import annotations

import logging

import pytest

from retrolex.dialects import ASM6502, ASM6809, BASIC_CBM, BASIC_ECB, BASIC_MS, PLAIN_TEXT
from retrolex.errors import UnknownDialect, UnknownPlatform
from retrolex.modes import (
    PLATFORMS,
    detect_language,
    dialect_for_file,
    display_name,
    resolve_dialect,
    resolve_dialect_or_plain,
    resolve_language,
    resolve_platform,
)

C64 = PLATFORMS["c64"]
COCO = PLATFORMS["coco"]


class TestResolveDialect:
    @pytest.mark.parametrize(
        ("mode_id", "expected"),
        [
            ("asm6502", ASM6502),
            ("asm6809", ASM6809),
            ("basic-ms", BASIC_MS),
            ("basic-ecb", BASIC_ECB),
            ("basic-cbm", BASIC_CBM),
            ("text", PLAIN_TEXT),
        ],
    )
    def test_supported(self, mode_id, expected) -> None:
        assert resolve_dialect(mode_id) is expected

    def test_case_and_whitespace(self) -> None:
        assert resolve_dialect("  ASM6502 ") is ASM6502

    def test_unknown(self) -> None:
        with pytest.raises(UnknownDialect) as exc_info:
            resolve_dialect("z80")
        err = exc_info.value
        assert err.name == "z80"
        assert "asm6809" in err.supported

    def test_mode_aware_language_is_not_a_dialect(self) -> None:
        with pytest.raises(UnknownDialect):
            resolve_dialect("asm")

    def test_fallback_to_plain(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="retrolex.modes"):
            assert resolve_dialect_or_plain("z80") is PLAIN_TEXT
        assert "z80" in caplog.text

    def test_fallback_not_needed(self) -> None:
        assert resolve_dialect_or_plain("basic-cbm") is BASIC_CBM


class TestPlatforms:
    def test_c64(self) -> None:
        platform = resolve_platform("c64")
        assert platform.assembly_dialect == "asm6502"
        assert platform.basic_dialect == "basic-cbm"

    def test_coco(self) -> None:
        platform = resolve_platform("CoCo")
        assert platform.assembly_dialect == "asm6809"
        assert platform.basic_dialect == "basic-ecb"

    def test_unknown(self) -> None:
        with pytest.raises(UnknownPlatform, match="zx"):
            resolve_platform("zx")

    def test_platform_dialects_resolve(self) -> None:
        for platform in PLATFORMS.values():
            resolve_dialect(platform.assembly_dialect)
            resolve_dialect(platform.basic_dialect)


class TestDetectLanguage:
    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("game.asm", "asm"),
            ("GAME.ASM", "asm"),
            ("boot.s", "asm"),
            ("macros.inc", "asm"),
            ("prog.bas", "basic"),
            ("README.md", "text"),
            ("Makefile", "text"),
            ("dir.d/file", "text"),
        ],
    )
    def test_builtin(self, filename, expected) -> None:
        assert detect_language(filename) == expected

    def test_extra_extensions(self) -> None:
        assert detect_language("x.a09", {"a09": "asm6809"}) == "asm6809"
        assert detect_language("x.A09", {".a09": "asm6809"}) == "asm6809"

    def test_override_builtin(self) -> None:
        assert detect_language("x.s", {"s": "text"}) == "text"


class TestResolveLanguage:
    def test_mode_aware(self) -> None:
        assert resolve_language("asm", C64) == "asm6502"
        assert resolve_language("asm", COCO) == "asm6809"
        assert resolve_language("basic", C64) == "basic-cbm"
        assert resolve_language("basic", COCO) == "basic-ecb"

    def test_concrete_passes_through(self) -> None:
        assert resolve_language("basic-ms", COCO) == "basic-ms"


class TestDialectForFile:
    def test_asm_follows_platform(self) -> None:
        assert dialect_for_file("main.asm", C64) is ASM6502
        assert dialect_for_file("main.asm", COCO) is ASM6809

    def test_basic_follows_platform(self) -> None:
        assert dialect_for_file("prog.bas", C64) is BASIC_CBM
        assert dialect_for_file("prog.bas", COCO) is BASIC_ECB

    def test_unknown_extension_is_text(self) -> None:
        assert dialect_for_file("notes.txt", C64) is PLAIN_TEXT

    def test_bad_mapping_raises(self) -> None:
        with pytest.raises(UnknownDialect):
            dialect_for_file("x.z80", C64, {"z80": "z80"})


class TestDisplayName:
    def test_mode_aware(self) -> None:
        assert display_name("asm", C64) == "Assembly (Commodore 64)"
        assert display_name("basic", COCO) == "BASIC (TRS-80 Color Computer)"

    def test_concrete(self) -> None:
        assert display_name("basic-ecb", C64) == "Extended Color BASIC"
        assert display_name("asm6809", C64) == "6809 Assembly"
        assert display_name("text", C64) == "Plain Text"
