"""Dialect resolution: mode identifiers, project platforms, and file-type detection."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import PurePath

from retrolex.dialects import DIALECTS, PLAIN_TEXT, DialectDescriptor
from retrolex.errors import UnknownDialect, UnknownPlatform

logger = logging.getLogger(__name__)

# Languages whose concrete dialect depends on the project platform.
MODE_AWARE_LANGUAGES = ("asm", "basic")


@dataclass(frozen=True, slots=True)
class Platform:
    """A target computer: decides which assembly and BASIC dialects apply."""

    id: str
    name: str
    description: str
    assembly_dialect: str
    basic_dialect: str


PLATFORMS: dict[str, Platform] = {
    "c64": Platform(
        id="c64",
        name="Commodore 64",
        description="MOS 6502/6510 assembly, Commodore BASIC V2",
        assembly_dialect="asm6502",
        basic_dialect="basic-cbm",
    ),
    "coco": Platform(
        id="coco",
        name="TRS-80 Color Computer",
        description="Motorola 6809 assembly, Extended Color BASIC",
        assembly_dialect="asm6809",
        basic_dialect="basic-ecb",
    ),
}

DEFAULT_PLATFORM = "c64"

EXTENSIONS: dict[str, str] = {
    "asm": "asm",
    "s": "asm",
    "inc": "asm",
    "bas": "basic",
}


def _normalize_id(value: str) -> str:
    return value.strip().lower()


def resolve_dialect(mode_id: str) -> DialectDescriptor:
    """Return the descriptor for a mode identifier, or raise UnknownDialect."""
    try:
        return DIALECTS[_normalize_id(mode_id)]
    except KeyError:
        raise UnknownDialect(mode_id, DIALECTS) from None


def resolve_dialect_or_plain(mode_id: str) -> DialectDescriptor:
    """Like resolve_dialect(), but fall back to the no-highlighting dialect."""
    try:
        return resolve_dialect(mode_id)
    except UnknownDialect as exc:
        logger.warning("%s; highlighting disabled", exc.message)
        return PLAIN_TEXT


def resolve_platform(platform_id: str) -> Platform:
    try:
        return PLATFORMS[_normalize_id(platform_id)]
    except KeyError:
        raise UnknownPlatform(platform_id, PLATFORMS) from None


def detect_language(filename: str, extensions: Mapping[str, str] | None = None) -> str:
    """Map a file name to a language by extension; unknown extensions are "text".

    *extensions* adds to (and overrides) the built-in mapping; keys are
    extensions without the dot.
    """
    ext = PurePath(filename).suffix.lstrip(".").lower()
    if extensions:
        overrides = {k.lstrip(".").lower(): v for k, v in extensions.items()}
        if ext in overrides:
            return overrides[ext]
    return EXTENSIONS.get(ext, "text")


def resolve_language(language: str, platform: Platform) -> str:
    """Resolve "asm"/"basic" through the platform; other ids pass through."""
    language = _normalize_id(language)
    if language == "asm":
        return platform.assembly_dialect
    if language == "basic":
        return platform.basic_dialect
    return language


def dialect_for_file(
    filename: str,
    platform: Platform,
    extensions: Mapping[str, str] | None = None,
) -> DialectDescriptor:
    """Pick the dialect for a file; raises UnknownDialect for a bad extension mapping."""
    return resolve_dialect(resolve_language(detect_language(filename, extensions), platform))


def display_name(mode_id: str, platform: Platform) -> str:
    """Human-readable name for a language or dialect id."""
    mode_id = _normalize_id(mode_id)
    if mode_id == "asm":
        return f"Assembly ({platform.name})"
    if mode_id == "basic":
        return f"BASIC ({platform.name})"
    return resolve_dialect(mode_id).display_name
