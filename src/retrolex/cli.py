"""Command-line interface for retrolex."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from retrolex.dialects import DialectDescriptor
from retrolex.errors import RetrolexError
from retrolex.modes import (
    DEFAULT_PLATFORM,
    Platform,
    detect_language,
    resolve_dialect,
    resolve_dialect_or_plain,
    resolve_language,
    resolve_platform,
)

CONFIG_NAME = "retrolex.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    platform: Platform
    dialect: DialectDescriptor
    title: str | None
    dump: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="retrolex",
        description="Syntax highlighter for 8-bit assembly and BASIC dialects",
    )
    p.add_argument("input", help="Input source file")
    p.add_argument("-o", "--output", help="Output HTML file (default: stdout)")
    p.add_argument(
        "--platform",
        metavar="ID",
        help=f"Project platform deciding .asm/.bas dialects (default: {DEFAULT_PLATFORM})",
    )
    p.add_argument(
        "--dialect",
        metavar="MODE",
        help="Force a dialect (asm6502, asm6809, basic-ms, basic-ecb, basic-cbm, text)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--title", help="Document title")
    p.add_argument("--dump", action="store_true", help="Dump classified spans to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags. Raises RetrolexError for
    an unknown platform or --dialect and ArgumentTypeError for a malformed config.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    # Platform: default < config < CLI
    platform_id = DEFAULT_PLATFORM
    cfg_platform = config.get("platform")
    if isinstance(cfg_platform, str):
        platform_id = cfg_platform
    if args.platform:
        platform_id = args.platform
    platform = resolve_platform(platform_id)

    # Extra extension mappings come from config only
    extensions: dict[str, str] = {}
    cfg_ext = config.get("extensions")
    if isinstance(cfg_ext, dict):
        for k, v in cfg_ext.items():
            extensions[str(k)] = str(v)

    # Dialect: detected < config < CLI. Only an explicit --dialect must name a
    # known dialect; config and extension mappings fall back to plain text.
    cfg_dialect = config.get("dialect")
    if args.dialect:
        dialect = resolve_dialect(args.dialect)
    elif isinstance(cfg_dialect, str):
        dialect = resolve_dialect_or_plain(cfg_dialect)
    else:
        language = detect_language(input_file.name, extensions)
        dialect = resolve_dialect_or_plain(resolve_language(language, platform))

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        platform=platform,
        dialect=dialect,
        title=args.title,
        dump=args.dump,
    )


def highlight_file(options: CliOptions) -> str:
    """Read and render a source file to HTML."""
    from retrolex.debug import dump_spans
    from retrolex.render import render

    source = options.input_file.read_text(encoding="utf-8")

    if options.dump:
        dump_spans(source, options.dialect, file=sys.stderr)

    title = options.title if options.title is not None else options.input_file.name
    return render(source, options.dialect, title=title)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except RetrolexError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    try:
        html = highlight_file(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.input_file}: {exc}", file=sys.stderr)
        return 1

    if options.output_file:
        options.output_file.write_text(html, encoding="utf-8")
    else:
        sys.stdout.write(html)

    return 0
