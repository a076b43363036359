#!/usr/bin/env python3
"""
Romanized Manchu to Manchu script CLI.

Reads settings from manchu_converter.toml when present, or override with flags:

    python -m manchu_converter.cli "cooha be acaha"
    python -m manchu_converter.cli --file letter.txt --ignore-error
    python -m manchu_converter.cli --codepoints "takūrafi"
    python -m manchu_converter.cli --check --file - < letter.txt
"""

import argparse
import logging
import sys
from pathlib import Path

from manchu_converter.config import ConverterConfig, find_default_config
from manchu_converter.converter import ConversionError, ManchuConverter
from manchu_converter.log import setup_logging

logger = logging.getLogger(__name__)


def _read_input(args, parser: argparse.ArgumentParser) -> str:
    if args.text is not None and args.file is not None:
        parser.error("Give either TEXT or --file, not both.")
    if args.text is not None:
        return args.text
    if args.file == "-":
        return sys.stdin.read()
    if args.file is not None:
        path = Path(args.file)
        if not path.exists():
            parser.error(f"Input file not found: {path}")
        return path.read_text(encoding="utf-8")
    parser.error("No input: pass TEXT or --file.")


def _format_codepoints(lines) -> str:
    """One line per input line, one bracketed group per word."""
    out_lines = []
    for pairs in lines:
        groups = []
        for word, cps in pairs:
            if cps is None:
                groups.append(f"[{word}: ?]")
            else:
                groups.append("[" + " ".join(f"U+{cp:04X}" for cp in cps) + "]")
        out_lines.append(" ".join(groups))
    return "\n".join(out_lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert romanized Manchu to Manchu script"
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Romanized text to convert",
    )
    parser.add_argument(
        "--file",
        metavar="PATH",
        help="Read input from a UTF-8 file ('-' for stdin)",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect manchu_converter.toml)",
    )
    parser.add_argument(
        "--ignore-error",
        action="store_true",
        help="Pass unconvertible words through instead of failing",
    )
    parser.add_argument(
        "--codepoints",
        action="store_true",
        help="Print U+XXXX code points per word instead of text",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="List unconvertible words; exit 1 if there are any",
    )
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the converter summary and exit",
    )
    args = parser.parse_args(argv)

    # ── Settings ─────────────────────────────────────────────────────────

    config_path = Path(args.config) if args.config else find_default_config()
    try:
        cfg = ConverterConfig.from_file(config_path) if config_path else ConverterConfig()
    except (FileNotFoundError, ValueError) as e:
        parser.error(str(e))

    try:
        setup_logging(args.log_level or cfg.log_level, cfg.log_format)
    except ValueError as e:
        parser.error(str(e))
    if config_path:
        logger.debug("Loaded config from %s", config_path)

    conv = ManchuConverter(ignore_error=cfg.ignore_error or args.ignore_error)

    if args.summary:
        print(conv.summary())
        return 0

    text = _read_input(args, parser)

    # ── Check ────────────────────────────────────────────────────────────

    if args.check:
        bad = conv.find_unmappable(text)
        if bad:
            print("Unconvertible words:")
            for word in bad:
                print(f"  {word}")
            return 1
        print("All words convertible.")
        return 0

    # ── Convert ──────────────────────────────────────────────────────────

    try:
        if args.codepoints:
            print(_format_codepoints(conv.convert_codepoints(text)))
        else:
            print(conv.convert_text(text))
    except ConversionError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
