#!/usr/bin/env python3
"""
Command line front end.

    glyph 안녕하세요                     # auto-detect script
    glyph --script devanagari --scheme harvard नमस्ते
    glyph --file notes.txt
    echo 한국 | glyph
    glyph --list-schemes
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .encoding import InputDecoder
from .exceptions import GlyphException
from .scripts import SCHEMES, Script
from .suite import TransliteratorSuite
from .text import clean_text
from .utils.config import load_config
from .utils.logger import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glyph",
        description="Phonetic romanization of Hangul and Devanagari text.",
    )
    parser.add_argument("text", nargs="*", help="Text to transliterate (default: read stdin)")
    parser.add_argument("-f", "--file", help="Read input from a file (encoding auto-detected)")
    parser.add_argument(
        "-s", "--script",
        choices=[script.value for script in Script],
        help="Force a script instead of auto-detecting",
    )
    parser.add_argument("--scheme", help="Romanization scheme for --script")
    parser.add_argument("-c", "--config", default=None, help="Path to a TOML config file")
    parser.add_argument("--no-clean", action="store_true",
                        help="Keep zero-width and control characters in the input")
    parser.add_argument("--list-schemes", action="store_true",
                        help="Show the schemes of every script and exit")
    return parser


def _read_input(args) -> str:
    if args.file:
        with open(args.file, "rb") as f:
            return InputDecoder().decode(f.read())
    if args.text:
        return " ".join(args.text)
    return sys.stdin.read()


def _show_schemes(suite: TransliteratorSuite) -> None:
    for name in suite.supported_scripts():
        transliterator = suite.transliterators[Script(name)]
        print(f"{name}:")
        for scheme in SCHEMES[Script(name)]:
            info = transliterator.scheme_info(scheme)
            marker = "*" if scheme == transliterator.scheme else " "
            print(f"  {marker} {scheme:<11} {info.title} - {info.description}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.scheme and not args.script:
        parser.error("--scheme requires --script")

    if args.config and not Path(args.config).exists():
        print(f"glyph: config file not found: {args.config}", file=sys.stderr)
        return 2

    try:
        config = load_config(args.config)
        logger = setup_logging()
        suite = TransliteratorSuite(config)
    except (GlyphException, ValidationError) as e:
        print(f"glyph: {e}", file=sys.stderr)
        return 2

    if args.list_schemes:
        _show_schemes(suite)
        return 0

    if args.script and args.scheme and args.scheme not in SCHEMES[Script(args.script)]:
        print(
            f"glyph: unknown {args.script} scheme '{args.scheme}' "
            f"(choose from: {', '.join(SCHEMES[Script(args.script)])})",
            file=sys.stderr,
        )
        return 2

    try:
        text = _read_input(args)
    except OSError as e:
        print(f"glyph: {e}", file=sys.stderr)
        return 1

    if not args.no_clean:
        text = clean_text(text)

    logger.debug(f"Transliterating {len(text)} characters")
    if args.script:
        result = suite.transliterate_script(text, args.script, scheme=args.scheme)
    else:
        result = suite.auto_transliterate(text)

    print(result)
    return 0


def main_entry() -> None:
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
