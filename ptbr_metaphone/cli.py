"""Command-line interface for the Brazilian-Portuguese Metaphone.

WHY: Users want to check a code quickly ("what does 'exceção' encode
to?") or batch-encode a word list from a shell pipeline without writing
Python. The analyze command shows exactly what a search index would
store for a piece of text.

HOW: argparse with two subcommands. ``encode`` takes words as arguments
or one per line on stdin and prints ``word<TAB>code`` lines. ``analyze``
runs a tokenizer plus the phonetic filter and prints one token per line
or a JSON array. Errors go to stderr; results go to stdout so the CLI
can be piped.

RULES:
- encode: blank words report "Error: ..." on stderr, exit status 1, but
  the remaining words are still encoded
- encode --codes-only prints just the codes
- analyze --inject/--no-inject overrides PTBR_METAPHONE_INJECT
- analyze --json prints a JSON list of token dicts
- --verbose turns on DEBUG logging
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable, List, Optional

from ptbr_metaphone import __version__, config
from ptbr_metaphone.analysis import TOKENIZERS, analyze
from ptbr_metaphone.core.errors import InvalidInput
from ptbr_metaphone.core.metaphone import encode


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _read_stdin_words() -> List[str]:
    return [line.rstrip("\n") for line in sys.stdin if line.strip()]


def _encode_words(words: Iterable[str], codes_only: bool) -> int:
    """Encode each word and print results; return the number of failures."""
    failures = 0
    for word in words:
        try:
            code = encode(word)
        except InvalidInput as e:
            _status("Error: {} ({!r})".format(e, word))
            failures += 1
            continue
        if codes_only:
            print(code)
        else:
            print("{}\t{}".format(word, code))
    return failures


def _run_encode(args: argparse.Namespace) -> None:
    words = args.words if args.words else _read_stdin_words()
    if not words:
        _status("Error: No words given (pass them as arguments or on stdin).")
        sys.exit(1)

    failures = _encode_words(words, args.codes_only)
    if failures:
        sys.exit(1)


def _run_analyze(args: argparse.Namespace) -> None:
    try:
        tokens = analyze(args.text, tokenizer=args.tokenizer, inject=args.inject)
    except ValueError as e:
        _status("Error: {}".format(e))
        sys.exit(1)

    if args.json:
        print(json.dumps([t.to_dict() for t in tokens], ensure_ascii=False, indent=2))
        return

    for token in tokens:
        print("{}\t{}\t{}-{}".format(
            token.text, token.position_increment, token.start, token.end,
        ))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running anything.
    """
    parser = argparse.ArgumentParser(
        prog="ptbr_metaphone",
        description="Phonetic codes for Brazilian-Portuguese words (Metaphone).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser(
        "encode",
        help="Encode words (arguments, or one per line on stdin).",
    )
    encode_parser.add_argument(
        "words",
        nargs="*",
        help="Words or hyphenated compounds to encode.",
    )
    encode_parser.add_argument(
        "--codes-only",
        action="store_true",
        help="Print only the codes, one per line.",
    )
    encode_parser.set_defaults(handler=_run_encode)

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Tokenize text and apply the phonetic filter.",
    )
    analyze_parser.add_argument(
        "text",
        help="Text to analyze.",
    )
    analyze_parser.add_argument(
        "--tokenizer",
        choices=sorted(TOKENIZERS.keys()),
        default=config.DEFAULT_TOKENIZER,
        help="Tokenizer to use (default: %(default)s).",
    )
    analyze_parser.add_argument(
        "--inject",
        action=argparse.BooleanOptionalAction,
        default=config.DEFAULT_INJECT,
        help="Keep original tokens and stack codes on them (default: %(default)s).",
    )
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Print tokens as a JSON array.",
    )
    analyze_parser.set_defaults(handler=_run_analyze)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args.handler(args)


if __name__ == "__main__":
    main()
