"""Lox front end CLI entry point.

Usage:
    lox                         Start an interactive prompt
    lox repl                    Start an interactive prompt
    lox tokenize <file.lox>     Display the token stream of a file

Options:
    -h, --help                  Show this message
    --version                   Show the version
    -v, --verbose               Log scanner activity to stderr
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from lox.errors import ErrorReporter
from lox.lexer.scanner import Scanner

# sysexits.h codes, as used by the reference interpreter
EX_USAGE = 64
EX_DATAERR = 65


def main(argv: list[str] | None = None) -> int:
    args = list(argv if argv is not None else sys.argv[1:])

    verbose = False
    for flag in ("-v", "--verbose"):
        while flag in args:
            args.remove(flag)
            verbose = True
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s:%(name)s:%(message)s")

    if not args:
        return _cmd_repl()

    command = args[0]

    if command in ("--help", "-h"):
        print(__doc__.strip())
        return 0

    if command == "--version":
        from lox import __version__
        print(f"lox {__version__}")
        return 0

    if command == "repl":
        return _cmd_repl()

    if command != "tokenize":
        print(f"Error: unknown command '{command}'", file=sys.stderr)
        print(__doc__.strip(), file=sys.stderr)
        return EX_USAGE

    if len(args) != 2:
        print(f"Error: command '{command}' requires exactly one file argument", file=sys.stderr)
        return EX_USAGE

    filepath = Path(args[1])
    if not filepath.is_file():
        print(f"Error: file not found: {filepath}", file=sys.stderr)
        return EX_USAGE

    return _cmd_tokenize(filepath.read_text(encoding="utf-8"))


def _cmd_tokenize(source: str) -> int:
    """Display the token stream; exit with EX_DATAERR on lexical errors."""
    reporter = ErrorReporter(stream=sys.stderr)
    for tok in Scanner(source, reporter).scan_tokens():
        print(tok)
    return EX_DATAERR if reporter.had_error else 0


def _cmd_repl() -> int:
    """Scan one line at a time until end of input."""
    reporter = ErrorReporter(stream=sys.stderr)
    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            return 0
        for tok in Scanner(line, reporter).scan_tokens():
            print(tok)
        # An error on one line must not poison the rest of the session
        reporter.reset()


if __name__ == "__main__":
    sys.exit(main())
