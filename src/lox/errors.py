"""Diagnostics reported while scanning Lox source.

The scanner never raises on bad input. It hands each problem to a sink
callable taking ``(line, message)``; :class:`ErrorReporter` is the sink the
CLI uses. Whether collected errors should stop later stages is the caller's
decision, made through :meth:`ErrorReporter.raise_if_errors`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO


@dataclass(frozen=True)
class Diagnostic:
    """A single lexical problem and the line it was found on."""

    line: int
    message: str

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


class LexerError(Exception):
    """Raised by a caller that refuses to continue past lexical errors."""

    def __init__(self, diagnostics: list[Diagnostic]):
        self.diagnostics = list(diagnostics)
        super().__init__("\n".join(str(d) for d in self.diagnostics))


@dataclass
class ErrorReporter:
    """Collects diagnostics in the order they are reported.

    Instances are callable, so one can be passed straight to the scanner::

        reporter = ErrorReporter(stream=sys.stderr)
        tokens = Scanner(source, reporter).scan_tokens()
        reporter.raise_if_errors()
    """

    stream: TextIO | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def __call__(self, line: int, message: str) -> None:
        self.error(line, message)

    def error(self, line: int, message: str) -> None:
        diagnostic = Diagnostic(line, message)
        self.diagnostics.append(diagnostic)
        if self.stream is not None:
            print(diagnostic, file=self.stream)

    @property
    def had_error(self) -> bool:
        return bool(self.diagnostics)

    def reset(self) -> None:
        """Forget collected diagnostics (the REPL does this per line)."""
        self.diagnostics.clear()

    def raise_if_errors(self) -> None:
        if self.diagnostics:
            raise LexerError(self.diagnostics)
