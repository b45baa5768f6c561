"""Lox scanner: single-pass, hand-written tokenizer.

Design decisions:
- Maximal munch: two-character operators win whenever the next char is ``=``.
- ``//`` comments and whitespace are discarded, not tokenized.
- Lexical errors are reported to a sink and skipped; scanning never stops
  early, so one run surfaces every independent error.
- Strings may span lines and have no escape sequences.
"""

from __future__ import annotations

import logging
from typing import Callable

from lox.lexer.tokens import KEYWORDS, Token, TokenType

logger = logging.getLogger(__name__)

Report = Callable[[int, str], None]

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# first char -> (kind when followed by "=", kind otherwise)
ONE_OR_TWO_CHAR_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}

WHITESPACE = frozenset(" \r\t")


def _log_diagnostic(line: int, message: str) -> None:
    logger.warning("[line %d] Error: %s", line, message)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def _is_alphanumeric(ch: str) -> bool:
    return _is_alpha(ch) or _is_digit(ch)


class Scanner:
    """Turns Lox source text into a list of `Token` objects.

    Usage::

        reporter = ErrorReporter()
        tokens = Scanner(source_text, reporter).scan_tokens()

    A scanner makes exactly one pass over its source. Calling
    :meth:`scan_tokens` again returns the same list without rescanning.
    """

    def __init__(self, source: str, report: Report | None = None) -> None:
        self.source = source
        self.report: Report = report if report is not None else _log_diagnostic
        self.tokens: list[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1
        self._done = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def scan_tokens(self) -> list[Token]:
        """Scan the entire source and return the token list, ending in EOF."""
        if self._done:
            return self.tokens

        while not self._at_end():
            # Beginning of the next lexeme
            self.start = self.current
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        self._done = True
        logger.debug("scanned %d token(s) over %d line(s)", len(self.tokens), self.line)
        return self.tokens

    # ------------------------------------------------------------------
    # Token scanning
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Classify and consume the lexeme starting at ``self.start``."""
        ch = self._advance()

        if ch in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[ch])
        elif ch in ONE_OR_TWO_CHAR_TOKENS:
            with_equal, alone = ONE_OR_TWO_CHAR_TOKENS[ch]
            self._add_token(with_equal if self._match("=") else alone)
        elif ch == "/":
            if self._match("/"):
                self._skip_comment()
            else:
                self._add_token(TokenType.SLASH)
        elif ch in WHITESPACE:
            pass
        elif ch == "\n":
            self.line += 1
        elif ch == '"':
            self._scan_string()
        elif _is_digit(ch):
            self._scan_number()
        elif _is_alpha(ch):
            self._scan_identifier()
        else:
            self.report(self.line, "Unexpected character.")

    def _scan_string(self) -> None:
        """Scan a double-quoted string literal; the opening quote is consumed."""
        start_line = self.line
        while self._peek() != '"' and not self._at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._at_end():
            # Reported at the line scanning stopped on, not the opening line
            self.report(self.line, "Unterminated string.")
            return

        self._advance()  # closing quote
        self._add_token(
            TokenType.STRING,
            self.source[self.start + 1:self.current - 1],
            line=start_line,
        )

    def _scan_number(self) -> None:
        """Scan an integer or decimal literal; the value is always a float."""
        while _is_digit(self._peek()):
            self._advance()

        # A trailing "." is left for the next lexeme
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _scan_identifier(self) -> None:
        """Scan an identifier or keyword."""
        while _is_alphanumeric(self._peek()):
            self._advance()

        word = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(word, TokenType.IDENTIFIER))

    def _skip_comment(self) -> None:
        """Skip from ``//`` to end of line, leaving the newline unconsumed."""
        while self._peek() != "\n" and not self._at_end():
            self._advance()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> str:
        """Consume and return the current character."""
        ch = self.source[self.current]
        self.current += 1
        return ch

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it is ``expected``."""
        if self._at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        """Return the current character without consuming it, NUL at end."""
        if self._at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def _add_token(
        self,
        token_type: TokenType,
        literal: float | str | None = None,
        line: int | None = None,
    ) -> None:
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.line if line is None else line))


def scan(source: str, report: Report | None = None) -> list[Token]:
    """Scan ``source`` in one pass and return its tokens."""
    return Scanner(source, report).scan_tokens()
