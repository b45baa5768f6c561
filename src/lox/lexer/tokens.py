"""Token types and Token dataclass for the Lox scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping


class TokenType(Enum):
    """Every distinct token the Lox scanner can produce."""

    # Single-character tokens
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # One or two character tokens
    BANG = auto()
    BANG_EQUAL = auto()         # !=
    EQUAL = auto()
    EQUAL_EQUAL = auto()        # ==
    GREATER = auto()
    GREATER_EQUAL = auto()      # >=
    LESS = auto()
    LESS_EQUAL = auto()         # <=

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


# Reserved words; read-only so no caller can extend the language at run time
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the scanner.

    ``lexeme`` is the exact source slice the token was scanned from.
    ``literal`` holds the decoded value for ``NUMBER`` (a float) and
    ``STRING`` (the text between the quotes) tokens, and is ``None`` for
    everything else. ``line`` is the 1-based line the lexeme began on.
    """

    type: TokenType
    lexeme: str
    literal: float | str | None
    line: int

    def __str__(self) -> str:
        literal = "nil" if self.literal is None else self.literal
        return f"{self.type.name} {self.lexeme} {literal}"

    def __repr__(self) -> str:
        if self.literal is None:
            return f"Token({self.type.name}, {self.lexeme!r}, line {self.line})"
        return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, line {self.line})"
