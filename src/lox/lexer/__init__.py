"""Lox lexer: single-pass scanner with error recovery."""

from lox.lexer.tokens import KEYWORDS, Token, TokenType
from lox.lexer.scanner import Scanner, scan

__all__ = ["KEYWORDS", "Token", "TokenType", "Scanner", "scan"]
