"""Lox language front end: source text to tokens."""

__version__ = "0.1.0"
