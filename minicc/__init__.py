"""Lexer, token types and a simple statement recogniser for a small subset of C."""

__version__ = "0.1.0"
__all__ = ["tokens", "lexer", "parser", "cli"]