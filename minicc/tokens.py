"""Token kinds and the token record produced by the lexers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Kinds of token; the numeric values are the ones the CLI prints."""

    INT = 0
    RETURN = 1
    IDENTIFIER = 2
    NUMBER = 3
    LPAREN = 4
    RPAREN = 5
    LBRACE = 6
    RBRACE = 7
    SEMICOLON = 8
    PLUS = 9
    MINUS = 10
    MULTIPLY = 11
    DIVIDE = 12
    ASSIGN = 13
    EQ = 14
    NEQ = 15
    LT = 16
    GT = 17
    LE = 18
    GE = 19
    UNKNOWN = 20
    EOF = 21
    IF = 22
    ELSE = 23
    WHILE = 24
    FOR = 25
    CONTINUE = 26
    BREAK = 27
    SWITCH = 28
    CASE = 29
    DEFAULT = 30
    STRUCT = 31
    COMMA = 32
    STAR = 33
    SLASH = 34


@dataclass(frozen=True)
class Token:
    """A single lexical token: its kind and the text it was read from."""

    type: TokenType
    lexeme: str