"""Lexical analysis of a small C subset."""

from __future__ import annotations

import re
from collections.abc import Iterator

from minicc.tokens import Token, TokenType

_WHITESPACE = frozenset(" \t\n\v\f\r")
_END = "\0"

_KEYWORDS = {
    "int": TokenType.INT,
    "return": TokenType.RETURN,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "for": TokenType.FOR,
    "continue": TokenType.CONTINUE,
    "break": TokenType.BREAK,
    "switch": TokenType.SWITCH,
    "case": TokenType.CASE,
    "default": TokenType.DEFAULT,
    "struct": TokenType.STRUCT,
}

_SINGLE = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
}

# Characters that may combine with a following '=': (alone, with '=').
_WITH_EQUALS = {
    "=": (TokenType.ASSIGN, TokenType.EQ),
    "!": (None, TokenType.NEQ),
    "<": (TokenType.LT, TokenType.LE),
    ">": (TokenType.GT, TokenType.GE),
}


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_word_char(ch: str) -> bool:
    return _is_alpha(ch) or _is_digit(ch) or ch == "_"


class Lexer:
    """Reads tokens one at a time from source text.

    A NUL character ends the input, as does the end of the string.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    def _peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.source[index] if index < len(self.source) else _END

    def next_token(self) -> Token:
        """Return the next token; at the end of input, an EOF token every time."""
        while self._peek() in _WHITESPACE:
            self.pos += 1

        ch = self._peek()
        if ch == _END:
            return Token(TokenType.EOF, "")

        start = self.pos
        if _is_alpha(ch) or ch == "_":
            while _is_word_char(self._peek()):
                self.pos += 1
            word = self.source[start:self.pos]
            return Token(_KEYWORDS.get(word, TokenType.IDENTIFIER), word)

        if _is_digit(ch):
            while _is_digit(self._peek()):
                self.pos += 1
            return Token(TokenType.NUMBER, self.source[start:self.pos])

        self.pos += 1
        if ch in _SINGLE:
            return Token(_SINGLE[ch], ch)
        if ch in _WITH_EQUALS:
            alone, combined = _WITH_EQUALS[ch]
            if self._peek() == "=":
                self.pos += 1
                return Token(combined, ch + "=")
            if alone is not None:
                return Token(alone, ch)
        return Token(TokenType.UNKNOWN, ch)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return


def lex(source: str) -> list[Token]:
    """Return every token of ``source``, ending with the EOF token."""
    return list(Lexer(source))


_SIMPLE_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9]*|[0-9]+|[-+*/(){};]")

_SIMPLE_KEYWORDS = {
    "int": TokenType.INT,
    "return": TokenType.RETURN,
}

_SIMPLE_SINGLE = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ";": TokenType.SEMICOLON,
}


def tokenize(source: str) -> list[Token]:
    """Split ``source`` with the simpler scanner.

    Only ``int`` and ``return`` are keywords, identifiers hold letters and
    digits only, and any character it does not know is skipped. No EOF token
    is added.
    """
    text = source.split(_END, 1)[0]
    tokens = []
    for match in _SIMPLE_PATTERN.finditer(text):
        word = match.group()
        if _is_alpha(word[0]):
            kind = _SIMPLE_KEYWORDS.get(word, TokenType.IDENTIFIER)
        elif _is_digit(word[0]):
            kind = TokenType.NUMBER
        else:
            kind = _SIMPLE_SINGLE[word]
        tokens.append(Token(kind, word))
    return tokens