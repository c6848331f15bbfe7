"""Recursive-descent recogniser for a handful of statement forms."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from minicc.tokens import Token, TokenType

_EOF = Token(TokenType.EOF, "")


class NodeType(IntEnum):
    """Kinds of syntax tree node."""

    VAR_DECLARATION = 0
    VAR_ASSIGNMENT = 1
    FUNCTION_DEF = 2
    RETURN_STATEMENT = 3
    IF_STATEMENT = 4
    WHILE_STATEMENT = 5
    EXPRESSION = 6


@dataclass
class ASTNode:
    """A syntax tree node with an optional value and two children."""

    type: NodeType
    value: str | None = None
    left: ASTNode | None = None
    right: ASTNode | None = None


class ParseError(Exception):
    """Raised when the parser cannot make progress on its input."""


class Parser:
    """Parses a token sequence.

    Each ``parse_*`` method consumes the tokens that match its form and
    returns ``None`` at the first token that does not, leaving the tokens it
    already consumed behind it.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.tokens = list(tokens)
        self.index = 0

    def _peek(self, offset: int = 0) -> Token:
        position = self.index + offset
        return self.tokens[position] if position < len(self.tokens) else _EOF

    def _accept(self, *kinds: TokenType) -> Token | None:
        token = self._peek()
        if token.type not in kinds:
            return None
        self.index += 1
        return token

    def parse_program(self) -> ASTNode | None:
        """Parse statements to the end of input and return the first one."""
        root = None
        while self.index < len(self.tokens) and self._peek().type is not TokenType.EOF:
            start = self.index
            statement = self.parse_statement()
            if root is None:
                root = statement
            if self.index == start:
                token = self._peek()
                raise ParseError(
                    f"unexpected token {token.lexeme!r} at position {start}"
                )
        return root

    def parse_statement(self) -> ASTNode | None:
        """Parse whichever statement form the next tokens begin."""
        kind = self._peek().type
        if kind is TokenType.INT:
            return self.parse_var_declaration()
        if kind is TokenType.IDENTIFIER:
            following = self._peek(1).type
            if following is TokenType.ASSIGN:
                return self.parse_var_assignment()
            if following is TokenType.LPAREN:
                return self.parse_function_def()
        if kind is TokenType.RETURN:
            return self.parse_return_statement()
        if kind is TokenType.IF:
            return self.parse_if_statement()
        if kind is TokenType.WHILE:
            return self.parse_while_statement()
        return None

    def parse_var_declaration(self) -> ASTNode | None:
        """Parse ``int NAME = NUMBER``; the node holds the name."""
        if self._accept(TokenType.INT) is None:
            return None
        name = self._accept(TokenType.IDENTIFIER)
        if name is None:
            return None
        if self._accept(TokenType.ASSIGN) is None:
            return None
        if self._accept(TokenType.NUMBER) is None:
            return None
        return ASTNode(NodeType.VAR_DECLARATION, name.lexeme)

    def parse_var_assignment(self) -> ASTNode | None:
        """Parse ``NAME = NUMBER``; the node holds the name."""
        name = self._accept(TokenType.IDENTIFIER)
        if name is None:
            return None
        if self._accept(TokenType.ASSIGN) is None:
            return None
        if self._accept(TokenType.NUMBER) is None:
            return None
        return ASTNode(NodeType.VAR_ASSIGNMENT, name.lexeme)

    def parse_function_def(self) -> ASTNode | None:
        """Parse ``NAME ( ) {``; the node holds the function name."""
        name = self._accept(TokenType.IDENTIFIER)
        if name is None:
            return None
        for kind in (TokenType.LPAREN, TokenType.RPAREN, TokenType.LBRACE):
            if self._accept(kind) is None:
                return None
        return ASTNode(NodeType.FUNCTION_DEF, name.lexeme)

    def parse_return_statement(self) -> ASTNode | None:
        """Parse ``return NAME`` or ``return NUMBER``."""
        if self._accept(TokenType.RETURN) is None:
            return None
        value = self._accept(TokenType.IDENTIFIER, TokenType.NUMBER)
        if value is None:
            return None
        return ASTNode(NodeType.RETURN_STATEMENT, value.lexeme)

    def _parse_conditional(self, keyword: TokenType, node_type: NodeType,
                           label: str) -> ASTNode | None:
        if self._accept(keyword) is None:
            return None
        if self._accept(TokenType.LPAREN) is None:
            return None
        self.parse_expression()
        if self._accept(TokenType.RPAREN) is None:
            return None
        if self._accept(TokenType.LBRACE) is None:
            return None
        return ASTNode(node_type, label)

    def parse_if_statement(self) -> ASTNode | None:
        """Parse ``if ( EXPR ) {``."""
        return self._parse_conditional(TokenType.IF, NodeType.IF_STATEMENT, "if")

    def parse_while_statement(self) -> ASTNode | None:
        """Parse ``while ( EXPR ) {``."""
        return self._parse_conditional(
            TokenType.WHILE, NodeType.WHILE_STATEMENT, "while"
        )

    def parse_expression(self) -> ASTNode | None:
        """Parse a single name or number."""
        token = self._accept(TokenType.IDENTIFIER, TokenType.NUMBER)
        if token is None:
            return None
        return ASTNode(NodeType.EXPRESSION, token.lexeme)


def parse_program(tokens: Iterable[Token]) -> ASTNode | None:
    """Parse ``tokens`` as a program and return its first statement."""
    return Parser(tokens).parse_program()