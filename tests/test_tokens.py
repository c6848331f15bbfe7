import dataclasses

import pytest

from minicc.tokens import Token, TokenType


def test_token_equality_depends_on_type_and_lexeme():
    assert Token(TokenType.IDENTIFIER, "a") == Token(TokenType.IDENTIFIER, "a")
    assert not Token(TokenType.IDENTIFIER, "a") == Token(TokenType.NUMBER, "a")
    assert not Token(TokenType.IDENTIFIER, "a") == Token(TokenType.IDENTIFIER, "b")


def test_token_is_immutable():
    token = Token(TokenType.NUMBER, "10")
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.lexeme = "11"  # type: ignore[misc]
    assert token.lexeme == "10"


def test_token_type_round_trips_through_int():
    for kind in TokenType:
        assert TokenType(int(kind)) is kind


def test_token_type_values_are_consecutive_from_zero():
    looked_up = [TokenType(value) for value in range(len(TokenType))]
    assert len(set(looked_up)) == len(TokenType)
    assert [int(kind) for kind in looked_up] == list(range(len(TokenType)))


def test_token_type_first_value_is_int_keyword():
    assert TokenType(0) is TokenType.INT


def test_token_type_rejects_unknown_value():
    with pytest.raises(ValueError):
        TokenType(len(TokenType))


def test_tokens_are_hashable():
    seen = {Token(TokenType.PLUS, "+"), Token(TokenType.PLUS, "+")}
    assert len(seen) == 1