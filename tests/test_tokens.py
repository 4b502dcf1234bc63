"""Test class Token and its lookup tables."""
from pydantic import ValidationError
import pytest

from arithmetic_interpreter.common.tokens import KEYWORDS, SYMBOLS, Token, TokenKind, format_tokens


@pytest.mark.parametrize("kind,expected", [
    (TokenKind.PLUS, 1),
    (TokenKind.MINUS, 1),
    (TokenKind.ASTERISK, 2),
    (TokenKind.SLASH, 2),
    (TokenKind.POWER, 3),
    (TokenKind.OPEN_PAREN, 3),
    (TokenKind.SIN, 4),
    (TokenKind.LOG, 4),
    (TokenKind.PI, 5),
])
def test_precedence(kind, expected):
    """Operator-class tokens expose their precedence level."""
    assert Token.of(kind).precedence == expected


def test_precedence_undefined_for_operands():
    """Numbers have no precedence."""
    with pytest.raises(ValueError):
        Token.number(1.0).precedence


def test_number_requires_finite_value():
    """Number tokens must carry a finite value."""
    with pytest.raises(ValidationError):
        Token(kind=TokenKind.NUMBER)
    with pytest.raises(ValidationError):
        Token.number(float("inf"))


def test_payload_only_on_matching_kind():
    """Values and names are rejected on tokens that cannot carry them."""
    with pytest.raises(ValidationError):
        Token(kind=TokenKind.PLUS, value=1.0)
    with pytest.raises(ValidationError):
        Token(kind=TokenKind.PI, name="pi")


def test_token_is_immutable():
    """Tokens are frozen."""
    token = Token.number(1.0)
    with pytest.raises(ValidationError):
        token.value = 2.0


def test_token_equality():
    """Tokens compare by kind and payload."""
    assert Token.number(2.0) == Token.number(2.0)
    assert Token.number(2.0) != Token.number(3.0)
    assert Token.identifier("x") == Token.identifier("x")
    assert Token.of(TokenKind.PLUS) != Token.of(TokenKind.MINUS)


def test_predicates():
    """Classification helpers agree with the token kind."""
    assert Token.of(TokenKind.PI).is_operand
    assert Token.identifier("x").is_operand
    assert Token.of(TokenKind.SIN).is_function
    assert Token.of(TokenKind.SIN).is_operator
    assert Token.of(TokenKind.MINUS).is_sign
    assert not Token.of(TokenKind.ASTERISK).is_sign
    assert not Token.of(TokenKind.OPEN_PAREN).is_operator


def test_tables_cover_symbols_and_keywords():
    """Every single-character symbol and keyword maps to a token kind."""
    assert set(SYMBOLS) == set("*-+/^()")
    assert set(KEYWORDS) == {"sin", "cos", "tan", "log", "pi"}


def test_format_tokens():
    """format_tokens joins the display form of each token."""
    tokens = [
        Token.of(TokenKind.OPEN_PAREN),
        Token.of(TokenKind.SIN),
        Token.number(1.5),
        Token.of(TokenKind.CLOSE_PAREN),
        Token.of(TokenKind.ASTERISK),
        Token.identifier("x"),
    ]
    assert format_tokens(tokens) == "( sin 1.5 ) * x"
