"""Test class Lexer."""
import logging

import pytest

from arithmetic_interpreter.common.errors import InvalidNumber
from arithmetic_interpreter.common.lexer import Lexer
from arithmetic_interpreter.common.tokens import Token, TokenKind, format_tokens


def test_lex_basic():
    """Lex splits a simple expression into typed tokens."""
    tokens = Lexer.lex("3 + 4.5 * 2")
    assert tokens == [
        Token.number(3.0),
        Token.of(TokenKind.PLUS),
        Token.number(4.5),
        Token.of(TokenKind.ASTERISK),
        Token.number(2.0),
    ]


@pytest.mark.parametrize("spaced,compact", [
    ("10 * 10 - 1", "10*10-1"),
    ("10 * (10 + 1)", "10*(10+1)"),
    ("  2 ^ 3  ", "2^3"),
])
def test_lex_ignores_spaces(spaced, compact):
    """Spaces between tokens do not change the token sequence."""
    assert Lexer.lex(spaced) == Lexer.lex(compact)


@pytest.mark.parametrize("expr,expected", [
    ("sin 1", "sin 1.0"),
    ("COS 1", "cos 1.0"),
    ("Tan(2)", "tan ( 2.0 )"),
    ("log 100", "log 100.0"),
    ("pi", "pi"),
    ("PI", "pi"),
    ("2pi", "2.0 pi"),
    ("1 / 2 ^ 3", "1.0 / 2.0 ^ 3.0"),
])
def test_lex_keywords_and_symbols(expr, expected):
    """Keywords are matched case-insensitively and symbols map directly."""
    assert format_tokens(Lexer.lex(expr)) == expected


def test_lex_identifier_is_lowercased():
    """Unknown words become lowercase identifiers."""
    assert Lexer.lex("Foo + 1") == [
        Token.identifier("foo"),
        Token.of(TokenKind.PLUS),
        Token.number(1.0),
    ]


def test_lex_decimal_numbers():
    """Numbers may contain a single decimal point."""
    assert Lexer.lex("0.25") == [Token.number(0.25)]
    assert Lexer.lex("1.") == [Token.number(1.0)]
    assert Lexer.lex("12.5+3") == [Token.number(12.5), Token.of(TokenKind.PLUS), Token.number(3.0)]


@pytest.mark.parametrize("expr", [
    "1.2.3",
    "1..2",
    "2 + 3.4.5",
    "9" * 400,
])
def test_lex_rejects_malformed_numbers(expr):
    """Malformed or overflowing literals fail instead of being truncated."""
    with pytest.raises(InvalidNumber):
        Lexer.lex(expr)


def test_lex_drops_unknown_symbols_with_warning(caplog):
    """Unknown symbols produce no token and a logged warning."""
    with caplog.at_level(logging.WARNING, logger="arithmetic_interpreter"):
        tokens = Lexer.lex("1 % 2")

    assert tokens == [Token.number(1.0), Token.number(2.0)]
    assert any("Unknown symbol: `%`" in record.getMessage() for record in caplog.records)


def test_lex_drops_line_endings():
    """Carriage returns and newlines never produce tokens."""
    assert Lexer.lex("1 + 1\r\n") == Lexer.lex("1 + 1")


def test_lex_empty():
    """An empty string yields no tokens."""
    assert Lexer.lex("") == []


def test_lex_is_reentrant():
    """Successive calls do not share scanning state."""
    first = Lexer.lex("12 + 3")
    Lexer.lex("sin")
    assert Lexer.lex("12 + 3") == first
