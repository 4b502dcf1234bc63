"""Token types produced by the lexer and consumed by the parser and evaluator."""
from enum import Enum
import math
from typing import Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TokenKind(str, Enum):
    """Every kind of token an expression can contain."""

    NUMBER = "Number"
    PLUS = "Plus"
    MINUS = "Minus"
    ASTERISK = "Asterisk"
    SLASH = "Slash"
    POWER = "Power"
    SIN = "Sin"
    COS = "Cos"
    TAN = "Tan"
    LOG = "Log"
    PI = "Pi"
    IDENTIFIER = "Identifier"
    OPEN_PAREN = "OpenParen"
    CLOSE_PAREN = "CloseParen"


# Single-character symbols
SYMBOLS: Dict[str, TokenKind] = {
    "*": TokenKind.ASTERISK,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    "/": TokenKind.SLASH,
    "^": TokenKind.POWER,
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
}

# Reserved words, matched case-insensitively
KEYWORDS: Dict[str, TokenKind] = {
    "sin": TokenKind.SIN,
    "cos": TokenKind.COS,
    "tan": TokenKind.TAN,
    "log": TokenKind.LOG,
    "pi": TokenKind.PI,
}

# Binding strength of operator-class tokens (higher binds tighter)
PRECEDENCE: Dict[TokenKind, int] = {
    TokenKind.PLUS: 1,
    TokenKind.MINUS: 1,
    TokenKind.ASTERISK: 2,
    TokenKind.SLASH: 2,
    TokenKind.OPEN_PAREN: 3,
    TokenKind.CLOSE_PAREN: 3,
    TokenKind.POWER: 3,
    TokenKind.SIN: 4,
    TokenKind.COS: 4,
    TokenKind.TAN: 4,
    TokenKind.LOG: 4,
    TokenKind.PI: 5,
}

FUNCTIONS = frozenset({TokenKind.SIN, TokenKind.COS, TokenKind.TAN, TokenKind.LOG})
SIGNS = frozenset({TokenKind.PLUS, TokenKind.MINUS})
BINARY_OPERATORS = frozenset(
    {TokenKind.PLUS, TokenKind.MINUS, TokenKind.ASTERISK, TokenKind.SLASH, TokenKind.POWER}
)
OPERANDS = frozenset({TokenKind.NUMBER, TokenKind.PI, TokenKind.IDENTIFIER})

_DISPLAY: Dict[TokenKind, str] = {
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.ASTERISK: "*",
    TokenKind.SLASH: "/",
    TokenKind.POWER: "^",
    TokenKind.SIN: "sin",
    TokenKind.COS: "cos",
    TokenKind.TAN: "tan",
    TokenKind.LOG: "log",
    TokenKind.PI: "pi",
    TokenKind.OPEN_PAREN: "(",
    TokenKind.CLOSE_PAREN: ")",
}


class Token(BaseModel):
    """
    Immutable tagged value produced by the lexer.

    Only ``NUMBER`` tokens carry a ``value`` and only ``IDENTIFIER`` tokens carry a ``name``.
    """

    model_config = ConfigDict(frozen=True)

    kind: TokenKind = Field(..., description="Kind of the token")
    value: Optional[float] = Field(default=None, description="Payload of a number token")
    name: Optional[str] = Field(default=None, description="Lowercase word of an identifier token")

    @model_validator(mode="after")
    def check_payload(self) -> "Token":
        """Ensure the payload matches the token kind."""
        if self.kind is TokenKind.NUMBER:
            if self.value is None or not math.isfinite(self.value):
                raise ValueError("Number token requires a finite value")
        elif self.value is not None:
            raise ValueError(f"{self.kind.value} token cannot carry a value")

        if self.kind is TokenKind.IDENTIFIER:
            if not self.name:
                raise ValueError("Identifier token requires a name")
        elif self.name is not None:
            raise ValueError(f"{self.kind.value} token cannot carry a name")
        return self

    @classmethod
    def of(cls, kind: TokenKind) -> "Token":
        """Build a token without payload."""
        return cls(kind=kind)

    @classmethod
    def number(cls, value: float) -> "Token":
        """Build a number token."""
        return cls(kind=TokenKind.NUMBER, value=value)

    @classmethod
    def identifier(cls, name: str) -> "Token":
        """Build an identifier token."""
        return cls(kind=TokenKind.IDENTIFIER, name=name)

    @property
    def is_operand(self) -> bool:
        return self.kind in OPERANDS

    @property
    def is_operator(self) -> bool:
        return self.kind in BINARY_OPERATORS or self.kind in FUNCTIONS

    @property
    def is_function(self) -> bool:
        return self.kind in FUNCTIONS

    @property
    def is_sign(self) -> bool:
        return self.kind in SIGNS

    @property
    def is_open_paren(self) -> bool:
        return self.kind is TokenKind.OPEN_PAREN

    @property
    def is_close_paren(self) -> bool:
        return self.kind is TokenKind.CLOSE_PAREN

    @property
    def precedence(self) -> int:
        """
        Precedence class used by the shunting-yard conversion.

        :return: Precedence level, from 1 (``+ -``) to 5 (``pi``)
        :rtype: int
        :raises ValueError: If the token is not an operator-class token
        """
        try:
            return PRECEDENCE[self.kind]
        except KeyError:
            raise ValueError(f"{self.kind.value} token has no precedence") from None

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return repr(self.value)
        if self.kind is TokenKind.IDENTIFIER:
            return self.name
        return _DISPLAY[self.kind]


def format_tokens(tokens: Iterable[Token]) -> str:
    """Join tokens into a single space-separated string, for tracing."""
    return " ".join(str(token) for token in tokens)
