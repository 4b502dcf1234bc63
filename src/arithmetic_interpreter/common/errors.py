"""Errors raised while tokenizing, parsing or evaluating an expression."""
from typing import Optional

from arithmetic_interpreter.common.tokens import TokenKind


class ParseError(ValueError):
    """
    Base class of every expression error.

    Each subclass carries a fixed, human-readable ``default_message`` which is shown to the user.
    """

    default_message: str = "Invalid expression"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message: str = message or self.default_message
        super().__init__(self.message)


class ExpressionEmpty(ParseError):
    """The input string is empty."""

    default_message = "Expression can not be empty"


class MissingExpression(ParseError):
    """An operator, function or power lacks an operand."""

    default_message = "Expression is incomplete!"


class ParensMismatch(ParseError):
    """Parentheses are not balanced."""

    default_message = "Parenthesis not closed or never opened!"


class DivisionByZero(ParseError):
    """The divisor of a division evaluates to exactly zero."""

    default_message = "Can not divide by 0"


class UnexpectedOperator(ParseError):
    """Two sign operators are adjacent in an illegal order (``+ +`` or ``- +``)."""

    def __init__(self, kind: TokenKind) -> None:
        self.kind: TokenKind = kind
        super().__init__(f"Unexpected operator: `{kind.value}`")


class InvalidNumber(ParseError):
    """A numeric literal cannot be read as a finite float (e.g. ``1.2.3``)."""

    def __init__(self, literal: str) -> None:
        self.literal: str = literal
        super().__init__(f"Invalid number literal: `{literal}`")


class UnknownIdentifier(ParseError):
    """A word matched no function or constant (only raised in strict mode)."""

    def __init__(self, name: str) -> None:
        self.name: str = name
        super().__init__(f"Unknown identifier: `{name}`")


class DomainError(ParseError):
    """A function or power has no real result for its operands."""

    def __init__(self, operation: str) -> None:
        self.operation: str = operation
        super().__init__(f"Math domain error in `{operation}`")
