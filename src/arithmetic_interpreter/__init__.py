"""Arithmetic expression interpreter: tokenizer, shunting-yard parser and postfix evaluator."""
from arithmetic_interpreter.common.errors import (
    DivisionByZero,
    DomainError,
    ExpressionEmpty,
    InvalidNumber,
    MissingExpression,
    ParensMismatch,
    ParseError,
    UnexpectedOperator,
    UnknownIdentifier,
)
from arithmetic_interpreter.common.interpreter import Interpreter, interpret

__all__ = [
    "DivisionByZero",
    "DomainError",
    "ExpressionEmpty",
    "InvalidNumber",
    "Interpreter",
    "MissingExpression",
    "ParensMismatch",
    "ParseError",
    "UnexpectedOperator",
    "UnknownIdentifier",
    "interpret",
]
