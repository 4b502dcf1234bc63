"""Evaluate a postfix token sequence with a single number stack."""
from collections import deque
import math
from typing import Callable, Deque, Dict, List

from arithmetic_interpreter.common.errors import (
    DivisionByZero,
    DomainError,
    MissingExpression,
    ParensMismatch,
    UnknownIdentifier,
)
from arithmetic_interpreter.common.logger import logger
from arithmetic_interpreter.common.tokens import Token, TokenKind


# Single-argument functions (log is base 10)
FUNCTIONS: Dict[TokenKind, Callable[[float], float]] = {
    TokenKind.SIN: math.sin,
    TokenKind.COS: math.cos,
    TokenKind.TAN: math.tan,
    TokenKind.LOG: math.log10,
}


class PostfixEvaluator:
    """
    Evaluate postfix sequences produced by ``ExpressionParser.parse``.

    Tokens are taken from the right end of the deque. Binary operators pop
    ``lhs`` first, then ``rhs``, so ``lhs`` is the second operand of the
    original infix expression: ``a - b`` computes ``rhs - lhs``.
    """

    @staticmethod
    def _apply_function(kind: TokenKind, operand: float) -> float:
        """
        Apply a single-argument function.

        :raises DomainError: If the operand is outside the function's domain
        """
        try:
            return FUNCTIONS[kind](operand)
        except ValueError:
            raise DomainError(kind.value.lower()) from None

    @staticmethod
    def _apply_binary(kind: TokenKind, lhs: float, rhs: float) -> float:
        """
        Apply a binary operator to the two popped operands.

        :param TokenKind kind: Operator kind
        :param float lhs: First popped operand (right-hand side of the infix expression)
        :param float rhs: Second popped operand (left-hand side of the infix expression)

        :return: Result of the operation
        :rtype: float
        :raises DivisionByZero: If a division has a zero divisor
        :raises DomainError: If a power has no real result
        """
        if kind is TokenKind.PLUS:
            return lhs + rhs
        if kind is TokenKind.ASTERISK:
            return lhs * rhs
        if kind is TokenKind.MINUS:
            return rhs - lhs
        if kind is TokenKind.SLASH:
            # Exact comparison, no tolerance
            if lhs == 0.0:
                raise DivisionByZero()
            return rhs / lhs
        if kind is TokenKind.POWER:
            try:
                return math.pow(rhs, lhs)
            except (ValueError, OverflowError):
                raise DomainError("^") from None
        raise ValueError(f"Not a binary operator: {kind.value}")

    @staticmethod
    def execute(postfix: Deque[Token], strict_identifiers: bool = False) -> float:
        """
        Evaluate a postfix sequence.

        The caller's deque is left untouched.

        :param Deque[Token] postfix: Postfix tokens, consumed from the right end
        :param bool strict_identifiers: Raise on identifiers instead of skipping them

        :return: Top of the number stack, or 0.0 if the stack is empty
        :rtype: float
        :raises MissingExpression: If an operator finds too few operands
        :raises DivisionByZero: If a division has a zero divisor
        :raises UnknownIdentifier: If an identifier is met in strict mode
        """
        pending: Deque[Token] = deque(postfix)
        stack: List[float] = []

        while pending:
            token = pending.pop()
            kind = token.kind

            if kind is TokenKind.NUMBER:
                stack.append(token.value)
            elif kind is TokenKind.PI:
                stack.append(math.pi)
            elif kind is TokenKind.IDENTIFIER:
                if strict_identifiers:
                    raise UnknownIdentifier(token.name)
                logger.debug(f"🔎 Skipping unbound identifier `{token.name}`")
            elif token.is_function:
                if not stack:
                    raise MissingExpression()
                stack.append(PostfixEvaluator._apply_function(kind, stack.pop()))
            elif token.is_operator:
                if len(stack) < 2:
                    raise MissingExpression()
                lhs = stack.pop()
                rhs = stack.pop()
                stack.append(PostfixEvaluator._apply_binary(kind, lhs, rhs))
            else:
                # Parentheses never survive a successful parse
                raise ParensMismatch()

        return stack.pop() if stack else 0.0
