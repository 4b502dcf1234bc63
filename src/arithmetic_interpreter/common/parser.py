"""Convert a token sequence into postfix (Reverse Polish) order."""
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, List, Optional, Tuple

from arithmetic_interpreter.common.errors import (
    MissingExpression,
    ParensMismatch,
    UnexpectedOperator,
)
from arithmetic_interpreter.common.logger import logger
from arithmetic_interpreter.common.tokens import Token, TokenKind, format_tokens


OPEN_PAREN: Token = Token.of(TokenKind.OPEN_PAREN)
CLOSE_PAREN: Token = Token.of(TokenKind.CLOSE_PAREN)

# Result of two adjacent signs; any pair missing here is illegal
SIGN_PAIRS: Dict[Tuple[TokenKind, TokenKind], TokenKind] = {
    (TokenKind.MINUS, TokenKind.MINUS): TokenKind.PLUS,
    (TokenKind.PLUS, TokenKind.MINUS): TokenKind.MINUS,
}


@dataclass
class _Wrapper:
    """A function call or power whose closing parenthesis is not emitted yet."""

    # Output position where the wrapper's open-parenthesis sits
    start: int
    # Parenthesis depth of the group taken as operand, None while waiting for the operand
    group_depth: Optional[int] = None


class ExpressionParser:
    """
    Rewrite a token sequence and convert it to postfix order.

    Algorithm:
        1. Grouping rewrite: wrap every function call and power in explicit parentheses
        2. Sign normalization: collapse chains of ``+`` / ``-`` into a single sign
        3. Shunting-yard: convert the infix sequence to postfix order

    The postfix sequence is built by prepending to a deque, so the evaluation
    order is obtained by popping from its right end.

    Examples:
        - Infix expression: 3 + 4 * 2
        - Deque built by the parser: ``+ * 2 4 3`` (read right to left: 3 4 2 * +)
    """

    @staticmethod
    def insert_groupings(tokens: List[Token]) -> List[Token]:
        """
        Wrap function calls and powers in explicit parentheses.

        ``sin x`` becomes ``( sin x )`` and ``a ^ b`` becomes ``( a ^ b )``, so the
        shunting-yard stage needs no special case for either.

        An operand is a single token, a parenthesized group, or a function applied
        to its own operand. A power base is the last emitted token, or the whole
        group when that token is a ``)``.

        The rewrite is a single pass: pending wrappers are kept on a stack and the
        open-parenthesis wrapping a base is recorded as a prefix count on the
        base's first token, so nesting depth never grows the call stack.

        :param List[Token] tokens: Tokens from the lexer

        :return: Rewritten tokens
        :rtype: List[Token]
        :raises MissingExpression: If a function or power lacks an operand
        :raises ParensMismatch: If an operand group is not balanced
        """
        output: List[Token] = []
        # Extra open-parentheses emitted before output[i]
        prefix_opens: List[int] = []
        # Start position of the group closed by output[i], for close-parentheses only
        group_start: List[Optional[int]] = []
        open_positions: List[int] = []
        wrappers: List[_Wrapper] = []

        def emit(token: Token, start: Optional[int] = None) -> None:
            output.append(token)
            prefix_opens.append(0)
            group_start.append(start)

        def close_wrappers() -> None:
            # A completed wrapper is itself the operand of a wrapper waiting below it
            while wrappers:
                emit(CLOSE_PAREN, wrappers.pop().start)
                if not wrappers or wrappers[-1].group_depth is not None:
                    break

        for token in tokens:
            waiting = bool(wrappers) and wrappers[-1].group_depth is None

            if token.is_function:
                wrappers.append(_Wrapper(start=len(output)))
                emit(OPEN_PAREN)
                emit(token)
            elif token.is_open_paren:
                open_positions.append(len(output))
                emit(token)
                if waiting:
                    wrappers[-1].group_depth = len(open_positions)
            elif waiting and (token.is_close_paren or token.kind is TokenKind.POWER):
                raise MissingExpression()
            elif token.is_close_paren:
                depth = len(open_positions)
                emit(token, open_positions.pop() if open_positions else None)
                if wrappers and wrappers[-1].group_depth == depth:
                    close_wrappers()
            elif token.kind is TokenKind.POWER:
                # Nothing emitted yet, or a group just opened, means there is no base
                if not output or output[-1].is_open_paren:
                    raise MissingExpression()
                if output[-1].is_close_paren:
                    start = group_start[-1]
                    if start is None:
                        raise ParensMismatch()
                else:
                    start = len(output) - 1
                prefix_opens[start] += 1
                wrappers.append(_Wrapper(start=start))
                emit(token)
            else:
                emit(token)
                if waiting:
                    close_wrappers()

        if wrappers:
            if wrappers[-1].group_depth is None:
                raise MissingExpression()
            raise ParensMismatch()

        rewritten: List[Token] = []
        for opens, token in zip(prefix_opens, output):
            rewritten.extend([OPEN_PAREN] * opens)
            rewritten.append(token)
        return rewritten

    @staticmethod
    def normalize_signs(tokens: List[Token]) -> List[Token]:
        """
        Collapse adjacent sign operators.

        Rules: ``- -`` gives ``+``, ``+ -`` gives ``-``; ``+ +`` and ``- +`` are rejected.
        Longer chains are folded from left to right.

        :param List[Token] tokens: Tokens after the grouping rewrite

        :return: Tokens without adjacent signs
        :rtype: List[Token]
        :raises MissingExpression: If a sign is the last token
        :raises UnexpectedOperator: If a ``+`` follows another sign
        """
        output: List[Token] = []
        index = 0

        while index < len(tokens):
            token = tokens[index]
            if not token.is_sign:
                output.append(token)
                index += 1
                continue

            sign = token.kind
            while True:
                if index + 1 >= len(tokens):
                    raise MissingExpression()
                following = tokens[index + 1]
                if not following.is_sign:
                    break
                combined = SIGN_PAIRS.get((sign, following.kind))
                if combined is None:
                    raise UnexpectedOperator(following.kind)
                sign = combined
                index += 1

            output.append(Token.of(sign))
            index += 1

        return output

    @staticmethod
    def to_rpn(tokens: List[Token]) -> Deque[Token]:
        """
        Convert an infix token sequence into postfix order using the Shunting-yard algorithm.

        :param List[Token] tokens: Rewritten and sign-normalized tokens

        :return: Postfix tokens, to be consumed from the right end
        :rtype: Deque[Token]
        :raises ParensMismatch: If the parentheses are not balanced
        """
        output: Deque[Token] = deque()
        stack: List[Token] = []

        for token in tokens:
            if token.is_operand:
                # Numbers, pi and identifiers go straight to the output
                output.appendleft(token)
            elif token.is_open_paren:
                stack.append(token)
            elif token.is_close_paren:
                while stack and not stack[-1].is_open_paren:
                    output.appendleft(stack.pop())
                if not stack:
                    raise ParensMismatch()
                # Discard the open-parenthesis
                stack.pop()
            else:
                # Operator: pop operators from stack with higher or equal precedence
                while (
                    stack
                    and not stack[-1].is_open_paren
                    and stack[-1].precedence >= token.precedence
                ):
                    output.appendleft(stack.pop())
                stack.append(token)

        # Drain remaining operators, stack top first
        while stack:
            token = stack.pop()
            if token.is_open_paren:
                raise ParensMismatch()
            output.appendleft(token)

        return output

    @staticmethod
    def parse(tokens: List[Token]) -> Deque[Token]:
        """
        Run the grouping rewrite, the sign normalization and the Shunting-yard conversion.

        :param List[Token] tokens: Tokens from the lexer

        :return: Postfix tokens, to be consumed from the right end
        :rtype: Deque[Token]
        :raises ParseError: If the expression is malformed
        """
        grouped = ExpressionParser.insert_groupings(tokens)
        logger.debug(f"🧩 Grouped: {format_tokens(grouped)}")

        normalized = ExpressionParser.normalize_signs(grouped)
        logger.debug(f"➕ Signs normalized: {format_tokens(normalized)}")

        postfix = ExpressionParser.to_rpn(normalized)
        logger.debug(f"📤 Postfix: {format_tokens(reversed(postfix))}")
        return postfix
