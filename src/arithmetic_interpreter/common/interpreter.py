"""Evaluate arithmetic expressions end to end."""
from pydantic import BaseModel, ConfigDict, Field

from arithmetic_interpreter.common.errors import ExpressionEmpty, ParseError
from arithmetic_interpreter.common.evaluator import PostfixEvaluator
from arithmetic_interpreter.common.lexer import Lexer
from arithmetic_interpreter.common.logger import logger
from arithmetic_interpreter.common.models import EvaluationResult
from arithmetic_interpreter.common.parser import ExpressionParser
from arithmetic_interpreter.common.tokens import format_tokens


class Interpreter(BaseModel):
    """
    Run the tokenizer, the parser and the evaluator on one expression.

    Design constraints:
        - No eval(), no dynamic code execution
        - No state kept between calls, so one instance can be shared
    """

    model_config = ConfigDict(frozen=True)

    strict_identifiers: bool = Field(
        default=False,
        description="Raise on unknown words instead of ignoring them",
    )

    def interpret(self, expression: str) -> float:
        """
        Evaluate an arithmetic expression.

        :param str expression: Arithmetic expression string

        :return: Computed result
        :rtype: float
        :raises ParseError: If the expression is empty, malformed or cannot be computed
        """
        if not expression:
            raise ExpressionEmpty()

        tokens = Lexer.lex(expression)
        logger.debug(f"🔤 Tokens: {format_tokens(tokens)}")

        postfix = ExpressionParser.parse(tokens)
        return PostfixEvaluator.execute(postfix, strict_identifiers=self.strict_identifiers)

    def evaluate(self, expression: str) -> EvaluationResult:
        """
        Evaluate an expression and capture the outcome instead of raising.

        :param str expression: Arithmetic expression string

        :return: Result or error message
        :rtype: EvaluationResult
        """
        try:
            result = self.interpret(expression)
        except ParseError as exc:
            logger.error(f"❌ Could not evaluate {expression!r}: {exc.message}")
            return EvaluationResult(expression=expression, error=exc.message)

        logger.debug(f"✅ {expression!r} evaluated to {result}")
        return EvaluationResult(expression=expression, result=result)


def interpret(expression: str) -> float:
    """
    Evaluate an arithmetic expression with the default settings.

    :param str expression: Arithmetic expression string

    :return: Computed result
    :rtype: float
    :raises ParseError: If the expression is empty, malformed or cannot be computed
    """
    return Interpreter().interpret(expression)
