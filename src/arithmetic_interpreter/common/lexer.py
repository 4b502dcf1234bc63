"""Turn raw expression text into a sequence of tokens."""
import math
from typing import Callable, List

from arithmetic_interpreter.common.errors import InvalidNumber
from arithmetic_interpreter.common.logger import logger
from arithmetic_interpreter.common.tokens import KEYWORDS, SYMBOLS, Token


class Lexer:
    """
    Scan an expression from left to right and emit typed tokens.

    Scanning rules:
        - Spaces between tokens are skipped
        - A digit starts a number made of digits and decimal points
        - A letter starts a word, matched case-insensitively against ``sin cos tan log pi``
        - ``* - + / ^ ( )`` map directly to operator and parenthesis tokens
        - Anything else is dropped with a warning

    The scan cursor lives only for the duration of one ``lex`` call, so a single
    Lexer can be shared freely.

    Examples:
        - ``"2*(pi + x)"`` gives ``2 * ( pi + x )`` where ``x`` is an identifier
    """

    @staticmethod
    def _scan_while(text: str, start: int, accept: Callable[[str], bool]) -> int:
        """
        Return the index of the first character at or after ``start`` rejected by ``accept``.

        :param str text: Expression being scanned
        :param int start: Index to start from
        :param accept: Predicate applied to each character

        :return: End index (exclusive) of the accepted run
        :rtype: int
        """
        end = start
        while end < len(text) and accept(text[end]):
            end += 1
        return end

    @staticmethod
    def _is_number_char(char: str) -> bool:
        return char.isdecimal() or char == "."

    @staticmethod
    def _read_number(literal: str) -> Token:
        """
        Convert a numeric literal into a number token.

        :param str literal: Run of digits and decimal points

        :return: Number token
        :rtype: Token
        :raises InvalidNumber: If the literal is malformed or not finite
        """
        try:
            value = float(literal)
        except ValueError:
            raise InvalidNumber(literal) from None

        # Very long literals overflow to inf
        if not math.isfinite(value):
            raise InvalidNumber(literal)
        return Token.number(value)

    @staticmethod
    def _read_word(word: str) -> Token:
        """Map a word to a function/constant token, or to an identifier."""
        lowered = word.lower()
        kind = KEYWORDS.get(lowered)
        if kind is None:
            return Token.identifier(lowered)
        return Token.of(kind)

    @staticmethod
    def lex(text: str) -> List[Token]:
        """
        Split an expression into tokens.

        :param str text: Arithmetic expression

        :return: Tokens in input order
        :rtype: List[Token]
        :raises InvalidNumber: If a numeric literal is malformed
        """
        tokens: List[Token] = []
        cursor = 0

        while cursor < len(text):
            char = text[cursor]

            if char == " ":
                cursor = Lexer._scan_while(text, cursor, lambda c: c == " ")
                continue

            if char.isdecimal():
                end = Lexer._scan_while(text, cursor, Lexer._is_number_char)
                tokens.append(Lexer._read_number(text[cursor:end]))
                cursor = end
                continue

            if char.isalpha():
                end = Lexer._scan_while(text, cursor, str.isalpha)
                tokens.append(Lexer._read_word(text[cursor:end]))
                cursor = end
                continue

            kind = SYMBOLS.get(char)
            if kind is None:
                logger.warning(f"⚠️ Unknown symbol: `{char}`")
            else:
                tokens.append(Token.of(kind))
            cursor += 1

        return tokens
