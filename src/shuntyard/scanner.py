"""Scanner for infix arithmetic expressions.

Splits an expression string into three classes of lexical events and
forwards each one to an ExpressionVisitor as soon as it is recognized:

- NUMBER: a floating-point literal (never signed, see below)
- WORD: a run of letters and underscores (constants and named functions)
- OPERATOR: "(" or ")", or a run of punctuation such as "+" or ">="

Leading signs are not part of number literals. "-10" scans as the operator
"-" followed by the number 10; the converter turns that into a unary minus.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol


class TokenType(Enum):
    """Classes of lexical events."""

    NUMBER = auto()
    WORD = auto()
    OPERATOR = auto()


@dataclass(frozen=True)
class Token:
    """A single scanned token.

    Attributes:
        type: The token class
        value: The number value, or the word/operator text
        position: Character offset of the token in the source string
    """

    type: TokenType
    value: float | str
    position: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, pos={self.position})"


class ExpressionVisitor(Protocol):
    """Receiver of scanner events."""

    def on_digit(self, value: float) -> None: ...

    def on_word(self, name: str) -> None: ...

    def on_operator(self, symbol: str) -> None: ...


# Longest standard float literal; the exponent needs at least one digit
NUMBER_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?")

PARENTHESES = ("(", ")")


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_word_char(char: str) -> bool:
    return char == "_" or ("a" <= char <= "z") or ("A" <= char <= "Z")


def skip_whitespace(expr: str, pos: int) -> int:
    """Return the first non-whitespace position at or after pos."""
    while pos < len(expr) and expr[pos].isspace():
        pos += 1
    return pos


def handle_digit(expr: str, pos: int, visitor: ExpressionVisitor) -> int:
    """Scan a number literal at pos, if one starts there."""
    if pos < len(expr) and is_digit(expr[pos]):
        match = NUMBER_PATTERN.match(expr, pos)
        visitor.on_digit(float(match.group()))
        return match.end()
    return pos


def handle_word(expr: str, pos: int, visitor: ExpressionVisitor) -> int:
    """Scan an identifier at pos, if one starts there."""
    start = pos
    while pos < len(expr) and is_word_char(expr[pos]):
        pos += 1
    if pos > start:
        visitor.on_word(expr[start:pos])
    return pos


def handle_operator(expr: str, pos: int, visitor: ExpressionVisitor) -> int:
    """Scan a parenthesis or an operator run at pos, if one starts there."""
    if pos >= len(expr) or is_digit(expr[pos]) or is_word_char(expr[pos]):
        return pos

    if expr[pos] in PARENTHESES:
        visitor.on_operator(expr[pos])
        return pos + 1

    start = pos
    pos += 1
    while pos < len(expr):
        char = expr[pos]
        if char.isspace() or is_digit(char) or is_word_char(char) or char in PARENTHESES:
            break
        pos += 1
    visitor.on_operator(expr[start:pos])
    return pos


def parse_expression(expr: str, visitor: ExpressionVisitor) -> None:
    """Drive the three handlers over expr until the input is exhausted.

    Whitespace is skipped before each round; a round tries number, word
    and operator recognition in that order.
    """
    pos = skip_whitespace(expr, 0)
    while pos < len(expr):
        pos = handle_digit(expr, pos, visitor)
        pos = handle_word(expr, pos, visitor)
        pos = handle_operator(expr, pos, visitor)
        pos = skip_whitespace(expr, pos)


class _TokenCollector:
    """Visitor that records events as Token objects.

    A token always starts at the first non-whitespace character after the
    previous one, so positions can be recovered from the token lengths.
    """

    def __init__(self, expr: str):
        self.expr = expr
        self.tokens: list[Token] = []
        self._cursor = 0

    def _record(self, token_type: TokenType, value: float | str, length: int) -> None:
        position = skip_whitespace(self.expr, self._cursor)
        self._cursor = position + length
        self.tokens.append(Token(token_type, value, position))

    def on_digit(self, value: float) -> None:
        start = skip_whitespace(self.expr, self._cursor)
        match = NUMBER_PATTERN.match(self.expr, start)
        self._record(TokenType.NUMBER, value, match.end() - start)

    def on_word(self, name: str) -> None:
        self._record(TokenType.WORD, name, len(name))

    def on_operator(self, symbol: str) -> None:
        self._record(TokenType.OPERATOR, symbol, len(symbol))


def tokenize(expr: str) -> list[Token]:
    """Scan the entire expression and return its tokens in order."""
    collector = _TokenCollector(expr)
    parse_expression(expr, collector)
    return collector.tokens
