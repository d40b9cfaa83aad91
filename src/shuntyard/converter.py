"""Shunting-yard conversion from infix tokens to an RPN queue.

Operator handling (p(o) is the precedence of operator o):

    If the token is an operator o1, then
      while there is an operator o2 at the top of the stack
          and p(o1) <= p(o2),
        pop o2 off the stack onto the output queue.
      Push o1 on the stack.

Ties pop, so operators of equal rank associate left to right. This applies
to "^" as well: 2^3^2 is (2^3)^2 = 64.

Unary operators use the unary trick: a Scalar(0.0) dummy is emitted before
the operator so it can be applied like a binary one. An operator counts as
unary when it directly follows another operator, a "(" or the start of the
expression; a word counts as unary whenever it names a unary operator.
"""

import logging

from shuntyard.context import ExpressionContext
from shuntyard.errors import (
    MalformedExpressionError,
    MissingPrecedenceError,
    UnmatchedParenthesisError,
    UnrecognizedUnaryError,
    UnresolvedIdentifierError,
)
from shuntyard.scanner import parse_expression
from shuntyard.steps import EvaluationStep, Scalar, create_step

logger = logging.getLogger(__name__)


class RPNVisitor:
    """Scanner visitor that builds the RPN queue for one expression.

    Usage:
        visitor = RPNVisitor(create_simple_context())
        parse_expression("1 + 2 * 3", visitor)
        steps = visitor.finish()
    """

    def __init__(self, context: ExpressionContext):
        self.context = context
        self.operators: list[str] = []
        self.output: list[EvaluationStep] = []
        # The start of the expression behaves like a preceding operator
        self.last_was_operator = True
        self.last_was_open_paren = False

    def on_digit(self, value: float) -> None:
        self.output.append(Scalar(value))
        self.last_was_operator = False
        self.last_was_open_paren = False

    def on_word(self, name: str) -> None:
        self.last_was_open_paren = False
        if self.context.is_unary(name):
            self.output.append(Scalar(0.0))
            self._push_operator(name)
            return

        if name not in self.context.constants:
            raise UnresolvedIdentifierError(name)

        self.output.append(Scalar(self.context.constants[name]))
        self.last_was_operator = False

    def on_operator(self, symbol: str) -> None:
        if symbol == "(":
            self.operators.append(symbol)
            self.last_was_open_paren = True
            return

        if symbol == ")":
            if self.last_was_open_paren:
                raise MalformedExpressionError("Empty parentheses '()'")
            self._close_group()
            return

        if self.last_was_operator:
            if not self.context.is_unary(symbol):
                raise UnrecognizedUnaryError(symbol)
            self.output.append(Scalar(0.0))

        self.last_was_open_paren = False
        self._push_operator(symbol)

    def finish(self) -> list[EvaluationStep]:
        """Flush the operator stack and return the completed queue."""
        while self.operators:
            name = self.operators.pop()
            if name == "(":
                raise UnmatchedParenthesisError("Missing ')' for an opening '('")
            self.output.append(create_step(self.context, name))
        return self.output

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _precedence(self, name: str) -> int:
        try:
            return self.context.operator_precedence[name]
        except KeyError:
            raise MissingPrecedenceError(name) from None

    def _push_operator(self, name: str) -> None:
        precedence = self._precedence(name)
        while self.operators and precedence <= self._precedence(self.operators[-1]):
            self.output.append(create_step(self.context, self.operators.pop()))
        self.operators.append(name)
        self.last_was_operator = True

    def _close_group(self) -> None:
        while self.operators and self.operators[-1] != "(":
            self.output.append(create_step(self.context, self.operators.pop()))
        if not self.operators:
            raise UnmatchedParenthesisError("Found ')' without a matching '('")
        self.operators.pop()


def convert_to_rpn(expression: str, context: ExpressionContext) -> list[EvaluationStep]:
    """Convert an infix expression into an RPN queue of evaluation steps.

    Args:
        expression: The infix expression string
        context: Operators, precedences and constants to resolve against

    Returns:
        The steps in evaluation order
    """
    visitor = RPNVisitor(context)
    parse_expression(expression, visitor)
    steps = visitor.finish()
    logger.debug("Converted %r to RPN: %s", expression, " ".join(str(s) for s in steps))
    return steps
