"""Calculator facade: scan, convert to RPN, and evaluate on a value stack."""

import logging
from typing import Mapping

from shuntyard.context import ExpressionContext, create_simple_context
from shuntyard.converter import convert_to_rpn
from shuntyard.errors import MalformedExpressionError
from shuntyard.steps import EvaluationStep

logger = logging.getLogger(__name__)


class Calculator:
    """Evaluates infix expressions against a fixed context.

    The context is never modified, so one calculator can be shared freely.

    Usage:
        calc = Calculator(constants={"pi": 3.14})
        calc.calculate("-pi + 1")  # -2.14
    """

    def __init__(
        self,
        context: ExpressionContext | None = None,
        *,
        constants: Mapping[str, float] | None = None,
    ):
        if context is None:
            context = create_simple_context(constants)
        elif constants:
            context = context.with_constants(constants)
        self.context = context

    def to_rpn(self, expression: str) -> list[EvaluationStep]:
        """Return the RPN queue for an expression without evaluating it."""
        return convert_to_rpn(expression, self.context)

    def calculate(self, expression: str) -> float:
        """Evaluate an expression and return its value.

        Raises:
            ExpressionError: Any conversion or evaluation failure
            MalformedExpressionError: If evaluation does not leave exactly
                one value on the stack
        """
        stack: list[float] = []
        for step in self.to_rpn(expression):
            step.apply(stack)

        if len(stack) != 1:
            raise MalformedExpressionError(
                f"Expression {expression!r} left {len(stack)} values on the stack, expected 1"
            )

        logger.debug("Evaluated %r = %r", expression, stack[0])
        return stack[0]


def calculate(expression: str, context: ExpressionContext | None = None) -> float:
    """Evaluate an expression with a one-off calculator.

    Args:
        expression: The infix expression string
        context: Operators and constants; the simple arithmetic context if None
    """
    return Calculator(context).calculate(expression)
