"""Evaluation steps: the items of an RPN queue.

A step is one of three frozen variants, each applied to a value stack:

- Scalar pushes a constant.
- BinaryOp pops the right operand, then the left one, and pushes
  fn(left, right).
- UnaryTrickOp pops the operand, then pops and discards the dummy operand
  the converter placed before it, and pushes fn(operand).

The dummy operand is how unary operators share the binary-shaped slot on the
stack: the converter emits Scalar(0.0) ahead of every unary operator, so
every operator step consumes exactly two values.
"""

from dataclasses import dataclass
from typing import Union

from shuntyard.context import BinaryFunction, ExpressionContext, UnaryFunction
from shuntyard.errors import (
    EvaluationError,
    MalformedExpressionError,
    UnknownOperatorError,
)


@dataclass(frozen=True)
class Scalar:
    """Push a constant value."""

    value: float

    def apply(self, stack: list[float]) -> None:
        stack.append(self.value)

    def __str__(self) -> str:
        return f"{self.value:g}"


@dataclass(frozen=True)
class BinaryOp:
    """Apply a two-argument function to the top two values."""

    name: str
    fn: BinaryFunction

    def apply(self, stack: list[float]) -> None:
        _require_operands(stack, self.name)
        right = stack.pop()
        left = stack.pop()
        stack.append(_call(self.name, self.fn, left, right))

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class UnaryTrickOp:
    """Apply a one-argument function, discarding the dummy operand below it."""

    name: str
    fn: UnaryFunction

    def apply(self, stack: list[float]) -> None:
        _require_operands(stack, self.name)
        operand = stack.pop()
        stack.pop()  # unary trick dummy
        stack.append(_call(self.name, self.fn, operand))

    def __str__(self) -> str:
        return self.name


EvaluationStep = Union[Scalar, BinaryOp, UnaryTrickOp]


def _require_operands(stack: list[float], name: str) -> None:
    if len(stack) < 2:
        raise MalformedExpressionError(
            f"Operator '{name}' needs two values on the stack, found {len(stack)}"
        )


def _call(name: str, fn, *args: float) -> float:
    try:
        return float(fn(*args))
    except (ArithmeticError, ValueError) as e:
        raise EvaluationError(f"Error evaluating '{name}': {e}") from e


def create_step(context: ExpressionContext, name: str) -> EvaluationStep:
    """Create the step for an operator or function name.

    The binary table is searched first, so a name registered in both tables
    produces a BinaryOp.

    Raises:
        UnknownOperatorError: If the name is in neither table
    """
    if name in context.binary_operators:
        return BinaryOp(name, context.binary_operators[name])
    if name in context.unary_operators:
        return UnaryTrickOp(name, context.unary_operators[name])
    raise UnknownOperatorError(name)


def format_rpn(steps: list[EvaluationStep]) -> str:
    """Render a queue as space-separated RPN tokens."""
    return " ".join(str(step) for step in steps)
