"""Tests for evaluation steps and the step factory."""

import dataclasses
import math
import operator

import pytest

from shuntyard import (
    BinaryOp,
    EvaluationError,
    MalformedExpressionError,
    Scalar,
    UnaryTrickOp,
    UnknownOperatorError,
    create_simple_context,
    create_step,
    format_rpn,
)


class TestScalar:
    def test_pushes_value(self):
        stack = [1.0]
        Scalar(2.5).apply(stack)
        assert stack == [1.0, 2.5]

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Scalar(1.0).value = 2.0


class TestBinaryOp:
    def test_pops_right_then_left(self):
        stack = [10.0, 4.0]
        BinaryOp("-", operator.sub).apply(stack)
        assert stack == [6.0]

    def test_leaves_lower_values_alone(self):
        stack = [7.0, 8.0, 2.0]
        BinaryOp("/", operator.truediv).apply(stack)
        assert stack == [7.0, 4.0]

    @pytest.mark.parametrize("stack", [[], [1.0]])
    def test_needs_two_values(self, stack):
        with pytest.raises(MalformedExpressionError):
            BinaryOp("*", operator.mul).apply(stack)

    def test_function_error_is_wrapped(self):
        with pytest.raises(EvaluationError) as exc_info:
            BinaryOp("/", operator.truediv).apply([1.0, 0.0])
        assert isinstance(exc_info.value.__cause__, ZeroDivisionError)


class TestUnaryTrickOp:
    def test_discards_dummy_below_operand(self):
        stack = [7.0, 0.0, 2.0]
        UnaryTrickOp("neg", operator.neg).apply(stack)
        assert stack == [7.0, -2.0]

    def test_dummy_value_is_ignored(self):
        stack = [123.0, 0.0]
        UnaryTrickOp("cos", math.cos).apply(stack)
        assert stack == [1.0]

    def test_needs_two_values(self):
        with pytest.raises(MalformedExpressionError):
            UnaryTrickOp("sin", math.sin).apply([1.0])

    def test_domain_error_is_wrapped(self):
        with pytest.raises(EvaluationError):
            UnaryTrickOp("sqrt", math.sqrt).apply([0.0, -1.0])


class TestCreateStep:
    def test_binary_table_wins(self):
        step = create_step(create_simple_context(), "-")
        assert isinstance(step, BinaryOp)
        assert step.name == "-"

    def test_unary_only_name(self):
        ctx = create_simple_context().with_unary_operator("sin", math.sin, 4)
        step = create_step(ctx, "sin")
        assert isinstance(step, UnaryTrickOp)
        assert step.fn is math.sin

    def test_unknown_name(self):
        with pytest.raises(UnknownOperatorError) as exc_info:
            create_step(create_simple_context(), "%")
        assert exc_info.value.name == "%"


def test_format_rpn():
    steps = [Scalar(1.0), Scalar(2.5), BinaryOp("+", operator.add)]
    assert format_rpn(steps) == "1 2.5 +"
