"""Tests for the Calculator facade.

Tests cover:
- The reference scenarios from the demo harness
- Standard arithmetic with left-to-right evaluation of equal ranks
- Boundary inputs and malformed expressions
- Reuse and sharing of one calculator
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from shuntyard import (
    Calculator,
    EvaluationError,
    MalformedExpressionError,
    UnknownOperatorError,
    UnmatchedParenthesisError,
    UnrecognizedUnaryError,
    UnresolvedIdentifierError,
    calculate,
    create_simple_context,
)
from shuntyard.cli.demo_cmd import DEMO_SCENARIOS, create_demo_context


@pytest.fixture
def calc():
    return Calculator(create_demo_context())


# =============================================================================
# Reference scenarios
# =============================================================================


class TestScenarios:
    @pytest.mark.parametrize("expr,expected", DEMO_SCENARIOS)
    def test_scenario(self, calc, expr, expected):
        assert calc.calculate(expr) == pytest.approx(expected, abs=1e-10)

    def test_scenario_values(self):
        assert dict(DEMO_SCENARIOS) == {
            "sin(3.14/2)>0": 1.0,
            "cos(sin(3.14)+10)*20": -16.7640805693,
            "-(10+3)": -13.0,
            "-pi + 1": -2.14,
            "myConst + (20+10)*3/2-3": 62.0,
            "1+(-2*3+2)": -3.0,
            "2^2": 4.0,
        }


# =============================================================================
# Arithmetic
# =============================================================================


class TestArithmetic:
    @pytest.mark.parametrize(
        "expr,expected",
        [
            ("1+2*3-4/5", 1 + 2 * 3 - 4 / 5),
            ("(1+2)*(3+4)/7", (1 + 2) * (3 + 4) / 7),
            ("8/4/2", 8 / 4 / 2),
            ("10-4-3", 10 - 4 - 3),
            ("2*(3+(4-1))*2", 2 * (3 + (4 - 1)) * 2),
            ("1.5e2 + 0.5", 150.5),
            ("2^10", 1024.0),
        ],
    )
    def test_matches_python_arithmetic(self, expr, expected):
        assert calculate(expr) == pytest.approx(expected, abs=1e-10)

    def test_power_is_left_associative(self):
        assert calculate("2^3^2") == 64.0

    def test_unary_minus_binds_looser_than_power(self):
        assert calculate("-2^2") == -4.0

    def test_unary_plus(self):
        assert calculate("+5 - 2") == 3.0

    def test_parenthesized_unary(self):
        assert calculate("2*(-3)") == -6.0

    def test_comparison_operator(self, calc):
        assert calc.calculate("1 > 2") == 0.0
        assert calc.calculate("3 > 2") == 1.0

    def test_function_inside_expression(self, calc):
        assert calc.calculate("2*sin(0)+1") == 1.0


# =============================================================================
# Boundaries and errors
# =============================================================================


class TestBoundaries:
    def test_single_number(self):
        assert calculate("42") == 42.0

    def test_single_constant(self):
        assert Calculator(constants={"answer": 42}).calculate("answer") == 42.0

    @pytest.mark.parametrize("expr", ["", "   "])
    def test_empty_expression(self, expr):
        with pytest.raises(MalformedExpressionError):
            calculate(expr)

    def test_two_values_left_on_stack(self):
        with pytest.raises(MalformedExpressionError):
            calculate("1 2")

    def test_missing_right_operand(self):
        with pytest.raises(MalformedExpressionError):
            calculate("5*")

    def test_empty_group(self):
        with pytest.raises(MalformedExpressionError):
            calculate("()")

    def test_empty_group_between_operands(self):
        with pytest.raises(MalformedExpressionError):
            calculate("1+()2")

    def test_division_by_zero(self):
        with pytest.raises(EvaluationError):
            calculate("1/0")

    @pytest.mark.parametrize(
        "expr,error",
        [
            ("x + 1", UnresolvedIdentifierError),
            ("*5", UnrecognizedUnaryError),
            ("1 % 2", UnknownOperatorError),
            ("(1+2", UnmatchedParenthesisError),
            ("1+2)", UnmatchedParenthesisError),
        ],
    )
    def test_errors_propagate(self, expr, error):
        with pytest.raises(error):
            calculate(expr)


# =============================================================================
# Construction and reuse
# =============================================================================


class TestCalculator:
    def test_default_context_is_simple_arithmetic(self):
        calc = Calculator()
        assert calc.context.operator_precedence["^"] == 4
        assert calc.context.constants == {}

    def test_constants_merge_into_given_context(self):
        calc = Calculator(create_simple_context({"a": 1}), constants={"b": 2})
        assert calc.calculate("a+b") == 3.0

    def test_repeated_calls_are_identical(self, calc):
        results = {calc.calculate("cos(sin(3.14)+10)*20") for _ in range(5)}
        assert len(results) == 1

    def test_error_does_not_poison_later_calls(self, calc):
        with pytest.raises(UnmatchedParenthesisError):
            calc.calculate("(1")
        assert calc.calculate("1+1") == 2.0

    def test_shared_across_threads(self, calc):
        expressions = [expr for expr, _ in DEMO_SCENARIOS] * 20
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(calc.calculate, expressions))
        assert results == [calc.calculate(expr) for expr in expressions]

    def test_to_rpn(self, calc):
        assert [str(step) for step in calc.to_rpn("2^2")] == ["2", "2", "^"]
