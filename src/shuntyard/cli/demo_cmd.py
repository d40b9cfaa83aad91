"""Demo CLI command: run canned expressions and report pass/fail."""

import math

import click

from shuntyard.calculator import Calculator
from shuntyard.context import ExpressionContext, create_simple_context
from shuntyard.errors import ExpressionError

TOLERANCE = 1e-10

DEMO_SCENARIOS: list[tuple[str, float]] = [
    ("sin(3.14/2)>0", 1.0),
    ("cos(sin(3.14)+10)*20", -16.7640805693),
    ("-(10+3)", -13.0),
    ("-pi + 1", -2.14),
    ("myConst + (20+10)*3/2-3", 62.0),
    ("1+(-2*3+2)", -3.0),
    ("2^2", 4.0),
]


def create_demo_context() -> ExpressionContext:
    """Simple context plus sin, cos, ">" and the demo constants."""
    return (
        create_simple_context({"pi": 3.14, "myConst": 20})
        .with_unary_operator("sin", math.sin, precedence=4)
        .with_unary_operator("cos", math.cos, precedence=4)
        .with_binary_operator(">", lambda a, b: 1.0 if a > b else 0.0, precedence=1)
    )


@click.command()
def demo():
    """Evaluate the demo expressions and compare with expected values."""
    calc = Calculator(create_demo_context())
    failures = 0

    for expression, expected in DEMO_SCENARIOS:
        try:
            actual = calc.calculate(expression)
        except ExpressionError as e:
            failures += 1
            click.echo(click.style(f"[FAILURE] {{{expression}}} raised {e}", fg="red"))
            continue

        if abs(actual - expected) < TOLERANCE:
            click.echo(click.style(f"[OK] {{{expression}}} evaluated to {expected:g}", fg="green"))
        else:
            failures += 1
            click.echo(
                click.style(
                    f"[FAILURE] {{{expression}}} evaluated to {actual:g} instead of {expected:g}",
                    fg="red",
                )
            )

    if failures:
        click.echo(click.style(f"\n{failures} scenario(s) failed", fg="red", bold=True))
        raise SystemExit(1)

    click.echo(click.style(f"\nAll {len(DEMO_SCENARIOS)} scenarios passed.", fg="green", bold=True))
