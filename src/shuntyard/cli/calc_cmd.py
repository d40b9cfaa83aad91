"""Calculator CLI commands: eval, rpn, tokens, functions."""

from pathlib import Path

import click

from shuntyard.builtins import create_builtin_registry
from shuntyard.calculator import Calculator
from shuntyard.config import CalculatorConfig
from shuntyard.context import ExpressionContext
from shuntyard.errors import ExpressionError
from shuntyard.functions import FunctionCategory
from shuntyard.scanner import tokenize
from shuntyard.steps import format_rpn


def _parse_constants(ctx, param, values: tuple[str, ...]) -> dict[str, float]:
    """Click callback turning NAME=VALUE pairs into a dict."""
    constants: dict[str, float] = {}
    for item in values:
        name, sep, raw = item.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=VALUE, got '{item}'")
        try:
            constants[name.strip()] = float(raw)
        except ValueError:
            raise click.BadParameter(f"'{raw}' is not a number") from None
    return constants


def _build_context(
    config_path: Path | None,
    with_functions: bool,
    constants: dict[str, float],
) -> ExpressionContext:
    """Resolve the context from --config (or SHUNTYARD_CONFIG) and flags."""
    if config_path is not None:
        config = CalculatorConfig.from_yaml(config_path)
    else:
        config = CalculatorConfig.from_env()

    registry = create_builtin_registry()
    if with_functions:
        config.functions = {
            **{name: None for name in registry.names()},
            **config.functions,
        }

    return config.build_context(registry).with_constants(constants)


def _fail(error: Exception) -> None:
    click.echo(click.style(f"Error: {error}", fg="red"), err=True)
    raise SystemExit(1)


def format_number(value: float) -> str:
    return f"{value:.12g}"


_context_options = [
    click.option(
        "--const",
        "constants",
        multiple=True,
        callback=_parse_constants,
        metavar="NAME=VALUE",
        help="Define a named constant (repeatable).",
    ),
    click.option(
        "--config",
        "config_path",
        default=None,
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="YAML configuration file (defaults to $SHUNTYARD_CONFIG).",
    ),
    click.option(
        "--with-functions",
        "-f",
        is_flag=True,
        default=False,
        help="Enable every built-in function, comparison operator and constant.",
    ),
]


def context_options(command):
    for option in reversed(_context_options):
        command = option(command)
    return command


@click.command("eval")
@click.argument("expression")
@context_options
@click.option("--rpn", "show_rpn", is_flag=True, default=False, help="Also print the RPN queue.")
def eval_cmd(expression: str, constants, config_path, with_functions: bool, show_rpn: bool):
    """Evaluate EXPRESSION and print the result."""
    try:
        calc = Calculator(_build_context(config_path, with_functions, constants))
        if show_rpn:
            click.echo(f"RPN: {format_rpn(calc.to_rpn(expression))}")
        click.echo(format_number(calc.calculate(expression)))
    except ExpressionError as e:
        _fail(e)


@click.command()
@click.argument("expression")
@context_options
def rpn(expression: str, constants, config_path, with_functions: bool):
    """Print EXPRESSION converted to Reverse Polish Notation."""
    try:
        calc = Calculator(_build_context(config_path, with_functions, constants))
        click.echo(format_rpn(calc.to_rpn(expression)))
    except ExpressionError as e:
        _fail(e)


@click.command()
@click.argument("expression")
def tokens(expression: str):
    """Print the tokens scanned from EXPRESSION, one per line."""
    for token in tokenize(expression):
        value = format_number(token.value) if isinstance(token.value, float) else token.value
        click.echo(f"{token.position:>4}  {token.type.name:<8} {value}")


@click.command()
def functions():
    """List the built-in function catalogue."""
    registry = create_builtin_registry()
    for category in FunctionCategory:
        defs = registry.list_by_category(category)
        if not defs:
            continue
        click.echo(click.style(category.value.capitalize(), bold=True))
        for func_def in defs:
            detail = f"arity {func_def.arity}, precedence {func_def.precedence}" if func_def.arity else "constant"
            click.echo(f"  {func_def.name:<6} {func_def.description} ({detail})")
