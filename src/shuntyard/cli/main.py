"""shuntyard CLI entry point."""

import logging

import click


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool):
    """shuntyard: shunting-yard expression calculator CLI."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# Register subcommands
from shuntyard.cli.calc_cmd import eval_cmd, functions, rpn, tokens  # noqa: E402
from shuntyard.cli.demo_cmd import demo  # noqa: E402

cli.add_command(eval_cmd)
cli.add_command(rpn)
cli.add_command(tokens)
cli.add_command(functions)
cli.add_command(demo)
