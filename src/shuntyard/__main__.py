"""Run the shuntyard CLI.

Usage:
    python -m shuntyard eval "1 + 2 * 3"
    python -m shuntyard demo
"""

from shuntyard.cli.main import cli


def main():
    cli(prog_name="shuntyard")


if __name__ == "__main__":
    main()
