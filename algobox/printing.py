"""Text patterns: a greeting, a star diamond and a multiplication table."""

from __future__ import annotations

import argparse
import sys

__all__ = ["greeting", "diamond", "multiplication_table", "main"]


def greeting() -> str:
    """Return the classic greeting."""
    return "Hello World"


def diamond(rows: int) -> str:
    """Return a star diamond of ``rows`` rows growing then ``rows`` rows shrinking."""
    if rows < 0:
        raise ValueError("number of rows must not be negative")
    sizes = [*range(1, rows + 1), *range(rows, 0, -1)]
    return "".join(" " * (rows - size) + "* " * size + "\n" for size in sizes)


def multiplication_table(number: int, count: int) -> list[str]:
    """Return the lines ``number * i = product`` for i from 1 to ``count``."""
    return [f"{number} * {i} = {number * i}" for i in range(1, count + 1)]


def main(argv: list[str] | None = None) -> int:
    """Print a greeting, a diamond or a multiplication table."""
    parser = argparse.ArgumentParser(prog="algobox-print", description=main.__doc__)
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("hello", help="print the greeting")
    diamond_parser = commands.add_parser("diamond", help="print a star diamond")
    diamond_parser.add_argument("rows", type=int)
    table_parser = commands.add_parser("table", help="print a multiplication table")
    table_parser.add_argument("number", type=int)
    table_parser.add_argument("count", type=int)
    args = parser.parse_args(argv)

    if args.command == "hello":
        print(greeting())
    elif args.command == "diamond":
        if args.rows < 0:
            parser.error("number of rows must not be negative")
        print(diamond(args.rows), end="")
    else:
        for line in multiplication_table(args.number, args.count):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())