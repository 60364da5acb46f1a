"""A four-operation calculator for expressions like ``3.5 * 2``."""

from __future__ import annotations

import operator as _op
import re
import sys

__all__ = ["calculate", "evaluate", "main"]

_OPERATIONS = {
    "+": _op.add,
    "-": _op.sub,
    "*": _op.mul,
    "/": _op.truediv,
}

_NUMBER = r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?"
_EXPRESSION = re.compile(rf"\s*({_NUMBER})\s*(\S)\s*({_NUMBER})\s*")


def calculate(left: float, operator: str, right: float) -> float:
    """Apply one of ``+ - * /`` to two numbers."""
    try:
        operation = _OPERATIONS[operator]
    except KeyError:
        raise ValueError("Invalid operator!") from None
    return float(operation(float(left), float(right)))


def evaluate(expression: str) -> float:
    """Evaluate ``<number> <operator> <number>``."""
    match = _EXPRESSION.fullmatch(expression)
    if match is None:
        raise ValueError(f"malformed expression: {expression!r}")
    left, operator, right = match.groups()
    return calculate(float(left), operator, float(right))


def main(argv: list[str] | None = None) -> int:
    """Evaluate an expression given as arguments or read from stdin."""
    if argv is None:
        argv = sys.argv[1:]
    expression = " ".join(argv) if argv else input("Enter calculation: ")
    try:
        result = evaluate(expression)
    except ZeroDivisionError:
        print("Division by zero!")
        return 1
    except ValueError as exc:
        print(exc)
        return 1
    print(f"{result:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())