"""Array reversal and matrix multiplication."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["reversed_list", "matrix_multiply"]


def reversed_list(values: Iterable[Any]) -> list[Any]:
    """Return the elements of ``values`` in reverse order as a new list."""
    return list(values)[::-1]


def _shape(matrix: Sequence[Sequence[Any]], name: str) -> tuple[int, int]:
    if not matrix:
        raise ValueError(f"{name} matrix must have at least one row")
    columns = len(matrix[0])
    if columns == 0:
        raise ValueError(f"{name} matrix must have at least one column")
    if any(len(row) != columns for row in matrix):
        raise ValueError(f"{name} matrix rows must all have the same length")
    return len(matrix), columns


def matrix_multiply(
    left: Sequence[Sequence[Any]], right: Sequence[Sequence[Any]]
) -> list[list[Any]]:
    """Return the matrix product ``left x right``."""
    _, inner = _shape(left, "left")
    right_rows, _ = _shape(right, "right")
    if inner != right_rows:
        raise ValueError(
            f"cannot multiply: left has {inner} columns, right has {right_rows} rows"
        )
    right_columns = list(zip(*right))
    return [
        [sum(a * b for a, b in zip(row, column)) for column in right_columns]
        for row in left
    ]