"""Classic comparison sorts, each returning a new sorted list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from typing import Any, TextIO

__all__ = [
    "bubble_sort",
    "heap_sort",
    "merge_sort",
    "quick_sort",
    "insertion_sort",
    "selection_sort",
    "main",
]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order neighbours."""
    items = list(values)
    for boundary in range(len(items) - 1, 0, -1):
        swapped = False
        for i in range(boundary):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def _sift_down(items: list[Any], root: int, size: int) -> None:
    while True:
        left, right = 2 * root + 1, 2 * root + 2
        largest = root
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly extracting its root."""
    items = list(values)
    size = len(items)
    for start in range((size - 1) // 2, -1, -1):
        _sift_down(items, start, size)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves and merging the sorted halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the last element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front."""
    items = list(values)
    for j in range(len(items) - 1):
        smallest = min(range(j, len(items)), key=items.__getitem__)
        if smallest != j:
            items[j], items[smallest] = items[smallest], items[j]
    return items


ALGORITHMS: dict[str, Callable[[Iterable[Any]], list[Any]]] = {
    "bubble": bubble_sort,
    "heap": heap_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "insertion": insertion_sort,
    "selection": selection_sort,
}


def _read_values(stream: TextIO) -> list[int]:
    """Read a count followed by that many integers."""
    tokens = stream.read().split()
    if not tokens:
        return []
    size = int(tokens[0])
    if size < 0:
        raise ValueError("array size must not be negative")
    items = [int(token) for token in tokens[1 : 1 + size]]
    if len(items) < size:
        raise ValueError(f"expected {size} elements, got {len(items)}")
    return items


def main(argv: list[str] | None = None) -> int:
    """Sort integers given as arguments, or a count and elements read from stdin."""
    parser = argparse.ArgumentParser(prog="algobox-sort", description="Sort integers.")
    parser.add_argument(
        "-a", "--algorithm", choices=sorted(ALGORITHMS), default="merge"
    )
    parser.add_argument("values", nargs="*", type=int)
    args = parser.parse_args(argv)

    values = args.values
    if not values:
        try:
            values = _read_values(sys.stdin)
        except ValueError as exc:
            parser.error(str(exc))

    print("Array before sorting:", *values)
    print("Array after sorting:", *ALGORITHMS[args.algorithm](values))
    return 0


if __name__ == "__main__":
    sys.exit(main())