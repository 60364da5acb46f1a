"""A first-in, first-out queue built from singly linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Flag
from typing import Any

__all__ = ["Show", "LinkedQueue"]


class Show(Flag):
    """What :meth:`LinkedQueue.render` includes in its output."""

    DATA = 1
    LENGTH = 2
    BOTH = DATA | LENGTH


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class LinkedQueue:
    """Queue that adds at the rear and removes from the front."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._length = 0
        for value in values:
            self.enqueue(value)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear of the queue."""
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._length += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if self._front is None:
            raise IndexError("Queue empty! Nothing to remove!")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._length -= 1
        return node.value

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from front to rear."""
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def render(self, show: Show = Show.BOTH) -> str:
        """Return the chain of values, the length, or both, one per line."""
        lines = []
        if show & Show.DATA:
            lines.append("".join(f"{value} --> " for value in self) + "NULL\n")
        if show & Show.LENGTH:
            lines.append(f"Length : {self._length}\n")
        return "".join(lines)