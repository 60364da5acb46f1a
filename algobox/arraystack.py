"""A stack of fixed capacity, with an interactive menu to drive it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import Any

__all__ = ["StackOverflowError", "StackUnderflowError", "BoundedStack", "main"]

MAX_CAPACITY = 100


class StackOverflowError(IndexError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when taking from an empty stack."""


class BoundedStack:
    """Stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Any] = []

    @property
    def full(self) -> bool:
        return len(self._items) >= self.capacity

    def push(self, value: Any) -> None:
        """Put ``value`` on top, failing if the stack is full."""
        if self.full:
            raise StackOverflowError("Stack is overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value, failing if the stack is empty."""
        if not self._items:
            raise StackUnderflowError("Stack is underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value, failing if the stack is empty."""
        if not self._items:
            raise StackUnderflowError("Underflow")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        return reversed(self._items)


_MENU = "Stack Operations : Push = 1  Pop = 2  Peek = 3  Display = 4  End = 5\n"


def _ask_int(prompt: str) -> int | None:
    """Read an integer; None for malformed input. EOFError propagates."""
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _run_menu(stack: BoundedStack) -> None:
    while True:
        print(_MENU)
        try:
            choice = _ask_int("Enter your choice = ")
        except EOFError:
            return
        if choice == 1:
            if stack.full:
                print("Stack is overflow\n")
                continue
            try:
                value = _ask_int("Enter a value to be pushed : ")
            except EOFError:
                return
            if value is None:
                print("Invalid input. Please try again.\n")
                continue
            stack.push(value)
            print()
        elif choice == 2:
            try:
                print(f"The popped element is {stack.pop()}\n")
            except StackUnderflowError as exc:
                print(f"{exc}\n")
        elif choice == 3:
            try:
                print(f"The top element is {stack.peek()}\n")
            except StackUnderflowError as exc:
                print(f"{exc}\n")
        elif choice == 4:
            if len(stack):
                print("Stack :", *stack, "\n")
            else:
                print("The stack is empty.\n")
        elif choice == 5:
            return
        else:
            print("Invalid input. Please try again.\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive stack menu."""
    parser = argparse.ArgumentParser(prog="algobox-stack", description=main.__doc__)
    parser.add_argument("-c", "--capacity", type=int)
    args = parser.parse_args(argv)

    capacity = args.capacity
    if capacity is None:
        try:
            capacity = _ask_int(
                f"Enter the no. of elements in the stack (1 - {MAX_CAPACITY}) : "
            )
        except EOFError:
            return 1
    if capacity is None or not 1 <= capacity <= MAX_CAPACITY:
        print(f"Capacity must be between 1 and {MAX_CAPACITY}.")
        return 1
    print()
    _run_menu(BoundedStack(capacity))
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())