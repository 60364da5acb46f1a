"""Small string utilities: anagrams, palindromes, comparison, editing and case."""

from __future__ import annotations

import string
from enum import Enum
from itertools import groupby

__all__ = [
    "Comparison",
    "is_anagram",
    "is_palindrome",
    "collapse_duplicates",
    "append_with_space",
    "compare_strings",
    "insert_at",
    "move_hyphens_to_front",
    "to_lower",
    "to_upper",
    "substring",
]

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class Comparison(Enum):
    """Outcome of comparing two strings; the value is a readable message."""

    EQUAL = "Strings are Equal"
    FIRST_GREATER = "1st String is greater than 2nd String"
    SECOND_GREATER = "2nd String is greater than 1st String"
    DIFFERENT_LENGTH = "Strings are Not Equal"


def is_anagram(first: str, second: str) -> bool:
    """Tell whether the two strings hold the same characters in any order."""
    return len(first) == len(second) and sorted(first) == sorted(second)


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same backwards."""
    return text == text[::-1]


def collapse_duplicates(text: str) -> str:
    """Replace every run of equal adjacent characters by a single one."""
    return "".join(char for char, _ in groupby(text))


def append_with_space(destination: str, source: str) -> str:
    """Join ``source`` onto ``destination`` with one space between them."""
    return f"{destination} {source}"


def compare_strings(first: str, second: str) -> Comparison:
    """Compare two strings of equal length by their first differing character.

    Strings of different lengths are reported as ``DIFFERENT_LENGTH``.
    """
    if len(first) != len(second):
        return Comparison.DIFFERENT_LENGTH
    for a, b in zip(first, second):
        if a != b:
            return Comparison.FIRST_GREATER if a > b else Comparison.SECOND_GREATER
    return Comparison.EQUAL


def insert_at(text: str, insertion: str, position: int) -> str:
    """Insert ``insertion`` before the character at ``position``.

    Only positions of existing characters are honoured; for any other
    position the text comes back unchanged.
    """
    if 0 <= position < len(text):
        return text[:position] + insertion + text[position:]
    return text


def move_hyphens_to_front(text: str) -> str:
    """Move every hyphen to the front, keeping the other characters in order."""
    rest = text.replace("-", "")
    return "-" * (len(text) - len(rest)) + rest


def to_lower(text: str) -> str:
    """Convert ASCII capital letters to lower case, leaving the rest alone."""
    return text.translate(_TO_LOWER)


def to_upper(text: str) -> str:
    """Convert ASCII small letters to upper case, leaving the rest alone."""
    return text.translate(_TO_UPPER)


def substring(text: str, start: int, end: int) -> str:
    """Return the characters from ``start`` up to, not including, ``end``."""
    if end <= start:
        raise ValueError("end position must be greater than start position")
    if start < 0 or end > len(text):
        raise IndexError("substring bounds lie outside the text")
    return text[start:end]