"""Searching in sorted sequences, in text, and over sliding windows."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import Any

__all__ = ["binary_search", "rabin_karp", "sliding_window_max", "contains_pattern"]

_BASE = 256


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the sorted ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        middle = low + (high - low) // 2
        if values[middle] == target:
            return middle
        if values[middle] < target:
            low = middle + 1
        else:
            high = middle - 1
    return None


def rabin_karp(text: str, pattern: str, modulus: int = 101) -> list[int]:
    """Return every index at which ``pattern`` occurs in ``text``.

    Candidate positions are found by a rolling hash modulo ``modulus`` and
    confirmed by direct comparison.
    """
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    m, n = len(pattern), len(text)
    if m > n:
        return []

    high_power = pow(_BASE, max(m - 1, 0), modulus)
    pattern_hash = window_hash = 0
    for p_char, t_char in zip(pattern, text):
        pattern_hash = (_BASE * pattern_hash + ord(p_char)) % modulus
        window_hash = (_BASE * window_hash + ord(t_char)) % modulus

    matches = []
    for i in range(n - m + 1):
        if pattern_hash == window_hash and text[i : i + m] == pattern:
            matches.append(i)
        if i < n - m:
            window_hash = (
                _BASE * (window_hash - ord(text[i]) * high_power) + ord(text[i + m])
            ) % modulus
    return matches


def sliding_window_max(values: Sequence[Any], k: int) -> list[Any]:
    """Return the maximum of every contiguous window of length ``k``."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    if k > len(values):
        raise ValueError("window size must not exceed the number of values")

    window: deque[int] = deque()
    maxima = []
    for i, value in enumerate(values):
        while window and window[0] <= i - k:
            window.popleft()
        while window and value >= values[window[-1]]:
            window.pop()
        window.append(i)
        if i >= k - 1:
            maxima.append(values[window[0]])
    return maxima


def contains_pattern(text: str, pattern: str) -> bool:
    """Tell whether ``pattern`` occurs in ``text``; an empty text holds nothing."""
    if not text:
        return False
    return any(
        text.startswith(pattern, start) for start in range(len(text))
    )