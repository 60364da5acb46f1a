"""Primes by the sieve of Atkin, binomial coefficients, Catalan and Fibonacci numbers."""

from __future__ import annotations

from math import isqrt

__all__ = ["atkin_primes", "binomial", "catalan", "fibonacci"]


def atkin_primes(limit: int = 100000) -> list[int]:
    """Return all primes strictly below ``limit`` using the sieve of Atkin."""
    primes = [p for p in (2, 3) if p < limit]
    if limit <= 5:
        return primes

    sieve = bytearray(limit + 1)
    root = isqrt(limit - 1)
    for i in range(1, root + 1):
        for j in range(1, root + 1):
            n = 4 * i * i + j * j
            if n <= limit and n % 12 in (1, 5):
                sieve[n] ^= 1
            n = 3 * i * i + j * j
            if n <= limit and n % 12 == 7:
                sieve[n] ^= 1
            n = 3 * i * i - j * j
            if i > j and n <= limit and n % 12 == 11:
                sieve[n] ^= 1

    for m in range(5, root + 1):
        if sieve[m]:
            square = m * m
            for multiple in range(square, limit, square):
                sieve[multiple] = 0

    primes.extend(n for n in range(5, limit) if sieve[n])
    return primes


def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient C(n, k)."""
    if n < 0 or k < 0 or k > n:
        raise ValueError("binomial requires 0 <= k <= n")
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def catalan(n: int) -> int:
    """Return the n-th Catalan number."""
    if n < 0:
        raise ValueError("n must not be negative")
    return binomial(2 * n, n) // (n + 1)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, counting from F(0) = 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous