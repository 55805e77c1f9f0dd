"""Simple number sequences, tables and running totals."""

from __future__ import annotations

import string
from math import prod


def ascii_table() -> list[tuple[str, int]]:
    """Pairs of (character, code) for every code from 0 to 256 inclusive.

    Code 256 does not fit in a byte and wraps round to the character for 0.
    """
    return [(chr(code % 256), code) for code in range(257)]


def alphabet() -> str:
    """The lower-case letters from a to z."""
    return string.ascii_lowercase


def multiplication_table(n: int) -> list[int]:
    """The first ten multiples of ``n``."""
    return [n * k for k in range(1, 11)]


def even_numbers(limit: int) -> list[int]:
    """Even numbers from 2 up to ``limit`` inclusive."""
    return list(range(2, limit + 1, 2))


def odd_numbers(limit: int) -> list[int]:
    """Odd numbers from 1 up to ``limit`` inclusive."""
    return list(range(1, limit + 1, 2))


def even_sum(limit: int) -> int:
    """Sum of the even numbers from 2 up to ``limit``."""
    return sum(even_numbers(limit))


def natural_sum(limit: int) -> int:
    """Sum of the natural numbers from 1 up to ``limit``."""
    return sum(range(1, limit + 1))


def countdown(start: int) -> list[int]:
    """Natural numbers from ``start`` down to 1."""
    return list(range(start, 0, -1))


def fibonacci(terms: int) -> list[int]:
    """The first ``terms`` Fibonacci numbers, starting from 0."""
    result = []
    previous, current = 1, 0
    for _ in range(terms):
        result.append(current)
        previous, current = current, previous + current
    return result


def factorial(n: int) -> int:
    """Product of 1..n; 1 when ``n`` is below 1."""
    return prod(range(1, n + 1))


def power(base: int, exponent: int) -> int:
    """``base`` multiplied by itself ``exponent`` times; 1 for non-positive exponents."""
    return prod(base for _ in range(exponent))


def water_bottles(num_bottles: int, num_exchange: int) -> int:
    """Total bottles drunk when ``num_exchange`` empties buy one full bottle.

    Raises ValueError when the exchange rate would never let the process end.
    """
    if num_exchange < 2 and num_bottles >= num_exchange:
        raise ValueError("exchange rate must be at least 2")
    total = num_bottles
    while num_bottles >= num_exchange:
        filled, empty = divmod(num_bottles, num_exchange)
        total += filled
        num_bottles = filled + empty
    return total