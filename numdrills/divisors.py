"""Divisors, primes, common factors and multiples."""

from __future__ import annotations

import math
from enum import Enum


class Divisibility(Enum):
    """How a number divides by 5 and by 11."""

    BOTH = "divisible by both 5 and 11"
    ONLY_5 = "only divisible by 5 and not 11"
    ONLY_11 = "only divisible by 11 and not 5"
    NEITHER = "not divisible by both 5 and 11"


def factors(n: int) -> list[int]:
    """All positive divisors of ``n`` in ascending order; empty for n < 1."""
    return [i for i in range(1, n + 1) if n % i == 0]


def hcf(a: int, b: int) -> int:
    """Highest common factor of ``a`` and ``b``; 1 when the smaller is below 1."""
    if min(a, b) < 1:
        return 1
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Least common multiple, the first multiple of the larger value both divide.

    Raises ValueError if either value is zero.
    """
    if a == 0 or b == 0:
        raise ValueError("lcm is undefined for zero")
    multiple = math.lcm(abs(a), abs(b))
    return multiple if max(a, b) > 0 else -multiple


def is_perfect(n: int) -> bool:
    """True if ``n`` is positive and equals the sum of its proper divisors."""
    return n > 0 and sum(i for i in range(1, n // 2 + 1) if n % i == 0) == n


def perfect_numbers(limit: int) -> list[int]:
    """Perfect numbers from 1 to ``limit``."""
    return [i for i in range(1, limit + 1) if is_perfect(i)]


def is_prime(n: int) -> bool:
    """True if ``n`` is greater than 1 and has no divisor but 1 and itself."""
    return n > 1 and all(n % i for i in range(2, n // 2 + 1))


def prime_factors(n: int) -> list[int]:
    """Distinct prime divisors of ``n`` in ascending order."""
    return [i for i in range(2, n + 1) if n % i == 0 and is_prime(i)]


def _is_prime_sqrt(n: int) -> bool:
    return all(n % k for k in range(2, math.isqrt(n) + 1))


def primes_up_to(limit: int) -> list[int]:
    """Primes from 2 to ``limit`` inclusive."""
    return [i for i in range(2, limit + 1) if _is_prime_sqrt(i)]


def prime_sum(limit: int) -> int:
    """Sum of the primes from 2 to ``limit``."""
    return sum(primes_up_to(limit))


def sum_of_divisors(n: int) -> int:
    """Sum over 1..n of the divisor sums of each number."""
    return sum((n // i) * i for i in range(1, n + 1))


def divisibility_by_5_and_11(n: int) -> Divisibility:
    """Classify ``n`` by divisibility by 5 and by 11."""
    by_5 = n % 5 == 0
    by_11 = n % 11 == 0
    if by_5 and by_11:
        return Divisibility.BOTH
    if by_5:
        return Divisibility.ONLY_5
    if by_11:
        return Divisibility.ONLY_11
    return Divisibility.NEITHER