"""Digit-level arithmetic on integers.

Division and remainder follow truncation toward zero, so negative inputs
behave the way the classic digit-peeling loops treat them.
"""

from __future__ import annotations

from collections.abc import Iterator
from math import factorial, prod

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)

_DIGIT_WORDS = {
    0: "Zero",
    1: "One",
    2: "Two",
    3: "Three",
    4: "Four",
    5: "Five",
    6: "Six",
    7: "Seven",
    8: "Eight",
    9: "Nine",
}


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _tmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _tdiv(a, b)


def _peel(n: int) -> Iterator[int]:
    """Yield the digits of ``n`` from least to most significant.

    Digits of a negative number come out negative.
    """
    while n != 0:
        yield _tmod(n, 10)
        n = _tdiv(n, 10)


def first_digit(n: int) -> int:
    """Leading digit of ``n``; numbers below 10 (negatives too) come back unchanged."""
    while n >= 10:
        n //= 10
    return n


def last_digit(n: int) -> int:
    """Trailing digit of ``n``, carrying the sign of ``n``."""
    return _tmod(n, 10)


def sum_first_last(n: int) -> int:
    """Sum of the first and last digit of ``n``."""
    return first_digit(n) + last_digit(n)


def digit_sum(n: int) -> int:
    """Sum of the digits of ``n``."""
    return sum(_peel(n))


def digit_product(n: int) -> int:
    """Product of the digits of ``n``; 1 for zero, which has no digits to multiply."""
    return prod(_peel(n))


def count_digits(n: int) -> int:
    """Number of digits in ``n``; zero counts as having none."""
    return sum(1 for _ in _peel(n))


def count_evenly_dividing_digits(n: int) -> int:
    """How many digits of ``n`` are non-zero and divide ``n`` exactly."""
    return sum(1 for d in _peel(n) if d != 0 and _tmod(n, d) == 0)


def reverse_digits(n: int) -> int:
    """The digits of ``n`` in reverse order; the sign is kept."""
    reversed_value = 0
    for d in _peel(n):
        reversed_value = reversed_value * 10 + d
    return reversed_value


def reverse_int32(n: int) -> int:
    """Reverse the digits of ``n``, giving 0 if the result leaves the 32-bit range."""
    reversed_value = 0
    for d in _peel(n):
        if reversed_value > _tdiv(INT32_MAX, 10) or reversed_value < _tdiv(INT32_MIN, 10):
            return 0
        reversed_value = reversed_value * 10 + d
    return reversed_value


def is_palindrome(n: int) -> bool:
    """True if ``n`` reads the same with its digits reversed."""
    return n == reverse_digits(n)


def digits_in_words(n: int) -> list[str]:
    """Spell out the digits of ``n`` one word per digit.

    The number is reversed first and then read back digit by digit, so
    trailing zeros are dropped and negative numbers spell nothing.
    """
    return [_DIGIT_WORDS[d] for d in _peel(reverse_digits(n)) if d in _DIGIT_WORDS]


def swap_first_last_digits(n: int) -> int:
    """Exchange the first and last digits of ``n``."""
    count = count_digits(n)
    last = last_digit(n)
    middle_and_first = _tdiv(n, 10)
    first = first_digit(n)
    scale = 10 ** max(count - 2, 0)
    return last * scale * 10 + _tmod(middle_and_first, scale) * 10 + first


def is_armstrong(n: int) -> bool:
    """True if ``n`` equals the sum of its digits each raised to the digit count.

    Raises ValueError for negative numbers.
    """
    if n < 0:
        raise ValueError("Please enter a positive integer.")
    digits = list(_peel(n))
    return sum(d ** len(digits) for d in digits) == n


def is_strong(n: int) -> bool:
    """True if ``n`` equals the sum of the factorials of its digits."""
    total = sum(factorial(d) for d in _peel(n)) if n > 0 else 0
    return total == n