"""Small classification checks on numbers, characters and dates."""

from __future__ import annotations

import math
from enum import Enum

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_WEEKDAYS = (
    "Monday",
    "tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class CharKind(Enum):
    """Broad category of a single character."""

    ALPHABET = "alphabet"
    DIGIT = "digit"
    SPECIAL = "special character"


class Sign(Enum):
    """Sign of an integer."""

    NEGATIVE = "negative"
    ZERO = "zero"
    POSITIVE = "positive"


class VotingStatus(Enum):
    """Voting eligibility for an age."""

    ELIGIBLE = "Congratulations!You are eligible for voting."
    NOT_YET_ELIGIBLE = "You are not yet eligible for voting."
    NOT_BORN = "You are not yet born."


def _single_char(ch: str) -> str:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def is_leap_year(year: int) -> bool:
    """True for years divisible by 4 but not 100, or by 400."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_valid_triangle(a: int, b: int, c: int) -> bool:
    """True if three positive angles add up to 180 degrees."""
    return a + b + c == 180 and min(a, b, c) > 0


def is_alphabet(ch: str) -> bool:
    """True if ``ch`` is an ASCII letter."""
    ch = _single_char(ch)
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def classify_character(ch: str) -> CharKind:
    """Whether ``ch`` is an ASCII letter, an ASCII digit or something else."""
    if is_alphabet(ch):
        return CharKind.ALPHABET
    if "0" <= ch <= "9":
        return CharKind.DIGIT
    return CharKind.SPECIAL


def is_even(n: int) -> bool:
    """True if ``n`` is divisible by 2."""
    return n % 2 == 0


def compare_two(a: int, b: int) -> int | None:
    """The larger of two numbers, or None when they are equal."""
    if a == b:
        return None
    return max(a, b)


def greatest_of_three(a: int, b: int, c: int) -> int | None:
    """The strictly greatest of three numbers, or None when none stands alone."""
    values = (a, b, c)
    top = max(values)
    return top if values.count(top) == 1 else None


def month_name(number: int) -> str:
    """Name of month ``number`` (1-12); ValueError otherwise."""
    if not 1 <= number <= 12:
        raise ValueError("Please enter a valid month number.")
    return _MONTHS[number - 1]


def weekday_name(number: int) -> str:
    """Name of weekday ``number``, Monday being 1; ValueError outside 1-7."""
    if not 1 <= number <= 7:
        raise ValueError("Enter a valid week day number.")
    return _WEEKDAYS[number - 1]


def sign(n: int) -> Sign:
    """Whether ``n`` is negative, zero or positive."""
    if n < 0:
        return Sign.NEGATIVE
    if n == 0:
        return Sign.ZERO
    return Sign.POSITIVE


def voting_status(age: int) -> VotingStatus:
    """Voting eligibility: 18 or over may vote, 0 or below is not yet born."""
    if age >= 18:
        return VotingStatus.ELIGIBLE
    if age <= 0:
        return VotingStatus.NOT_BORN
    return VotingStatus.NOT_YET_ELIGIBLE


def is_vowel(ch: str) -> bool:
    """True if ``ch`` is one of the lower-case vowels a, e, i, o, u."""
    return _single_char(ch) in "aeiou"


def _truncate_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def quadratic_roots(a: int, b: int, c: int) -> tuple[int, ...]:
    """Real roots of ax^2 + bx + c = 0, truncated to integers.

    Returns two roots, or an empty tuple when there are no real roots.
    Raises ValueError when ``a`` is zero.
    """
    if a == 0:
        raise ValueError("coefficient a must not be zero")
    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        root = math.sqrt(discriminant)
        return int((-b + root) / (2 * a)), int((-b - root) / (2 * a))
    if discriminant == 0:
        root = _truncate_div(-b, 2 * a)
        return root, root
    return ()