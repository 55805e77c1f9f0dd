"""Extremes and searches over sequences of numbers."""

from __future__ import annotations

from collections.abc import Sequence


def min_max(values: Sequence[int]) -> tuple[int, int]:
    """The smallest and the largest element of ``values``, in that order.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("min_max() needs at least one value")
    iterator = iter(values)
    smallest = largest = next(iterator)
    for value in iterator:
        if value > largest:
            largest = value
        elif value < smallest:
            smallest = value
    return smallest, largest


def linear_search(values: Sequence[int], key: int) -> int | None:
    """Index of the first element equal to ``key``, or None if it is absent."""
    return next((index for index, value in enumerate(values) if value == key), None)


def binary_search(values: Sequence[int], key: int) -> int | None:
    """Index of ``key`` in the ascending sequence ``values``, or None if absent.

    When ``key`` occurs more than once, the index of whichever copy the
    halving reaches first is returned.
    """
    low, high = 0, len(values)
    while low <= high:
        mid = (low + high) // 2
        if mid == len(values):
            return None
        if values[mid] == key:
            return mid
        if values[mid] > key:
            high = mid - 1
        else:
            low = mid + 1
    return None