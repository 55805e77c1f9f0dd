"""Text patterns made of stars, digits and spaces, one string per row."""

from __future__ import annotations


def zero_one_triangle(n: int) -> list[str]:
    """Triangle of alternating 1s and 0s; every row ends in 1."""
    return [
        "".join(" 1" if (i + j) % 2 == 0 else " 0" for j in range(1, i + 1))
        for i in range(1, n + 1)
    ]


def number_half_pyramid(n: int) -> list[str]:
    """Row ``i`` repeats the number ``i``, ``i`` times."""
    return [f"{i} " * i for i in range(1, n + 1)]


def butterfly(n: int) -> list[str]:
    """Two mirrored star wings meeting in the middle."""
    rows = [*range(1, n + 1), *range(n, 0, -1)]
    return ["*" * i + " " * (2 * n - 2 * i) + "*" * i for i in rows]


def hollow_rectangle(rows: int, cols: int) -> list[str]:
    """Outline of a ``rows`` by ``cols`` rectangle drawn in stars."""

    def cell(i: int, j: int) -> str:
        on_edge = i in (1, rows) or j in (1, cols)
        return "*" if on_edge else " "

    return ["".join(cell(i, j) for j in range(1, cols + 1)) for i in range(1, rows + 1)]


def inverted_number_pattern(n: int) -> list[str]:
    """Rows counting 1..n, then 1..n-1, down to a single 1."""
    return ["".join(f"{j} " for j in range(1, n + 2 - i)) for i in range(1, n + 1)]


def inverted_half_pyramid(n: int) -> list[str]:
    """Star rows shrinking from ``n`` stars to one."""
    return ["*" * i for i in range(n, 0, -1)]


def number_pyramid(n: int) -> list[str]:
    """Right-aligned rows counting 1..i."""
    return [
        " " * (n - i) + "".join(f"{j} " for j in range(1, i + 1))
        for i in range(1, n + 1)
    ]


def rectangle(rows: int, cols: int) -> list[str]:
    """Solid ``rows`` by ``cols`` rectangle of stars."""
    return ["*" * cols for _ in range(rows)]


def rhombus(n: int) -> list[str]:
    """Slanted block of ``n`` rows of ``n`` stars."""
    return [" " * (n - i) + "*" * n for i in range(1, n + 1)]


def rotated_half_pyramid(n: int) -> list[str]:
    """Right-aligned half pyramid of stars."""
    return [" " * (n - i) + "*" * i for i in range(1, n + 1)]