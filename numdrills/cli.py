"""Command that reads two integers and shows them before and after swapping."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def swap(a: int, b: int) -> tuple[int, int]:
    """Return the two values in exchanged order."""
    return b, a


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numdrills",
        description="Swap two integers and print them before and after.",
    )
    parser.add_argument(
        "numbers",
        nargs="*",
        type=int,
        help="the two integers to swap; prompted for when omitted",
    )
    return parser


def _prompt_numbers(parser: argparse.ArgumentParser) -> tuple[int, int]:
    entries = (input("Enter First Number :"), input("Enter Second Number :"))
    try:
        first, second = (int(entry.strip()) for entry in entries)
    except ValueError:
        parser.error("both entries must be integers")
    return first, second


def main(argv: Sequence[str] | None = None) -> int:
    """Run the swap command and return its exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.numbers:
        num1, num2 = _prompt_numbers(parser)
    elif len(args.numbers) == 2:
        num1, num2 = args.numbers
    else:
        parser.error("expected exactly two integers")

    print(f"Number 1 before swapping:{num1}")
    print(f"Number 2 before swapping:{num2}")
    num1, num2 = swap(num1, num2)
    print(f"Number 1 after swaping:{num1}")
    print(f"Number 2 after swaping:{num2}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())