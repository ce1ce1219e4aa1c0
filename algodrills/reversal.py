"""Three ways of reversing a sequence: by copying, with two pointers, by swapping."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, MutableSequence
from typing import Any


def reverse_copy(items: Iterable[Any]) -> list[Any]:
    """Return a new list holding the items in reverse order."""
    values = list(items)
    return [values[i] for i in range(len(values) - 1, -1, -1)]


def reverse_two_pointer(items: MutableSequence[Any]) -> None:
    """Reverse items in place by walking two indices towards each other."""
    left, right = 0, len(items) - 1
    while left < right:
        items[left], items[right] = items[right], items[left]
        left += 1
        right -= 1


def reverse_swap(items: MutableSequence[Any]) -> None:
    """Reverse items in place by swapping each element of the first half with its mirror."""
    n = len(items)
    for i in range(n // 2):
        items[i], items[n - i - 1] = items[n - i - 1], items[i]


def main(argv: list[str] | None = None) -> int:
    """Reverse integers from the arguments, or a count and values from standard input."""
    parser = argparse.ArgumentParser(
        prog="algodrills-reverse", description="Reverse an array of integers."
    )
    parser.add_argument("values", nargs="*", type=int, help="integers to reverse")
    args = parser.parse_args(argv)
    values = args.values
    if not values:
        tokens = sys.stdin.read().split()
        if not tokens:
            parser.error("no size given")
        try:
            size = int(tokens[0])
            values = [int(token) for token in tokens[1 : 1 + size]]
        except ValueError as exc:
            parser.error(str(exc))
        if size < 0 or len(values) < size:
            parser.error(f"expected {size} values, got {len(values)}")
    print("Reversed array: " + " ".join(map(str, reverse_copy(values))))
    return 0