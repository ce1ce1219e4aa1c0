"""Frequency counting with a fixed-size table indexed by value."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

DEFAULT_SIZE = 13


class FrequencyTable:
    """Counts of non-negative integers below a fixed size, precomputed once."""

    def __init__(self, values: Iterable[int], size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self.size = size
        self._counts = [0] * size
        for value in values:
            self._check(value)
            self._counts[value] += 1

    def _check(self, number: int) -> None:
        if not 0 <= number < self.size:
            raise ValueError(f"{number} is outside the table range 0..{self.size - 1}")

    def count(self, number: int) -> int:
        """How many times number occurred in the values."""
        self._check(number)
        return self._counts[number]


def answer_queries(
    values: Iterable[int], queries: Iterable[int], size: int = DEFAULT_SIZE
) -> list[int]:
    """Count each queried number among the values."""
    table = FrequencyTable(values, size)
    return [table.count(number) for number in queries]


def _take(tokens: list[str], start: int) -> tuple[list[int], int]:
    if start >= len(tokens):
        raise ValueError("missing count")
    size = int(tokens[start])
    if size < 0:
        raise ValueError("count must not be negative")
    chunk = tokens[start + 1 : start + 1 + size]
    if len(chunk) < size:
        raise ValueError(f"expected {size} numbers, got {len(chunk)}")
    return [int(token) for token in chunk], start + 1 + size


def main(argv: list[str] | None = None) -> int:
    """Read n values and q queries from standard input; print each query's count."""
    parser = argparse.ArgumentParser(
        prog="algodrills-hash",
        description="Answer frequency queries: n, n values, q, q queries on stdin.",
    )
    parser.add_argument(
        "--size", type=int, default=DEFAULT_SIZE,
        help=f"table size; values must lie below it (default: {DEFAULT_SIZE})",
    )
    args = parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    try:
        values, position = _take(tokens, 0)
        queries, _ = _take(tokens, position)
        counts = answer_queries(values, queries, args.size)
    except ValueError as exc:
        parser.error(str(exc))
    for found in counts:
        print(found)
    return 0