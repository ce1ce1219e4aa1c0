"""Comparison sorts: bubble, selection and merge sort (recursive and bottom-up)."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, stopping early once a pass makes no swap."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, moving the smallest remaining element forward each pass."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Merge two sorted sequences; on ties the element from left comes first."""
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy by splitting in halves and merging them back."""
    values = list(items)
    if len(values) < 2:
        return values
    mid = (len(values) - 1) // 2 + 1
    return merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def merge_sort_iterative(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy by merging runs of width 1, 2, 4, ... bottom-up."""
    result = list(items)
    n = len(result)
    width = 1
    while width < n:
        for start in range(0, n, 2 * width):
            mid = min(start + width, n)
            end = min(start + 2 * width, n)
            if mid < end:
                result[start:end] = merge(result[start:mid], result[mid:end])
        width *= 2
    return result


ALGORITHMS: dict[str, Callable[[Iterable[Any]], list[Any]]] = {
    "bubble": bubble_sort,
    "selection": selection_sort,
    "merge": merge_sort,
    "merge-iterative": merge_sort_iterative,
}


def _read_counted(text: str) -> list[int]:
    """Parse a count followed by that many integers."""
    tokens = text.split()
    if not tokens:
        raise ValueError("no size given")
    size = int(tokens[0])
    if size < 0:
        raise ValueError("size must not be negative")
    values = tokens[1 : 1 + size]
    if len(values) < size:
        raise ValueError(f"expected {size} values, got {len(values)}")
    return [int(token) for token in values]


def main(argv: list[str] | None = None) -> int:
    """Sort integers from the arguments, or a count and values from standard input."""
    parser = argparse.ArgumentParser(
        prog="algodrills-sort", description="Sort integers."
    )
    parser.add_argument("values", nargs="*", type=int, help="integers to sort")
    parser.add_argument(
        "-a", "--algorithm", choices=sorted(ALGORITHMS), default="merge",
        help="sorting algorithm (default: merge)",
    )
    args = parser.parse_args(argv)
    values = args.values
    if not values:
        try:
            values = _read_counted(sys.stdin.read())
        except ValueError as exc:
            parser.error(str(exc))
    print(" ".join(map(str, ALGORITHMS[args.algorithm](values))))
    return 0