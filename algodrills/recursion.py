"""Classic recursion exercises: factorial, Fibonacci, counting, searching."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any


def factorial(n: int) -> int:
    """n!, with every n of 1 or less giving 1."""
    if n <= 1:
        return 1
    return n * factorial(n - 1)


def fibonacci(n: int) -> int:
    """n-th Fibonacci number by double recursion; n of 1 or less is returned as is."""
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def fibonacci_iterative(n: int) -> int:
    """n-th Fibonacci number computed in a loop."""
    if n <= 1:
        return n
    prev2, prev = 0, 1
    for _ in range(2, n + 1):
        prev2, prev = prev, prev + prev2
    return prev


def count_down(n: int) -> list[int]:
    """The numbers n, n - 1, ..., 1."""
    if n <= 0:
        return []
    return [n, *count_down(n - 1)]


def count_up(n: int) -> list[int]:
    """The numbers 1, 2, ..., n."""
    if n <= 0:
        return []
    return [*count_up(n - 1), n]


def repeat_message(message: str, n: int) -> list[str]:
    """The message repeated n times."""
    if n <= 0:
        return []
    return [message, *repeat_message(message, n - 1)]


def sum_of_digits(n: int) -> int:
    """Sum of the decimal digits of n; negative numbers give a negative sum."""
    if n < 0:
        return -sum_of_digits(-n)
    if n == 0:
        return 0
    return n % 10 + sum_of_digits(n // 10)


def reverse_string(s: str) -> str:
    """s reversed by swapping its outer characters and recursing inwards."""
    if len(s) < 2:
        return s
    return s[-1] + reverse_string(s[1:-1]) + s[0]


def is_sorted(items: Sequence[Any]) -> bool:
    """True when every element is no greater than the next."""

    def check(index: int) -> bool:
        if index >= len(items) - 1:
            return True
        return items[index] <= items[index + 1] and check(index + 1)

    return check(0)


def power(a: int, b: int) -> int:
    """a raised to the non-negative power b."""
    if b < 0:
        raise ValueError("exponent must not be negative")
    if b == 0:
        return 1
    return a * power(a, b - 1)


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Index of target in the sorted items, or -1 when it is absent."""

    def search(low: int, high: int) -> int:
        if low > high:
            return -1
        mid = (low + high) // 2
        if items[mid] == target:
            return mid
        if items[mid] < target:
            return search(mid + 1, high)
        return search(low, mid - 1)

    return search(0, len(items) - 1)


def sum_up_to(n: int) -> int:
    """1 + 2 + ... + n; n of 1 or less is returned as is."""
    if n <= 1:
        return n
    return n + sum_up_to(n - 1)


def _demo() -> list[str]:
    text = "hello"
    sorted_items = [1, 3, 5, 7, 9, 11]
    return [
        f"Factorial(5): {factorial(5)}",
        f"Fibonacci(6): {fibonacci(6)}",
        "Print N to 1: " + " ".join(map(str, count_down(5))),
        f"Sum of digits (1234): {sum_of_digits(1234)}",
        f"Reversed string: {reverse_string(text)}",
        f"Is array sorted? {'Yes' if is_sorted([1, 2, 3, 4, 5]) else 'No'}",
        f"2^5 using power: {power(2, 5)}",
        f"Index of 7 in sorted array: {binary_search(sorted_items, 7)}",
    ]


def main(argv: list[str] | None = None) -> int:
    """Print n! for n from the arguments or standard input, or run the demo."""
    parser = argparse.ArgumentParser(
        prog="algodrills-recursion", description="Recursion exercises."
    )
    parser.add_argument("n", nargs="?", type=int, help="number whose factorial is printed")
    parser.add_argument("--demo", action="store_true", help="print a tour of every exercise")
    args = parser.parse_args(argv)
    if args.demo:
        for line in _demo():
            print(line)
        return 0
    n = args.n
    if n is None:
        tokens = sys.stdin.read().split()
        if not tokens:
            parser.error("no number given")
        try:
            n = int(tokens[0])
        except ValueError:
            parser.error(f"invalid number: {tokens[0]!r}")
    print(factorial(n))
    return 0