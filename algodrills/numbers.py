"""Digit arithmetic: counting, reversing, palindromes and a divisor-based gcd."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from functools import reduce

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _digits(n: int) -> Iterator[int]:
    """Yield the decimal digits of a positive n, least significant first."""
    while n > 0:
        n, digit = divmod(n, 10)
        yield digit


def _reverse_digits(n: int) -> int:
    return reduce(lambda acc, digit: acc * 10 + digit, _digits(n), 0)


def _strip_trailing_zeros(n: int) -> int:
    while n > 0 and n % 10 == 0:
        n //= 10
    return n


def count_digits(n: int) -> int:
    """Number of decimal digits in n; zero and negative numbers have none."""
    return sum(1 for _ in _digits(n))


def reverse_number(n: int) -> int:
    """Reverse the digits of n, dropping its trailing zeros first."""
    return _reverse_digits(_strip_trailing_zeros(n))


def reverse_number_positional(n: int) -> int:
    """Reverse the digits of n by placing each digit at its mirrored power of ten."""
    n = _strip_trailing_zeros(n)
    width = count_digits(n)
    return sum(
        digit * 10 ** (width - 1 - position)
        for position, digit in enumerate(_digits(n))
    )


def is_palindrome(n: int) -> bool:
    """True when n reads the same reversed."""
    return n == _reverse_digits(n)


def _divisors(n: int) -> set[int]:
    return {d for d in range(1, n + 1) if n % d == 0}


def gcd(a: int, b: int) -> int:
    """Greatest common divisor found by intersecting both divisor sets."""
    if a < 1 or b < 1:
        raise ValueError("gcd needs two positive integers")
    return max(_divisors(a) & _divisors(b))


def reverse_int32(x: int) -> int:
    """Reverse the digits of x, keeping its sign; 0 if the result leaves 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * _reverse_digits(abs(x))
    return result if INT32_MIN <= result <= INT32_MAX else 0


def main(argv: list[str] | None = None) -> int:
    """Run one of the number operations from the command line."""
    parser = argparse.ArgumentParser(
        prog="algodrills-numbers", description="Digit arithmetic."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    unary = {
        "digits": count_digits,
        "reverse": reverse_number,
        "palindrome": lambda n: int(is_palindrome(n)),
        "reverse32": reverse_int32,
    }
    for name, func in unary.items():
        sub = commands.add_parser(name)
        sub.add_argument("n", type=int)
        sub.set_defaults(run=lambda args, func=func: func(args.n))

    gcd_parser = commands.add_parser("gcd")
    gcd_parser.add_argument("a", type=int)
    gcd_parser.add_argument("b", type=int)
    gcd_parser.set_defaults(run=lambda args: gcd(args.a, args.b))

    args = parser.parse_args(argv)
    try:
        print(args.run(args))
    except ValueError as exc:
        parser.error(str(exc))
    return 0