"""Text patterns built row by row: triangles, pyramids, diamonds and squares.

Every pattern function returns its rows as a list of strings, without line
endings, exactly as they would be printed one per line.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from itertools import count


def _letter(offset: int) -> str:
    return chr(ord("A") + offset)


def pattern1(n: int) -> list[str]:
    """Right triangle of stars with rows of 1 to n + 1 stars."""
    return ["*" * (i + 1) for i in range(n + 1)]


def pattern7(n: int) -> list[str]:
    """Upright star pyramid padded with underscores, n - 1 rows."""
    rows = []
    for i in range(1, n):
        pad = "_" * (n - i - 1)
        rows.append(pad + "*" * (2 * i - 1) + pad)
    return rows


def pattern8(n: int) -> list[str]:
    """Inverted star pyramid padded with underscores, n - 1 rows."""
    rows = []
    for i in range(1, n):
        pad = "_" * (i - 1)
        rows.append(pad + "*" * (2 * n - 2 * i - 1) + pad)
    return rows


def pattern10(n: int) -> list[str]:
    """Descending star triangle from n stars down to an empty row."""
    return ["*" * (n - i) for i in range(n + 1)]


def pattern11(n: int) -> list[str]:
    """Binary triangle of n + 1 rows; a cell is 0 when row and column share parity."""
    return [
        "".join("0" if i % 2 == j % 2 else "1" for j in range(i + 1))
        for i in range(n + 1)
    ]


def pattern11_alt(n: int) -> list[str]:
    """Binary triangle of n rows; even rows start with 1, odd rows with 0."""
    rows = []
    for i in range(n):
        start = 1 if i % 2 == 0 else 0
        rows.append("".join(str((start + j) % 2) for j in range(i + 1)))
    return rows


def pattern12(n: int) -> list[str]:
    """Number crown: 1..i+1, a gap of spaces, then 1..i+1 again."""
    rows = []
    for i in range(n):
        digits = "".join(str(j) for j in range(1, i + 2))
        rows.append(digits + " " * (2 * (n - i - 1)) + digits)
    return rows


def _counting_triangle(n: int, separator: str) -> list[str]:
    numbers = count(1)
    return [
        "".join(f"{next(numbers)}{separator}" for _ in range(i + 1))
        for i in range(n)
    ]


def pattern13(n: int) -> list[str]:
    """Floyd's triangle; each number is followed by a space."""
    return _counting_triangle(n, " ")


def pattern13_dashed(n: int) -> list[str]:
    """Floyd's triangle; each number is followed by a dash."""
    return _counting_triangle(n, "-")


def pattern15(n: int) -> list[str]:
    """Shrinking letter triangle: row i holds A onwards, n - i letters."""
    return ["".join(f"{_letter(k)} " for k in range(n - i)) for i in range(n)]


def pattern16(n: int) -> list[str]:
    """Row i repeats the i-th letter i + 1 times."""
    return [f"{_letter(i)} " * (i + 1) for i in range(n)]


def pattern17(n: int) -> list[str]:
    """Letter pyramid: A up to the row's letter and back down, space padded."""
    rows = []
    for i in range(n):
        pad = " " * (n - i - 1)
        rising = "".join(_letter(j) for j in range(i + 1))
        rows.append(pad + rising + rising[-2::-1] + pad)
    return rows


def _mirrored_letters(i: int) -> Iterator[str]:
    offset = 0
    for j in range(1, 2 * i + 2):
        yield _letter(offset)
        offset += 1 if j <= i else -1


def pattern17_alt(n: int) -> list[str]:
    """The letter pyramid of pattern17, built by walking up to a breakpoint and back."""
    rows = []
    for i in range(n):
        pad = " " * (n - i - 1)
        rows.append(pad + "".join(_mirrored_letters(i)) + pad)
    return rows


def pattern18(n: int) -> list[str]:
    """Growing letter triangle whose rows all end on the letter n places past A."""
    return [
        "".join(f"{_letter(n - i + j)} " for j in range(i + 1)) for i in range(n)
    ]


def pattern21(n: int) -> list[str]:
    """Hollow square of stars with sides of n + 1."""
    edges = (0, n)
    return [
        "".join("*" if i in edges or j in edges else " " for j in range(n + 1))
        for i in range(n + 1)
    ]


def pattern22(n: int) -> list[str]:
    """Concentric number rows: outer values on the sides, n - i repeated in the middle."""
    rows = []
    for i in range(n):
        left = "".join(str(n - j + 1) for j in range(1, i + 1))
        middle = str(n - i) * (2 * (n - i))
        right = "".join(str(n - j + 1) for j in range(i, 0, -1))
        rows.append(left + middle + right)
    return rows


PATTERNS: dict[str, Callable[[int], list[str]]] = {
    "1": pattern1,
    "7": pattern7,
    "8": pattern8,
    "10": pattern10,
    "11": pattern11,
    "11alt": pattern11_alt,
    "12": pattern12,
    "13": pattern13,
    "13dashed": pattern13_dashed,
    "15": pattern15,
    "16": pattern16,
    "17": pattern17,
    "17alt": pattern17_alt,
    "18": pattern18,
    "21": pattern21,
    "22": pattern22,
}


def main(argv: list[str] | None = None) -> int:
    """Print one pattern; n comes from the arguments or from standard input."""
    parser = argparse.ArgumentParser(
        prog="algodrills-patterns", description="Print a text pattern."
    )
    parser.add_argument("n", nargs="?", type=int, help="size of the pattern")
    parser.add_argument(
        "-p", "--pattern", choices=sorted(PATTERNS), default="22",
        help="which pattern to print (default: 22)",
    )
    args = parser.parse_args(argv)
    n = args.n
    if n is None:
        tokens = sys.stdin.read().split()
        if not tokens:
            parser.error("no size given")
        try:
            n = int(tokens[0])
        except ValueError:
            parser.error(f"invalid size: {tokens[0]!r}")
    for line in PATTERNS[args.pattern](n):
        print(line)
    return 0