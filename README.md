# algodrills

Classic beginner algorithm drills, each written as a small, tested Python
function:

- **`algodrills.patterns`** – star, number and letter triangles, pyramids and
  a hollow square, returned as lists of row strings
- **`algodrills.numbers`** – digit counting, number reversal, palindromes, a
  divisor-intersection GCD and 32-bit bounded integer reversal
- **`algodrills.recursion`** – factorial, Fibonacci (recursive and
  iterative), counting up and down, digit sums, string reversal, sortedness
  checks, powers, binary search and running sums
- **`algodrills.reversal`** – three ways to reverse a sequence
- **`algodrills.hashing`** – a fixed-size frequency table that answers count
  queries
- **`algodrills.sorting`** – bubble sort, selection sort, and recursive and
  bottom-up merge sort

The package has no runtime dependencies and supports Python 3.10 and later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from algodrills.numbers import gcd, reverse_int32
from algodrills.recursion import factorial, binary_search
from algodrills.sorting import merge_sort
from algodrills.hashing import FrequencyTable
from algodrills.patterns import pattern1

gcd(12, 18)                             # 6
reverse_int32(-123)                     # -321
reverse_int32(1534236469)               # 0 (result leaves 32-bit range)
factorial(5)                            # 120
binary_search([1, 3, 5, 7, 9, 11], 7)   # 3
merge_sort([3, 1, 2, 4, 1, 5, 2, 6])    # [1, 1, 2, 2, 3, 4, 5, 6]
pattern1(2)                             # ['*', '**', '***']

table = FrequencyTable([1, 3, 2, 1, 3], size=13)
table.count(3)                          # 2
```

Notes on behaviour:

- Every pattern function (`pattern1`, `pattern7`, `pattern8`, `pattern10`,
  `pattern11`, `pattern11_alt`, `pattern12`, `pattern13`,
  `pattern13_dashed`, `pattern15`, `pattern16`, `pattern17`,
  `pattern17_alt`, `pattern18`, `pattern21`, `pattern22`) returns its rows
  without line endings.
- `reverse_number` and `reverse_number_positional` drop trailing zeros
  before reversing; `count_digits` gives 0 for zero and negative numbers.
- `gcd` raises `ValueError` unless both arguments are positive; `power`
  raises `ValueError` for a negative exponent.
- `FrequencyTable` only holds values from 0 up to `size - 1` (13 by default);
  values or queries outside that range raise `ValueError`.
- The sorting functions return a new sorted list and leave their input
  alone. `reverse_copy` also returns a new list, while `reverse_two_pointer`
  and `reverse_swap` reverse a mutable sequence in place.

## Command-line tools

| Command                | What it does                                                        |
|------------------------|---------------------------------------------------------------------|
| `algodrills-patterns`  | prints a pattern: `[n] [-p NAME]` (default pattern `22`)            |
| `algodrills-numbers`   | subcommands `digits N`, `reverse N`, `palindrome N`, `reverse32 N`, `gcd A B` |
| `algodrills-recursion` | prints `n!` for `[n]`, or a tour of every exercise with `--demo`    |
| `algodrills-sort`      | sorts integers with `-a bubble/selection/merge/merge-iterative`     |
| `algodrills-reverse`   | reverses a list of integers                                         |
| `algodrills-hashing`   | counts occurrences of queried numbers (`--size`, default 13)        |

Pattern names for `-p` are `1`, `7`, `8`, `10`, `11`, `11alt`, `12`, `13`,
`13dashed`, `15`, `16`, `17`, `17alt`, `18`, `21` and `22`.

Where `algodrills-patterns` and `algodrills-recursion` get no `n`, they read
it from standard input. `algodrills-sort` and `algodrills-reverse` take the
values as arguments, or, given none, read a count followed by that many
integers from standard input. `algodrills-hashing` always reads standard
input: a count, that many values, a query count, then the queries; it prints
one count per line.

```
algodrills-patterns 3 -p 17
algodrills-numbers gcd 12 18
algodrills-recursion --demo
echo "5  3 1 4 1 5" | algodrills-sort
algodrills-reverse 1 2 3 4 5
echo "5 1 3 2 1 3  3 1 3 4" | algodrills-hashing
```