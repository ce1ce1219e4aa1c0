import io

import pytest

from algodrills import patterns
from algodrills.patterns import (
    main,
    pattern1,
    pattern7,
    pattern8,
    pattern10,
    pattern11,
    pattern11_alt,
    pattern12,
    pattern13,
    pattern13_dashed,
    pattern15,
    pattern16,
    pattern17,
    pattern17_alt,
    pattern18,
    pattern21,
    pattern22,
)

SIZES = [1, 2, 3, 5, 8]


@pytest.mark.parametrize("n", SIZES)
def test_pattern1_row_lengths(n):
    rows = pattern1(n)
    assert [len(r) for r in rows] == list(range(1, n + 2))
    assert all(set(r) == {"*"} for r in rows)


@pytest.mark.parametrize("n", SIZES)
def test_pattern10_mirrors_pattern1(n):
    rows = pattern10(n)
    assert rows[:-1] == pattern1(n - 1)[::-1]
    assert rows[-1] == ""


@pytest.mark.parametrize("n", SIZES)
def test_pattern7_and_pattern8_are_mirror_images(n):
    assert pattern8(n) == pattern7(n)[::-1]
    assert len(pattern7(n)) == max(n - 1, 0)


@pytest.mark.parametrize("n", [2, 3, 6])
def test_pattern7_rows_share_width(n):
    assert {len(r) for r in pattern7(n)} == {2 * n - 3}
    assert {len(r) for r in pattern8(n)} == {2 * n - 3}


@pytest.mark.parametrize("n", SIZES)
def test_pattern11_alternates(n):
    rows = pattern11(n)
    assert len(rows) == n + 1
    for i, row in enumerate(rows):
        assert len(row) == i + 1
        assert all(a != b for a, b in zip(row, row[1:]))
        assert row[0] == ("0" if i % 2 == 0 else "1")


def test_pattern11_alt_small():
    assert pattern11_alt(3) == ["1", "01", "101"]


@pytest.mark.parametrize("n", SIZES)
def test_pattern11_alt_alternates(n):
    rows = pattern11_alt(n)
    assert len(rows) == n
    for row in rows:
        assert all(a != b for a, b in zip(row, row[1:]))


@pytest.mark.parametrize("n", SIZES)
def test_pattern13_counts_consecutively(n):
    total = n * (n + 1) // 2
    expected = [str(k) for k in range(1, total + 1)]
    assert "".join(pattern13(n)).split() == expected
    assert "".join(pattern13_dashed(n)).split("-")[:-1] == expected


@pytest.mark.parametrize("n", SIZES)
def test_pattern15_rows_start_at_a(n):
    for i, row in enumerate(pattern15(n)):
        letters = row.split()
        assert len(letters) == n - i
        assert letters == [chr(ord("A") + k) for k in range(n - i)]


@pytest.mark.parametrize("n", SIZES)
def test_pattern16_repeats_one_letter(n):
    for i, row in enumerate(pattern16(n)):
        assert row.split() == [chr(ord("A") + i)] * (i + 1)


def test_pattern17_first_row():
    assert pattern17(3)[0] == "  A  "


@pytest.mark.parametrize("n", SIZES)
def test_pattern17_variants_agree(n):
    rows = pattern17(n)
    assert rows == pattern17_alt(n)
    for row in rows:
        assert row == row[::-1]
        assert len(row) == 2 * n - 1


@pytest.mark.parametrize("n", SIZES)
def test_pattern18_rows_end_on_same_letter(n):
    rows = pattern18(n)
    assert len(rows) == n
    for i, row in enumerate(rows):
        letters = row.split()
        assert len(letters) == i + 1
        assert letters[-1] == chr(ord("A") + n)


@pytest.mark.parametrize("n", [1, 2, 4, 7])
def test_pattern21_hollow_square(n):
    rows = pattern21(n)
    assert len(rows) == n + 1
    assert rows[0] == rows[-1] == "*" * (n + 1)
    for row in rows[1:-1]:
        assert row[0] == row[-1] == "*"
        assert set(row[1:-1]) <= {" "}


def test_pattern22_small():
    assert pattern22(2) == ["2222", "2112"]


@pytest.mark.parametrize("n", [1, 3, 4, 9])
def test_pattern22_rows_share_width(n):
    rows = pattern22(n)
    assert len(rows) == n
    for i, row in enumerate(rows):
        assert len(row) == 2 * n
        assert row == row[::-1]
        assert row[i] == str(n - i)


def test_main_prints_chosen_pattern(capsys):
    assert main(["3", "--pattern", "1"]) == 0
    assert capsys.readouterr().out == "\n".join(pattern1(3)) + "\n"


def test_main_defaults_to_pattern22_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr(patterns.sys, "stdin", io.StringIO("4\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == pattern22(4)


def test_main_without_size_fails(monkeypatch):
    monkeypatch.setattr(patterns.sys, "stdin", io.StringIO(""))
    with pytest.raises(SystemExit):
        main([])