import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.reversal import main, reverse_copy, reverse_swap, reverse_two_pointer


def test_reverse_copy_example():
    assert reverse_copy([1, 2, 3, 4, 5]) == [5, 4, 3, 2, 1]


@given(st.lists(st.integers()))
def test_reverse_copy_matches_builtin(values):
    original = list(values)
    assert reverse_copy(values) == original[::-1]
    assert values == original


@given(st.lists(st.integers()))
def test_reverse_copy_twice_is_identity(values):
    assert reverse_copy(reverse_copy(values)) == values


@pytest.mark.parametrize("reverse", [reverse_two_pointer, reverse_swap])
@given(values=st.lists(st.integers()))
def test_in_place_reversal(reverse, values):
    expected = values[::-1]
    assert reverse(values) is None
    assert values == expected


@pytest.mark.parametrize("reverse", [reverse_two_pointer, reverse_swap])
def test_in_place_on_bytearray(reverse):
    data = bytearray(b"abcde")
    reverse(data)
    assert data == bytearray(b"edcba")


@pytest.mark.parametrize("reverse", [reverse_two_pointer, reverse_swap])
def test_in_place_empty_and_single(reverse):
    empty: list[int] = []
    single = [7]
    reverse(empty)
    reverse(single)
    assert empty == []
    assert single == [7]


def test_main_arguments(capsys):
    assert main(["1", "2", "3", "4", "5"]) == 0
    assert capsys.readouterr().out == "Reversed array: 5 4 3 2 1\n"


def test_main_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n10 20 30\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "Reversed array: 30 20 10\n"


def test_main_short_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n1 2\n"))
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2