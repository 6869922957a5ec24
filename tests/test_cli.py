import itertools
import random

import pytest

from pushswap.checker import check
from pushswap.cli import main
from pushswap.stacks import OPERATIONS


def _run(capsys, args):
    code = main(args)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_no_arguments_prints_nothing(capsys):
    assert _run(capsys, []) == (0, "", "")


def test_single_number_prints_nothing(capsys):
    assert _run(capsys, ["42"]) == (0, "", "")


def test_duplicates_are_an_error(capsys):
    code, out, err = _run(capsys, ["1", "2", "1"])
    assert (code, out, err) == (1, "", "Error\n")


def test_non_numbers_are_an_error(capsys):
    code, out, err = _run(capsys, ["1", "abc"])
    assert code == 1
    assert err == "Error\n"


def test_out_of_range_is_an_error(capsys):
    code, _, err = _run(capsys, ["1", "2147483648"])
    assert code == 1
    assert err == "Error\n"


def test_already_sorted_prints_nothing(capsys):
    assert _run(capsys, ["1", "2", "3", "4", "5"]) == (0, "", "")


def test_two_reversed_numbers_need_one_swap(capsys):
    code, out, _ = _run(capsys, ["2", "1"])
    assert code == 0
    assert out == "sa\n"


def test_single_string_argument_is_split(capsys):
    code_split, out_split, _ = _run(capsys, ["3 1 2"])
    code_many, out_many, _ = _run(capsys, ["3", "1", "2"])
    assert code_split == code_many == 0
    assert out_split == out_many


@pytest.mark.parametrize("values", list(itertools.permutations([5, -3, 10, 0, 7])))
def test_output_sorts_every_permutation(capsys, values):
    code, out, _ = _run(capsys, [str(v) for v in values])
    assert code == 0
    lines = out.splitlines(keepends=True)
    assert all(line.rstrip("\n") in OPERATIONS for line in lines)
    assert check(values, lines)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_output_sorts_larger_inputs(capsys, seed):
    values = random.Random(seed).sample(range(-1000, 1000), 100)
    code, out, _ = _run(capsys, [" ".join(str(v) for v in values)])
    assert code == 0
    assert check(values, out.splitlines(keepends=True))