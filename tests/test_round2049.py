import pytest

from cpkit.round2049 import min_shift_path_cost, permutation_possible


@pytest.mark.parametrize("s", ["ppppp", "........", "ssss", "sp", "s.sp", ""])
def test_permutation_possible_accepts(s):
    assert permutation_possible(s) is True


@pytest.mark.parametrize("s", ["ps", "sspp", "pss.."])
def test_permutation_possible_rejects(s):
    assert permutation_possible(s) is False


def test_permutation_possible_rejects_bad_characters():
    with pytest.raises(ValueError):
        permutation_possible("pxs")


def test_min_shift_path_cost_first_example():
    grid = [[3, 4, 9], [5, 2, 4], [0, 101, 101]]
    assert min_shift_path_cost(100, grid) == 113


def test_min_shift_path_cost_second_example():
    grid = [[10, 0, 0, 10], [0, 0, 10, 0], [10, 10, 0, 10]]
    assert min_shift_path_cost(1, grid) == 6


def test_single_cell_is_its_value():
    assert min_shift_path_cost(3, [[4]]) == 4


def test_single_column_sums_the_column():
    column = [[7], [2], [9], [1]]
    assert min_shift_path_cost(5, column) == sum(row[0] for row in column)


def test_cost_never_decreases_with_k():
    grid = [[3, 4, 9], [5, 2, 4], [0, 101, 101]]
    costs = [min_shift_path_cost(k, grid) for k in (0, 1, 10, 100, 1000)]
    assert costs == sorted(costs)


def test_huge_k_never_shifts():
    grid = [[1, 9, 9], [9, 1, 9], [9, 9, 1]]
    # Without shifts the diagonal-ish path 1,9,1,9,1 is the best available.
    no_shift = min_shift_path_cost(10**9, grid)
    assert no_shift == min(
        1 + 9 + 9 + 9 + 1,
        1 + 9 + 1 + 9 + 1,
        1 + 9 + 1 + 9 + 1,
    )


def test_rejects_empty_grid():
    with pytest.raises(ValueError):
        min_shift_path_cost(1, [])


def test_rejects_ragged_grid():
    with pytest.raises(ValueError):
        min_shift_path_cost(1, [[1, 2], [3]])