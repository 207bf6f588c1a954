import random

import pytest

from cpkit.feasibility import can_balance_candies, can_connect_all


def test_connect_example_succeeds():
    assert can_connect_all(10, [0, 20, 15, 10]) is True


def test_connect_blocked_when_first_is_empty():
    assert can_connect_all(1, [0, 1, 0]) is False


@pytest.mark.parametrize(
    "c, values",
    [
        (10, [0, 20, 15, 10]),
        (1, [0, 1, 0]),
        (3, [5, 0, 0, 7, 1]),
        (2, [0, 0, 9, 0]),
    ],
)
def test_connect_scale_invariant(c, values):
    scaled = [v * 4 for v in values]
    assert can_connect_all(c * 4, scaled) == can_connect_all(c, values)


def test_connect_rich_first_node_connects_everything():
    assert can_connect_all(1, [10**9, 0, 0, 0, 0])


@pytest.mark.parametrize("values", [[0, 1, 0], [0, 20, 15, 10], [1, 0, 3, 0]])
def test_connect_monotone_in_first_value(values):
    richer = [values[0] + 10**6] + values[1:]
    if can_connect_all(2, values):
        assert can_connect_all(2, richer)
    assert can_connect_all(2, richer)


def test_connect_errors():
    with pytest.raises(ValueError):
        can_connect_all(1, [])
    with pytest.raises(ValueError):
        can_connect_all(0, [1, 2])


def test_balance_example():
    assert can_balance_candies([2, 4, 3]) is True


@pytest.mark.parametrize("values", [[5], [7, 7, 7], [0, 0]])
def test_balance_equal_values(values):
    assert can_balance_candies(values)


@pytest.mark.parametrize("values", [[2, 4, 3], [0, 3, 3], [1, 3], [1, 2, 3, 4, 5], [8, 1, 3, 4]])
def test_balance_permutation_invariant(values):
    shuffled = values[:]
    random.Random(7).shuffle(shuffled)
    assert can_balance_candies(shuffled) == can_balance_candies(values)


@pytest.mark.parametrize("values", [[2, 4, 3], [0, 3, 3], [1, 3], [1, 2, 3, 4, 5]])
def test_balance_shift_invariant(values):
    shifted = [v + 100 for v in values]
    assert can_balance_candies(shifted) == can_balance_candies(values)


def test_balance_indivisible_sum():
    assert can_balance_candies([1, 2]) is False


def test_balance_empty_raises():
    with pytest.raises(ValueError):
        can_balance_candies([])