"""Maximal difference in solved problems between two training schedules."""

from collections.abc import Sequence


def max_problem_difference(a: Sequence[int], b: Sequence[int]) -> int:
    """Return the largest ``m - s`` Monocarp can reach.

    Training on day ``i`` gives Monocarp ``a[i]`` problems and forces
    Stereocarp to solve ``b[i + 1]`` the next day; the last day is always
    worth training.
    """
    a = list(a)
    b = list(b)
    if not a:
        raise ValueError("at least one day is required")
    if len(a) != len(b):
        raise ValueError("a and b must have the same length")
    gained = sum(max(0, mine - theirs) for mine, theirs in zip(a, b[1:]))
    return gained + a[-1]