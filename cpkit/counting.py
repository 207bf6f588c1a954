"""Counting problems on permutations and prefix purchases."""

from collections.abc import Sequence
from itertools import accumulate

MOD = 1_000_000_007
_MAX_COUNT = 2**31 - 1


def count_similar_permutations(perm: Sequence[int]) -> int:
    """Count permutations of ``0..n-1`` with the same MEX on every subarray, modulo 1e9+7."""
    perm = list(perm)
    size = len(perm)
    if size == 0 or sorted(perm) != list(range(size)):
        raise ValueError("expected a non-empty permutation of 0..n-1")
    if size == 1:
        return 1

    positions = [0] * size
    for index, value in enumerate(perm):
        positions[value] = index

    left, right = sorted((positions[0], positions[1]))
    result = 1
    for placed, position in enumerate(positions[2:], start=2):
        if left < position < right:
            result = result * (right - left + 1 - placed) % MOD
        else:
            left = min(left, position)
            right = max(right, position)
    return result


def max_prefix_counts(costs: Sequence[int], budget: int) -> list[int]:
    """Return the lexicographically largest counts reachable by buying prefix increments.

    Buying prefix ``i`` costs ``costs[i]`` and adds one to every count in
    ``0..i``; the total spent may not exceed ``budget``.
    """
    costs = list(costs)
    if budget < 0:
        raise ValueError("budget must not be negative")
    if any(cost <= 0 for cost in costs):
        raise ValueError("costs must be positive")

    order = sorted(range(len(costs)), key=lambda i: (costs[i], -i))
    counts = [0] * len(costs)
    last_cost = 0
    last_position = -1
    last_count = _MAX_COUNT
    remaining = budget
    for index in order:
        if remaining == 0:
            break
        if index <= last_position:
            continue
        step = costs[index] - last_cost
        bought = min(remaining // step, last_count)
        counts[index] = bought
        remaining -= bought * step
        last_count = bought
        last_cost = costs[index]
        last_position = index

    return list(accumulate(reversed(counts), max))[::-1]