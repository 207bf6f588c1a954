"""Array puzzles: digit splits, sorting by shifts and reversals, subsequence counts."""

import math
from collections.abc import Sequence


def digit_split_count(s: str | int) -> int:
    """Count ordered triples (a, b, c) with a + b + c = n and matching digit sums.

    ``s`` is the decimal form of ``n``. Each digit ``d`` can be split across
    the three numbers in ``(d + 2)(d + 1) / 2`` ways without carries.
    """
    text = str(s)
    if not text or not text.isdigit():
        raise ValueError(f"expected a non-empty string of decimal digits, got {text!r}")
    result = 1
    for ch in text:
        digit = int(ch)
        result *= (digit + 2) * (digit + 1) // 2
    return result


def _rotation_cost(values: list[int]) -> float:
    """Operations needed to sort ``values`` using shifts and at most a final reversal."""
    size = len(values)
    signs = [0] + [(b > a) - (b < a) for a, b in zip(values, values[1:])]
    ups = signs.count(1)
    downs = signs.count(-1)

    if ups > 1 and downs > 1:
        return math.inf
    if downs == 0:
        return 0

    ascending = sorted(values)

    if ups == 1 and downs == 1:
        best = math.inf
        for pos in (signs.index(-1), signs.index(1)):
            rotated = values[pos:] + values[:pos]
            cost = size - pos
            if rotated == ascending:
                best = min(best, cost)
            if rotated[::-1] == ascending:
                best = min(best, cost + 1)
        return best

    if ups == 1:
        pos = signs.index(1)
    elif downs == 1:
        if ups == 0:
            return 1
        pos = signs.index(-1)
    else:
        # Non-increasing input is answered before this point is reached.
        return 0

    rotated = values[pos:] + values[:pos]
    cost = size - pos
    if rotated == ascending:
        return cost
    if rotated[::-1] == ascending:
        return cost + 1
    return math.inf


def min_sort_operations(values: Sequence[int]) -> int | None:
    """Fewest shifts (last to front) and reversals that sort ``values`` ascending.

    Returns ``None`` when the list cannot be sorted that way.
    """
    values = list(values)
    ascending = sorted(values)
    if values == ascending:
        return 0
    if values == ascending[::-1]:
        return 1
    best = min(_rotation_cost(values), _rotation_cost(values[::-1]) + 1)
    return None if math.isinf(best) else int(best)


def increasing_subsequence_sequence(x: int) -> list[int]:
    """Build a sequence with exactly ``x`` strictly increasing subsequences, the empty one included."""
    if x < 1:
        raise ValueError("x must be at least 1")
    length = x.bit_length()
    result = list(range(1, length))
    for bit in range(length - 2, -1, -1):
        if x >> bit & 1:
            result.append(result[bit])
    return result