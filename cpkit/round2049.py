"""Permutation feasibility from p/s constraints and the cheapest path with row shifts."""

import math
from collections.abc import Sequence

_ALLOWED = frozenset("ps.")


def permutation_possible(s: str) -> bool:
    """Decide whether some permutation satisfies the prefix and suffix constraints.

    ``s[i] == 'p'`` asks that the first ``i + 1`` elements form a
    permutation, ``'s'`` asks the same of the suffix starting at ``i``, and
    ``'.'`` asks nothing.
    """
    if any(ch not in _ALLOWED for ch in s):
        raise ValueError(f"expected only 'p', 's' and '.', got {s!r}")

    forward: list[str] = []
    prefixes: list[int] = []
    suffixes: list[int] = []
    for index, ch in enumerate(s):
        if ch == ".":
            ch = "p" if prefixes else "s"
        forward.append(ch)
        (suffixes if ch == "s" else prefixes).append(index)

    if not suffixes or not prefixes:
        return True
    if prefixes[0] < suffixes[-1]:
        return False
    if not (len(prefixes) > 1 and len(suffixes) > 1):
        return True

    prefix_count = 0
    suffix_count = 0
    for ch in reversed(s):
        if ch == ".":
            ch = "s" if suffix_count else "p"
        if ch == "s":
            suffix_count += 1
        else:
            prefix_count += 1

    return not (prefix_count > 1 and suffix_count > 1)


def min_shift_path_cost(k: int, grid: Sequence[Sequence[int]]) -> int:
    """Return the least cost of a right/down path after cyclic left shifts of rows.

    Each shift of a row costs ``k``; the path from the top-left to the
    bottom-right cell then adds the values of the cells it visits.
    """
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("the grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all grid rows must have the same length")

    above = [math.inf] * (width + 1)
    above[1] = 0
    for row in rows:
        current = [math.inf] * (width + 1)
        left = [math.inf] * (width + 1)
        for column in range(1, width + 1):
            here = [math.inf] * (width + 1)
            for shift in range(width + 1):
                target = column + shift
                if target > width:
                    target -= width
                cell = row[target - 1]
                if above[column] != math.inf:
                    here[shift] = min(here[shift], above[column] + k * shift + cell)
                if left[shift] != math.inf:
                    here[shift] = min(here[shift], left[shift] + cell)
            current[column] = min(here)
            left = here
        above = current

    return int(above[width])