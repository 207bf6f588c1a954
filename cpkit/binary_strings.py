"""Counting problems on binary strings and on pairs avoiding a forbidden set."""

from collections.abc import Sequence


def sum_of_min_operations(s: str) -> int:
    """Sum, over all substrings of ``s``, the fewest operations that cover every '1'.

    One operation covers three consecutive positions. The greedy cover of a
    substring starting at ``i`` jumps three places from each uncovered '1',
    and a jump made at position ``p`` counts for every substring ``s[i:j+1]``
    with ``j >= p``.
    """
    if any(ch not in "01" for ch in s):
        raise ValueError(f"expected a binary string, got {s!r}")
    size = len(s)
    total = 0
    for start in range(size):
        position = start
        while position < size:
            if s[position] == "1":
                total += size - position
                position += 3
            else:
                position += 1
    return total


def count_safe_pairs(c: int, values: Sequence[int]) -> int:
    """Count pairs ``0 <= x <= y <= c`` where neither ``x + y`` nor ``y - x`` is in ``values``.

    ``values`` must be distinct integers in ``0..c``.
    """
    if c < 0:
        raise ValueError("c must not be negative")
    values = list(values)
    if len(set(values)) != len(values):
        raise ValueError("values must be distinct")
    if any(not 0 <= value <= c for value in values):
        raise ValueError(f"values must lie in 0..{c}")

    pairs = (c + 1) * (c + 2) // 2
    seen = [0, 0]
    for value in values:
        parity = value & 1
        removed = value // 2 + (c - value) + 1 - seen[parity]
        seen[parity] += 1
        pairs -= removed
    return pairs