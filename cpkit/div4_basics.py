"""Short problems: pair counting, mirrored strings, seating, modes and power ratios."""

from collections.abc import Sequence

_POWER_LIMIT = 10**9


def count_ordered_pairs(n: int) -> int:
    """Count ordered pairs of positive integers ``(a, b)`` with ``a = n - b``."""
    if n < 2:
        raise ValueError("n must be at least 2")
    return n - 1


_MIRROR = str.maketrans("pq", "qp")


def mirror_string(s: str) -> str:
    """Return ``s`` as seen from the other side of the glass: reversed, with p and q swapped."""
    return s.translate(_MIRROR)[::-1]


def max_seated(m: int, a: int, b: int, c: int) -> int:
    """Seat as many monkeys as possible in two rows of ``m`` seats.

    ``a`` want row one, ``b`` want row two and ``c`` take any free seat.
    """
    if min(m, a, b, c) < 0:
        raise ValueError("counts must not be negative")
    seated = min(a, m) + min(b, m)
    return seated + min(2 * m - seated, c)


def mode_preserving_array(values: Sequence[int]) -> list[int]:
    """Build ``b`` such that ``values[i]`` is a mode of ``b[:i + 1]`` for every ``i``.

    Distinct values are kept in order of first appearance and the rest of
    ``1..n`` fills up the remaining places in increasing order.
    """
    values = list(values)
    size = len(values)
    if any(not 1 <= value <= size for value in values):
        raise ValueError(f"values must lie in 1..{size}")
    result = list(dict.fromkeys(values))
    present = set(result)
    for candidate in range(1, size + 1):
        if len(result) == size:
            break
        if candidate not in present:
            result.append(candidate)
    return result


def count_power_pairs(k: int, l1: int, r1: int, l2: int, r2: int) -> int:
    """Count pairs ``(x, y)`` with ``l1 <= x <= r1``, ``l2 <= y <= r2`` and ``y = x * k**n``."""
    if k < 2:
        raise ValueError("k must be at least 2")
    if l1 > r1 or l2 > r2:
        raise ValueError("ranges must not be empty")
    total = 0
    power = 1
    while power <= _POWER_LIMIT:
        low = max(l1, -(-l2 // power))
        high = min(r1, r2 // power)
        if low <= high:
            total += high - low + 1
        power *= k
    return total