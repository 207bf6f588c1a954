"""Problems on a hiking schedule, exam lists, interesting pairs and tree prices."""

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence


def journey_day(n: int, a: int, b: int, c: int) -> int:
    """Return the day on which the total walked first reaches ``n``.

    The walker covers ``a``, ``b`` and ``c`` kilometres on days repeating
    in cycles of three.
    """
    if n < 1:
        raise ValueError("n must be positive")
    if min(a, b, c) < 1:
        raise ValueError("daily distances must be positive")
    cycle = a + b + c
    days = n // cycle * 3
    left = n % cycle
    if left > a:
        days += 1
        left -= a
        days += 2 if left > b else 1
    elif left:
        days += 1
    return days


def pass_exam_mask(n: int, lists: Sequence[int], known: Iterable[int]) -> str:
    """Return a '0'/'1' string telling for each list whether it can be passed.

    List ``i`` holds every question in ``1..n`` except ``lists[i]``; a list
    is passed when every question on it is known.
    """
    if n < 1:
        raise ValueError("n must be positive")
    unknown = set(range(1, n + 1)).difference(known)
    if not unknown:
        return "1" * len(lists)
    if len(unknown) == 1:
        (missing,) = unknown
        return "".join("1" if left_out == missing else "0" for left_out in lists)
    return "0" * len(lists)


def count_interesting_pairs(values: Sequence[int], x: int, y: int) -> int:
    """Count pairs ``i < j`` whose removal leaves a sum within ``x..y``."""
    ordered = sorted(values)
    total = sum(ordered)
    count = 0
    for index, current in enumerate(ordered):
        high = bisect_right(ordered, total - x - current, index + 1)
        low = bisect_left(ordered, total - y - current, index + 1)
        if high > low:
            count += high - low
    return count


def max_tree_earnings(k: int, a: Sequence[int], b: Sequence[int]) -> int:
    """Return the best earnings from one tree price with at most ``k`` negative reviews.

    Customer ``i`` buys happily at a price up to ``a[i]``, buys but leaves a
    negative review up to ``b[i]`` and does not buy above that.
    """
    happy_limits = sorted(a)
    buy_limits = sorted(b)
    if len(happy_limits) != len(buy_limits):
        raise ValueError("a and b must have the same length")
    if k < 0:
        raise ValueError("k must not be negative")
    size = len(buy_limits)
    best = 0
    for price in sorted(set(happy_limits) | set(buy_limits)):
        buyers = size - bisect_left(buy_limits, price)
        happy = size - bisect_left(happy_limits, price)
        if buyers - happy <= k:
            best = max(best, price * buyers)
    return best