"""Earliest time each slime in a row can be eaten."""

from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def slime_eat_times(sizes: Sequence[int]) -> list[int | None]:
    """Return, for each slime, the fewest seconds until it can be eaten.

    A slime eats a strictly smaller neighbour and grows by its size. The
    entry is ``None`` for a slime that can never be eaten.
    """
    values = [0, *sizes]
    count = len(values) - 1
    if any(size <= 0 for size in values[1:]):
        raise ValueError("slime sizes must be positive")

    prefix = [0] * (count + 1)
    run_back = [0] * (count + 2)
    for i in range(count):
        prefix[i + 1] = prefix[i] + values[i + 1]
        if values[i] == values[i + 1]:
            run_back[i + 1] = (run_back[i] if run_back[i] > 0 else 1) + 1

    run_ahead = [0] * (count + 2)
    for i in range(count - 1, -1, -1):
        if values[i] == values[i + 1]:
            run_ahead[i] = (run_ahead[i + 1] if run_ahead[i + 1] > 0 else 1) + 1

    result: list[int | None] = []
    for i in range(1, count + 1):
        best: int | None = None

        def offer(candidate: int) -> None:
            nonlocal best
            if best is None or candidate < best:
                best = candidate

        found = bisect_left(prefix, prefix[i - 1] - values[i])
        if found > 0:
            distance = (i - 1) - (found - 1)
            if distance == 1:
                offer(1)
            else:
                run = run_back[i - 1]
                if distance <= run < i - 1:
                    offer(run + 1)
                elif run < distance:
                    offer(distance)

        found = bisect_right(prefix, prefix[i] + values[i])
        if found <= count:
            distance = (found - 1) - (i - 1)
            if distance == 1:
                offer(1)
            else:
                run = run_ahead[i + 1]
                if run >= distance and run + i < count:
                    offer(run + 1)
                elif run < distance:
                    offer(distance)

        result.append(best)
    return result