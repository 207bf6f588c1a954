"""Yes/no feasibility checks: connecting indexed nodes and balancing candies."""

from collections import Counter
from collections.abc import Sequence

_EPS = 1e-9
_BITS = 40


def can_connect_all(c: float, values: Sequence[float]) -> bool:
    """Decide whether every node can be connected to node 1.

    Node ``i`` (1-based) holds ``values[i - 1]``. Nodes join the component
    of node 1 greedily in order of ``i - values[i - 1] / c``. Joining fails
    once the smallest remaining key exceeds the component's total scaled
    value.
    """
    if not values:
        raise ValueError("at least one value is required")
    if c <= 0:
        raise ValueError("c must be positive")
    scaled = [value / c for value in values]
    total = scaled[0]
    pending = sorted((index - share, index) for index, share in enumerate(scaled[1:], start=2))
    for key, index in pending:
        if key - total > _EPS:
            return False
        total += scaled[index - 1]
    return True


def can_balance_candies(values: Sequence[int]) -> bool:
    """Decide whether everyone can end with the average by one power-of-two swap each.

    Each person whose amount differs from the average must give away some
    ``2**x`` and receive some ``2**y``; every given amount must be received
    by someone.
    """
    values = list(values)
    count = len(values)
    if count == 0:
        raise ValueError("at least one value is required")
    total = sum(values)
    if total % count:
        return False
    target = total // count

    given: Counter[int] = Counter()
    received: Counter[int] = Counter()
    for value in values:
        if value == target:
            continue
        for bit in range(_BITS):
            incoming = target - value + (1 << bit)
            if incoming > 0 and incoming & (incoming - 1) == 0:
                given[bit] += 1
                received[incoming.bit_length() - 1] += 1
                break
        else:
            return False
    return all(given[bit] == received[bit] for bit in range(_BITS))