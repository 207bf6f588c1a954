"""Bitwise array problems: weighted XOR sums, doublings and maximal AND."""

from collections.abc import Iterable, Sequence

MOD = 998_244_353
_XOR_BITS = 32
_AND_BITS = 63


def sum_xor_lengths(values: Sequence[int]) -> int:
    """Sum ``xor(subarray) * length`` over all subarrays, modulo 998244353."""
    total = 0
    for bit in range(_XOR_BITS):
        weight = 1 << bit
        sums = [0, 0]
        counts = [0, 0]
        parity = 0
        for position, value in enumerate(values, start=1):
            sums[parity] += position
            counts[parity] += 1
            parity ^= (value >> bit) & 1
            other = parity ^ 1
            contribution = ((position + 1) * counts[other] - sums[other]) % MOD
            total = (total + contribution * weight) % MOD
    return total


def min_doublings(values: Sequence[int]) -> int:
    """Return the fewest doublings of elements that make ``values`` non-decreasing."""
    values = list(values)
    if any(value <= 0 for value in values):
        raise ValueError("values must be positive")

    total = 0
    carried = 0
    for previous, current in zip(values, values[1:]):
        shift = 0
        while current < previous:
            shift += 1
            current <<= 1
        while current // 2 >= previous:
            shift -= 1
            current >>= 1
        carried = max(0, carried + shift)
        total += carried
    return total


def max_and_values(values: Sequence[int], budgets: Iterable[int]) -> list[int]:
    """For each budget of unit increments, return the largest reachable AND of ``values``."""
    original = list(values)
    if not original:
        raise ValueError("at least one value is required")

    answers = []
    for budget in budgets:
        if budget < 0:
            raise ValueError("budget must not be negative")
        items = list(original)
        remaining = budget
        answer = 0
        for bit in range(_AND_BITS - 1, -1, -1):
            mask = 1 << bit
            needed = 0
            for item in items:
                if not item & mask:
                    needed += mask - item % mask
                    if needed > remaining:
                        break
            if needed <= remaining:
                remaining -= needed
                answer |= mask
                items = [item if item & mask else 0 for item in items]
        answers.append(answer)
    return answers