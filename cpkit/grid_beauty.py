"""Grid beauty queries: can one row and one column be cleared to reach a target sum."""

from collections.abc import Iterable, Iterator, Sequence
from math import isqrt


def _divisors(n: int) -> Iterator[int]:
    """Yield the positive divisors of ``n``; nothing for ``n == 0``."""
    for small in range(1, isqrt(n) + 1):
        if n % small == 0:
            yield small
            yield n // small


def grid_queries(a: Sequence[int], b: Sequence[int], queries: Iterable[int]) -> list[bool]:
    """Answer each query for the grid ``M[i][j] = a[i] * b[j]``.

    A query ``x`` is satisfiable when zeroing one whole row and one whole
    column leaves a grid whose sum is ``x``. That sum factors as
    ``(sum(a) - a[r]) * (sum(b) - b[c])``. A query of zero is never
    satisfiable here, since zero has no divisors to try.
    """
    a = list(a)
    b = list(b)
    if not a or not b:
        raise ValueError("both a and b must be non-empty")
    total_a = sum(a)
    total_b = sum(b)
    row_sums = {total_a - value for value in a}
    column_sums = {total_b - value for value in b}

    results = []
    for x in queries:
        results.append(
            any(
                factor in row_sums and x // factor in column_sums
                for divisor in _divisors(abs(x))
                for factor in (divisor, -divisor)
            )
        )
    return results