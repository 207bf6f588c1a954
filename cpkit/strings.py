"""String problems: segment reversals and positions in a chain of minimal strings."""

from bisect import bisect_left
from collections.abc import Iterable, Sequence


def apply_reversals(
    s: str,
    lefts: Sequence[int],
    rights: Sequence[int],
    queries: Iterable[int],
) -> str:
    """Apply mirrored reversals inside fixed segments and return the final string.

    The segments ``[lefts[i], rights[i]]`` (1-based, sorted, covering the
    string) are fixed. A query ``x`` falls in the segment whose right end is
    the first one not below ``x`` and reverses the substring between ``x``
    and its mirror ``lefts[i] + rights[i] - x``.
    """
    lefts = list(lefts)
    rights = list(rights)
    if len(lefts) != len(rights):
        raise ValueError("lefts and rights must have the same length")
    chars = list(s)

    marked: dict[int, int] = {}
    for x in queries:
        segment = bisect_left(rights, x)
        if segment == len(rights) or not 1 <= x <= len(chars):
            raise ValueError(f"query {x} lies outside every segment")
        low, high = sorted((lefts[segment] + rights[segment] - x, x))
        if low in marked:
            del marked[low]
        else:
            marked[low] = high

    pending = sorted(marked.items())
    cursor = 0
    for right in rights:
        if cursor >= len(pending):
            break
        apply = True
        while cursor < len(pending) and pending[cursor][0] <= right:
            if apply:
                low, high = pending[cursor]
                low -= 1
                high -= 1
                limit = (high - low + 1) // 2
                if cursor + 1 < len(pending) and pending[cursor + 1][0] <= right:
                    limit = min(limit, pending[cursor + 1][0] - 1 - low)
                count = max(0, limit)
                if count:
                    head = chars[low:low + count]
                    tail = chars[high - count + 1:high + 1]
                    chars[low:low + count] = tail[::-1]
                    chars[high - count + 1:high + 1] = head[::-1]
            apply = not apply
            cursor += 1

    return "".join(chars)


def char_at_position(s: str, pos: int) -> str:
    """Return the character at 1-based ``pos`` of the concatenation S1 S2 ... Sn.

    ``S1`` is ``s`` and each next string drops one character so that the
    result is lexicographically smallest.
    """
    size = len(s)
    if size == 0:
        raise ValueError("the string must not be empty")
    if not 1 <= pos <= size * (size + 1) // 2:
        raise ValueError(f"position {pos} is out of range")

    consumed = 0
    length = size
    while pos > consumed + length:
        consumed += length
        length -= 1
    offset = pos - consumed

    to_remove = size - length
    stack: list[str] = []
    for ch in s:
        while to_remove > 0 and stack and stack[-1] > ch:
            stack.pop()
            to_remove -= 1
        stack.append(ch)
    if to_remove:
        del stack[len(stack) - to_remove:]
    return stack[offset - 1]