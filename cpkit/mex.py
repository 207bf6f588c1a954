"""MEX problems: clearing an array and labelling dragons in a circle."""

from collections.abc import Sequence


def min_mex_operations(values: Sequence[int]) -> int:
    """Fewest subarray-to-MEX replacements that turn ``values`` into all zeros."""
    segments = 0
    inside = False
    for value in values:
        if value != 0 and not inside:
            segments += 1
        inside = value != 0
    return min(2, segments)


def _mex(seen: set[int]) -> int:
    value = 0
    while value in seen:
        value += 1
    return value


def mex_friends(n: int, x: int, y: int) -> list[int]:
    """Label ``n`` dragons in a circle so each label is the MEX of its friends' labels.

    Dragon ``i`` is friends with its circular neighbours, and dragons ``x``
    and ``y`` (1-based) are friends too. Labels come from a depth-first pass
    from dragon 1 in which friends still being labelled are ignored.
    """
    if n < 3:
        raise ValueError("n must be at least 3")
    if not (1 <= x <= n and 1 <= y <= n) or x == y:
        raise ValueError("x and y must be distinct dragons in 1..n")
    x -= 1
    y -= 1

    friends = [{(i - 1) % n, (i + 1) % n} for i in range(n)]
    friends[x].add(y)
    friends[y].add(x)
    neighbours = [sorted(group) for group in friends]

    labels = [-1] * n
    visited = [False] * n
    visited[0] = True
    stack: list[tuple[int, list[int], int, set[int]]] = [(0, neighbours[0], 0, set())]
    while stack:
        node, around, index, seen = stack.pop()
        if index < len(around):
            friend = around[index]
            stack.append((node, around, index + 1, seen))
            if labels[friend] != -1:
                seen.add(labels[friend])
            elif not visited[friend]:
                visited[friend] = True
                stack.append((friend, neighbours[friend], 0, set()))
            continue
        labels[node] = _mex(seen)
        if stack:
            stack[-1][3].add(labels[node])
    return labels