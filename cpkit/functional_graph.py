"""Selling order on a functional graph of fears that maximises profit."""

import heapq
from collections.abc import Sequence


def sell_order(fears: Sequence[int], costs: Sequence[int]) -> list[int]:
    """Return the 1-based order in which to sell animals.

    Animal ``i`` is afraid of ``fears[i]`` (1-based). Animals nobody still
    fears go first, smallest number first; each remaining cycle is sold
    starting after its cheapest animal, which goes last.
    """
    count = len(fears)
    if len(costs) != count:
        raise ValueError("fears and costs must have the same length")
    targets = []
    for fear in fears:
        if not 1 <= fear <= count:
            raise ValueError(f"fear target {fear} out of range 1..{count}")
        targets.append(fear - 1)

    indegree = [0] * count
    for target in targets:
        indegree[target] += 1

    heap = [(degree, node) for node, degree in enumerate(indegree)]
    heapq.heapify(heap)
    sold = [False] * count
    order: list[int] = []
    while heap:
        degree, node = heap[0]
        if sold[node] or degree != indegree[node]:
            heapq.heappop(heap)
            continue
        if degree > 0:
            break
        heapq.heappop(heap)
        sold[node] = True
        order.append(node)
        target = targets[node]
        indegree[target] -= 1
        heapq.heappush(heap, (indegree[target], target))

    for start in range(count):
        if sold[start]:
            continue
        cheapest = start
        node = targets[start]
        while node != start:
            if costs[node] < costs[cheapest]:
                cheapest = node
            node = targets[node]
        node = cheapest
        while True:
            node = targets[node]
            sold[node] = True
            order.append(node)
            if node == cheapest:
                break

    return [node + 1 for node in order]