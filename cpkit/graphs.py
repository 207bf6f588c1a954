"""Shortest travel time when bikes with different slowness can be picked up."""

import heapq
from collections.abc import Iterable, Sequence


def min_travel_time(
    n: int,
    edges: Iterable[tuple[int, int, int]],
    slowness: Sequence[int],
) -> int:
    """Return the least time to ride from city 1 to city ``n``.

    Roads are undirected ``(a, b, length)`` triples over 1-based cities.
    Riding a road takes ``length`` times the slowness of the best bike
    picked up so far; city ``i`` offers a bike of slowness ``slowness[i - 1]``.
    """
    slowness = list(slowness)
    if n < 1:
        raise ValueError("there must be at least one city")
    if len(slowness) != n:
        raise ValueError("slowness must have one entry per city")

    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, length in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"road ({a}, {b}) refers to a city outside 1..{n}")
        adjacency[a].append((b, length))
        adjacency[b].append((a, length))

    start = (1, slowness[0])
    best = {start: 0}
    heap = [(0, 1, slowness[0])]
    while heap:
        time, city, bike = heapq.heappop(heap)
        if time > best[(city, bike)]:
            continue
        if city == n:
            return time
        for neighbour, length in adjacency[city]:
            state = (neighbour, min(bike, slowness[neighbour - 1]))
            arrival = time + length * bike
            if state not in best or arrival < best[state]:
                best[state] = arrival
                heapq.heappush(heap, (arrival, *state))

    raise ValueError(f"city {n} cannot be reached from city 1")