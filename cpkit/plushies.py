"""First stable year of plushie exchanges on a functional graph of recipients."""

from collections.abc import Sequence


def _targets_and_depths(recipients: Sequence[int]) -> tuple[list[int], list[int]]:
    """Return 0-based targets and each node's distance to its cycle (0 on a cycle)."""
    count = len(recipients)
    if count == 0:
        raise ValueError("at least one spider is required")
    targets = []
    for recipient in recipients:
        if not 1 <= recipient <= count:
            raise ValueError(f"recipient {recipient} out of range 1..{count}")
        targets.append(recipient - 1)

    unvisited, on_path, done = 0, 1, 2
    state = [unvisited] * count
    depth = [0] * count
    for start in range(count):
        path: list[int] = []
        node = start
        while state[node] == unvisited:
            state[node] = on_path
            path.append(node)
            node = targets[node]
        if state[node] == on_path:
            cycle_start = path.index(node)
            for member in path[cycle_start:]:
                depth[member] = 0
                state[member] = done
            del path[cycle_start:]
        for member in reversed(path):
            depth[member] = depth[targets[member]] + 1
            state[member] = done
    return targets, depth


def first_stable_year(recipients: Sequence[int]) -> int:
    """Return the first stable year when every spider gives away all it has each year.

    ``recipients[i]`` is the 1-based spider that spider ``i + 1`` gives to.
    """
    _, depth = _targets_and_depths(recipients)
    return max(depth) + 2


def first_stable_year_hoarding(recipients: Sequence[int]) -> int:
    """Return the first stable year when spiders keep every plushie they receive.

    The answer is two more than the largest tree hanging off any cycle.
    """
    targets, depth = _targets_and_depths(recipients)
    sizes = [1] * len(targets)
    largest = 0
    tree_nodes = sorted((node for node, d in enumerate(depth) if d > 0), key=lambda n: -depth[n])
    for node in tree_nodes:
        parent = targets[node]
        if depth[parent] > 0:
            sizes[parent] += sizes[node]
        else:
            largest = max(largest, sizes[node])
    return largest + 2