"""Topological ordering by repeated removal of source vertices."""

from __future__ import annotations

from collections.abc import Sequence


class TopologicalSortError(ValueError):
    """Raised when the graph has a cycle; ``order`` holds the vertices placed before it."""

    def __init__(self, order: list[int]) -> None:
        super().__init__("topological sorting not possible")
        self.order = order


def topological_sort(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return the vertices (zero-based) in topological order.

    An entry of 1 at ``adjacency[i][j]`` is an edge from i to j. The
    lowest-numbered vertex with no remaining incoming edge is taken first.
    """
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    indegree = [sum(1 for row in adjacency if row[j] == 1) for j in range(size)]
    remaining = set(range(size))
    order: list[int] = []
    while True:
        ready = next((v for v in range(size) if v in remaining and indegree[v] == 0), None)
        if ready is None:
            break
        remaining.discard(ready)
        order.append(ready)
        for target, edge in enumerate(adjacency[ready]):
            if edge == 1 and target in remaining:
                indegree[target] -= 1
    if remaining:
        raise TopologicalSortError(order)
    return order