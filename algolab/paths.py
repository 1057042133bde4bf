"""Shortest paths and transitive closure over adjacency matrices."""

from __future__ import annotations

from collections.abc import Sequence

INFINITY = 999
"""Distance that stands for "no path"."""


def _size(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def floyd(cost: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return all-pairs shortest distances.

    Off-diagonal zeros in ``cost`` mean no edge and become INFINITY.
    """
    _size(cost)
    dist = [
        [INFINITY if weight == 0 and i != j else weight for j, weight in enumerate(row)]
        for i, row in enumerate(cost)
    ]
    for k, via in enumerate(dist):
        for row in dist:
            through = row[k]
            row[:] = [min(current, through + step) for current, step in zip(row, via)]
    return dist


def warshall(reachability: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transitive closure of a 0/1 reachability matrix."""
    _size(reachability)
    reach = [[bool(cell) for cell in row] for row in reachability]
    for k, via in enumerate(reach):
        for row in reach:
            if row[k]:
                row[:] = [a or b for a, b in zip(row, via)]
    return [[int(cell) for cell in row] for row in reach]


def dijkstra(cost: Sequence[Sequence[int]], source: int) -> list[int]:
    """Return distances from ``source`` to every vertex.

    ``cost`` holds INFINITY where there is no edge. Unreachable vertices
    keep a distance of INFINITY or more.
    """
    size = _size(cost)
    if not 0 <= source < size:
        raise ValueError(f"source vertex {source} out of range")
    dist = list(cost[source])
    done = {source}
    while True:
        pending = [(d, j) for j, d in enumerate(dist) if j not in done and d < INFINITY]
        if not pending:
            break
        _, nearest = min(pending)
        done.add(nearest)
        for j, step in enumerate(cost[nearest]):
            if j not in done and dist[nearest] + step < dist[j]:
                dist[j] = dist[nearest] + step
    return dist