"""Minimum spanning trees over cost adjacency matrices."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

NO_EDGE = 999
"""Weights of this size or more, like zero weights, mean that there is no edge."""


@dataclass(frozen=True)
class Edge:
    """An edge between two vertices (zero-based) and its weight."""

    u: int
    v: int
    weight: int


def _edge_weights(cost: Sequence[Sequence[int]]) -> dict[tuple[int, int], int]:
    size = len(cost)
    if any(len(row) != size for row in cost):
        raise ValueError("cost matrix must be square")
    return {
        (i, j): weight
        for i, row in enumerate(cost)
        for j, weight in enumerate(row)
        if weight != 0 and weight < NO_EDGE
    }


def kruskal(cost: Sequence[Sequence[int]]) -> list[Edge]:
    """Return the edges of a minimum spanning tree, chosen by Kruskal's method.

    Edges are taken cheapest first, ties in row-major order. Raises
    ValueError if the graph is not connected.
    """
    weights = _edge_weights(cost)
    needed = max(len(cost) - 1, 0)
    parent: dict[int, int] = {}

    def find(vertex: int) -> int:
        while vertex in parent:
            vertex = parent[vertex]
        return vertex

    tree: list[Edge] = []
    removed: set[tuple[int, int]] = set()
    for pair in sorted(weights, key=lambda p: (weights[p], p)):
        if len(tree) >= needed:
            break
        if pair in removed:
            continue
        u, v = pair
        removed.add((v, u))
        root_u, root_v = find(u), find(v)
        if root_u != root_v:
            parent[root_v] = root_u
            tree.append(Edge(u, v, weights[pair]))
    if len(tree) < needed:
        raise ValueError("graph is not connected")
    return tree


def prim(cost: Sequence[Sequence[int]]) -> list[Edge]:
    """Return the edges of a minimum spanning tree grown by Prim's method from vertex 0.

    Raises ValueError if the graph is not connected.
    """
    weights = _edge_weights(cost)
    size = len(cost)
    if size == 0:
        return []
    visited = {0}
    tree: list[Edge] = []
    while len(tree) < size - 1:
        candidates = [(w, pair) for pair, w in weights.items() if pair[0] in visited]
        if not candidates:
            raise ValueError("graph is not connected")
        weight, (u, v) = min(candidates)
        if v not in visited:
            tree.append(Edge(u, v, weight))
            visited.add(v)
        weights.pop((u, v), None)
        weights.pop((v, u), None)
    return tree