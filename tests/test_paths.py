import pytest

from algolab.paths import INFINITY, dijkstra, floyd, warshall

WEIGHTED = [
    [0, 1, 10, 0],
    [1, 0, 1, 7],
    [10, 1, 0, 2],
    [0, 7, 2, 0],
]


def _with_sentinel(cost):
    return [
        [INFINITY if w == 0 and i != j else w for j, w in enumerate(row)]
        for i, row in enumerate(cost)
    ]


def test_floyd_diagonal_stays_zero():
    dist = floyd(WEIGHTED)
    assert [dist[i][i] for i in range(len(dist))] == [0] * len(dist)


def test_floyd_satisfies_triangle_inequality():
    dist = floyd(WEIGHTED)
    n = len(dist)
    for i in range(n):
        for j in range(n):
            for k in range(n):
                assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_floyd_prefers_shorter_route():
    dist = floyd(WEIGHTED)
    assert dist[0][2] == dist[0][1] + dist[1][2]
    assert dist[0][2] < WEIGHTED[0][2]


def test_floyd_never_exceeds_direct_edge():
    dist = floyd(WEIGHTED)
    for i, row in enumerate(WEIGHTED):
        for j, w in enumerate(row):
            if w:
                assert dist[i][j] <= w


def test_floyd_unreachable_is_infinity():
    dist = floyd([[0, 0], [0, 0]])
    assert dist[0][1] == INFINITY


def test_floyd_does_not_modify_input():
    cost = [row[:] for row in WEIGHTED]
    floyd(cost)
    assert cost == WEIGHTED


def test_warshall_chain_closure():
    closure = warshall([[0, 1, 0], [0, 0, 1], [0, 0, 0]])
    assert closure == [[0, 1, 1], [0, 0, 1], [0, 0, 0]]


def test_warshall_is_idempotent_and_keeps_edges():
    matrix = [[0, 1, 0, 0], [0, 0, 0, 1], [1, 0, 0, 0], [0, 0, 1, 0]]
    closure = warshall(matrix)
    assert warshall(closure) == closure
    for i, row in enumerate(matrix):
        for j, cell in enumerate(row):
            if cell:
                assert closure[i][j] == 1


def test_warshall_cycle_reaches_everything():
    matrix = [[0, 1, 0], [0, 0, 1], [1, 0, 0]]
    assert warshall(matrix) == [[1] * 3 for _ in range(3)]


@pytest.mark.parametrize("source", range(4))
def test_dijkstra_matches_floyd(source):
    assert dijkstra(_with_sentinel(WEIGHTED), source) == floyd(WEIGHTED)[source]


def test_dijkstra_unreachable_stays_infinity():
    cost = [[0, 3, INFINITY], [3, 0, INFINITY], [INFINITY, INFINITY, 0]]
    dist = dijkstra(cost, 0)
    assert dist[2] == INFINITY
    assert dist[1] == cost[0][1]


def test_dijkstra_rejects_bad_source():
    with pytest.raises(ValueError):
        dijkstra([[0]], 3)


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        floyd([[0, 1, 2], [1, 0]])