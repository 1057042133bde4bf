"""Command line front end for the algorithms in this package."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from .backtracking import n_queens, render_board, subset_sums
from .knapsack import Item, fractional_knapsack, max_profit
from .paths import dijkstra, floyd
from .sorting import benchmark, merge_sort, quicksort, selection_sort
from .spanning import Edge, kruskal, prim
from .toposort import TopologicalSortError, topological_sort

_SORTS: dict[str, tuple[Callable[[list[int]], object], int, int]] = {
    "selection": (selection_sort, 6000, 1000),
    "quick": (quicksort, 60000, 10000),
    "merge": (merge_sort, 60000, 10000),
}


class _Reader:
    """Whitespace-separated integers read one at a time."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def integer(self, what: str) -> int:
        token = next(self._tokens, None)
        if token is None:
            raise ValueError(f"missing {what}")
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"{what} must be an integer, got {token!r}") from None

    def count(self, what: str) -> int:
        value = self.integer(what)
        if value < 0:
            raise ValueError(f"{what} must not be negative")
        return value

    def matrix(self, size: int, what: str) -> list[list[int]]:
        return [[self.integer(what) for _ in range(size)] for _ in range(size)]


def _print_edges(edges: Sequence[Edge]) -> int:
    for number, edge in enumerate(edges, start=1):
        print(f"{number} edge({edge.u + 1},{edge.v + 1}) is {edge.weight}")
    return sum(edge.weight for edge in edges)


def _run_kruskal(reader: _Reader) -> None:
    size = reader.count("number of vertices")
    cost = reader.matrix(size, "matrix entry")
    edges = kruskal(cost)
    print("Minimum Spanning Tree using Kruskal's Algorithm:")
    total = _print_edges(edges)
    print(f"The minimum cost is {total}")


def _run_prim(reader: _Reader) -> None:
    size = reader.count("number of vertices")
    cost = reader.matrix(size, "matrix entry")
    edges = prim(cost)
    print("The edges of mst are :")
    total = _print_edges(edges)
    print(f"The mincost is {total}")


def _run_floyd(reader: _Reader) -> None:
    size = reader.count("number of nodes")
    cost = reader.matrix(size, "matrix entry")
    print("The all pair shortest path is")
    for row in floyd(cost):
        print(" ".join(str(value) for value in row))


def _run_dijkstra(reader: _Reader) -> None:
    size = reader.count("number of nodes")
    source = reader.integer("source vertex")
    cost = reader.matrix(size, "matrix entry")
    distances = dijkstra(cost, source - 1)
    for target, distance in enumerate(distances, start=1):
        print(f"The shortest path from {source} to {target} is {distance}")


def _run_toposort(reader: _Reader) -> None:
    size = reader.count("number of nodes")
    adjacency = reader.matrix(size, "matrix entry")
    try:
        order = topological_sort(adjacency)
    except TopologicalSortError:
        print("Topological sorting not possible")
        return
    print("Topological sorting is: " + " ".join(str(vertex + 1) for vertex in order))


def _run_knapsack(reader: _Reader) -> None:
    count = reader.count("number of objects")
    capacity = reader.integer("knapsack capacity")
    items = []
    for _ in range(count):
        profit = reader.integer("profit")
        weight = reader.integer("weight")
        items.append(Item(weight=weight, profit=profit))
    print(f"The max profit is {max_profit(items, capacity)}")


def _run_fractional(reader: _Reader) -> None:
    count = reader.count("number of items")
    items = []
    for _ in range(count):
        weight = reader.integer("weight")
        value = reader.integer("value")
        if weight <= 0:
            raise ValueError("item weights must be positive")
        items.append(Item(weight=weight, profit=value))
    capacity = reader.integer("knapsack capacity")
    result = fractional_knapsack(items, capacity)
    for portion in result.portions:
        item = portion.item
        if portion.fraction >= 1.0:
            print(
                f"Added item {portion.index + 1} fully (w={item.weight}, v={item.profit}), "
                f"remaining capacity = {portion.remaining}"
            )
        else:
            print(
                f"Added {portion.fraction * 100:.2f}% of item {portion.index + 1} "
                f"(w={item.weight}, v={item.profit})"
            )
    print(f"Total value in knapsack = {result.total:.2f}")


def _run_subsets(reader: _Reader) -> None:
    count = reader.count("number of elements")
    values = [reader.integer("set element") for _ in range(count)]
    target = reader.integer("target sum")
    subsets = subset_sums(values, target)
    if sum(values) < target or (values and values[0] > target):
        print("No subset possible.")
        return
    for subset in subsets:
        print("Subset: " + "".join(f"{value} " for value in subset))


def _run_queens(reader: _Reader) -> None:
    size = reader.integer("number of queens")
    for placement in n_queens(size):
        print(render_board(placement))
        print("\n")


_HANDLERS: dict[str, tuple[Callable[[_Reader], None], str]] = {
    "kruskal": (_run_kruskal, "minimum spanning tree by Kruskal's method"),
    "prim": (_run_prim, "minimum spanning tree by Prim's method"),
    "floyd": (_run_floyd, "all-pairs shortest paths"),
    "dijkstra": (_run_dijkstra, "single-source shortest paths"),
    "toposort": (_run_toposort, "topological ordering"),
    "knapsack": (_run_knapsack, "0/1 knapsack: count, capacity, then profit weight pairs"),
    "fractional": (_run_fractional, "fractional knapsack: count, weight value pairs, capacity"),
    "subsets": (_run_subsets, "subsets with a given sum"),
    "queens": (_run_queens, "all solutions of the n-queens puzzle"),
}


def _run_benchmark(args: argparse.Namespace) -> None:
    sort, default_start, default_step = _SORTS[args.algorithm]
    start = default_start if args.start is None else args.start
    step = default_step if args.step is None else args.step
    print("Input Size\tTime Taken (ms)")
    for timing in benchmark(sort, start, step, args.iterations, args.seed):
        print(f"{timing.size}\t\t{timing.milliseconds:.2f} ms")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algolab",
        description="Run a classic algorithm on integers read from a file or standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, summary) in _HANDLERS.items():
        sub = commands.add_parser(name, help=summary, description=summary)
        sub.add_argument(
            "-i", "--input", help="file to read the integers from (default: standard input)"
        )
    bench = commands.add_parser("benchmark", help="time a sort on random data of growing size")
    bench.add_argument("--algorithm", choices=sorted(_SORTS), default="selection")
    bench.add_argument("--start", type=int, help="size of the first run")
    bench.add_argument("--step", type=int, help="growth in size from one run to the next")
    bench.add_argument("--iterations", type=int, default=5)
    bench.add_argument("--seed", type=int)
    return parser


def _read_input(path: str | None) -> str:
    if path is None:
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "benchmark":
            _run_benchmark(args)
        else:
            handler, _ = _HANDLERS[args.command]
            handler(_Reader(_read_input(args.input)))
    except (OSError, ValueError) as error:
        print(f"algolab: error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())