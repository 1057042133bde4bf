# algolab

Textbook algorithms as plain Python functions, plus one command, `algolab`,
that runs them on integers read from a file or standard input.

## What is inside

| Module | Names | Topic |
| --- | --- | --- |
| `algolab.spanning` | `kruskal`, `prim`, `Edge` | Minimum spanning trees from a cost matrix |
| `algolab.paths` | `floyd`, `warshall`, `dijkstra` | All-pairs shortest paths, transitive closure, single-source shortest paths |
| `algolab.toposort` | `topological_sort`, `TopologicalSortError` | Ordering the vertices of a directed acyclic graph |
| `algolab.knapsack` | `max_profit`, `fractional_knapsack`, `Item`, `Portion`, `FractionalResult` | 0/1 and greedy fractional knapsack |
| `algolab.backtracking` | `subset_sums`, `n_queens`, `render_board` | Sum of subsets and the n-queens puzzle |
| `algolab.sorting` | `selection_sort`, `quicksort`, `merge_sort`, `benchmark`, `Timing` | Sorting and timing over growing inputs |
| `algolab.cli` | `main` | The `algolab` command |

In the library, graphs are square matrices written as lists of lists, and
vertices are numbered from 0. What counts as "no edge" depends on the
function:

- `kruskal` and `prim`: a zero, or any weight of 999 or more.
- `floyd`: a zero off the diagonal; missing paths come out as 999.
- `dijkstra`: the value 999 (`paths.INFINITY`); zero is a real edge of
  weight zero. Unreachable vertices keep a distance of 999 or more.
- `warshall` and `topological_sort`: 0/1 matrices, 1 meaning an edge from
  row to column.

Matrices that are not square raise `ValueError`, as do disconnected graphs
given to `kruskal` or `prim`, and a source vertex out of range given to
`dijkstra`. `topological_sort` raises `TopologicalSortError` (a
`ValueError`) when the graph has a cycle; its `order` attribute holds the
vertices placed before the cycle stopped the sort.

## Installation

```
pip install .
```

No third-party packages are needed at run time. To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from algolab.spanning import kruskal, prim
from algolab.paths import floyd
from algolab.knapsack import Item, max_profit, fractional_knapsack
from algolab.backtracking import n_queens, render_board, subset_sums
from algolab.sorting import benchmark, merge_sort, quicksort

cost = [
    [0, 2, 0, 6],
    [2, 0, 3, 8],
    [0, 3, 0, 0],
    [6, 8, 0, 0],
]

tree = kruskal(cost)        # [Edge(u=0, v=1, weight=2), Edge(1, 2, 3), Edge(0, 3, 6)]
grown = prim(cost)          # a minimum spanning tree grown from vertex 0
distances = floyd(cost)     # shortest distance between every pair of vertices

best = max_profit([Item(weight=2, profit=3), Item(weight=3, profit=4)], 5)
greedy = fractional_knapsack([Item(10, 60), Item(20, 100)], 15)
# greedy.portions lists what was taken, best ratio first; greedy.total its value

subsets = subset_sums([1, 2, 3, 4], 5)   # a list of tuples adding up to 5
for placement in n_queens(4):            # column of the queen in each row
    print(render_board(placement, " "))

ordered = merge_sort([5, 3, 9, 1])       # [1, 3, 5, 9]
for timing in benchmark(quicksort, 60000, 10000, 5, 1):
    print(timing.size, timing.milliseconds)
```

All three sorts return a new list and leave their input alone. `benchmark`
times a sort on random integers below 100000; the first run sorts `start`
values and each later run `step` more. Passing a `seed` makes the data
repeatable.

## Command line

`algolab` takes a subcommand. Each algorithm subcommand reads
whitespace-separated integers from the file given with `-i`/`--input`, or
from standard input, and prints its result. Vertices and items are numbered
from 1 in what the command reads and prints.

| Subcommand | Input, in order |
| --- | --- |
| `kruskal`, `prim` | vertex count, cost matrix |
| `floyd` | node count, cost matrix |
| `dijkstra` | node count, source vertex, cost matrix |
| `toposort` | node count, 0/1 adjacency matrix |
| `knapsack` | item count, capacity, then a profit and a weight per item |
| `fractional` | item count, a weight and a value per item, then capacity |
| `subsets` | element count, the elements in increasing order, target sum |
| `queens` | number of queens |

For example:

```
echo "4  0 2 0 6  2 0 3 8  0 3 0 0  6 8 0 0" | algolab kruskal
```

prints

```
Minimum Spanning Tree using Kruskal's Algorithm:
1 edge(1,2) is 2
2 edge(2,3) is 3
3 edge(1,4) is 6
The minimum cost is 11
```

The `benchmark` subcommand times a sort on random data of growing size and
prints a table of sizes and milliseconds:

```
algolab benchmark --algorithm quick --iterations 3 --seed 1
```

`--algorithm` is one of `selection` (the default), `quick` or `merge`.
Without `--start` and `--step`, selection sort starts at 6000 values growing
by 1000, and the other two start at 60000 growing by 10000. `--iterations`
defaults to 5.

Bad or missing input, and unreadable files, print a message starting with
`algolab: error:` on standard error and end with exit status 1.

```
algolab --help
```

lists every subcommand.

## What it does not do

- The command does not prompt for its input; it reads everything at once
  from a file or standard input.
- There is no subcommand for the transitive closure; use
  `algolab.paths.warshall` from Python.
- Benchmark timings are wall-clock measurements of one run each, and vary
  from machine to machine.