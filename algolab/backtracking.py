"""Backtracking searches: subsets with a given sum and the n-queens puzzle."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def subset_sums(values: Sequence[int], target: int) -> list[tuple[int, ...]]:
    """Return every subset of ``values`` that adds up to ``target``.

    ``values`` is expected in increasing order. Subsets come in the order of
    a search that tries including each element before leaving it out. If the
    elements cannot reach the target, or the smallest already exceeds it,
    the result is empty.
    """
    values = tuple(values)
    if sum(values) < target or (values and values[0] > target):
        return []

    def search(index: int, total: int, chosen: tuple[int, ...]) -> Iterator[tuple[int, ...]]:
        if total == target:
            yield chosen
            return
        if total > target or index == len(values):
            return
        value = values[index]
        yield from search(index + 1, total + value, chosen + (value,))
        yield from search(index + 1, total, chosen)

    return list(search(0, 0, ()))


def _can_place(columns: list[int], row: int) -> bool:
    column = columns[row]
    return all(
        other != column and abs(other - column) != row - earlier
        for earlier, other in enumerate(columns[:row])
    )


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` non-attacking queens.

    Each placement gives, row by row, the zero-based column of the queen.
    Placements come in lexicographic order; nothing is yielded for n < 1.
    """
    if n < 1:
        return
    columns = [-1]
    while columns:
        row = len(columns) - 1
        columns[row] += 1
        while columns[row] < n and not _can_place(columns, row):
            columns[row] += 1
        if columns[row] < n:
            if row == n - 1:
                yield tuple(columns)
            else:
                columns.append(-1)
        else:
            columns.pop()


def render_board(columns: Sequence[int], separator: str = "") -> str:
    """Draw a placement as rows of ``-`` with ``Q`` for each queen."""
    size = len(columns)
    lines = []
    for column in columns:
        if not 0 <= column < size:
            raise ValueError(f"column {column} is off a board of size {size}")
        cells = ["-"] * size
        cells[column] = "Q"
        lines.append(separator.join(cells))
    return "\n".join(lines)