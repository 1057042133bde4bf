"""Classic comparison sorts and a timing harness for them."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")

VALUE_RANGE = 100000
"""Random benchmark data is drawn from ``range(VALUE_RANGE)``."""


@dataclass(frozen=True)
class Timing:
    """How long one sort of ``size`` values took, in milliseconds."""

    size: int
    milliseconds: float


def selection_sort(values: Sequence[T]) -> list[T]:
    """Return a sorted copy, moving the smallest remaining value forward each pass."""
    items = list(values)
    for position in range(len(items) - 1):
        smallest = min(range(position, len(items)), key=items.__getitem__)
        items[position], items[smallest] = items[smallest], items[position]
    return items


def _partition(items: list, low: int, high: int) -> int:
    pivot = items[low]
    i, j = low + 1, high
    while True:
        while i <= high and items[i] <= pivot:
            i += 1
        while j >= low and items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
        else:
            break
    items[low], items[j] = items[j], items[low]
    return j


def quicksort(values: Sequence[T]) -> list[T]:
    """Return a sorted copy, partitioning around the first element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Sequence[T]) -> list[T]:
    """Return a stable sorted copy by recursive halving and merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def benchmark(
    sort: Callable[[list[int]], object],
    start: int = 6000,
    step: int = 1000,
    iterations: int = 5,
    seed: int | None = None,
) -> list[Timing]:
    """Time ``sort`` on random data of growing size.

    The first run sorts ``start`` values, each later run ``step`` more.
    """
    if start < 0 or step < 0 or iterations < 0:
        raise ValueError("start, step and iterations must not be negative")
    rng = random.Random(seed)
    timings = []
    for run in range(iterations):
        size = start + run * step
        data = [rng.randrange(VALUE_RANGE) for _ in range(size)]
        began = time.perf_counter()
        sort(data)
        elapsed = (time.perf_counter() - began) * 1000
        timings.append(Timing(size, elapsed))
    return timings