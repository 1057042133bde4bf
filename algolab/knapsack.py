"""0/1 and fractional knapsack problems."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Item:
    """An item with a weight and a profit."""

    weight: int
    profit: int

    @property
    def ratio(self) -> float:
        """Profit per unit of weight; weightless items rank first."""
        if self.weight == 0:
            return math.inf
        return self.profit / self.weight


@dataclass(frozen=True)
class Portion:
    """The share of one item put in the knapsack.

    ``index`` is the item's position in the input, ``remaining`` the
    capacity left after adding it.
    """

    index: int
    item: Item
    fraction: float
    remaining: int | float

    @property
    def value(self) -> float:
        return self.item.profit * self.fraction


@dataclass(frozen=True)
class FractionalResult:
    """Portions taken, best ratio first, and their total value."""

    portions: tuple[Portion, ...]
    total: float


def max_profit(items: Iterable[Item], capacity: int) -> int:
    """Return the best profit of a 0/1 knapsack of the given capacity."""
    goods = tuple(items)

    @lru_cache(maxsize=None)
    def best(position: int, room: int) -> int:
        if position == len(goods):
            return 0
        item = goods[position]
        skip = best(position + 1, room)
        if item.weight > room:
            return skip
        return max(skip, best(position + 1, room - item.weight) + item.profit)

    return best(0, capacity)


def fractional_knapsack(items: Iterable[Item], capacity: int | float) -> FractionalResult:
    """Fill the knapsack greedily by profit-to-weight ratio, splitting the last item."""
    ranked = sorted(enumerate(items), key=lambda pair: pair[1].ratio, reverse=True)
    portions: list[Portion] = []
    total = 0.0
    for index, item in ranked:
        if capacity <= 0:
            break
        if item.weight <= capacity:
            capacity -= item.weight
            portion = Portion(index, item, 1.0, capacity)
        else:
            portion = Portion(index, item, capacity / item.weight, 0)
            capacity = 0
        total += portion.value
        portions.append(portion)
    return FractionalResult(tuple(portions), total)