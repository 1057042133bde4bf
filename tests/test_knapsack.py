import pytest

from algolab.knapsack import FractionalResult, Item, fractional_knapsack, max_profit

CLASSIC = [Item(10, 60), Item(20, 100), Item(30, 120)]
MIXED = [Item(3, 10), Item(3, 15), Item(2, 10), Item(5, 12), Item(1, 8)]


def test_classic_zero_one():
    assert max_profit(CLASSIC, 50) == 220


def test_classic_fractional_total():
    assert fractional_knapsack(CLASSIC, 50).total == pytest.approx(240)


def test_empty_items():
    assert max_profit([], 10) == 0
    assert fractional_knapsack([], 10) == FractionalResult((), 0.0)


def test_everything_fits():
    total_weight = sum(item.weight for item in MIXED)
    assert max_profit(MIXED, total_weight) == sum(item.profit for item in MIXED)
    result = fractional_knapsack(MIXED, total_weight)
    assert result.total == pytest.approx(sum(item.profit for item in MIXED))
    assert all(p.fraction == 1.0 for p in result.portions)


def test_zero_capacity():
    assert max_profit(MIXED, 0) == 0
    assert fractional_knapsack(MIXED, 0).portions == ()


@pytest.mark.parametrize("capacity", range(0, 15))
def test_profit_grows_with_capacity(capacity):
    assert max_profit(MIXED, capacity) <= max_profit(MIXED, capacity + 1)


@pytest.mark.parametrize("capacity", range(1, 15))
def test_fractional_bounds_zero_one(capacity):
    assert fractional_knapsack(MIXED, capacity).total >= max_profit(MIXED, capacity) - 1e-9


@pytest.mark.parametrize("capacity", range(1, 14))
def test_fractional_fills_capacity_exactly(capacity):
    result = fractional_knapsack(MIXED, capacity)
    used = sum(p.item.weight * p.fraction for p in result.portions)
    assert used == pytest.approx(capacity)
    assert all(0 < p.fraction <= 1 for p in result.portions)
    assert result.portions[-1].remaining == 0


def test_fractional_orders_by_ratio():
    result = fractional_knapsack(MIXED, 100)
    ratios = [p.item.ratio for p in result.portions]
    assert ratios == sorted(ratios, reverse=True)
    assert sorted(p.index for p in result.portions) == list(range(len(MIXED)))
    assert all(MIXED[p.index] == p.item for p in result.portions)


def test_only_last_portion_is_partial():
    result = fractional_knapsack(CLASSIC, 50)
    assert [p.fraction for p in result.portions[:-1]] == [1.0, 1.0]
    assert result.portions[-1].fraction < 1


def test_remaining_capacity_decreases():
    result = fractional_knapsack(MIXED, 9)
    remaining = [p.remaining for p in result.portions]
    assert remaining == sorted(remaining, reverse=True)


def test_heavy_item_skipped_in_zero_one():
    assert max_profit([Item(100, 1000), Item(1, 5)], 10) == 5


def test_weightless_item_ranks_first():
    result = fractional_knapsack([Item(4, 8), Item(0, 3)], 2)
    assert result.portions[0].index == 1