"""Tests for the monthly budget allocator."""

from decimal import Decimal
import random

import pytest

from src.domain.models import Asset
from src.domain.services.allocation import (
    allocate_monthly_budget,
    compute_baseline_allocation,
    round_allocations,
)
from src.domain.services.rebalancing import build_rebalance_plan

TOLERANCE = Decimal("0.01")


def test_baseline_allocation_splits_budget_by_weight() -> None:
    """Baseline should be weight / 100 x budget for each holding."""
    baseline = compute_baseline_allocation(
        [Decimal("70"), Decimal("30")],
        Decimal("100"),
    )

    assert baseline == [Decimal("70"), Decimal("30")]


def test_overweight_share_goes_to_underweight_then_spills_back() -> None:
    """Freed cash beyond the gap should fall back to baseline proportions."""
    allocations = allocate_monthly_budget(
        deltas=[Decimal("-15"), Decimal("15")],
        baseline=[Decimal("70"), Decimal("30")],
        budget=Decimal("100"),
    )

    assert allocations == [Decimal("59.5"), Decimal("40.5")]
    assert sum(allocations) == Decimal("100")


def test_no_underweight_returns_baseline() -> None:
    """Without underweight holdings the baseline is returned untouched."""
    baseline = [Decimal("25"), Decimal("75")]

    allocations = allocate_monthly_budget(
        deltas=[Decimal("0"), Decimal("-3")],
        baseline=baseline,
        budget=Decimal("100"),
    )

    assert allocations == baseline


def test_gaps_larger_than_budget_absorb_everything() -> None:
    """Underweight holdings should take all cash, overweight ones none."""
    allocations = allocate_monthly_budget(
        deltas=[Decimal("1000"), Decimal("3000"), Decimal("-4000")],
        baseline=[Decimal("30"), Decimal("30"), Decimal("40")],
        budget=Decimal("100"),
    )

    assert allocations[2] == Decimal("0")
    assert allocations[0] < allocations[1]
    assert sum(allocations) == Decimal("100")


def test_allocations_never_negative_and_sum_to_budget() -> None:
    """Allocations should be non-negative and spend the whole budget."""
    deltas = [Decimal("12"), Decimal("-40"), Decimal("3"), Decimal("25")]
    baseline = [Decimal("100"), Decimal("200"), Decimal("50"), Decimal("150")]
    budget = Decimal("500")

    allocations = allocate_monthly_budget(deltas, baseline, budget)

    assert all(amount >= 0 for amount in allocations)
    assert abs(sum(allocations) - budget) <= Decimal("0.01")


def test_allocator_is_idempotent() -> None:
    """Calling twice with the same inputs returns identical results."""
    deltas = [Decimal("5"), Decimal("-2"), Decimal("9")]
    baseline = [Decimal("20"), Decimal("50"), Decimal("30")]

    first = allocate_monthly_budget(deltas, baseline, Decimal("100"))
    second = allocate_monthly_budget(deltas, baseline, Decimal("100"))

    assert first == second


@pytest.mark.parametrize("budget", [Decimal("0"), Decimal("-10")])
def test_non_positive_budget_is_rejected(budget: Decimal) -> None:
    """Budgets must be strictly positive."""
    with pytest.raises(ValueError):
        allocate_monthly_budget([Decimal("1")], [Decimal("1")], budget)


def test_mismatched_lengths_are_rejected() -> None:
    """Deltas and baseline must line up."""
    with pytest.raises(ValueError):
        allocate_monthly_budget(
            [Decimal("1"), Decimal("2")],
            [Decimal("1")],
            Decimal("10"),
        )


def test_round_allocations_preserves_rounded_total() -> None:
    """Rounding three thirds should still add up to the budget."""
    third = Decimal("100") / Decimal("3")

    rounded = round_allocations([third, third, third])

    assert sum(rounded) == Decimal("100.00")
    assert sorted(rounded) == [
        Decimal("33.33"),
        Decimal("33.33"),
        Decimal("33.34"),
    ]


def test_round_allocations_removes_excess_cents() -> None:
    """Half-up drift upwards should be taken back one cent at a time."""
    rounded = round_allocations(
        [Decimal("0.005"), Decimal("0.005"), Decimal("0.005")]
    )

    assert sum(rounded) == Decimal("0.02")
    assert all(amount >= 0 for amount in rounded)


def test_round_allocations_clamps_negatives() -> None:
    """Tiny negative noise is floored at zero."""
    assert round_allocations([Decimal("-0.0001"), Decimal("10")]) == [
        Decimal("0.00"),
        Decimal("10.00"),
    ]


def test_leftover_fills_remaining_room_of_other_gaps() -> None:
    """A capped holding's excess goes to holdings that still have room."""
    allocations = allocate_monthly_budget(
        deltas=[Decimal("5"), Decimal("100"), Decimal("-40")],
        baseline=[Decimal("30"), Decimal("30"), Decimal("40")],
        budget=Decimal("100"),
    )

    assert allocations[0] == Decimal("5")
    assert abs(allocations[1] - Decimal("95")) < Decimal("1e-20")
    assert allocations[2] == Decimal("0")
    assert round_allocations(allocations) == [
        Decimal("5.00"),
        Decimal("95.00"),
        Decimal("0.00"),
    ]


def test_leftover_beyond_remaining_room_falls_back_to_baseline() -> None:
    """Once every gap is closed, the rest follows the baseline split."""
    allocations = allocate_monthly_budget(
        deltas=[Decimal("5"), Decimal("80"), Decimal("-40")],
        baseline=[Decimal("30"), Decimal("30"), Decimal("40")],
        budget=Decimal("100"),
    )

    assert allocations == [Decimal("9.5"), Decimal("84.5"), Decimal("6")]


def _random_inputs(seed: int):
    rng = random.Random(seed)
    size = rng.randint(2, 7)
    deltas = [
        Decimal(rng.randint(-50000, 50000)) / Decimal("100")
        for _ in range(size)
    ]
    weights = [Decimal(rng.randint(0, 40)) for _ in range(size)]
    weights[0] += Decimal("1")
    budget = Decimal(rng.randint(1, 100000)) / Decimal("100")
    scale = sum(weights, Decimal("0"))
    baseline = compute_baseline_allocation(
        [weight * Decimal("100") / scale for weight in weights],
        budget,
    )
    return deltas, baseline, budget


@pytest.mark.parametrize("seed", range(50))
def test_allocator_properties_hold_for_random_inputs(seed: int) -> None:
    """Sum, sign and per-gap cap hold for arbitrary inputs."""
    deltas, baseline, budget = _random_inputs(seed)

    allocations = allocate_monthly_budget(deltas, baseline, budget)

    assert all(amount >= 0 for amount in allocations)
    assert abs(sum(allocations) - budget) <= TOLERANCE
    gaps = sum((delta for delta in deltas if delta > 0), Decimal("0"))
    if gaps > budget:
        for amount, delta in zip(allocations, deltas):
            assert amount <= max(Decimal("0"), delta) + TOLERANCE


def _random_portfolio(seed: int):
    rng = random.Random(seed)
    assets = []
    for index in range(rng.randint(2, 7)):
        price = (
            Decimal(rng.randint(1, 50000)) / Decimal("100")
            if index == 0 or rng.random() > 0.15
            else None
        )
        assets.append(
            Asset(
                id=f"asset{index}",
                name=f"Asset {index}",
                identifier=f"IE{index:010d}",
                quantity=Decimal(rng.randint(1 if index == 0 else 0, 5000))
                / Decimal("10"),
                last_price=price,
                target_weight=Decimal(rng.randint(1 if index == 0 else 0, 60)),
            )
        )
    budget = Decimal(rng.randint(100, 500000)) / Decimal("100")
    return assets, budget


@pytest.mark.parametrize("seed", range(50))
def test_rebalance_plan_properties_hold_for_random_portfolios(
    seed: int,
) -> None:
    """Rounded plans keep the allocator invariants within one cent more."""
    assets, budget = _random_portfolio(seed)

    plan = build_rebalance_plan(assets, budget)

    amounts = [action.monthly_buy_amount for action in plan.actions]
    assert len(amounts) == len(assets)
    assert all(amount >= 0 for amount in amounts)
    assert abs(sum(amounts) - budget) <= TOLERANCE
    assert plan.unallocated_amount == Decimal("0")
    gaps = sum(
        (action.delta_value for action in plan.actions if action.delta_value > 0),
        Decimal("0"),
    )
    if gaps > budget:
        # Cent rounding may move a capped amount by one more cent.
        for action in plan.actions:
            assert action.monthly_buy_amount <= (
                max(Decimal("0"), action.delta_value) + TOLERANCE + TOLERANCE
            )
