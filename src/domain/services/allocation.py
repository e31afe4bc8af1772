"""Monthly budget allocation without selling.

The allocator spends a fixed monthly budget. Holdings at or above their
target receive nothing while some holding is underweight; their share of the
baseline (pure target-weight) allocation is handed to underweight holdings
in proportion to their gap, each capped at its own gap. Cash that cannot be
placed under the caps is redistributed iteratively, and whatever is still
left once every gap is closed falls back to the baseline proportions.
"""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.constants import (
    ALLOCATION_TOLERANCE,
    MAX_REDISTRIBUTION_ITERATIONS,
)
from src.utils.decimal_utils import CENT, round_money

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def compute_baseline_allocation(
    target_weights: Sequence[Decimal],
    budget: Decimal,
) -> list[Decimal]:
    """Return the pure target-weight split of the budget.

    Args:
        target_weights: Normalized target weights in percentage points.
        budget: Monthly budget.

    Returns:
        list[Decimal]: Baseline amount per holding.
    """
    return [weight / HUNDRED * budget for weight in target_weights]


def allocate_monthly_budget(
    deltas: Sequence[Decimal],
    baseline: Sequence[Decimal],
    budget: Decimal,
    *,
    max_iterations: int = MAX_REDISTRIBUTION_ITERATIONS,
    tolerance: Decimal = ALLOCATION_TOLERANCE,
) -> list[Decimal]:
    """Distribute the budget across holdings, buying only.

    Args:
        deltas: Value gap to target per holding (positive = underweight).
        baseline: Baseline allocation per holding.
        budget: Monthly budget, strictly positive.
        max_iterations: Upper bound on leftover redistribution passes.
        tolerance: Amount under which leftover or shortfall is ignored.

    Returns:
        list[Decimal]: Unrounded allocation per holding, in input order.

    Raises:
        ValueError: If the budget is not positive or inputs differ in size.
    """
    if budget <= 0:
        raise ValueError(f"Monthly budget must be positive, got {budget}")
    if len(deltas) != len(baseline):
        raise ValueError("deltas and baseline must have the same length")

    underweight = [index for index, delta in enumerate(deltas) if delta > 0]
    if not underweight:
        return list(baseline)

    allocations = list(baseline)

    freed = ZERO
    for index, delta in enumerate(deltas):
        if delta <= 0:
            freed += allocations[index]
            allocations[index] = ZERO

    positive_total = sum((deltas[index] for index in underweight), ZERO)
    for index in underweight:
        allocations[index] += freed * deltas[index] / positive_total

    leftover = ZERO
    for index in underweight:
        if allocations[index] > deltas[index]:
            leftover += allocations[index] - deltas[index]
            allocations[index] = deltas[index]

    iterations = 0
    while leftover > tolerance and iterations < max_iterations:
        iterations += 1
        room = {
            index: max(ZERO, deltas[index] - allocations[index])
            for index in underweight
        }
        room_total = sum(room.values(), ZERO)
        if room_total <= 0:
            break
        for index in underweight:
            allocations[index] = min(
                deltas[index],
                allocations[index] + leftover * room[index] / room_total,
            )
        spent = sum((allocations[index] for index in underweight), ZERO)
        leftover = max(ZERO, budget - spent)

    shortfall = budget - sum(allocations, ZERO)
    if shortfall > tolerance:
        baseline_total = sum(baseline, ZERO)
        if baseline_total > 0:
            allocations = [
                amount + shortfall * base / baseline_total
                for amount, base in zip(allocations, baseline)
            ]

    return allocations


def round_allocations(amounts: Sequence[Decimal]) -> list[Decimal]:
    """Round allocations to cents, floored at zero, preserving their sum.

    Half-up rounding of several amounts can drift the total by a few cents;
    the drift is settled one cent at a time on the amounts whose rounding
    moved them the most, so the rounded total equals the rounded sum.

    Args:
        amounts: Unrounded allocations.

    Returns:
        list[Decimal]: Rounded allocations, none negative.
    """
    clamped = [max(ZERO, amount) for amount in amounts]
    rounded = [round_money(amount) for amount in clamped]
    residual = round_money(sum(clamped, ZERO)) - sum(rounded, ZERO)
    steps = int(residual / CENT)
    if not steps:
        return rounded

    remainders = [raw - value for raw, value in zip(clamped, rounded)]
    order = sorted(
        range(len(rounded)),
        key=lambda index: remainders[index],
        reverse=steps > 0,
    )
    if steps < 0:
        order = [index for index in order if rounded[index] >= CENT]
    step = CENT if steps > 0 else -CENT
    for index in order[: abs(steps)]:
        rounded[index] += step
    return rounded


__all__ = [
    "compute_baseline_allocation",
    "allocate_monthly_budget",
    "round_allocations",
]
