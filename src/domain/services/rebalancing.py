"""Domain service assembling the monthly rebalance plan."""

from collections.abc import Sequence
from decimal import Decimal
from logging import Logger

from src.domain.constants import ALLOCATION_TOLERANCE
from src.domain.models import Asset, RebalanceAction, RebalancePlan
from src.domain.services.aggregation import compute_portfolio_totals
from src.domain.services.allocation import (
    allocate_monthly_budget,
    compute_baseline_allocation,
    round_allocations,
)
from src.domain.services.deltas import compute_asset_deltas
from src.utils.decimal_utils import round_money

ZERO = Decimal("0")


def build_rebalance_plan(
    assets: Sequence[Asset],
    monthly_budget: Decimal,
    *,
    logger: Logger | None = None,
) -> RebalancePlan:
    """Compute the no-sell monthly purchase plan for a portfolio.

    Args:
        assets: Holdings in portfolio order.
        monthly_budget: Cash to invest this month, strictly positive.
        logger: Optional logger used for warnings.

    Returns:
        RebalancePlan: One action per holding. The plan has no actions when
        the portfolio has no market value.

    Raises:
        ValueError: If the budget is not positive.
    """
    if monthly_budget <= 0:
        raise ValueError(
            f"Monthly budget must be positive, got {monthly_budget}"
        )
    totals = compute_portfolio_totals(assets)
    if totals.total_value <= 0:
        if logger is not None:
            logger.warning(
                "Portfolio has no market value; rebalance plan is empty"
            )
        return RebalancePlan(actions=[], monthly_budget=monthly_budget)

    deltas = compute_asset_deltas(assets, totals.total_value)
    baseline = compute_baseline_allocation(
        [delta.target_weight for delta in deltas],
        monthly_budget,
    )
    allocations = round_allocations(
        allocate_monthly_budget(
            [delta.delta_value for delta in deltas],
            baseline,
            monthly_budget,
        )
    )

    actions = [
        RebalanceAction(
            id=delta.id,
            name=delta.name,
            identifier=delta.identifier,
            current_weight=delta.current_weight,
            target_weight=delta.target_weight,
            delta_value=delta.delta_value,
            quantity_delta=delta.quantity_delta,
            monthly_buy_amount=amount,
            monthly_buy_quantity=(
                round_money(amount / delta.last_price)
                if delta.last_price
                else None
            ),
        )
        for delta, amount in zip(deltas, allocations)
    ]
    unallocated = round_money(monthly_budget) - sum(allocations, ZERO)
    if unallocated <= ALLOCATION_TOLERANCE:
        unallocated = ZERO
    elif logger is not None:
        logger.warning(
            f"Rebalance plan left {unallocated} unallocated; "
            "no holding has a target weight"
        )
    return RebalancePlan(
        actions=actions,
        monthly_budget=monthly_budget,
        unallocated_amount=unallocated,
    )


__all__ = ["build_rebalance_plan"]
