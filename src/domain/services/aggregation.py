"""Domain services for portfolio aggregates."""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.constants import DEFAULT_ASSET_CLASS
from src.domain.models import (
    Asset,
    AssetClassAmount,
    AssetClassBreakdown,
    AssetPerformance,
    AssetWeight,
    Performer,
    PortfolioTotals,
)
from src.domain.services.validation import validate_assets
from src.utils.decimal_utils import round_money

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def compute_current_value(asset: Asset) -> Decimal:
    """Return price x quantity, or 0 when either is unknown."""
    if not asset.last_price or not asset.quantity:
        return ZERO
    return asset.last_price * asset.quantity


def compute_portfolio_totals(assets: Sequence[Asset]) -> PortfolioTotals:
    """Compute value, cost, return and best/worst performers.

    Args:
        assets: Holdings in portfolio order.

    Returns:
        PortfolioTotals: Aggregated totals. Performers are None when no
        holding has both a price and a cost basis.
    """
    validate_assets(assets)
    total_value = ZERO
    total_cost = ZERO
    performers: list[Performer] = []

    for asset in assets:
        total_value += compute_current_value(asset)
        if asset.cost_basis and asset.quantity:
            total_cost += asset.cost_basis * asset.quantity
        if asset.last_price and asset.cost_basis:
            performers.append(
                Performer(
                    id=asset.id,
                    name=asset.name,
                    perf=(asset.last_price - asset.cost_basis)
                    / asset.cost_basis,
                )
            )

    total_return = (
        (total_value - total_cost) / total_cost if total_cost > 0 else ZERO
    )

    best = None
    worst = None
    # Strict comparisons keep the first holding on ties.
    for performer in performers:
        if best is None or performer.perf > best.perf:
            best = performer
        if worst is None or performer.perf < worst.perf:
            worst = performer

    return PortfolioTotals(
        total_value=total_value,
        total_cost=total_cost,
        total_return=total_return,
        best=best,
        worst=worst,
    )


def compute_asset_weights(
    assets: Sequence[Asset],
    total_value: Decimal,
) -> list[AssetWeight]:
    """Return the current weight of every holding.

    Args:
        assets: Holdings in portfolio order.
        total_value: Total market value of the portfolio.

    Returns:
        list[AssetWeight]: Value, weight and raw target per holding.
    """
    weights = []
    for asset in assets:
        value = compute_current_value(asset)
        weight = value / total_value * HUNDRED if total_value > 0 else ZERO
        weights.append(
            AssetWeight(
                id=asset.id,
                name=asset.name,
                value=value,
                weight=weight,
                target=asset.target_weight or ZERO,
            )
        )
    return weights


def compute_asset_class_breakdown(
    assets: Sequence[Asset],
) -> AssetClassBreakdown:
    """Aggregate market value by asset class.

    Classes keep the order in which they are first seen; classes without
    value are left out.
    """
    totals: dict[str, Decimal] = {}
    for asset in assets:
        value = compute_current_value(asset)
        if value <= 0:
            continue
        asset_class = asset.asset_class or DEFAULT_ASSET_CLASS
        totals[asset_class] = totals.get(asset_class, ZERO) + value

    return AssetClassBreakdown(
        categories=[
            AssetClassAmount(asset_class=name, amount=round_money(amount))
            for name, amount in totals.items()
        ]
    )


def compute_asset_performances(
    assets: Sequence[Asset],
) -> list[AssetPerformance]:
    """Return the unrealized gain of every holding, in currency and %."""
    performances = []
    for asset in assets:
        gain = ZERO
        gain_pct = ZERO
        if asset.last_price and asset.cost_basis:
            unit_gain = asset.last_price - asset.cost_basis
            gain = unit_gain * (asset.quantity or ZERO)
            gain_pct = unit_gain / asset.cost_basis * HUNDRED
        performances.append(
            AssetPerformance(
                id=asset.id,
                name=asset.name,
                gain=gain,
                gain_pct=gain_pct,
            )
        )
    return performances


__all__ = [
    "compute_current_value",
    "compute_portfolio_totals",
    "compute_asset_weights",
    "compute_asset_class_breakdown",
    "compute_asset_performances",
]
