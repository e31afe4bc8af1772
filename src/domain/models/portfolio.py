"""Domain models for portfolio aggregates and rebalancing plans."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Performer:
    """Per-unit performance of a single holding."""

    id: str
    name: str
    perf: Decimal


@dataclass(frozen=True)
class PortfolioTotals:
    """Aggregate totals of the portfolio.

    Attributes:
        total_value: Market value of holdings with a known price.
        total_cost: Cost of holdings with a known cost basis.
        total_return: (total_value - total_cost) / total_cost, 0 without cost.
        best: Best per-unit performer, None when no holding qualifies.
        worst: Worst per-unit performer, None when no holding qualifies.
    """

    total_value: Decimal
    total_cost: Decimal
    total_return: Decimal
    best: Performer | None = None
    worst: Performer | None = None


@dataclass(frozen=True)
class AssetWeight:
    """Current and declared target weight of a holding."""

    id: str
    name: str
    value: Decimal
    weight: Decimal
    target: Decimal


@dataclass(frozen=True)
class AssetClassAmount:
    """Market value aggregated for an asset class."""

    asset_class: str
    amount: Decimal


@dataclass(frozen=True)
class AssetClassBreakdown:
    """Breakdown of market value by asset class."""

    categories: list[AssetClassAmount]

    @property
    def total(self) -> Decimal:
        """Return the sum of all class amounts."""
        return sum((item.amount for item in self.categories), Decimal("0"))


@dataclass(frozen=True)
class AssetPerformance:
    """Unrealized gain of a holding."""

    id: str
    name: str
    gain: Decimal
    gain_pct: Decimal


@dataclass(frozen=True)
class AssetDelta:
    """Gap between the current and target position of a holding.

    Attributes:
        quantity_delta: Units to reach the target, None without a price.
    """

    id: str
    name: str
    identifier: str
    last_price: Decimal | None
    current_value: Decimal
    current_weight: Decimal
    target_weight: Decimal
    target_value: Decimal
    delta_value: Decimal
    quantity_delta: Decimal | None


@dataclass(frozen=True)
class RebalanceAction:
    """Monthly purchase decided for a holding."""

    id: str
    name: str
    identifier: str
    current_weight: Decimal
    target_weight: Decimal
    delta_value: Decimal
    quantity_delta: Decimal | None
    monthly_buy_amount: Decimal
    monthly_buy_quantity: Decimal | None


@dataclass(frozen=True)
class RebalancePlan:
    """No-sell monthly allocation plan.

    Attributes:
        actions: One action per holding, in portfolio order.
        monthly_budget: Cash allocated this cycle.
        unallocated_amount: Budget the plan could not place (no targets).
    """

    actions: list[RebalanceAction]
    monthly_budget: Decimal
    unallocated_amount: Decimal = Decimal("0")

    @property
    def total_allocated(self) -> Decimal:
        """Return the sum of monthly buy amounts."""
        return sum(
            (action.monthly_buy_amount for action in self.actions),
            Decimal("0"),
        )


@dataclass(frozen=True)
class PortfolioSummary:
    """Aggregates rendered on the dashboard."""

    totals: PortfolioTotals
    weights: list[AssetWeight]
    breakdown: AssetClassBreakdown
    performances: list[AssetPerformance]


__all__ = [
    "Performer",
    "PortfolioTotals",
    "AssetWeight",
    "AssetClassAmount",
    "AssetClassBreakdown",
    "AssetPerformance",
    "AssetDelta",
    "RebalanceAction",
    "RebalancePlan",
    "PortfolioSummary",
]
