"""Domain package for business rules and core models."""

from .constants import (
    ALLOCATION_TOLERANCE,
    DEFAULT_MONTHLY_BUDGET,
    HISTORY_LIMIT,
    MAX_REDISTRIBUTION_ITERATIONS,
)
from .models import (
    Asset,
    AssetWeight,
    GrowthProjection,
    HistorySnapshot,
    PortfolioTotals,
    ProjectionPoint,
    Quote,
    RebalanceAction,
    RebalancePlan,
)
from .policies import is_valid_isin
from .services import (
    allocate_monthly_budget,
    build_rebalance_plan,
    compute_asset_deltas,
    compute_portfolio_totals,
    normalize_target_weights,
    project_growth,
)

__all__ = [
    "Asset",
    "AssetWeight",
    "GrowthProjection",
    "HistorySnapshot",
    "PortfolioTotals",
    "ProjectionPoint",
    "Quote",
    "RebalanceAction",
    "RebalancePlan",
    "ALLOCATION_TOLERANCE",
    "DEFAULT_MONTHLY_BUDGET",
    "HISTORY_LIMIT",
    "MAX_REDISTRIBUTION_ITERATIONS",
    "is_valid_isin",
    "allocate_monthly_budget",
    "build_rebalance_plan",
    "compute_asset_deltas",
    "compute_portfolio_totals",
    "normalize_target_weights",
    "project_growth",
]
