"""Domain services package."""

from .aggregation import (
    compute_asset_class_breakdown,
    compute_asset_performances,
    compute_asset_weights,
    compute_current_value,
    compute_portfolio_totals,
)
from .allocation import (
    allocate_monthly_budget,
    compute_baseline_allocation,
    round_allocations,
)
from .deltas import compute_asset_deltas
from .history import (
    build_history_snapshot,
    compute_period_returns,
)
from .normalization import (
    compute_normalization_factor,
    normalize_identifier,
    normalize_target_weights,
)
from .projection import compute_monthly_rate, project_growth
from .rebalancing import build_rebalance_plan
from .validation import (
    InvalidAssetError,
    validate_asset,
    validate_assets,
    validate_startup,
)
from .wealth import compute_wealth_summary

__all__ = [
    "compute_current_value",
    "compute_portfolio_totals",
    "compute_asset_weights",
    "compute_asset_class_breakdown",
    "compute_asset_performances",
    "compute_baseline_allocation",
    "allocate_monthly_budget",
    "round_allocations",
    "compute_asset_deltas",
    "build_history_snapshot",
    "compute_period_returns",
    "compute_normalization_factor",
    "normalize_identifier",
    "normalize_target_weights",
    "compute_monthly_rate",
    "project_growth",
    "build_rebalance_plan",
    "InvalidAssetError",
    "validate_asset",
    "validate_assets",
    "validate_startup",
    "compute_wealth_summary",
]
