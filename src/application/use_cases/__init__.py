"""Application use cases package."""

from .get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
    PortfolioSummary,
)
from .get_rebalance_plan import GetRebalancePlanUseCase, RebalancePlan
from .get_growth_projection import (
    GetGrowthProjectionUseCase,
    GrowthProjection,
)
from .get_history import GetHistoryUseCase, HistoryView
from .get_wealth_summary import GetWealthSummaryUseCase, WealthSummary
from .refresh_prices import RefreshPricesUseCase, RefreshPricesResult
from .manage_assets import UpsertAssetUseCase, DeleteAssetUseCase
from .manage_startups import UpsertStartupUseCase, DeleteStartupUseCase
from .seed_assets import (
    SeedAssetsUseCase,
    SeedStartupsUseCase,
    DEFAULT_ASSETS,
    DEFAULT_STARTUPS,
)

__all__ = [
    "GetPortfolioSummaryUseCase",
    "PortfolioSummary",
    "GetRebalancePlanUseCase",
    "RebalancePlan",
    "GetGrowthProjectionUseCase",
    "GrowthProjection",
    "GetHistoryUseCase",
    "HistoryView",
    "GetWealthSummaryUseCase",
    "WealthSummary",
    "RefreshPricesUseCase",
    "RefreshPricesResult",
    "UpsertAssetUseCase",
    "DeleteAssetUseCase",
    "UpsertStartupUseCase",
    "DeleteStartupUseCase",
    "SeedAssetsUseCase",
    "SeedStartupsUseCase",
    "DEFAULT_ASSETS",
    "DEFAULT_STARTUPS",
]
