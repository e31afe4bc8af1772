"""Domain models package."""

from .assets import Asset, HistorySnapshot, Quote
from .portfolio import (
    AssetClassAmount,
    AssetClassBreakdown,
    AssetDelta,
    AssetPerformance,
    AssetWeight,
    Performer,
    PortfolioSummary,
    PortfolioTotals,
    RebalanceAction,
    RebalancePlan,
)
from .projection import GrowthProjection, ProjectionPoint
from .wealth import StartupInvestment, WealthSummary

__all__ = [
    "Asset",
    "Quote",
    "HistorySnapshot",
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
    "ProjectionPoint",
    "GrowthProjection",
    "StartupInvestment",
    "WealthSummary",
]
