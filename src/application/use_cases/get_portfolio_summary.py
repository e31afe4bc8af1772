"""Use case to compute the portfolio aggregates shown on the dashboard."""

from src.application.ports.assets_repository import AssetsRepositoryPort
from src.domain.models import PortfolioSummary
from src.domain.services.aggregation import (
    compute_asset_class_breakdown,
    compute_asset_performances,
    compute_asset_weights,
    compute_portfolio_totals,
)
from src.infrastructure.logging.logger import get_app_logger


class GetPortfolioSummaryUseCase:
    """Compute totals, weights and breakdowns from stored holdings."""

    def __init__(
        self,
        assets_repository: AssetsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            assets_repository: Port providing the holdings.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._assets_repository = assets_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> PortfolioSummary:
        """Return the portfolio summary.

        Returns:
            PortfolioSummary: Totals, per-holding weights, asset class
            breakdown and per-holding performance.
        """
        assets = self._assets_repository.fetch_assets()
        totals = compute_portfolio_totals(assets)
        self._logger.info(
            f"Portfolio summary computed: assets={len(assets)}, "
            f"value={totals.total_value}, cost={totals.total_cost}"
        )
        return PortfolioSummary(
            totals=totals,
            weights=compute_asset_weights(assets, totals.total_value),
            breakdown=compute_asset_class_breakdown(assets),
            performances=compute_asset_performances(assets),
        )


__all__ = ["GetPortfolioSummaryUseCase", "PortfolioSummary"]
