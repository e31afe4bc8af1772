"""Use case combining holdings, startup investments and cash."""

from decimal import Decimal

from src.application.ports.assets_repository import AssetsRepositoryPort
from src.application.ports.startups_repository import StartupsRepositoryPort
from src.domain.models import WealthSummary
from src.domain.services.wealth import compute_wealth_summary
from src.infrastructure.logging.logger import get_app_logger


class GetWealthSummaryUseCase:
    """Compute the combined breakdown and the grand total."""

    def __init__(
        self,
        assets_repository: AssetsRepositoryPort,
        startups_repository: StartupsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            assets_repository: Port providing the holdings.
            startups_repository: Port providing the startup investments.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._assets_repository = assets_repository
        self._startups_repository = startups_repository
        self._logger = logger or get_app_logger()

    def execute(self, cash: Decimal = Decimal("0")) -> WealthSummary:
        """Return the wealth summary.

        Args:
            cash: Uninvested cash held by the investor.

        Returns:
            WealthSummary: Breakdown by category and grand total.

        Raises:
            ValueError: If cash is negative.
        """
        if cash < 0:
            raise ValueError(f"Cash must not be negative, got {cash}")
        summary = compute_wealth_summary(
            self._assets_repository.fetch_assets(),
            self._startups_repository.fetch_startups(),
            cash,
        )
        self._logger.info(
            f"Wealth summary computed: holdings={summary.holdings_value}, "
            f"startups={summary.startups_invested}, cash={summary.cash}, "
            f"total={summary.total}"
        )
        return summary


__all__ = ["GetWealthSummaryUseCase", "WealthSummary"]
