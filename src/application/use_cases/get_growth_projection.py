"""Use case to project the portfolio value over a long horizon."""

from decimal import Decimal

from src.application.ports.assets_repository import AssetsRepositoryPort
from src.domain.models import GrowthProjection
from src.domain.services.aggregation import compute_portfolio_totals
from src.domain.services.projection import project_growth
from src.infrastructure.logging.logger import get_app_logger


class GetGrowthProjectionUseCase:
    """Project compounding growth starting from the current total value."""

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

    def execute(
        self,
        monthly_contribution: Decimal,
        annual_return: Decimal,
        years: int,
        starting_value: Decimal | None = None,
    ) -> GrowthProjection:
        """Return the yearly projection series.

        Args:
            monthly_contribution: Cash added every month.
            annual_return: Annual return in percent.
            years: Horizon in whole years.
            starting_value: Optional start value; defaults to the current
                market value of the portfolio.

        Returns:
            GrowthProjection: Yearly invested and total values.
        """
        if starting_value is None:
            assets = self._assets_repository.fetch_assets()
            starting_value = compute_portfolio_totals(assets).total_value
        projection = project_growth(
            starting_value,
            monthly_contribution,
            annual_return,
            years,
        )
        self._logger.info(
            f"Projection computed: years={years}, rate={annual_return}%, "
            f"final_total={projection.final.total}"
        )
        return projection


__all__ = ["GetGrowthProjectionUseCase", "GrowthProjection"]
