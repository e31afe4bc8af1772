"""Use case to compute the monthly no-sell rebalance plan."""

from decimal import Decimal

from src.application.ports.assets_repository import AssetsRepositoryPort
from src.domain.constants import DEFAULT_MONTHLY_BUDGET
from src.domain.models import RebalancePlan
from src.domain.services.rebalancing import build_rebalance_plan
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class GetRebalancePlanUseCase:
    """Build the monthly purchase plan from stored holdings."""

    def __init__(
        self,
        assets_repository: AssetsRepositoryPort,
        logger=None,
        monthly_budget: Decimal = DEFAULT_MONTHLY_BUDGET,
    ) -> None:
        """Initialize the use case.

        Args:
            assets_repository: Port providing the holdings.
            logger: Optional logger compatible with logging.Logger-like API.
            monthly_budget: Default budget when execute receives none.
        """
        self._assets_repository = assets_repository
        self._logger = logger or get_app_logger()
        self._monthly_budget = coerce_decimal(monthly_budget)

    def execute(self, monthly_budget: Decimal | None = None) -> RebalancePlan:
        """Return the rebalance plan.

        Args:
            monthly_budget: Optional budget overriding the default.

        Returns:
            RebalancePlan: One purchase per holding for this month.
        """
        budget = (
            coerce_decimal(monthly_budget)
            if monthly_budget is not None
            else self._monthly_budget
        )
        assets = self._assets_repository.fetch_assets()
        plan = build_rebalance_plan(assets, budget, logger=self._logger)
        self._logger.info(
            f"Rebalance plan computed: budget={budget}, "
            f"allocated={plan.total_allocated}, actions={len(plan.actions)}"
        )
        return plan


__all__ = ["GetRebalancePlanUseCase", "RebalancePlan"]
