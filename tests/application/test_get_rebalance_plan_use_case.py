"""Tests for the GetRebalancePlanUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_rebalance_plan import (
    GetRebalancePlanUseCase,
)
from src.domain.models import Asset


ASSETS = [
    Asset(
        id="a",
        name="A",
        identifier="IE00000000A1",
        quantity=Decimal("5"),
        last_price=Decimal("10"),
        target_weight=Decimal("70"),
    ),
    Asset(
        id="b",
        name="B",
        identifier="IE00000000B1",
        quantity=Decimal("0"),
        last_price=Decimal("10"),
        target_weight=Decimal("30"),
    ),
]


def _build_repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_assets.return_value = ASSETS
    return repository


def test_execute_uses_default_budget() -> None:
    """Without an explicit budget the configured one is allocated."""
    use_case = GetRebalancePlanUseCase(
        _build_repository(),
        logger=MagicMock(),
        monthly_budget=Decimal("100"),
    )

    plan = use_case.execute()

    assert plan.monthly_budget == Decimal("100")
    assert [action.monthly_buy_amount for action in plan.actions] == [
        Decimal("59.50"),
        Decimal("40.50"),
    ]


def test_execute_accepts_budget_override() -> None:
    """A budget passed to execute wins over the default."""
    use_case = GetRebalancePlanUseCase(_build_repository(), logger=MagicMock())

    plan = use_case.execute(monthly_budget=Decimal("250"))

    assert plan.monthly_budget == Decimal("250")
    assert plan.total_allocated == Decimal("250.00")


def test_execute_logs_plan_summary() -> None:
    logger = MagicMock()

    GetRebalancePlanUseCase(_build_repository(), logger=logger).execute()

    message = logger.info.call_args[0][0]
    assert "Rebalance plan computed" in message
