"""Tests for the GetPortfolioSummaryUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
)
from src.domain.models import Asset


def _build_repository(assets: list[Asset]) -> MagicMock:
    repository = MagicMock()
    repository.fetch_assets.return_value = assets
    return repository


def test_execute_returns_totals_weights_and_breakdown() -> None:
    """Use case should aggregate the stored holdings."""
    assets = [
        Asset(
            id="etf",
            name="World ETF",
            identifier="IE00BK5BQT80",
            quantity=Decimal("3"),
            cost_basis=Decimal("100"),
            last_price=Decimal("120"),
            target_weight=Decimal("80"),
            asset_class="ETF",
        ),
        Asset(
            id="gold",
            name="Gold",
            identifier="IE00B4ND3602",
            quantity=Decimal("2"),
            cost_basis=Decimal("70"),
            last_price=Decimal("60"),
            target_weight=Decimal("20"),
            asset_class="Commodity",
        ),
    ]
    logger = MagicMock()

    result = GetPortfolioSummaryUseCase(
        _build_repository(assets),
        logger=logger,
    ).execute()

    assert result.totals.total_value == Decimal("480")
    assert result.totals.total_cost == Decimal("440")
    assert result.totals.best.id == "etf"
    assert result.totals.worst.id == "gold"
    assert [item.weight for item in result.weights] == [
        Decimal("75"),
        Decimal("25"),
    ]
    assert [item.asset_class for item in result.breakdown.categories] == [
        "ETF",
        "Commodity",
    ]
    assert result.performances[1].gain == Decimal("-20")
    logger.info.assert_called_once()


def test_execute_handles_empty_portfolio() -> None:
    result = GetPortfolioSummaryUseCase(
        _build_repository([]),
        logger=MagicMock(),
    ).execute()

    assert result.totals.total_value == Decimal("0")
    assert result.weights == []
    assert result.breakdown.categories == []
