"""Tests for the asset management use cases."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.manage_assets import (
    DeleteAssetUseCase,
    UpsertAssetUseCase,
)
from src.domain.models import Asset
from src.domain.services.validation import InvalidAssetError


EXISTING = Asset(
    id="etf",
    name="World ETF",
    identifier="IE00BK5BQT80",
    quantity=Decimal("10"),
    cost_basis=Decimal("100"),
    last_price=Decimal("120"),
    target_weight=Decimal("60"),
    asset_class="ETF",
    currency="EUR",
)


def _build_repository(assets: list[Asset]) -> MagicMock:
    repository = MagicMock()
    repository.fetch_assets.return_value = assets
    return repository


def test_execute_adds_new_asset() -> None:
    """Unknown identifiers create a new holding."""
    repository = _build_repository([EXISTING])
    logger = MagicMock()
    use_case = UpsertAssetUseCase(
        repository,
        logger=logger,
        id_factory=lambda: "new-id",
    )

    asset = use_case.execute(
        name=" Gold ",
        identifier="IE00B4ND3602",
        quantity=Decimal("4"),
        cost_basis=Decimal("40"),
        target_weight=Decimal("10"),
        asset_class="Commodity",
    )

    assert asset.id == "new-id"
    assert asset.name == "Gold"
    assert asset.currency == "EUR"
    assert asset.last_price is None
    repository.save_asset.assert_called_once_with(asset)
    assert "Added" in logger.info.call_args[0][0]


def test_execute_updates_matching_identifier_case_insensitively() -> None:
    """Existing holdings keep their id, cost and target when omitted."""
    repository = _build_repository([EXISTING])
    logger = MagicMock()

    asset = UpsertAssetUseCase(repository, logger=logger).execute(
        name="World ETF",
        identifier="ie00bk5bqt80",
        quantity=Decimal("12"),
    )

    assert asset.id == "etf"
    assert asset.quantity == Decimal("12")
    assert asset.cost_basis == Decimal("100")
    assert asset.target_weight == Decimal("60")
    assert asset.last_price == Decimal("120")
    assert "Updated" in logger.info.call_args[0][0]


def test_execute_stores_manual_price() -> None:
    repository = _build_repository([])

    asset = UpsertAssetUseCase(
        repository,
        logger=MagicMock(),
        id_factory=lambda: "cash",
    ).execute(
        name="Deposit",
        identifier="XS0000000001",
        quantity=Decimal("1"),
        manual=True,
        last_price=Decimal("1500"),
    )

    assert asset.manual is True
    assert asset.last_price == Decimal("1500")


def test_execute_update_can_clear_manual_flag_and_class() -> None:
    """Submitted values replace the stored class and manual flag."""
    fund = Asset(
        id="eqt-nexus",
        name="EQT Nexus ELTIF",
        identifier="LU3176111881",
        quantity=Decimal("1"),
        last_price=Decimal("500"),
        asset_class="Private equity",
        manual=True,
    )
    repository = _build_repository([fund])

    asset = UpsertAssetUseCase(repository, logger=MagicMock()).execute(
        name="EQT Nexus ELTIF",
        identifier="LU3176111881",
        quantity=Decimal("1"),
        asset_class="",
        manual=False,
    )

    assert asset.manual is False
    assert asset.asset_class == ""
    assert asset.last_price == Decimal("500")
    repository.save_asset.assert_called_once_with(asset)


def test_execute_update_replaces_class() -> None:
    repository = _build_repository([EXISTING])

    asset = UpsertAssetUseCase(repository, logger=MagicMock()).execute(
        name="World ETF",
        identifier="IE00BK5BQT80",
        quantity=Decimal("10"),
        asset_class="Equity",
        manual=True,
        last_price=Decimal("118"),
    )

    assert asset.asset_class == "Equity"
    assert asset.manual is True
    assert asset.last_price == Decimal("118")


def test_execute_rejects_negative_quantity() -> None:
    repository = _build_repository([])

    with pytest.raises(InvalidAssetError):
        UpsertAssetUseCase(repository, logger=MagicMock()).execute(
            name="Bad",
            identifier="IE00BK5BQT80",
            quantity=Decimal("-1"),
        )
    repository.save_asset.assert_not_called()


def test_delete_reports_existing_asset() -> None:
    repository = MagicMock()
    repository.delete_asset.return_value = True
    logger = MagicMock()

    assert DeleteAssetUseCase(repository, logger=logger).execute("etf") is True
    repository.delete_asset.assert_called_once_with("etf")
    logger.info.assert_called_once()


def test_delete_warns_on_unknown_asset() -> None:
    repository = MagicMock()
    repository.delete_asset.return_value = False
    logger = MagicMock()

    assert DeleteAssetUseCase(repository, logger=logger).execute("x") is False
    logger.warning.assert_called_once()
