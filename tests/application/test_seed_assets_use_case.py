"""Tests for the SeedAssetsUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.seed_assets import (
    DEFAULT_ASSETS,
    DEFAULT_STARTUPS,
    SeedAssetsUseCase,
    SeedStartupsUseCase,
)
from src.domain.policies.identifiers import is_valid_isin


def test_run_seeds_empty_storage() -> None:
    repository = MagicMock()
    repository.fetch_assets.return_value = []
    repository.replace_assets.return_value = len(DEFAULT_ASSETS)

    count = SeedAssetsUseCase(repository, logger=MagicMock()).run()

    assert count == len(DEFAULT_ASSETS)
    repository.replace_assets.assert_called_once_with(list(DEFAULT_ASSETS))


def test_run_skips_populated_storage() -> None:
    repository = MagicMock()
    repository.fetch_assets.return_value = [DEFAULT_ASSETS[0]]

    count = SeedAssetsUseCase(repository, logger=MagicMock()).run()

    assert count == 0
    repository.replace_assets.assert_not_called()


def test_default_assets_are_well_formed() -> None:
    """Seed holdings carry unique ids and ISIN identifiers."""
    ids = [asset.id for asset in DEFAULT_ASSETS]

    assert len(ids) == len(set(ids))
    assert all(is_valid_isin(asset.identifier) for asset in DEFAULT_ASSETS)
    assert all(asset.target_weight >= 0 for asset in DEFAULT_ASSETS)


def test_default_private_equity_funds_are_manual_without_target() -> None:
    """Hand-priced funds are valued but never bought by the monthly plan."""
    funds = [
        asset
        for asset in DEFAULT_ASSETS
        if asset.asset_class == "Private equity"
    ]

    assert [fund.id for fund in funds] == ["eqt-nexus", "apollo-global"]
    assert all(fund.manual for fund in funds)
    assert all(fund.last_price == Decimal("500") for fund in funds)
    assert all(fund.target_weight == 0 for fund in funds)


def test_seed_startups_fills_empty_storage_once() -> None:
    repository = MagicMock()
    repository.fetch_startups.side_effect = [[], list(DEFAULT_STARTUPS)]
    repository.replace_startups.return_value = len(DEFAULT_STARTUPS)
    use_case = SeedStartupsUseCase(repository, logger=MagicMock())

    assert use_case.run() == 9
    assert use_case.run() == 0
    repository.replace_startups.assert_called_once_with(list(DEFAULT_STARTUPS))


def test_default_startups_total_invested() -> None:
    invested = sum((item.invested for item in DEFAULT_STARTUPS), Decimal("0"))
    fees = sum((item.fee for item in DEFAULT_STARTUPS), Decimal("0"))

    assert invested == Decimal("2648")
    assert fees == Decimal("211.84")
