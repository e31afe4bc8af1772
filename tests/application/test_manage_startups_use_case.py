"""Tests for the startup management use cases."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.manage_startups import (
    DeleteStartupUseCase,
    UpsertStartupUseCase,
)
from src.domain.models import StartupInvestment
from src.domain.services.validation import InvalidAssetError


EXISTING = StartupInvestment(
    id="favikon",
    name="Favikon",
    invested=Decimal("300"),
    fee=Decimal("24"),
)


def _build_repository(startups: list[StartupInvestment]) -> MagicMock:
    repository = MagicMock()
    repository.fetch_startups.return_value = startups
    return repository


def test_execute_adds_new_startup() -> None:
    repository = _build_repository([EXISTING])
    logger = MagicMock()

    startup = UpsertStartupUseCase(
        repository,
        logger=logger,
        id_factory=lambda: "new1",
    ).execute(name=" Reental ", invested=Decimal("300"), fee=Decimal("24"))

    assert startup == StartupInvestment(
        "new1",
        "Reental",
        Decimal("300"),
        Decimal("24"),
    )
    repository.save_startup.assert_called_once_with(startup)
    assert "Added" in logger.info.call_args[0][0]


def test_execute_updates_startup_matching_name_case_insensitively() -> None:
    repository = _build_repository([EXISTING])

    startup = UpsertStartupUseCase(repository, logger=MagicMock()).execute(
        name="FAVIKON",
        invested=Decimal("450"),
        fee=Decimal("36"),
    )

    assert startup.id == "favikon"
    assert startup.invested == Decimal("450")
    assert startup.fee == Decimal("36")


def test_execute_rejects_negative_amount() -> None:
    repository = _build_repository([])

    with pytest.raises(InvalidAssetError):
        UpsertStartupUseCase(repository, logger=MagicMock()).execute(
            name="Broken",
            invested=Decimal("-1"),
        )
    repository.save_startup.assert_not_called()


def test_delete_startup_logs_outcome() -> None:
    repository = MagicMock()
    repository.delete_startup.side_effect = [True, False]
    logger = MagicMock()
    use_case = DeleteStartupUseCase(repository, logger=logger)

    assert use_case.execute("favikon") is True
    assert use_case.execute("favikon") is False
    logger.info.assert_called_once()
    logger.warning.assert_called_once()
