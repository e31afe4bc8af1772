"""Tests for the SQLAlchemy startups repository."""

from decimal import Decimal
from types import SimpleNamespace

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from src.domain.models import StartupInvestment
from src.infrastructure.startups_repository import SqlAlchemyStartupsRepository


@pytest.fixture
def repository() -> SqlAlchemyStartupsRepository:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    db_port = SimpleNamespace(get_portfolio_engine=lambda: engine)
    return SqlAlchemyStartupsRepository(db_port)


def _startup(startup_id: str, invested: str = "300", fee: str = "24"):
    return StartupInvestment(
        id=startup_id,
        name=startup_id.title(),
        invested=Decimal(invested),
        fee=Decimal(fee),
    )


def test_fetch_startups_on_empty_database(repository) -> None:
    assert repository.fetch_startups() == []


def test_replace_startups_keeps_order_and_amounts(repository) -> None:
    startups = [_startup("rhyde", "248", "19.84"), _startup("yasu")]

    assert repository.replace_startups(startups) == 2
    assert repository.fetch_startups() == startups

    repository.replace_startups([_startup("mega")])
    assert [item.id for item in repository.fetch_startups()] == ["mega"]


def test_save_startup_updates_in_place_and_appends_new(repository) -> None:
    repository.replace_startups([_startup("a"), _startup("b")])

    repository.save_startup(_startup("a", invested="500"))
    repository.save_startup(_startup("z"))

    startups = repository.fetch_startups()
    assert [item.id for item in startups] == ["a", "b", "z"]
    assert startups[0].invested == Decimal("500")


def test_delete_startup_reports_whether_it_existed(repository) -> None:
    repository.replace_startups([_startup("a"), _startup("b")])

    assert repository.delete_startup("a") is True
    assert repository.delete_startup("a") is False
    assert [item.id for item in repository.fetch_startups()] == ["b"]
