"""Tests for portfolio history helpers."""

from datetime import datetime, timedelta
from decimal import Decimal

from src.domain.models import Asset, HistorySnapshot
from src.domain.services.history import (
    build_history_snapshot,
    compute_period_returns,
)

START = datetime(2024, 1, 1, 9, 0)


def _snapshot(offset: int, value: str) -> HistorySnapshot:
    return HistorySnapshot(
        taken_at=START + timedelta(minutes=15 * offset),
        total_value=Decimal(value),
    )


def test_snapshot_sums_priced_holdings() -> None:
    assets = [
        Asset(
            id="a",
            name="A",
            identifier="A",
            quantity=Decimal("3"),
            last_price=Decimal("10.005"),
        ),
        Asset(id="b", name="B", identifier="B", quantity=Decimal("1")),
    ]

    snapshot = build_history_snapshot(assets, START)

    assert snapshot.taken_at == START
    assert snapshot.total_value == Decimal("30.02")


def test_period_returns_compare_consecutive_snapshots() -> None:
    history = [
        _snapshot(0, "100"),
        _snapshot(1, "110"),
        _snapshot(2, "0"),
        _snapshot(3, "50"),
    ]

    returns = compute_period_returns(history)

    assert returns == [
        Decimal("0"),
        Decimal("0.1"),
        Decimal("-1"),
        Decimal("0"),
    ]
