"""Domain helpers for the portfolio value history."""

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal

from src.domain.models import Asset, HistorySnapshot
from src.domain.services.aggregation import compute_current_value
from src.utils.decimal_utils import round_money

ZERO = Decimal("0")


def build_history_snapshot(
    assets: Sequence[Asset],
    taken_at: datetime,
) -> HistorySnapshot:
    """Return a snapshot of the total market value of the holdings."""
    total = sum((compute_current_value(asset) for asset in assets), ZERO)
    return HistorySnapshot(taken_at=taken_at, total_value=round_money(total))


def compute_period_returns(
    history: Sequence[HistorySnapshot],
) -> list[Decimal]:
    """Return the relative change between consecutive snapshots.

    The first entry is 0, as is any entry following a zero value.
    """
    returns = []
    previous: Decimal | None = None
    for snapshot in history:
        if previous is None or previous == 0:
            returns.append(ZERO)
        else:
            returns.append((snapshot.total_value - previous) / previous)
        previous = snapshot.total_value
    return returns


__all__ = [
    "build_history_snapshot",
    "compute_period_returns",
]
