"""Use case to read the portfolio value history."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.ports.history_repository import HistoryRepositoryPort
from src.domain.models import HistorySnapshot
from src.domain.services.history import compute_period_returns


@dataclass(frozen=True)
class HistoryView:
    """Snapshots and the relative change between consecutive ones."""

    snapshots: list[HistorySnapshot]
    returns: list[Decimal]


class GetHistoryUseCase:
    """Fetch snapshots for the history chart."""

    def __init__(self, history_repository: HistoryRepositoryPort) -> None:
        """Initialize the use case with its required dependencies."""
        self._history_repository = history_repository

    def execute(self) -> HistoryView:
        """Return every stored snapshot with its period return."""
        snapshots = self._history_repository.fetch_snapshots()
        return HistoryView(
            snapshots=snapshots,
            returns=compute_period_returns(snapshots),
        )


__all__ = ["GetHistoryUseCase", "HistoryView"]
