"""Port for the portfolio value history."""

from typing import Protocol

from src.domain.models import HistorySnapshot


class HistoryRepositoryPort(Protocol):
    """Port exposing the append-only, capped snapshot history."""

    def fetch_snapshots(self) -> list[HistorySnapshot]:
        """Return snapshots from oldest to newest."""

    def append_snapshot(self, snapshot: HistorySnapshot, limit: int) -> None:
        """Append a snapshot and drop the oldest beyond ``limit``."""


__all__ = ["HistoryRepositoryPort"]
