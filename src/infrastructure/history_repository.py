"""SQLAlchemy-backed repository for portfolio value snapshots."""

from datetime import datetime

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.history_repository import HistoryRepositoryPort
from src.domain.models import HistorySnapshot
from src.utils.decimal_utils import coerce_decimal


CREATE_HISTORY_SQL = """
CREATE TABLE IF NOT EXISTS history_snapshots (
    position INTEGER PRIMARY KEY,
    taken_at TEXT NOT NULL,
    total_value TEXT NOT NULL
)
"""

SELECT_HISTORY_SQL = text(
    """
    SELECT taken_at, total_value
    FROM history_snapshots
    ORDER BY position
    """
)

INSERT_SNAPSHOT_SQL = text(
    """
    INSERT INTO history_snapshots (position, taken_at, total_value)
    SELECT COALESCE(MAX(position), 0) + 1, :taken_at, :total_value
    FROM history_snapshots
    """
)

TRIM_HISTORY_SQL = text(
    """
    DELETE FROM history_snapshots
    WHERE position <= (
        SELECT MAX(position) FROM history_snapshots
    ) - :limit
    """
)


class SqlAlchemyHistoryRepository(HistoryRepositoryPort):
    """Repository backed by SQLAlchemy for ``history_snapshots``."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the portfolio engine.
        """
        self._db_port = db_port

    def fetch_snapshots(self) -> list[HistorySnapshot]:
        """Return snapshots from oldest to newest."""
        engine = self._db_port.get_portfolio_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_HISTORY_SQL)
            rows = conn.execute(SELECT_HISTORY_SQL).all()
        return [
            HistorySnapshot(
                taken_at=datetime.fromisoformat(row.taken_at),
                total_value=coerce_decimal(row.total_value),
            )
            for row in rows
        ]

    def append_snapshot(self, snapshot: HistorySnapshot, limit: int) -> None:
        """Append a snapshot and keep only the ``limit`` newest ones.

        Args:
            snapshot: Snapshot to store.
            limit: Maximum number of snapshots kept.
        """
        engine = self._db_port.get_portfolio_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_HISTORY_SQL)
            conn.execute(
                INSERT_SNAPSHOT_SQL,
                {
                    "taken_at": snapshot.taken_at.isoformat(),
                    "total_value": str(snapshot.total_value),
                },
            )
            conn.execute(TRIM_HISTORY_SQL, {"limit": limit})


__all__ = [
    "SqlAlchemyHistoryRepository",
    "CREATE_HISTORY_SQL",
    "INSERT_SNAPSHOT_SQL",
    "TRIM_HISTORY_SQL",
]
