"""SQLAlchemy-backed repository for startup investments."""

from typing import Any

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.startups_repository import StartupsRepositoryPort
from src.domain.models import StartupInvestment
from src.utils.decimal_utils import coerce_decimal


CREATE_STARTUPS_SQL = """
CREATE TABLE IF NOT EXISTS startups (
    id TEXT PRIMARY KEY,
    position INTEGER NOT NULL,
    name TEXT NOT NULL,
    invested TEXT NOT NULL,
    fee TEXT NOT NULL
)
"""

SELECT_STARTUPS_SQL = text(
    "SELECT id, name, invested, fee FROM startups ORDER BY position"
)

INSERT_STARTUP_SQL = text(
    """
    INSERT INTO startups (id, position, name, invested, fee)
    VALUES (:id, :position, :name, :invested, :fee)
    """
)

UPDATE_STARTUP_SQL = text(
    """
    UPDATE startups
    SET name = :name,
        invested = :invested,
        fee = :fee
    WHERE id = :id
    """
)

NEXT_POSITION_SQL = text(
    "SELECT COALESCE(MAX(position), -1) + 1 AS next_position FROM startups"
)

DELETE_STARTUP_SQL = text("DELETE FROM startups WHERE id = :id")

DELETE_ALL_STARTUPS_SQL = "DELETE FROM startups"


def _to_row(startup: StartupInvestment) -> dict[str, Any]:
    return {
        "id": startup.id,
        "name": startup.name,
        "invested": str(startup.invested),
        "fee": str(startup.fee),
    }


class SqlAlchemyStartupsRepository(StartupsRepositoryPort):
    """Repository backed by SQLAlchemy for the ``startups`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the portfolio engine.
        """
        self._db_port = db_port

    def fetch_startups(self) -> list[StartupInvestment]:
        """Return investments in insertion order."""
        engine = self._db_port.get_portfolio_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_STARTUPS_SQL)
            rows = conn.execute(SELECT_STARTUPS_SQL).all()
        return [
            StartupInvestment(
                id=row.id,
                name=row.name,
                invested=coerce_decimal(row.invested),
                fee=coerce_decimal(row.fee),
            )
            for row in rows
        ]

    def save_startup(self, startup: StartupInvestment) -> None:
        """Update the investment in place, or append it when new."""
        payload = _to_row(startup)
        engine = self._db_port.get_portfolio_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_STARTUPS_SQL)
            result = conn.execute(UPDATE_STARTUP_SQL, payload)
            if result.rowcount == 0:
                position = conn.execute(NEXT_POSITION_SQL).scalar_one()
                conn.execute(
                    INSERT_STARTUP_SQL,
                    {**payload, "position": position},
                )

    def delete_startup(self, startup_id: str) -> bool:
        """Delete an investment and return whether it existed."""
        engine = self._db_port.get_portfolio_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_STARTUPS_SQL)
            deleted = conn.execute(
                DELETE_STARTUP_SQL,
                {"id": startup_id},
            ).rowcount
        return deleted > 0

    def replace_startups(self, startups: list[StartupInvestment]) -> int:
        """Replace all investments, keeping the given order."""
        payload = [
            {**_to_row(startup), "position": position}
            for position, startup in enumerate(startups)
        ]
        engine = self._db_port.get_portfolio_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_STARTUPS_SQL)
            conn.exec_driver_sql(DELETE_ALL_STARTUPS_SQL)
            if payload:
                conn.execute(INSERT_STARTUP_SQL, payload)
        return len(payload)


__all__ = [
    "SqlAlchemyStartupsRepository",
    "CREATE_STARTUPS_SQL",
    "SELECT_STARTUPS_SQL",
    "INSERT_STARTUP_SQL",
    "UPDATE_STARTUP_SQL",
    "DELETE_STARTUP_SQL",
]
