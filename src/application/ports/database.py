"""Database ports for the portfolio planner.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine holding the portfolio.

    Storage adapters can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_portfolio_engine(self) -> Engine:
        """Get the engine for the portfolio database.

        Returns:
            Engine: SQLAlchemy engine connected to the portfolio storage.
        """


__all__ = ["DatabaseEnginePort"]
