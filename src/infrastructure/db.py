"""Database infrastructure for the portfolio planner.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the portfolio database. It belongs to the infrastructure
layer because it deals with external systems (SQLite or PostgreSQL).
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.utils.utils import get_project_root


def _get_env_var(name: str, default: str | None = None) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.
        default: Value returned when the variable is not set.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty and no
            default is given.
    """
    dotenv.load_dotenv()
    value = os.getenv(name) or default
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _default_database_url() -> str:
    """Return the URL of the SQLite file under the project data directory."""
    data_dir = get_project_root() / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{data_dir / 'portfolio.db'}"


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance. Server databases get a small
        connection pool with health checks enabled.
    """
    if db_url.startswith("sqlite"):
        return create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            future=True,
        )
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_portfolio_engine: Optional[Engine] = None


def get_portfolio_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the portfolio database.

    Returns:
        Engine: Lazily initialized engine. ``PORTFOLIO_DB_URL`` selects the
        database, a local SQLite file is used otherwise.
    """
    global _portfolio_engine
    if _portfolio_engine is None:
        db_url = _get_env_var(
            "PORTFOLIO_DB_URL",
            default=_default_database_url(),
        )
        _portfolio_engine = _create_engine(db_url)
    return _portfolio_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so repositories can depend only on the protocol.
    """

    def get_portfolio_engine(self) -> Engine:
        """Get the engine for the portfolio database.

        Returns:
            Engine: SQLAlchemy engine connected to the portfolio storage.
        """
        return get_portfolio_engine()


__all__ = [
    "get_portfolio_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
