"""Composition root for wiring infrastructure adapters."""

from src.application.ports.assets_repository import AssetsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.history_repository import HistoryRepositoryPort
from src.application.ports.quote_provider import QuoteProviderPort
from src.application.ports.startups_repository import StartupsRepositoryPort
from src.infrastructure.assets_repository import SqlAlchemyAssetsRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.history_repository import SqlAlchemyHistoryRepository
from src.infrastructure.justetf_quote_provider import JustEtfQuoteProvider
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import PortfolioSettings
from src.infrastructure.startups_repository import (
    SqlAlchemyStartupsRepository,
)


def build_settings() -> PortfolioSettings:
    """Return settings sourced from the environment."""
    return PortfolioSettings.from_env()


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_assets_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AssetsRepositoryPort:
    """Return the holdings repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAssetsRepository(resolved_db)


def build_history_repository(
    db_port: DatabaseEnginePort | None = None,
) -> HistoryRepositoryPort:
    """Return the value history repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyHistoryRepository(resolved_db)


def build_startups_repository(
    db_port: DatabaseEnginePort | None = None,
) -> StartupsRepositoryPort:
    """Return the startup investments repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyStartupsRepository(resolved_db)


def build_quote_provider(
    settings: PortfolioSettings | None = None,
) -> QuoteProviderPort:
    """Return the configured quote provider."""
    resolved_settings = settings or build_settings()
    return JustEtfQuoteProvider(
        base_url=resolved_settings.quote_base_url,
        currency=resolved_settings.quote_currency,
        timeout_seconds=resolved_settings.quote_timeout_seconds,
        logger=get_app_logger(),
    )


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_assets_repository",
    "build_history_repository",
    "build_startups_repository",
    "build_quote_provider",
]
