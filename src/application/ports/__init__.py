"""Application ports package."""

from .assets_repository import AssetsRepositoryPort
from .database import DatabaseEnginePort
from .history_repository import HistoryRepositoryPort
from .quote_provider import QuoteProviderPort
from .startups_repository import StartupsRepositoryPort

__all__ = [
    "AssetsRepositoryPort",
    "DatabaseEnginePort",
    "HistoryRepositoryPort",
    "QuoteProviderPort",
    "StartupsRepositoryPort",
]
