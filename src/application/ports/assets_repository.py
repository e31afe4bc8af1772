"""Port for reading and writing portfolio holdings."""

from datetime import datetime
from decimal import Decimal
from typing import Protocol

from src.domain.models import Asset


class AssetsRepositoryPort(Protocol):
    """Port exposing storage of the ordered asset collection."""

    def fetch_assets(self) -> list[Asset]:
        """Return the holdings in insertion order."""

    def save_asset(self, asset: Asset) -> None:
        """Insert the holding, or update it when its id already exists."""

    def delete_asset(self, asset_id: str) -> bool:
        """Delete a holding and return whether it existed."""

    def update_price(
        self,
        asset_id: str,
        last_updated: datetime,
        last_price: Decimal | None = None,
        currency: str | None = None,
    ) -> bool:
        """Update only the price fields and return whether the holding exists."""

    def replace_assets(self, assets: list[Asset]) -> int:
        """Replace the whole collection and return the stored count."""


__all__ = ["AssetsRepositoryPort"]
