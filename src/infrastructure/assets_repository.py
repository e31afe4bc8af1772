"""SQLAlchemy-backed repository for portfolio holdings."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import text

from src.application.ports.assets_repository import AssetsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import Asset
from src.utils.decimal_utils import coerce_decimal, coerce_optional_decimal


# Numbers are stored as text so Decimal values round-trip exactly.
CREATE_ASSETS_SQL = """
CREATE TABLE IF NOT EXISTS assets (
    id TEXT PRIMARY KEY,
    position INTEGER NOT NULL,
    name TEXT NOT NULL,
    identifier TEXT NOT NULL,
    quantity TEXT NOT NULL,
    cost_basis TEXT,
    last_price TEXT,
    target_weight TEXT NOT NULL,
    asset_class TEXT,
    manual INTEGER NOT NULL DEFAULT 0,
    currency TEXT,
    last_updated TEXT
)
"""

SELECT_ASSETS_SQL = text(
    """
    SELECT id, name, identifier, quantity, cost_basis, last_price,
           target_weight, asset_class, manual, currency, last_updated
    FROM assets
    ORDER BY position
    """
)

INSERT_ASSET_SQL = text(
    """
    INSERT INTO assets (
        id,
        position,
        name,
        identifier,
        quantity,
        cost_basis,
        last_price,
        target_weight,
        asset_class,
        manual,
        currency,
        last_updated
    )
    VALUES (
        :id,
        :position,
        :name,
        :identifier,
        :quantity,
        :cost_basis,
        :last_price,
        :target_weight,
        :asset_class,
        :manual,
        :currency,
        :last_updated
    )
    """
)

UPDATE_ASSET_SQL = text(
    """
    UPDATE assets
    SET name = :name,
        identifier = :identifier,
        quantity = :quantity,
        cost_basis = :cost_basis,
        last_price = :last_price,
        target_weight = :target_weight,
        asset_class = :asset_class,
        manual = :manual,
        currency = :currency,
        last_updated = :last_updated
    WHERE id = :id
    """
)

NEXT_POSITION_SQL = text(
    "SELECT COALESCE(MAX(position), -1) + 1 AS next_position FROM assets"
)

# A null price or currency keeps the stored value.
UPDATE_PRICE_SQL = text(
    """
    UPDATE assets
    SET last_price = COALESCE(:last_price, last_price),
        currency = COALESCE(:currency, currency),
        last_updated = :last_updated
    WHERE id = :id
    """
)

DELETE_ASSET_SQL = text("DELETE FROM assets WHERE id = :id")

DELETE_ALL_ASSETS_SQL = "DELETE FROM assets"


def _to_row(asset: Asset) -> dict[str, Any]:
    """Convert a holding into bind parameters."""

    def _as_text(value) -> str | None:
        return None if value is None else str(value)

    return {
        "id": asset.id,
        "name": asset.name,
        "identifier": asset.identifier,
        "quantity": str(asset.quantity),
        "cost_basis": _as_text(asset.cost_basis),
        "last_price": _as_text(asset.last_price),
        "target_weight": str(asset.target_weight),
        "asset_class": asset.asset_class,
        "manual": 1 if asset.manual else 0,
        "currency": asset.currency,
        "last_updated": (
            asset.last_updated.isoformat() if asset.last_updated else None
        ),
    }


def _from_row(row) -> Asset:
    """Convert a database row into a holding."""
    return Asset(
        id=row.id,
        name=row.name,
        identifier=row.identifier,
        quantity=coerce_decimal(row.quantity),
        cost_basis=coerce_optional_decimal(row.cost_basis),
        last_price=coerce_optional_decimal(row.last_price),
        target_weight=coerce_decimal(row.target_weight),
        asset_class=row.asset_class or "",
        manual=bool(row.manual),
        currency=row.currency or "",
        last_updated=(
            datetime.fromisoformat(row.last_updated)
            if row.last_updated
            else None
        ),
    )


class SqlAlchemyAssetsRepository(AssetsRepositoryPort):
    """Repository backed by SQLAlchemy for the ``assets`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the portfolio engine.
        """
        self._db_port = db_port

    def fetch_assets(self) -> list[Asset]:
        """Return holdings in insertion order."""
        engine = self._db_port.get_portfolio_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_ASSETS_SQL)
            rows = conn.execute(SELECT_ASSETS_SQL).all()
        return [_from_row(row) for row in rows]

    def save_asset(self, asset: Asset) -> None:
        """Update the holding in place, or append it when new."""
        payload = _to_row(asset)
        engine = self._db_port.get_portfolio_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_ASSETS_SQL)
            result = conn.execute(UPDATE_ASSET_SQL, payload)
            if result.rowcount == 0:
                position = conn.execute(NEXT_POSITION_SQL).scalar_one()
                conn.execute(
                    INSERT_ASSET_SQL,
                    {**payload, "position": position},
                )

    def delete_asset(self, asset_id: str) -> bool:
        """Delete a holding and return whether it existed."""
        engine = self._db_port.get_portfolio_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_ASSETS_SQL)
            deleted = conn.execute(DELETE_ASSET_SQL, {"id": asset_id}).rowcount
        return deleted > 0

    def update_price(
        self,
        asset_id: str,
        last_updated: datetime,
        last_price: Decimal | None = None,
        currency: str | None = None,
    ) -> bool:
        """Update only the price fields of a holding.

        Other columns are left untouched, so edits saved while quotes are
        fetched survive the refresh.

        Args:
            asset_id: Holding to update.
            last_updated: Timestamp of the price.
            last_price: New unit price, None to keep the stored one.
            currency: Quote currency, None or empty to keep the stored one.

        Returns:
            bool: False when the holding no longer exists.
        """
        payload = {
            "id": asset_id,
            "last_price": None if last_price is None else str(last_price),
            "currency": currency or None,
            "last_updated": last_updated.isoformat(),
        }
        engine = self._db_port.get_portfolio_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_ASSETS_SQL)
            updated = conn.execute(UPDATE_PRICE_SQL, payload).rowcount
        return updated > 0

    def replace_assets(self, assets: list[Asset]) -> int:
        """Replace all holdings, keeping the given order.

        Returns:
            int: Number of holdings stored.
        """
        payload = [
            {**_to_row(asset), "position": position}
            for position, asset in enumerate(assets)
        ]
        engine = self._db_port.get_portfolio_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_ASSETS_SQL)
            conn.exec_driver_sql(DELETE_ALL_ASSETS_SQL)
            if payload:
                conn.execute(INSERT_ASSET_SQL, payload)
        return len(payload)


__all__ = [
    "SqlAlchemyAssetsRepository",
    "CREATE_ASSETS_SQL",
    "SELECT_ASSETS_SQL",
    "INSERT_ASSET_SQL",
    "UPDATE_ASSET_SQL",
    "UPDATE_PRICE_SQL",
    "DELETE_ASSET_SQL",
]
