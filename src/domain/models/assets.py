"""Domain models for portfolio holdings and market data."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Asset:
    """A holding of the portfolio.

    Attributes:
        id: Unique key of the holding.
        name: Display name.
        identifier: Market identifier (usually an ISIN).
        quantity: Units held.
        cost_basis: Average price paid per unit, None when unknown.
        last_price: Last known price per unit, None when unknown.
        target_weight: Raw target weight in percentage points.
        asset_class: Free-form class tag (ETF, Commodity, Crypto...).
        manual: True when the price is supplied by the investor.
        currency: Quote currency label.
        last_updated: Time of the last price refresh.
    """

    id: str
    name: str
    identifier: str
    quantity: Decimal
    cost_basis: Decimal | None = None
    last_price: Decimal | None = None
    target_weight: Decimal = Decimal("0")
    asset_class: str = ""
    manual: bool = False
    currency: str = ""
    last_updated: datetime | None = None


@dataclass(frozen=True)
class Quote:
    """Price returned by a quote provider."""

    price: Decimal
    currency: str
    timestamp: datetime


@dataclass(frozen=True)
class HistorySnapshot:
    """Total portfolio value at a point in time."""

    taken_at: datetime
    total_value: Decimal


__all__ = ["Asset", "Quote", "HistorySnapshot"]
