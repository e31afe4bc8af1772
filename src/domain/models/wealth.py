"""Domain models for holdings tracked outside the market portfolio."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.portfolio import AssetClassBreakdown


@dataclass(frozen=True)
class StartupInvestment:
    """Equity crowdfunding ticket valued at the amount invested.

    Attributes:
        id: Unique key of the investment.
        name: Company name.
        invested: Amount invested, fees excluded.
        fee: Platform fee paid on top of the investment.
    """

    id: str
    name: str
    invested: Decimal
    fee: Decimal = Decimal("0")


@dataclass(frozen=True)
class WealthSummary:
    """Everything the investor owns, by category.

    Attributes:
        breakdown: Market holdings by asset class, followed by startups and
            cash when they carry a value.
        holdings_value: Market value of the holdings.
        startups_invested: Amount invested in startups.
        startups_fees: Fees paid on startup investments.
        cash: Uninvested cash.
        total: holdings_value + startups_invested + cash, in cents.
    """

    breakdown: AssetClassBreakdown
    holdings_value: Decimal
    startups_invested: Decimal
    startups_fees: Decimal
    cash: Decimal
    total: Decimal


__all__ = ["StartupInvestment", "WealthSummary"]
