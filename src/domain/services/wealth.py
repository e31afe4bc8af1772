"""Domain services combining holdings, startups and cash."""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.constants import CASH_CLASS, STARTUP_CLASS
from src.domain.models import (
    Asset,
    AssetClassAmount,
    AssetClassBreakdown,
    StartupInvestment,
    WealthSummary,
)
from src.domain.services.aggregation import (
    compute_asset_class_breakdown,
    compute_current_value,
)
from src.utils.decimal_utils import round_money

ZERO = Decimal("0")


def compute_wealth_summary(
    assets: Sequence[Asset],
    startups: Sequence[StartupInvestment],
    cash: Decimal,
) -> WealthSummary:
    """Combine market holdings, startup tickets and cash.

    Startups are valued at the amount invested. Startups and cash join the
    asset class breakdown as their own categories, after the market classes
    and only when positive.

    Args:
        assets: Holdings in portfolio order.
        startups: Startup investments.
        cash: Uninvested cash, not negative.

    Returns:
        WealthSummary: Combined breakdown and grand total.
    """
    holdings_value = sum(
        (compute_current_value(asset) for asset in assets),
        ZERO,
    )
    invested = sum((startup.invested for startup in startups), ZERO)
    fees = sum((startup.fee for startup in startups), ZERO)

    amounts = {
        item.asset_class: item.amount
        for item in compute_asset_class_breakdown(assets).categories
    }
    for label, amount in ((STARTUP_CLASS, invested), (CASH_CLASS, cash)):
        if amount > 0:
            amounts[label] = amounts.get(label, ZERO) + round_money(amount)

    return WealthSummary(
        breakdown=AssetClassBreakdown(
            categories=[
                AssetClassAmount(asset_class=label, amount=amount)
                for label, amount in amounts.items()
            ]
        ),
        holdings_value=round_money(holdings_value),
        startups_invested=round_money(invested),
        startups_fees=round_money(fees),
        cash=round_money(cash),
        total=round_money(holdings_value + invested + cash),
    )


__all__ = ["compute_wealth_summary"]
