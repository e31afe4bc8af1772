"""Domain service projecting portfolio growth under constant assumptions."""

from decimal import Decimal

from src.domain.constants import MONTHS_PER_YEAR
from src.domain.models import GrowthProjection, ProjectionPoint
from src.utils.decimal_utils import coerce_decimal, round_money

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def compute_monthly_rate(annual_return_pct: Decimal) -> Decimal:
    """Return the monthly rate for an annual percentage (simple division).

    Args:
        annual_return_pct: Annual return in percent, e.g. 12 for 12%.

    Returns:
        Decimal: Monthly rate as a fraction, e.g. 0.01.
    """
    return coerce_decimal(annual_return_pct) / HUNDRED / MONTHS_PER_YEAR


def project_growth(
    starting_value: Decimal,
    monthly_contribution: Decimal,
    annual_return_pct: Decimal,
    years: int,
) -> GrowthProjection:
    """Simulate monthly compounding with a constant contribution.

    Each month the value grows by the monthly rate and the contribution is
    added at month end. The starting value counts as already invested.

    Args:
        starting_value: Portfolio value at month 0.
        monthly_contribution: Cash added every month.
        annual_return_pct: Annual return in percent, may be 0 or negative.
        years: Horizon in whole years.

    Returns:
        GrowthProjection: ``years + 1`` yearly samples plus gain and ROI.

    Raises:
        ValueError: If the horizon is shorter than one year or an amount is
            negative.
    """
    if years < 1:
        raise ValueError(f"Projection horizon must be >= 1 year, got {years}")
    starting_value = coerce_decimal(starting_value)
    monthly_contribution = coerce_decimal(monthly_contribution)
    if starting_value < 0 or monthly_contribution < 0:
        raise ValueError("Starting value and contribution must be >= 0")

    monthly_rate = compute_monthly_rate(annual_return_pct)
    invested = starting_value
    total = starting_value
    points = [
        ProjectionPoint(
            year=0,
            invested=round_money(invested),
            total=round_money(total),
        )
    ]
    for month in range(1, years * MONTHS_PER_YEAR + 1):
        invested += monthly_contribution
        total = total * (1 + monthly_rate) + monthly_contribution
        if month % MONTHS_PER_YEAR == 0:
            points.append(
                ProjectionPoint(
                    year=month // MONTHS_PER_YEAR,
                    invested=round_money(invested),
                    total=round_money(total),
                )
            )

    gain = total - invested
    roi_pct = gain / invested * HUNDRED if invested > 0 else ZERO
    return GrowthProjection(
        points=points,
        gain=round_money(gain),
        roi_pct=round_money(roi_pct),
    )


__all__ = ["compute_monthly_rate", "project_growth"]
