"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from storage, settings or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_optional_decimal(value) -> Decimal | None:
    """Normalize numeric values to Decimal, keeping unknown values unknown.

    Args:
        value: Raw numeric value, or None / empty string when unknown.

    Returns:
        Decimal | None: Normalized numeric value or None.
    """
    if value is None or value == "":
        return None
    return coerce_decimal(value)


def round_money(value: Decimal) -> Decimal:
    """Round an amount to cents, half up."""
    return coerce_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


__all__ = ["CENT", "coerce_decimal", "coerce_optional_decimal", "round_money"]
