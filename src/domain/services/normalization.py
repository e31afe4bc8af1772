"""Domain normalization helpers."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from src.domain.models import Asset

HUNDRED = Decimal("100")


def normalize_identifier(identifier: str | None) -> str | None:
    """Normalize market identifiers (trimmed, upper case).

    Args:
        identifier: Raw identifier entered for a holding.

    Returns:
        str | None: Normalized identifier, None when blank.
    """
    if not identifier:
        return None
    cleaned = identifier.strip()
    return cleaned.upper() if cleaned else None


def compute_normalization_factor(raw_weights: Iterable[Decimal]) -> Decimal:
    """Return the factor that rescales raw target weights to sum to 100.

    When the raw weights sum to zero the factor is 1 and the weights stay as
    entered.

    Args:
        raw_weights: Raw target weights in percentage points.

    Returns:
        Decimal: 100 / sum of weights, or 1 when the sum is not positive.
    """
    total = sum(
        (weight or Decimal("0") for weight in raw_weights),
        Decimal("0"),
    )
    if total > 0:
        return HUNDRED / total
    return Decimal("1")


def normalize_target_weights(assets: Sequence[Asset]) -> list[Decimal]:
    """Return the normalized target weight of every holding.

    Args:
        assets: Holdings in portfolio order.

    Returns:
        list[Decimal]: Normalized weights, in the same order.
    """
    factor = compute_normalization_factor(
        asset.target_weight for asset in assets
    )
    return [
        (asset.target_weight or Decimal("0")) * factor for asset in assets
    ]


__all__ = [
    "normalize_identifier",
    "compute_normalization_factor",
    "normalize_target_weights",
]
