"""Domain services computing the gap between current and target positions."""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.models import Asset, AssetDelta
from src.domain.services.aggregation import compute_current_value
from src.domain.services.normalization import normalize_target_weights

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def compute_asset_deltas(
    assets: Sequence[Asset],
    total_value: Decimal,
) -> list[AssetDelta]:
    """Compute current weight, target and value gap for every holding.

    A positive ``delta_value`` means the holding is underweight. The
    quantity delta is None when the holding has no price, since a currency
    gap cannot be turned into units without one.

    Args:
        assets: Holdings in portfolio order.
        total_value: Total market value of the portfolio.

    Returns:
        list[AssetDelta]: One record per holding, in the same order.
    """
    target_weights = normalize_target_weights(assets)
    deltas = []
    for asset, target_weight in zip(assets, target_weights):
        current_value = compute_current_value(asset)
        current_weight = (
            current_value / total_value * HUNDRED if total_value > 0 else ZERO
        )
        target_value = target_weight / HUNDRED * total_value
        delta_value = target_value - current_value
        quantity_delta = (
            delta_value / asset.last_price if asset.last_price else None
        )
        deltas.append(
            AssetDelta(
                id=asset.id,
                name=asset.name,
                identifier=asset.identifier,
                last_price=asset.last_price,
                current_value=current_value,
                current_weight=current_weight,
                target_weight=target_weight,
                target_value=target_value,
                delta_value=delta_value,
                quantity_delta=quantity_delta,
            )
        )
    return deltas


__all__ = ["compute_asset_deltas"]
