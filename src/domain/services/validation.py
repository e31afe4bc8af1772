"""Domain validation helpers."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import Asset, StartupInvestment


class InvalidAssetError(ValueError):
    """Raised when a holding violates the non-negative input contract."""


def validate_asset(asset: Asset) -> None:
    """Reject holdings with negative quantities, prices or weights.

    Such values are filtered by the input boundary, so reaching this point
    means an upstream bug.

    Args:
        asset: Holding to check.

    Raises:
        InvalidAssetError: If a numeric field is negative.
    """
    checks = (
        ("quantity", asset.quantity),
        ("target_weight", asset.target_weight),
        ("cost_basis", asset.cost_basis),
        ("last_price", asset.last_price),
    )
    for field_name, value in checks:
        if value is not None and value < Decimal("0"):
            raise InvalidAssetError(
                f"Asset {asset.id} has a negative {field_name}: {value}"
            )


def validate_assets(assets: Iterable[Asset]) -> None:
    """Validate every holding of a collection."""
    for asset in assets:
        validate_asset(asset)


def validate_startup(startup: StartupInvestment) -> None:
    """Reject startup investments with a negative amount or fee."""
    for field_name, value in (
        ("invested", startup.invested),
        ("fee", startup.fee),
    ):
        if value < Decimal("0"):
            raise InvalidAssetError(
                f"Startup {startup.id} has a negative {field_name}: {value}"
            )


__all__ = [
    "InvalidAssetError",
    "validate_asset",
    "validate_assets",
    "validate_startup",
]
