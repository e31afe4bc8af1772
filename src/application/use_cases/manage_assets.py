"""Use cases applying investor edits to the holdings."""

from collections.abc import Callable
from dataclasses import replace
from decimal import Decimal
from uuid import uuid4

from src.application.ports.assets_repository import AssetsRepositoryPort
from src.domain.models import Asset
from src.domain.services.normalization import normalize_identifier
from src.domain.services.validation import validate_asset
from src.infrastructure.logging.logger import get_app_logger


def _new_asset_id() -> str:
    return uuid4().hex[:8]


class UpsertAssetUseCase:
    """Add a holding, or update the one sharing its identifier."""

    def __init__(
        self,
        assets_repository: AssetsRepositoryPort,
        logger=None,
        id_factory: Callable[[], str] | None = None,
        default_currency: str = "EUR",
    ) -> None:
        """Initialize the use case.

        Args:
            assets_repository: Port storing the holdings.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Optional generator of ids for new holdings.
            default_currency: Currency label of new holdings.
        """
        self._assets_repository = assets_repository
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory or _new_asset_id
        self._default_currency = default_currency

    def execute(
        self,
        name: str,
        identifier: str,
        quantity: Decimal,
        cost_basis: Decimal | None = None,
        target_weight: Decimal | None = None,
        asset_class: str = "",
        manual: bool = False,
        last_price: Decimal | None = None,
    ) -> Asset:
        """Insert or update a holding.

        Identifiers are matched case-insensitively. On update, a missing cost
        basis or target weight keeps the stored value, while the class and
        the manual flag always take the submitted values.

        Args:
            name: Display name.
            identifier: Market identifier (ISIN).
            quantity: Units held.
            cost_basis: Optional average price paid per unit.
            target_weight: Optional raw target weight.
            asset_class: Optional class tag.
            manual: Whether the price is supplied by the investor.
            last_price: Investor-supplied price for manual holdings.

        Returns:
            Asset: The stored holding.
        """
        key = normalize_identifier(identifier)
        existing = next(
            (
                asset
                for asset in self._assets_repository.fetch_assets()
                if normalize_identifier(asset.identifier) == key
            ),
            None,
        )
        if existing is not None:
            asset = replace(
                existing,
                name=name.strip(),
                quantity=quantity,
                cost_basis=(
                    cost_basis if cost_basis is not None
                    else existing.cost_basis
                ),
                target_weight=(
                    target_weight if target_weight is not None
                    else existing.target_weight
                ),
                asset_class=asset_class,
                manual=manual,
                last_price=(
                    last_price if manual and last_price is not None
                    else existing.last_price
                ),
            )
            action = "Updated"
        else:
            asset = Asset(
                id=self._id_factory(),
                name=name.strip(),
                identifier=identifier.strip(),
                quantity=quantity,
                cost_basis=cost_basis,
                last_price=last_price if manual else None,
                target_weight=target_weight or Decimal("0"),
                asset_class=asset_class,
                manual=manual,
                currency=self._default_currency,
            )
            action = "Added"

        validate_asset(asset)
        self._assets_repository.save_asset(asset)
        self._logger.info(f"{action} asset {asset.id} ({asset.identifier})")
        return asset


class DeleteAssetUseCase:
    """Remove a holding by id."""

    def __init__(
        self,
        assets_repository: AssetsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            assets_repository: Port storing the holdings.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._assets_repository = assets_repository
        self._logger = logger or get_app_logger()

    def execute(self, asset_id: str) -> bool:
        """Delete the holding and return whether it existed."""
        deleted = self._assets_repository.delete_asset(asset_id)
        if deleted:
            self._logger.info(f"Deleted asset {asset_id}")
        else:
            self._logger.warning(f"Asset {asset_id} not found for deletion")
        return deleted


__all__ = ["UpsertAssetUseCase", "DeleteAssetUseCase"]
