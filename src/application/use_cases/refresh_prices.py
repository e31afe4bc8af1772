"""Use case refreshing holding prices and recording a history snapshot.

One refresh cycle:

* asks the quote provider for the latest price of every fetched holding;
* keeps the previous price when the quote is unknown;
* only stamps manual holdings, whose price is supplied by the investor;
* writes the price fields alone, then appends one value snapshot of the
  holdings as stored after the cycle.

A single holding can also be refreshed on demand; that path records no
snapshot.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from src.application.ports.assets_repository import AssetsRepositoryPort
from src.application.ports.history_repository import HistoryRepositoryPort
from src.application.ports.quote_provider import QuoteProviderPort
from src.domain.constants import HISTORY_LIMIT
from src.domain.models import Asset, HistorySnapshot
from src.domain.services.history import build_history_snapshot
from src.infrastructure.logging.logger import get_app_logger

REFRESHED = "refreshed"
MANUAL = "manual"
FAILED = "failed"
MISSING = "missing"


@dataclass(frozen=True)
class RefreshPricesResult:
    """Result of a refresh cycle.

    Attributes:
        refreshed_count: Holdings whose price was updated from a quote.
        manual_count: Manual holdings that kept their price.
        failed_ids: Holdings whose quote was unknown.
        snapshot: History snapshot appended for this cycle.
    """

    refreshed_count: int
    manual_count: int
    failed_ids: list[str]
    snapshot: HistorySnapshot


class RefreshPricesUseCase:
    """Refresh prices from the quote provider and record the total value."""

    def __init__(
        self,
        assets_repository: AssetsRepositoryPort,
        history_repository: HistoryRepositoryPort,
        quote_provider: QuoteProviderPort,
        logger=None,
        history_limit: int = HISTORY_LIMIT,
    ) -> None:
        """Initialize the use case.

        Args:
            assets_repository: Port storing the holdings.
            history_repository: Port storing value snapshots.
            quote_provider: Port returning market quotes.
            logger: Optional logger compatible with logging.Logger-like API.
            history_limit: Number of snapshots kept in storage.
        """
        self._assets_repository = assets_repository
        self._history_repository = history_repository
        self._quote_provider = quote_provider
        self._logger = logger or get_app_logger()
        self._history_limit = history_limit

    def run(self, now: datetime | None = None) -> RefreshPricesResult:
        """Execute one refresh cycle.

        Args:
            now: Optional cycle timestamp, defaults to the current UTC time.

        Returns:
            RefreshPricesResult: Counts and the appended snapshot.
        """
        now = now or datetime.now(timezone.utc)

        refreshed_count = 0
        manual_count = 0
        failed_ids: list[str] = []
        for asset in self._assets_repository.fetch_assets():
            outcome = self._refresh(asset, now)
            if outcome == REFRESHED:
                refreshed_count += 1
            elif outcome == MANUAL:
                manual_count += 1
            elif outcome == FAILED:
                failed_ids.append(asset.id)

        # Holdings deleted or edited during the cycle are valued as stored.
        snapshot = build_history_snapshot(
            self._assets_repository.fetch_assets(),
            now,
        )
        self._history_repository.append_snapshot(
            snapshot,
            limit=self._history_limit,
        )

        if failed_ids:
            self._logger.warning(
                f"Price unknown for {len(failed_ids)} assets: "
                f"{', '.join(failed_ids)}"
            )
        self._logger.info(
            f"Refreshed {refreshed_count} prices, {manual_count} manual, "
            f"total value {snapshot.total_value}"
        )
        return RefreshPricesResult(
            refreshed_count=refreshed_count,
            manual_count=manual_count,
            failed_ids=failed_ids,
            snapshot=snapshot,
        )

    def refresh_asset(
        self,
        asset_id: str,
        now: datetime | None = None,
    ) -> Asset | None:
        """Refresh the price of a single holding.

        Args:
            asset_id: Holding to refresh.
            now: Optional timestamp for manual holdings.

        Returns:
            Asset | None: The holding as stored after the refresh, or None
            when it does not exist or its quote is unknown.
        """
        now = now or datetime.now(timezone.utc)
        asset = next(
            (
                item
                for item in self._assets_repository.fetch_assets()
                if item.id == asset_id
            ),
            None,
        )
        if asset is None:
            self._logger.warning(f"Cannot refresh unknown asset '{asset_id}'")
            return None

        outcome = self._refresh(asset, now)
        if outcome == FAILED:
            self._logger.warning(f"Price unknown for asset '{asset_id}'")
            return None
        if outcome == MISSING:
            self._logger.warning(
                f"Asset '{asset_id}' was deleted during the refresh"
            )
            return None

        self._logger.info(f"Refreshed price of asset '{asset_id}'")
        return next(
            (
                item
                for item in self._assets_repository.fetch_assets()
                if item.id == asset_id
            ),
            None,
        )

    def _refresh(self, asset: Asset, now: datetime) -> str:
        """Write the latest price of one holding and return the outcome."""
        if asset.manual:
            stored = self._assets_repository.update_price(asset.id, now)
            return MANUAL if stored else MISSING
        quote = self._quote_provider.fetch_quote(asset.identifier)
        if quote is None:
            return FAILED
        stored = self._assets_repository.update_price(
            asset.id,
            quote.timestamp,
            last_price=quote.price,
            currency=quote.currency,
        )
        return REFRESHED if stored else MISSING


__all__ = ["RefreshPricesUseCase", "RefreshPricesResult"]
