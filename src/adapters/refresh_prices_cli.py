"""CLI adapter refreshing holding prices.

Runs one refresh cycle by default. With ``--watch`` it keeps refreshing every
``REFRESH_INTERVAL_SECONDS`` until interrupted. With ``--asset ID`` only that
holding is refreshed and no history snapshot is recorded.
"""

import sys
import time

from src.application.use_cases.refresh_prices import RefreshPricesUseCase
from src.application.use_cases.seed_assets import SeedAssetsUseCase
from src.infrastructure.container import (
    build_assets_repository,
    build_database_adapter,
    build_history_repository,
    build_quote_provider,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger


def _run_cycle(use_case: RefreshPricesUseCase) -> None:
    """Run one refresh and print its summary."""
    result = use_case.run()
    print(
        f"Refreshed {result.refreshed_count} prices "
        f"({result.manual_count} manual, {len(result.failed_ids)} unknown); "
        f"total value {result.snapshot.total_value}"
    )


def _refresh_one(use_case: RefreshPricesUseCase, asset_id: str) -> None:
    """Refresh a single holding and print its new price."""
    asset = use_case.refresh_asset(asset_id)
    if asset is None:
        print(f"Price of {asset_id} not refreshed")
        return
    print(f"{asset.name}: {asset.last_price} {asset.currency}".rstrip())


def _parse_asset_id(argv: list[str]) -> str | None:
    """Return the value following ``--asset``, if any."""
    if "--asset" not in argv:
        return None
    index = argv.index("--asset") + 1
    return argv[index] if index < len(argv) else None


def main(watch: bool = False, asset_id: str | None = None) -> None:
    """Run the price refresh use case once, periodically, or for one holding."""
    logger = get_app_logger()
    settings = build_settings()
    db_adapter = build_database_adapter()
    assets_repository = build_assets_repository(db_adapter)
    SeedAssetsUseCase(assets_repository, logger=logger).run()
    use_case = RefreshPricesUseCase(
        assets_repository=assets_repository,
        history_repository=build_history_repository(db_adapter),
        quote_provider=build_quote_provider(settings),
        logger=logger,
    )

    if asset_id:
        _refresh_one(use_case, asset_id)
        return
    _run_cycle(use_case)
    if not watch:
        return
    logger.info(
        f"Watching prices every {settings.refresh_interval_seconds} seconds"
    )
    try:
        while True:
            time.sleep(settings.refresh_interval_seconds)
            _run_cycle(use_case)
    except KeyboardInterrupt:
        logger.info("Price refresh stopped")


if __name__ == "__main__":  # pragma: no cover
    main(
        watch="--watch" in sys.argv[1:],
        asset_id=_parse_asset_id(sys.argv[1:]),
    )
