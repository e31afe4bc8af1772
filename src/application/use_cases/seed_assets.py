"""Use cases loading the default portfolio into empty storage."""

from decimal import Decimal

from src.application.ports.assets_repository import AssetsRepositoryPort
from src.application.ports.startups_repository import StartupsRepositoryPort
from src.domain.models import Asset, StartupInvestment
from src.infrastructure.logging.logger import get_app_logger


DEFAULT_ASSETS = (
    Asset(
        id="ftseallworld",
        name="FTSE All-World USD (Acc)",
        identifier="IE00BK5BQT80",
        quantity=Decimal("96.164474"),
        cost_basis=Decimal("135.73"),
        target_weight=Decimal("65"),
        asset_class="ETF",
    ),
    Asset(
        id="worldquality",
        name="iShares Edge MSCI World Quality Factor UCITS ETF (Acc)",
        identifier="IE00BP3QZ601",
        quantity=Decimal("22"),
        cost_basis=Decimal("67.88818"),
        target_weight=Decimal("8"),
        asset_class="ETF",
    ),
    Asset(
        id="worldmomentum",
        name="iShares Edge MSCI World Momentum Factor UCITS ETF (Acc)",
        identifier="IE00BP3QZ825",
        quantity=Decimal("14"),
        cost_basis=Decimal("83.075"),
        target_weight=Decimal("6"),
        asset_class="ETF",
    ),
    Asset(
        id="worldvalue",
        name="iShares Edge MSCI World Value Factor UCITS ETF (Acc)",
        identifier="IE00BP3QZB59",
        quantity=Decimal("23"),
        cost_basis=Decimal("50.07434"),
        target_weight=Decimal("6"),
        asset_class="ETF",
    ),
    Asset(
        id="gold",
        name="Physical Gold USD (Acc)",
        identifier="IE00B4ND3602",
        quantity=Decimal("26.8364"),
        cost_basis=Decimal("58.28"),
        target_weight=Decimal("10"),
        asset_class="Commodity",
    ),
    Asset(
        id="bitcoin",
        name="Bitcoin ETP",
        identifier="XS2940466316",
        quantity=Decimal("87"),
        cost_basis=Decimal("7.6274"),
        target_weight=Decimal("4"),
        asset_class="Crypto",
    ),
    Asset(
        id="quantum",
        name="VanEck Quantum Computing UCITS ETF A",
        identifier="IE0007Y8Y157",
        quantity=Decimal("15.251524"),
        cost_basis=Decimal("20.98"),
        target_weight=Decimal("1"),
        asset_class="ETF",
    ),
    # Private equity funds are priced by hand and never receive monthly cash.
    Asset(
        id="eqt-nexus",
        name="EQT Nexus ELTIF",
        identifier="LU3176111881",
        quantity=Decimal("1"),
        cost_basis=Decimal("500"),
        last_price=Decimal("500"),
        asset_class="Private equity",
        manual=True,
        currency="EUR",
    ),
    Asset(
        id="apollo-global",
        name="Apollo Global Private Markets ELTIF",
        identifier="LU3170240538",
        quantity=Decimal("1"),
        cost_basis=Decimal("500"),
        last_price=Decimal("500"),
        asset_class="Private equity",
        manual=True,
        currency="EUR",
    ),
)



def _startup(startup_id: str, name: str, invested: str, fee: str):
    return StartupInvestment(
        id=startup_id,
        name=name,
        invested=Decimal(invested),
        fee=Decimal(fee),
    )


DEFAULT_STARTUPS = (
    _startup("rhyde", "Rhyde 2.0", "248", "19.84"),
    _startup("hymalaia", "Hymalaia", "300", "24"),
    _startup("favikon", "Favikon", "300", "24"),
    _startup("orbital-paradigm", "Orbital Paradigm", "300", "24"),
    _startup("yasu", "Yasu", "300", "24"),
    _startup("reental", "Reental", "300", "24"),
    _startup("fintower", "Fintower", "300", "24"),
    _startup("epic-games", "Epic Games", "300", "24"),
    _startup("mega", "Mega", "300", "24"),
)


class SeedAssetsUseCase:
    """Store the default portfolio when no holding exists yet."""

    def __init__(
        self,
        assets_repository: AssetsRepositoryPort,
        logger=None,
        defaults: tuple[Asset, ...] = DEFAULT_ASSETS,
    ) -> None:
        """Initialize the use case.

        Args:
            assets_repository: Port storing the holdings.
            logger: Optional logger compatible with logging.Logger-like API.
            defaults: Holdings stored into empty storage.
        """
        self._assets_repository = assets_repository
        self._logger = logger or get_app_logger()
        self._defaults = defaults

    def run(self) -> int:
        """Seed the storage and return the number of holdings inserted."""
        if self._assets_repository.fetch_assets():
            return 0
        count = self._assets_repository.replace_assets(list(self._defaults))
        self._logger.info(f"Seeded {count} default assets")
        return count


class SeedStartupsUseCase:
    """Store the default startup investments when none exist yet."""

    def __init__(
        self,
        startups_repository: StartupsRepositoryPort,
        logger=None,
        defaults: tuple[StartupInvestment, ...] = DEFAULT_STARTUPS,
    ) -> None:
        self._startups_repository = startups_repository
        self._logger = logger or get_app_logger()
        self._defaults = defaults

    def run(self) -> int:
        """Seed the storage and return the number of investments inserted."""
        if self._startups_repository.fetch_startups():
            return 0
        count = self._startups_repository.replace_startups(
            list(self._defaults)
        )
        self._logger.info(f"Seeded {count} default startup investments")
        return count


__all__ = [
    "SeedAssetsUseCase",
    "SeedStartupsUseCase",
    "DEFAULT_ASSETS",
    "DEFAULT_STARTUPS",
]
