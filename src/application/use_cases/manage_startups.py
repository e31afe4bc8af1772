"""Use cases applying investor edits to the startup investments."""

from collections.abc import Callable
from dataclasses import replace
from decimal import Decimal
from uuid import uuid4

from src.application.ports.startups_repository import StartupsRepositoryPort
from src.domain.models import StartupInvestment
from src.domain.services.validation import validate_startup
from src.infrastructure.logging.logger import get_app_logger


def _new_startup_id() -> str:
    return uuid4().hex[:8]


class UpsertStartupUseCase:
    """Add a startup investment, or update the one sharing its name."""

    def __init__(
        self,
        startups_repository: StartupsRepositoryPort,
        logger=None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            startups_repository: Port storing the investments.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Optional generator of ids for new investments.
        """
        self._startups_repository = startups_repository
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory or _new_startup_id

    def execute(
        self,
        name: str,
        invested: Decimal,
        fee: Decimal = Decimal("0"),
    ) -> StartupInvestment:
        """Insert or update an investment matched by name, ignoring case.

        Raises:
            InvalidAssetError: If the amount or fee is negative.
        """
        key = name.strip().casefold()
        existing = next(
            (
                startup
                for startup in self._startups_repository.fetch_startups()
                if startup.name.strip().casefold() == key
            ),
            None,
        )
        if existing is not None:
            startup = replace(
                existing,
                name=name.strip(),
                invested=invested,
                fee=fee,
            )
            action = "Updated"
        else:
            startup = StartupInvestment(
                id=self._id_factory(),
                name=name.strip(),
                invested=invested,
                fee=fee,
            )
            action = "Added"

        validate_startup(startup)
        self._startups_repository.save_startup(startup)
        self._logger.info(f"{action} startup {startup.id} ({startup.name})")
        return startup


class DeleteStartupUseCase:
    """Remove a startup investment by id."""

    def __init__(
        self,
        startups_repository: StartupsRepositoryPort,
        logger=None,
    ) -> None:
        self._startups_repository = startups_repository
        self._logger = logger or get_app_logger()

    def execute(self, startup_id: str) -> bool:
        """Delete the investment and return whether it existed."""
        deleted = self._startups_repository.delete_startup(startup_id)
        if deleted:
            self._logger.info(f"Deleted startup {startup_id}")
        else:
            self._logger.warning(f"Startup {startup_id} not found")
        return deleted


__all__ = ["UpsertStartupUseCase", "DeleteStartupUseCase"]
