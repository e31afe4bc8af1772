"""Port for reading and writing startup investments."""

from typing import Protocol

from src.domain.models import StartupInvestment


class StartupsRepositoryPort(Protocol):
    """Port exposing storage of the ordered startup investments."""

    def fetch_startups(self) -> list[StartupInvestment]:
        """Return the investments in insertion order."""

    def save_startup(self, startup: StartupInvestment) -> None:
        """Insert the investment, or update it when its id already exists."""

    def delete_startup(self, startup_id: str) -> bool:
        """Delete an investment and return whether it existed."""

    def replace_startups(self, startups: list[StartupInvestment]) -> int:
        """Replace the whole collection and return the stored count."""


__all__ = ["StartupsRepositoryPort"]
