"""Port for market quotes."""

from typing import Protocol

from src.domain.models import Quote


class QuoteProviderPort(Protocol):
    """Port mapping a market identifier to its latest quote."""

    def fetch_quote(self, identifier: str) -> Quote | None:
        """Return the latest quote, or None when the price is unknown.

        Implementations never raise for upstream failures.
        """


__all__ = ["QuoteProviderPort"]
