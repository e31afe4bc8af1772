"""Quote provider backed by the JustETF quote API."""

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

import requests

from src.application.ports.quote_provider import QuoteProviderPort
from src.domain.models import Quote
from src.domain.policies.identifiers import is_valid_isin
from src.domain.services.normalization import normalize_identifier
from src.infrastructure.logging.logger import get_app_logger


DEFAULT_BASE_URL = "https://www.justetf.com"

REQUEST_HEADERS = {
    # JustETF rejects requests without a browser user agent.
    "User-Agent": "Mozilla/5.0",
    "Accept": "application/json",
}


class JustEtfQuoteProvider(QuoteProviderPort):
    """QuoteProviderPort implementation calling JustETF over HTTP.

    Upstream failures (network errors, HTTP errors, malformed payloads) are
    logged and reported as an unknown price.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        currency: str = "EUR",
        timeout_seconds: float = 10.0,
        session: requests.Session | None = None,
        logger=None,
    ) -> None:
        """Initialize the provider.

        Args:
            base_url: Root URL of the JustETF site.
            currency: Currency requested for quotes.
            timeout_seconds: HTTP timeout per request.
            session: Optional requests session, mainly for tests.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._base_url = base_url.rstrip("/")
        self._currency = currency
        self._timeout_seconds = timeout_seconds
        self._session = session or requests.Session()
        self._logger = logger or get_app_logger()

    def fetch_quote(self, identifier: str) -> Quote | None:
        """Return the latest quote for an ISIN, or None when unknown.

        Args:
            identifier: ISIN of the holding.

        Returns:
            Quote | None: Latest price in the configured currency.
        """
        isin = normalize_identifier(identifier)
        if not is_valid_isin(isin):
            self._logger.warning(
                f"Invalid identifier '{identifier}': an ISIN is required"
            )
            return None

        try:
            response = self._session.get(
                f"{self._base_url}/api/etfs/{isin}/quote",
                params={
                    "locale": "it",
                    "currency": self._currency,
                    "isin": isin,
                },
                headers=REQUEST_HEADERS,
                timeout=self._timeout_seconds,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            self._logger.warning(f"Quote fetch failed for {isin}: {exc}")
            return None

        price = self._extract_price(payload)
        if price is None:
            self._logger.warning(f"No quote data for {isin}")
            return None
        return Quote(
            price=price,
            currency=self._currency,
            timestamp=datetime.now(timezone.utc),
        )

    @staticmethod
    def _extract_price(payload) -> Decimal | None:
        """Read ``latestQuote.raw`` from a JSON payload.

        Args:
            payload: Decoded JSON body.

        Returns:
            Decimal | None: Non-negative price, or None when absent.
        """
        if not isinstance(payload, dict):
            return None
        latest = payload.get("latestQuote")
        if not isinstance(latest, dict) or latest.get("raw") is None:
            return None
        try:
            price = Decimal(str(latest["raw"]))
        except InvalidOperation:
            return None
        if not price.is_finite() or price < 0:
            return None
        return price


__all__ = ["JustEtfQuoteProvider", "DEFAULT_BASE_URL"]
