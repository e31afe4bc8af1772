"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os

import dotenv

from src.domain.constants import DEFAULT_MONTHLY_BUDGET
from src.infrastructure.justetf_quote_provider import DEFAULT_BASE_URL
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class PortfolioSettings:
    """Settings for planning and price refresh.

    Attributes:
        monthly_budget: Cash allocated by the rebalance plan each month.
        annual_return: Projected annual return, in percent.
        monthly_contribution: Projected monthly contribution.
        projection_years: Projection horizon in whole years.
        quote_base_url: Root URL of the quote provider.
        quote_currency: Currency requested for quotes.
        quote_timeout_seconds: HTTP timeout for quote requests.
        refresh_interval_seconds: Delay between periodic refreshes.
        cash: Uninvested cash counted in the total wealth.
    """

    monthly_budget: Decimal = DEFAULT_MONTHLY_BUDGET
    annual_return: Decimal = Decimal("7")
    monthly_contribution: Decimal = Decimal("500")
    projection_years: int = 20
    quote_base_url: str = DEFAULT_BASE_URL
    quote_currency: str = "EUR"
    quote_timeout_seconds: float = 10.0
    refresh_interval_seconds: int = 900
    cash: Decimal = Decimal("0")

    @classmethod
    def from_env(cls) -> "PortfolioSettings":
        """Build settings from environment variables.

        Unparseable or out-of-range values fall back to their defaults.

        Returns:
            PortfolioSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        defaults = cls()
        monthly_budget = cls._read_decimal(
            "PORTFOLIO_MONTHLY_BUDGET",
            defaults.monthly_budget,
            logger,
        )
        if monthly_budget <= 0:
            logger.warning(
                "PORTFOLIO_MONTHLY_BUDGET must be positive; using default"
            )
            monthly_budget = defaults.monthly_budget
        monthly_contribution = cls._read_decimal(
            "PORTFOLIO_MONTHLY_CONTRIBUTION",
            defaults.monthly_contribution,
            logger,
        )
        if monthly_contribution < 0:
            logger.warning(
                "PORTFOLIO_MONTHLY_CONTRIBUTION must be >= 0; using default"
            )
            monthly_contribution = defaults.monthly_contribution
        projection_years = cls._read_int(
            "PORTFOLIO_PROJECTION_YEARS",
            defaults.projection_years,
            logger,
        )
        if projection_years < 1:
            logger.warning(
                "PORTFOLIO_PROJECTION_YEARS must be >= 1; using default"
            )
            projection_years = defaults.projection_years
        cash = cls._read_decimal("PORTFOLIO_CASH", defaults.cash, logger)
        if cash < 0:
            logger.warning("PORTFOLIO_CASH must be >= 0; using default")
            cash = defaults.cash
        return cls(
            monthly_budget=monthly_budget,
            annual_return=cls._read_decimal(
                "PORTFOLIO_ANNUAL_RETURN",
                defaults.annual_return,
                logger,
            ),
            monthly_contribution=monthly_contribution,
            projection_years=projection_years,
            quote_base_url=os.getenv(
                "QUOTE_BASE_URL",
                defaults.quote_base_url,
            ).strip(),
            quote_currency=os.getenv(
                "QUOTE_CURRENCY",
                defaults.quote_currency,
            ).strip().upper(),
            quote_timeout_seconds=float(
                cls._read_decimal(
                    "QUOTE_TIMEOUT_SECONDS",
                    Decimal(str(defaults.quote_timeout_seconds)),
                    logger,
                )
            ),
            refresh_interval_seconds=cls._read_int(
                "REFRESH_INTERVAL_SECONDS",
                defaults.refresh_interval_seconds,
                logger,
            ),
            cash=cash,
        )

    @staticmethod
    def _read_decimal(name: str, default: Decimal, logger) -> Decimal:
        """Read a decimal environment variable.

        Args:
            name: Environment variable name.
            default: Value used when unset or invalid.
            logger: Logger used for warnings.

        Returns:
            Decimal: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            logger.warning(f"Invalid decimal for {name}: '{raw}'")
            return default
        if not value.is_finite():
            logger.warning(f"Invalid decimal for {name}: '{raw}'")
            return default
        return value

    @staticmethod
    def _read_int(name: str, default: int, logger) -> int:
        """Read an integer environment variable.

        Args:
            name: Environment variable name.
            default: Value used when unset or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            return int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid integer for {name}: '{raw}'")
            return default


__all__ = ["PortfolioSettings"]
