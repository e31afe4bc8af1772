"""Domain constants for portfolio planning."""

from decimal import Decimal

DEFAULT_MONTHLY_BUDGET = Decimal("500")

# Amounts below this are treated as fully spent by the allocator.
ALLOCATION_TOLERANCE = Decimal("0.01")
MAX_REDISTRIBUTION_ITERATIONS = 8

HISTORY_LIMIT = 500

MONTHS_PER_YEAR = 12

DEFAULT_ASSET_CLASS = "Unclassified"
STARTUP_CLASS = "Startup"
CASH_CLASS = "Cash"


__all__ = [
    "DEFAULT_MONTHLY_BUDGET",
    "ALLOCATION_TOLERANCE",
    "MAX_REDISTRIBUTION_ITERATIONS",
    "HISTORY_LIMIT",
    "MONTHS_PER_YEAR",
    "DEFAULT_ASSET_CLASS",
    "STARTUP_CLASS",
    "CASH_CLASS",
]
