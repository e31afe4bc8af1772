"""Policies for market identifiers."""

import re

_ISIN_PATTERN = re.compile(r"^[A-Z0-9]{12}$")


def is_valid_isin(identifier: str | None) -> bool:
    """Return True when an identifier looks like an ISIN.

    Only the shape is checked (12 alphanumeric characters), not the check
    digit.

    Args:
        identifier: Raw identifier entered for a holding.

    Returns:
        bool: True for ISIN-shaped identifiers.
    """
    if not identifier:
        return False
    return bool(_ISIN_PATTERN.match(identifier.strip().upper()))


__all__ = ["is_valid_isin"]
