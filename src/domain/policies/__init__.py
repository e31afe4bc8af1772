"""Domain policies package."""

from .identifiers import is_valid_isin

__all__ = ["is_valid_isin"]
