"""Domain models for long-horizon growth projections."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ProjectionPoint:
    """Yearly sample of a projection."""

    year: int
    invested: Decimal
    total: Decimal


@dataclass(frozen=True)
class GrowthProjection:
    """Compounding projection of portfolio value.

    Attributes:
        points: Yearly samples, year 0 included.
        gain: Final total minus final invested capital.
        roi_pct: Gain as a percentage of invested capital.
    """

    points: list[ProjectionPoint]
    gain: Decimal
    roi_pct: Decimal

    @property
    def final(self) -> ProjectionPoint:
        """Return the last yearly sample."""
        return self.points[-1]


__all__ = ["ProjectionPoint", "GrowthProjection"]
