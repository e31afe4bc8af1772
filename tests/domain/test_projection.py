"""Tests for the growth projection service."""

from decimal import Decimal

import pytest

from src.domain.services.projection import (
    compute_monthly_rate,
    project_growth,
)


def test_monthly_rate_is_simple_division() -> None:
    assert compute_monthly_rate(Decimal("12")) == Decimal("0.01")


def test_one_year_of_contributions_compounds_monthly() -> None:
    """Twelve deposits of 100 at 1% a month end near 1268.25."""
    projection = project_growth(
        starting_value=Decimal("0"),
        monthly_contribution=Decimal("100"),
        annual_return_pct=Decimal("12"),
        years=1,
    )

    assert len(projection.points) == 2
    assert projection.final.year == 1
    assert projection.final.invested == Decimal("1200.00")
    assert projection.final.total == Decimal("1268.25")
    assert projection.gain == Decimal("68.25")
    assert projection.roi_pct == Decimal("5.69")


def test_flat_projection_keeps_starting_value() -> None:
    """No contribution and no return leaves the value unchanged."""
    projection = project_growth(
        starting_value=Decimal("1500"),
        monthly_contribution=Decimal("0"),
        annual_return_pct=Decimal("0"),
        years=5,
    )

    assert [point.year for point in projection.points] == [0, 1, 2, 3, 4, 5]
    assert all(point.total == Decimal("1500.00") for point in projection.points)
    assert all(
        point.invested == Decimal("1500.00") for point in projection.points
    )
    assert projection.gain == Decimal("0.00")


def test_zero_rate_total_equals_invested() -> None:
    projection = project_growth(
        Decimal("100"),
        Decimal("50"),
        Decimal("0"),
        2,
    )

    assert projection.final.invested == Decimal("1300.00")
    assert projection.final.total == Decimal("1300.00")


def test_negative_return_loses_value() -> None:
    projection = project_growth(
        Decimal("1000"),
        Decimal("0"),
        Decimal("-12"),
        1,
    )

    assert projection.final.total < Decimal("1000")
    assert projection.gain < 0


def test_empty_projection_has_zero_roi() -> None:
    """Nothing invested means nothing gained."""
    projection = project_growth(Decimal("0"), Decimal("0"), Decimal("7"), 1)

    assert projection.roi_pct == Decimal("0.00")


@pytest.mark.parametrize(
    ("starting_value", "contribution", "years"),
    [
        (Decimal("0"), Decimal("100"), 0),
        (Decimal("-1"), Decimal("100"), 1),
        (Decimal("0"), Decimal("-100"), 1),
    ],
)
def test_invalid_inputs_are_rejected(
    starting_value: Decimal,
    contribution: Decimal,
    years: int,
) -> None:
    with pytest.raises(ValueError):
        project_growth(starting_value, contribution, Decimal("7"), years)
