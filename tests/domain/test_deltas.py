"""Tests for current-vs-target delta computation."""

from decimal import Decimal

from src.domain.models import Asset
from src.domain.services.deltas import compute_asset_deltas


def test_deltas_report_overweight_and_underweight_holdings() -> None:
    """A full position above target is negative, an empty one positive."""
    assets = [
        Asset(
            id="a",
            name="A",
            identifier="IE00000000A1",
            quantity=Decimal("5"),
            cost_basis=Decimal("8"),
            last_price=Decimal("10"),
            target_weight=Decimal("70"),
        ),
        Asset(
            id="b",
            name="B",
            identifier="IE00000000B1",
            quantity=Decimal("0"),
            last_price=Decimal("10"),
            target_weight=Decimal("30"),
        ),
    ]

    first, second = compute_asset_deltas(assets, Decimal("50"))

    assert first.current_weight == Decimal("100")
    assert first.target_value == Decimal("35")
    assert first.delta_value == Decimal("-15")
    assert first.quantity_delta == Decimal("-1.5")
    assert second.current_weight == Decimal("0")
    assert second.delta_value == Decimal("15")
    assert second.quantity_delta == Decimal("1.5")


def test_quantity_delta_is_unknown_without_price() -> None:
    """Units cannot be derived without a price."""
    assets = [
        Asset(
            id="a",
            name="A",
            identifier="IE00000000A1",
            quantity=Decimal("2"),
            last_price=Decimal("10"),
            target_weight=Decimal("50"),
        ),
        Asset(
            id="b",
            name="B",
            identifier="IE00000000B1",
            quantity=Decimal("3"),
            target_weight=Decimal("50"),
        ),
    ]

    deltas = compute_asset_deltas(assets, Decimal("20"))

    assert deltas[1].current_value == Decimal("0")
    assert deltas[1].delta_value == Decimal("10")
    assert deltas[1].quantity_delta is None


def test_target_weights_are_normalized_before_deltas() -> None:
    """Raw targets of 1 and 3 become 25% and 75%."""
    assets = [
        Asset(
            id=name,
            name=name,
            identifier=name,
            quantity=Decimal("1"),
            last_price=Decimal("50"),
            target_weight=Decimal(target),
        )
        for name, target in (("a", "1"), ("b", "3"))
    ]

    deltas = compute_asset_deltas(assets, Decimal("100"))

    assert [delta.target_weight for delta in deltas] == [
        Decimal("25"),
        Decimal("75"),
    ]
    assert [delta.delta_value for delta in deltas] == [
        Decimal("-25"),
        Decimal("25"),
    ]
