"""Tests for domain validation and identifier policies."""

from decimal import Decimal

import pytest

from src.domain.models import Asset
from src.domain.policies.identifiers import is_valid_isin
from src.domain.services.validation import (
    InvalidAssetError,
    validate_asset,
    validate_assets,
)


def _asset(**overrides) -> Asset:
    values = {
        "id": "a",
        "name": "A",
        "identifier": "IE00BK5BQT80",
        "quantity": Decimal("1"),
        "cost_basis": Decimal("10"),
        "last_price": Decimal("12"),
        "target_weight": Decimal("40"),
    }
    values.update(overrides)
    return Asset(**values)


def test_valid_asset_passes() -> None:
    validate_asset(_asset())
    validate_asset(_asset(cost_basis=None, last_price=None))


@pytest.mark.parametrize(
    "field_name",
    ["quantity", "cost_basis", "last_price", "target_weight"],
)
def test_negative_fields_are_rejected(field_name: str) -> None:
    with pytest.raises(InvalidAssetError, match=field_name):
        validate_asset(_asset(**{field_name: Decimal("-1")}))


def test_validate_assets_checks_every_holding() -> None:
    with pytest.raises(InvalidAssetError):
        validate_assets([_asset(), _asset(id="b", quantity=Decimal("-2"))])


def test_invalid_asset_error_is_a_value_error() -> None:
    assert issubclass(InvalidAssetError, ValueError)


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("IE00BK5BQT80", True),
        (" ie00bk5bqt80 ", True),
        ("IE00BK5BQT8", False),
        ("IE00-K5BQT80", False),
        ("", False),
        (None, False),
    ],
)
def test_is_valid_isin(identifier: str | None, expected: bool) -> None:
    assert is_valid_isin(identifier) is expected
