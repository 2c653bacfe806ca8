"""Tests for rounding helpers and Settings properties."""

from decimal import Decimal

import pytest

from grid_estimator.models import Settings, round2, round8


class TestRounding:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Decimal("0.000000005"), Decimal("0.00000001")),
            (Decimal("0.0000000049"), Decimal("0")),
            (Decimal("-0.000000005"), Decimal("-0.00000001")),
            (Decimal("123456789012345678901.123456785"), Decimal("123456789012345678901.12345679")),
        ],
    )
    def test_round8_half_up(self, value: Decimal, expected: Decimal) -> None:
        rounded = round8(value)
        assert rounded == expected
        assert rounded.as_tuple().exponent == -8

    def test_round2_half_up(self) -> None:
        assert round2(Decimal("973.335")) == Decimal("973.34")
        assert round2(Decimal("973.33336")) == Decimal("973.33")


class TestSettings:
    def test_effective_balance(self, example_settings: Settings) -> None:
        assert example_settings.effective_balance == Decimal("1000")

    def test_frozen(self, example_settings: Settings) -> None:
        with pytest.raises(AttributeError):
            example_settings.coverage = 10  # type: ignore[misc]
