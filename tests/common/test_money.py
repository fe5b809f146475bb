from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.common.money import money, non_negative, to_decimal


@pytest.mark.parametrize("value", [None, "", "   ", "abc", "12,5", object()])
def test_missing_or_unparseable_values_count_as_zero(value):
    assert to_decimal(value) == Decimal("0")


@pytest.mark.parametrize("value", ["NaN", "-Infinity", "Infinity", float("nan"), float("inf"), Decimal("NaN")])
def test_non_finite_values_count_as_zero(value):
    assert to_decimal(value) == Decimal("0")


def test_floats_keep_their_short_form():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(" 250.75 ") == Decimal("250.75")
    assert to_decimal(True) == Decimal("1")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2.345", Decimal("2.35")),
        ("-2.345", Decimal("-2.35")),
        ("2.344", Decimal("2.34")),
        ("0.005", Decimal("0.01")),
        (312.5, Decimal("312.50")),
    ],
)
def test_money_rounds_half_away_from_zero(value, expected):
    assert money(value) == expected
    assert money(value).as_tuple().exponent == -2


def test_non_negative_floors_at_zero():
    assert non_negative("-1") == 0
    assert non_negative("5.5") == Decimal("5.5")
    assert non_negative("NaN") == 0
