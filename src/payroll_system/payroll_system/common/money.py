from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from ..core.constants import MONEY_PLACES

ZERO = Decimal("0")


def _parse(value: Any) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, float):
        # str() keeps the short repr (0.1 -> "0.1") instead of the binary expansion.
        return Decimal(str(value))
    try:
        text = str(value).strip()
        return Decimal(text) if text else ZERO
    except InvalidOperation:
        return ZERO


def to_decimal(value: Any) -> Decimal:
    """Coerce a loosely-typed numeric field into Decimal.

    ``None``, empty strings, unparseable values and non-finite values
    (NaN, Infinity) count as 0, so a bad column never fails an aggregation.
    """
    amount = _parse(value)
    return amount if amount.is_finite() else ZERO


def non_negative(value: Any) -> Decimal:
    amount = to_decimal(value)
    return amount if amount > ZERO else ZERO


def money(value: Any) -> Decimal:
    """Round a monetary amount to centavos, half away from zero."""
    return to_decimal(value).quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)
