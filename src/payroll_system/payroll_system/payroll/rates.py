from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ..common.money import non_negative
from ..core.constants import DAYS_PER_MONTH, HOURS_PER_DAY


@dataclass(frozen=True)
class Rates:
    basic_salary: Decimal
    daily_rate: Decimal
    hourly_rate: Decimal


def derive_rates(basic_salary: Any) -> Rates:
    """Monthly salary -> daily (30-day month) and hourly (8-hour day) rates.

    Rates stay unrounded; only monetary results get rounded. A negative or
    missing salary counts as 0.
    """
    salary = non_negative(basic_salary)
    daily = salary / DAYS_PER_MONTH
    return Rates(basic_salary=salary, daily_rate=daily, hourly_rate=daily / HOURS_PER_DAY)
