from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from ...common.money import ZERO, money
from ...core.enums import PayBasis


@dataclass(frozen=True)
class GrossPayInput:
    basic_salary: Decimal
    daily_rate: Decimal
    cutoff_total_days: int
    billable_days: int


@dataclass(frozen=True)
class GrossPay:
    basis: PayBasis
    gross: Decimal
    unclamped_gross: Decimal
    absence_deduction: Decimal
    missing_days: int
    days: int


def missing_days(inp: GrossPayInput) -> int:
    return max(0, inp.cutoff_total_days - inp.billable_days)


def build_result(*, basis: PayBasis, raw_gross: Decimal, absence_deduction: Decimal, missing: int, days: int) -> GrossPay:
    unclamped = money(raw_gross)
    return GrossPay(
        basis=basis,
        gross=unclamped if unclamped > ZERO else money(ZERO),
        unclamped_gross=unclamped,
        absence_deduction=money(absence_deduction),
        missing_days=missing,
        days=days,
    )


class GrossPayStrategy(ABC):
    """Strategy Pattern: one pay basis turning attendance into gross basic pay."""

    basis: PayBasis

    @abstractmethod
    def calculate(self, inp: GrossPayInput) -> GrossPay:
        raise NotImplementedError
