from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..common.money import ZERO
from ..core.constants import CASH_ADVANCE
from ..core.enums import InstallmentStatus


@dataclass(frozen=True)
class LoanInstallment:
    """Stored installment row of a cash advance schedule.

    ``status`` is the value recorded when the schedule was saved; the status
    shown to users is derived from the clock on read.
    """

    employee_id: str
    cutoff_date: date
    deduction_amount: Decimal
    remaining_balance: Decimal = ZERO
    status: InstallmentStatus = InstallmentStatus.PENDING
    deduction_type: str = CASH_ADVANCE
    installment_id: int | None = None


@dataclass(frozen=True)
class ScheduledInstallment:
    """One generated row: cutoff date, amount deducted, balance left after it."""

    sequence: int
    cutoff_date: date
    deduction: Decimal
    balance: Decimal


@dataclass(frozen=True)
class InstallmentView:
    cutoff_date: date
    deduction: Decimal
    balance: Decimal
    status: InstallmentStatus


@dataclass(frozen=True)
class InstallmentSchedule:
    total_cash_advance: Decimal
    per_cutoff_deduction: Decimal
    rows: tuple[ScheduledInstallment, ...]
    remaining: Decimal = ZERO

    @property
    def is_complete(self) -> bool:
        """False when the row cap cut the schedule short of the full advance."""
        return self.remaining <= ZERO

    @property
    def total_scheduled(self) -> Decimal:
        return sum((r.deduction for r in self.rows), ZERO)
