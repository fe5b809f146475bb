from __future__ import annotations

from calendar import monthrange
from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import Clock, SystemClock, as_date
from ..common.money import ZERO, money
from ..core.constants import FIRST_CUTOFF_DAY, MAX_INSTALLMENTS, SECOND_CUTOFF_DAY
from ..core.enums import InstallmentStatus
from .model import InstallmentSchedule, ScheduledInstallment


def clamped_day(year: int, month: int, day: int) -> date:
    """``day`` of the month, clamped to the month's last day (Feb 30 -> Feb 28/29)."""
    return date(year, month, min(day, monthrange(year, month)[1]))


def next_cutoff(cursor: date) -> date:
    """Next semi-monthly cutoff after ``cursor``: the 30th (clamped) or the 15th of next month."""
    if cursor.day <= FIRST_CUTOFF_DAY:
        return clamped_day(cursor.year, cursor.month, SECOND_CUTOFF_DAY)
    if cursor.month == 12:
        return date(cursor.year + 1, 1, FIRST_CUTOFF_DAY)
    return date(cursor.year, cursor.month + 1, FIRST_CUTOFF_DAY)


def derive_status(cutoff_date: Any, today: Any) -> InstallmentStatus:
    """Paid once the cutoff date has been reached, compared at day precision."""
    return InstallmentStatus.PAID if as_date(cutoff_date) <= as_date(today) else InstallmentStatus.PENDING


class InstallmentScheduler:
    """Amortizes a cash advance into per-cutoff deductions.

    Cutoffs fall on the 15th and the 30th; months shorter than 30 days use
    their last day. At most ``max_rows`` rows are produced; a schedule cut
    short keeps the unscheduled amount in ``remaining``.
    """

    def __init__(self, clock: Optional[Clock] = None, *, max_rows: int = MAX_INSTALLMENTS):
        self._clock = clock or SystemClock()
        self._max_rows = int(max_rows)

    def generate(
        self,
        total_cash_advance: Any,
        per_cutoff_deduction: Any,
        *,
        start_reference_date: Optional[date] = None,
    ) -> InstallmentSchedule:
        total = money(total_cash_advance)
        per_cutoff = money(per_cutoff_deduction)
        if total <= ZERO or per_cutoff <= ZERO:
            return InstallmentSchedule(
                total_cash_advance=total,
                per_cutoff_deduction=per_cutoff,
                rows=(),
                remaining=max(ZERO, total),
            )

        cursor = start_reference_date or self._clock.today()
        remaining = total
        rows: list[ScheduledInstallment] = []
        while remaining > ZERO and len(rows) < self._max_rows:
            cursor = next_cutoff(cursor)
            deduction = min(remaining, per_cutoff)
            remaining -= deduction
            rows.append(
                ScheduledInstallment(
                    sequence=len(rows) + 1,
                    cutoff_date=cursor,
                    deduction=deduction,
                    balance=max(ZERO, remaining),
                )
            )

        return InstallmentSchedule(
            total_cash_advance=total,
            per_cutoff_deduction=per_cutoff,
            rows=tuple(rows),
            remaining=remaining,
        )
