from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, Optional

from ..common.money import ZERO, money, to_decimal
from ..core.enums import AdditionStatus
from .model import AdditionEntry

if TYPE_CHECKING:
    from ..payroll.cutoff import CutoffCalendar


@dataclass(frozen=True)
class AdditionsSummary:
    overtime_pay: Decimal = ZERO
    overtime_hours: Decimal = ZERO
    fixed_additions: Decimal = ZERO
    total_additions: Decimal = ZERO


def is_applicable(entry: AdditionEntry, calendar: "CutoffCalendar") -> bool:
    """Approved, and either recurring or applied inside the period."""
    if entry.status != AdditionStatus.APPROVED:
        return False
    return entry.is_recurring or calendar.contains(entry.applied_date)


class AdditionsAggregator:
    def aggregate(
        self,
        entries: Iterable[AdditionEntry],
        *,
        hourly_rate: Decimal,
        calendar: Optional["CutoffCalendar"] = None,
    ) -> AdditionsSummary:
        rate = to_decimal(hourly_rate)
        overtime_pay = ZERO
        overtime_hours = ZERO
        fixed_additions = ZERO

        for entry in entries:
            if calendar is not None and not is_applicable(entry, calendar):
                continue
            if entry.is_overtime:
                hours = to_decimal(entry.ot_hours)
                # Overtime is re-priced at the current rate; the stored amount is display only.
                overtime_pay += money(hours * rate)
                overtime_hours += hours
            else:
                fixed_additions += to_decimal(entry.amount)

        return AdditionsSummary(
            overtime_pay=money(overtime_pay),
            overtime_hours=overtime_hours,
            fixed_additions=money(fixed_additions),
            total_additions=money(overtime_pay + fixed_additions),
        )
