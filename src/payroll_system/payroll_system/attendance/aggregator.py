from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from ..common.money import ZERO, money, to_decimal
from .model import AttendanceRecord


@dataclass(frozen=True)
class AttendanceSummary:
    late_hours: Decimal = ZERO
    undertime_hours: Decimal = ZERO
    late_deduction: Decimal = ZERO
    undertime_deduction: Decimal = ZERO
    total_deduction: Decimal = ZERO


class AttendanceAggregator:
    """Late and undertime penalties for one employee over one cutoff.

    Time-exempted employees never carry attendance penalties.
    """

    def aggregate(
        self,
        records: Iterable[AttendanceRecord],
        *,
        hourly_rate: Decimal,
        is_time_exempted: bool,
    ) -> AttendanceSummary:
        if is_time_exempted:
            return AttendanceSummary()

        late_hours = ZERO
        undertime_hours = ZERO
        for r in records:
            late_hours += to_decimal(r.late_hours)
            undertime_hours += to_decimal(r.undertime_hours)

        rate = to_decimal(hourly_rate)
        late_deduction = money(late_hours * rate)
        undertime_deduction = money(undertime_hours * rate)
        return AttendanceSummary(
            late_hours=late_hours,
            undertime_hours=undertime_hours,
            late_deduction=late_deduction,
            undertime_deduction=undertime_deduction,
            total_deduction=money(late_deduction + undertime_deduction),
        )
