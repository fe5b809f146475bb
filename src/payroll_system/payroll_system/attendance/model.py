from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..common.money import ZERO
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance day of one employee.

    Late/undertime hours are written by the terminal at clock-in/clock-out.
    """

    employee_id: str
    work_date: date
    status: AttendanceStatus = AttendanceStatus.PRESENT
    late_hours: Decimal = ZERO
    undertime_hours: Decimal = ZERO
    time_in: Optional[datetime] = None
    time_out: Optional[datetime] = None

    @property
    def is_attended(self) -> bool:
        return self.status != AttendanceStatus.ABSENT
