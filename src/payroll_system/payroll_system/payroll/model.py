from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from ..core.enums import PayBasis


@dataclass(frozen=True)
class PayrollResult:
    """Flat payroll row for one employee and one cutoff.

    Reports and exports read these numbers as-is; they never re-derive them.
    """

    employee_id: str
    name: str
    period_start: date
    period_end: date
    basis: PayBasis
    is_time_exempted: bool
    has_attendance: bool

    basic_salary: Decimal
    daily_rate: Decimal
    hourly_rate: Decimal

    days: int
    cutoff_days: int
    actual_worked: int
    day_offs: int
    billable_days: int
    missing_days: int

    total_basic: Decimal
    unclamped_basic: Decimal
    absence_deduction: Decimal

    overtime_pay: Decimal
    overtime_hours: Decimal
    allowance: Decimal
    total_additions: Decimal

    late_hours: Decimal
    undertime_hours: Decimal
    late_deduction: Decimal
    undertime_deduction: Decimal
    attendance_deduction: Decimal

    sss: Decimal
    philhealth: Decimal
    pagibig: Decimal
    mandatory: Decimal
    loan_total: Decimal
    fixed_voluntary: Decimal
    voluntary: Decimal
    total_deductions: Decimal

    unclamped_net_pay: Decimal
    net_pay: Decimal

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["basis"] = self.basis.value
        return data
