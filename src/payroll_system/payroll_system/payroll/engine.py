from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from ..additions.aggregator import AdditionsAggregator
from ..additions.model import AdditionEntry
from ..attendance.aggregator import AttendanceAggregator
from ..attendance.model import AttendanceRecord
from ..employees.model import EmployeeProfile
from ..loans.model import LoanInstallment
from .area_config import AreaConfigs
from .calculator.base import GrossPayInput
from .calculator.factory import GrossPayCalculator
from .cutoff import CutoffCalendar, billable_days
from .deductions import DeductionAggregator
from .model import PayrollResult
from .net_pay import NetPayComposer
from .rates import derive_rates

logger = logging.getLogger(__name__)


@dataclass
class PayrollEngine:
    """Computes one employee's payroll row from already-fetched inputs.

    Pure and synchronous: no storage access, no clock. Rows belonging to
    another employee or dated outside the cutoff are ignored.
    """

    attendance: AttendanceAggregator = field(default_factory=AttendanceAggregator)
    additions: AdditionsAggregator = field(default_factory=AdditionsAggregator)
    gross_pay: GrossPayCalculator = field(default_factory=GrossPayCalculator)
    deductions: DeductionAggregator = field(default_factory=DeductionAggregator)
    net_pay: NetPayComposer = field(default_factory=NetPayComposer)

    def compute(
        self,
        employee: EmployeeProfile,
        *,
        period_start: date,
        period_end: date,
        attendance: Iterable[AttendanceRecord] = (),
        additions: Iterable[AdditionEntry] = (),
        installments: Iterable[LoanInstallment] = (),
        area_configs: Optional[AreaConfigs] = None,
    ) -> PayrollResult:
        calendar = CutoffCalendar(period_start, period_end)
        return self.compute_for_calendar(
            employee,
            calendar=calendar,
            attendance=attendance,
            additions=additions,
            installments=installments,
            area_configs=area_configs,
        )

    def compute_for_calendar(
        self,
        employee: EmployeeProfile,
        *,
        calendar: CutoffCalendar,
        attendance: Iterable[AttendanceRecord] = (),
        additions: Iterable[AdditionEntry] = (),
        installments: Iterable[LoanInstallment] = (),
        area_configs: Optional[AreaConfigs] = None,
    ) -> PayrollResult:
        emp_id = employee.employee_id
        logs = [r for r in attendance if r.employee_id == emp_id and calendar.contains(r.work_date)]
        entries = [a for a in additions if a.employee_id == emp_id]
        loans = [i for i in installments if i.employee_id == emp_id]

        rates = derive_rates(employee.basic_salary)
        cutoff_days = calendar.total_days()
        attended = calendar.count_attended_dates(logs)
        day_offs = calendar.count_weekday(employee.day_off)
        billable = billable_days(attended, day_offs)

        area_config = (area_configs or AreaConfigs()).for_area(employee.area)
        gross = self.gross_pay.calculate(
            GrossPayInput(
                basic_salary=rates.basic_salary,
                daily_rate=rates.daily_rate,
                cutoff_total_days=cutoff_days,
                billable_days=billable,
            ),
            is_time_exempted=employee.is_time_exempted,
            area_config=area_config,
        )

        att = self.attendance.aggregate(
            logs,
            hourly_rate=rates.hourly_rate,
            is_time_exempted=employee.is_time_exempted,
        )
        adds = self.additions.aggregate(entries, hourly_rate=rates.hourly_rate, calendar=calendar)
        ded = self.deductions.aggregate(
            employee,
            attendance_deduction=att.total_deduction,
            installments=loans,
            calendar=calendar,
        )
        net = self.net_pay.compose(
            gross=gross.gross,
            total_additions=adds.total_additions,
            total_deductions=ded.total_deductions,
        )
        if net.was_clamped:
            logger.debug("Net pay of %s clamped to 0 (unclamped %s) for %r", emp_id, net.unclamped, calendar)

        return PayrollResult(
            employee_id=emp_id,
            name=employee.name,
            period_start=calendar.period_start,
            period_end=calendar.period_end,
            basis=gross.basis,
            is_time_exempted=employee.is_time_exempted,
            has_attendance=attended > 0,
            basic_salary=rates.basic_salary,
            daily_rate=rates.daily_rate,
            hourly_rate=rates.hourly_rate,
            days=gross.days,
            cutoff_days=cutoff_days,
            actual_worked=attended,
            day_offs=day_offs,
            billable_days=billable,
            missing_days=gross.missing_days,
            total_basic=gross.gross,
            unclamped_basic=gross.unclamped_gross,
            absence_deduction=gross.absence_deduction,
            overtime_pay=adds.overtime_pay,
            overtime_hours=adds.overtime_hours,
            allowance=adds.fixed_additions,
            total_additions=adds.total_additions,
            late_hours=att.late_hours,
            undertime_hours=att.undertime_hours,
            late_deduction=att.late_deduction,
            undertime_deduction=att.undertime_deduction,
            attendance_deduction=att.total_deduction,
            sss=ded.sss,
            philhealth=ded.philhealth,
            pagibig=ded.pagibig,
            mandatory=ded.mandatory,
            loan_total=ded.loan_total,
            fixed_voluntary=ded.fixed_voluntary,
            voluntary=ded.voluntary,
            total_deductions=ded.total_deductions,
            unclamped_net_pay=net.unclamped,
            net_pay=net.net_pay,
        )
