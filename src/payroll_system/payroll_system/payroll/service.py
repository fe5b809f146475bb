from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

import pandas as pd

from ..additions.repository import AdditionRepository
from ..attendance.repository import AttendanceRepository
from ..common.money import ZERO
from ..employees.repository import EmployeeRepository
from ..loans.repository import LoanRepository
from .area_config import AreaConfigs
from .cutoff import CutoffCalendar
from .engine import PayrollEngine
from .model import PayrollResult
from .repository import AreaConfigRepository

logger = logging.getLogger(__name__)

TOTAL_COLUMNS = (
    "total_basic",
    "total_additions",
    "attendance_deduction",
    "mandatory",
    "voluntary",
    "total_deductions",
    "net_pay",
)


@dataclass(frozen=True)
class PayrollRegister:
    period_start: date
    period_end: date
    rows: list[PayrollResult]
    totals: dict[str, Decimal] = field(default_factory=dict)

    def to_frame(self) -> pd.DataFrame:
        """Tabular view for reports and exports (one row per employee)."""
        return pd.DataFrame([r.as_dict() for r in self.rows])


def _group(items, key):
    grouped = defaultdict(list)
    for item in items:
        grouped[key(item)].append(item)
    return grouped


class PayrollRunService:
    """Use case: compute the payroll register of one cutoff period."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        additions: AdditionRepository,
        loans: LoanRepository,
        area_configs: AreaConfigRepository,
        *,
        engine: Optional[PayrollEngine] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._additions = additions
        self._loans = loans
        self._area_configs = area_configs
        self._engine = engine or PayrollEngine()

    def run(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[str] = None,
        search: Optional[str] = None,
    ) -> PayrollRegister:
        calendar = CutoffCalendar(start, end)

        employees = list(self._employees.list_all())
        if employee_id is not None:
            employees = [e for e in employees if e.employee_id == employee_id]
        if search:
            needle = search.strip().lower()
            employees = [e for e in employees if needle in (e.name or "").lower() or needle in e.employee_id.lower()]

        logs = _group(
            self._attendance.list_for_period(start_date=start, end_date=end, employee_id=employee_id),
            lambda r: r.employee_id,
        )
        adds = _group(
            self._additions.list_applicable(start_date=start, end_date=end, employee_id=employee_id),
            lambda a: a.employee_id,
        )
        loans = _group(
            self._loans.list_pending_due(start_date=start, end_date=end, employee_id=employee_id),
            lambda i: i.employee_id,
        )
        configs = AreaConfigs(self._area_configs.list_all())

        rows = [
            self._engine.compute_for_calendar(
                emp,
                calendar=calendar,
                attendance=logs.get(emp.employee_id, ()),
                additions=adds.get(emp.employee_id, ()),
                installments=loans.get(emp.employee_id, ()),
                area_configs=configs,
            )
            for emp in employees
        ]

        totals = {col: sum((getattr(r, col) for r in rows), ZERO) for col in TOTAL_COLUMNS}
        logger.info(
            "Payroll %s..%s: %d employees, net pay total %s",
            start.isoformat(),
            end.isoformat(),
            len(rows),
            totals["net_pay"],
        )
        return PayrollRegister(period_start=start, period_end=end, rows=rows, totals=totals)
