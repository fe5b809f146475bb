from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

from ..common.datetime_utils import Clock, SystemClock
from ..core.constants import CASH_ADVANCE
from .model import InstallmentSchedule, InstallmentView, LoanInstallment
from .repository import LoanRepository
from .scheduler import InstallmentScheduler, derive_status

logger = logging.getLogger(__name__)


class LoanScheduleService:
    """Use case: record a cash advance as a schedule of cutoff deductions.

    Saving a new schedule replaces the employee's whole stored schedule;
    rows of the previous schedule (paid or not) are dropped.
    """

    def __init__(
        self,
        loans: LoanRepository,
        *,
        clock: Optional[Clock] = None,
        scheduler: Optional[InstallmentScheduler] = None,
    ):
        self._loans = loans
        self._clock = clock or SystemClock()
        self._scheduler = scheduler or InstallmentScheduler(self._clock)

    def preview(
        self,
        total_cash_advance: Any,
        per_cutoff_deduction: Any,
        *,
        start_reference_date: Optional[date] = None,
    ) -> list[InstallmentView]:
        schedule = self._scheduler.generate(
            total_cash_advance,
            per_cutoff_deduction,
            start_reference_date=start_reference_date,
        )
        today = self._clock.today()
        return [
            InstallmentView(
                cutoff_date=r.cutoff_date,
                deduction=r.deduction,
                balance=r.balance,
                status=derive_status(r.cutoff_date, today),
            )
            for r in schedule.rows
        ]

    def record_cash_advance(
        self,
        employee_id: str,
        total_cash_advance: Any,
        per_cutoff_deduction: Any,
        *,
        start_reference_date: Optional[date] = None,
        deduction_type: str = CASH_ADVANCE,
    ) -> InstallmentSchedule:
        schedule = self._scheduler.generate(
            total_cash_advance,
            per_cutoff_deduction,
            start_reference_date=start_reference_date,
        )
        if not schedule.rows:
            logger.warning(
                "Cash advance for %s not scheduled (total=%s, per cutoff=%s); stored schedule kept",
                employee_id,
                schedule.total_cash_advance,
                schedule.per_cutoff_deduction,
            )
            return schedule
        if not schedule.is_complete:
            logger.warning(
                "Cash advance for %s truncated after %d installments; %s left unscheduled",
                employee_id,
                len(schedule.rows),
                schedule.remaining,
            )

        today = self._clock.today()
        installments = [
            LoanInstallment(
                employee_id=employee_id,
                cutoff_date=r.cutoff_date,
                deduction_amount=r.deduction,
                remaining_balance=r.balance,
                status=derive_status(r.cutoff_date, today),
                deduction_type=deduction_type,
            )
            for r in schedule.rows
        ]
        count = self._loans.replace_schedule(employee_id=employee_id, installments=installments)
        logger.info("Replaced loan schedule of %s with %d installments", employee_id, count)
        return schedule

    def list_schedule(self, employee_id: str) -> Sequence[InstallmentView]:
        today = self._clock.today()
        rows = sorted(self._loans.list_for_employee(employee_id), key=lambda i: i.cutoff_date)
        return [
            InstallmentView(
                cutoff_date=i.cutoff_date,
                deduction=i.deduction_amount,
                balance=i.remaining_balance,
                status=derive_status(i.cutoff_date, today),
            )
            for i in rows
        ]
