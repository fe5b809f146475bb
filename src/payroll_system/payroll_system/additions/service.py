from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

from ..common.money import ZERO, money, to_decimal
from ..core.enums import AdditionStatus, AdditionType
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from ..payroll.rates import derive_rates
from .model import AdditionEntry
from .repository import AdditionRepository

logger = logging.getLogger(__name__)


class AdditionService:
    """Use case: record or remove an ad-hoc pay addition for an employee."""

    def __init__(self, additions: AdditionRepository, employees: EmployeeRepository):
        self._additions = additions
        self._employees = employees

    def add_entry(
        self,
        *,
        employee_id: str,
        type: AdditionType | str,
        amount: Any = None,
        ot_hours: Any = None,
        applied_date: Optional[date] = None,
        remarks: Optional[str] = None,
    ) -> int:
        employee = self._employees.get_by_employee_id(employee_id)
        if not employee:
            raise ValidationError(f"Unknown employee {employee_id!r}")
        try:
            kind = AdditionType(type)
        except ValueError:
            raise ValidationError(f"Unsupported addition type {type!r}") from None

        hours = ZERO
        if kind == AdditionType.OVERTIME:
            hours = to_decimal(ot_hours)
            if hours <= ZERO:
                raise ValidationError("Overtime needs a positive number of hours")
            value = money(hours * derive_rates(employee.basic_salary).hourly_rate)
        else:
            value = money(amount)
        if value <= ZERO:
            raise ValidationError("Addition amount must be positive")

        # Allowances recur every cutoff; everything else belongs to one day.
        is_recurring = kind == AdditionType.ALLOWANCE
        if not is_recurring and applied_date is None:
            raise ValidationError(f"{kind.value} entries need an applied date")

        entry = AdditionEntry(
            employee_id=employee_id,
            type=kind,
            amount=value,
            ot_hours=hours,
            is_recurring=is_recurring,
            applied_date=None if is_recurring else applied_date,
            status=AdditionStatus.APPROVED,
            remarks=remarks,
        )
        addition_id = self._additions.create(entry)
        logger.info("Recorded %s addition %s for %s (%s)", kind.value, addition_id, employee_id, value)
        return addition_id

    def remove_entry(self, addition_id: int) -> bool:
        removed = self._additions.delete(addition_id=int(addition_id))
        if not removed:
            logger.warning("Addition %s not found; nothing removed", addition_id)
        return removed
