from __future__ import annotations

import logging
from dataclasses import fields, replace
from decimal import Decimal
from typing import Any, Optional

from ..common.money import ZERO, money
from ..core.enums import Contribution
from ..core.exceptions import ValidationError
from .model import ContributionSetting, CurrentAdjustments, EmployeeProfile
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def _amount(value: Any, label: str) -> Decimal:
    amount = money(value)
    if amount < ZERO:
        raise ValidationError(f"{label} cannot be negative")
    return amount


class EmployeePayrollSettingsService:
    """Use case: administrators edit the payroll-relevant part of a profile.

    Arguments left as ``None`` keep the stored value.
    """

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def _require(self, employee_id: str) -> EmployeeProfile:
        employee = self._employees.get_by_employee_id(employee_id)
        if not employee:
            raise ValidationError(f"Unknown employee {employee_id!r}")
        return employee

    @staticmethod
    def _contribution(kind: Contribution, setting: Optional[ContributionSetting], current: ContributionSetting) -> ContributionSetting:
        if setting is None:
            return current
        return ContributionSetting(
            enabled=bool(setting.enabled),
            fixed_amount=_amount(setting.fixed_amount, f"{kind.value} amount"),
        )

    def update_payroll_settings(
        self,
        employee_id: str,
        *,
        sss: Optional[ContributionSetting] = None,
        philhealth: Optional[ContributionSetting] = None,
        pagibig: Optional[ContributionSetting] = None,
        voluntary_deductions: Any = None,
        adjustments: Optional[CurrentAdjustments] = None,
    ) -> EmployeeProfile:
        employee = self._require(employee_id)

        if adjustments is not None:
            adjustments = CurrentAdjustments(
                **{f.name: _amount(getattr(adjustments, f.name), f"{f.name} adjustment") for f in fields(CurrentAdjustments)}
            )
        updated = replace(
            employee,
            sss=self._contribution(Contribution.SSS, sss, employee.sss),
            philhealth=self._contribution(Contribution.PHILHEALTH, philhealth, employee.philhealth),
            pagibig=self._contribution(Contribution.PAGIBIG, pagibig, employee.pagibig),
            voluntary_deductions=(
                employee.voluntary_deductions
                if voluntary_deductions is None
                else _amount(voluntary_deductions, "Voluntary deductions")
            ),
            adjustments=adjustments or employee.adjustments,
        )

        self._employees.update_payroll_settings(
            employee_id,
            sss=updated.sss,
            philhealth=updated.philhealth,
            pagibig=updated.pagibig,
            voluntary_deductions=updated.voluntary_deductions,
            adjustments=updated.adjustments,
        )
        logger.info("Updated payroll settings of %s", employee_id)
        return updated

    def set_time_exempted(self, employee_id: str, is_time_exempted: bool) -> EmployeeProfile:
        employee = self._require(employee_id)
        self._employees.set_time_exempted(employee_id, bool(is_time_exempted))
        logger.info("Time exemption of %s set to %s", employee_id, bool(is_time_exempted))
        return replace(employee, is_time_exempted=bool(is_time_exempted))
