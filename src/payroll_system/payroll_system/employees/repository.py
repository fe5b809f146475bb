from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import ContributionSetting, CurrentAdjustments, EmployeeProfile


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[EmployeeProfile]:
        """All employees ordered by name."""

        raise NotImplementedError

    def get_by_employee_id(self, employee_id: str) -> Optional[EmployeeProfile]:
        raise NotImplementedError

    def update_payroll_settings(
        self,
        employee_id: str,
        *,
        sss: ContributionSetting,
        philhealth: ContributionSetting,
        pagibig: ContributionSetting,
        voluntary_deductions: Decimal,
        adjustments: CurrentAdjustments,
    ) -> None:
        """Overwrite contribution toggles/amounts, voluntary deductions and adjustments."""

        raise NotImplementedError

    def set_time_exempted(self, employee_id: str, is_time_exempted: bool) -> None:
        raise NotImplementedError
