from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from ..common.money import ZERO, to_decimal
from ..core.enums import Contribution


@dataclass(frozen=True)
class ContributionSetting:
    """One mandatory contribution: toggled on/off with a flat amount."""

    enabled: bool = False
    fixed_amount: Decimal = ZERO

    @property
    def amount(self) -> Decimal:
        return to_decimal(self.fixed_amount) if self.enabled else ZERO


@dataclass(frozen=True)
class CurrentAdjustments:
    """Free-form amounts kept on the profile by administrators.

    Informational only: payroll uses approved additions, not these fields.
    """

    food: Decimal = ZERO
    transport: Decimal = ZERO
    restday: Decimal = ZERO
    others: Decimal = ZERO


@dataclass(frozen=True)
class EmployeeProfile:
    """Domain entity: static payroll profile of one employee."""

    employee_id: str
    name: str
    basic_salary: Decimal = ZERO
    day_off: Optional[str] = None
    is_time_exempted: bool = False
    area: Optional[str] = None
    designation: Optional[str] = None
    sss: ContributionSetting = field(default_factory=ContributionSetting)
    philhealth: ContributionSetting = field(default_factory=ContributionSetting)
    pagibig: ContributionSetting = field(default_factory=ContributionSetting)
    adjustments: CurrentAdjustments = field(default_factory=CurrentAdjustments)
    voluntary_deductions: Decimal = ZERO

    def contribution(self, kind: Contribution) -> ContributionSetting:
        return {
            Contribution.SSS: self.sss,
            Contribution.PHILHEALTH: self.philhealth,
            Contribution.PAGIBIG: self.pagibig,
        }[kind]
