from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from ..common.money import ZERO, money, to_decimal
from ..core.enums import Contribution, InstallmentStatus
from ..employees.model import EmployeeProfile
from ..loans.model import LoanInstallment
from .cutoff import CutoffCalendar


@dataclass(frozen=True)
class DeductionSummary:
    sss: Decimal = ZERO
    philhealth: Decimal = ZERO
    pagibig: Decimal = ZERO
    mandatory: Decimal = ZERO
    loan_total: Decimal = ZERO
    fixed_voluntary: Decimal = ZERO
    voluntary: Decimal = ZERO
    attendance: Decimal = ZERO
    total_deductions: Decimal = ZERO
    installments: tuple[LoanInstallment, ...] = ()


def is_due(installment: LoanInstallment, calendar: CutoffCalendar) -> bool:
    return installment.status == InstallmentStatus.PENDING and calendar.contains(installment.cutoff_date)


class DeductionAggregator:
    """Mandatory contributions, voluntary deductions and due loan installments."""

    def aggregate(
        self,
        employee: EmployeeProfile,
        *,
        attendance_deduction: Decimal,
        installments: Iterable[LoanInstallment],
        calendar: CutoffCalendar,
    ) -> DeductionSummary:
        sss = money(employee.contribution(Contribution.SSS).amount)
        philhealth = money(employee.contribution(Contribution.PHILHEALTH).amount)
        pagibig = money(employee.contribution(Contribution.PAGIBIG).amount)
        mandatory = money(sss + philhealth + pagibig)

        due = tuple(i for i in installments if is_due(i, calendar))
        loan_total = money(sum((to_decimal(i.deduction_amount) for i in due), ZERO))
        fixed_voluntary = money(employee.voluntary_deductions)
        voluntary = money(loan_total + fixed_voluntary)

        attendance = money(attendance_deduction)
        return DeductionSummary(
            sss=sss,
            philhealth=philhealth,
            pagibig=pagibig,
            mandatory=mandatory,
            loan_total=loan_total,
            fixed_voluntary=fixed_voluntary,
            voluntary=voluntary,
            attendance=attendance,
            total_deductions=money(attendance + mandatory + voluntary),
            installments=due,
        )
