from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import LoanInstallment


class LoanRepository(Protocol):
    def list_pending_due(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[LoanInstallment]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[LoanInstallment]:
        raise NotImplementedError

    def replace_schedule(self, *, employee_id: str, installments: Sequence[LoanInstallment]) -> int:
        """Delete every stored row of the employee and insert ``installments``.

        Must run as one transaction so readers never see a partial schedule.
        """

        raise NotImplementedError
