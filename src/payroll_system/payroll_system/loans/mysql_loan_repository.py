from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..common.money import to_decimal
from ..core.enums import InstallmentStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import LoanInstallment
from .repository import LoanRepository

_SELECT = """
    SELECT id, employee_id, deduction_type, cutoff_date, deduction_amount, remaining_balance, status
    FROM loan_schedules
"""


def _to_installment(r: Dict[str, Any]) -> LoanInstallment:
    return LoanInstallment(
        installment_id=int(r["id"]),
        employee_id=str(r["employee_id"]),
        deduction_type=r.get("deduction_type") or "",
        cutoff_date=r["cutoff_date"],
        deduction_amount=to_decimal(r.get("deduction_amount")),
        remaining_balance=to_decimal(r.get("remaining_balance")),
        status=InstallmentStatus(r.get("status") or InstallmentStatus.PENDING.value),
    )


class MySQLLoanRepository(LoanRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_pending_due(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[LoanInstallment]:
        clauses = ["status=%s", "cutoff_date BETWEEN %s AND %s"]
        params: list[object] = [InstallmentStatus.PENDING.value, start_date, end_date]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE {where} ORDER BY employee_id, cutoff_date", tuple(params))
            return [_to_installment(r) for r in fetchall(cur)]

    def list_for_employee(self, employee_id: str) -> Sequence[LoanInstallment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE employee_id=%s ORDER BY cutoff_date", (employee_id,))
            return [_to_installment(r) for r in fetchall(cur)]

    def replace_schedule(self, *, employee_id: str, installments: Sequence[LoanInstallment]) -> int:
        # Delete and insert share one connection; db_cursor commits once at the end.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM loan_schedules WHERE employee_id=%s", (employee_id,))
            if installments:
                cur.executemany(
                    """
                    INSERT INTO loan_schedules
                        (employee_id, deduction_type, cutoff_date, deduction_amount, remaining_balance, status)
                    VALUES (%s, %s, %s, %s, %s, %s)
                    """,
                    [
                        (
                            employee_id,
                            i.deduction_type,
                            i.cutoff_date,
                            i.deduction_amount,
                            i.remaining_balance,
                            i.status.value,
                        )
                        for i in installments
                    ],
                )
            return len(installments)
