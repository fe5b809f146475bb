from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.money import to_decimal
from ..core.enums import AdditionStatus, AdditionType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall
from .model import AdditionEntry
from .repository import AdditionRepository


class MySQLAdditionRepository(AdditionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_applicable(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AdditionEntry]:
        clauses = ["status=%s", "(is_recurring=1 OR applied_date BETWEEN %s AND %s)"]
        params: list[object] = [AdditionStatus.APPROVED.value, start_date, end_date]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, employee_id, type, amount, ot_hours, is_recurring, applied_date, status, remarks
                FROM payroll_additions
                WHERE {where}
                ORDER BY id
                """,
                tuple(params),
            )
            return [
                AdditionEntry(
                    addition_id=int(r["id"]),
                    employee_id=str(r["employee_id"]),
                    type=AdditionType(r["type"]),
                    amount=to_decimal(r.get("amount")),
                    ot_hours=to_decimal(r.get("ot_hours")),
                    is_recurring=as_bool(r.get("is_recurring")),
                    applied_date=r.get("applied_date"),
                    status=AdditionStatus(r["status"]),
                    remarks=r.get("remarks"),
                )
                for r in fetchall(cur)
            ]

    def create(self, entry: AdditionEntry) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payroll_additions
                    (employee_id, type, amount, ot_hours, is_recurring, applied_date, status, remarks)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    entry.employee_id,
                    entry.type.value,
                    entry.amount,
                    entry.ot_hours,
                    int(entry.is_recurring),
                    entry.applied_date,
                    entry.status.value,
                    entry.remarks,
                ),
            )
            return int(cur.lastrowid or 0)

    def delete(self, *, addition_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM payroll_additions WHERE id=%s", (int(addition_id),))
            return cur.rowcount > 0
