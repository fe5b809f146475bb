from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.money import to_decimal
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_period(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT employee_id, work_date, status, late_hrs, undertime_hrs, time_in, time_out
                FROM attendance_logs
                WHERE {where}
                ORDER BY employee_id, work_date
                """,
                tuple(params),
            )
            return [
                AttendanceRecord(
                    employee_id=str(r["employee_id"]),
                    work_date=r["work_date"],
                    status=AttendanceStatus(r.get("status") or AttendanceStatus.PRESENT.value),
                    late_hours=to_decimal(r.get("late_hrs")),
                    undertime_hours=to_decimal(r.get("undertime_hrs")),
                    time_in=r.get("time_in"),
                    time_out=r.get("time_out"),
                )
                for r in fetchall(cur)
            ]
