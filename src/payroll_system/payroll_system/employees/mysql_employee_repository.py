from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional, Sequence

from ..common.money import to_decimal
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, fetchone
from .model import ContributionSetting, CurrentAdjustments, EmployeeProfile
from .repository import EmployeeRepository

_COLUMNS = """
    employee_id, name, designation, area, basic_salary, day_off, is_time_exempted,
    sss_enabled, sss_fixed_amount, phic_enabled, phic_fixed_amount, hdmf_enabled, hdmf_fixed_amount,
    adj_food, adj_transport, adj_restday, adj_others, voluntary_deductions
"""


def _to_profile(r: Dict[str, Any]) -> EmployeeProfile:
    return EmployeeProfile(
        employee_id=str(r["employee_id"]),
        name=r.get("name") or "",
        designation=r.get("designation"),
        area=r.get("area"),
        basic_salary=to_decimal(r.get("basic_salary")),
        day_off=r.get("day_off"),
        is_time_exempted=as_bool(r.get("is_time_exempted")),
        sss=ContributionSetting(as_bool(r.get("sss_enabled")), to_decimal(r.get("sss_fixed_amount"))),
        philhealth=ContributionSetting(as_bool(r.get("phic_enabled")), to_decimal(r.get("phic_fixed_amount"))),
        pagibig=ContributionSetting(as_bool(r.get("hdmf_enabled")), to_decimal(r.get("hdmf_fixed_amount"))),
        adjustments=CurrentAdjustments(
            food=to_decimal(r.get("adj_food")),
            transport=to_decimal(r.get("adj_transport")),
            restday=to_decimal(r.get("adj_restday")),
            others=to_decimal(r.get("adj_others")),
        ),
        voluntary_deductions=to_decimal(r.get("voluntary_deductions")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[EmployeeProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY name ASC")
            return [_to_profile(r) for r in fetchall(cur)]

    def get_by_employee_id(self, employee_id: str) -> Optional[EmployeeProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            r = fetchone(cur)
            return _to_profile(r) if r else None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET sss_enabled=%s, sss_fixed_amount=%s,
                    phic_enabled=%s, phic_fixed_amount=%s,
                    hdmf_enabled=%s, hdmf_fixed_amount=%s,
                    voluntary_deductions=%s,
                    adj_food=%s, adj_transport=%s, adj_restday=%s, adj_others=%s
                WHERE employee_id=%s
                """,
                (
                    int(bool(sss.enabled)),
                    sss.fixed_amount,
                    int(bool(philhealth.enabled)),
                    philhealth.fixed_amount,
                    int(bool(pagibig.enabled)),
                    pagibig.fixed_amount,
                    voluntary_deductions,
                    adjustments.food,
                    adjustments.transport,
                    adjustments.restday,
                    adjustments.others,
                    employee_id,
                ),
            )

    def set_time_exempted(self, employee_id: str, is_time_exempted: bool) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET is_time_exempted=%s WHERE employee_id=%s",
                (int(bool(is_time_exempted)), employee_id),
            )
