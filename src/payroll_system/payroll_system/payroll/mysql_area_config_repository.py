from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall
from .area_config import AreaPayrollConfig
from .repository import AreaConfigRepository


class MySQLAreaConfigRepository(AreaConfigRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AreaPayrollConfig]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT area, is_fixed, is_daily, is_monthly, is_semi FROM payroll_configs ORDER BY area")
            return [
                AreaPayrollConfig(
                    area=r["area"],
                    is_fixed=as_bool(r.get("is_fixed")),
                    is_daily=as_bool(r.get("is_daily")),
                    is_monthly=as_bool(r.get("is_monthly")),
                    is_semi=as_bool(r.get("is_semi")),
                )
                for r in fetchall(cur)
            ]

    def upsert_many(self, configs: Sequence[AreaPayrollConfig]) -> int:
        if not configs:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO payroll_configs (area, is_fixed, is_daily, is_monthly, is_semi)
                VALUES (%s, %s, %s, %s, %s)
                ON DUPLICATE KEY UPDATE
                    is_fixed=VALUES(is_fixed), is_daily=VALUES(is_daily),
                    is_monthly=VALUES(is_monthly), is_semi=VALUES(is_semi)
                """,
                [(c.area, int(c.is_fixed), int(c.is_daily), int(c.is_monthly), int(c.is_semi)) for c in configs],
            )
            return len(configs)
