from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.core.enums import InstallmentStatus
from src.payroll_system.payroll_system.database.mysql_base import as_bool, db_cursor
from src.payroll_system.payroll_system.employees.model import ContributionSetting, CurrentAdjustments
from src.payroll_system.payroll_system.employees.mysql_employee_repository import MySQLEmployeeRepository
from src.payroll_system.payroll_system.loans.model import LoanInstallment
from src.payroll_system.payroll_system.loans.mysql_loan_repository import MySQLLoanRepository


class FakeCursor:
    def __init__(self, rows=(), fail_on=None):
        self.rows = list(rows)
        self.fail_on = fail_on
        self.executed = []
        self.closed = False

    def execute(self, sql, params=None):
        if self.fail_on and self.fail_on in sql:
            raise RuntimeError("boom")
        self.executed.append((" ".join(sql.split()), params))

    def executemany(self, sql, seq):
        if self.fail_on and self.fail_on in sql:
            raise RuntimeError("boom")
        self.executed.append((" ".join(sql.split()), list(seq)))

    def fetchall(self):
        return self.rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, cursor):
        self.connections = []
        self._cursor = cursor

    def connect(self):
        conn = FakeConnection(self._cursor)
        self.connections.append(conn)
        return conn


def _schedule():
    return [
        LoanInstallment("E1", date(2026, 1, 30), Decimal("2000.00"), Decimal("3000.00")),
        LoanInstallment("E1", date(2026, 2, 15), Decimal("2000.00"), Decimal("1000.00")),
        LoanInstallment("E1", date(2026, 2, 28), Decimal("1000.00"), Decimal("0.00")),
    ]


def test_replace_schedule_deletes_and_inserts_in_one_transaction():
    cur = FakeCursor()
    factory = FakeConnFactory(cur)

    count = MySQLLoanRepository(factory).replace_schedule(employee_id="E1", installments=_schedule())

    assert count == 3
    assert len(factory.connections) == 1
    conn = factory.connections[0]
    assert conn.commits == 1 and conn.rollbacks == 0 and conn.closed
    (delete_sql, delete_params), (insert_sql, insert_rows) = cur.executed
    assert delete_sql.startswith("DELETE FROM loan_schedules") and delete_params == ("E1",)
    assert insert_sql.startswith("INSERT INTO loan_schedules")
    assert insert_rows[0] == ("E1", "cashAdvance", date(2026, 1, 30), Decimal("2000.00"), Decimal("3000.00"), "pending")


def test_failed_insert_rolls_back_the_delete():
    cur = FakeCursor(fail_on="INSERT")
    factory = FakeConnFactory(cur)

    with pytest.raises(RuntimeError):
        MySQLLoanRepository(factory).replace_schedule(employee_id="E1", installments=_schedule())

    conn = factory.connections[0]
    assert conn.commits == 0
    assert conn.rollbacks == 1
    assert conn.closed and cur.closed


def test_list_pending_due_filters_status_period_and_employee():
    rows = [
        {
            "id": 7,
            "employee_id": "E1",
            "deduction_type": "cashAdvance",
            "cutoff_date": date(2026, 1, 15),
            "deduction_amount": "2000.00",
            "remaining_balance": "3000.00",
            "status": "pending",
        }
    ]
    cur = FakeCursor(rows)

    result = MySQLLoanRepository(FakeConnFactory(cur)).list_pending_due(
        start_date=date(2026, 1, 1), end_date=date(2026, 1, 15), employee_id="E1"
    )

    sql, params = cur.executed[0]
    assert "status=%s" in sql and "cutoff_date BETWEEN %s AND %s" in sql and "employee_id=%s" in sql
    assert params == ("pending", date(2026, 1, 1), date(2026, 1, 15), "E1")
    assert result == [
        LoanInstallment(
            employee_id="E1",
            cutoff_date=date(2026, 1, 15),
            deduction_amount=Decimal("2000.00"),
            remaining_balance=Decimal("3000.00"),
            status=InstallmentStatus.PENDING,
            deduction_type="cashAdvance",
            installment_id=7,
        )
    ]


def test_db_cursor_commits_once_on_success():
    cur = FakeCursor()
    factory = FakeConnFactory(cur)

    with db_cursor(factory) as (_, c):
        c.execute("SELECT 1")

    assert factory.connections[0].commits == 1


@pytest.mark.parametrize("value, expected", [(1, True), (0, False), (None, False), ("true", True), ("0", False)])
def test_as_bool(value, expected):
    assert as_bool(value) is expected


def test_update_payroll_settings_writes_one_row():
    cur = FakeCursor()
    factory = FakeConnFactory(cur)

    MySQLEmployeeRepository(factory).update_payroll_settings(
        "E1",
        sss=ContributionSetting(True, Decimal("500.00")),
        philhealth=ContributionSetting(False, Decimal("0.00")),
        pagibig=ContributionSetting(True, Decimal("100.00")),
        voluntary_deductions=Decimal("300.00"),
        adjustments=CurrentAdjustments(food=Decimal("150.00")),
    )

    sql, params = cur.executed[0]
    assert sql.startswith("UPDATE employees SET sss_enabled=%s")
    assert sql.endswith("WHERE employee_id=%s")
    assert params == (
        1,
        Decimal("500.00"),
        0,
        Decimal("0.00"),
        1,
        Decimal("100.00"),
        Decimal("300.00"),
        Decimal("150.00"),
        Decimal("0"),
        Decimal("0"),
        Decimal("0"),
        "E1",
    )
    assert factory.connections[0].commits == 1


def test_set_time_exempted():
    cur = FakeCursor()

    MySQLEmployeeRepository(FakeConnFactory(cur)).set_time_exempted("E1", True)

    assert cur.executed == [("UPDATE employees SET is_time_exempted=%s WHERE employee_id=%s", (1, "E1"))]
