from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .additions.mysql_addition_repository import MySQLAdditionRepository
from .additions.service import AdditionService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .common.datetime_utils import Clock, SystemClock
from .core.constants import MAX_INSTALLMENTS
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeePayrollSettingsService
from .loans.mysql_loan_repository import MySQLLoanRepository
from .loans.scheduler import InstallmentScheduler
from .loans.service import LoanScheduleService
from .payroll.mysql_area_config_repository import MySQLAreaConfigRepository
from .payroll.service import PayrollRunService
from .payroll.settings_service import AreaConfigService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    clock: Clock

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository
    additions_repo: MySQLAdditionRepository
    loans_repo: MySQLLoanRepository
    area_configs_repo: MySQLAreaConfigRepository

    payroll_service: PayrollRunService
    loan_service: LoanScheduleService
    addition_service: AdditionService
    area_config_service: AreaConfigService
    employee_settings_service: EmployeePayrollSettingsService


def build_container(*, db_config: dict, clock: Optional[Clock] = None, max_installments: Optional[int] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    clock = clock or SystemClock()

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    additions_repo = MySQLAdditionRepository(conn)
    loans_repo = MySQLLoanRepository(conn)
    area_configs_repo = MySQLAreaConfigRepository(conn)

    scheduler = InstallmentScheduler(clock, max_rows=max_installments or MAX_INSTALLMENTS)

    return Container(
        conn=conn,
        clock=clock,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        additions_repo=additions_repo,
        loans_repo=loans_repo,
        area_configs_repo=area_configs_repo,
        payroll_service=PayrollRunService(
            employees_repo,
            attendance_repo,
            additions_repo,
            loans_repo,
            area_configs_repo,
        ),
        loan_service=LoanScheduleService(loans_repo, clock=clock, scheduler=scheduler),
        addition_service=AdditionService(additions_repo, employees_repo),
        area_config_service=AreaConfigService(area_configs_repo, employees_repo),
        employee_settings_service=EmployeePayrollSettingsService(employees_repo),
    )
