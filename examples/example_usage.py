"""Example: run the payroll register for the current month (no UI).

Controllers and exporters stay thin; every payroll number comes from the
services built by the container.
"""

from datetime import date

from src.payroll_system.payroll_system.main import create_container
from src.payroll_system.payroll_system.payroll.periods import calendar_month_for


def main():
    container = create_container()
    start, end = calendar_month_for(date.today())
    register = container.payroll_service.run(start=start, end=end)
    print(register.to_frame()[["employee_id", "name", "days", "total_basic", "net_pay"]])
    print(register.totals)

    for row in container.loan_service.preview(5000, 2000):
        print(row.cutoff_date, row.deduction, row.balance, row.status.value)


if __name__ == "__main__":
    main()
