from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status written by the time-clock terminal for one attendance day."""

    PRESENT = "Present"
    LATE = "Late"
    ABSENT = "Absent"


class AdditionType(str, Enum):
    ALLOWANCE = "Allowance"
    RESTDAY = "Restday"
    OVERTIME = "Overtime"


class AdditionStatus(str, Enum):
    """Only approved additions participate in payroll computation."""

    PENDING = "pending"
    APPROVED = "Approved"


class InstallmentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


class PayBasis(str, Enum):
    """Gross pay strategy applied to an employee."""

    EXEMPTED = "exempted"
    FIXED = "fixed"
    DAILY = "daily"


class Contribution(str, Enum):
    """Mandatory government contributions with a flat configured amount."""

    SSS = "SSS"
    PHILHEALTH = "PhilHealth"
    PAGIBIG = "Pag-IBIG"
