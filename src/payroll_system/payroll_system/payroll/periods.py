"""Cutoff period conventions used by callers.

The payroll engine treats period boundaries as opaque input; these helpers
only compute the ranges the admin screens offer as defaults.
"""
from __future__ import annotations

from calendar import monthrange
from datetime import date


def _shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def attendance_cutoff_for(day: date) -> tuple[date, date]:
    """Semi-monthly attendance window containing ``day``: 11-25 or 26-10."""
    if 11 <= day.day <= 25:
        return date(day.year, day.month, 11), date(day.year, day.month, 25)
    if day.day > 25:
        year, month = _shift_month(day.year, day.month, 1)
        return date(day.year, day.month, 26), date(year, month, 10)
    year, month = _shift_month(day.year, day.month, -1)
    return date(year, month, 26), date(day.year, day.month, 10)


def calendar_month_for(day: date) -> tuple[date, date]:
    """First to last day of the month containing ``day``."""
    return date(day.year, day.month, 1), date(day.year, day.month, monthrange(day.year, day.month)[1])
