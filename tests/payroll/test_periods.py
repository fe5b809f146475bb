from datetime import date

from src.payroll_system.payroll_system.payroll.periods import attendance_cutoff_for, calendar_month_for


def test_middle_of_month_window():
    assert attendance_cutoff_for(date(2026, 3, 15)) == (date(2026, 3, 11), date(2026, 3, 25))
    assert attendance_cutoff_for(date(2026, 3, 11)) == (date(2026, 3, 11), date(2026, 3, 25))


def test_end_of_month_window_runs_into_next_month():
    assert attendance_cutoff_for(date(2026, 3, 28)) == (date(2026, 3, 26), date(2026, 4, 10))
    assert attendance_cutoff_for(date(2026, 12, 30)) == (date(2026, 12, 26), date(2027, 1, 10))


def test_start_of_month_window_begins_in_previous_month():
    assert attendance_cutoff_for(date(2026, 3, 5)) == (date(2026, 2, 26), date(2026, 3, 10))
    assert attendance_cutoff_for(date(2026, 1, 2)) == (date(2025, 12, 26), date(2026, 1, 10))


def test_calendar_month_handles_leap_february():
    assert calendar_month_for(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))
    assert calendar_month_for(date(2026, 2, 10)) == (date(2026, 2, 1), date(2026, 2, 28))
