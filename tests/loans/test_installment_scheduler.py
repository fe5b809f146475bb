from datetime import date, datetime
from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.common.datetime_utils import FixedClock
from src.payroll_system.payroll_system.core.enums import InstallmentStatus
from src.payroll_system.payroll_system.loans.scheduler import InstallmentScheduler, derive_status, next_cutoff


def _scheduler(today=date(2026, 3, 10)):
    return InstallmentScheduler(FixedClock(today))


def test_five_thousand_at_two_thousand_per_cutoff():
    schedule = _scheduler().generate(5000, 2000, start_reference_date=date(2026, 3, 10))

    assert [(r.cutoff_date, r.deduction, r.balance) for r in schedule.rows] == [
        (date(2026, 3, 30), Decimal("2000.00"), Decimal("3000.00")),
        (date(2026, 4, 15), Decimal("2000.00"), Decimal("1000.00")),
        (date(2026, 4, 30), Decimal("1000.00"), Decimal("0.00")),
    ]
    assert [r.sequence for r in schedule.rows] == [1, 2, 3]
    assert schedule.is_complete
    assert schedule.remaining == 0


def test_start_defaults_to_clock_today():
    schedule = _scheduler(date(2026, 3, 10)).generate(5000, 2000)
    assert schedule.rows[0].cutoff_date == date(2026, 3, 30)


@pytest.mark.parametrize(
    "cursor,expected",
    [
        (date(2026, 3, 15), date(2026, 3, 30)),
        (date(2026, 3, 16), date(2026, 4, 15)),
        (date(2026, 3, 30), date(2026, 4, 15)),
        (date(2026, 1, 31), date(2026, 2, 15)),
        (date(2026, 12, 20), date(2027, 1, 15)),
    ],
)
def test_next_cutoff(cursor, expected):
    assert next_cutoff(cursor) == expected


def test_day_thirty_clamped_to_end_of_february():
    assert next_cutoff(date(2026, 2, 5)) == date(2026, 2, 28)
    assert next_cutoff(date(2028, 2, 3)) == date(2028, 2, 29)

    schedule = _scheduler().generate(3000, 1000, start_reference_date=date(2026, 2, 5))
    assert [r.cutoff_date for r in schedule.rows] == [date(2026, 2, 28), date(2026, 3, 15), date(2026, 3, 30)]


@pytest.mark.parametrize("total,per_cutoff", [(0, 1000), (-500, 1000), (1000, 0), (1000, -1), (None, 1000), (1000, None)])
def test_non_positive_input_gives_empty_schedule(total, per_cutoff):
    schedule = _scheduler().generate(total, per_cutoff)
    assert schedule.rows == ()


def test_unschedulable_advance_is_reported_as_incomplete():
    schedule = _scheduler().generate(1000, 0)
    assert schedule.remaining == Decimal("1000.00")
    assert not schedule.is_complete


def test_runaway_schedule_is_capped_and_flagged():
    schedule = _scheduler().generate(100000, 1000, start_reference_date=date(2026, 1, 1))

    assert len(schedule.rows) == 24
    assert schedule.total_scheduled == Decimal("24000.00")
    assert schedule.remaining == Decimal("76000.00")
    assert not schedule.is_complete
    assert schedule.rows[-1].cutoff_date == date(2027, 1, 15)


def test_custom_row_cap():
    schedule = InstallmentScheduler(FixedClock(date(2026, 1, 1)), max_rows=2).generate(5000, 1000)
    assert len(schedule.rows) == 2
    assert schedule.remaining == Decimal("3000.00")


@pytest.mark.parametrize(
    "total,per_cutoff",
    [("5000", "2000"), ("1234.56", "100"), ("999.99", "1000"), ("12000", "500"), ("0.05", "0.01")],
)
def test_deductions_plus_remaining_equal_the_advance(total, per_cutoff):
    schedule = _scheduler().generate(total, per_cutoff, start_reference_date=date(2026, 1, 31))

    assert schedule.is_complete
    assert schedule.total_scheduled + schedule.remaining == Decimal(total)
    assert schedule.rows[-1].balance == 0


def test_dates_increase_and_balances_never_rise():
    schedule = _scheduler().generate(11500, 500, start_reference_date=date(2026, 1, 31))
    rows = schedule.rows

    assert len(rows) == 23
    for prev, cur in zip(rows, rows[1:]):
        assert cur.cutoff_date > prev.cutoff_date
        assert cur.balance <= prev.balance


def test_derive_status_compares_whole_days():
    assert derive_status(date(2026, 3, 30), date(2026, 3, 30)) == InstallmentStatus.PAID
    assert derive_status(date(2026, 3, 29), date(2026, 3, 30)) == InstallmentStatus.PAID
    assert derive_status(date(2026, 3, 31), date(2026, 3, 30)) == InstallmentStatus.PENDING
    assert derive_status(datetime(2026, 3, 30, 23, 59), datetime(2026, 3, 30, 0, 1)) == InstallmentStatus.PAID
    assert derive_status("2026-04-15", date(2026, 3, 30)) == InstallmentStatus.PENDING
