from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Iterator, Optional

from ..attendance.model import AttendanceRecord
from ..core.exceptions import InvalidPeriodError

# Monday == 0, as date.weekday() counts.
WEEKDAY_CODES = {
    "MON": 0,
    "TUE": 1,
    "WED": 2,
    "THU": 3,
    "FRI": 4,
    "SAT": 5,
    "SUN": 6,
}
WEEKDAY_NAMES = {
    "MONDAY": 0,
    "TUESDAY": 1,
    "WEDNESDAY": 2,
    "THURSDAY": 3,
    "FRIDAY": 4,
    "SATURDAY": 5,
    "SUNDAY": 6,
}
NO_SCHEDULE = frozenset({"", "NONE", "N/A", "NO SCHEDULE", "NO_SCHEDULE"})


def weekday_index(day_off_code: Optional[str]) -> Optional[int]:
    """Resolve a 3-letter code (or full English name) to a weekday index."""
    if day_off_code is None:
        return None
    key = str(day_off_code).strip().upper()
    if key in NO_SCHEDULE:
        return None
    if key in WEEKDAY_CODES:
        return WEEKDAY_CODES[key]
    return WEEKDAY_NAMES.get(key)


class CutoffCalendar:
    """Inclusive [period_start, period_end] payroll window."""

    def __init__(self, period_start: date, period_end: date):
        if period_end < period_start:
            raise InvalidPeriodError(f"Cutoff period ends ({period_end}) before it starts ({period_start})")
        self.period_start = period_start
        self.period_end = period_end

    def __repr__(self) -> str:
        return f"CutoffCalendar({self.period_start.isoformat()}..{self.period_end.isoformat()})"

    def total_days(self) -> int:
        return (self.period_end - self.period_start).days + 1

    def dates(self) -> Iterator[date]:
        for offset in range(self.total_days()):
            yield self.period_start + timedelta(days=offset)

    def contains(self, day: Optional[date]) -> bool:
        return day is not None and self.period_start <= day <= self.period_end

    def count_weekday(self, day_off_code: Optional[str]) -> int:
        target = weekday_index(day_off_code)
        if target is None:
            return 0
        return sum(1 for d in self.dates() if d.weekday() == target)

    def count_attended_dates(self, records: Iterable[AttendanceRecord]) -> int:
        return len({r.work_date for r in records if r.is_attended and self.contains(r.work_date)})


def billable_days(attended_dates: int, day_off_count: int) -> int:
    """Attended days plus scheduled day-offs; nothing when nobody clocked in."""
    if attended_dates <= 0:
        return 0
    return attended_dates + day_off_count
