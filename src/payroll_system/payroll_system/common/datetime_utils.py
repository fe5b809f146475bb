from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def as_date(value: date | datetime | str) -> date:
    """Normalize a date-like value to midnight precision (a plain date)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value)[:10])


class Clock(Protocol):
    def today(self) -> date:
        raise NotImplementedError


class SystemClock:
    """Local wall clock."""

    def today(self) -> date:
        return datetime.now().date()


@dataclass(frozen=True)
class FixedClock:
    """Clock pinned to one day, for tests and back-dated runs."""

    day: date

    def today(self) -> date:
        return self.day
