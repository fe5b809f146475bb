from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AdditionEntry


class AdditionRepository(Protocol):
    def list_applicable(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AdditionEntry]:
        """Approved entries that recur, or whose applied date is in range."""

        raise NotImplementedError

    def create(self, entry: AdditionEntry) -> int:
        raise NotImplementedError

    def delete(self, *, addition_id: int) -> bool:
        raise NotImplementedError
