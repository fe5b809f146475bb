from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.money import ZERO
from ..core.enums import AdditionStatus, AdditionType


@dataclass(frozen=True)
class AdditionEntry:
    """Ad-hoc pay addition (allowance, rest-day pay or overtime).

    For Overtime the authoritative input is ``ot_hours``; ``amount`` only
    mirrors the value shown when the entry was recorded.
    """

    employee_id: str
    type: AdditionType
    amount: Decimal = ZERO
    ot_hours: Decimal = ZERO
    is_recurring: bool = False
    applied_date: Optional[date] = None
    status: AdditionStatus = AdditionStatus.APPROVED
    remarks: Optional[str] = None
    addition_id: Optional[int] = None

    @property
    def is_overtime(self) -> bool:
        return self.type == AdditionType.OVERTIME
