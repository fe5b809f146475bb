from __future__ import annotations

from ...core.enums import PayBasis
from .base import GrossPay, GrossPayInput, GrossPayStrategy, build_result, missing_days


class DailyRateStrategy(GrossPayStrategy):
    """Daily rate times billable days.

    The absence deduction is reported only; it is already implicit in paying
    billable days.
    """

    basis = PayBasis.DAILY

    def calculate(self, inp: GrossPayInput) -> GrossPay:
        missing = missing_days(inp)
        return build_result(
            basis=self.basis,
            raw_gross=inp.daily_rate * inp.billable_days,
            absence_deduction=missing * inp.daily_rate,
            missing=missing,
            days=inp.billable_days,
        )
