from __future__ import annotations

from ...common.money import ZERO
from ...core.enums import PayBasis
from .base import GrossPay, GrossPayInput, GrossPayStrategy, build_result, missing_days


class FixedRateStrategy(GrossPayStrategy):
    """Semi-monthly rate minus one daily rate per missing day.

    A period with no attendance at all pays nothing.
    """

    basis = PayBasis.FIXED

    def calculate(self, inp: GrossPayInput) -> GrossPay:
        missing = missing_days(inp)
        absence = missing * inp.daily_rate
        raw = inp.basic_salary / 2 - absence if inp.billable_days > 0 else ZERO
        return build_result(
            basis=self.basis,
            raw_gross=raw,
            absence_deduction=absence,
            missing=missing,
            days=inp.billable_days,
        )
