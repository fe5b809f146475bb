from __future__ import annotations

from ...common.money import ZERO
from ...core.enums import PayBasis
from .base import GrossPay, GrossPayInput, GrossPayStrategy, build_result


class ExemptedStrategy(GrossPayStrategy):
    """Half the monthly salary whatever the attendance."""

    basis = PayBasis.EXEMPTED

    def calculate(self, inp: GrossPayInput) -> GrossPay:
        return build_result(
            basis=self.basis,
            raw_gross=inp.basic_salary / 2,
            absence_deduction=ZERO,
            missing=0,
            days=inp.cutoff_total_days,
        )
