from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..common.money import ZERO, money


@dataclass(frozen=True)
class NetPay:
    unclamped: Decimal
    net_pay: Decimal

    @property
    def was_clamped(self) -> bool:
        return self.unclamped < ZERO


class NetPayComposer:
    """No negative paychecks: the shortfall stays visible in ``unclamped``."""

    def compose(self, *, gross: Decimal, total_additions: Decimal, total_deductions: Decimal) -> NetPay:
        unclamped = money(gross + total_additions - total_deductions)
        return NetPay(unclamped=unclamped, net_pay=max(money(ZERO), unclamped))
