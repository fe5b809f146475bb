from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..area_config import AreaPayrollConfig
from .base import GrossPay, GrossPayInput, GrossPayStrategy
from .daily_rate_strategy import DailyRateStrategy
from .exempted_strategy import ExemptedStrategy
from .fixed_rate_strategy import FixedRateStrategy


@dataclass
class GrossPayStrategyFactory:
    """Factory Pattern: exempted beats the area config; no config means daily rate."""

    def for_employee(self, *, is_time_exempted: bool, area_config: Optional[AreaPayrollConfig]) -> GrossPayStrategy:
        if is_time_exempted:
            return ExemptedStrategy()
        if area_config is not None and area_config.is_fixed:
            return FixedRateStrategy()
        return DailyRateStrategy()


@dataclass
class GrossPayCalculator:
    factory: GrossPayStrategyFactory = field(default_factory=GrossPayStrategyFactory)

    def calculate(
        self,
        inp: GrossPayInput,
        *,
        is_time_exempted: bool,
        area_config: Optional[AreaPayrollConfig],
    ) -> GrossPay:
        strategy = self.factory.for_employee(is_time_exempted=is_time_exempted, area_config=area_config)
        return strategy.calculate(inp)
