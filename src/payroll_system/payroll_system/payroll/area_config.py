from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.enums import PayBasis
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AreaPayrollConfig:
    """Pay basis and payout cadence configured for one work area."""

    area: str
    is_fixed: bool = False
    is_daily: bool = True
    is_monthly: bool = False
    is_semi: bool = True

    def __post_init__(self) -> None:
        if bool(self.is_fixed) == bool(self.is_daily):
            raise ValidationError(f"Area {self.area!r}: exactly one of fixed/daily basis must be set")
        if bool(self.is_monthly) == bool(self.is_semi):
            raise ValidationError(f"Area {self.area!r}: exactly one of monthly/semi-monthly cadence must be set")

    @property
    def basis(self) -> PayBasis:
        return PayBasis.FIXED if self.is_fixed else PayBasis.DAILY

    @classmethod
    def default_for(cls, area: str) -> "AreaPayrollConfig":
        return cls(area=area)


class AreaConfigs:
    """Explicit area -> config mapping handed to the engine per run."""

    def __init__(self, configs: Iterable[AreaPayrollConfig] = ()):
        self._by_area: dict[str, AreaPayrollConfig] = {}
        for cfg in configs:
            if cfg.area in self._by_area:
                raise ValidationError(f"Duplicate payroll config for area {cfg.area!r}")
            self._by_area[cfg.area] = cfg

    def __len__(self) -> int:
        return len(self._by_area)

    def __iter__(self):
        return iter(self._by_area.values())

    def for_area(self, area: Optional[str]) -> Optional[AreaPayrollConfig]:
        if area is None:
            return None
        return self._by_area.get(area)
