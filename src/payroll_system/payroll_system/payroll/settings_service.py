from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..employees.repository import EmployeeRepository
from .area_config import AreaConfigs, AreaPayrollConfig
from .repository import AreaConfigRepository

logger = logging.getLogger(__name__)


class AreaConfigService:
    """Use case: manage the pay basis of each work area."""

    def __init__(self, configs: AreaConfigRepository, employees: EmployeeRepository):
        self._configs = configs
        self._employees = employees

    def load(self) -> AreaConfigs:
        return AreaConfigs(self._configs.list_all())

    def settings_for_areas(self, areas: Iterable[str] | None = None) -> list[AreaPayrollConfig]:
        """Stored config for every distinct area, or the daily/semi-monthly default."""
        if areas is None:
            areas = (e.area for e in self._employees.list_all())
        stored = self.load()
        distinct = sorted({a for a in areas if a})
        return [stored.for_area(a) or AreaPayrollConfig.default_for(a) for a in distinct]

    def save(self, configs: Sequence[AreaPayrollConfig]) -> int:
        AreaConfigs(configs)  # rejects duplicate areas before touching storage
        count = self._configs.upsert_many(configs)
        logger.info("Saved payroll settings for %d areas", count)
        return count
