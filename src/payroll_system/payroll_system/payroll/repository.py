from __future__ import annotations

from typing import Protocol, Sequence

from .area_config import AreaPayrollConfig


class AreaConfigRepository(Protocol):
    def list_all(self) -> Sequence[AreaPayrollConfig]:
        raise NotImplementedError

    def upsert_many(self, configs: Sequence[AreaPayrollConfig]) -> int:
        raise NotImplementedError
