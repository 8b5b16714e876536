from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import SpecialHourlyWage


class SpecialWageRepository(Protocol):
    def list_all(self) -> Sequence[SpecialHourlyWage]:
        raise NotImplementedError

    def get_by_id(self, special_wage_id: int) -> Optional[SpecialHourlyWage]:
        raise NotImplementedError

    def get_by_label(self, label: str) -> Optional[SpecialHourlyWage]:
        raise NotImplementedError

    def list_by_ids(self, ids: Iterable[int]) -> Sequence[SpecialHourlyWage]:
        """Only existing ids are returned; deleted ones are silently absent."""

        raise NotImplementedError

    def create(self, *, label: str, hourly_wage: int) -> int:
        raise NotImplementedError

    def delete(self, *, special_wage_id: int) -> bool:
        raise NotImplementedError
