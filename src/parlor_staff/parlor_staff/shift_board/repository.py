from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import ShiftRequirement


class ShiftRequirementRepository(Protocol):
    def list_range(self, *, store_id: int, start: date, end: date) -> Sequence[ShiftRequirement]:
        raise NotImplementedError

    def upsert(self, requirement: ShiftRequirement) -> None:
        raise NotImplementedError
