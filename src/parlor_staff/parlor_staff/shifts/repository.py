from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def list_for_user(self, *, user_id: int, start: date, end: date) -> Sequence[Shift]:
        raise NotImplementedError

    def list_for_store(self, *, store_id: int, start: date, end: date) -> Sequence[Shift]:
        raise NotImplementedError

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        raise NotImplementedError

    def create(self, shift: Shift) -> int:
        """Insert the shift and its breaks (``shift_id`` is ignored); returns the new id."""

        raise NotImplementedError

    def update(self, shift: Shift) -> bool:
        raise NotImplementedError

    def delete(self, *, shift_id: int) -> bool:
        raise NotImplementedError
