from __future__ import annotations

from typing import Optional, Protocol


class AdvancePaymentRepository(Protocol):
    """Advance (pay-ahead) amount per (user, yearMonth)."""

    def get(self, *, user_id: int, year_month: str) -> Optional[int]:
        raise NotImplementedError

    def save(self, *, user_id: int, year_month: str, amount: int) -> None:
        raise NotImplementedError
