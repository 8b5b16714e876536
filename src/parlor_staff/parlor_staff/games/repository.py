from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import GameType
from .model import GameResult, SimpleBatch


class GameResultRepository(Protocol):
    def list_range(
        self,
        *,
        start: date,
        end: date,
        user_id: Optional[int] = None,
        game_type: Optional[GameType] = None,
    ) -> Sequence[GameResult]:
        raise NotImplementedError

    def get_by_id(self, result_id: int) -> Optional[GameResult]:
        raise NotImplementedError

    def create(self, result: GameResult) -> int:
        """Insert ``result`` (its ``result_id`` is ignored); returns the new id."""

        raise NotImplementedError

    def update(self, result: GameResult) -> bool:
        raise NotImplementedError

    def delete(self, *, result_id: int) -> bool:
        raise NotImplementedError

    def delete_by_batch(self, *, batch_id: str) -> int:
        raise NotImplementedError


class SimpleBatchRepository(Protocol):
    def create(self, batch: SimpleBatch) -> None:
        raise NotImplementedError

    def get(self, *, batch_id: str) -> Optional[SimpleBatch]:
        raise NotImplementedError

    def finalize(self, *, batch_id: str, final: GameResult) -> Optional[int]:
        """Flag the batch finalized and insert ``final`` atomically; None if already finalized."""

        raise NotImplementedError

    def delete(self, *, batch_id: str) -> bool:
        raise NotImplementedError
