from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import GameType


@dataclass(frozen=True)
class GameResult:
    """Domain entity: one game's result, or a simple batch's final net record.

    ``tip_income`` and ``total_income`` are derived and always recomputed from
    the signed inputs. Final records carry no place.
    """

    result_id: int
    user_id: int
    game_type: GameType
    played_at: datetime
    place: Optional[int]
    base_income: int
    tip_count: int
    tip_income: int
    other_income: int
    total_income: int
    note: str = ""
    simple_batch_id: Optional[str] = None
    store_id: Optional[int] = None
    is_final_record: bool = False

    @property
    def counts_toward_income(self) -> bool:
        # Batch placement rows only feed place statistics; the final row holds the money.
        return self.is_final_record or not self.simple_batch_id

    @property
    def counts_toward_places(self) -> bool:
        return not self.is_final_record and self.place is not None

    def to_dict(self) -> dict:
        return {
            "id": self.result_id,
            "userId": self.user_id,
            "gameType": self.game_type.value,
            "playedAt": self.played_at.isoformat(),
            "place": self.place,
            "baseIncome": self.base_income,
            "tipCount": self.tip_count,
            "tipIncome": self.tip_income,
            "otherIncome": self.other_income,
            "totalIncome": self.total_income,
            "note": self.note,
            "simpleBatchId": self.simple_batch_id,
            "storeId": self.store_id,
            "isFinalRecord": self.is_final_record,
        }


@dataclass(frozen=True)
class GameResultList:
    user_id: int
    average_place: Optional[float]
    total_games: int
    total_income: int
    results: list[GameResult] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "userId": self.user_id,
            "averagePlace": self.average_place,
            "totalGames": self.total_games,
            "totalIncome": self.total_income,
            "results": [r.to_dict() for r in self.results],
        }


@dataclass(frozen=True)
class SimpleBatch:
    batch_id: str
    user_id: int
    store_id: int
    played_at: date
    finalized: bool = False

    def to_dict(self) -> dict:
        return {
            "simpleBatchId": self.batch_id,
            "storeId": self.store_id,
            "playedAt": self.played_at.isoformat(),
            "finalized": self.finalized,
        }


@dataclass(frozen=True)
class RankingItem:
    user_id: int
    name: str
    total_income: int
    game_count: int
    average_place: Optional[float]

    def to_dict(self) -> dict:
        return {
            "userId": self.user_id,
            "name": self.name,
            "totalIncome": self.total_income,
            "gameCount": self.game_count,
            "averagePlace": self.average_place,
        }
