"""Income of a single game.

    total = baseIncome + tipIncome + otherIncome
            - game fee            (place 1, per game type)
            + sanma fee-back      (every SANMA game)

Inputs are already signed; the calculation is pure, so recomputing from the
same inputs always returns the same total.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import MAX_PLACE_SANMA, MAX_PLACE_YONMA
from ..core.enums import GameType
from ..settings.model import GameSettings


@dataclass(frozen=True)
class FeeTable:
    yonma_game_fee: int
    sanma_game_fee: int
    sanma_game_fee_back: int
    yonma_tip_unit: int
    sanma_tip_unit: int

    @classmethod
    def from_settings(cls, settings: GameSettings) -> "FeeTable":
        return cls(
            yonma_game_fee=settings.yonma_game_fee,
            sanma_game_fee=settings.sanma_game_fee,
            sanma_game_fee_back=settings.sanma_game_fee_back,
            yonma_tip_unit=settings.yonma_tip_unit,
            sanma_tip_unit=settings.sanma_tip_unit,
        )

    def tip_unit_for(self, game_type: GameType) -> int:
        return self.yonma_tip_unit if game_type == GameType.YONMA else self.sanma_tip_unit


@dataclass(frozen=True)
class GameIncome:
    tip_income: int
    total_income: int


def max_place(game_type: GameType) -> int:
    return MAX_PLACE_YONMA if game_type == GameType.YONMA else MAX_PLACE_SANMA


def clamp_place(game_type: GameType, place: int) -> int:
    return min(max(int(place), 1), max_place(game_type))


def change_game_type(new_type: GameType, place: int) -> int:
    """Place to keep after switching type: lowered to the new maximum if needed."""
    return clamp_place(new_type, place)


def tip_income(tip_count: int, tip_unit: int) -> int:
    return int(tip_count) * int(tip_unit)


def calculate_income(
    *,
    game_type: GameType,
    place: int,
    base_income: int,
    tip_count: int,
    other_income: int,
    fees: FeeTable,
) -> GameIncome:
    tips = tip_income(tip_count, fees.tip_unit_for(game_type))
    total = int(base_income) + tips + int(other_income)

    if game_type == GameType.YONMA:
        if place == 1:
            total -= fees.yonma_game_fee
    else:
        if place == 1:
            total -= fees.sanma_game_fee
        total += fees.sanma_game_fee_back

    return GameIncome(tip_income=tips, total_income=total)
