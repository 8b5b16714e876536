import pytest

from src.parlor_staff.parlor_staff.core.enums import GameType
from src.parlor_staff.parlor_staff.games.income import (
    FeeTable,
    calculate_income,
    change_game_type,
    clamp_place,
    tip_income,
)
from src.parlor_staff.parlor_staff.settings.model import GameSettings


def _fees(**overrides):
    values = dict(yonma_game_fee=500, sanma_game_fee=300, sanma_game_fee_back=200, yonma_tip_unit=500, sanma_tip_unit=100)
    values.update(overrides)
    return FeeTable(**values)


def test_yonma_first_place_pays_game_fee():
    income = calculate_income(
        game_type=GameType.YONMA, place=1, base_income=3000, tip_count=5, other_income=0, fees=_fees()
    )
    assert income.tip_income == 2500
    assert income.total_income == 5000


def test_sanma_fee_back_applies_regardless_of_place():
    income = calculate_income(
        game_type=GameType.SANMA, place=2, base_income=-1000, tip_count=0, other_income=1500, fees=_fees()
    )
    assert income.total_income == 700


def test_sanma_first_place_pays_fee_and_gets_fee_back():
    income = calculate_income(
        game_type=GameType.SANMA, place=1, base_income=1000, tip_count=2, other_income=0, fees=_fees()
    )
    # 1000 + 200 - 300 + 200
    assert income.total_income == 1100


def test_negative_tip_count_gives_negative_tip_income():
    assert tip_income(-3, 500) == -1500


def test_recalculation_is_idempotent():
    kwargs = dict(game_type=GameType.YONMA, place=1, base_income=-2500, tip_count=-2, other_income=300, fees=_fees())
    assert calculate_income(**kwargs) == calculate_income(**kwargs)


@pytest.mark.parametrize(
    "game_type, place, expected",
    [
        (GameType.YONMA, 0, 1),
        (GameType.YONMA, 4, 4),
        (GameType.YONMA, 7, 4),
        (GameType.SANMA, 4, 3),
        (GameType.SANMA, -1, 1),
    ],
)
def test_clamp_place(game_type, place, expected):
    assert clamp_place(game_type, place) == expected


def test_switching_to_sanma_reclamps_fourth_place():
    assert change_game_type(GameType.SANMA, 4) == 3


def test_switching_to_yonma_keeps_place():
    assert change_game_type(GameType.YONMA, 3) == 3


def test_fee_table_from_settings_picks_unit_by_type():
    fees = FeeTable.from_settings(GameSettings(user_id=1, yonma_tip_unit=100, sanma_tip_unit=50))
    assert fees.tip_unit_for(GameType.YONMA) == 100
    assert fees.tip_unit_for(GameType.SANMA) == 50
