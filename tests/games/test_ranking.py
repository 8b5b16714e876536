from datetime import datetime

from src.parlor_staff.parlor_staff.core.enums import GameType
from src.parlor_staff.parlor_staff.games.model import GameResult
from src.parlor_staff.parlor_staff.games.ranking import average_place, build_ranking


def _result(result_id, user_id, place, total, *, batch=None, final=False):
    return GameResult(
        result_id=result_id,
        user_id=user_id,
        game_type=GameType.YONMA,
        played_at=datetime(2026, 3, 1, 20, 0),
        place=place,
        base_income=total,
        tip_count=0,
        tip_income=0,
        other_income=0,
        total_income=total,
        simple_batch_id=batch,
        is_final_record=final,
    )


def test_average_place_ignores_final_records():
    rows = [_result(1, 1, 1, 100), _result(2, 1, 2, 100), _result(3, 1, None, 900, batch="b", final=True)]
    assert average_place(rows) == 1.5


def test_average_place_none_without_games():
    assert average_place([]) is None


def test_ranking_sorted_by_income_and_batch_placements_do_not_double_count():
    rows = [
        _result(1, 1, 1, 1000),
        _result(2, 2, 3, 2000),
        _result(3, 2, 2, 0, batch="b"),
        _result(4, 2, None, 500, batch="b", final=True),
    ]
    ranking = build_ranking(rows, {1: "Aoi", 2: "Ren"})

    assert [r.user_id for r in ranking] == [2, 1]
    assert ranking[0].total_income == 2500
    assert ranking[0].game_count == 2
    assert ranking[0].average_place == 2.5
    assert ranking[1].to_dict()["name"] == "Aoi"
