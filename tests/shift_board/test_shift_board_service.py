from datetime import date

import pytest

from src.parlor_staff.parlor_staff.core.enums import Role
from src.parlor_staff.parlor_staff.core.exceptions import AuthorizationError, ValidationError


def _shift(container, user_id, day, start, end):
    container.shift_service.create(
        user_id=user_id, payload={"date": day, "startTime": start, "endTime": end, "storeId": 1}
    )


def test_board_counts_and_defaults(container):
    _shift(container, 2, "2026-03-13", "11:00", "18:00")
    _shift(container, 3, "2026-03-13", "18:00", "05:00")

    board = container.shift_board_service.build_board(store_id=1, start=date(2026, 3, 13), end=date(2026, 3, 13))

    assert board["half"] == "first"
    assert board["editable"] is True
    assert {u["id"] for u in board["users"]} == {1, 2, 3}
    assert [s["shiftType"] for s in board["shifts"]] == ["EARLY", "LATE"]

    early, late = board["requirements"]
    # 2026-03-13 is a Friday
    assert (early["startRequired"], early["endRequired"]) == (2, 3)
    assert (early["startActual"], early["endActual"]) == (1, 1)
    assert early["startDiff"] == -1
    assert early["startState"] == "NEGATIVE"
    assert (late["startRequired"], late["startActual"], late["endActual"]) == (4, 1, 1)


def test_admin_override_replaces_default(container):
    saved = container.shift_board_service.upsert_requirement(
        current_role=Role.ADMIN,
        store_id=1,
        payload={"targetDate": "2026-03-13", "shiftType": "early", "startRequired": 1, "endRequired": 0},
    )
    assert saved["shiftType"] == "EARLY"

    board = container.shift_board_service.build_board(store_id=1, start=date(2026, 3, 13), end=date(2026, 3, 13))
    early = board["requirements"][0]
    assert (early["startRequired"], early["endRequired"], early["isDefault"]) == (1, 0, False)


def test_member_cannot_edit_requirements(container):
    with pytest.raises(AuthorizationError):
        container.shift_board_service.upsert_requirement(
            current_role=Role.MEMBER,
            store_id=1,
            payload={"targetDate": "2026-03-13", "shiftType": "EARLY", "startRequired": 1, "endRequired": 1},
        )


def test_past_dates_are_locked(container):
    with pytest.raises(ValidationError) as exc:
        container.shift_board_service.upsert_requirement(
            current_role=Role.ADMIN,
            store_id=1,
            payload={"targetDate": "2026-03-09", "shiftType": "EARLY", "startRequired": 1, "endRequired": 1},
        )
    assert "targetDate" in exc.value.errors


def test_requirement_counts_must_be_non_negative_integers(container):
    with pytest.raises(ValidationError) as exc:
        container.shift_board_service.upsert_requirement(
            current_role=Role.ADMIN,
            store_id=1,
            payload={"targetDate": "2026-03-20", "shiftType": "NOON", "startRequired": -1, "endRequired": 1.5},
        )
    assert set(exc.value.errors) == {"shiftType", "startRequired", "endRequired"}


def test_range_defaults_to_current_half_month(container):
    start, end = container.shift_board_service.resolve_range()
    assert (start, end) == (date(2026, 3, 1), date(2026, 3, 15))

    start, end = container.shift_board_service.resolve_range(year_month="2026-02", half="second")
    assert (start, end) == (date(2026, 2, 16), date(2026, 2, 28))


def test_shift_saved_without_store_counts_on_home_board(container):
    container.shift_service.create(user_id=2, payload={"date": "2026-03-12", "startTime": "10:00", "endTime": "19:00"})

    board = container.shift_board_service.build_board(store_id=1, start=date(2026, 3, 12), end=date(2026, 3, 12))

    assert [s["userId"] for s in board["shifts"]] == [2]
    early = next(c for c in board["requirements"] if c["shiftType"] == "EARLY")
    assert (early["startActual"], early["endActual"]) == (1, 1)
