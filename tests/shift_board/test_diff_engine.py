from datetime import date

import pytest

from src.parlor_staff.parlor_staff.core.enums import ShiftType, StaffingState
from src.parlor_staff.parlor_staff.shift_board.diff_engine import (
    ShiftTypeWindows,
    build_cell,
    count_actual,
    default_requirement,
    diff,
    weekday_group,
)
from src.parlor_staff.parlor_staff.shift_board.model import ShiftRequirement, classify
from src.parlor_staff.parlor_staff.shifts.model import Shift

# 2026-03-02 is a Monday
MON = date(2026, 3, 2)
THU = date(2026, 3, 5)
FRI = date(2026, 3, 6)
SAT = date(2026, 3, 7)
SUN = date(2026, 3, 8)


def _shift(shift_id, day, start, end):
    return Shift(shift_id=shift_id, user_id=shift_id, work_date=day, start_time=start, end_time=end, store_id=1)


def test_overstaffed_and_understaffed():
    assert diff(5, 3) == 2
    assert classify(diff(5, 3)) == StaffingState.POSITIVE
    assert diff(2, 4) == -2
    assert classify(diff(2, 4)) == StaffingState.NEGATIVE
    assert classify(0) == StaffingState.NEUTRAL


@pytest.mark.parametrize(
    "day, group",
    [(MON, "MON_THU"), (THU, "MON_THU"), (FRI, "FRI"), (SAT, "SAT_SUN"), (SUN, "SAT_SUN")],
)
def test_weekday_groups(day, group):
    assert weekday_group(day) == group


@pytest.mark.parametrize(
    "day, shift_type, expected",
    [
        (MON, ShiftType.EARLY, (2, 3)),
        (MON, ShiftType.LATE, (3, 2)),
        (FRI, ShiftType.EARLY, (2, 3)),
        (FRI, ShiftType.LATE, (4, 3)),
        (SAT, ShiftType.EARLY, (3, 4)),
        (SUN, ShiftType.LATE, (4, 3)),
    ],
)
def test_default_requirement_table(day, shift_type, expected):
    assert default_requirement(day, shift_type) == expected


def test_actual_counts_at_opening_and_closing():
    windows = ShiftTypeWindows.default()
    shifts = [
        _shift(1, MON, "11:00", "18:00"),
        _shift(2, MON, "11:00", "15:00"),
        _shift(3, MON, "14:00", "22:00"),
        _shift(4, MON, "18:00", "05:00"),
    ]
    assert count_actual(shifts, MON, windows.windows[ShiftType.EARLY]) == (2, 2)
    assert count_actual(shifts, MON, windows.windows[ShiftType.LATE]) == (2, 1)


def test_previous_day_overnight_shift_counts_for_morning_opening():
    windows = ShiftTypeWindows.parse({"EARLY": ("04:00", "12:00"), "LATE": ("18:00", "05:00")})
    shifts = [_shift(1, MON, "22:00", "06:00")]
    tue = date(2026, 3, 3)
    assert count_actual(shifts, tue, windows.windows[ShiftType.EARLY]) == (1, 0)


def test_cell_uses_explicit_requirement_over_default():
    windows = ShiftTypeWindows.default()
    req = ShiftRequirement(store_id=1, target_date=MON, shift_type=ShiftType.EARLY, start_required=3, end_required=1)
    shifts = [_shift(i, MON, "11:00", "18:00") for i in range(1, 6)]

    cell = build_cell(target=MON, shift_type=ShiftType.EARLY, shifts=shifts, windows=windows, requirement=req, today=MON)
    data = cell.to_dict()

    assert data["startDiff"] == 2
    assert data["startState"] == "POSITIVE"
    assert data["endDiff"] == 4
    assert data["isDefault"] is False
    assert data["editable"] is True


def test_cell_in_the_past_is_not_editable():
    windows = ShiftTypeWindows.default()
    cell = build_cell(target=MON, shift_type=ShiftType.LATE, shifts=[], windows=windows, requirement=None, today=FRI)
    assert cell.editable is False
    assert cell.is_default is True
    assert (cell.start_diff, cell.end_diff) == (-3, -2)


def test_shift_type_of_uses_late_opening():
    windows = ShiftTypeWindows.default()
    assert windows.shift_type_of(_shift(1, MON, "11:00", "18:00")) == ShiftType.EARLY
    assert windows.shift_type_of(_shift(2, MON, "19:00", "04:00")) == ShiftType.LATE
