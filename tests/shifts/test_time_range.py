from datetime import datetime, time

import pytest

from src.parlor_staff.parlor_staff.core.exceptions import ValidationError
from src.parlor_staff.parlor_staff.shifts.model import ShiftBreak
from src.parlor_staff.parlor_staff.shifts.time_range import (
    Interval,
    break_interval,
    duration_minutes,
    format_minutes,
    require_minutes,
    to_minutes,
    total_break_minutes,
    validate_breaks,
    validate_shift_span,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("00:00", 0),
        ("09:30", 570),
        ("9:05", 545),
        ("23:59:59", 1439),
        ("24:00", 0),
        ("2026-03-01T22:15:00", 1335),
        ("2026-03-01T22:15:00Z", 1335),
        (time(5, 0), 300),
        (datetime(2026, 3, 1, 18, 45), 1125),
    ],
)
def test_to_minutes_accepts_clock_and_iso_values(value, expected):
    assert to_minutes(value) == expected


@pytest.mark.parametrize("value", [None, "", "   ", "25:00", "12:60", "noon", "2026-13-01T10:00"])
def test_to_minutes_returns_none_for_unparseable(value):
    assert to_minutes(value) is None


def test_overnight_duration_wraps_past_midnight():
    assert duration_minutes("22:00", "05:00") == 420


def test_equal_start_and_end_counts_as_full_day():
    assert duration_minutes("10:00", "10:00") == 1440


def test_duration_is_unknown_when_either_side_fails():
    assert duration_minutes("22:00", "xx") is None
    assert duration_minutes("", "05:00") is None


def test_require_minutes_reports_field():
    with pytest.raises(ValidationError) as exc:
        require_minutes("7pm", "startTime")
    assert "startTime" in exc.value.errors


def test_format_minutes_wraps_day():
    assert format_minutes(1500) == "01:00"
    assert format_minutes(570) == "09:30"


def test_total_break_minutes_skips_empty_and_unknown():
    breaks = [
        ShiftBreak("12:00", "12:45"),
        ShiftBreak("", ""),
        ShiftBreak("23:50", "00:20"),
        ShiftBreak("bad", "13:00"),
    ]
    assert total_break_minutes(breaks) == 45 + 30


def test_one_sided_break_is_a_field_error():
    errors = validate_breaks([ShiftBreak("12:00", ""), ShiftBreak("", ""), ShiftBreak("", "15:00")])
    assert errors == {
        "breaks[0].endTime": "Break needs both a start and an end time",
        "breaks[2].startTime": "Break needs both a start and an end time",
    }


def test_break_before_shift_start_belongs_to_next_day():
    assert break_interval(1320, ShiftBreak("01:00", "01:30")) == Interval(1500, 1530)


def test_valid_overnight_shift_with_break_after_midnight():
    assert validate_shift_span("22:00", "05:00", [ShiftBreak("01:00", "01:30")]) == {}


def test_break_outside_shift_is_rejected():
    errors = validate_shift_span("10:00", "18:00", [ShiftBreak("18:30", "19:00")])
    assert "breaks[0]" in errors


def test_invalid_start_time_is_reported_not_zeroed():
    errors = validate_shift_span("abc", "18:00", [])
    assert errors == {"startTime": "Invalid time (HH:MM)"}
