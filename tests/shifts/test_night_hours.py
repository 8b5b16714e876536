import pytest

from src.parlor_staff.parlor_staff.shifts.night_hours import (
    NightWindow,
    night_overlap_minutes,
    split_at_midnight,
    split_day_night,
)
from src.parlor_staff.parlor_staff.shifts.time_range import Interval, shift_interval


@pytest.fixture
def window():
    return NightWindow.parse("22:00", "05:00")


def test_shift_wider_than_night_window(window):
    day, night = split_day_night(shift_interval("20:00", "06:00"), window)
    assert night == 420
    assert day == 180


def test_daytime_shift_has_no_night(window):
    assert split_day_night(shift_interval("10:00", "18:00"), window) == (480, 0)


def test_early_morning_shift_overlaps_tail_of_window(window):
    # 03:00-09:00 -> 03:00-05:00 is night
    assert split_day_night(shift_interval("03:00", "09:00"), window) == (240, 120)


def test_shift_ending_exactly_at_midnight(window):
    assert split_day_night(shift_interval("18:00", "00:00"), window) == (240, 120)


def test_window_that_does_not_wrap():
    window = NightWindow.parse("01:00", "04:00")
    assert night_overlap_minutes(shift_interval("23:00", "06:00"), window) == 180


def test_empty_window_counts_nothing():
    window = NightWindow.parse("22:00", "22:00")
    assert night_overlap_minutes(shift_interval("20:00", "06:00"), window) == 0


def test_split_at_midnight():
    assert split_at_midnight(Interval(1200, 1800)) == [Interval(1200, 1440), Interval(1440, 1800)]


def test_invalid_window_raises():
    with pytest.raises(ValueError):
        NightWindow.parse("22:00", "late")


def test_default_window_is_22_to_5():
    assert NightWindow.default() == NightWindow(1320, 300)
