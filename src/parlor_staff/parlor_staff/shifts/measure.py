from __future__ import annotations

from dataclasses import dataclass

from ..core.exceptions import ValidationError
from .model import Shift
from .night_hours import NightWindow, night_overlap_minutes
from .time_range import break_interval, shift_interval, validate_shift_span


@dataclass(frozen=True)
class ShiftMeasure:
    total_minutes: int
    break_minutes: int
    worked_minutes: int
    night_minutes: int

    @property
    def day_minutes(self) -> int:
        return self.worked_minutes - self.night_minutes


def measure_shift(shift: Shift, window: NightWindow) -> ShiftMeasure:
    """Worked and night minutes of one shift, with breaks taken out of the band they fall in."""
    errors = validate_shift_span(shift.start_time, shift.end_time, shift.breaks)
    if errors:
        raise ValidationError.from_errors(errors)

    span = shift_interval(shift.start_time, shift.end_time)
    night = night_overlap_minutes(span, window)

    break_total = 0
    for brk in shift.breaks:
        if brk.is_empty:
            continue
        interval = break_interval(span.start, brk)
        break_total += interval.minutes
        night -= night_overlap_minutes(interval, window)

    worked = span.minutes - break_total
    return ShiftMeasure(
        total_minutes=span.minutes,
        break_minutes=break_total,
        worked_minutes=worked,
        night_minutes=max(0, min(night, worked)),
    )
