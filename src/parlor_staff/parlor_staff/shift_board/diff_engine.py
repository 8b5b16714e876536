"""Required vs actual staffing per (date, shift type) cell.

Actual counts look at two instants of the shift type's window: how many
shifts are running at the opening instant and how many are still running at
the closing instant. Shifts from the previous day are included so an
overnight shift can cover an early opening.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Mapping, Optional

from ..core.constants import DEFAULT_SHIFT_TYPE_WINDOWS, MINUTES_PER_DAY
from ..core.enums import ShiftType
from ..shifts.model import Shift
from ..shifts.time_range import Interval, duration_minutes, shift_interval, to_minutes
from .model import RequirementCell, ShiftRequirement

MON_THU = "MON_THU"
FRI = "FRI"
SAT_SUN = "SAT_SUN"

# (weekday group, shift type) -> (start required, end required)
DEFAULT_REQUIREMENTS: dict[tuple[str, ShiftType], tuple[int, int]] = {
    (MON_THU, ShiftType.EARLY): (2, 3),
    (MON_THU, ShiftType.LATE): (3, 2),
    (FRI, ShiftType.EARLY): (2, 3),
    (FRI, ShiftType.LATE): (4, 3),
    (SAT_SUN, ShiftType.EARLY): (3, 4),
    (SAT_SUN, ShiftType.LATE): (4, 3),
}


def weekday_group(day: date) -> str:
    wd = day.weekday()
    if wd <= 3:
        return MON_THU
    if wd == 4:
        return FRI
    return SAT_SUN


def default_requirement(day: date, shift_type: ShiftType) -> tuple[int, int]:
    return DEFAULT_REQUIREMENTS[(weekday_group(day), shift_type)]


def diff(actual: int, required: int) -> int:
    return int(actual) - int(required)


@dataclass(frozen=True)
class ShiftTypeWindows:
    """Opening/closing clock times per shift type, as minutes since midnight."""

    windows: Mapping[ShiftType, Interval]

    @classmethod
    def parse(cls, raw: Mapping[str, tuple[str, str]]) -> "ShiftTypeWindows":
        out: dict[ShiftType, Interval] = {}
        for key, (start, end) in raw.items():
            start_min = to_minutes(start)
            length = duration_minutes(start, end)
            if start_min is None or length is None:
                raise ValueError(f"Invalid shift type window for {key}: {start!r}-{end!r}")
            out[ShiftType(key)] = Interval(start_min, start_min + length)
        return cls(out)

    @classmethod
    def default(cls) -> "ShiftTypeWindows":
        return cls.parse(DEFAULT_SHIFT_TYPE_WINDOWS)

    def shift_type_of(self, shift: Shift) -> ShiftType:
        """EARLY when the shift starts before the late window opens."""
        start = to_minutes(shift.start_time)
        late = self.windows.get(ShiftType.LATE)
        if late is None or start is None:
            return ShiftType.EARLY
        return ShiftType.EARLY if start < late.start else ShiftType.LATE


def _absolute(shift: Shift, target: date) -> Optional[Interval]:
    span = shift_interval(shift.start_time, shift.end_time)
    if span is None:
        return None
    offset = (shift.work_date - target).days * MINUTES_PER_DAY
    return Interval(span.start + offset, span.end + offset)


def count_actual(shifts: Iterable[Shift], target: date, window: Interval) -> tuple[int, int]:
    """(staff on duty at opening, staff still on duty at closing) for ``target``."""
    start_count = end_count = 0
    for shift in shifts:
        if shift.work_date not in (target, target - timedelta(days=1)):
            continue
        span = _absolute(shift, target)
        if span is None:
            continue
        if span.start <= window.start < span.end:
            start_count += 1
        if span.start < window.end <= span.end:
            end_count += 1
    return start_count, end_count


def build_cell(
    *,
    target: date,
    shift_type: ShiftType,
    shifts: Iterable[Shift],
    windows: ShiftTypeWindows,
    requirement: Optional[ShiftRequirement],
    today: date,
) -> RequirementCell:
    if requirement is not None:
        start_req, end_req = requirement.start_required, requirement.end_required
    else:
        start_req, end_req = default_requirement(target, shift_type)

    start_actual, end_actual = count_actual(shifts, target, windows.windows[shift_type])
    return RequirementCell(
        target_date=target,
        shift_type=shift_type,
        start_required=start_req,
        end_required=end_req,
        start_actual=start_actual,
        end_actual=end_actual,
        editable=target >= today,
        is_default=requirement is None,
    )
