"""Clock-time arithmetic for shifts and breaks.

All values are minutes since midnight. A range whose end is not after its
start is taken to cross midnight, so ``22:00 -> 05:00`` lasts 420 minutes.
Unparseable input yields ``None`` (unknown), never a zero duration.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, time
from typing import Any, Optional, Sequence

from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import ValidationError
from .model import ShiftBreak

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


@dataclass(frozen=True)
class Interval:
    """Half-open ``[start, end)`` on an absolute minute timeline."""

    start: int
    end: int

    @property
    def minutes(self) -> int:
        return self.end - self.start

    def contains(self, other: "Interval") -> bool:
        return self.start <= other.start and other.end <= self.end


def to_minutes(value: Any) -> Optional[int]:
    """``HH:MM`` / ``HH:MM:SS`` / ISO datetime -> minutes since midnight."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.hour * 60 + value.minute
    if isinstance(value, time):
        return value.hour * 60 + value.minute

    text = str(value).strip()
    if not text:
        return None

    match = _CLOCK_RE.match(text)
    if match:
        hours, minutes = int(match.group(1)), int(match.group(2))
        if hours == 24 and minutes == 0:
            return 0
        if hours > 23 or minutes > 59:
            return None
        return hours * 60 + minutes

    if "T" in text:
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
        # Wall-clock time as written; the client sends its local offset.
        return parsed.hour * 60 + parsed.minute

    return None


def format_minutes(minutes: int) -> str:
    minutes %= MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def duration_minutes(start: Any, end: Any) -> Optional[int]:
    start_min = to_minutes(start)
    end_min = to_minutes(end)
    if start_min is None or end_min is None:
        return None

    diff = end_min - start_min
    if diff <= 0:
        diff += MINUTES_PER_DAY
    return diff


def require_minutes(value: Any, field_name: str) -> int:
    minutes = to_minutes(value)
    if minutes is None:
        raise ValidationError("Invalid time (HH:MM)", field=field_name)
    return minutes


def shift_interval(start: Any, end: Any) -> Optional[Interval]:
    start_min = to_minutes(start)
    length = duration_minutes(start, end)
    if start_min is None or length is None:
        return None
    return Interval(start_min, start_min + length)


def break_interval(shift_start: int, brk: ShiftBreak) -> Optional[Interval]:
    """Place a break on the shift's timeline; a break clocked before the shift start is next day."""
    start_min = to_minutes(brk.start_time)
    length = duration_minutes(brk.start_time, brk.end_time)
    if start_min is None or length is None:
        return None
    if start_min < shift_start:
        start_min += MINUTES_PER_DAY
    return Interval(start_min, start_min + length)


def validate_breaks(breaks: Sequence[ShiftBreak]) -> dict[str, str]:
    """Field errors for one-sided or unparseable breaks (fully empty rows are ignored)."""
    errors: dict[str, str] = {}
    for idx, brk in enumerate(breaks):
        if brk.is_empty:
            continue
        for attr, field_name in (("start_time", "startTime"), ("end_time", "endTime")):
            raw = (getattr(brk, attr) or "").strip()
            key = f"breaks[{idx}].{field_name}"
            if not raw:
                errors[key] = "Break needs both a start and an end time"
            elif to_minutes(raw) is None:
                errors[key] = "Invalid time (HH:MM)"
    return errors


def total_break_minutes(breaks: Sequence[ShiftBreak]) -> int:
    total = 0
    for brk in breaks:
        if brk.is_empty:
            continue
        minutes = duration_minutes(brk.start_time, brk.end_time)
        if minutes is not None:
            total += minutes
    return total


def validate_shift_span(start: Any, end: Any, breaks: Sequence[ShiftBreak]) -> dict[str, str]:
    """All field errors of a shift's times; empty when the shift is consistent."""
    errors: dict[str, str] = {}
    if to_minutes(start) is None:
        errors["startTime"] = "Invalid time (HH:MM)"
    if to_minutes(end) is None:
        errors["endTime"] = "Invalid time (HH:MM)"
    errors.update(validate_breaks(breaks))
    if errors:
        return errors

    span = shift_interval(start, end)
    for idx, brk in enumerate(breaks):
        if brk.is_empty:
            continue
        interval = break_interval(span.start, brk)
        if interval and not span.contains(interval):
            errors[f"breaks[{idx}]"] = "Break must be inside the shift"

    if not errors and total_break_minutes(breaks) > span.minutes:
        errors["breaks"] = "Total break time exceeds the shift length"
    return errors
