"""Day / night split of worked minutes.

The shift and the night window are both cut into non-wrapping pieces on a
48-hour timeline and intersected pairwise, so the midnight boundary never
needs special-casing.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_NIGHT_WINDOW_END, DEFAULT_NIGHT_WINDOW_START, MINUTES_PER_DAY
from .time_range import Interval, to_minutes

TIMELINE_DAYS = 2


@dataclass(frozen=True)
class NightWindow:
    start_minutes: int
    end_minutes: int

    @classmethod
    def parse(cls, start: str, end: str) -> "NightWindow":
        start_min = to_minutes(start)
        end_min = to_minutes(end)
        if start_min is None or end_min is None:
            raise ValueError(f"Invalid night window: {start!r}-{end!r}")
        return cls(start_min, end_min)

    @classmethod
    def default(cls) -> "NightWindow":
        return cls.parse(DEFAULT_NIGHT_WINDOW_START, DEFAULT_NIGHT_WINDOW_END)

    def segments(self) -> list[Interval]:
        """Window pieces for each day of the timeline; an equal start/end means no night band."""
        out: list[Interval] = []
        for day in range(TIMELINE_DAYS):
            offset = day * MINUTES_PER_DAY
            if self.start_minutes < self.end_minutes:
                out.append(Interval(offset + self.start_minutes, offset + self.end_minutes))
            elif self.start_minutes > self.end_minutes:
                out.append(Interval(offset, offset + self.end_minutes))
                out.append(Interval(offset + self.start_minutes, offset + MINUTES_PER_DAY))
        return out


def split_at_midnight(interval: Interval) -> list[Interval]:
    pieces: list[Interval] = []
    start = interval.start
    while start < interval.end:
        boundary = (start // MINUTES_PER_DAY + 1) * MINUTES_PER_DAY
        end = min(interval.end, boundary)
        pieces.append(Interval(start, end))
        start = end
    return pieces


def night_overlap_minutes(interval: Interval, window: NightWindow) -> int:
    total = 0
    night = window.segments()
    for piece in split_at_midnight(interval):
        for segment in night:
            total += max(0, min(piece.end, segment.end) - max(piece.start, segment.start))
    return total


def split_day_night(interval: Interval, window: NightWindow) -> tuple[int, int]:
    """Return (day_minutes, night_minutes) of ``interval``."""
    night = night_overlap_minutes(interval, window)
    return interval.minutes - night, night
