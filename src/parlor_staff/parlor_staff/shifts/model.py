from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class ShiftBreak:
    """Break interval inside a shift; either side may be blank while editing."""

    start_time: str = ""
    end_time: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.start_time or "").strip() and not (self.end_time or "").strip()

    def to_dict(self) -> dict:
        return {"startTime": self.start_time, "endTime": self.end_time}


@dataclass(frozen=True)
class Shift:
    """Domain entity: one staff shift. ``end_time`` may be earlier than ``start_time`` (overnight)."""

    shift_id: int
    user_id: int
    work_date: date
    start_time: str
    end_time: str
    breaks: tuple[ShiftBreak, ...] = ()
    memo: str = ""
    special_hourly_wage_id: Optional[int] = None
    store_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.shift_id,
            "userId": self.user_id,
            "date": self.work_date.isoformat(),
            "startTime": self.start_time,
            "endTime": self.end_time,
            "breaks": [b.to_dict() for b in self.breaks],
            "memo": self.memo,
            "specialHourlyWageId": self.special_hourly_wage_id,
            "storeId": self.store_id,
        }


@dataclass(frozen=True)
class ShiftStats:
    total_hours: float
    night_hours: float
    avg_hours: float
    count: int

    def to_dict(self) -> dict:
        return {
            "totalHours": self.total_hours,
            "nightHours": self.night_hours,
            "avgHours": self.avg_hours,
            "count": self.count,
        }
