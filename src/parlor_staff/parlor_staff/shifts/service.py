from __future__ import annotations

import dataclasses
import logging
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import month_range, parse_iso_date
from ..common.validators import optional_int, require_max_length
from ..core.exceptions import NotFoundError, ValidationError
from ..special_wages.repository import SpecialWageRepository
from ..users.repository import UserRepository
from .measure import measure_shift
from .model import Shift, ShiftBreak, ShiftStats
from .night_hours import NightWindow
from .repository import ShiftRepository
from .time_range import format_minutes, to_minutes, validate_shift_span

logger = logging.getLogger(__name__)

MEMO_MAX = 500

# API key -> dataclass attribute
_FIELDS = {
    "date": "work_date",
    "startTime": "start_time",
    "endTime": "end_time",
    "breaks": "breaks",
    "memo": "memo",
    "specialHourlyWageId": "special_hourly_wage_id",
    "storeId": "store_id",
}
_REQUIRED = ("date", "startTime", "endTime")


def _clock(value: Any) -> str:
    """Normalize a parseable time to HH:MM; leave anything else for validation to report."""
    minutes = to_minutes(value)
    if minutes is None:
        return "" if value is None else str(value).strip()
    return format_minutes(minutes)


def parse_breaks(value: Any) -> tuple[ShiftBreak, ...]:
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)):
        raise ValidationError("breaks must be a list", field="breaks")

    out = []
    for idx, item in enumerate(value):
        if not isinstance(item, Mapping):
            raise ValidationError("Break must be an object", field=f"breaks[{idx}]")
        out.append(ShiftBreak(start_time=_clock(item.get("startTime")), end_time=_clock(item.get("endTime"))))
    return tuple(out)


class ShiftService:
    """Use cases for a staff member's shifts."""

    def __init__(
        self,
        shifts: ShiftRepository,
        wages: SpecialWageRepository,
        *,
        window: NightWindow,
        users: Optional[UserRepository] = None,
    ):
        self._shifts = shifts
        self._wages = wages
        self._window = window
        self._users = users

    def list_shifts(
        self,
        *,
        user_id: int,
        year_month: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        on_date: Optional[str] = None,
    ) -> Sequence[Shift]:
        """Month view (yearMonth), week view (start/end) or day view (date)."""
        if on_date:
            day = parse_iso_date(on_date, "date")
            start, end = day, day
        elif start_date and end_date:
            start = parse_iso_date(start_date, "start")
            end = parse_iso_date(end_date, "end")
            if end < start:
                raise ValidationError("end must not be before start", field="end")
        elif year_month:
            start, end = month_range(year_month)
        else:
            raise ValidationError("yearMonth, start/end or date is required", field="yearMonth")
        return self._shifts.list_for_user(user_id=int(user_id), start=start, end=end)

    def get(self, *, user_id: int, shift_id: int) -> Shift:
        shift = self._shifts.get_by_id(int(shift_id))
        if not shift or shift.user_id != int(user_id):
            raise NotFoundError("Shift not found")
        return shift

    def create(self, *, user_id: int, payload: Mapping[str, Any]) -> Shift:
        self._require(payload)
        draft = Shift(shift_id=0, user_id=int(user_id), work_date=date.min, start_time="", end_time="")
        shift = self._apply(draft, payload)
        new_id = self._shifts.create(shift)
        logger.info("Created shift id=%s user=%s date=%s", new_id, user_id, shift.work_date)
        return dataclasses.replace(shift, shift_id=new_id)

    def replace(self, *, user_id: int, shift_id: int, payload: Mapping[str, Any]) -> Shift:
        self._require(payload)
        current = self.get(user_id=user_id, shift_id=shift_id)
        # Full replace: optional fields missing from the payload go back to defaults.
        full = {"breaks": [], "memo": "", "specialHourlyWageId": None, "storeId": None, **payload}
        return self._save(current, full)

    def patch(self, *, user_id: int, shift_id: int, payload: Mapping[str, Any]) -> Shift:
        current = self.get(user_id=user_id, shift_id=shift_id)
        return self._save(current, payload)

    def delete(self, *, user_id: int, shift_id: int) -> None:
        self.get(user_id=user_id, shift_id=shift_id)
        self._shifts.delete(shift_id=int(shift_id))
        logger.info("Deleted shift id=%s user=%s", shift_id, user_id)

    def stats(self, *, user_id: int, year_month: str) -> ShiftStats:
        start, end = month_range(year_month)
        shifts = self._shifts.list_for_user(user_id=int(user_id), start=start, end=end)

        worked = night = 0
        for shift in shifts:
            m = measure_shift(shift, self._window)
            worked += m.worked_minutes
            night += m.night_minutes

        count = len(shifts)
        return ShiftStats(
            total_hours=round(worked / 60, 2),
            night_hours=round(night / 60, 2),
            avg_hours=round(worked / 60 / count, 2) if count else 0.0,
            count=count,
        )

    # ---- helpers ----

    def _save(self, current: Shift, payload: Mapping[str, Any]) -> Shift:
        updated = self._apply(current, payload)
        self._shifts.update(updated)
        changed = sorted(k for k in payload if k in _FIELDS)
        logger.info("Updated shift id=%s user=%s fields=%s", current.shift_id, current.user_id, changed)
        return updated

    @staticmethod
    def _require(payload: Mapping[str, Any]) -> None:
        missing = {
            key: f"{key} is required"
            for key in _REQUIRED
            if payload.get(key) is None or not str(payload.get(key)).strip()
        }
        if missing:
            raise ValidationError.from_errors(missing)

    def _apply(self, current: Shift, payload: Mapping[str, Any]) -> Shift:
        """Merge payload onto ``current`` and validate the result as a whole."""
        changes: dict[str, Any] = {}
        errors: dict[str, str] = {}

        def take(key: str, parse) -> None:
            if key not in payload:
                return
            try:
                changes[_FIELDS[key]] = parse(payload[key])
            except ValidationError as e:
                errors.update(e.errors)

        take("date", lambda v: parse_iso_date(v if isinstance(v, str) else "", "date"))
        take("startTime", _clock)
        take("endTime", _clock)
        take("breaks", parse_breaks)
        take("memo", lambda v: require_max_length(str(v or ""), "memo", MEMO_MAX))
        take("specialHourlyWageId", self._wage_ref)
        take("storeId", lambda v: optional_int(v, "storeId", min_value=1))
        if errors:
            raise ValidationError.from_errors(errors)

        merged = dataclasses.replace(current, **changes)
        if merged.store_id is None:
            # Unassigned shifts belong to the owner's home store.
            merged = dataclasses.replace(merged, store_id=self._home_store(merged.user_id))
        span_errors = validate_shift_span(merged.start_time, merged.end_time, merged.breaks)
        if span_errors:
            raise ValidationError.from_errors(span_errors)
        return merged

    def _home_store(self, user_id: int) -> Optional[int]:
        user = self._users.get_by_id(int(user_id)) if self._users else None
        return user.store_id if user else None

    def _wage_ref(self, value: Any) -> Optional[int]:
        wage_id = optional_int(value, "specialHourlyWageId", min_value=1)
        if wage_id is not None and not self._wages.get_by_id(wage_id):
            raise ValidationError("Special wage does not exist", field="specialHourlyWageId")
        return wage_id
