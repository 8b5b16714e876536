from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Callable, Mapping, Optional

from ..common.datetime_utils import half_month_range, half_of, iter_dates, now_local, parse_iso_date
from ..common.validators import require_int
from ..core.enums import Role, ShiftType
from ..core.exceptions import AuthorizationError, ValidationError
from ..shifts.repository import ShiftRepository
from ..users.repository import UserRepository
from .diff_engine import ShiftTypeWindows, build_cell
from .model import ShiftRequirement
from .repository import ShiftRequirementRepository

logger = logging.getLogger(__name__)

MAX_BOARD_DAYS = 62


class ShiftBoardService:
    """Store-wide shift board: every member's shifts plus required vs actual cells."""

    def __init__(
        self,
        *,
        shifts: ShiftRepository,
        requirements: ShiftRequirementRepository,
        users: UserRepository,
        windows: ShiftTypeWindows,
        today: Optional[Callable[[], date]] = None,
    ):
        self._shifts = shifts
        self._requirements = requirements
        self._users = users
        self._windows = windows
        self._today = today or (lambda: now_local().date())

    def resolve_range(
        self,
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        year_month: Optional[str] = None,
        half: Optional[str] = None,
    ) -> tuple[date, date]:
        if start_date and end_date:
            start = parse_iso_date(start_date, "startDate")
            end = parse_iso_date(end_date, "endDate")
        elif year_month:
            start, end = half_month_range(year_month, half or "first")
        else:
            today = self._today()
            start, end = half_month_range(today.strftime("%Y-%m"), half_of(today))

        if end < start:
            raise ValidationError("endDate must not be before startDate", field="endDate")
        if (end - start).days >= MAX_BOARD_DAYS:
            raise ValidationError(f"Range must be shorter than {MAX_BOARD_DAYS} days", field="endDate")
        return start, end

    def build_board(self, *, store_id: int, start: date, end: date) -> dict:
        today = self._today()
        # Previous day too, so overnight shifts count at the first opening.
        shifts = list(self._shifts.list_for_store(store_id=int(store_id), start=start - timedelta(days=1), end=end))
        explicit = {
            (r.target_date, r.shift_type): r
            for r in self._requirements.list_range(store_id=int(store_id), start=start, end=end)
        }

        cells = []
        for day in iter_dates(start, end):
            for shift_type in ShiftType:
                if shift_type not in self._windows.windows:
                    continue
                cells.append(
                    build_cell(
                        target=day,
                        shift_type=shift_type,
                        shifts=shifts,
                        windows=self._windows,
                        requirement=explicit.get((day, shift_type)),
                        today=today,
                    )
                )

        same_half = start.strftime("%Y-%m") == end.strftime("%Y-%m") and half_of(start) == half_of(end)
        visible = [s for s in shifts if s.work_date >= start]
        return {
            "storeId": int(store_id),
            "startDate": start.isoformat(),
            "endDate": end.isoformat(),
            "half": half_of(start) if same_half else None,
            "editable": end >= today,
            "users": [u.to_dict() for u in self._users.list_by_store(int(store_id))],
            "shifts": [
                {**s.to_dict(), "shiftType": self._windows.shift_type_of(s).value} for s in visible
            ],
            "requirements": [c.to_dict() for c in cells],
        }

    def upsert_requirement(self, *, current_role: Role, store_id: int, payload: Mapping[str, Any]) -> dict:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can edit shift requirements")

        errors: dict[str, str] = {}
        values: dict[str, Any] = {}

        def take(key: str, parse) -> None:
            try:
                values[key] = parse(payload.get(key))
            except ValidationError as e:
                errors.update(e.errors)

        take("targetDate", lambda v: parse_iso_date(v if isinstance(v, str) else "", "targetDate"))
        take("shiftType", _parse_shift_type)
        take("startRequired", lambda v: require_int(v, "startRequired", min_value=0))
        take("endRequired", lambda v: require_int(v, "endRequired", min_value=0))
        if errors:
            raise ValidationError.from_errors(errors)

        if values["targetDate"] < self._today():
            raise ValidationError("Past dates cannot be edited", field="targetDate")

        requirement = ShiftRequirement(
            store_id=int(store_id),
            target_date=values["targetDate"],
            shift_type=values["shiftType"],
            start_required=values["startRequired"],
            end_required=values["endRequired"],
        )
        self._requirements.upsert(requirement)
        logger.info(
            "Saved shift requirement store=%s date=%s type=%s start=%s end=%s",
            store_id,
            requirement.target_date,
            requirement.shift_type.value,
            requirement.start_required,
            requirement.end_required,
        )
        return {
            "storeId": requirement.store_id,
            "targetDate": requirement.target_date.isoformat(),
            "shiftType": requirement.shift_type.value,
            "startRequired": requirement.start_required,
            "endRequired": requirement.end_required,
        }


def _parse_shift_type(value: Any) -> ShiftType:
    try:
        return ShiftType(str(value).upper())
    except ValueError:
        raise ValidationError("shiftType must be EARLY or LATE", field="shiftType")
