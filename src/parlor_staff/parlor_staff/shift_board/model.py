from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import ShiftType, StaffingState


def classify(value: int) -> StaffingState:
    """POSITIVE = overstaffed, NEGATIVE = understaffed, NEUTRAL = exact."""
    if value > 0:
        return StaffingState.POSITIVE
    if value < 0:
        return StaffingState.NEGATIVE
    return StaffingState.NEUTRAL


@dataclass(frozen=True)
class ShiftRequirement:
    """Admin-set staffing target; unique per (store, date, shift type)."""

    store_id: int
    target_date: date
    shift_type: ShiftType
    start_required: int
    end_required: int


@dataclass(frozen=True)
class RequirementCell:
    target_date: date
    shift_type: ShiftType
    start_required: int
    end_required: int
    start_actual: int
    end_actual: int
    editable: bool
    is_default: bool

    @property
    def start_diff(self) -> int:
        return self.start_actual - self.start_required

    @property
    def end_diff(self) -> int:
        return self.end_actual - self.end_required

    def to_dict(self) -> dict:
        return {
            "date": self.target_date.isoformat(),
            "shiftType": self.shift_type.value,
            "startRequired": self.start_required,
            "endRequired": self.end_required,
            "startActual": self.start_actual,
            "endActual": self.end_actual,
            "startDiff": self.start_diff,
            "endDiff": self.end_diff,
            "startState": classify(self.start_diff).value,
            "endState": classify(self.end_diff).value,
            "editable": self.editable,
            "isDefault": self.is_default,
        }
