from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SpecialHourlyWage:
    """Admin-defined special hourly rate that a shift may reference by id."""

    special_wage_id: int
    label: str
    hourly_wage: int

    def to_dict(self) -> dict:
        return {"id": self.special_wage_id, "label": self.label, "hourlyWage": self.hourly_wage}
