from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Mapping

from ..core.enums import AllowanceType
from ..shifts.measure import ShiftMeasure
from ..shifts.model import Shift
from ..special_wages.model import SpecialHourlyWage
from .model import AllowanceLine

logger = logging.getLogger(__name__)


class SpecialAllowanceResolver:
    """Turns special-wage tagged shifts into allowance lines.

    A shift pointing at a wage that no longer exists simply earns nothing.
    """

    def __init__(self, wages: Mapping[int, SpecialHourlyWage], night_rate_multiplier: Decimal):
        self._wages = dict(wages)
        self._night_rate = Decimal(night_rate_multiplier)

    def lines_for(self, shift: Shift, measure: ShiftMeasure) -> list[AllowanceLine]:
        wage_id = shift.special_hourly_wage_id
        if wage_id is None:
            return []

        wage = self._wages.get(int(wage_id))
        if wage is None:
            logger.warning(
                "Shift id=%s references missing special wage id=%s; no allowance",
                shift.shift_id,
                wage_id,
            )
            return []

        lines = [
            AllowanceLine(
                type=AllowanceType.SPECIAL_REGULAR,
                label=wage.label,
                unit_price=Decimal(wage.hourly_wage),
                minutes=measure.worked_minutes,
                special_hourly_wage_id=wage.special_wage_id,
            )
        ]
        if measure.night_minutes > 0:
            lines.append(
                AllowanceLine(
                    type=AllowanceType.SPECIAL_LATE_NIGHT,
                    label=f"{wage.label} (late night)",
                    unit_price=Decimal(wage.hourly_wage) * self._night_rate,
                    minutes=measure.night_minutes,
                    special_hourly_wage_id=wage.special_wage_id,
                )
            )
        return lines


def merge_lines(lines: Iterable[AllowanceLine]) -> list[AllowanceLine]:
    """Sum minutes of lines sharing (wage id, type); first-seen order is kept."""
    merged: dict[tuple, AllowanceLine] = {}
    for line in lines:
        key = (line.special_hourly_wage_id, line.type)
        seen = merged.get(key)
        if seen is None:
            merged[key] = line
        else:
            merged[key] = AllowanceLine(
                type=seen.type,
                label=seen.label,
                unit_price=seen.unit_price,
                minutes=seen.minutes + line.minutes,
                special_hourly_wage_id=seen.special_hourly_wage_id,
            )
    return list(merged.values())
