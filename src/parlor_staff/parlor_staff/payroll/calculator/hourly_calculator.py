from __future__ import annotations

from decimal import Decimal

from ...settings.model import GameSettings
from .base import MINUTES_PER_HOUR, WageCalculator, WageInput


class HourlyWageCalculator(WageCalculator):
    """Hourly rule: worked hours x max(hourlyWage, baseMinWage)."""

    def base_wage(self, data: WageInput, settings: GameSettings) -> Decimal:
        return Decimal(data.worked_minutes) / MINUTES_PER_HOUR * Decimal(settings.effective_hourly_wage)
