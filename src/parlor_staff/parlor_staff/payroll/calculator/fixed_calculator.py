from __future__ import annotations

from decimal import Decimal

from ...settings.model import GameSettings
from .base import WageCalculator, WageInput


class FixedWageCalculator(WageCalculator):
    """Fixed rule: the whole fixedSalary for the month, not prorated."""

    def base_wage(self, data: WageInput, settings: GameSettings) -> Decimal:
        return Decimal(settings.fixed_salary)
