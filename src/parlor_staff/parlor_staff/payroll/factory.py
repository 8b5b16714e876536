from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import WageType
from ..settings.model import GameSettings
from .calculator.base import WageCalculator
from .calculator.fixed_calculator import FixedWageCalculator
from .calculator.hourly_calculator import HourlyWageCalculator


@dataclass
class WageCalculatorFactory:
    """Factory Pattern: choose the wage strategy from the user's wage type."""

    def for_settings(self, settings: GameSettings) -> WageCalculator:
        if settings.wage_type == WageType.FIXED:
            return FixedWageCalculator()
        return HourlyWageCalculator()
