from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ...settings.model import GameSettings

MINUTES_PER_HOUR = Decimal(60)


@dataclass(frozen=True)
class WageInput:
    """Month totals the wage depends on. ``night_hourly_wage`` overrides the default night base."""

    worked_minutes: int
    night_minutes: int
    shift_days: int
    night_hourly_wage: Optional[Decimal] = None


@dataclass(frozen=True)
class WageBreakdown:
    base_wage: Decimal
    night_extra: Decimal
    transport: Decimal
    night_hourly_wage: Decimal
    night_extra_rate: Decimal


class WageCalculator(ABC):
    """Calculator interface (Strategy Pattern for wages).

    Subclasses decide the base wage only; the night premium and transport are
    the same for every wage type and amounts stay unrounded ``Decimal``.
    """

    @abstractmethod
    def base_wage(self, data: WageInput, settings: GameSettings) -> Decimal:
        raise NotImplementedError

    def calculate(self, data: WageInput, settings: GameSettings) -> WageBreakdown:
        night_wage = (
            Decimal(data.night_hourly_wage)
            if data.night_hourly_wage is not None
            else Decimal(settings.effective_hourly_wage)
        )
        rate = Decimal(settings.night_rate_multiplier)
        night_extra = Decimal(data.night_minutes) / MINUTES_PER_HOUR * night_wage * rate

        return WageBreakdown(
            base_wage=self.base_wage(data, settings),
            night_extra=night_extra,
            transport=Decimal(settings.transport_per_shift) * data.shift_days,
            night_hourly_wage=night_wage,
            night_extra_rate=rate,
        )
