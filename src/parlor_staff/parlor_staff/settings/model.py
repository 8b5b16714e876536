from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..core.enums import WageType


@dataclass(frozen=True)
class GameSettings:
    """Per-user fee, tip and wage configuration (exactly one row per user)."""

    user_id: int
    yonma_game_fee: int = 400
    sanma_game_fee: int = 250
    sanma_game_fee_back: int = 0
    yonma_tip_unit: int = 100
    sanma_tip_unit: int = 50
    wage_type: WageType = WageType.HOURLY
    hourly_wage: int = 1200
    fixed_salary: int = 0
    night_rate_multiplier: Decimal = Decimal("0.25")
    base_min_wage: int = 1163
    income_tax_rate: Decimal = Decimal("0.1021")
    transport_per_shift: int = 0

    @property
    def effective_hourly_wage(self) -> int:
        return max(self.hourly_wage, self.base_min_wage)

    def to_dict(self) -> dict:
        return {
            "userId": self.user_id,
            "yonmaGameFee": self.yonma_game_fee,
            "sanmaGameFee": self.sanma_game_fee,
            "sanmaGameFeeBack": self.sanma_game_fee_back,
            "yonmaTipUnit": self.yonma_tip_unit,
            "sanmaTipUnit": self.sanma_tip_unit,
            "wageType": self.wage_type.value,
            "hourlyWage": self.hourly_wage,
            "fixedSalary": self.fixed_salary,
            "nightRateMultiplier": float(self.night_rate_multiplier),
            "baseMinWage": self.base_min_wage,
            "incomeTaxRate": float(self.income_tax_rate),
            "transportPerShift": self.transport_per_shift,
        }
