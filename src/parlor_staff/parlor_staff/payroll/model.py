from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..core.enums import AllowanceType


def to_yen(amount: Decimal) -> int:
    """Round half-up to a whole currency unit; used only when presenting."""
    return int(Decimal(amount).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _hours(minutes: int) -> float:
    return float((Decimal(minutes) / Decimal(60)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class AllowanceLine:
    type: AllowanceType
    label: str
    unit_price: Decimal
    minutes: int
    special_hourly_wage_id: Optional[int]

    @property
    def amount(self) -> Decimal:
        return self.unit_price * Decimal(self.minutes) / Decimal(60)

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "label": self.label,
            "unitPrice": to_yen(self.unit_price),
            "hours": _hours(self.minutes),
            "amount": to_yen(self.amount),
            "specialHourlyWageId": self.special_hourly_wage_id,
        }


@dataclass(frozen=True)
class SalarySummary:
    """Monthly pay of one user; derived on demand, never persisted."""

    user_id: int
    year_month: str
    total_work_minutes: int
    total_day_minutes: int
    total_night_minutes: int
    base_wage_total: Decimal
    night_extra_total: Decimal
    night_hourly_wage: Decimal
    night_extra_rate: Decimal
    game_income_total: int
    transport_total: Decimal
    special_allowances: list[AllowanceLine] = field(default_factory=list)
    gross_salary: Decimal = Decimal(0)
    income_tax: Decimal = Decimal(0)
    net_salary: Decimal = Decimal(0)
    advance_amount: int = 0
    payable_amount: Decimal = Decimal(0)

    def allowance_total(self, kind: Optional[AllowanceType] = None) -> Decimal:
        return sum(
            (line.amount for line in self.special_allowances if kind is None or line.type == kind),
            Decimal(0),
        )

    @property
    def special_allowance_total(self) -> Decimal:
        return self.allowance_total()

    def to_dict(self) -> dict:
        return {
            "userId": self.user_id,
            "yearMonth": self.year_month,
            "totalWorkMinutes": self.total_work_minutes,
            "totalDayMinutes": self.total_day_minutes,
            "totalNightMinutes": self.total_night_minutes,
            "baseWageTotal": to_yen(self.base_wage_total),
            "nightExtraTotal": to_yen(self.night_extra_total),
            "nightHourlyWage": to_yen(self.night_hourly_wage),
            "nightExtraRate": float(self.night_extra_rate),
            "gameIncomeTotal": self.game_income_total,
            "transportTotal": to_yen(self.transport_total),
            "specialAllowanceTotal": to_yen(self.special_allowance_total),
            "specialAllowances": [line.to_dict() for line in self.special_allowances],
            "specialAllowance": {
                "regular": to_yen(self.allowance_total(AllowanceType.SPECIAL_REGULAR)),
                "lateNight": to_yen(self.allowance_total(AllowanceType.SPECIAL_LATE_NIGHT)),
                "total": to_yen(self.special_allowance_total),
            },
            "grossSalary": to_yen(self.gross_salary),
            "incomeTax": to_yen(self.income_tax),
            "netSalary": to_yen(self.net_salary),
            "advanceAmount": self.advance_amount,
            "payableAmount": to_yen(self.payable_amount),
        }
