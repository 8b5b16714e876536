"""Monthly salary summary.

    gross   = base + nightExtra + specialAllowances + transport + gameIncome
    tax     = gross x incomeTaxRate            (0 when gross <= 0)
    net     = gross - tax
    payable = max(0, net - advance)
"""

from __future__ import annotations

import dataclasses
from decimal import Decimal
from typing import Iterable, Mapping, Optional, Sequence

from ..games.model import GameResult
from ..settings.model import GameSettings
from ..shifts.measure import measure_shift
from ..shifts.model import Shift
from ..shifts.night_hours import NightWindow
from ..special_wages.model import SpecialHourlyWage
from .allowances import SpecialAllowanceResolver, merge_lines
from .calculator.base import WageInput
from .factory import WageCalculatorFactory
from .model import SalarySummary


class PayrollAggregator:
    def __init__(self, *, window: NightWindow, factory: Optional[WageCalculatorFactory] = None):
        self._window = window
        self._factory = factory or WageCalculatorFactory()

    def summarize(
        self,
        *,
        user_id: int,
        year_month: str,
        settings: GameSettings,
        shifts: Sequence[Shift],
        results: Iterable[GameResult],
        wages: Mapping[int, SpecialHourlyWage],
        advance_amount: int = 0,
        night_hourly_wage: Optional[Decimal] = None,
    ) -> SalarySummary:
        resolver = SpecialAllowanceResolver(wages, settings.night_rate_multiplier)

        worked = night = 0
        lines = []
        for shift in shifts:
            m = measure_shift(shift, self._window)
            worked += m.worked_minutes
            night += m.night_minutes
            lines.extend(resolver.lines_for(shift, m))

        wage = self._factory.for_settings(settings).calculate(
            WageInput(
                worked_minutes=worked,
                night_minutes=night,
                shift_days=len({s.work_date for s in shifts}),
                night_hourly_wage=night_hourly_wage,
            ),
            settings,
        )

        game_income = sum(r.total_income for r in results if r.counts_toward_income)

        summary = SalarySummary(
            user_id=int(user_id),
            year_month=year_month,
            total_work_minutes=worked,
            total_day_minutes=worked - night,
            total_night_minutes=night,
            base_wage_total=wage.base_wage,
            night_extra_total=wage.night_extra,
            night_hourly_wage=wage.night_hourly_wage,
            night_extra_rate=wage.night_extra_rate,
            game_income_total=game_income,
            transport_total=wage.transport,
            special_allowances=merge_lines(lines),
            advance_amount=int(advance_amount),
        )

        gross = (
            summary.base_wage_total
            + summary.night_extra_total
            + summary.special_allowance_total
            + summary.transport_total
            + Decimal(game_income)
        )
        tax = gross * Decimal(settings.income_tax_rate) if gross > 0 else Decimal(0)
        net = gross - tax
        payable = max(Decimal(0), net - Decimal(advance_amount))

        return dataclasses.replace(summary, gross_salary=gross, income_tax=tax, net_salary=net, payable_amount=payable)
