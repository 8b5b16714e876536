from __future__ import annotations

import io
import logging
from typing import Any, Mapping

import pandas as pd

from ..common.datetime_utils import month_range, parse_year_month
from ..common.validators import require_int
from ..core.constants import DEFAULT_ADVANCE_STEP
from ..core.exceptions import ValidationError
from ..games.repository import GameResultRepository
from ..settings.service import GameSettingsService
from ..shifts.repository import ShiftRepository
from ..special_wages.repository import SpecialWageRepository
from .aggregator import PayrollAggregator
from .model import SalarySummary, to_yen
from .repository import AdvancePaymentRepository

logger = logging.getLogger(__name__)


def normalize_year_month(value: str) -> str:
    year, month = parse_year_month(value)
    return f"{year:04d}-{month:02d}"


class SalaryService:
    """Monthly salary: computed on demand from shifts, game results and settings."""

    def __init__(
        self,
        *,
        shifts: ShiftRepository,
        results: GameResultRepository,
        wages: SpecialWageRepository,
        advances: AdvancePaymentRepository,
        settings: GameSettingsService,
        aggregator: PayrollAggregator,
        advance_step: int = DEFAULT_ADVANCE_STEP,
    ):
        self._shifts = shifts
        self._results = results
        self._wages = wages
        self._advances = advances
        self._settings = settings
        self._aggregator = aggregator
        self._advance_step = int(advance_step)

    def summary(self, *, user_id: int, year_month: str) -> SalarySummary:
        ym = normalize_year_month(year_month)
        start, end = month_range(ym)

        shifts = self._shifts.list_for_user(user_id=int(user_id), start=start, end=end)
        results = self._results.list_range(start=start, end=end, user_id=int(user_id))
        wage_ids = {s.special_hourly_wage_id for s in shifts if s.special_hourly_wage_id is not None}
        wages = {w.special_wage_id: w for w in self._wages.list_by_ids(wage_ids)}

        return self._aggregator.summarize(
            user_id=int(user_id),
            year_month=ym,
            settings=self._settings.get_or_create(user_id),
            shifts=shifts,
            results=results,
            wages=wages,
            advance_amount=self.get_advance(user_id=user_id, year_month=ym),
        )

    def get_advance(self, *, user_id: int, year_month: str) -> int:
        ym = normalize_year_month(year_month)
        return self._advances.get(user_id=int(user_id), year_month=ym) or 0

    def update_advance(self, *, user_id: int, year_month: str, payload: Mapping[str, Any]) -> int:
        ym = normalize_year_month(year_month)
        amount = require_int(payload.get("amount"), "amount", min_value=0)
        if amount % self._advance_step:
            raise ValidationError(f"amount must be a multiple of {self._advance_step}", field="amount")

        self._advances.save(user_id=int(user_id), year_month=ym, amount=amount)
        logger.info("Saved advance payment user=%s yearMonth=%s amount=%s", user_id, ym, amount)
        return amount

    def export_xlsx(self, *, user_id: int, year_month: str) -> io.BytesIO:
        """Salary summary as a two-column spreadsheet plus one row per allowance line."""
        s = self.summary(user_id=user_id, year_month=year_month)
        data = s.to_dict()

        rows = [
            ("Year-month", data["yearMonth"]),
            ("Work hours", round(s.total_work_minutes / 60, 2)),
            ("Night hours", round(s.total_night_minutes / 60, 2)),
            ("Base wage", data["baseWageTotal"]),
            ("Night extra", data["nightExtraTotal"]),
            ("Transport", data["transportTotal"]),
            ("Game income", data["gameIncomeTotal"]),
        ]
        for line in s.special_allowances:
            rows.append((f"Allowance: {line.label}", to_yen(line.amount)))
        rows += [
            ("Gross salary", data["grossSalary"]),
            ("Income tax", data["incomeTax"]),
            ("Net salary", data["netSalary"]),
            ("Advance", data["advanceAmount"]),
            ("Payable", data["payableAmount"]),
        ]

        df = pd.DataFrame(rows, columns=["Item", "Amount"])
        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=data["yearMonth"])
        out.seek(0)
        return out
