from __future__ import annotations

import dataclasses
import logging
from decimal import Decimal
from typing import Any, Callable, Mapping

from ..common.validators import require_decimal, require_int
from ..core.enums import WageType
from ..core.exceptions import ValidationError
from .model import GameSettings
from .repository import GameSettingsRepository

logger = logging.getLogger(__name__)


def _money(field: str) -> Callable[[Any], int]:
    return lambda v: require_int(v, field, min_value=0, max_value=10_000_000)


def _rate(field: str, max_value: str) -> Callable[[Any], Decimal]:
    return lambda v: require_decimal(v, field, min_value=Decimal("0"), max_value=Decimal(max_value))


def _wage_type(v: Any) -> WageType:
    try:
        return WageType(str(v).upper())
    except ValueError:
        raise ValidationError("wageType must be HOURLY or FIXED", field="wageType")


# API key -> (dataclass attribute, parser)
SETTINGS_FIELDS: dict[str, tuple[str, Callable[[Any], Any]]] = {
    "yonmaGameFee": ("yonma_game_fee", _money("yonmaGameFee")),
    "sanmaGameFee": ("sanma_game_fee", _money("sanmaGameFee")),
    "sanmaGameFeeBack": ("sanma_game_fee_back", _money("sanmaGameFeeBack")),
    "yonmaTipUnit": ("yonma_tip_unit", _money("yonmaTipUnit")),
    "sanmaTipUnit": ("sanma_tip_unit", _money("sanmaTipUnit")),
    "wageType": ("wage_type", _wage_type),
    "hourlyWage": ("hourly_wage", _money("hourlyWage")),
    "fixedSalary": ("fixed_salary", _money("fixedSalary")),
    "nightRateMultiplier": ("night_rate_multiplier", _rate("nightRateMultiplier", "10")),
    "baseMinWage": ("base_min_wage", _money("baseMinWage")),
    "incomeTaxRate": ("income_tax_rate", _rate("incomeTaxRate", "1")),
    "transportPerShift": ("transport_per_shift", _money("transportPerShift")),
}


class GameSettingsService:
    def __init__(self, settings: GameSettingsRepository):
        self._settings = settings

    def get_or_create(self, user_id: int) -> GameSettings:
        current = self._settings.get_for_user(int(user_id))
        if current:
            return current

        current = GameSettings(user_id=int(user_id))
        self._settings.save(current)
        logger.info("Created default game settings for user=%s", user_id)
        return current

    def replace(self, user_id: int, payload: Mapping[str, Any]) -> GameSettings:
        missing = {key: f"{key} is required" for key in SETTINGS_FIELDS if key not in payload}
        if missing:
            raise ValidationError.from_errors(missing)
        return self.patch(user_id, payload)

    def patch(self, user_id: int, payload: Mapping[str, Any]) -> GameSettings:
        changes: dict[str, Any] = {}
        errors: dict[str, str] = {}
        for key, (attr, parse) in SETTINGS_FIELDS.items():
            if key not in payload:
                continue
            try:
                changes[attr] = parse(payload[key])
            except ValidationError as e:
                errors.update(e.errors)
        if errors:
            raise ValidationError.from_errors(errors)

        updated = dataclasses.replace(self.get_or_create(user_id), **changes)
        self._settings.save(updated)
        logger.info("Updated game settings for user=%s fields=%s", user_id, sorted(changes))
        return updated
