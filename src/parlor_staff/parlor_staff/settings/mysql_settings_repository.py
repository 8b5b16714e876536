from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..core.enums import WageType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import GameSettings
from .repository import GameSettingsRepository

_COLUMNS = (
    "yonma_game_fee",
    "sanma_game_fee",
    "sanma_game_fee_back",
    "yonma_tip_unit",
    "sanma_tip_unit",
    "wage_type",
    "hourly_wage",
    "fixed_salary",
    "night_rate_multiplier",
    "base_min_wage",
    "income_tax_rate",
    "transport_per_shift",
)


class MySQLGameSettingsRepository(GameSettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user(self, user_id: int) -> Optional[GameSettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT user_id, {', '.join(_COLUMNS)} FROM game_settings WHERE user_id=%s",
                (int(user_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return GameSettings(
                user_id=int(r["user_id"]),
                yonma_game_fee=int(r["yonma_game_fee"]),
                sanma_game_fee=int(r["sanma_game_fee"]),
                sanma_game_fee_back=int(r["sanma_game_fee_back"]),
                yonma_tip_unit=int(r["yonma_tip_unit"]),
                sanma_tip_unit=int(r["sanma_tip_unit"]),
                wage_type=WageType(r["wage_type"]),
                hourly_wage=int(r["hourly_wage"]),
                fixed_salary=int(r["fixed_salary"]),
                night_rate_multiplier=Decimal(str(r["night_rate_multiplier"])),
                base_min_wage=int(r["base_min_wage"]),
                income_tax_rate=Decimal(str(r["income_tax_rate"])),
                transport_per_shift=int(r["transport_per_shift"]),
            )

    def save(self, settings: GameSettings) -> None:
        values = [getattr(settings, col) for col in _COLUMNS]
        values[_COLUMNS.index("wage_type")] = settings.wage_type.value
        updates = ", ".join(f"{col}=VALUES({col})" for col in _COLUMNS)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO game_settings(user_id, {', '.join(_COLUMNS)})
                VALUES({', '.join(['%s'] * (len(_COLUMNS) + 1))})
                ON DUPLICATE KEY UPDATE {updates}
                """,
                (int(settings.user_id), *values),
            )
