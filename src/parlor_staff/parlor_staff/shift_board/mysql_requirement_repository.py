from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import ShiftType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import ShiftRequirement
from .repository import ShiftRequirementRepository


class MySQLShiftRequirementRepository(ShiftRequirementRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(self, *, store_id: int, start: date, end: date) -> Sequence[ShiftRequirement]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT store_id, target_date, shift_type, start_required, end_required
                FROM shift_requirements
                WHERE store_id=%s AND target_date BETWEEN %s AND %s
                ORDER BY target_date, shift_type
                """,
                (int(store_id), start, end),
            )
            return [
                ShiftRequirement(
                    store_id=int(r["store_id"]),
                    target_date=r["target_date"],
                    shift_type=ShiftType(r["shift_type"]),
                    start_required=int(r["start_required"]),
                    end_required=int(r["end_required"]),
                )
                for r in fetchall(cur)
            ]

    def upsert(self, requirement: ShiftRequirement) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shift_requirements(store_id, target_date, shift_type, start_required, end_required)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    start_required=VALUES(start_required),
                    end_required=VALUES(end_required)
                """,
                (
                    requirement.store_id,
                    requirement.target_date,
                    requirement.shift_type.value,
                    requirement.start_required,
                    requirement.end_required,
                ),
            )
