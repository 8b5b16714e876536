from __future__ import annotations

from typing import Iterable, Optional, Sequence

import mysql.connector

from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import SpecialHourlyWage
from .repository import SpecialWageRepository


def _to_model(r: dict) -> SpecialHourlyWage:
    return SpecialHourlyWage(
        special_wage_id=int(r["special_wage_id"]),
        label=r["label"],
        hourly_wage=int(r["hourly_wage"]),
    )


class MySQLSpecialWageRepository(SpecialWageRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[SpecialHourlyWage]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT special_wage_id, label, hourly_wage FROM special_hourly_wages ORDER BY special_wage_id")
            return [_to_model(r) for r in fetchall(cur)]

    def get_by_id(self, special_wage_id: int) -> Optional[SpecialHourlyWage]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT special_wage_id, label, hourly_wage FROM special_hourly_wages WHERE special_wage_id=%s",
                (int(special_wage_id),),
            )
            r = fetchone(cur)
            return _to_model(r) if r else None

    def get_by_label(self, label: str) -> Optional[SpecialHourlyWage]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT special_wage_id, label, hourly_wage FROM special_hourly_wages WHERE label=%s",
                (label,),
            )
            r = fetchone(cur)
            return _to_model(r) if r else None

    def list_by_ids(self, ids: Iterable[int]) -> Sequence[SpecialHourlyWage]:
        wanted = sorted({int(i) for i in ids})
        if not wanted:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT special_wage_id, label, hourly_wage
                FROM special_hourly_wages
                WHERE special_wage_id IN ({in_clause(wanted)})
                """,
                tuple(wanted),
            )
            return [_to_model(r) for r in fetchall(cur)]

    def create(self, *, label: str, hourly_wage: int) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO special_hourly_wages(label, hourly_wage) VALUES(%s,%s)",
                    (label, int(hourly_wage)),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError:
            # Lost a race with a concurrent insert of the same label.
            raise ValidationError("label already exists", field="label")

    def delete(self, *, special_wage_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM special_hourly_wages WHERE special_wage_id=%s", (int(special_wage_id),))
            return cur.rowcount > 0
