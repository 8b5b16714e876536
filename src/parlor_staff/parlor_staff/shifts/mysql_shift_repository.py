from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause, mysql_time_to_hhmm
from .model import Shift, ShiftBreak
from .repository import ShiftRepository

_SELECT = """
    SELECT shift_id, user_id, store_id, work_date, start_time, end_time, memo, special_hourly_wage_id
    FROM shifts
"""


def _to_model(r: dict, breaks: tuple[ShiftBreak, ...]) -> Shift:
    return Shift(
        shift_id=int(r["shift_id"]),
        user_id=int(r["user_id"]),
        work_date=r["work_date"],
        start_time=mysql_time_to_hhmm(r["start_time"]),
        end_time=mysql_time_to_hhmm(r["end_time"]),
        breaks=breaks,
        memo=r.get("memo") or "",
        special_hourly_wage_id=r.get("special_hourly_wage_id"),
        store_id=r.get("store_id"),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _load(self, cur, rows: list[dict]) -> list[Shift]:
        if not rows:
            return []
        ids = [int(r["shift_id"]) for r in rows]
        cur.execute(
            f"""
            SELECT shift_id, start_time, end_time
            FROM shift_breaks
            WHERE shift_id IN ({in_clause(ids)})
            ORDER BY shift_id, sort_order
            """,
            tuple(ids),
        )
        by_shift: dict[int, list[ShiftBreak]] = {}
        for b in fetchall(cur):
            by_shift.setdefault(int(b["shift_id"]), []).append(
                ShiftBreak(start_time=mysql_time_to_hhmm(b["start_time"]), end_time=mysql_time_to_hhmm(b["end_time"]))
            )
        return [_to_model(r, tuple(by_shift.get(int(r["shift_id"]), []))) for r in rows]

    def list_for_user(self, *, user_id: int, start: date, end: date) -> Sequence[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_SELECT} WHERE user_id=%s AND work_date BETWEEN %s AND %s ORDER BY work_date, start_time",
                (int(user_id), start, end),
            )
            return self._load(cur, fetchall(cur))

    def list_for_store(self, *, store_id: int, start: date, end: date) -> Sequence[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_SELECT} WHERE (store_id=%s OR (store_id IS NULL AND user_id IN "
                "(SELECT user_id FROM users WHERE store_id=%s))) "
                "AND work_date BETWEEN %s AND %s ORDER BY work_date, start_time",
                (int(store_id), int(store_id), start, end),
            )
            return self._load(cur, fetchall(cur))

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE shift_id=%s", (int(shift_id),))
            r = fetchone(cur)
            if not r:
                return None
            return self._load(cur, [r])[0]

    @staticmethod
    def _insert_breaks(cur, shift_id: int, breaks: tuple[ShiftBreak, ...]) -> None:
        for idx, b in enumerate(x for x in breaks if not x.is_empty):
            cur.execute(
                "INSERT INTO shift_breaks(shift_id, sort_order, start_time, end_time) VALUES(%s,%s,%s,%s)",
                (shift_id, idx, b.start_time, b.end_time),
            )

    def create(self, shift: Shift) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shifts(user_id, store_id, work_date, start_time, end_time, memo, special_hourly_wage_id)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    shift.user_id,
                    shift.store_id,
                    shift.work_date,
                    shift.start_time,
                    shift.end_time,
                    shift.memo,
                    shift.special_hourly_wage_id,
                ),
            )
            new_id = int(cur.lastrowid)
            self._insert_breaks(cur, new_id, shift.breaks)
            return new_id

    def update(self, shift: Shift) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE shifts
                SET store_id=%s, work_date=%s, start_time=%s, end_time=%s, memo=%s, special_hourly_wage_id=%s
                WHERE shift_id=%s
                """,
                (
                    shift.store_id,
                    shift.work_date,
                    shift.start_time,
                    shift.end_time,
                    shift.memo,
                    shift.special_hourly_wage_id,
                    int(shift.shift_id),
                ),
            )
            changed = cur.rowcount > 0
            cur.execute("DELETE FROM shift_breaks WHERE shift_id=%s", (int(shift.shift_id),))
            self._insert_breaks(cur, int(shift.shift_id), shift.breaks)
            return changed

    def delete(self, *, shift_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM shift_breaks WHERE shift_id=%s", (int(shift_id),))
            cur.execute("DELETE FROM shifts WHERE shift_id=%s", (int(shift_id),))
            return cur.rowcount > 0
