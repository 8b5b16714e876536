from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ..core.enums import GameType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import GameResult, SimpleBatch
from .repository import GameResultRepository, SimpleBatchRepository

_COLUMNS = """
    result_id, user_id, game_type, played_at, place, base_income, tip_count,
    tip_income, other_income, total_income, note, simple_batch_id, store_id,
    is_final_record
"""


def _to_model(r: dict) -> GameResult:
    return GameResult(
        result_id=int(r["result_id"]),
        user_id=int(r["user_id"]),
        game_type=GameType(r["game_type"]),
        played_at=r["played_at"],
        place=int(r["place"]) if r.get("place") is not None else None,
        base_income=int(r["base_income"]),
        tip_count=int(r["tip_count"]),
        tip_income=int(r["tip_income"]),
        other_income=int(r["other_income"]),
        total_income=int(r["total_income"]),
        note=r.get("note") or "",
        simple_batch_id=r.get("simple_batch_id"),
        store_id=int(r["store_id"]) if r.get("store_id") is not None else None,
        is_final_record=bool(r.get("is_final_record")),
    )


_INSERT = """
    INSERT INTO game_results(
        user_id, game_type, played_at, place, base_income, tip_count,
        tip_income, other_income, total_income, note, simple_batch_id,
        store_id, is_final_record
    ) VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
"""


def _values(result: GameResult) -> tuple:
    return (
        result.user_id,
        result.game_type.value,
        result.played_at,
        result.place,
        result.base_income,
        result.tip_count,
        result.tip_income,
        result.other_income,
        result.total_income,
        result.note,
        result.simple_batch_id,
        result.store_id,
        1 if result.is_final_record else 0,
    )


class MySQLGameResultRepository(GameResultRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(
        self,
        *,
        start: date,
        end: date,
        user_id: Optional[int] = None,
        game_type: Optional[GameType] = None,
    ) -> Sequence[GameResult]:
        sql = f"SELECT {_COLUMNS} FROM game_results WHERE played_at >= %s AND played_at < %s"
        params: list = [
            datetime.combine(start, datetime.min.time()),
            datetime.combine(end + timedelta(days=1), datetime.min.time()),
        ]
        if user_id is not None:
            sql += " AND user_id=%s"
            params.append(int(user_id))
        if game_type is not None:
            sql += " AND game_type=%s"
            params.append(game_type.value)
        sql += " ORDER BY played_at DESC, result_id DESC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_model(r) for r in fetchall(cur)]

    def get_by_id(self, result_id: int) -> Optional[GameResult]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM game_results WHERE result_id=%s", (int(result_id),))
            r = fetchone(cur)
            return _to_model(r) if r else None

    def create(self, result: GameResult) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_INSERT, _values(result))
            return int(cur.lastrowid)

    def update(self, result: GameResult) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE game_results
                SET user_id=%s, game_type=%s, played_at=%s, place=%s, base_income=%s,
                    tip_count=%s, tip_income=%s, other_income=%s, total_income=%s,
                    note=%s, simple_batch_id=%s, store_id=%s, is_final_record=%s
                WHERE result_id=%s
                """,
                _values(result) + (int(result.result_id),),
            )
            return cur.rowcount > 0

    def delete(self, *, result_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM game_results WHERE result_id=%s", (int(result_id),))
            return cur.rowcount > 0

    def delete_by_batch(self, *, batch_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM game_results WHERE simple_batch_id=%s", (batch_id,))
            return int(cur.rowcount)


class MySQLSimpleBatchRepository(SimpleBatchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, batch: SimpleBatch) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO simple_batches(batch_id, user_id, store_id, played_at, finalized) VALUES(%s,%s,%s,%s,%s)",
                (batch.batch_id, batch.user_id, batch.store_id, batch.played_at, 1 if batch.finalized else 0),
            )

    def get(self, *, batch_id: str) -> Optional[SimpleBatch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT batch_id, user_id, store_id, played_at, finalized FROM simple_batches WHERE batch_id=%s",
                (batch_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return SimpleBatch(
                batch_id=r["batch_id"],
                user_id=int(r["user_id"]),
                store_id=int(r["store_id"]),
                played_at=r["played_at"],
                finalized=bool(r["finalized"]),
            )

    def finalize(self, *, batch_id: str, final: GameResult) -> Optional[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE simple_batches SET finalized=1 WHERE batch_id=%s AND finalized=0",
                (batch_id,),
            )
            if cur.rowcount == 0:
                return None
            # Same transaction: a failed insert rolls the flag back too.
            cur.execute(_INSERT, _values(final))
            return int(cur.lastrowid)

    def delete(self, *, batch_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM simple_batches WHERE batch_id=%s", (batch_id,))
            return cur.rowcount > 0
