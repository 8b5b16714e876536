from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import AdvancePaymentRepository


class MySQLAdvancePaymentRepository(AdvancePaymentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, *, user_id: int, year_month: str) -> Optional[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT amount FROM advance_payments WHERE user_id=%s AND pay_month=%s",
                (int(user_id), year_month),
            )
            r = fetchone(cur)
            return int(r["amount"]) if r else None

    def save(self, *, user_id: int, year_month: str, amount: int) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO advance_payments(user_id, pay_month, amount)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE amount=VALUES(amount)
                """,
                (int(user_id), year_month, int(amount)),
            )
