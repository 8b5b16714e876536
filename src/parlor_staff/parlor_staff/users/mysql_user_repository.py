from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import User
from .repository import UserRepository

_SELECT = "SELECT user_id, name, login_id, password_hash, role, store_id, is_active FROM users"


def _to_model(row: dict) -> User:
    return User(
        user_id=int(row["user_id"]),
        name=row["name"],
        login_id=row["login_id"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        store_id=row.get("store_id"),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE user_id=%s", (int(user_id),))
            row = fetchone(cur)
            return _to_model(row) if row else None

    def get_by_login_id(self, login_id: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE login_id=%s", (login_id,))
            row = fetchone(cur)
            return _to_model(row) if row else None

    def list_by_store(self, store_id: int) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE store_id=%s AND is_active=1 ORDER BY user_id", (int(store_id),))
            return [_to_model(r) for r in fetchall(cur)]

    def names_for(self, user_ids: Iterable[int]) -> dict[int, str]:
        wanted = sorted({int(i) for i in user_ids})
        if not wanted:
            return {}
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT user_id, name FROM users WHERE user_id IN ({in_clause(wanted)})", tuple(wanted))
            return {int(r["user_id"]): r["name"] for r in fetchall(cur)}
