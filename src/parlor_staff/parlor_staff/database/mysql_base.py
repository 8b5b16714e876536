from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (conn, cursor); commit on success, roll back on any error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def in_clause(values: List[Any]) -> str:
    """Placeholders for ``IN (...)``; callers guarantee ``values`` is non-empty."""
    return ", ".join(["%s"] * len(values))


def time_column_minutes(value: Any) -> Optional[int]:
    """Minutes past midnight for a TIME column (time, timedelta or 'HH:MM[:SS]')."""
    if value is None:
        return None
    if isinstance(value, time):
        return value.hour * 60 + value.minute
    if isinstance(value, timedelta):
        return (int(value.total_seconds()) // 60) % 1440
    if isinstance(value, str):
        hh, _, rest = value.strip().partition(":")
        if not rest:
            raise ValueError(f"Invalid TIME value: {value!r}")
        return (int(hh) % 24) * 60 + int(rest[:2])
    raise TypeError(f"Unsupported TIME value type: {type(value)!r}")


def mysql_time_to_hhmm(value: Any) -> str:
    minutes = time_column_minutes(value)
    if minutes is None:
        return ""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
