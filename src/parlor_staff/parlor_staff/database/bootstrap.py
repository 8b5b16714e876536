from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

from werkzeug.security import generate_password_hash

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


_DB_DIRECTIVE = re.compile(r"(?im)^\s*(CREATE\s+DATABASE|USE)\b.*?;\s*$")
# Quoted strings are single tokens, so a ';' inside them never ends a statement.
_SQL_TOKEN = re.compile(r"'(?:\\.|[^'\\])*'|\"(?:\\.|[^\"\\])*\"|;|[^'\";]+|['\"]")


def strip_database_directives(sql: str) -> str:
    """Drop CREATE DATABASE / USE lines; the target database comes from DB_CONFIG."""
    return _DB_DIRECTIVE.sub("", sql)


def split_sql_statements(sql: str) -> Iterator[str]:
    body = "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))
    current: list[str] = []
    for token in _SQL_TOKEN.findall(body):
        if token == ";":
            stmt = "".join(current).strip()
            current = []
            if stmt:
                yield stmt
        else:
            current.append(token)

    stmt = "".join(current).strip()
    if stmt:
        yield stmt


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    ensure_database_exists(conn_factory)
    sql = strip_database_directives(Path(schema_path).read_text(encoding="utf-8"))

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        count = 0
        for stmt in split_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
        logger.info("Applied %d schema statements from %s", count, schema_path)
    finally:
        conn.close()


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()


def ensure_user(
    conn_factory: DatabaseConnection,
    *,
    name: str,
    login_id: str,
    password: str,
    role: str,
    store_name: str,
) -> int:
    """Create or refresh one login account (and its store); returns the user id."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=True)

        cur.execute("SELECT store_id FROM stores WHERE name=%s", (store_name,))
        row = cur.fetchone()
        if row:
            store_id = int(row["store_id"])
        else:
            cur.execute("INSERT INTO stores(name) VALUES(%s)", (store_name,))
            store_id = int(cur.lastrowid)

        password_hash = generate_password_hash(password)
        cur.execute("SELECT user_id FROM users WHERE login_id=%s", (login_id,))
        existing = cur.fetchone()
        if existing:
            cur.execute(
                """
                UPDATE users
                SET name=%s, password_hash=%s, role=%s, store_id=%s, is_active=1
                WHERE login_id=%s
                """,
                (name, password_hash, role, store_id, login_id),
            )
            user_id = int(existing["user_id"])
        else:
            cur.execute(
                """
                INSERT INTO users(name, login_id, password_hash, role, store_id, is_active)
                VALUES(%s,%s,%s,%s,%s,1)
                """,
                (name, login_id, password_hash, role, store_id),
            )
            user_id = int(cur.lastrowid)

        conn.commit()
        logger.info("Ensured user login_id=%r role=%s store=%r", login_id, role, store_name)
        return user_id
    finally:
        conn.close()
