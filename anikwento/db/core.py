from __future__ import annotations

"""SQLite connection bootstrap and schema introspection helpers."""

import pathlib
import re
import sqlite3
from typing import List, Tuple, Union

from anikwento.config import Settings

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class MigrationError(RuntimeError):
    """Raised when a schema change cannot be applied."""


def check_identifier(name: str) -> str:
    """Return ``name`` if it is a plain SQL identifier, else raise MigrationError."""
    if not _IDENTIFIER.match(name or ""):
        raise MigrationError(f"Invalid SQL identifier: {name!r}")
    return name


def connect(target: Union[Settings, str, pathlib.Path]) -> sqlite3.Connection:
    """Open a connection to ``target`` (a Settings object or a database path)."""
    db_path = target.db_path if isinstance(target, Settings) else str(target)
    if db_path != ":memory:":
        pathlib.Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    return sqlite3.connect(db_path)


def list_tables(conn: sqlite3.Connection) -> List[str]:
    cur = conn.execute(
        "SELECT name FROM sqlite_master "
        "WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
    )
    return [row[0] for row in cur.fetchall()]


def table_exists(conn: sqlite3.Connection, table: str) -> bool:
    cur = conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type='table' AND name=?", (table,)
    )
    return cur.fetchone() is not None


def list_columns(conn: sqlite3.Connection, table: str) -> List[Tuple[str, str]]:
    """Return ``(name, declared_type)`` for every column of ``table``."""
    cur = conn.execute(f"PRAGMA table_info({check_identifier(table)})")
    return [(row[1], row[2]) for row in cur.fetchall()]


def column_exists(conn: sqlite3.Connection, table: str, column: str) -> bool:
    wanted = column.lower()
    return any(name.lower() == wanted for name, _ in list_columns(conn, table))


def count_rows(conn: sqlite3.Connection, table: str) -> int:
    cur = conn.execute(f"SELECT COUNT(*) FROM {check_identifier(table)}")
    return cur.fetchone()[0]
