from __future__ import annotations

"""Conditional schema migrations.

Each migration is a single ``ALTER TABLE ... ADD COLUMN`` that only runs when
the column is missing, so re-running a script is harmless.
"""

import logging
import sqlite3
from dataclasses import dataclass

from .core import MigrationError, check_identifier, column_exists, list_tables, table_exists

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddColumn:
    """Describe one column to add to one table."""

    table: str
    column: str
    definition: str = "TEXT NULL"

    def apply(self, conn: sqlite3.Connection) -> bool:
        return add_column_if_missing(conn, self.table, self.column, self.definition)


# Stores the generated preview URL for a user's custom voice.
CUSTOM_VOICE_PREVIEW_URL = AddColumn("user_settings", "custom_voice_preview_url", "TEXT NULL")


def add_column_if_missing(
    conn: sqlite3.Connection, table: str, column: str, definition: str
) -> bool:
    """Add ``column`` to ``table`` unless it already exists.

    Returns True when the column was added, False when it was already there.
    Raises :class:`MigrationError` if the table is missing or the ALTER fails.
    """
    check_identifier(table)
    check_identifier(column)

    if not table_exists(conn, table):
        available = ", ".join(list_tables(conn)) or "(none)"
        raise MigrationError(f"Table '{table}' not found. Available tables: {available}")

    if column_exists(conn, table, column):
        logger.info("Column '%s.%s' already exists; skipping.", table, column)
        return False

    logger.info("Adding column '%s' to '%s'...", column, table)
    try:
        conn.execute(f"ALTER TABLE {table} ADD COLUMN {column} {definition}")
        conn.commit()
    except sqlite3.Error as e:
        conn.rollback()
        raise MigrationError(f"Error adding column '{table}.{column}': {e}") from e

    logger.info("Column '%s.%s' added.", table, column)
    return True
