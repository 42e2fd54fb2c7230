"""Database glue: connection bootstrap, introspection and column migrations."""

from .core import (
    MigrationError,
    column_exists,
    connect,
    count_rows,
    list_columns,
    list_tables,
    table_exists,
)
from .migrations import CUSTOM_VOICE_PREVIEW_URL, AddColumn, add_column_if_missing

__all__ = [
    "AddColumn",
    "CUSTOM_VOICE_PREVIEW_URL",
    "MigrationError",
    "add_column_if_missing",
    "column_exists",
    "connect",
    "count_rows",
    "list_columns",
    "list_tables",
    "table_exists",
]
