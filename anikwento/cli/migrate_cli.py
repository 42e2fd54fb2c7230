from __future__ import annotations

"""Anikwento schema/config CLI.

Usage:
    python -m anikwento.cli.migrate_cli add-column
    python -m anikwento.cli.migrate_cli add-column --table user_settings --column foo --type "TEXT NULL"
    python -m anikwento.cli.migrate_cli show-columns --table user_settings
    python -m anikwento.cli.migrate_cli --env-file /srv/app/.env check-env

Every command loads the ``.env`` file first; a missing or unloadable file exits
with code 2.
"""

import argparse
import sys
from typing import List, Optional

from anikwento.config import (
    ConfigStore,
    EnvConfigError,
    Settings,
    load_settings,
    missing_keys,
)
from anikwento.db import (
    CUSTOM_VOICE_PREVIEW_URL,
    AddColumn,
    MigrationError,
    connect,
    count_rows,
    list_columns,
    list_tables,
    table_exists,
)
from anikwento.logging_utils import get_logger

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_NO_ENV = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Anikwento schema and config tools")
    parser.add_argument(
        "--env-file", default=None, help="path to the .env file (default: project root .env)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add-column", help="add a column if it is missing")
    add.add_argument("--table", default=CUSTOM_VOICE_PREVIEW_URL.table)
    add.add_argument("--column", default=CUSTOM_VOICE_PREVIEW_URL.column)
    add.add_argument("--type", dest="definition", default=CUSTOM_VOICE_PREVIEW_URL.definition)

    show = sub.add_parser("show-columns", help="list the columns of a table")
    show.add_argument("--table", default=CUSTOM_VOICE_PREVIEW_URL.table)

    check = sub.add_parser("check-env", help="report template keys missing from .env")
    check.add_argument("--template", default=None, help="path to .env.example")

    return parser


def _print_columns(conn, table: str) -> None:
    print(f"All columns in {table}:")
    for name, col_type in list_columns(conn, table):
        print(f"  - {name} ({col_type})")


def _add_column(settings: Settings, args: argparse.Namespace, log) -> int:
    migration = AddColumn(args.table, args.column, args.definition)
    log.info("Connecting to: %s", settings.db_path)
    conn = connect(settings)
    try:
        try:
            added = migration.apply(conn)
        except MigrationError as e:
            log.error("✗ Migration failed: %s", e)
            return EXIT_FAILED

        if added:
            log.info("✓ Column '%s' added successfully.", migration.column)
        else:
            log.info("✓ Column '%s' already exists. Nothing to do.", migration.column)

        print(f"Rows in {migration.table}: {count_rows(conn, migration.table)}")
        _print_columns(conn, migration.table)
    finally:
        conn.close()
    return EXIT_OK


def _show_columns(settings: Settings, args: argparse.Namespace, log) -> int:
    conn = connect(settings)
    try:
        if not table_exists(conn, args.table):
            log.error("✗ %s table not found in this database", args.table)
            print("Available tables:")
            for name in list_tables(conn):
                print(f"  - {name}")
            return EXIT_FAILED
        _print_columns(conn, args.table)
    finally:
        conn.close()
    return EXIT_OK


def _check_env(store: ConfigStore, args: argparse.Namespace, log) -> int:
    try:
        missing = missing_keys(store, args.template)
    except EnvConfigError as e:
        log.error("✗ %s", e)
        return EXIT_FAILED

    if not missing:
        log.info("✓ %s defines every template key.", store.path)
        return EXIT_OK
    print(f"Missing from {store.path}:")
    for key in missing:
        print(f"  - {key}")
    return EXIT_FAILED


def main(argv: Optional[List[str]] = None) -> int:
    """Parse args, load the env file, set up logging and run one command."""
    args = _build_parser().parse_args(argv)

    store = ConfigStore()
    try:
        settings = load_settings(args.env_file, store=store)
    except EnvConfigError as e:
        print(f"✗ {e}", file=sys.stderr)
        return EXIT_NO_ENV

    log = get_logger("anikwento", log_dir=settings.log_dir, debug=settings.app_debug)

    if args.command == "add-column":
        return _add_column(settings, args, log)
    if args.command == "show-columns":
        return _show_columns(settings, args, log)
    return _check_env(store, args, log)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
