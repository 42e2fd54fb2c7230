"""
One-time migration: add ``custom_voice_preview_url`` to ``user_settings``.

Safe to re-run; the column is only added when missing.

*** BACK UP the database before running against production! ***
"""

from anikwento.cli.migrate_cli import main

if __name__ == "__main__":
    raise SystemExit(main(["add-column"]))
