from __future__ import annotations

"""Runtime settings for Anikwento.

Resolves a typed :class:`Settings` object from a loaded
:class:`~anikwento.config.env.ConfigStore` so the rest of the codebase reads
one object instead of scattering ``get()`` calls around.

Database keys fall back to the Railway-provided ``MYSQL*`` names when the
``DB_*`` variant is absent.
"""

import pathlib
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .env import ConfigStore, PathLike

_TRUTHY = {"1", "true", "t", "yes", "y", "on"}


# ---------------------------------------------------------------------------
# Settings Dataclass
# ---------------------------------------------------------------------------
@dataclass(slots=True)
class Settings:
    """Resolved runtime configuration."""

    db_name: str = "anikwento"
    db_path: str = "data/anikwento.db"
    log_dir: str = "logs"
    app_name: str = "Anikwento"
    app_env: str = "production"
    app_debug: bool = False

    @classmethod
    def from_store(cls, store: ConfigStore) -> "Settings":
        """Build settings from ``store`` (loads it with the default path if needed)."""
        s = cls()

        # Database -------------------------------------------------------------
        s.db_name = store.get_first("DB_NAME", "MYSQLDATABASE", default=s.db_name)
        s.db_path = store.get("DB_PATH", f"data/{s.db_name}.db")

        # Logs -----------------------------------------------------------------
        s.log_dir = store.get("LOG_DIR", s.log_dir)

        # App ------------------------------------------------------------------
        s.app_name = store.get("APP_NAME", s.app_name)
        s.app_env = store.get("APP_ENV", s.app_env)
        s.app_debug = _as_bool(store.get("APP_DEBUG"), s.app_debug)

        return s

    def ensure_dirs(self) -> None:
        """Create the database parent directory and the log directory."""
        pathlib.Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        pathlib.Path(self.log_dir).mkdir(parents=True, exist_ok=True)

    def asdict(self) -> Dict[str, Any]:  # convenience for logging
        return asdict(self)


def _as_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def load_settings(
    env_file: Optional[PathLike] = None,
    store: Optional[ConfigStore] = None,
) -> Settings:
    """Public loader: load ``store`` (a fresh one if omitted) and return :class:`Settings`.

    Raises :class:`~anikwento.config.env.EnvFileNotFoundError` if the env file
    is missing.
    """
    if store is None:
        store = ConfigStore()
    store.load(env_file)
    settings = Settings.from_store(store)
    settings.ensure_dirs()
    return settings
