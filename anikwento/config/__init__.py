"""Anikwento configuration (public API).

    from anikwento.config import ConfigStore, load_settings

Implementation lives in :mod:`anikwento.config.env` (the ``.env`` loader) and
:mod:`anikwento.config.settings` (typed settings).
"""

from .env import (
    DEFAULT_ENV_FILE,
    ConfigStore,
    EnvConfigError,
    EnvFileNotFoundError,
    default_store,
    missing_keys,
    parse_env_lines,
)
from .settings import Settings, load_settings

__all__ = [
    "DEFAULT_ENV_FILE",
    "ConfigStore",
    "EnvConfigError",
    "EnvFileNotFoundError",
    "Settings",
    "default_store",
    "load_settings",
    "missing_keys",
    "parse_env_lines",
]
