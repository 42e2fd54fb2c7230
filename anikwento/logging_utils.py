from __future__ import annotations

"""Centralized logging setup for Anikwento scripts.

Library modules log through ``logging.getLogger(__name__)`` under the
``anikwento`` namespace and never attach handlers themselves. Entry points
(CLI, one-shot migration scripts) call :func:`get_logger` once; the loader and
migration messages then propagate up to its handlers.

``APP_DEBUG`` switches the whole tree to DEBUG, which also surfaces the
loader's "ignored line" messages on the console.
"""

import logging
import logging.handlers
import pathlib
from typing import Dict, Optional

_LOGGER_CACHE: Dict[str, logging.Logger] = {}

FILE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
CONSOLE_FORMAT = "%(message)s"
DEBUG_CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"

LOG_MAX_BYTES = 5_000_000
LOG_BACKUPS = 5


def _file_handler(log_path: pathlib.Path, level: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def _console_handler(level: int, debug: bool) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT if debug else CONSOLE_FORMAT))
    return handler


def get_logger(
    name: str = "anikwento",
    log_dir: Optional[str] = None,
    *,
    debug: bool = False,
) -> logging.Logger:
    """Return the ``name`` logger with file + console handlers attached once.

    The file is ``{log_dir}/{name}.log`` (``logs/`` when omitted), rotated at
    5MB with five backups. Later calls return the cached logger unchanged,
    whatever arguments they pass.
    """
    cached = _LOGGER_CACHE.get(name)
    if cached is not None:
        return cached

    logger = logging.getLogger(name)
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    if not logger.handlers:
        directory = pathlib.Path(log_dir or "logs")
        directory.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_file_handler(directory / f"{name}.log", level))
        logger.addHandler(_console_handler(level, debug))

    _LOGGER_CACHE[name] = logger
    return logger


def reset_logger(name: str = "anikwento") -> None:
    """Detach and close handlers added by :func:`get_logger` (used by tests)."""
    logger = _LOGGER_CACHE.pop(name, None) or logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
