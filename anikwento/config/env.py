from __future__ import annotations

"""Environment-file loader for Anikwento.

Reads a plain ``.env`` file of ``KEY=VALUE`` lines once per store and exposes
the values through :meth:`ConfigStore.get`. The parser is intentionally
small:

* ``#`` as the first non-space character marks a full-line comment.
* Lines without ``=`` are ignored (no error).
* The first ``=`` splits key from value; both sides are trimmed.
* One matching pair of ``"`` or ``'`` around the value is removed. No escape
  processing, no interpolation, no multi-line values.

Every parsed pair is also mirrored into the process environment (unless the
store is built with ``mirror_env=False``) so code that reads ``os.environ``
sees the same configuration.

Usage (quick)::

    from anikwento.config import ConfigStore

    store = ConfigStore()
    store.load()                      # project-root .env
    host = store.get("DB_HOST", "localhost")

Legacy call sites can keep using the process-wide helpers::

    from anikwento.config import env
    env.get("DB_NAME", "anikwento")
"""

import logging
import os
import pathlib
import threading
from typing import Dict, Iterable, Iterator, List, MutableMapping, Optional, Tuple, Union

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

ENV_FILENAME = ".env"
TEMPLATE_FILENAME = ".env.example"

# anikwento/config/env.py -> project root
PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[2]
DEFAULT_ENV_FILE = PROJECT_ROOT / ENV_FILENAME
DEFAULT_TEMPLATE_FILE = PROJECT_ROOT / TEMPLATE_FILENAME

_QUOTES = ('"', "'")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------
class EnvConfigError(RuntimeError):
    """Base class for configuration loading problems."""


class EnvFileNotFoundError(EnvConfigError, FileNotFoundError):
    """Raised when the resolved ``.env`` file does not exist."""

    def __init__(self, path: PathLike) -> None:
        self.path = pathlib.Path(path)
        super().__init__(
            f"Environment file not found: {self.path}. "
            f"Create it from the template: cp {TEMPLATE_FILENAME} {ENV_FILENAME}"
        )


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
def _strip_quotes(value: str) -> str:
    """Remove a single matching pair of surrounding quotes, if present."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


def parse_env_lines(lines: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """Yield ``(key, value)`` pairs from ``.env`` lines.

    Comment lines, blank lines and lines without ``=`` produce nothing.
    Duplicate keys are yielded in file order; the caller decides who wins.
    """
    for lineno, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if "=" not in line:
            logger.debug("Ignoring line %d without '=': %r", lineno, stripped)
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        if not key:
            logger.warning("Ignoring line %d with empty key", lineno)
            continue

        yield key, _strip_quotes(value.strip())


def read_env_file(path: PathLike) -> Dict[str, str]:
    """Parse ``path`` into a dict (last duplicate wins).

    Raises :class:`EnvFileNotFoundError` when the file is missing.
    """
    path = pathlib.Path(path)
    if not path.is_file():
        raise EnvFileNotFoundError(path)
    text = path.read_text(encoding="utf-8")
    return dict(parse_env_lines(text.splitlines()))


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------
class ConfigStore:
    """Parse-once, read-many key/value configuration.

    Parameters
    ----------
    environ:
        Mapping that parsed values are mirrored into. Defaults to
        :data:`os.environ`.
    mirror_env:
        Set to False to keep the store private (tests, tooling).

    Notes
    -----
    * :meth:`load` populates the store at most once; later calls are no-ops,
      even with a different path.
    * A lock guards the first load so concurrent first callers of
      :meth:`get` parse the file only once. Reads after that are lock-free.
    """

    def __init__(
        self,
        environ: Optional[MutableMapping[str, str]] = None,
        *,
        mirror_env: bool = True,
    ) -> None:
        self._values: Dict[str, str] = {}
        self._loaded = False
        self._path: Optional[pathlib.Path] = None
        self._lock = threading.Lock()
        self._environ = os.environ if environ is None else environ
        self._mirror_env = mirror_env

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(self, path: Optional[PathLike] = None) -> None:
        """Populate the store from ``path`` (or :data:`DEFAULT_ENV_FILE`)."""
        if self._loaded:
            return

        with self._lock:
            if self._loaded:
                return

            resolved = pathlib.Path(path) if path is not None else DEFAULT_ENV_FILE
            values = read_env_file(resolved)

            if self._mirror_env:
                self._mirror(values, resolved)
            self._values.update(values)

            self._path = resolved
            self._loaded = True

        logger.info("Loaded %d config value(s) from %s", len(values), resolved)

    def _mirror(self, values: Dict[str, str], source: pathlib.Path) -> None:
        """Copy ``values`` into the environ mapping, all or nothing."""
        previous: Dict[str, Optional[str]] = {}
        try:
            for key, value in values.items():
                previous.setdefault(key, self._environ.get(key))
                self._environ[key] = value
        except ValueError as e:
            for key, old in previous.items():
                if old is None:
                    self._environ.pop(key, None)
                else:
                    self._environ[key] = old
            raise EnvConfigError(f"Cannot export {key!r} from {source}: {e}") from e

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value for ``key``, loading the default file on first use."""
        self.load()
        return self._values.get(key, default)

    def get_first(self, *keys: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of the first key present, else ``default``."""
        self.load()
        for key in keys:
            if key in self._values:
                return self._values[key]
        return default

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def path(self) -> Optional[pathlib.Path]:
        """File the store was populated from (None until loaded)."""
        return self._path

    def as_dict(self) -> Dict[str, str]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ConfigStore(loaded={self._loaded}, path={self._path}, keys={len(self._values)})"


# ---------------------------------------------------------------------------
# Template check
# ---------------------------------------------------------------------------
def missing_keys(store: ConfigStore, template_path: Optional[PathLike] = None) -> List[str]:
    """Return keys declared in the ``.env.example`` template but absent from ``store``."""
    template = pathlib.Path(template_path) if template_path is not None else DEFAULT_TEMPLATE_FILE
    if not template.is_file():
        raise EnvConfigError(f"Template file not found: {template}")
    store.load()
    declared = dotenv_values(template, interpolate=False)
    return [key for key in declared if key not in store]


# ---------------------------------------------------------------------------
# Process-wide default store
# ---------------------------------------------------------------------------
_DEFAULT_STORE = ConfigStore()


def default_store() -> ConfigStore:
    """Return the process-wide store used by :func:`load` and :func:`get`."""
    return _DEFAULT_STORE


def load(path: Optional[PathLike] = None) -> None:
    _DEFAULT_STORE.load(path)


def get(key: str, default: Optional[str] = None) -> Optional[str]:
    return _DEFAULT_STORE.get(key, default)
