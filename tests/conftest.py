import os
import sys
from pathlib import Path

import pytest

# Ensure project root is importable when pytest runs from elsewhere.
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from anikwento.logging_utils import reset_logger


@pytest.fixture(autouse=True)
def isolated_environ():
    """Restore os.environ after each test; the loader mirrors values into it."""
    saved = dict(os.environ)
    yield
    os.environ.clear()
    os.environ.update(saved)


@pytest.fixture(autouse=True)
def _reset_cli_logger():
    yield
    reset_logger("anikwento")


@pytest.fixture
def write_env(tmp_path):
    """Write ``content`` to a file under tmp_path and return its path."""

    def _write(content: str, name: str = ".env") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
