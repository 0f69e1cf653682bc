import os
import sys
from pathlib import Path

import pytest

# Ensure `src` is on sys.path for tests when not installed editable.
SRC = Path(__file__).resolve().parent.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from time_ms_conversions.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Drop TIME_MS_* variables and the cached settings around every test."""
    for key in list(os.environ):
        if key.startswith("TIME_MS_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def local_zone(monkeypatch):
    """Return a setter pinning the "local" zone to an IANA name."""

    def _set(name: str) -> None:
        monkeypatch.setenv("TIME_MS_LOCAL_TIMEZONE", name)
        get_settings.cache_clear()

    return _set
