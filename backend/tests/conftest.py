"""Pytest configuration and fixtures."""

import os
from datetime import datetime, timezone

import pytest

from studytrack.config import get_settings

# Pin day boundaries to UTC during tests by default
os.environ.setdefault("STUDYTRACK_TIMEZONE", "UTC")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Rebuild settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def timezone_env(monkeypatch):
    """Fixture that switches the SRS clock to another zone."""

    def _set(name: str) -> None:
        monkeypatch.setenv("STUDYTRACK_TIMEZONE", name)
        get_settings.cache_clear()

    return _set


@pytest.fixture
def frozen_now():
    """Build a fixed 'now' (UTC, midday unless given) to pass as the clock."""

    def _at(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> datetime:
        return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)

    return _at
