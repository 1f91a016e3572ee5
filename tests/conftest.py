"""Top-level pytest configuration for odinerr."""

import os

import pytest

from odinerr.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate each test from ODINERR_* variables and the cached settings."""
    for key in list(os.environ):
        if key.startswith("ODINERR_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def location_capture_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    """Disable call-site capture for the duration of a test."""
    monkeypatch.setenv("ODINERR_CAPTURE_LOCATION", "false")
    get_settings.cache_clear()
