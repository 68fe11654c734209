"""Pytest configuration and fixtures for Momento tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so momento can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def en_us():
    """The built-in en-us locale."""
    from momento.locale import EN_US

    return EN_US


@pytest.fixture
def en_gb():
    """The built-in en-gb locale."""
    from momento.locale import EN_GB

    return EN_GB


@pytest.fixture
def utc():
    from momento.units import Timezone

    return Timezone.utc()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test against default settings."""
    from momento.config import reset_settings

    monkeypatch.delenv("MOMENTO_DEFAULT_LOCALE", raising=False)
    monkeypatch.delenv("MOMENTO_MAX_MACRO_PASSES", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def eastern_host(monkeypatch):
    """Run with the host clock in US Eastern time (EST/EDT)."""
    import time

    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "EST+05EDT,M3.2.0,M11.1.0")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
