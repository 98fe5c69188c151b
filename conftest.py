"""Root conftest for pytest configuration and shared fixtures.

This conftest is loaded before both testpaths (tests/ and mixpanel_ingest/),
making its fixtures available to centralized tests AND colocated tests.
"""

import os
import time
from datetime import datetime, timezone

import pytest

# ---------------------------------------------------------------------------
# Environment variables — must be set before Settings are instantiated
# Uses setdefault so real env vars (CI) are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("MIXPANEL_TOKEN", "e3bc4100330c35722740fb8c6f5abddc")

TOKEN = "e3bc4100330c35722740fb8c6f5abddc"
BASE_URL = "https://api.example.com"
NOW = datetime(2024, 3, 15, 9, 0, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Shared values
# ---------------------------------------------------------------------------


@pytest.fixture
def token() -> str:
    """Project token used by every test client."""
    return TOKEN


@pytest.fixture
def base_url() -> str:
    """API base URL used by every test client."""
    return BASE_URL


@pytest.fixture
def now() -> datetime:
    """Frozen current time returned by test clocks."""
    return NOW


@pytest.fixture
def utc_local_time(monkeypatch):
    """Pin the process local timezone to UTC for naive-datetime tests."""
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


# ---------------------------------------------------------------------------
# Shared fake fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_transport():
    """Fake Transport that records requests and answers success."""
    from mixpanel_ingest.adapters.transport.fake import FakeTransport

    return FakeTransport()


@pytest.fixture
def client(fake_transport, token, base_url, now):
    """Mixpanel client wired to the fake transport and a frozen clock."""
    from mixpanel_ingest.client import Mixpanel

    return Mixpanel(token, base_url, transport=fake_transport, clock=lambda: now)
