"""
Pytest configuration and shared fixtures for testing.

Provides reusable test fixtures:
- stockholm: The Europe/Stockholm timezone the calendar is built for
- at: Factory for local datetimes in Stockholm
- test_client: FastAPI TestClient for API integration tests
"""

import datetime
import sys
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest
from fastapi.testclient import TestClient

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# ruff: noqa: E402
from daykind.main import app

STOCKHOLM = ZoneInfo("Europe/Stockholm")


@pytest.fixture
def stockholm():
    """Europe/Stockholm timezone."""
    return STOCKHOLM


@pytest.fixture
def at():
    """
    Build a local datetime in Stockholm.

    Usage:
        at(2020, 9, 18)           # midnight
        at(2020, 9, 21, 13, 15)   # 13:15
    """

    def _at(year, month, day, hour=0, minute=0, second=0):
        return datetime.datetime(year, month, day, hour, minute, second, tzinfo=STOCKHOLM)

    return _at


@pytest.fixture(scope="function")
def test_client(monkeypatch):
    """
    Create FastAPI TestClient with a clean environment.

    Yields:
        TestClient: FastAPI test client for API testing
    """
    monkeypatch.delenv("DAYKIND_TIMEZONE", raising=False)
    monkeypatch.delenv("DAYKIND_MAX_SPAN_DAYS", raising=False)

    with TestClient(app) as client:
        yield client
