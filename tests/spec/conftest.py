"""
Live API verification fixtures.

These tests hit the REAL Intervals.icu API to check that response shapes
still match the pydantic schemas. They are read-only and require credentials:

  ATHLETE_ID = Intervals.icu athlete ID (e.g. i12345)
  API_KEY    = Intervals.icu API key

Run: pytest tests/spec/ -v
"""

import os
from datetime import date, timedelta

import pytest

from intervals_mcp.sdk.client import IntervalsClient


@pytest.fixture(scope="session")
def live_client():
    """Skips all live tests if no credentials are available."""
    athlete_id = os.environ.get("ATHLETE_ID")
    api_key = os.environ.get("API_KEY")
    if not athlete_id or not api_key:
        pytest.skip("No Intervals.icu credentials: set ATHLETE_ID and API_KEY")
    return IntervalsClient(athlete_id=athlete_id, api_key=api_key)


@pytest.fixture(scope="session")
def last_month():
    """(oldest, newest) covering the last 30 days."""
    today = date.today()
    return (today - timedelta(days=30)).isoformat(), today.isoformat()
