"""
Shared pytest fixtures for Intervals.icu MCP testing.
"""
from datetime import datetime, timedelta
from unittest.mock import Mock, patch

import pytest

from intervals_mcp.sdk.client import IntervalsClient


ATHLETE_ID = "i123456"


def get_tool_result_text(result):
    """Extract text from tool result.

    FastMCP call_tool returns either a list of TextContent or a tuple
    (list_of_TextContent, metadata_dict) depending on the mcp version.
    """
    if isinstance(result, tuple) and len(result) > 0:
        result = result[0]
    if isinstance(result, list) and len(result) > 0:
        if hasattr(result[0], 'text'):
            return result[0].text
    return str(result)


def local_timestamp(delta: timedelta) -> str:
    """Local YYYY-MM-DDTHH:mm:ss timestamp relative to now."""
    return (datetime.now() + delta).strftime("%Y-%m-%dT%H:%M:%S")


@pytest.fixture
def past_start():
    return local_timestamp(timedelta(days=-2))


@pytest.fixture
def future_start():
    return local_timestamp(timedelta(days=2))


@pytest.fixture
def intervals_client():
    """A real client whose transport is never used directly."""
    return IntervalsClient(athlete_id=ATHLETE_ID, api_key="test-key")


@pytest.fixture
def mock_request(intervals_client):
    """Patch make_request on the shared client; yields the mock."""
    with patch.object(intervals_client, "make_request") as mock_req:
        yield mock_req


@pytest.fixture(autouse=True)
def mock_get_client(intervals_client):
    """Auto-mock client_factory.get_client in all tool modules.

    Yields the mock function (not the client) so tests can set side_effect
    for error scenarios like missing configuration.
    """
    get_client_fn = Mock(return_value=intervals_client)

    modules_to_patch = [
        "intervals_mcp.profile",
        "intervals_mcp.activities",
        "intervals_mcp.wellness",
        "intervals_mcp.workouts",
        "intervals_mcp.events",
    ]

    patchers = []
    for module in modules_to_patch:
        p = patch(f"{module}.get_client", get_client_fn)
        p.start()
        patchers.append(p)

    yield get_client_fn

    for p in patchers:
        p.stop()


def create_test_app(module):
    """Helper to create a FastMCP app with a specific module registered."""
    from mcp.server.fastmcp import FastMCP

    app = FastMCP(f"Test Intervals {module.__name__}")
    app = module.register_tools(app)
    return app
