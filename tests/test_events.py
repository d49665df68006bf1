"""
Tests for the Intervals.icu calendar tools.

Detailed guard behavior is covered in tests/sdk/test_events.py.
"""
import json

import pytest
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from intervals_mcp import events
from tests.conftest import get_tool_result_text


@pytest.fixture
def app_with_events():
    app = FastMCP("Test Intervals Events")
    app = events.register_tools(app)
    return app


@pytest.mark.asyncio
async def test_list_events_strips_nulls(app_with_events, mock_request):
    mock_request.return_value = [
        {"id": 1, "start_date_local": "2026-02-10T00:00:00", "category": "WORKOUT", "color": None},
        {"id": 2, "start_date_local": "2026-02-12T00:00:00", "category": "SOMETHING_NEW"},
    ]

    result = await app_with_events.call_tool(
        "list_events", {"oldest": "2026-02-09", "newest": "2026-02-15"},
    )
    text = get_tool_result_text(result)
    data = json.loads(text)

    assert data == [
        {"id": 1, "start_date_local": "2026-02-10T00:00:00", "category": "WORKOUT"},
        {"id": 2, "start_date_local": "2026-02-12T00:00:00", "category": "SOMETHING_NEW"},
    ]
    assert "null" not in text


@pytest.mark.asyncio
async def test_list_events_rejects_bad_date(app_with_events, mock_request):
    with pytest.raises(ToolError):
        await app_with_events.call_tool(
            "list_events", {"oldest": "Feb 9", "newest": "2026-02-15"},
        )
    mock_request.assert_not_called()


@pytest.mark.asyncio
async def test_get_event(app_with_events, mock_request):
    mock_request.return_value = {"id": 4, "start_date_local": "2026-02-10T00:00:00", "name": "Race"}

    result = await app_with_events.call_tool("get_event", {"id": 4})
    data = json.loads(get_tool_result_text(result))

    assert data["name"] == "Race"


@pytest.mark.asyncio
async def test_create_event_future(app_with_events, mock_request, future_start):
    mock_request.return_value = {"id": 123, "start_date_local": future_start, "name": "Future Workout", "description": None}

    result = await app_with_events.call_tool(
        "create_event",
        {"start_date_local": future_start, "name": "Future Workout", "category": "WORKOUT"},
    )
    data = json.loads(get_tool_result_text(result))

    assert data == {"id": 123, "start_date_local": future_start, "name": "Future Workout"}
    assert mock_request.call_args.kwargs["json_data"] == {
        "start_date_local": future_start,
        "name": "Future Workout",
        "category": "WORKOUT",
    }


@pytest.mark.asyncio
async def test_create_event_past_rejected(app_with_events, mock_request, past_start):
    with pytest.raises(ToolError) as exc_info:
        await app_with_events.call_tool(
            "create_event", {"start_date_local": past_start, "name": "Past Workout"},
        )

    assert "Cannot create events in the past" in str(exc_info.value)
    mock_request.assert_not_called()


@pytest.mark.asyncio
async def test_create_event_unknown_category_rejected(app_with_events, mock_request, future_start):
    with pytest.raises(ToolError):
        await app_with_events.call_tool(
            "create_event", {"start_date_local": future_start, "category": "PARTY"},
        )
    mock_request.assert_not_called()


@pytest.mark.asyncio
async def test_update_event_sends_only_given_fields(app_with_events, mock_request, future_start):
    existing = {"id": 2, "start_date_local": future_start, "name": "Old", "type": "Ride"}
    mock_request.side_effect = [existing, {**existing, "name": "New"}]

    result = await app_with_events.call_tool("update_event", {"id": 2, "name": "New"})
    data = json.loads(get_tool_result_text(result))

    assert data["name"] == "New"
    assert mock_request.call_args.kwargs["json_data"] == {"name": "New"}


@pytest.mark.asyncio
async def test_update_past_event_rejected(app_with_events, mock_request, past_start):
    mock_request.return_value = {"id": 1, "start_date_local": past_start}

    with pytest.raises(ToolError) as exc_info:
        await app_with_events.call_tool("update_event", {"id": 1, "name": "New"})

    assert "Cannot modify past events" in str(exc_info.value)
    assert mock_request.call_count == 1


@pytest.mark.asyncio
async def test_delete_future_event(app_with_events, mock_request, future_start):
    mock_request.side_effect = [{"id": 7, "start_date_local": future_start}, None]

    result = await app_with_events.call_tool("delete_future_event", {"id": 7})
    data = json.loads(get_tool_result_text(result))

    assert data == {"success": True, "id": 7}


@pytest.mark.asyncio
async def test_delete_past_event_rejected(app_with_events, mock_request, past_start):
    mock_request.return_value = {"id": 1, "start_date_local": past_start}

    with pytest.raises(ToolError) as exc_info:
        await app_with_events.call_tool("delete_future_event", {"id": 1})

    assert "Cannot delete past events" in str(exc_info.value)
    assert mock_request.call_count == 1


def test_event_tools_registered(app_with_events):
    tools = app_with_events._tool_manager._tools
    tool_names = list(tools.keys())

    expected_tools = [
        "list_events",
        "get_event",
        "create_event",
        "update_event",
        "delete_future_event",
    ]

    for tool_name in expected_tools:
        assert tool_name in tool_names, f"Tool {tool_name} not registered"
