"""
Activity tools for the Intervals.icu MCP server.

Completed sessions: list by date range, or fetch one by ID.
"""

from typing import Annotated

import anyio
from pydantic import Field

from intervals_mcp.client_factory import get_client
from intervals_mcp.sdk import activities as sdk_activities
from intervals_mcp.sdk.types import DATE_PATTERN
from intervals_mcp.utils import to_json


def register_tools(app):
    """Register activity tools with the MCP app."""

    @app.tool()
    async def list_activities(
        oldest: Annotated[str, Field(pattern=DATE_PATTERN, description="Start date (YYYY-MM-DD)")],
        newest: Annotated[str, Field(pattern=DATE_PATTERN, description="End date (YYYY-MM-DD)")],
    ) -> str:
        """
        List activities for the athlete within a date range.

        Both bounds are inclusive. Hidden activities may come back without
        a sport type.

        Returns:
            JSON array of activities (distance in meters, times in seconds)
        """
        client = get_client()
        return to_json(await anyio.to_thread.run_sync(sdk_activities.get_activities, client, oldest, newest))

    @app.tool()
    async def get_activity(
        id: Annotated[str, Field(description="The Activity ID")],
    ) -> str:
        """
        Get details of a specific activity by ID.

        Returns:
            JSON with the activity's summary metrics
        """
        client = get_client()
        return to_json(await anyio.to_thread.run_sync(sdk_activities.get_activity, client, id))

    return app
