"""
Wellness tool for the Intervals.icu MCP server.
"""

from typing import Annotated

import anyio
from pydantic import Field

from intervals_mcp.client_factory import get_client
from intervals_mcp.sdk import wellness as sdk_wellness
from intervals_mcp.sdk.types import DATE_PATTERN
from intervals_mcp.utils import to_json


def register_tools(app):
    """Register wellness tools with the MCP app."""

    @app.tool()
    async def list_wellness(
        oldest: Annotated[str, Field(pattern=DATE_PATTERN, description="Start date (YYYY-MM-DD)")],
        newest: Annotated[str, Field(pattern=DATE_PATTERN, description="End date (YYYY-MM-DD)")],
    ) -> str:
        """
        List wellness data (sleep, HRV, resting HR, fatigue, fitness/fatigue load, etc.)
        for the athlete within a date range.

        Returns:
            JSON array with one entry per day, keyed by date in "id"
        """
        client = get_client()
        return to_json(await anyio.to_thread.run_sync(sdk_wellness.get_wellness, client, oldest, newest))

    return app
