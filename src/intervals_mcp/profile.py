"""
Athlete profile tool for the Intervals.icu MCP server.
"""

import anyio

from intervals_mcp.client_factory import get_client
from intervals_mcp.sdk import athlete as sdk_athlete
from intervals_mcp.utils import to_json


def register_tools(app):
    """Register profile tools with the MCP app."""

    @app.tool()
    async def get_athlete_profile() -> str:
        """
        Get the profile of the configured athlete.

        Returns name, location, timezone and locale settings.

        Returns:
            JSON with the athlete profile
        """
        client = get_client()
        return to_json(await anyio.to_thread.run_sync(sdk_athlete.get_athlete_profile, client))

    return app
