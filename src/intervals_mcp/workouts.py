"""
Workout library tools for the Intervals.icu MCP server.
"""

from typing import Annotated, List, Optional

import anyio
from pydantic import Field

from intervals_mcp.client_factory import get_client
from intervals_mcp.sdk import workouts as sdk_workouts
from intervals_mcp.sdk.schemas import CreateWorkoutInput
from intervals_mcp.sdk.types import WORKOUT_SYNTAX_HINT
from intervals_mcp.utils import to_json


def register_tools(app):
    """Register workout library tools with the MCP app."""

    @app.tool()
    async def list_workouts() -> str:
        """
        List all workouts in the athlete's library.

        Returns:
            JSON array of workouts, including their step text in "description"
        """
        client = get_client()
        return to_json(await anyio.to_thread.run_sync(sdk_workouts.get_workouts, client))

    @app.tool()
    async def create_workout(
        name: Annotated[str, Field(description="Workout Name")],
        description: Annotated[
            Optional[str],
            Field(description=f"Workout steps/description text. {WORKOUT_SYNTAX_HINT}"),
        ] = None,
        folder_id: Annotated[Optional[int], Field(description="Folder ID to place the workout in")] = None,
        type: Annotated[Optional[str], Field(description="Sport type (Ride, Run, etc.)")] = None,
        indoor: Optional[bool] = None,
        tags: Optional[List[str]] = None,
    ) -> str:
        """
        Create a new workout in the library.

        Every call creates a new workout; there is no deduplication.

        Returns:
            JSON with the created workout, including its assigned id
        """
        client = get_client()
        workout = CreateWorkoutInput(
            name=name,
            description=description,
            folder_id=folder_id,
            type=type,
            indoor=indoor,
            tags=tags,
        )
        return to_json(await anyio.to_thread.run_sync(sdk_workouts.create_workout, client, workout))

    return app
