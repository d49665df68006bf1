"""
Calendar tools for the Intervals.icu MCP server.

Planned workouts, races and notes. Only future events can be created,
updated or deleted; past calendar entries are read-only.
"""

from typing import Annotated, Optional

import anyio
from pydantic import Field

from intervals_mcp.client_factory import get_client
from intervals_mcp.sdk import events as sdk_events
from intervals_mcp.sdk.schemas import CreateEventInput
from intervals_mcp.sdk.types import (
    DATE_PATTERN,
    LOCAL_DATETIME_PATTERN,
    WORKOUT_SYNTAX_HINT,
    EventCategory,
)
from intervals_mcp.utils import to_json


_DESCRIPTION_HELP = (
    f"Description/Notes. If category=WORKOUT, this {WORKOUT_SYNTAX_HINT} "
    "Otherwise, it is free text."
)


def register_tools(app):
    """Register calendar event tools with the MCP app."""

    @app.tool()
    async def list_events(
        oldest: Annotated[str, Field(pattern=DATE_PATTERN, description="Start date (YYYY-MM-DD)")],
        newest: Annotated[str, Field(pattern=DATE_PATTERN, description="End date (YYYY-MM-DD)")],
    ) -> str:
        """
        List calendar events (planned workouts, notes, races, etc.) within a date range.

        Returns:
            JSON array of events. "category" may hold values beyond the
            documented set.
        """
        client = get_client()
        return to_json(await anyio.to_thread.run_sync(sdk_events.get_events, client, oldest, newest))

    @app.tool()
    async def get_event(
        id: Annotated[int, Field(description="Event ID")],
    ) -> str:
        """
        Get a single calendar event by ID.

        Returns:
            JSON with the event
        """
        client = get_client()
        return to_json(await anyio.to_thread.run_sync(sdk_events.get_event, client, id))

    @app.tool()
    async def create_event(
        start_date_local: Annotated[
            str,
            Field(pattern=LOCAL_DATETIME_PATTERN, description="Start DateTime (ISO-8601 Local, YYYY-MM-DDTHH:mm:ss)"),
        ],
        name: Optional[str] = None,
        category: Optional[EventCategory] = None,
        description: Annotated[Optional[str], Field(description=_DESCRIPTION_HELP)] = None,
        type: Annotated[Optional[str], Field(description="Sport type (Ride, Run, etc.)")] = None,
    ) -> str:
        """
        Create a new event on the calendar (must be in the future).

        Returns:
            JSON with the created event, including its assigned id
        """
        client = get_client()
        event = CreateEventInput(
            start_date_local=start_date_local,
            name=name,
            category=category,
            description=description,
            type=type,
        )
        return to_json(await anyio.to_thread.run_sync(sdk_events.create_event, client, event))

    @app.tool()
    async def update_event(
        id: Annotated[int, Field(description="Event ID")],
        start_date_local: Annotated[
            Optional[str],
            Field(pattern=LOCAL_DATETIME_PATTERN, description="New start DateTime (YYYY-MM-DDTHH:mm:ss)"),
        ] = None,
        name: Optional[str] = None,
        description: Annotated[Optional[str], Field(description=_DESCRIPTION_HELP)] = None,
        category: Optional[EventCategory] = None,
        type: Optional[str] = None,
    ) -> str:
        """
        Update a future event on the calendar.

        Only the fields provided are changed. Events that have already
        started cannot be modified.

        Returns:
            JSON with the updated event
        """
        client = get_client()
        patch = {
            key: value
            for key, value in (
                ("start_date_local", start_date_local),
                ("name", name),
                ("description", description),
                ("category", category),
                ("type", type),
            )
            if value is not None
        }
        return to_json(await anyio.to_thread.run_sync(sdk_events.update_event, client, id, patch))

    @app.tool()
    async def delete_future_event(
        id: Annotated[int, Field(description="Event ID")],
    ) -> str:
        """
        Delete a future event from the calendar.

        Events that have already started cannot be deleted.

        Returns:
            JSON confirmation with the deleted event id
        """
        client = get_client()
        return to_json(await anyio.to_thread.run_sync(sdk_events.delete_event, client, id))

    return app
