"""
Intervals.icu calendar event SDK functions.

Calendar history is never rewritten from here: events that start before
"now" cannot be created, modified or deleted. Update and delete read the
event from Intervals.icu first and judge the freshly read start time, since
the remote store is the only source of truth.

The read-then-act sequence is not atomic. Intervals.icu has no
compare-and-swap, so an event moved into the past by someone else between
the read and the write will still be written.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping, Union

from intervals_mcp.sdk.client import IntervalsClient
from intervals_mcp.sdk.exceptions import EventNotFoundError, PastEventError
from intervals_mcp.sdk.schemas import (
    CreateEventInput,
    DateRange,
    Event,
    EventList,
    UpdateEventInput,
)

logger = logging.getLogger(__name__)


def get_events(client: IntervalsClient, oldest: str, newest: str) -> List[Event]:
    """
    List calendar events (planned workouts, races, notes...) in a date range.

    GET athlete/{id}/events

    Args:
        oldest: Start date in YYYY-MM-DD format
        newest: End date in YYYY-MM-DD format
    """
    date_range = DateRange(oldest=oldest, newest=newest)
    data = client.make_request(
        "GET",
        client.athlete_path("events"),
        operation="get_events",
        params=date_range.model_dump(),
    )
    return EventList.validate_python(data)


def get_event(client: IntervalsClient, event_id: int) -> Event:
    """
    Get a single calendar event.

    GET athlete/{id}/events/{event_id}
    """
    data = client.make_request(
        "GET",
        client.athlete_path("events", event_id),
        operation="get_event",
    )
    if not data:
        raise EventNotFoundError("Event not found")
    return Event.model_validate(data)


def create_event(
    client: IntervalsClient, event: Union[CreateEventInput, Mapping]
) -> Event:
    """
    Create a calendar event. Its start must be in the future.

    POST athlete/{id}/events

    The date check happens before any request is sent.

    Raises:
        PastEventError: If start_date_local is before now
    """
    if not isinstance(event, CreateEventInput):
        event = CreateEventInput.model_validate(dict(event))

    if is_in_past(event.start_date_local):
        logger.info("Refusing to create event at %s: in the past", event.start_date_local)
        raise PastEventError("Cannot create events in the past.")

    data = client.make_request(
        "POST",
        client.athlete_path("events"),
        operation="create_event",
        json_data=event.to_payload(),
    )
    return Event.model_validate(data)


def update_event(
    client: IntervalsClient, event_id: int, patch: Mapping[str, Any]
) -> Event:
    """
    Update a future calendar event with a partial patch.

    GET then PUT athlete/{id}/events/{event_id}

    Args:
        event_id: Event ID
        patch: Fields to change; fields not supplied are left untouched

    Raises:
        EventNotFoundError: If the event lookup returns nothing
        PastEventError: If the stored event starts before now
    """
    update = UpdateEventInput.model_validate({**dict(patch), "id": event_id})

    existing = _fetch_event_for_guard(client, event_id, "update")
    if is_in_past(existing.start_date_local):
        logger.info("Refusing to update event %s: starts in the past", event_id)
        raise PastEventError("Cannot modify past events.")

    data = client.make_request(
        "PUT",
        client.athlete_path("events", event_id),
        operation="update_event",
        json_data=update.to_payload(),
    )
    return Event.model_validate(data)


def delete_event(client: IntervalsClient, event_id: int) -> Dict[str, Any]:
    """
    Delete a future calendar event.

    GET then DELETE athlete/{id}/events/{event_id}

    Returns:
        {"success": True, "id": event_id}

    Raises:
        EventNotFoundError: If the event lookup returns nothing
        PastEventError: If the stored event starts before now
    """
    existing = _fetch_event_for_guard(client, event_id, "delete")
    if is_in_past(existing.start_date_local):
        logger.info("Refusing to delete event %s: starts in the past", event_id)
        raise PastEventError("Cannot delete past events.")

    client.make_request(
        "DELETE",
        client.athlete_path("events", event_id),
        operation="delete_event",
    )
    return {"success": True, "id": event_id}


def is_in_past(start_date_local: str) -> bool:
    """True if the timestamp is strictly before the current instant.

    Naive timestamps (the Intervals.icu local format) are compared with local
    wall-clock time; timestamps with an offset are compared in that offset.
    No grace window.

    Raises:
        ValueError: If the timestamp is not ISO-8601
    """
    start = datetime.fromisoformat(start_date_local)
    now = datetime.now(start.tzinfo) if start.tzinfo else datetime.now()
    return start < now


def _fetch_event_for_guard(client: IntervalsClient, event_id: int, action: str) -> Event:
    """Read the current state of an event before mutating it.

    Transport errors propagate unchanged; an empty answer is "not found".
    """
    data = client.make_request(
        "GET",
        client.athlete_path("events", event_id),
        operation=f"fetch_event_for_{action}-{event_id}",
    )
    if not data:
        raise EventNotFoundError("Event not found")
    return Event.model_validate(data)
