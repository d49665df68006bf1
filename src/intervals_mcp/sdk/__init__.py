"""
Intervals.icu Low-Level SDK.

Thin typed wrapper over the Intervals.icu HTTP API.
Each function maps 1:1 to an endpoint and returns validated pydantic models.
"""

from intervals_mcp.sdk.client import IntervalsClient
from intervals_mcp.sdk.exceptions import (
    IntervalsError,
    IntervalsAPIError,
    EventGuardError,
    PastEventError,
    EventNotFoundError,
)
from intervals_mcp.sdk.schemas import (
    AthleteProfile,
    Activity,
    WellnessEntry,
    Workout,
    Event,
    DateRange,
    CreateEventInput,
    UpdateEventInput,
    CreateWorkoutInput,
)
from intervals_mcp.sdk.types import API_URL, EVENT_CATEGORIES

__all__ = [
    "IntervalsClient",
    "IntervalsError",
    "IntervalsAPIError",
    "EventGuardError",
    "PastEventError",
    "EventNotFoundError",
    "AthleteProfile",
    "Activity",
    "WellnessEntry",
    "Workout",
    "Event",
    "DateRange",
    "CreateEventInput",
    "UpdateEventInput",
    "CreateWorkoutInput",
    "API_URL",
    "EVENT_CATEGORIES",
]
