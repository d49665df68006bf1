"""
Pydantic models for Intervals.icu resources and tool inputs.

Resource models are "open records": declared fields are validated strictly
(no string-to-number coercion), undeclared fields are carried through
unchanged so upstream additions never break parsing. Every optional field
accepts a missing key, an explicit null, or a correctly typed value.

Input models are closed (extra fields rejected) and enforce the literal
date formats the remote API expects.
"""

from datetime import datetime
from typing import Annotated, Any, List, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter

from intervals_mcp.sdk.types import DATE_PATTERN, LOCAL_DATETIME_PATTERN, EventCategory


def _integral_float_to_int(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# JSON numbers carry no int/float distinction: 3600.0 is a valid integer.
# Strings and fractional floats still fail the strict int check.
JsonInt = Annotated[int, BeforeValidator(_integral_float_to_int)]


def _check_local_datetime(value: str) -> str:
    # raises ValueError for impossible dates like 2026-13-45T25:00:00
    datetime.strptime(value, "%Y-%m-%dT%H:%M:%S")
    return value


# YYYY-MM-DDTHH:mm:ss naming a real calendar instant
LocalDateTime = Annotated[
    str,
    Field(pattern=LOCAL_DATETIME_PATTERN),
    AfterValidator(_check_local_datetime),
]


class _Resource(BaseModel):
    model_config = ConfigDict(extra="allow", strict=True)


class _Input(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)


# ── Resources ────────────────────────────────────────────────────────


class AthleteProfile(_Resource):
    """The configured athlete. Read-only."""
    id: str
    name: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: Optional[str] = None
    sex: Optional[str] = None
    profile_medium: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    timezone: Optional[str] = None
    locale: Optional[str] = None
    measurement_preference: Optional[str] = None


class Activity(_Resource):
    """A completed activity.

    ``type`` is nullable: Intervals.icu returns stub entries for activities
    hidden by the upstream source (e.g. Strava) with no sport type.
    """
    id: str
    start_date_local: str
    type: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    device_name: Optional[str] = None
    source: Optional[str] = None
    trainer: Optional[bool] = None
    commute: Optional[bool] = None

    distance: Optional[float] = None  # meters
    moving_time: Optional[JsonInt] = None  # seconds
    elapsed_time: Optional[JsonInt] = None
    total_elevation_gain: Optional[float] = None
    average_heartrate: Optional[JsonInt] = None
    max_heartrate: Optional[JsonInt] = None
    average_speed: Optional[float] = None  # m/s
    max_speed: Optional[float] = None
    average_cadence: Optional[float] = None
    average_watts: Optional[JsonInt] = None
    weighted_average_watts: Optional[JsonInt] = None
    normalized_power: Optional[JsonInt] = None
    kilojoules: Optional[float] = None
    calories: Optional[JsonInt] = None
    icu_training_load: Optional[JsonInt] = None


class WellnessEntry(_Resource):
    """One day of wellness data, keyed by its YYYY-MM-DD date."""
    id: str
    updated: Optional[str] = None
    weight: Optional[float] = None
    restingHR: Optional[JsonInt] = None
    hrv: Optional[float] = None
    sleepSecs: Optional[JsonInt] = None
    sleepScore: Optional[float] = None
    sleepQuality: Optional[JsonInt] = None
    fatigue: Optional[JsonInt] = None
    stress: Optional[JsonInt] = None
    mood: Optional[JsonInt] = None
    motivation: Optional[JsonInt] = None
    injury: Optional[JsonInt] = None
    soreness: Optional[JsonInt] = None
    comments: Optional[str] = None
    ctl: Optional[float] = None
    atl: Optional[float] = None
    rampRate: Optional[float] = None
    steps: Optional[JsonInt] = None
    spO2: Optional[float] = None


class Workout(_Resource):
    """A workout in the athlete's library.

    ``description`` holds the workout-builder step text.
    """
    id: Optional[JsonInt] = None
    folder_id: Optional[JsonInt] = None
    name: str
    description: Optional[str] = None
    type: Optional[str] = None
    indoor: Optional[bool] = None
    distance: Optional[float] = None
    moving_time: Optional[JsonInt] = None
    tags: Optional[List[str]] = None


class Event(_Resource):
    """A calendar event (planned workout, race, note, ...).

    ``category`` is free-form: new upstream categories must not fail parsing,
    so callers cannot assume it is one of types.EVENT_CATEGORIES.
    """
    id: Optional[JsonInt] = None
    category: Optional[str] = None
    start_date_local: str
    end_date_local: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    moving_time: Optional[JsonInt] = None
    distance: Optional[float] = None
    color: Optional[str] = None
    indoor: Optional[bool] = None
    not_on_fitness_chart: Optional[bool] = None
    show_as_note: Optional[bool] = None
    url: Optional[str] = None
    athlete_id: Optional[str] = None


ActivityList = TypeAdapter(List[Activity])
WellnessList = TypeAdapter(List[WellnessEntry])
WorkoutList = TypeAdapter(List[Workout])
EventList = TypeAdapter(List[Event])


# ── Inputs ───────────────────────────────────────────────────────────


class DateRange(_Input):
    """Inclusive calendar date range for list queries."""
    oldest: str = Field(pattern=DATE_PATTERN)
    newest: str = Field(pattern=DATE_PATTERN)


class _EventFields(_Input):
    end_date_local: Optional[str] = None
    name: Optional[str] = None
    category: Optional[EventCategory] = None
    description: Optional[str] = None
    type: Optional[str] = None
    moving_time: Optional[JsonInt] = None
    distance: Optional[float] = None
    color: Optional[str] = None
    indoor: Optional[bool] = None
    not_on_fitness_chart: Optional[bool] = None
    show_as_note: Optional[bool] = None
    url: Optional[str] = None


class CreateEventInput(_EventFields):
    start_date_local: LocalDateTime

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)


class UpdateEventInput(_EventFields):
    """Partial patch: only explicitly supplied fields are sent."""
    id: int
    start_date_local: Optional[LocalDateTime] = None

    def to_payload(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude={"id"})


class CreateWorkoutInput(_Input):
    name: str
    folder_id: Optional[JsonInt] = None
    description: Optional[str] = None
    type: Optional[str] = None
    indoor: Optional[bool] = None
    distance: Optional[float] = None
    moving_time: Optional[JsonInt] = None
    tags: Optional[List[str]] = None

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)
