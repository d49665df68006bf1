"""
Intervals.icu SDK error taxonomy.

Three kinds of failure reach a caller:

- IntervalsAPIError: the remote service answered non-2xx or could not be reached.
- pydantic.ValidationError: a payload (remote or caller-supplied) has the wrong shape.
- EventGuardError: a calendar mutation was refused client-side.
"""

from typing import Optional


class IntervalsError(Exception):
    """Base class for Intervals.icu SDK errors."""


class IntervalsAPIError(IntervalsError):
    """Transport-level failure talking to Intervals.icu.

    Carries the logical operation name, the HTTP status (None for network
    failures) and the remote error message when one was provided.
    """

    def __init__(self, operation: str, status_code: Optional[int], message: str):
        self.operation = operation
        self.status_code = status_code
        self.message = message
        super().__init__(
            f"Intervals.icu API Error [{operation}]: {status_code} - {message}"
        )


class EventGuardError(IntervalsError):
    """A calendar event mutation was rejected by a client-side policy."""


class PastEventError(EventGuardError):
    """The event starts before now and must not be created, modified or deleted."""


class EventNotFoundError(EventGuardError):
    """The guard lookup returned no event."""
