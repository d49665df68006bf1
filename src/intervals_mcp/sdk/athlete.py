"""
Intervals.icu athlete SDK functions.
"""

from intervals_mcp.sdk.client import IntervalsClient
from intervals_mcp.sdk.schemas import AthleteProfile


def get_athlete_profile(client: IntervalsClient) -> AthleteProfile:
    """
    Get the configured athlete's profile.

    GET athlete/{id}

    Returns:
        AthleteProfile (unknown remote fields preserved)
    """
    data = client.make_request(
        "GET",
        client.athlete_path(),
        operation="get_athlete_profile",
    )
    return AthleteProfile.model_validate(data)
