"""
Intervals.icu activity SDK functions.
"""

from typing import List

from intervals_mcp.sdk.client import IntervalsClient
from intervals_mcp.sdk.schemas import Activity, ActivityList, DateRange


def get_activities(client: IntervalsClient, oldest: str, newest: str) -> List[Activity]:
    """
    List activities in an inclusive date range.

    GET athlete/{id}/activities

    Args:
        oldest: Start date in YYYY-MM-DD format
        newest: End date in YYYY-MM-DD format

    Returns:
        Activities in the order the API returns them
    """
    date_range = DateRange(oldest=oldest, newest=newest)
    data = client.make_request(
        "GET",
        client.athlete_path("activities"),
        operation="get_activities",
        params=date_range.model_dump(),
    )
    return ActivityList.validate_python(data)


def get_activity(client: IntervalsClient, activity_id: str) -> Activity:
    """
    Get a single activity.

    GET activity/{activity_id}
    """
    data = client.make_request(
        "GET",
        f"activity/{activity_id}",
        operation="get_activity",
    )
    return Activity.model_validate(data)
