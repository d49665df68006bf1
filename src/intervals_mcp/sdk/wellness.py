"""
Intervals.icu wellness SDK functions.
"""

from typing import List

from intervals_mcp.sdk.client import IntervalsClient
from intervals_mcp.sdk.schemas import DateRange, WellnessEntry, WellnessList


def get_wellness(client: IntervalsClient, oldest: str, newest: str) -> List[WellnessEntry]:
    """
    List wellness entries (sleep, HRV, fatigue, fitness/fatigue load...) in a date range.

    GET athlete/{id}/wellness.json

    Args:
        oldest: Start date in YYYY-MM-DD format
        newest: End date in YYYY-MM-DD format
    """
    date_range = DateRange(oldest=oldest, newest=newest)
    data = client.make_request(
        "GET",
        client.athlete_path("wellness.json"),
        operation="get_wellness",
        params=date_range.model_dump(),
    )
    return WellnessList.validate_python(data)
