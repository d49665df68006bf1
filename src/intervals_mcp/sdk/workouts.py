"""
Intervals.icu workout library SDK functions.
"""

from typing import List, Mapping, Union

from intervals_mcp.sdk.client import IntervalsClient
from intervals_mcp.sdk.schemas import CreateWorkoutInput, Workout, WorkoutList


def get_workouts(client: IntervalsClient) -> List[Workout]:
    """
    List all workouts in the athlete's library.

    GET athlete/{id}/workouts
    """
    data = client.make_request(
        "GET",
        client.athlete_path("workouts"),
        operation="get_workouts",
    )
    return WorkoutList.validate_python(data)


def create_workout(
    client: IntervalsClient, workout: Union[CreateWorkoutInput, Mapping]
) -> Workout:
    """
    Create a workout in the library. Not idempotent: every call adds a workout.

    POST athlete/{id}/workouts

    Args:
        workout: CreateWorkoutInput or a plain dict with the same fields

    Returns:
        The created Workout as echoed by the API (with its assigned id)
    """
    if not isinstance(workout, CreateWorkoutInput):
        workout = CreateWorkoutInput.model_validate(dict(workout))

    data = client.make_request(
        "POST",
        client.athlete_path("workouts"),
        operation="create_workout",
        json_data=workout.to_payload(),
    )
    return Workout.model_validate(data)
