"""
Intervals.icu API constants, categories and format patterns.

All Intervals.icu-specific magic values live here.
"""

from typing import Literal, get_args


API_URL = "https://intervals.icu/api/v1"

# Intervals.icu authenticates API keys as HTTP basic auth with a fixed username
API_KEY_USERNAME = "API_KEY"

DEFAULT_TIMEOUT = 30.0

# Calendar event categories known at the time of writing. Remote events are
# NOT restricted to these (see schemas.Event), only caller input is.
EventCategory = Literal[
    "WORKOUT",
    "RACE_A",
    "RACE_B",
    "RACE_C",
    "NOTE",
    "PLAN",
    "HOLIDAY",
    "SICK",
    "INJURED",
    "SET_EFTP",
    "FITNESS_DAYS",
    "SEASON_START",
    "TARGET",
    "SET_FITNESS",
]

EVENT_CATEGORIES = get_args(EventCategory)

# YYYY-MM-DD
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

# YYYY-MM-DDTHH:mm:ss, no offset (interpreted in the athlete's timezone)
LOCAL_DATETIME_PATTERN = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}$"

# Intervals.icu workout-builder syntax hint, shared by tool descriptions
WORKOUT_SYNTAX_HINT = (
    "MUST follow Intervals.icu builder syntax. For repeating steps (e.g. 5x), "
    "insert an empty line before and after the block "
    "(e.g. '\\n\\n5x\\n- 3m Z5\\n- 3m Z1\\n\\n'). Use \\n for new lines."
)
