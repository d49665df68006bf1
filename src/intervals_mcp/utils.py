"""
Shared utility functions for the Intervals.icu MCP server.

Null stripping and JSON formatting used by every tool module.
"""

import json
from typing import Any

from pydantic import BaseModel


def remove_nulls(value: Any) -> Any:
    """Recursively remove None values from dicts.

    - None -> None (the caller treats it as absent)
    - dict -> new dict without keys whose cleaned value is None
    - list/tuple -> new list, element-wise; a None element stays in place so
      indexes are preserved and it serializes as JSON null
    - pydantic model -> its model_dump() (extra fields included), cleaned
    - anything else (str, numbers, bools, dates...) -> unchanged

    Idempotent: remove_nulls(remove_nulls(v)) == remove_nulls(v).
    """
    if value is None:
        return None
    if isinstance(value, BaseModel):
        return remove_nulls(value.model_dump())
    if isinstance(value, dict):
        cleaned = {}
        for k, v in value.items():
            v = remove_nulls(v)
            if v is not None:
                cleaned[k] = v
        return cleaned
    if isinstance(value, (list, tuple)):
        return [remove_nulls(v) for v in value]
    return value


def to_json(value: Any) -> str:
    """Null-stripped, indented JSON text for a tool result."""
    return json.dumps(remove_nulls(value), indent=2, default=str)
