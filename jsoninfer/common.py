"""
Common utility functions for jsoninfer.
"""

from typing import Any, Dict, List

from jsoninfer.constants import ARRAY, BOOLEAN, NULL, NUMBER, OBJECT, STRING
from jsoninfer.exceptions import UnsupportedValueError

JsonNode = Dict[str, 'JsonNode'] | List['JsonNode'] | str | bool | int | float | None


def json_kind(value: Any) -> str:
    """Classifies a parsed JSON value into its JSON kind.

    Returns one of "null", "boolean", "number", "string", "array" or "object".
    Numbers are not split into integer/number here; that is the collector's job.

    Raises:
        UnsupportedValueError: If the value is not something a JSON parser produces
    """
    if value is None:
        return NULL
    # bool before int: bool is a subclass of int
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, (int, float)):
        return NUMBER
    if isinstance(value, str):
        return STRING
    if isinstance(value, (list, tuple)):
        return ARRAY
    if isinstance(value, dict):
        return OBJECT
    raise UnsupportedValueError(
        f"Expected a JSON value, got {type(value).__name__}", type(value))


def stable_sort_keys(value: JsonNode) -> JsonNode:
    """Rebuilds a structure with mapping keys sorted at every level.

    List element order is preserved. Applying this twice gives the same
    result as applying it once.
    """
    if isinstance(value, dict):
        return {key: stable_sort_keys(value[key]) for key in sorted(value)}
    if isinstance(value, list):
        return [stable_sort_keys(item) for item in value]
    return value
