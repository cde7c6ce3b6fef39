"""Statistics collection and merging for schema inference.

A ``TypeStats`` node accumulates everything observed at one logical position
of the sampled documents: the document root, one object key across all
samples, or the shared element of an array. ``collect_value_stats`` walks one
JSON value into a node; ``merge_stats`` combines two independently collected
nodes into a new one. Merging is associative and commutative over the
collected evidence, so the order in which samples are folded never changes
the resulting schema constraints.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Set, Tuple

from jsoninfer.common import json_kind
from jsoninfer.constants import (
    ARRAY,
    BOOLEAN,
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_EXAMPLES,
    DEFAULT_MAX_UNIQUE_VALUES,
    INTEGER,
    NULL,
    NUMBER,
    OBJECT,
    STRING,
)
from jsoninfer.exceptions import RecursionTooDeepError
from jsoninfer.formats import detect_format

logger = logging.getLogger(__name__)

Number = int | float


@dataclass
class TypeStats:
    """Observed statistics for one position in the sampled documents."""

    # --- Types ---
    types: Set[str] = field(default_factory=set)
    integer_only: bool = True  # Cleared by the first non-whole number

    # --- Bounds (None until a value of the matching kind is seen) ---
    minimum: Optional[Number] = None
    maximum: Optional[Number] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min_items: Optional[int] = None
    max_items: Optional[int] = None
    item_count: int = 0  # Array elements observed in total, across all arrays here

    # --- Enum candidacy ---
    # (json kind, value) pairs so that True, 1 and 1.0 stay distinct by kind
    unique_values: Set[Tuple[str, Any]] = field(default_factory=set)
    unique_overflow: bool = False  # Cap exceeded; unique_values is emptied for good

    # --- Strings ---
    formats: Set[Optional[str]] = field(default_factory=set)  # None = no format matched

    # Illustrative only, first seen retained; left out of equality since
    # merge order decides which examples survive.
    examples: List[Any] = field(default_factory=list, compare=False)

    # --- Structure ---
    presence_count: int = 0  # Containing-object instances holding this key
    properties: Dict[str, 'TypeStats'] = field(default_factory=dict)
    items: Optional['TypeStats'] = None  # Shared by all array elements


def create_stats() -> TypeStats:
    """Creates an empty statistics node."""
    return TypeStats()


def _normalize_number(value: Number) -> Number:
    """Maps whole floats onto ints; 2.0 and 2 are the same JSON number."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _is_whole(value: Number) -> bool:
    return isinstance(value, int) or value.is_integer()


def _lower(x, y):
    if x is None:
        return y
    if y is None:
        return x
    return min(x, y)


def _upper(x, y):
    if x is None:
        return y
    if y is None:
        return x
    return max(x, y)


def _record_value(stats: TypeStats, kind: str, key_value: Any, example: Any,
                  max_unique_values: int, max_examples: int) -> None:
    if not stats.unique_overflow:
        key = (kind, key_value)
        if key not in stats.unique_values:
            if len(stats.unique_values) >= max_unique_values:
                stats.unique_overflow = True
                stats.unique_values = set()
            else:
                stats.unique_values.add(key)
    if len(stats.examples) < max_examples:
        stats.examples.append(example)


def collect_value_stats(
    value: Any,
    stats: TypeStats,
    max_unique_values: int = DEFAULT_MAX_UNIQUE_VALUES,
    max_examples: int = DEFAULT_MAX_EXAMPLES,
    max_depth: int = DEFAULT_MAX_DEPTH,
    depth: int = 0
) -> TypeStats:
    """Collects statistics from a JSON value into a node.

    Arrays are treated as homogeneous: every element is collected into the
    one shared ``items`` node. For objects, each present key's node gets its
    presence count bumped by one; keys absent from this instance are left
    untouched.

    Args:
        value: Parsed JSON value
        stats: Node to augment in place
        max_unique_values: Cap on the distinct values tracked for enums
        max_examples: Cap on the examples kept
        max_depth: Deepest nesting level accepted
        depth: Nesting level of ``value`` (0 for a document root)

    Returns:
        The augmented node

    Raises:
        RecursionTooDeepError: If nesting exceeds max_depth
        UnsupportedValueError: If value is not a JSON value
    """
    if depth > max_depth:
        logger.warning("Maximum nesting depth %d exceeded", max_depth)
        raise RecursionTooDeepError(
            f"Maximum nesting depth {max_depth} exceeded", depth, max_depth)

    kind = json_kind(value)

    if kind == NULL:
        stats.types.add(NULL)

    elif kind == BOOLEAN:
        stats.types.add(BOOLEAN)
        _record_value(stats, BOOLEAN, value, value, max_unique_values, max_examples)

    elif kind == NUMBER:
        if _is_whole(value):
            stats.types.add(INTEGER)
        else:
            stats.types.add(NUMBER)
            stats.integer_only = False
        number = _normalize_number(value)
        stats.minimum = _lower(stats.minimum, number)
        stats.maximum = _upper(stats.maximum, number)
        _record_value(stats, NUMBER, number, value, max_unique_values, max_examples)

    elif kind == STRING:
        stats.types.add(STRING)
        length = len(value)
        stats.min_length = _lower(stats.min_length, length)
        stats.max_length = _upper(stats.max_length, length)
        stats.formats.add(detect_format(value))
        _record_value(stats, STRING, value, value, max_unique_values, max_examples)

    elif kind == ARRAY:
        stats.types.add(ARRAY)
        count = len(value)
        stats.min_items = _lower(stats.min_items, count)
        stats.max_items = _upper(stats.max_items, count)
        stats.item_count += count
        for item in value:
            if stats.items is None:
                stats.items = create_stats()
            collect_value_stats(item, stats.items, max_unique_values, max_examples,
                                max_depth, depth + 1)

    else:
        stats.types.add(OBJECT)
        for key, item in value.items():
            key_stats = stats.properties.get(key)
            if key_stats is None:
                key_stats = stats.properties[key] = create_stats()
            key_stats.presence_count += 1
            collect_value_stats(item, key_stats, max_unique_values, max_examples,
                                max_depth, depth + 1)

    return stats


def clone_stats(stats: TypeStats) -> TypeStats:
    """Returns a deep copy of a node that shares no mutable state with it."""
    return replace(
        stats,
        types=set(stats.types),
        unique_values=set(stats.unique_values),
        formats=set(stats.formats),
        examples=list(stats.examples),
        properties={key: clone_stats(child) for key, child in stats.properties.items()},
        items=clone_stats(stats.items) if stats.items is not None else None,
    )


def merge_stats(
    a: TypeStats,
    b: TypeStats,
    max_unique_values: int = DEFAULT_MAX_UNIQUE_VALUES,
    max_examples: int = DEFAULT_MAX_EXAMPLES
) -> TypeStats:
    """Merges two nodes observed independently for the same position.

    Neither input is modified. The result is equivalent to having observed
    the values of both inputs.

    Args:
        a: Left node
        b: Right node
        max_unique_values: Cap on the merged distinct-value set
        max_examples: Cap on the merged examples

    Returns:
        A new merged node
    """
    unique_overflow = a.unique_overflow or b.unique_overflow
    unique_values: Set[Tuple[str, Any]] = set()
    if not unique_overflow:
        unique_values = a.unique_values | b.unique_values
        if len(unique_values) > max_unique_values:
            unique_overflow = True
            unique_values = set()

    properties: Dict[str, TypeStats] = {}
    for key, a_child in a.properties.items():
        b_child = b.properties.get(key)
        if b_child is None:
            properties[key] = clone_stats(a_child)
        else:
            properties[key] = merge_stats(a_child, b_child, max_unique_values, max_examples)
    for key, b_child in b.properties.items():
        if key not in a.properties:
            properties[key] = clone_stats(b_child)

    if a.items is not None and b.items is not None:
        items = merge_stats(a.items, b.items, max_unique_values, max_examples)
    elif a.items is not None:
        items = clone_stats(a.items)
    elif b.items is not None:
        items = clone_stats(b.items)
    else:
        items = None

    return TypeStats(
        types=a.types | b.types,
        integer_only=a.integer_only and b.integer_only,
        minimum=_lower(a.minimum, b.minimum),
        maximum=_upper(a.maximum, b.maximum),
        min_length=_lower(a.min_length, b.min_length),
        max_length=_upper(a.max_length, b.max_length),
        min_items=_lower(a.min_items, b.min_items),
        max_items=_upper(a.max_items, b.max_items),
        item_count=a.item_count + b.item_count,
        unique_values=unique_values,
        unique_overflow=unique_overflow,
        formats=a.formats | b.formats,
        examples=(a.examples + b.examples)[:max_examples],
        presence_count=a.presence_count + b.presence_count,
        properties=properties,
        items=items,
    )
