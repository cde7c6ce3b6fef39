"""Reduces a set of observed type tags to a JSON Schema ``type`` value."""

from typing import Iterable, List

from jsoninfer.constants import INTEGER, NULL, NUMBER


def unify_types(types: Iterable[str]) -> str | List[str]:
    """Merges observed type tags into a single type or a sorted type list.

    An empty set unifies to "null". When both "integer" and "number" were
    seen, "integer" is dropped since "number" already admits whole values.
    """
    tags = set(types)
    if not tags:
        return NULL
    if INTEGER in tags and NUMBER in tags:
        tags.discard(INTEGER)
    if len(tags) == 1:
        return next(iter(tags))
    return sorted(tags)
