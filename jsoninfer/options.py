"""Inference options.

Options can be built directly as an ``InferenceOptions`` dataclass or from a
mapping that uses either the snake_case field names or the camelCase names
used by JSON tooling (``enumThreshold``, ``requiredPolicy``, ...).
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from jsoninfer.constants import (
    DEFAULT_ENUM_THRESHOLD,
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_EXAMPLES,
    DEFAULT_MAX_UNIQUE_VALUES,
    DRAFT_URIS,
)
from jsoninfer.exceptions import InvalidOptionsError


class Draft(str, Enum):
    """JSON Schema draft announced in ``$schema``."""
    DRAFT_2020_12 = "2020-12"
    DRAFT_2019_09 = "2019-09"
    DRAFT_07 = "07"

    @property
    def uri(self) -> str:
        return DRAFT_URIS[self.value]


class RequiredPolicy(str, Enum):
    """Rule selecting which observed keys end up in ``required``."""
    LOOSE = "loose"        # Never emit required
    OBSERVED = "observed"  # Keys present in every observed instance
    STRICT = "strict"      # Keys present at least once


_CAMEL_CASE_NAMES = {
    "additionalProperties": "additional_properties",
    "enumThreshold": "enum_threshold",
    "detectFormats": "detect_formats",
    "requiredPolicy": "required_policy",
    "maxUniqueValues": "max_unique_values",
    "maxExamples": "max_examples",
    "maxDepth": "max_depth",
}


def _parse_enum(enum_type, value: Any, option_name: str):
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        valid = ", ".join(repr(v.value) for v in enum_type)
        raise InvalidOptionsError(
            f"Invalid {option_name} {value!r}. Valid options: {valid}"
        ) from None


@dataclass(frozen=True)
class InferenceOptions:
    """Policy configuration for schema inference."""
    draft: Draft = Draft.DRAFT_2020_12
    title: Optional[str] = None
    id: Optional[str] = None
    additional_properties: bool = True
    enum_threshold: int = DEFAULT_ENUM_THRESHOLD
    detect_formats: bool = True
    minmax: bool = True
    examples: bool = True
    required_policy: RequiredPolicy = RequiredPolicy.OBSERVED
    max_unique_values: int = DEFAULT_MAX_UNIQUE_VALUES
    max_examples: int = DEFAULT_MAX_EXAMPLES
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self):
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "draft", _parse_enum(Draft, self.draft, "draft"))
        object.__setattr__(self, "required_policy",
                           _parse_enum(RequiredPolicy, self.required_policy, "requiredPolicy"))
        for name in ("enum_threshold", "max_unique_values", "max_examples"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidOptionsError(f"{name} must be a non-negative integer, got {value!r}")
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise InvalidOptionsError(f"max_depth must be a positive integer, got {self.max_depth!r}")

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "InferenceOptions":
        """Builds options from a mapping of option names to values.

        Args:
            data: Mapping using camelCase or snake_case option names. ``None``
                yields the defaults.

        Returns:
            Validated InferenceOptions

        Raises:
            InvalidOptionsError: If a key is unknown or a value is invalid
        """
        if data is None:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_CASE_NAMES.get(key, key)
            if name not in known:
                raise InvalidOptionsError(f"Unknown inference option: {key}")
            kwargs[name] = value
        return cls(**kwargs)

    @property
    def schema_uri(self) -> str:
        """The ``$schema`` URI of the configured draft."""
        return self.draft.uri
