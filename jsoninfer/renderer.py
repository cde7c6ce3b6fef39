"""Renders merged statistics into JSON Schema fragments."""

from typing import Any, Dict, List

from jsoninfer.constants import ARRAY, INTEGER, NUMBER, OBJECT, STRING
from jsoninfer.formats import merge_formats
from jsoninfer.options import InferenceOptions, RequiredPolicy
from jsoninfer.stats import TypeStats
from jsoninfer.type_unification import unify_types


class SchemaRenderer:
    """Converts a ``TypeStats`` tree into a JSON Schema fragment under a policy."""

    def __init__(self, options: InferenceOptions | None = None):
        self.options = options or InferenceOptions()

    def render(self, stats: TypeStats, instances: int) -> Dict[str, Any]:
        """Renders one node.

        Args:
            stats: Merged statistics for this position
            instances: Number of containing-object instances observed at this
                position; keys seen that many times are required under the
                "observed" policy

        Returns:
            The schema fragment for this position
        """
        opts = self.options
        schema: Dict[str, Any] = {}
        schema_type = unify_types(stats.types)
        schema["type"] = schema_type

        # Structural detail only when the position was not both an object
        # and an array; a bare type union is emitted then.
        is_object = OBJECT in stats.types and ARRAY not in stats.types
        is_array = ARRAY in stats.types and OBJECT not in stats.types

        if is_object:
            self._render_object(schema, stats, instances)
        elif is_array:
            if stats.items is not None:
                schema["items"] = self.render(stats.items, stats.item_count)
            if opts.minmax:
                if stats.min_items is not None:
                    schema["minItems"] = stats.min_items
                if stats.max_items is not None:
                    schema["maxItems"] = stats.max_items

        if STRING in stats.types:
            if opts.minmax:
                if stats.min_length is not None:
                    schema["minLength"] = stats.min_length
                if stats.max_length is not None:
                    schema["maxLength"] = stats.max_length
            if opts.detect_formats and stats.formats:
                string_format = merge_formats(stats.formats)
                if string_format:
                    schema["format"] = string_format

        if INTEGER in stats.types or NUMBER in stats.types:
            if stats.integer_only and not isinstance(schema_type, list):
                schema["type"] = INTEGER
            if opts.minmax:
                if stats.minimum is not None:
                    schema["minimum"] = stats.minimum
                if stats.maximum is not None:
                    schema["maximum"] = stats.maximum

        enum = self._enum_values(stats, schema["type"])
        if enum:
            schema["enum"] = enum

        if opts.examples and stats.examples:
            schema["examples"] = list(stats.examples)

        return schema

    def _render_object(self, schema: Dict[str, Any], stats: TypeStats, instances: int) -> None:
        opts = self.options
        properties: Dict[str, Any] = {}
        required: List[str] = []
        for key, key_stats in stats.properties.items():
            properties[key] = self.render(key_stats, key_stats.presence_count)
            if opts.required_policy == RequiredPolicy.STRICT and key_stats.presence_count > 0:
                required.append(key)
            elif (opts.required_policy == RequiredPolicy.OBSERVED
                  and key_stats.presence_count == instances):
                required.append(key)
        schema["properties"] = properties
        if required:
            schema["required"] = sorted(required)
        schema["additionalProperties"] = opts.additional_properties

    def _enum_values(self, stats: TypeStats, schema_type: str | List[str]) -> List[Any]:
        """Returns the sorted enum for single-typed string/number positions, or []."""
        if isinstance(schema_type, list) or schema_type not in (STRING, NUMBER, INTEGER):
            return []
        if stats.unique_overflow or not stats.unique_values:
            return []
        if len(stats.unique_values) > self.options.enum_threshold:
            return []
        return sorted(value for _, value in stats.unique_values)


def stats_to_schema(stats: TypeStats, instances: int,
                    options: InferenceOptions | None = None) -> Dict[str, Any]:
    """Renders a statistics tree with the given options."""
    return SchemaRenderer(options).render(stats, instances)
