"""Infers JSON Schema documents from sample JSON values.

Each sample is collected into its own statistics tree, the trees are folded
together with ``merge_stats``, and the folded tree is rendered under the
configured policy. The result is key-sorted so that serializing it is
reproducible.
"""

import logging
from dataclasses import fields
from typing import Any, Dict, Iterable, Optional

from jsoninfer.common import stable_sort_keys
from jsoninfer.exceptions import RecursionTooDeepError
from jsoninfer.options import InferenceOptions
from jsoninfer.renderer import SchemaRenderer
from jsoninfer.stats import TypeStats, collect_value_stats, create_stats, merge_stats

logger = logging.getLogger(__name__)


class JsonSchemaInferrer:
    """Infers JSON Schema from parsed JSON samples."""

    def __init__(self, options: InferenceOptions | None = None):
        """Initialize the JSON Schema inferrer.

        Args:
            options: Inference policy; defaults apply when omitted
        """
        self.options = options or InferenceOptions()
        self.renderer = SchemaRenderer(self.options)

    def collect(self, value: Any) -> TypeStats:
        """Collects one sample into a fresh statistics tree."""
        opts = self.options
        return collect_value_stats(
            value,
            create_stats(),
            max_unique_values=opts.max_unique_values,
            max_examples=opts.max_examples,
            max_depth=opts.max_depth,
        )

    def merge(self, a: TypeStats, b: TypeStats) -> TypeStats:
        """Merges two statistics trees with the configured caps."""
        return merge_stats(a, b, self.options.max_unique_values, self.options.max_examples)

    def fold(self, values: Iterable[Any]) -> tuple[Optional[TypeStats], int]:
        """Collects every sample and left-folds the trees.

        Returns:
            Tuple of (folded tree or None when there were no samples, sample count)
        """
        merged: Optional[TypeStats] = None
        count = 0
        for value in values:
            stats = self.collect(value)
            merged = stats if merged is None else self.merge(merged, stats)
            count += 1
        return merged, count

    def infer(self, values: Iterable[Any]) -> Dict[str, Any]:
        """Infers a JSON Schema from a sequence of parsed JSON values.

        With no samples the schema carries metadata only (``$schema`` and the
        optional ``$id``/``title``) and no ``type``.

        Args:
            values: Parsed JSON samples

        Returns:
            The key-sorted schema

        Raises:
            RecursionTooDeepError: If a sample is nested deeper than max_depth
            UnsupportedValueError: If a sample holds a non-JSON value
        """
        try:
            merged, count = self.fold(values)
            if merged is None:
                logger.debug("No samples provided, emitting metadata-only schema")
                return self._wrap_schema({})
            logger.debug("Rendering schema from %d sample(s)", count)
            return self._wrap_schema(self.renderer.render(merged, count))
        except RecursionError as err:
            # max_depth was set above what the interpreter stack allows
            max_depth = self.options.max_depth
            logger.warning("Interpreter recursion limit reached below max_depth %d", max_depth)
            raise RecursionTooDeepError(
                f"Nesting exceeds the interpreter recursion limit (max_depth {max_depth})",
                None, max_depth) from err

    def _wrap_schema(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        """Attaches top-level metadata and canonicalizes the schema."""
        result: Dict[str, Any] = {"$schema": self.options.schema_uri}
        if self.options.id:
            result["$id"] = self.options.id
        if self.options.title:
            result["title"] = self.options.title
        result.update(schema)
        return stable_sort_keys(result)


def infer_json_schema(
    json_values: Iterable[Any],
    options: InferenceOptions | Dict[str, Any] | None = None,
    **overrides: Any
) -> Dict[str, Any]:
    """Infers JSON Schema from JSON values.

    Args:
        json_values: Parsed JSON samples
        options: InferenceOptions, or a mapping of option names (camelCase or
            snake_case) to values
        **overrides: Option fields applied on top of ``options``

    Returns:
        Inferred JSON Schema
    """
    if not isinstance(options, InferenceOptions):
        options = InferenceOptions.from_dict(options)
    if overrides:
        current = {f.name: getattr(options, f.name) for f in fields(options)}
        options = InferenceOptions.from_dict({**current, **overrides})
    inferrer = JsonSchemaInferrer(options)
    return inferrer.infer(json_values)
