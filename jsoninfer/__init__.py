"""JSON Schema inference from sample JSON values.

Public names are resolved on first access so that importing the package
stays cheap.
"""

import importlib

# Public name -> (submodule, attribute)
_mappings = {
    "infer_json_schema": ("schema_inference", "infer_json_schema"),
    "JsonSchemaInferrer": ("schema_inference", "JsonSchemaInferrer"),
    "InferenceOptions": ("options", "InferenceOptions"),
    "Draft": ("options", "Draft"),
    "RequiredPolicy": ("options", "RequiredPolicy"),
    "SchemaRenderer": ("renderer", "SchemaRenderer"),
    "TypeStats": ("stats", "TypeStats"),
    "collect_value_stats": ("stats", "collect_value_stats"),
    "merge_stats": ("stats", "merge_stats"),
    "detect_format": ("formats", "detect_format"),
    "unify_types": ("type_unification", "unify_types"),
    "stable_sort_keys": ("common", "stable_sort_keys"),
    "JsonInferError": ("exceptions", "JsonInferError"),
    "InvalidOptionsError": ("exceptions", "InvalidOptionsError"),
    "RecursionTooDeepError": ("exceptions", "RecursionTooDeepError"),
    "UnsupportedValueError": ("exceptions", "UnsupportedValueError"),
}

__all__ = list(_mappings)


def __getattr__(name):
    if name not in _mappings:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_name, attr_name = _mappings[name]
    return getattr(importlib.import_module(f"{__name__}.{module_name}"), attr_name)
