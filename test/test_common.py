"""Tests for canonicalization, value classification and type unification."""

import json
import os
import sys
import unittest

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

from jsoninfer.common import json_kind, stable_sort_keys
from jsoninfer.exceptions import JsonInferError, UnsupportedValueError
from jsoninfer.type_unification import unify_types


class TestStableSortKeys(unittest.TestCase):
    """Test cases for stable_sort_keys."""

    def test_sorts_nested_keys(self):
        value = {"b": 1, "a": {"z": [{"y": 1, "x": 2}], "c": None}}
        result = stable_sort_keys(value)
        self.assertEqual(list(result.keys()), ["a", "b"])
        self.assertEqual(list(result["a"].keys()), ["c", "z"])
        self.assertEqual(list(result["a"]["z"][0].keys()), ["x", "y"])

    def test_list_order_unchanged(self):
        self.assertEqual(stable_sort_keys([3, 1, 2]), [3, 1, 2])
        self.assertEqual(stable_sort_keys(["b", "a"]), ["b", "a"])

    def test_scalars_pass_through(self):
        for value in (None, True, 1, 1.5, "x"):
            self.assertEqual(stable_sort_keys(value), value)

    def test_idempotent(self):
        value = {"$schema": "s", "type": "object", "properties": {"b": {}, "a": {"enum": [2, 1]}}}
        once = stable_sort_keys(value)
        twice = stable_sort_keys(once)
        self.assertEqual(json.dumps(once), json.dumps(twice))

    def test_does_not_mutate_input(self):
        value = {"b": 1, "a": 2}
        stable_sort_keys(value)
        self.assertEqual(list(value.keys()), ["b", "a"])

    def test_dollar_keys_sort_first(self):
        result = stable_sort_keys({"type": "object", "$schema": "s", "$id": "i", "title": "t"})
        self.assertEqual(list(result.keys()), ["$id", "$schema", "title", "type"])


class TestJsonKind(unittest.TestCase):
    """Test cases for json_kind."""

    def test_kinds(self):
        self.assertEqual(json_kind(None), "null")
        self.assertEqual(json_kind(True), "boolean")
        self.assertEqual(json_kind(False), "boolean")
        self.assertEqual(json_kind(0), "number")
        self.assertEqual(json_kind(1.5), "number")
        self.assertEqual(json_kind(""), "string")
        self.assertEqual(json_kind([]), "array")
        self.assertEqual(json_kind({}), "object")

    def test_unsupported_value(self):
        with self.assertRaises(UnsupportedValueError) as ctx:
            json_kind({1, 2})
        self.assertIs(ctx.exception.value_type, set)
        self.assertIsInstance(ctx.exception, JsonInferError)
        self.assertIsInstance(ctx.exception, TypeError)


class TestUnifyTypes(unittest.TestCase):
    """Test cases for unify_types."""

    def test_empty_is_null(self):
        self.assertEqual(unify_types(set()), "null")

    def test_singleton(self):
        self.assertEqual(unify_types({"string"}), "string")
        self.assertEqual(unify_types({"integer"}), "integer")

    def test_integer_collapses_into_number(self):
        self.assertEqual(unify_types({"integer", "number"}), "number")
        self.assertEqual(unify_types({"integer", "number", "null"}), ["null", "number"])

    def test_sorted_union(self):
        self.assertEqual(unify_types({"string", "integer"}), ["integer", "string"])
        self.assertEqual(unify_types(["string", "boolean", "array", "null"]),
                         ["array", "boolean", "null", "string"])

    def test_input_not_mutated(self):
        tags = {"integer", "number"}
        unify_types(tags)
        self.assertEqual(tags, {"integer", "number"})


class TestPackageExports(unittest.TestCase):
    """Test cases for the names exported by the package."""

    def test_public_names_resolve(self):
        import jsoninfer
        from jsoninfer.schema_inference import infer_json_schema
        self.assertIs(jsoninfer.infer_json_schema, infer_json_schema)
        self.assertIs(jsoninfer.stable_sort_keys, stable_sort_keys)
        self.assertTrue(issubclass(jsoninfer.RecursionTooDeepError, JsonInferError))
        for name in jsoninfer.__all__:
            self.assertIsNotNone(getattr(jsoninfer, name))

    def test_unknown_name(self):
        import jsoninfer
        with self.assertRaises(AttributeError):
            jsoninfer.not_a_public_name


if __name__ == '__main__':
    unittest.main()
