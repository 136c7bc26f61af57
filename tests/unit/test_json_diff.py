"""Tests for the positional JSON differ: traversal, leaf equality, and filtering.

All tests are hermetic — no disk I/O. Values are built in-memory.
"""

from __future__ import annotations

import json
import unittest

from jsoncompare.core.filters import FieldFilter
from jsoncompare.core.json_diff import json_diff, values_equal
from jsoncompare.core.types import MISSING, DifferenceRecord


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _rec(path: str, value, compared_value) -> DifferenceRecord:
    return DifferenceRecord(
        field=path, value=value, compared_field=path, compared_value=compared_value
    )


def _fields(records) -> list[str]:
    return sorted(r.field for r in records)


# ============================================================================
# Scenarios
# ============================================================================


class TestScenarios(unittest.TestCase):
    def test_nested_scalar_change(self):
        ops = json_diff({"a": 1, "b": {"c": 2}}, {"a": 1, "b": {"c": 3}}, [])
        self.assertEqual(ops, [_rec("b.c", 3, 2)])

    def test_array_grows(self):
        ops = json_diff({"a": [1, 2]}, {"a": [1, 2, 3]}, [])
        self.assertEqual(ops, [_rec("a[2]", 3, MISSING)])
        self.assertIs(ops[0].compared_value, MISSING)

    def test_filtered_key(self):
        ops = json_diff(
            {"secret": "x", "val": 1}, {"secret": "y", "val": 2}, ["secret"]
        )
        self.assertEqual(ops, [_rec("val", 2, 1)])


# ============================================================================
# Properties
# ============================================================================


class TestReflexivity(unittest.TestCase):
    def test_identical_values_have_no_differences(self):
        values = [
            None,
            True,
            0,
            1.5,
            "",
            "text",
            {},
            [],
            {"a": [1, {"b": None}], "c": {"d": [[], {}]}},
            [{"x": 1}, [2, [3]], "s", None, False],
        ]
        for v in values:
            with self.subTest(value=v):
                self.assertEqual(json_diff(v, v, []), [])

    def test_equal_copy_has_no_differences(self):
        doc = {"items": [{"id": 1, "tags": ["a", "b"]}], "meta": {"n": None}}
        self.assertEqual(json_diff(doc, json.loads(json.dumps(doc))), [])


class TestObjects(unittest.TestCase):
    def test_key_order_irrelevant(self):
        self.assertEqual(json_diff({"a": 1, "b": 2}, {"b": 2, "a": 1}), [])

    def test_added_key(self):
        ops = json_diff({"a": 1}, {"a": 1, "b": 2})
        self.assertEqual(ops, [_rec("b", 2, MISSING)])

    def test_removed_key(self):
        ops = json_diff({"a": 1, "b": 2}, {"a": 1})
        self.assertEqual(ops, [_rec("b", MISSING, 2)])

    def test_missing_is_not_null(self):
        ops = json_diff({"a": None}, {})
        self.assertEqual(len(ops), 1)
        self.assertIsNone(ops[0].compared_value)
        self.assertIs(ops[0].value, MISSING)

    def test_empty_object_against_object(self):
        ops = json_diff({}, {"a": 1, "b": {"c": 2}, "d": [1]})
        self.assertEqual(
            ops,
            [
                _rec("a", 1, MISSING),
                _rec("b", {"c": 2}, MISSING),
                _rec("d", [1], MISSING),
            ],
        )

    def test_key_union_order_left_then_right(self):
        ops = json_diff({"z": 1, "a": 1}, {"m": 1, "z": 2})
        self.assertEqual([r.field for r in ops], ["z", "a", "m"])

    def test_deep_path(self):
        ops = json_diff({"a": {"b": {"c": {"d": 1}}}}, {"a": {"b": {"c": {"d": 2}}}})
        self.assertEqual(ops, [_rec("a.b.c.d", 2, 1)])

    def test_object_vs_array_collapses(self):
        ops = json_diff({"a": {"x": 1}}, {"a": [1]})
        self.assertEqual(ops, [_rec("a", [1], {"x": 1})])

    def test_empty_object_vs_empty_array(self):
        ops = json_diff({"a": {}}, {"a": []})
        self.assertEqual(ops, [_rec("a", [], {})])

    def test_object_vs_scalar_collapses(self):
        ops = json_diff({"a": {"x": 1, "y": 2}}, {"a": "flat"})
        self.assertEqual(ops, [_rec("a", "flat", {"x": 1, "y": 2})])

    def test_field_equals_compared_field(self):
        ops = json_diff({"a": [1, {"b": 1}], "c": 1}, {"a": [2, {"b": 2}], "d": 1})
        self.assertTrue(ops)
        for r in ops:
            self.assertEqual(r.field, r.compared_field)


class TestArrays(unittest.TestCase):
    def test_positional_not_reordered(self):
        ops = json_diff([1, 2, 3], [3, 1, 2])
        self.assertEqual(
            ops, [_rec("[0]", 3, 1), _rec("[1]", 1, 2), _rec("[2]", 2, 3)]
        )

    def test_shrinking_array(self):
        ops = json_diff({"a": [1, 2, 3]}, {"a": [1]})
        self.assertEqual(ops, [_rec("a[1]", MISSING, 2), _rec("a[2]", MISSING, 3)])

    def test_empty_array_against_array(self):
        ops = json_diff({"a": []}, {"a": [{"b": 1}, 2]})
        self.assertEqual(
            ops, [_rec("a[0]", {"b": 1}, MISSING), _rec("a[1]", 2, MISSING)]
        )

    def test_objects_inside_arrays(self):
        ops = json_diff(
            {"rows": [{"id": 1, "v": "a"}, {"id": 2, "v": "b"}]},
            {"rows": [{"id": 1, "v": "a"}, {"id": 2, "v": "c"}]},
        )
        self.assertEqual(ops, [_rec("rows[1].v", "c", "b")])

    def test_nested_arrays(self):
        ops = json_diff({"m": [[1, 2], [3]]}, {"m": [[1, 9], [3, 4]]})
        self.assertEqual(ops, [_rec("m[0][1]", 9, 2), _rec("m[1][1]", 4, MISSING)])


class TestRoot(unittest.TestCase):
    def test_root_arrays(self):
        self.assertEqual(json_diff([1], [2]), [_rec("[0]", 2, 1)])

    def test_root_scalars(self):
        self.assertEqual(json_diff(1, 2), [_rec("", 2, 1)])

    def test_root_kind_mismatch(self):
        self.assertEqual(json_diff({"a": 1}, [1]), [_rec("", [1], {"a": 1})])


# ============================================================================
# Leaf equality
# ============================================================================


class TestValuesEqual(unittest.TestCase):
    def test_no_coercion(self):
        self.assertFalse(values_equal(1, "1"))
        self.assertFalse(values_equal(0, False))
        self.assertFalse(values_equal(1, True))
        self.assertFalse(values_equal(None, False))
        self.assertFalse(values_equal(None, ""))
        self.assertFalse(values_equal("", 0))

    def test_same_scalars(self):
        self.assertTrue(values_equal(None, None))
        self.assertTrue(values_equal(True, True))
        self.assertTrue(values_equal("x", "x"))
        self.assertTrue(values_equal(2, 2))

    def test_int_float_are_one_number_kind(self):
        self.assertTrue(values_equal(1, 1.0))
        self.assertFalse(values_equal(1, 1.5))

    def test_missing(self):
        self.assertFalse(values_equal(MISSING, None))
        self.assertFalse(values_equal({}, MISSING))
        self.assertFalse(values_equal(MISSING, []))
        self.assertTrue(values_equal(MISSING, MISSING))

    def test_containers_compare_canonically(self):
        self.assertTrue(values_equal({"a": 1, "b": 2}, {"b": 2, "a": 1}))
        self.assertFalse(values_equal({}, []))
        self.assertFalse(values_equal([1], {"0": 1}))

    def test_scalar_vs_container(self):
        self.assertFalse(values_equal("[]", []))
        self.assertFalse(values_equal(None, {}))

    def test_type_differences_reported(self):
        ops = json_diff({"a": 1, "b": None, "c": True}, {"a": "1", "b": 0, "c": 1})
        self.assertEqual(
            ops, [_rec("a", "1", 1), _rec("b", 0, None), _rec("c", 1, True)]
        )


# ============================================================================
# Filtering
# ============================================================================


class TestFiltering(unittest.TestCase):
    def test_filter_prunes_subtree(self):
        left = {"meta": {"ts": 1, "inner": {"x": 1}}, "v": 1}
        right = {"meta": {"ts": 2, "inner": {"x": 2}}, "v": 1}
        self.assertEqual(json_diff(left, right, ["meta"]), [])

    def test_filter_is_substring_not_segment(self):
        left = {"foobar": {"baz": 1}, "x": {"foo": [1, 2, 3]}, "valid": 1}
        right = {"foobar": {"baz": 2}, "x": {"foo": [1, 2, 4]}, "valid": 2}
        self.assertEqual(json_diff(left, right, ["foo"]), [_rec("valid", 2, 1)])
        self.assertEqual(
            json_diff(left, right, ["id"]),
            [_rec("foobar.baz", 2, 1), _rec("x.foo[2]", 4, 3)],
        )

    def test_filter_matches_index_path(self):
        ops = json_diff({"a": [1, 2, 3]}, {"a": [9, 9, 9]}, ["a[1]"])
        self.assertEqual(_fields(ops), ["a[0]", "a[2]"])

    def test_filter_is_case_sensitive(self):
        ops = json_diff({"Secret": 1}, {"Secret": 2}, ["secret"])
        self.assertEqual(_fields(ops), ["Secret"])

    def test_filter_suppresses_missing_side(self):
        self.assertEqual(json_diff({}, {"token": "abc"}, ["token"]), [])

    def test_any_filter_matches(self):
        left = {"a": 1, "b": 1, "c": 1}
        right = {"a": 2, "b": 2, "c": 2}
        self.assertEqual(_fields(json_diff(left, right, ["a", "c"])), ["b"])

    def test_filtered_paths_never_reported(self):
        left = {"user": {"id": 1, "name": "x", "roles": ["a"]}, "items": [{"id": 1}]}
        right = {"user": {"id": 2, "name": "y", "roles": ["b"]}, "items": [{"id": 3}]}
        filters = ["user.name", "items"]
        for r in json_diff(left, right, filters):
            for f in filters:
                self.assertNotIn(f, r.field)

    def test_accepts_field_filter(self):
        ops = json_diff({"a": 1, "b": 1}, {"a": 2, "b": 2}, FieldFilter(["a"]))
        self.assertEqual(_fields(ops), ["b"])

    def test_empty_pattern_suppresses_everything(self):
        self.assertEqual(json_diff({"a": 1}, {"a": 2}, [""]), [])


class TestPurity(unittest.TestCase):
    def test_inputs_not_mutated(self):
        left = {"a": [1, {"b": 2}], "c": {}}
        right = {"a": [1, {"b": 3}, 4], "d": None}
        left_copy = json.loads(json.dumps(left))
        right_copy = json.loads(json.dumps(right))
        json_diff(left, right, ["zzz"])
        self.assertEqual(left, left_copy)
        self.assertEqual(right, right_copy)

    def test_deterministic(self):
        left = {"a": [1, 2], "b": {"c": 1, "d": 2}}
        right = {"b": {"d": 3, "c": 1}, "a": [2], "e": 0}
        self.assertEqual(json_diff(left, right), json_diff(left, right))


if __name__ == "__main__":
    unittest.main()
