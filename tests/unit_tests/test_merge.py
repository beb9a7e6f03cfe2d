"""
Unit tests for the field fallback merge.
"""

import unittest
from types import SimpleNamespace

from merge import merge_fields, resolve


class TestResolve(unittest.TestCase):
    """Test resolve."""

    def test_override_wins(self):
        self.assertEqual(resolve("new", "old"), "new")

    def test_none_falls_back(self):
        self.assertEqual(resolve(None, "old"), "old")

    def test_falsy_values_are_overrides(self):
        """Test 0, False, "" and {} count as set."""
        for value in (0, False, "", {}):
            with self.subTest(value=value):
                self.assertEqual(resolve(value, "old"), value)


class TestMergeFields(unittest.TestCase):
    """Test merge_fields."""

    def test_fields_resolve_independently(self):
        overrides = SimpleNamespace(a="x", b=None, c=None)
        snapshot = SimpleNamespace(a="1", b="2", c=None)

        merged = merge_fields(overrides, snapshot, ("a", "b", "c"))

        self.assertEqual(merged, {"a": "x", "b": "2", "c": None})

    def test_only_named_fields(self):
        overrides = SimpleNamespace(a=None, extra="ignored")
        snapshot = SimpleNamespace(a="1", extra="also ignored")

        self.assertEqual(merge_fields(overrides, snapshot, ("a",)), {"a": "1"})


if __name__ == "__main__":
    unittest.main()
