"""
Tests for component list loading and tracking
"""

import os
import shutil
import tempfile
import unittest

from prepack_debug.report.tracking import MISSING, ComponentTracker


class TestComponentListLoading(unittest.TestCase):
    """Test reading components.txt"""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.test_dir, "components.txt")

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_missing_file_tracks_nothing(self):
        tracker = ComponentTracker.from_file(self.path)

        self.assertEqual(len(tracker), 0)
        self.assertEqual(tracker.unique_evaluated, 0)

    def test_names_start_missing_in_order(self):
        with open(self.path, 'w') as f:
            f.write("Foo\nBar")

        tracker = ComponentTracker.from_file(self.path)

        self.assertEqual(list(tracker.entries()), [("Foo", MISSING), ("Bar", MISSING)])

    def test_trailing_newline_registers_empty_name(self):
        with open(self.path, 'w') as f:
            f.write("Foo\nBar\n")

        tracker = ComponentTracker.from_file(self.path)

        self.assertEqual(len(tracker), 3)
        self.assertIn("", tracker)
        self.assertTrue(tracker.is_missing(""))


class TestComponentTracker(unittest.TestCase):
    """Test status accumulation"""

    def test_first_observation_counts_once(self):
        tracker = ComponentTracker(["Foo", "Bar"])

        tracker.observe("Foo", "inlined")
        tracker.observe("Foo", "bail-out")

        self.assertEqual(tracker.components["Foo"], ["inlined", "bail-out"])
        self.assertEqual(tracker.components["Bar"], MISSING)
        self.assertEqual(tracker.unique_evaluated, 1)

    def test_untracked_names_are_ignored(self):
        tracker = ComponentTracker(["Foo"])

        tracker.observe("Other", "inlined")

        self.assertNotIn("Other", tracker)
        self.assertEqual(tracker.unique_evaluated, 0)

    def test_never_returns_to_missing(self):
        tracker = ComponentTracker(["Foo"])

        tracker.observe("Foo", "missing")
        tracker.observe("Foo", "inlined")

        self.assertFalse(tracker.is_missing("Foo"))
        self.assertEqual(tracker.components["Foo"], ["missing", "inlined"])
        self.assertEqual(tracker.unique_evaluated, 1)

    def test_counter_is_per_distinct_name(self):
        tracker = ComponentTracker(["A", "B", "C"])

        for name in ["A", "B", "A", "B", "A"]:
            tracker.observe(name, "inlined")

        self.assertEqual(tracker.unique_evaluated, 2)
        self.assertEqual(len(tracker.components["A"]), 3)


if __name__ == '__main__':
    unittest.main()
