# tests/unit/core/test_transition_record.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""Unit tests for the immutable TransitionRecord."""

import dataclasses
import unittest
from datetime import datetime, timezone

from keepstate.core.transition import TransitionRecord, freeze_metadata


class TestTransitionRecord(unittest.TestCase):
    """Test cases for TransitionRecord."""

    def test_create_stamps_utc_time(self):
        before = datetime.now(timezone.utc)
        record = TransitionRecord.create("A", "B")
        after = datetime.now(timezone.utc)

        self.assertEqual(record.from_state, "A")
        self.assertEqual(record.to_state, "B")
        self.assertIsNone(record.metadata)
        self.assertEqual(record.timestamp.tzinfo, timezone.utc)
        self.assertTrue(before <= record.timestamp <= after)

    def test_create_with_explicit_timestamp(self):
        stamp = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        record = TransitionRecord.create("A", "B", timestamp=stamp)
        self.assertEqual(record.timestamp, stamp)

    def test_record_is_frozen(self):
        record = TransitionRecord.create("A", "B")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            record.to_state = "C"

    def test_metadata_is_copied_and_read_only(self):
        metadata = {"requested_by": "ops", "logic_version": "1.0"}
        record = TransitionRecord.create("A", "B", metadata)

        metadata["requested_by"] = "someone else"
        self.assertEqual(record.metadata["requested_by"], "ops")

        with self.assertRaises(TypeError):
            record.metadata["requested_by"] = "x"

    def test_metadata_dict_returns_mutable_copy(self):
        record = TransitionRecord.create("A", "B", {"k": "v"})
        copied = record.metadata_dict()
        copied["k"] = "changed"
        self.assertEqual(record.metadata["k"], "v")
        self.assertIsNone(TransitionRecord.create("A", "B").metadata_dict())

    def test_equality(self):
        stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
        first = TransitionRecord.create("A", "B", {"k": "v"}, timestamp=stamp)
        second = TransitionRecord.create("A", "B", {"k": "v"}, timestamp=stamp)
        self.assertEqual(first, second)
        self.assertNotEqual(first, TransitionRecord.create("A", "C", {"k": "v"}, timestamp=stamp))

    def test_str(self):
        stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
        record = TransitionRecord.create("A", "B", {"k": "v"}, timestamp=stamp)
        self.assertEqual(
            str(record),
            "Transition from A to B at 2024-01-01T00:00:00+00:00 with metadata {'k': 'v'}",
        )

    def test_freeze_metadata_none(self):
        self.assertIsNone(freeze_metadata(None))
        self.assertEqual(dict(freeze_metadata({})), {})


if __name__ == "__main__":
    unittest.main()
