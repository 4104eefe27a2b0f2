# tests/unit/core/test_history.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from keepstate.core.history import TransitionLog
from keepstate.core.transition import TransitionRecord


def _records(count):
    return [TransitionRecord.create(f"S{i}", f"S{i + 1}") for i in range(count)]


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        TransitionLog(-1)


def test_append_within_capacity():
    log = TransitionLog(3)
    records = _records(2)
    for record in records:
        log.append(record)
    assert log.snapshot() == records
    assert len(log.snapshot()) == 2


def test_oldest_record_is_evicted_first():
    log = TransitionLog(3)
    records = _records(5)
    for record in records:
        log.append(record)
    assert len(log.snapshot()) == 3
    assert log.snapshot() == records[2:]


def test_zero_capacity_never_records():
    log = TransitionLog(0)
    for record in _records(4):
        log.append(record)
    assert log.snapshot() == []


def test_replace_keeps_most_recent():
    log = TransitionLog(2)
    log.append(TransitionRecord.create("X", "Y"))
    records = _records(5)
    dropped = log.replace(records)
    assert dropped == 3
    assert log.snapshot() == records[3:]


def test_replace_within_capacity_drops_nothing():
    log = TransitionLog(10)
    records = _records(4)
    assert log.replace(records) == 0
    assert log.snapshot() == records


def test_snapshot_is_independent():
    log = TransitionLog(5)
    log.append(TransitionRecord.create("A", "B"))
    snap = log.snapshot()
    snap.clear()
    assert len(log.snapshot()) == 1
