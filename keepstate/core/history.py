# keepstate/core/history.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Hashable, Iterable, List, TypeVar

from keepstate.core.transition import TransitionRecord

T = TypeVar("T", bound=Hashable)


class TransitionLog(Generic[T]):
    """
    Bounded, insertion-ordered log of committed transitions.

    When full, appending evicts the oldest record first. A capacity of zero
    disables recording: appends are ignored and the log stays empty.

    Not thread-safe on its own; the owning machine serializes access.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("History capacity cannot be negative")
        self._capacity = capacity
        self._records: Deque[TransitionRecord[T]] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        """Maximum number of retained records."""
        return self._capacity

    def append(self, record: TransitionRecord[T]) -> None:
        """Append a record, evicting the oldest one if the log is full."""
        if self._capacity == 0:
            return
        self._records.append(record)

    def replace(self, records: Iterable[TransitionRecord[T]]) -> int:
        """
        Replace the whole log, keeping only the most recent ``capacity``
        records. Returns how many records were dropped from the front.
        """
        incoming = list(records)
        self._records = deque(incoming, maxlen=self._capacity)
        return len(incoming) - len(self._records)

    def snapshot(self) -> List[TransitionRecord[T]]:
        """Return the records oldest-first as a new list."""
        return list(self._records)
