# keepstate/core/transition.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Generic, Hashable, Mapping, Optional, TypeVar

T = TypeVar("T", bound=Hashable)


def utc_now() -> datetime:
    """Commit-time clock used for transition timestamps."""
    return datetime.now(timezone.utc)


def freeze_metadata(metadata: Optional[Mapping[str, str]]) -> Optional[Mapping[str, str]]:
    """Copy caller metadata into a read-only mapping; None stays None."""
    if metadata is None:
        return None
    return MappingProxyType({str(key): str(value) for key, value in metadata.items()})


@dataclass(frozen=True)
class TransitionRecord(Generic[T]):
    """
    An executed state change as kept in the machine's history.

    Records are created by the machine when a transition commits, or rebuilt
    from a serialized document. They are immutable, and ``metadata`` is a
    read-only view over a private copy of the caller's mapping.
    """

    from_state: T
    to_state: T
    timestamp: datetime
    metadata: Optional[Mapping[str, str]] = None

    @classmethod
    def create(
        cls,
        from_state: T,
        to_state: T,
        metadata: Optional[Mapping[str, str]] = None,
        timestamp: Optional[datetime] = None,
    ) -> "TransitionRecord[T]":
        """
        Build a record, stamping it with the current UTC time unless a
        timestamp is given.
        """
        return cls(
            from_state=from_state,
            to_state=to_state,
            timestamp=timestamp if timestamp is not None else utc_now(),
            metadata=freeze_metadata(metadata),
        )

    def metadata_dict(self) -> Optional[dict]:
        """Return a mutable copy of the metadata, or None."""
        if self.metadata is None:
            return None
        return dict(self.metadata)

    def __str__(self) -> str:
        return (
            f"Transition from {self.from_state} to {self.to_state} "
            f"at {self.timestamp.isoformat()} with metadata {self.metadata_dict()}"
        )
