# keepstate/persistence/document.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""Models describing the serialized form of a machine.

Only the current state and the transition history are part of the document.
Rules are runtime configuration and never serialized.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator


class TransitionDocument(BaseModel):
    """One history entry: ``from_state``, ``to_state``, RFC 3339 ``timestamp``, ``metadata``."""

    model_config = ConfigDict(frozen=True)

    from_state: Any = Field(..., description="State the machine left")
    to_state: Any = Field(..., description="State the machine entered")
    timestamp: AwareDatetime = Field(..., description="Commit time, RFC 3339 with an offset in the text form")
    metadata: Optional[Dict[str, str]] = Field(default=None, description="Caller supplied metadata")

    @field_validator("timestamp", mode="before")
    @classmethod
    def reject_numeric_timestamp(cls, value: Any) -> Any:
        # Epoch numbers would otherwise be coerced.
        if not isinstance(value, (str, datetime)):
            raise ValueError("timestamp must be an RFC 3339 string")
        return value


class MachineDocument(BaseModel):
    """Top-level document: ``current_state`` plus ``transitions`` oldest first."""

    model_config = ConfigDict(frozen=True)

    current_state: Any = Field(..., description="The machine's current state")
    transitions: Optional[List[TransitionDocument]] = Field(
        default_factory=list, description="History entries, oldest first"
    )


__all__ = ["MachineDocument", "TransitionDocument"]
