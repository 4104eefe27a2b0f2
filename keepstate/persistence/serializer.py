# keepstate/persistence/serializer.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Machine serialization.

Encodes a machine's current state and transition history into a document of
the form::

    {
        "current_state": ...,
        "transitions": [
            {"from_state": ..., "to_state": ..., "timestamp": "...", "metadata": {...} | null},
            ...
        ]
    }

and decodes such documents back, either into a new machine or in place.
Decoding is staged: the document is fully validated and converted before the
target machine is touched, so a malformed document leaves it unchanged.

State values pass through an optional codec so that non JSON-native states
(enums, dataclasses, ...) can be stored.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Hashable, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from keepstate.core.errors import MalformedDocumentError, UnencodableStateError
from keepstate.core.machine import FSM
from keepstate.core.transition import TransitionRecord
from keepstate.persistence.document import MachineDocument, TransitionDocument

logger = logging.getLogger(__name__)

StateCodec = Callable[[Any], Any]
DocumentInput = Union[Mapping[str, Any], MachineDocument]


_JSON_SCALARS = (str, int, float, bool, type(None))


def _encode_default(state: Any) -> Any:
    """
    Pass JSON-native states through unchanged; tuples become arrays.

    Anything that would come back as a different type (enums, str or int
    subclasses, dataclasses, ...) is refused rather than silently flattened.
    """
    if type(state) is tuple:
        return [_encode_default(item) for item in state]
    if type(state) not in _JSON_SCALARS:
        raise UnencodableStateError(state)
    if type(state) is float and not math.isfinite(state):
        raise UnencodableStateError(state)
    return state


def _decode_default(value: Any) -> Any:
    """Inverse of ``_encode_default``: arrays become tuples, recursively."""
    if isinstance(value, list):
        return tuple(_decode_default(item) for item in value)
    return value


class Serializer:
    """
    Converts machines to and from documents.

    :param encode_state: Maps a state to a JSON-compatible value. By default
        JSON scalars pass through and tuples become arrays; other types raise
        ``UnencodableStateError``.
    :param decode_state: Inverse of ``encode_state``. By default arrays
        become tuples.
    """

    def __init__(
        self,
        encode_state: Optional[StateCodec] = None,
        decode_state: Optional[StateCodec] = None,
    ) -> None:
        self._encode_state = encode_state or _encode_default
        self._decode_state = decode_state or _decode_default

    def to_document(self, fsm: FSM) -> MachineDocument:
        """
        Capture ``fsm`` as a validated document model.

        :raises UnencodableStateError: If the default codec meets a state it
            cannot store faithfully.
        """
        snap = fsm.snapshot()
        return MachineDocument(
            current_state=self._encode_state(snap.current_state),
            transitions=[
                TransitionDocument(
                    from_state=self._encode_state(record.from_state),
                    to_state=self._encode_state(record.to_state),
                    timestamp=record.timestamp,
                    metadata=record.metadata_dict(),
                )
                for record in snap.history
            ],
        )

    def serialize(self, fsm: FSM) -> dict:
        """Encode ``fsm`` as a plain dict with JSON-compatible values."""
        document = self.to_document(fsm)
        logger.debug("Serialized machine with %d transitions", len(document.transitions or []))
        return document.model_dump(mode="json")

    def dumps(self, fsm: FSM) -> str:
        """Encode ``fsm`` as JSON text."""
        return self.to_document(fsm).model_dump_json()

    def deserialize(self, document: DocumentInput, capacity: int) -> FSM:
        """
        Build a new machine from ``document``.

        The machine starts in the document's current state with its history,
        front-truncated to ``capacity``. It has no rules.

        :raises MalformedDocumentError: If the document has the wrong shape.
        """
        current_state, records = self._decode(document)
        fsm = FSM(current_state, capacity)
        self._install(fsm, current_state, records)
        return fsm

    def loads(self, text: Union[str, bytes], capacity: int) -> FSM:
        """Build a new machine from JSON text."""
        return self.deserialize(self._parse(text), capacity)

    def restore(self, fsm: FSM, document: DocumentInput) -> None:
        """
        Replace the current state and history of an existing machine with the
        document's contents. Its rules and capacity are kept.

        :raises MalformedDocumentError: If the document has the wrong shape;
            ``fsm`` is left unchanged.
        """
        current_state, records = self._decode(document)
        dropped = self._install(fsm, current_state, records)
        logger.info("Restored machine to state %s with %d transitions", current_state, len(records) - dropped)

    def restore_json(self, fsm: FSM, text: Union[str, bytes]) -> None:
        """Restore an existing machine from JSON text."""
        self.restore(fsm, self._parse(text))

    def _install(self, fsm: FSM, current_state: Hashable, records: List[TransitionRecord]) -> int:
        dropped = fsm.replace(current_state, records)
        if dropped:
            logger.warning(
                "Decoded history has %d transitions, dropped the oldest %d to fit capacity %d",
                len(records),
                dropped,
                fsm.history_capacity,
            )
        return dropped

    def _parse(self, text: Union[str, bytes]) -> MachineDocument:
        try:
            return MachineDocument.model_validate_json(text)
        except ValidationError as e:
            raise MalformedDocumentError(f"Malformed machine document: {e}", e.errors()) from e

    def _decode(self, document: DocumentInput) -> Tuple[Hashable, List[TransitionRecord]]:
        """Validate and convert a document without touching any machine."""
        if isinstance(document, MachineDocument):
            model = document
        else:
            try:
                model = MachineDocument.model_validate(document)
            except ValidationError as e:
                raise MalformedDocumentError(f"Malformed machine document: {e}", e.errors()) from e

        current_state = self._state(model.current_state, "current_state")
        records = [
            TransitionRecord.create(
                from_state=self._state(entry.from_state, f"transitions[{index}].from_state"),
                to_state=self._state(entry.to_state, f"transitions[{index}].to_state"),
                metadata=entry.metadata,
                timestamp=entry.timestamp,
            )
            for index, entry in enumerate(model.transitions or [])
        ]
        return current_state, records

    def _state(self, value: Any, location: str) -> Hashable:
        try:
            state = self._decode_state(value)
            hash(state)
        except (TypeError, ValueError, KeyError) as e:
            raise MalformedDocumentError(
                f"Cannot decode state at {location}: {e}", [{"loc": location, "msg": str(e)}]
            ) from e
        return state
