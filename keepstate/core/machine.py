# keepstate/core/machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
import threading
from typing import Dict, Generic, Hashable, Iterable, List, Mapping, NamedTuple, Optional, TypeVar

from keepstate.core.errors import InvalidTransitionError
from keepstate.core.history import TransitionLog
from keepstate.core.rules import RuleSet
from keepstate.core.transition import TransitionRecord, freeze_metadata, utc_now

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


class MachineSnapshot(NamedTuple):
    """A consistent, independent copy of a machine's contents."""

    current_state: Hashable
    rules: Dict[Hashable, List[Hashable]]
    history: List[TransitionRecord]


class FSM(Generic[T]):
    """
    A finite state machine that enforces caller-declared transition rules and
    keeps a bounded history of committed transitions.

    All public operations take the same exclusive lock for their full
    duration, so reads and writes never interleave. A transition validates,
    records and commits as one unit: no observer sees the new state without
    its history entry, or the entry without the state.

    Accessors returning collections always hand back copies.
    """

    def __init__(self, initial_state: T, history_capacity: int = 0) -> None:
        """
        :param initial_state: The state in which this machine begins.
        :param history_capacity: Maximum number of retained transitions.
            Zero disables history recording; transitions still happen.
        :raises ValueError: If history_capacity is negative.
        """
        self._lock = threading.Lock()
        self._current_state: T = initial_state
        self._rules: RuleSet[T] = RuleSet()
        self._history: TransitionLog[T] = TransitionLog(history_capacity)

    @property
    def history_capacity(self) -> int:
        """The history capacity fixed at construction."""
        return self._history.capacity

    @property
    def current_state(self) -> T:
        """Get the current state."""
        with self._lock:
            return self._current_state

    def add_rule(self, from_state: T, *to_states: T) -> None:
        """
        Permit transitions from ``from_state`` to each of ``to_states``.
        Repeated calls for the same source accumulate.
        """
        with self._lock:
            self._rules.add_rule(from_state, *to_states)
        logger.debug("Added rule %s -> %s", from_state, list(to_states))

    def can_transition(self, target: T) -> bool:
        """Return True if ``target`` is permitted from the current state."""
        with self._lock:
            return self._rules.is_allowed(self._current_state, target)

    def transition(self, target: T, metadata: Optional[Mapping[str, str]] = None) -> T:
        """
        Move to ``target`` if the rules permit it from the current state.

        :param target: The desired next state.
        :param metadata: Optional string mapping stored with the history record.
        :return: The new current state.
        :raises InvalidTransitionError: If the transition is not permitted.
            The state and history are left unchanged.
        """
        frozen = freeze_metadata(metadata)
        with self._lock:
            previous = self._current_state
            allowed = self._rules.is_allowed(previous, target)
            if allowed:
                if self._history.capacity:
                    self._history.append(
                        TransitionRecord(from_state=previous, to_state=target, timestamp=utc_now(), metadata=frozen)
                    )
                self._current_state = target

        if not allowed:
            logger.debug("Rejected transition %s -> %s", previous, target)
            raise InvalidTransitionError(previous, target)

        logger.debug("Transitioned %s -> %s", previous, target)
        return target

    def history(self) -> List[TransitionRecord[T]]:
        """Return the retained transitions, oldest first, as a new list."""
        with self._lock:
            return self._history.snapshot()

    def rules(self) -> Dict[T, List[T]]:
        """Return a copy of the rule mapping in registration order."""
        with self._lock:
            return self._rules.copy()

    def snapshot(self) -> MachineSnapshot:
        """Capture current state, rules and history in one locked read."""
        with self._lock:
            return MachineSnapshot(
                current_state=self._current_state,
                rules=self._rules.copy(),
                history=self._history.snapshot(),
            )

    def replace(self, current_state: T, records: Iterable[TransitionRecord[T]]) -> int:
        """
        Replace the current state and the entire history in one step. Rules
        are kept. History beyond capacity is dropped from the front.

        Records are not checked against the rules.

        :return: The number of records dropped to fit the capacity.
        """
        staged = list(records)
        with self._lock:
            dropped = self._history.replace(staged)
            self._current_state = current_state
        return dropped

    def rules_diagram(self) -> str:
        """Render the rules as a ``graph LR`` diagram."""
        from keepstate.render.diagram import DiagramRenderer

        return DiagramRenderer().render_rules(self)

    def history_diagram(self) -> str:
        """Render the history as a ``graph TD`` diagram."""
        from keepstate.render.diagram import DiagramRenderer

        return DiagramRenderer().render_history(self)

    def __str__(self) -> str:
        snap = self.snapshot()
        lines = [f"Current State: {snap.current_state}", "Rules:"]
        for from_state, to_states in snap.rules.items():
            lines.append(f"\t{from_state} -> [{', '.join(str(s) for s in to_states)}]")
        lines.append("Transitions:")
        for record in snap.history:
            lines.append(f"\t{record}")
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"FSM(current_state={self.current_state!r}, history_capacity={self.history_capacity})"
