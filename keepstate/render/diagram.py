# keepstate/render/diagram.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Mermaid flowchart text for a machine's rules or its transition history.

Rules diagram::

    graph LR;
    created;
    created --> picked;
    created --> canceled;

Only source states get a node line. Targets that never act as a source show
up in edges alone.

History diagram::

    graph TD;
    A;
    B;
    C;
    A -->|1| B;
    B -->|2| C;

Every state in the history gets one node line, in first-seen order, and each
edge carries the 1-based position of the transition.
"""

from __future__ import annotations

import logging
from typing import Hashable

from keepstate.core.display import display, is_displayable
from keepstate.core.errors import EmptyHistoryError, EmptyRuleSetError, UnsupportedDisplayTypeError
from keepstate.core.machine import FSM

logger = logging.getLogger(__name__)

RULES_HEADER = "graph LR;"
HISTORY_HEADER = "graph TD;"


class DiagramRenderer:
    """Renders read-only snapshots of a machine as diagram text."""

    def render_rules(self, fsm: FSM) -> str:
        """
        :raises UnsupportedDisplayTypeError: If states have no display conversion.
        :raises EmptyRuleSetError: If no rules are defined.
        """
        snap = fsm.snapshot()
        self._check_displayable(snap.current_state)
        if not snap.rules:
            raise EmptyRuleSetError()

        lines = [RULES_HEADER]
        for from_state in snap.rules:
            lines.append(f"{display(from_state)};")
        for from_state, to_states in snap.rules.items():
            for to_state in to_states:
                lines.append(f"{display(from_state)} --> {display(to_state)};")

        logger.debug("Rendered rules diagram with %d sources", len(snap.rules))
        return "\n".join(lines) + "\n"

    def render_history(self, fsm: FSM) -> str:
        """
        :raises UnsupportedDisplayTypeError: If states have no display conversion.
        :raises EmptyHistoryError: If no transitions are recorded.
        """
        snap = fsm.snapshot()
        self._check_displayable(snap.current_state)
        if not snap.history:
            raise EmptyHistoryError()

        seen = dict.fromkeys(state for record in snap.history for state in (record.from_state, record.to_state))

        lines = [HISTORY_HEADER]
        lines.extend(f"{display(state)};" for state in seen)
        for number, record in enumerate(snap.history, start=1):
            lines.append(f"{display(record.from_state)} -->|{number}| {display(record.to_state)};")

        logger.debug("Rendered history diagram with %d transitions", len(snap.history))
        return "\n".join(lines) + "\n"

    @staticmethod
    def _check_displayable(state: Hashable) -> None:
        if not is_displayable(state):
            raise UnsupportedDisplayTypeError(type(state))
