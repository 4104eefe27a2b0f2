# keepstate/core/rules.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Dict, Generic, Hashable, List, TypeVar

T = TypeVar("T", bound=Hashable)


class RuleSet(Generic[T]):
    """
    Adjacency storage for permitted transitions: each source state maps to an
    ordered list of target states.

    Rules only accumulate. Registering the same source twice extends its list,
    and duplicate targets are kept as given. Source keys and targets keep
    their insertion order, which is what diagram rendering iterates over.

    Not thread-safe on its own; the owning machine serializes access.
    """

    def __init__(self) -> None:
        self._rules: Dict[T, List[T]] = {}

    def add_rule(self, from_state: T, *to_states: T) -> None:
        """
        Append one or more permitted targets for ``from_state``.

        :param from_state: The source state.
        :param to_states: Target states, appended in the given order.
        """
        self._rules.setdefault(from_state, []).extend(to_states)

    def is_allowed(self, from_state: T, to_state: T) -> bool:
        """
        Return True if ``to_state`` was registered as a target of ``from_state``.
        """
        targets = self._rules.get(from_state)
        if not targets:
            return False
        return any(target == to_state for target in targets)

    def copy(self) -> Dict[T, List[T]]:
        """Return an independent copy of the adjacency mapping."""
        return {from_state: list(targets) for from_state, targets in self._rules.items()}
