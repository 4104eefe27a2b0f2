"""
Core package providing the state machine itself.

Architecture:
- RuleSet stores permitted transitions
- TransitionLog keeps the bounded history
- FSM owns both plus the current state behind a single lock
"""

from .errors import (
    EmptyHistoryError,
    EmptyRuleSetError,
    InvalidTransitionError,
    KeepStateError,
    MalformedDocumentError,
    RenderError,
    UnencodableStateError,
    UnsupportedDisplayTypeError,
)
from .transition import TransitionRecord
from .rules import RuleSet
from .history import TransitionLog
from .machine import FSM, MachineSnapshot

__all__ = [
    "FSM",
    "MachineSnapshot",
    "RuleSet",
    "TransitionLog",
    "TransitionRecord",
    "KeepStateError",
    "InvalidTransitionError",
    "RenderError",
    "UnsupportedDisplayTypeError",
    "EmptyRuleSetError",
    "EmptyHistoryError",
    "MalformedDocumentError",
    "UnencodableStateError",
]
