"""keepstate: thread-safe finite state container

This package provides a small finite state machine that enforces
caller-declared transition rules over any hashable state type.

Responsibilities:
    - Rule registration and transition validation
    - Bounded, time-ordered transition history with metadata
    - Round-trip serialization of state and history
    - Text diagrams of rules and history

Cross-cutting Concerns:
    Thread Safety:
        - All public machine operations share one exclusive lock
        - Accessors return independent copies

    Error Handling:
        - Structured error hierarchy rooted at KeepStateError
        - Every error is recoverable; the machine stays usable

    Logging:
        - Module level loggers under the ``keepstate`` namespace
        - No handlers configured by the library
"""

import logging

from .core import (
    FSM,
    EmptyHistoryError,
    EmptyRuleSetError,
    InvalidTransitionError,
    KeepStateError,
    MachineSnapshot,
    MalformedDocumentError,
    RenderError,
    RuleSet,
    TransitionLog,
    TransitionRecord,
    UnencodableStateError,
    UnsupportedDisplayTypeError,
)
from .persistence import MachineDocument, Serializer, TransitionDocument
from .render import DiagramRenderer

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FSM",
    "MachineSnapshot",
    "RuleSet",
    "TransitionLog",
    "TransitionRecord",
    "Serializer",
    "MachineDocument",
    "TransitionDocument",
    "DiagramRenderer",
    "KeepStateError",
    "InvalidTransitionError",
    "RenderError",
    "UnsupportedDisplayTypeError",
    "EmptyRuleSetError",
    "EmptyHistoryError",
    "MalformedDocumentError",
    "UnencodableStateError",
]
