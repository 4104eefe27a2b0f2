# keepstate/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Dict, List, Optional


class KeepStateError(Exception):
    """
    Base exception class for errors raised by the state container.

    :param message: Human readable description.
    :param details: Optional structured context for the failure.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidTransitionError(KeepStateError):
    """
    Raised when the target state is not permitted from the current state.
    The machine is left untouched; callers may retry with another target.
    """

    def __init__(self, from_state: Any, to_state: Any, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(f"invalid state transition from {from_state} to {to_state}", details)
        self.from_state = from_state
        self.to_state = to_state


class RenderError(KeepStateError):
    """
    Base class for diagram rendering failures.
    """


class UnsupportedDisplayTypeError(RenderError):
    """
    Raised when a state type offers no display conversion.
    """

    def __init__(self, state_type: type, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(f"type {state_type.__name__} is not a string and does not define __str__", details)
        self.state_type = state_type


class EmptyRuleSetError(RenderError):
    """
    Raised when a rules diagram is requested but no rules are defined.
    """

    def __init__(self) -> None:
        super().__init__("no rules defined")


class EmptyHistoryError(RenderError):
    """
    Raised when a history diagram is requested but no transitions are recorded.
    """

    def __init__(self) -> None:
        super().__init__("no transition history")


class MalformedDocumentError(KeepStateError):
    """
    Raised when a serialized document does not have the expected shape.
    The target machine keeps its previous state.
    """

    def __init__(self, message: str, errors: Optional[List[Any]] = None) -> None:
        super().__init__(message, {"errors": list(errors or [])})
        self.errors = list(errors or [])


class UnencodableStateError(KeepStateError):
    """
    Raised when serializing a state the default codec cannot store without
    losing its type. Supply ``encode_state``/``decode_state`` for such types.
    """

    def __init__(self, state: Any, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            f"state {state!r} of type {type(state).__name__} needs an explicit encode_state/decode_state codec",
            details,
        )
        self.state = state
