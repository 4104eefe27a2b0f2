# keepstate/core/display.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""Display capability used by diagram rendering."""

from typing import Any

from keepstate.core.errors import UnsupportedDisplayTypeError


def is_displayable(state: Any) -> bool:
    """
    A state is displayable when it is a string or its type provides its own
    ``__str__``. Types relying on ``object.__str__`` are not.
    """
    if isinstance(state, str):
        return True
    return type(state).__str__ is not object.__str__


def display(state: Any) -> str:
    """
    Convert a state to its display text.

    :raises UnsupportedDisplayTypeError: If the state is not displayable.
    """
    if not is_displayable(state):
        raise UnsupportedDisplayTypeError(type(state))
    if isinstance(state, str):
        return str.__str__(state)
    return str(state)
