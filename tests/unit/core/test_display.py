# tests/unit/core/test_display.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from dataclasses import dataclass
from enum import Enum

import pytest

from keepstate.core.display import display, is_displayable
from keepstate.core.errors import UnsupportedDisplayTypeError


class Color(Enum):
    RED = 1


class Labelled(str, Enum):
    OPEN = "open"


@dataclass(frozen=True)
class Plain:
    name: str


class Opaque:
    pass


def test_strings_are_displayable():
    assert is_displayable("idle")
    assert display("idle") == "idle"


def test_str_subclass_displays_raw_value():
    assert is_displayable(Labelled.OPEN)
    assert display(Labelled.OPEN) == "open"


def test_enum_members_use_enum_str():
    assert is_displayable(Color.RED)
    assert display(Color.RED) == "Color.RED"


def test_custom_str_is_displayable(versioned_state):
    state = versioned_state("created", "dropship", 1)
    assert is_displayable(state)
    assert display(state) == "created:dropship:v1"


@pytest.mark.parametrize("state", [Opaque(), Plain("x")])
def test_types_without_str_are_not_displayable(state):
    assert not is_displayable(state)
    with pytest.raises(UnsupportedDisplayTypeError):
        display(state)
