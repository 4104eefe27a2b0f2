# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import threading
from dataclasses import dataclass
from enum import Enum

import pytest

from keepstate import FSM


class OrderState(Enum):
    CREATED = "created"
    PICKED = "picked"
    PACKED = "packed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELED = "canceled"
    REINSTATED = "reinstated"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VersionedState:
    """A struct-like state with its own display conversion."""

    name: str
    group: str
    version: int

    def __str__(self) -> str:
        return f"{self.name}:{self.group}:v{self.version}"


@pytest.fixture
def order_states():
    """The Enum used by the order workflow fixture."""
    return OrderState


@pytest.fixture
def versioned_state():
    """Factory for struct-like states."""
    return VersionedState


@pytest.fixture
def abc_machine():
    """A machine over plain strings with rules A->B, B->C and room for 10 transitions."""
    fsm = FSM("A", history_capacity=10)
    fsm.add_rule("A", "B")
    fsm.add_rule("B", "C")
    return fsm


@pytest.fixture
def order_machine():
    """An order workflow over an Enum state type."""
    fsm = FSM(OrderState.CREATED, history_capacity=10)
    fsm.add_rule(OrderState.CREATED, OrderState.PICKED, OrderState.CANCELED)
    fsm.add_rule(OrderState.PICKED, OrderState.PACKED, OrderState.CANCELED)
    fsm.add_rule(OrderState.PACKED, OrderState.SHIPPED)
    fsm.add_rule(OrderState.SHIPPED, OrderState.DELIVERED)
    fsm.add_rule(OrderState.CANCELED, OrderState.REINSTATED)
    fsm.add_rule(OrderState.REINSTATED, OrderState.PICKED, OrderState.CANCELED)
    return fsm


@pytest.fixture(autouse=True)
def cleanup_threads():
    yield
    # Cleanup any remaining threads after each test
    for thread in threading.enumerate():
        if thread != threading.current_thread() and thread.is_alive():
            thread.join(timeout=1.0)
