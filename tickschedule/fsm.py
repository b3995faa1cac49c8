"""Minimal finite state machine base with enter/exit hooks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class FiniteStateMachine(ABC):
    """Base class for state machines that react to state transitions.

    Subclasses implement :meth:`handle`, :meth:`on_enter_state` and
    :meth:`on_exit_state`; :meth:`initialize` runs once on construction.
    """

    def __init__(self) -> None:
        self.state: Any = None
        self.initialize()

    def initialize(self) -> None:
        """Prepare the machine; called once from the constructor."""

    @abstractmethod
    def handle(self) -> None:
        """Run one step of the machine."""

    @abstractmethod
    def on_enter_state(self) -> None:
        """Called right after the state has changed."""

    @abstractmethod
    def on_exit_state(self) -> None:
        """Called right before the state changes."""

    def set_state(self, state: Any) -> None:
        """Leave the current state, switch to ``state`` and enter it."""
        self.on_exit_state()
        self.state = state
        self.on_enter_state()