"""Base class for tasks driven by a tick scheduler."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Mapping

_UINT16_MAX = 0xFFFF


class EnableState(enum.Enum):
    """Whether a task (or its tick handler) is enabled."""

    ENABLE = enum.auto()
    NOT_ENABLE = enum.auto()


def _check_uint16(name: str, value: int) -> int:
    if not 0 <= value <= _UINT16_MAX:
        raise ValueError(f"{name} must be between 0 and {_UINT16_MAX}, got {value}")
    return value


class TimedTask(ABC):
    """A task with a timeout, a code, an enable flag and a 16-bit tick counter."""

    def __init__(self, timeout: int, code: int, isr_enabled: EnableState) -> None:
        self.timeout = _check_uint16("timeout", timeout)
        self.code = _check_uint16("code", code)
        self.isr_enabled = isr_enabled
        self.enabled = EnableState.NOT_ENABLE
        self._counter = 0

    @property
    def counter(self) -> int:
        """Ticks counted since the last reset."""
        return self._counter

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the task before scheduling starts."""

    @abstractmethod
    def main_loop_task(self, tasks: Mapping[str, "TimedTask"]) -> None:
        """Work done in the main loop when the task is enabled."""

    @abstractmethod
    def tick_task(self, tasks: Mapping[str, "TimedTask"]) -> None:
        """Work done on every timer tick when the tick handler is enabled."""

    def counter_up(self) -> None:
        """Advance the tick counter, wrapping at 16 bits."""
        self._counter = (self._counter + 1) & _UINT16_MAX

    def counter_reset(self) -> None:
        """Set the tick counter back to zero."""
        self._counter = 0