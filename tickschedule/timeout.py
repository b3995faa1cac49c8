"""Software timeouts advanced by the scheduler's tick handler."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Mapping

from .timedtask import EnableState, TimedTask

_UINT32_MAX = 0xFFFFFFFF


class TimeoutState(enum.Enum):
    """Lifecycle of a software timer."""

    NOT_ACTIVE = enum.auto()
    RUNNING = enum.auto()
    STOPPED = enum.auto()
    ELAPSED = enum.auto()


class Timer(enum.Enum):
    """The configured software timers."""

    PIPPO_TIMEOUT = 0
    PLUTO_TIMEOUT = 1
    PAPERINO_TIMEOUT = 2


@dataclass
class SoftTimer:
    """State of one software timer."""

    id: Timer
    index: int
    state: TimeoutState = TimeoutState.NOT_ACTIVE
    count: int = 0
    value: int = 0


class TimeoutTask(TimedTask):
    """Task that counts every configured timer up once per tick."""

    def __init__(self, timeout: int, code: int, isr_enabled: EnableState) -> None:
        super().__init__(timeout, code, isr_enabled)
        self.timers: list[SoftTimer] = []
        self.initialize()

    def initialize(self) -> None:
        """Reset every timer to not active with zero count and value."""
        self.timers = [SoftTimer(id=timer, index=index) for index, timer in enumerate(Timer)]

    def main_loop_task(self, tasks: Mapping[str, TimedTask]) -> None:
        """Nothing to do in the main loop."""

    def tick_task(self, tasks: Mapping[str, TimedTask]) -> None:
        """Advance running timers and mark those that reached their value."""
        for soft in self.timers:
            if soft.state is TimeoutState.RUNNING:
                soft.count = (soft.count + 1) & _UINT32_MAX
            if soft.count >= soft.value:
                soft.state = TimeoutState.ELAPSED

    def _timer(self, timer: Timer) -> SoftTimer:
        return self.timers[timer.value]

    def start(self, timer: Timer, value: int) -> None:
        """Start ``timer`` for ``value`` ticks unless it is already running."""
        if not 0 <= value <= _UINT32_MAX:
            raise ValueError(f"value must be between 0 and {_UINT32_MAX}, got {value}")
        soft = self._timer(timer)
        if soft.state is not TimeoutState.RUNNING:
            soft.state = TimeoutState.RUNNING
            soft.value = value
            soft.count = 0

    def stop(self, timer: Timer) -> None:
        """Stop ``timer``."""
        self._timer(timer).state = TimeoutState.STOPPED

    def state(self, timer: Timer) -> TimeoutState:
        """Current state of ``timer``."""
        return self._timer(timer).state

    def is_elapsed(self, timer: Timer) -> bool:
        """Whether ``timer`` has elapsed."""
        return self.state(timer) is TimeoutState.ELAPSED