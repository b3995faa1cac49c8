"""Tick-driven cooperative scheduler for timed tasks."""

from __future__ import annotations

import enum
from typing import Mapping

from .timedtask import EnableState, TimedTask
from .timeout import TimeoutTask

MAX_INTER16 = 65200
SCHEDULED_MAIN_TICKS = 10
SCHEDULED_ISR_TICKS = 8


class SchedulerState(enum.Enum):
    """Phases of the scheduler."""

    TASK_ENABLE_EVAL = enum.auto()
    TRANS_TO_MAINLOOP = enum.auto()
    MAIN_LOOP_EXE = enum.auto()
    TIMER_ISR_EXE = enum.auto()
    TRANS_TO_ENABLE_EVAL = enum.auto()


def _default_tasks() -> dict[str, TimedTask]:
    return {"Timeout": TimeoutTask(MAX_INTER16, 3, EnableState.ENABLE)}


class Scheduler:
    """Drives named tasks from a periodic timer and a main loop.

    Tasks are visited in order of their names.
    """

    def __init__(self, tasks: Mapping[str, TimedTask] | None = None) -> None:
        source = _default_tasks() if tasks is None else tasks
        self.tasks: dict[str, TimedTask] = dict(sorted(source.items()))
        self.state = SchedulerState.TASK_ENABLE_EVAL
        self.tick_count = 0
        self.isr_run_count = 0

    def initialize_tasks(self) -> None:
        """Initialise every task."""
        for task in self.tasks.values():
            task.initialize()

    def timer_isr(self) -> None:
        """Handle one timer tick."""
        self.tick_count = (self.tick_count + 1) & 0xFF
        for task in self.tasks.values():
            task.counter_up()

        if self.state is SchedulerState.TASK_ENABLE_EVAL:
            for task in self.tasks.values():
                if task.enabled is EnableState.NOT_ENABLE and task.counter < task.timeout:
                    task.enabled = EnableState.ENABLE
                    task.counter_reset()
            if self.tick_count >= SCHEDULED_ISR_TICKS:
                self.state = SchedulerState.TIMER_ISR_EXE
                self.isr_run_count = 0
        elif self.state is SchedulerState.TIMER_ISR_EXE:
            self.isr_run_count = (self.isr_run_count + 1) & 0xFF
            for task in self.tasks.values():
                if task.isr_enabled is EnableState.ENABLE:
                    task.tick_task(self.tasks)
            if self.isr_run_count == SCHEDULED_MAIN_TICKS:
                self.state = SchedulerState.MAIN_LOOP_EXE
                self.isr_run_count = 0
            else:
                self.state = SchedulerState.TRANS_TO_ENABLE_EVAL
        elif self.state is SchedulerState.TRANS_TO_ENABLE_EVAL:
            self.state = SchedulerState.TASK_ENABLE_EVAL

    def main_loop(self) -> None:
        """Run enabled tasks once when the scheduler is in its main-loop phase."""
        if self.state is not SchedulerState.MAIN_LOOP_EXE:
            return
        for task in self.tasks.values():
            if task.enabled is EnableState.ENABLE:
                task.enabled = EnableState.NOT_ENABLE
                task.main_loop_task(self.tasks)
        self.state = SchedulerState.TRANS_TO_ENABLE_EVAL