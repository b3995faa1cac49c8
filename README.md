# tickschedule

A small cooperative scheduler driven by a periodic tick. You can use it to model
firmware-style task scheduling in plain Python. It is also useful anywhere you want
time-sliced work paced by a tick source of your own.

## Parts

### `tickschedule.timedtask`

- `EnableState`: `ENABLE` or `NOT_ENABLE`.
- `TimedTask`: the abstract base for scheduled work. Its constructor is
  `TimedTask(timeout, code, isr_enabled)`. `timeout` and `code` must lie in
  0..65535, otherwise `ValueError` is raised. `isr_enabled` is an `EnableState`
  that says whether the task's tick hook runs.
  - Every task has an `enabled` flag, which starts at `NOT_ENABLE`. It also has a
    16-bit tick counter, read through `counter` and changed with `counter_up()`
    (wraps at 65535) and `counter_reset()`.
  - Subclasses implement three methods:
    - `initialize()`
    - `main_loop_task(tasks)`
    - `tick_task(tasks)`

    `tasks` is the scheduler's name-to-task mapping.

### `tickschedule.scheduler`

- `SchedulerState`: the phases of the scheduler.
- `Scheduler(tasks=None)`: takes a mapping of names to tasks and visits the tasks
  in name order. If you give no mapping, it builds one holding a single `TimeoutTask`
  under the name `"Timeout"`.
  - `initialize_tasks()` calls `initialize()` on every task.
  - `timer_isr()` handles one tick. It counts the tick, advances every task's counter
    and then steps through the phases:
    - While in the enable-evaluation phase, it enables each not-enabled task whose
      counter is below its timeout and resets that counter.
    - Once `SCHEDULED_ISR_TICKS` (8) ticks have been counted, it moves to the
      tick-task phase.
    - In the tick-task phase, it runs `tick_task` on every task with `isr_enabled`
      set to `ENABLE`.
    - After `SCHEDULED_MAIN_TICKS` (10) runs of that phase without a break, it moves
      to the main-loop phase. Otherwise it goes back to enable evaluation by way of
      one transitional tick.
  - `main_loop()` does nothing outside the main-loop phase. Inside it, it runs
    `main_loop_task` once for each enabled task and clears that task's `enabled`
    flag. Then it returns to enable evaluation.

### `tickschedule.timeout`

- `TimeoutTask(timeout, code, isr_enabled)`: a task that keeps one `SoftTimer` for
  each member of `Timer` (`PIPPO_TIMEOUT`, `PLUTO_TIMEOUT`, `PAPERINO_TIMEOUT`).
  The states are given by `TimeoutState`: `NOT_ACTIVE`, `RUNNING`, `STOPPED` and
  `ELAPSED`.
  - `start(timer, value)` starts a timer for `value` ticks, where `value` must lie in
    0..2**32-1. If the timer is already running, the call does nothing.
  - `stop(timer)` marks a timer as stopped.
  - `state(timer)` returns the timer's state, and `is_elapsed(timer)` tells whether
    it has elapsed.
  - `tick_task(tasks)` adds one to the count of every running timer. It then marks as
    elapsed every timer whose count has reached its value, whatever that timer's
    state. This also applies to timers never started, whose count and value are both 0.
  - `initialize()` resets all timers.

### `tickschedule.fsm`

- `FiniteStateMachine`: an abstract base with these members:
  - `handle()`, `on_enter_state()` and `on_exit_state()` are for subclasses to
    implement.
  - `initialize()` is called from the constructor.
  - `state` starts as `None`.
  - `set_state(state)` runs the exit hook, stores the new state and then runs the
    enter hook.

## Example

```python
from tickschedule.scheduler import Scheduler
from tickschedule.timedtask import EnableState, TimedTask
from tickschedule.timeout import Timer, TimeoutTask


class Blink(TimedTask):
    def initialize(self):
        self.runs = 0

    def main_loop_task(self, tasks):
        self.runs += 1
        tasks["Timeout"].start(Timer.PIPPO_TIMEOUT, 50)

    def tick_task(self, tasks):
        pass


timeouts = TimeoutTask(65200, 3, EnableState.ENABLE)
scheduler = Scheduler({"Timeout": timeouts, "Blink": Blink(100, 3, EnableState.ENABLE)})
scheduler.initialize_tasks()

for _ in range(1000):
    scheduler.timer_isr()
    scheduler.main_loop()

print(timeouts.is_elapsed(Timer.PIPPO_TIMEOUT))
```

## What it does not do

There is no tick source and no command-line program. You must call `timer_isr()`
and `main_loop()` yourself, from a loop, a thread or a real timer. The set of
software timers is fixed by the `Timer` enum.

## Tests

```
pip install -e ".[test]"
pytest
```