from tickschedule.scheduler import (
    MAX_INTER16,
    SCHEDULED_ISR_TICKS,
    Scheduler,
    SchedulerState,
)
from tickschedule.timedtask import EnableState, TimedTask
from tickschedule.timeout import TimeoutTask, Timer


class Recorder(TimedTask):
    def __init__(self, timeout=100, isr=EnableState.ENABLE):
        super().__init__(timeout, 1, isr)
        self.calls = []

    def initialize(self):
        self.calls.append("init")

    def main_loop_task(self, tasks):
        self.calls.append(("main", tuple(tasks)))

    def tick_task(self, tasks):
        self.calls.append("tick")


def test_default_tasks_hold_timeout_task():
    scheduler = Scheduler()
    assert list(scheduler.tasks) == ["Timeout"]
    task = scheduler.tasks["Timeout"]
    assert isinstance(task, TimeoutTask)
    assert task.timeout == MAX_INTER16


def test_tasks_are_ordered_by_name():
    scheduler = Scheduler({"b": Recorder(), "a": Recorder()})
    assert list(scheduler.tasks) == ["a", "b"]


def test_initialize_tasks_calls_every_task():
    a, b = Recorder(), Recorder()
    Scheduler({"a": a, "b": b}).initialize_tasks()
    assert a.calls == ["init"]
    assert b.calls == ["init"]


def test_enable_eval_enables_task_below_timeout():
    task = Recorder(timeout=100)
    scheduler = Scheduler({"t": task})
    scheduler.timer_isr()
    assert task.enabled is EnableState.ENABLE
    assert task.counter == 0


def test_enable_eval_skips_task_at_timeout():
    task = Recorder(timeout=0)
    scheduler = Scheduler({"t": task})
    scheduler.timer_isr()
    assert task.enabled is EnableState.NOT_ENABLE
    assert task.counter == 1


def test_state_sequence_through_isr_phase():
    isr_task = Recorder(isr=EnableState.ENABLE)
    quiet = Recorder(isr=EnableState.NOT_ENABLE)
    scheduler = Scheduler({"isr": isr_task, "quiet": quiet})
    for _ in range(SCHEDULED_ISR_TICKS - 1):
        scheduler.timer_isr()
        assert scheduler.state is SchedulerState.TASK_ENABLE_EVAL
    scheduler.timer_isr()
    assert scheduler.state is SchedulerState.TIMER_ISR_EXE
    scheduler.timer_isr()
    assert isr_task.calls == ["tick"]
    assert quiet.calls == []
    assert scheduler.state is SchedulerState.TRANS_TO_ENABLE_EVAL
    scheduler.timer_isr()
    assert scheduler.state is SchedulerState.TASK_ENABLE_EVAL


def test_main_loop_runs_enabled_tasks_once():
    on, off = Recorder(), Recorder()
    scheduler = Scheduler({"on": on, "off": off})
    on.enabled = EnableState.ENABLE
    scheduler.state = SchedulerState.MAIN_LOOP_EXE
    scheduler.main_loop()
    assert on.calls == [("main", ("off", "on"))]
    assert off.calls == []
    assert on.enabled is EnableState.NOT_ENABLE
    assert scheduler.state is SchedulerState.TRANS_TO_ENABLE_EVAL


def test_main_loop_idle_outside_its_phase():
    task = Recorder()
    task.enabled = EnableState.ENABLE
    scheduler = Scheduler({"t": task})
    scheduler.main_loop()
    assert task.calls == []
    assert scheduler.state is SchedulerState.TASK_ENABLE_EVAL


def test_scheduler_drives_timeouts():
    scheduler = Scheduler()
    timeout = scheduler.tasks["Timeout"]
    scheduler.initialize_tasks()
    timeout.start(Timer.PIPPO_TIMEOUT, 1)
    for _ in range(SCHEDULED_ISR_TICKS):
        scheduler.timer_isr()
    assert not timeout.is_elapsed(Timer.PIPPO_TIMEOUT)
    scheduler.timer_isr()
    assert timeout.is_elapsed(Timer.PIPPO_TIMEOUT)