"""Tick-driven cooperative task scheduler with software timeouts and a state-machine base."""

__version__ = "0.1.0"
__all__ = ["fsm", "timedtask", "timeout", "scheduler"]