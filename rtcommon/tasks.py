"""Tasks, delays and a millisecond system clock built on native threads."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable

INFINITE_DELAY = 0xFFFFFFFF
MAX_DELAY = INFINITE_DELAY // 2

_MASK32 = 0xFFFFFFFF


@dataclass(frozen=True)
class TaskParameters:
    """Stack size and priority requested for a new task."""

    stack_size: int = 0
    priority: int = 0

    def __post_init__(self) -> None:
        if self.stack_size < 0:
            raise ValueError("stack size cannot be negative")


DEFAULT_PARAMS = TaskParameters()


class Task:
    """A task running code(arg) on its own thread; it starts on creation."""

    def __init__(self, name, code, arg=None):
        if not callable(code):
            raise TypeError("task code must be callable")
        self.name = name
        self.code = code
        self.arg = arg
        self._thread = threading.Thread(
            target=code, args=(arg,), name=name, daemon=True
        )
        self._thread.start()

    def join(self, timeout=None):
        """Wait for the task to finish; return True if it has finished."""
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def is_alive(self):
        """Return True while the task is still running."""
        return self._thread.is_alive()

    def __repr__(self) -> str:
        state = "running" if self.is_alive() else "finished"
        return f"Task({self.name!r}, {state})"


def create_task(name, code, arg=None, params=None):
    """Create and start a task running code(arg).

    The parameters are accepted for compatibility; native threads choose
    their own stack size and priority.
    """
    if params is not None and not isinstance(params, TaskParameters):
        raise TypeError("params must be TaskParameters")
    return Task(name, code, arg)


def delay_task(delay):
    """Block the calling task for delay milliseconds."""
    if delay < 0:
        raise ValueError("delay cannot be negative")
    time.sleep(delay / 1000)


def switch_task():
    """Give other tasks a chance to run."""
    time.sleep(0)


def get_system_time64():
    """Return the milliseconds elapsed on the system's monotonic clock."""
    return time.monotonic_ns() // 1_000_000


def get_system_time():
    """Return the millisecond clock wrapped to 32 bits."""
    return get_system_time64() & _MASK32


def time_compare(t1, t2):
    """Compare two 32-bit times, allowing for wrap-around.

    The result is the signed 32-bit difference t1 - t2: positive when t1
    is later than t2, negative when earlier, zero when equal.
    """
    diff = (t1 - t2) & _MASK32
    return diff - (1 << 32) if diff & 0x80000000 else diff