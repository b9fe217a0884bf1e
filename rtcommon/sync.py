"""Events, counting semaphores and mutexes for tasks."""

from __future__ import annotations

import threading

from .tasks import INFINITE_DELAY


def _check_timeout(timeout: int) -> None:
    if timeout < 0:
        raise ValueError("timeout cannot be negative")


class _BoundedCounter:
    """A counter taken and given by tasks, never exceeding its limit."""

    def __init__(self, initial: int, limit: int) -> None:
        if limit < 1:
            raise ValueError("semaphore limit must be greater than zero")
        if not 0 <= initial <= limit:
            raise ValueError("initial count must lie between zero and the limit")
        self._count = initial
        self._limit = limit
        self._cond = threading.Condition()

    def give(self) -> None:
        with self._cond:
            if self._count < self._limit:
                self._count += 1
                self._cond.notify()

    def reset(self) -> None:
        with self._cond:
            self._count = 0

    def take(self, timeout: int) -> bool:
        _check_timeout(timeout)
        with self._cond:
            if timeout == 0:
                available = self._count > 0
            elif timeout == INFINITE_DELAY:
                available = self._cond.wait_for(lambda: self._count > 0)
            else:
                available = self._cond.wait_for(
                    lambda: self._count > 0, timeout / 1000
                )
            if available:
                self._count -= 1
            return available


class Event:
    """An auto-reset event: a successful wait consumes the signal."""

    def __init__(self):
        self._counter = _BoundedCounter(0, 1)

    def set(self):
        """Put the event in the signaled state."""
        self._counter.give()

    def reset(self):
        """Put the event in the nonsignaled state."""
        self._counter.reset()

    def wait(self, timeout=INFINITE_DELAY):
        """Wait up to timeout milliseconds for the event.

        A timeout of zero polls; INFINITE_DELAY waits forever. Returns True
        if the event was signaled, False if the timeout elapsed.
        """
        return self._counter.take(timeout)

    def set_from_isr(self):
        """Signal the event from interrupt context; the result is always False."""
        self._counter.give()
        return False


class Semaphore:
    """A counting semaphore whose count starts at, and never exceeds, its maximum."""

    def __init__(self, count):
        self._counter = _BoundedCounter(count, count)

    def wait(self, timeout=INFINITE_DELAY):
        """Wait up to timeout milliseconds for the semaphore.

        A timeout of zero polls; INFINITE_DELAY waits forever. Returns True
        if the semaphore was taken, False if the timeout elapsed.
        """
        return self._counter.take(timeout)

    def release(self):
        """Give the semaphore back; extra releases beyond the maximum are ignored."""
        self._counter.give()


class Mutex:
    """A mutex that its owner may lock recursively."""

    def __init__(self):
        self._lock = threading.RLock()

    def acquire(self):
        """Wait for ownership of the mutex."""
        self._lock.acquire()

    def release(self):
        """Give up ownership; raises RuntimeError if the caller does not own it."""
        self._lock.release()

    def __enter__(self):
        self.acquire()
        return self

    def __exit__(self, *args):
        self.release()
        return False