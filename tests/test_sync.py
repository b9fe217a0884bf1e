import threading
import time

import pytest

from rtcommon.sync import Event, Mutex, Semaphore
from rtcommon.tasks import INFINITE_DELAY


def test_event_starts_nonsignaled():
    event = Event()
    assert event.wait(0) is False


def test_event_wait_consumes_signal():
    event = Event()
    event.set()
    assert event.wait(0) is True
    assert event.wait(0) is False


def test_event_signal_does_not_accumulate():
    event = Event()
    event.set()
    event.set()
    assert event.wait(0) is True
    assert event.wait(0) is False


def test_event_reset_clears_signal():
    event = Event()
    event.set()
    event.reset()
    assert event.wait(0) is False


def test_event_wait_times_out():
    event = Event()
    start = time.monotonic()
    assert event.wait(30) is False
    assert time.monotonic() - start >= 0.02


def test_event_set_from_other_thread_wakes_waiter():
    event = Event()
    timer = threading.Timer(0.02, event.set)
    timer.start()
    assert event.wait(INFINITE_DELAY) is True
    timer.join()


def test_event_set_from_isr_signals_and_returns_false():
    event = Event()
    assert event.set_from_isr() is False
    assert event.wait(0) is True


def test_event_negative_timeout_rejected():
    with pytest.raises(ValueError):
        Event().wait(-1)


def test_semaphore_allows_count_takers():
    sem = Semaphore(2)
    assert sem.wait(0) is True
    assert sem.wait(0) is True
    assert sem.wait(0) is False


def test_semaphore_release_restores_one():
    sem = Semaphore(1)
    assert sem.wait(0) is True
    sem.release()
    assert sem.wait(0) is True
    assert sem.wait(0) is False


def test_semaphore_release_capped_at_maximum():
    sem = Semaphore(1)
    sem.release()
    sem.release()
    assert sem.wait(0) is True
    assert sem.wait(0) is False


def test_semaphore_wait_times_out():
    sem = Semaphore(1)
    sem.wait(0)
    assert sem.wait(20) is False


def test_semaphore_release_from_other_thread():
    sem = Semaphore(1)
    sem.wait(0)
    timer = threading.Timer(0.02, sem.release)
    timer.start()
    assert sem.wait(2000) is True
    timer.join()


@pytest.mark.parametrize("count", [0, -1])
def test_semaphore_requires_positive_count(count):
    with pytest.raises(ValueError):
        Semaphore(count)


def test_semaphore_negative_timeout_rejected():
    with pytest.raises(ValueError):
        Semaphore(1).wait(-5)


def test_mutex_context_manager_returns_mutex():
    mutex = Mutex()
    with mutex as held:
        assert held is mutex


def test_mutex_is_recursive():
    mutex = Mutex()
    mutex.acquire()
    mutex.acquire()
    mutex.release()
    mutex.release()
    with pytest.raises(RuntimeError):
        mutex.release()


def test_mutex_excludes_other_threads():
    mutex = Mutex()
    got_it = Event()

    def contender():
        with mutex:
            got_it.set()

    mutex.acquire()
    thread = threading.Thread(target=contender)
    thread.start()
    assert got_it.wait(50) is False
    mutex.release()
    assert got_it.wait(2000) is True
    thread.join(2)


def test_mutex_release_without_owner_raises():
    with pytest.raises(RuntimeError):
        Mutex().release()


def test_mutex_counter_consistent_under_contention():
    mutex = Mutex()
    total = [0]

    def work():
        for _ in range(1000):
            with mutex:
                value = total[0]
                total[0] = value + 1

    threads = [threading.Thread(target=work) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    with mutex as held:
        assert held is mutex
        assert total[0] == 4 * 1000