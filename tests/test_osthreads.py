import os
import threading

import pytest

from ogbcore.osthreads import (
    BinarySemaphore,
    Thread,
    elapsed_seconds,
    high_precision_sleep,
    logical_processor_count,
    sleep,
    yield_thread,
)


def test_thread_runs_proc_with_itself():
    seen = []

    def proc(t):
        seen.append((t, t.data, threading.get_native_id()))

    t = Thread(proc)
    t.data = "payload"
    t.start()
    t.join()
    assert len(seen) == 1
    assert seen[0][0] is t
    assert seen[0][1] == "payload"
    assert seen[0][2] == t.id


def test_default_temporary_storage_size():
    t = Thread(lambda _: None)
    assert t.temporary_storage_size == 10 * 1024


def test_custom_temporary_storage_size():
    t = Thread(lambda _: None, 4096)
    assert t.temporary_storage_size == 4096


def test_start_twice_raises():
    t = Thread(lambda _: None)
    t.start()
    t.join()
    with pytest.raises(RuntimeError):
        t.start()


def test_join_before_start_raises():
    with pytest.raises(RuntimeError):
        Thread(lambda _: None).join()


def test_semaphore_initial_state_consumed_by_wait():
    sem = BinarySemaphore(True)
    assert sem.is_signaled
    sem.wait()
    assert not sem.is_signaled


def test_semaphore_signal_from_other_thread():
    sem = BinarySemaphore(False)
    results = []

    def proc(t):
        sem.wait()
        results.append("woke")

    t = Thread(proc)
    t.start()
    sem.signal()
    t.join()
    assert results == ["woke"]
    assert not sem.is_signaled


def test_elapsed_seconds_is_monotonic():
    a = elapsed_seconds()
    yield_thread()
    b = elapsed_seconds()
    assert b >= a >= 0.0


def test_sleep_waits_at_least():
    start = elapsed_seconds()
    sleep(5)
    assert elapsed_seconds() - start >= 0.004


def test_high_precision_sleep_waits_at_least():
    start = elapsed_seconds()
    high_precision_sleep(3.5)
    assert elapsed_seconds() - start >= 0.0035


def test_logical_processor_count():
    assert logical_processor_count() == (os.cpu_count() or 1)
    assert logical_processor_count() >= 1