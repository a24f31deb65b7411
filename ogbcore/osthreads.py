"""Threads, a binary semaphore, sleeping and timing."""

from __future__ import annotations

import os
import threading
import time
from collections.abc import Callable
from typing import Any, Optional

__all__ = [
    "Thread",
    "BinarySemaphore",
    "sleep",
    "yield_thread",
    "high_precision_sleep",
    "elapsed_seconds",
    "logical_processor_count",
    "DEFAULT_TEMPORARY_STORAGE_SIZE",
]

DEFAULT_TEMPORARY_STORAGE_SIZE = 10 * 1024

_START = time.perf_counter()


class Thread:
    """A thread that runs ``proc(thread)`` once started."""

    def __init__(
        self,
        proc: Callable[["Thread"], Any],
        temporary_storage_size: int = DEFAULT_TEMPORARY_STORAGE_SIZE,
    ) -> None:
        self.proc = proc
        self.temporary_storage_size = temporary_storage_size
        self.data: Any = None
        self.id = 0  # valid after start()
        self._handle: Optional[threading.Thread] = None

    def start(self) -> None:
        """Start running ``proc`` on a new thread."""
        if self._handle is not None:
            raise RuntimeError("thread was already started")
        self._handle = threading.Thread(target=self.proc, args=(self,), daemon=True)
        self._handle.start()
        self.id = self._handle.native_id or self._handle.ident or 0

    def join(self) -> None:
        """Wait for the thread to finish."""
        if self._handle is None:
            raise RuntimeError("cannot join a thread that was never started")
        self._handle.join()


class BinarySemaphore:
    """A flag that one side signals and the other waits for and consumes."""

    def __init__(self, initial_state: bool = False) -> None:
        self._event = threading.Event()
        if initial_state:
            self._event.set()

    @property
    def is_signaled(self) -> bool:
        return self._event.is_set()

    def wait(self) -> None:
        """Block until signaled, then reset the flag."""
        self._event.wait()
        self._event.clear()

    def signal(self) -> None:
        """Set the flag, releasing a waiter."""
        self._event.set()


def sleep(ms: float) -> None:
    """Sleep for ``ms`` milliseconds."""
    time.sleep(max(ms, 0) / 1000.0)


def yield_thread() -> None:
    """Give other threads a chance to run."""
    time.sleep(0)


def elapsed_seconds() -> float:
    """Seconds elapsed since the module was loaded, from a monotonic clock."""
    return time.perf_counter() - _START


def high_precision_sleep(ms: float) -> None:
    """Sleep for ``ms`` milliseconds, spinning over the last stretch for accuracy."""
    end = elapsed_seconds() + ms / 1000.0
    coarse_ms = ms - 1.0
    if coarse_ms >= 1.0:
        sleep(coarse_ms)
    while elapsed_seconds() < end:
        yield_thread()


def logical_processor_count() -> int:
    """Return the number of logical processors."""
    return os.cpu_count() or 1