"""A background timer that calls back when a deadline passes unrenewed."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Timeout(Generic[T]):
    deadline: Optional[float] = None
    payload: Optional[T] = None


class Watchdog(Generic[T]):
    """Call a callback with a payload when a timeout expires.

    Each call to :meth:`set_timeout` replaces the previous deadline; a fired
    timeout is not repeated until a new one is set. Deadlines are checked by
    a background thread every ``resolution`` seconds.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending: Optional[_Timeout[T]] = None
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        """Whether the background thread is active."""
        return self._thread is not None and self._thread.is_alive()

    def start(self, callback: Callable[[T], object], resolution: float = 0.1) -> None:
        """Start watching, checking deadlines every ``resolution`` seconds."""
        self.stop()
        self._stop_event = threading.Event()
        stop_event = self._stop_event
        self._thread = threading.Thread(
            target=self._run, args=(callback, resolution, stop_event), daemon=True
        )
        self._thread.start()

    def _take_pending(self) -> Optional[_Timeout[T]]:
        with self._lock:
            pending, self._pending = self._pending, None
        return pending

    def _run(
        self,
        callback: Callable[[T], object],
        resolution: float,
        stop_event: threading.Event,
    ) -> None:
        current: _Timeout[T] = _Timeout()
        while not stop_event.is_set():
            pending = self._take_pending()
            if pending is not None:
                current = pending
            if current.deadline is not None and current.deadline < time.monotonic():
                callback(current.payload)  # type: ignore[arg-type]
                current = _Timeout()
            stop_event.wait(resolution)

    def stop(self) -> None:
        """Stop the background thread and forget any pending timeout."""
        thread = self._thread
        if thread is None:
            return
        self._stop_event.set()
        if thread is not threading.current_thread():
            thread.join()
        self._thread = None
        self._take_pending()

    def set_timeout(self, timeout: float, payload: T) -> None:
        """Arm the watchdog to fire ``timeout`` seconds from now with ``payload``."""
        with self._lock:
            self._pending = _Timeout(time.monotonic() + timeout, payload)

    def cancel_timeout(self) -> None:
        """Disarm the watchdog."""
        with self._lock:
            self._pending = _Timeout()

    def __enter__(self) -> Watchdog[T]:
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()