"""
Debouncer - Run a callback once input has been quiet for a delay.

Each call() restarts the timer with the latest arguments. flush() runs a
pending call immediately, cancel() drops it.

The delay is scheduled through `scheduler(delay_ms, fn) -> cancel`. Hosts
with an event loop pass their own (e.g. a GLib.timeout_add wrapper) so the
callback runs on the loop's thread. Without one, a threading.Timer is used
and the callback runs on the timer thread.

Every call() and cancel() starts a new generation; a timer that fires for
an older generation does nothing.
"""

import threading
from typing import Callable

Scheduler = Callable[[int, Callable[[], None]], Callable[[], None]]


def timer_scheduler(delay_ms: int, fn: Callable[[], None]) -> Callable[[], None]:
    """Schedule `fn` on a daemon threading.Timer; returns its cancel."""
    timer = threading.Timer(delay_ms / 1000, fn)
    timer.daemon = True
    timer.start()
    return timer.cancel


class Debouncer:
    """
    Delay a callback until `delay_ms` passes without another call.

    Args:
        delay_ms: Quiet period in milliseconds
        callback: Function invoked with the arguments of the last call
        scheduler: Delay scheduler; timer_scheduler if None
    """

    def __init__(self, delay_ms: int, callback: Callable, scheduler: Scheduler | None = None):
        self.delay_ms = delay_ms
        self.callback = callback
        self.scheduler = scheduler or timer_scheduler
        self._cancel_timer: Callable[[], None] | None = None
        self._pending: tuple | None = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def call(self, *args) -> None:
        with self._lock:
            self._stop_timer()
            self._generation += 1
            generation = self._generation
            self._pending = args
        cancel = self.scheduler(self.delay_ms, lambda: self._fire(generation))
        with self._lock:
            if self._generation == generation:
                self._cancel_timer = cancel
            else:
                cancel()

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            args = self._pending
            self._pending = None
            self._cancel_timer = None
        if args is not None:
            self.callback(*args)

    def _stop_timer(self) -> None:
        # Caller holds the lock
        if self._cancel_timer is not None:
            self._cancel_timer()
            self._cancel_timer = None

    def flush(self) -> None:
        """Run the pending call now, if any."""
        with self._lock:
            self._stop_timer()
            generation = self._generation
        self._fire(generation)

    def cancel(self) -> None:
        with self._lock:
            self._stop_timer()
            self._generation += 1
            self._pending = None
