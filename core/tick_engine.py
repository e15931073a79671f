"""
Tick Engine.
Single-worker, fixed-rate periodic scheduler owned by one interval runner.
"""
import itertools
import logging
import threading
import time
from typing import Callable, Optional

from core.exceptions import RunnerStateError


_thread_ids = itertools.count(1)


class TickEngine:
    """
    Runs a tick function on a dedicated thread at a fixed rate.

    Tick N is due at start + N * period. Ticks never overlap; a tick that
    overruns its period delays the next one instead of triggering a burst
    of catch-up ticks. Faults raised by the tick function are logged and
    the schedule continues.
    """

    def __init__(
        self,
        tick: Callable[[], None],
        period: float = 1.0,
        initial_delay: float = 0.0,
        logger: Optional[logging.Logger] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ):
        if period <= 0:
            raise ValueError("period must be positive")
        if initial_delay < 0:
            raise ValueError("initial_delay must not be negative")

        self._tick = tick
        self._period = period
        self._initial_delay = initial_delay
        self._logger = logger or logging.getLogger(__name__)
        self._on_error = on_error

        self._shutdown = threading.Event()
        self._thread = threading.Thread(
            target=self._run_loop,
            name=f"interval-runner-{next(_thread_ids)}",
            daemon=True,
        )
        self._started = False
        self._start_lock = threading.Lock()

    @property
    def period(self) -> float:
        return self._period

    @property
    def thread_name(self) -> str:
        return self._thread.name

    def start(self):
        """Start the worker. An engine can be started once."""
        with self._start_lock:
            if self._started:
                raise RunnerStateError("Engine already started")
            if self._shutdown.is_set():
                raise RunnerStateError("Engine has been shut down and cannot be restarted")
            self._started = True
        self._thread.start()

    def shutdown(self):
        """
        Stop scheduling new ticks.

        Does not wait: a tick that has already started runs to completion.
        Use await_termination() to wait for it.
        """
        self._shutdown.set()

    def is_shutdown(self) -> bool:
        return self._shutdown.is_set()

    def await_termination(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for the worker thread to exit.

        Returns:
            True if the worker is no longer running
        """
        if threading.current_thread() is self._thread:
            raise RunnerStateError("Engine cannot wait for its own worker")
        if self._started:
            self._thread.join(timeout)
        return not self._thread.is_alive()

    def _run_loop(self):
        next_due = time.monotonic() + self._initial_delay

        while not self._shutdown.is_set():
            delay = next_due - time.monotonic()
            if delay > 0 and self._shutdown.wait(delay):
                break
            if self._shutdown.is_set():
                break

            self._fire()

            next_due += self._period
            now = time.monotonic()
            if next_due < now:
                # Overran: skip missed ticks and run the next one right away.
                next_due = now

        self._logger.debug(f"{self.thread_name}: worker exited")

    def _fire(self):
        if self._shutdown.is_set():
            return
        try:
            self._tick()
        except Exception as e:
            self._logger.exception(f"{self.thread_name}: tick failed: {e}")
            if self._on_error is not None:
                try:
                    self._on_error(e)
                except Exception:
                    self._logger.exception(f"{self.thread_name}: error handler failed")
