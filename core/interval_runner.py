"""
Interval Runners.
Tick a caller-supplied task once per second, forever or for a fixed duration.
"""
import logging
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Callable, Optional

from core.exceptions import RunnerStateError
from core.tick_engine import TickEngine
from utils.duration import ONE_SECOND, ZERO, validate_whole_seconds


FixedDurationTask = Callable[[timedelta, timedelta], None]
ForeverTask = Callable[[timedelta], None]
ErrorHandler = Callable[[Exception], None]

TICK_PERIOD_SECONDS = 1.0
INITIAL_DELAY_SECONDS = 0.0


class IntervalRunner(ABC):
    """
    Base class for runners that tick a task once per second.

    A runner owns exactly one TickEngine, starts it on construction and is
    never reused once stopped.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        on_error: Optional[ErrorHandler] = None,
    ):
        self._logger = logger or logging.getLogger(__name__)
        self._elapsed = ZERO
        self._engine = TickEngine(
            self._run,
            period=TICK_PERIOD_SECONDS,
            initial_delay=INITIAL_DELAY_SECONDS,
            logger=self._logger,
            on_error=on_error,
        )

    def start(self):
        """
        Start ticking.

        Raises:
            RunnerStateError: If the runner was already started or stopped
        """
        try:
            self._engine.start()
        except RunnerStateError as e:
            raise RunnerStateError(f"{type(self).__name__} is single-use and cannot be restarted") from e

    def stop(self):
        """Stop ticking. Safe to call any number of times."""
        if not self.is_done():
            self._engine.shutdown()
            self._logger.debug(f"{type(self).__name__}: stop requested")

    def is_done(self) -> bool:
        """True once the engine has been shut down."""
        return self._engine.is_shutdown()

    def await_termination(self, timeout: Optional[float] = None) -> bool:
        """Block until the worker thread has exited."""
        return self._engine.await_termination(timeout)

    @abstractmethod
    def _run(self):
        """Execute one tick on the worker thread."""
        pass


class FixedDurationRunner(IntervalRunner):
    """
    Runs the task every second until the execution duration is used up.

    The task receives (elapsed, remaining) with remaining observed before it
    is decremented, so a total of T seconds yields T + 1 ticks ending with
    remaining == 0. The runner shuts itself down after that last tick.
    """

    def __init__(
        self,
        execution_duration: timedelta,
        task: FixedDurationTask,
        logger: Optional[logging.Logger] = None,
        on_error: Optional[ErrorHandler] = None,
    ):
        validate_whole_seconds(execution_duration, "execution_duration")
        super().__init__(logger=logger, on_error=on_error)
        self._task = task
        self._total = execution_duration
        self._remaining = execution_duration
        self.start()

    @property
    def total(self) -> timedelta:
        return self._total

    def _run(self):
        elapsed, remaining = self._elapsed, self._remaining
        try:
            self._task(elapsed, remaining)
        finally:
            if remaining == ZERO:
                self._logger.debug(f"FixedDurationRunner: completed after {elapsed}")
                self.stop()
            else:
                self._remaining = remaining - ONE_SECOND
                self._elapsed = elapsed + ONE_SECOND


class ForeverRunner(IntervalRunner):
    """Runs the task every second until stopped."""

    def __init__(
        self,
        task: ForeverTask,
        logger: Optional[logging.Logger] = None,
        on_error: Optional[ErrorHandler] = None,
    ):
        super().__init__(logger=logger, on_error=on_error)
        self._task = task
        self.start()

    def _run(self):
        elapsed = self._elapsed
        try:
            self._task(elapsed)
        finally:
            self._elapsed = elapsed + ONE_SECOND
