"""
Session Controller.
Owns the active interval runner and turns its ticks into key presses and
UI updates.
"""
import logging
import threading
from datetime import timedelta
from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

from core.interval_runner import FixedDurationRunner, ForeverRunner, IntervalRunner
from data.models import FixedDuration, Forever, RunnerVariant, SessionSettings, SessionStatus
from utils.duration import ZERO, format_duration, is_divisible_in_seconds


class SessionController(QObject):
    """
    Runs at most one keep-awake session at a time.

    Runner ticks arrive on the runner's worker thread; everything the UI
    needs is re-published through Qt signals, which are queued onto the
    receiver's thread.
    """

    # Signals
    session_started = pyqtSignal(object)  # SessionSettings
    tick_updated = pyqtSignal(object, object)  # elapsed, remaining (None when forever)
    key_pressed = pyqtSignal(object)  # elapsed
    session_finished = pyqtSignal(str)  # "completed" or "stopped"
    error_occurred = pyqtSignal(str)  # error message

    def __init__(self, key_presser, logger: Optional[logging.Logger] = None, parent=None):
        super().__init__(parent)
        self._key_presser = key_presser
        self._logger = logger or logging.getLogger(__name__)
        self._lock = threading.RLock()

        self._runner: Optional[IntervalRunner] = None
        self._settings: Optional[SessionSettings] = None
        self._session_id = 0
        self.status = SessionStatus.IDLE

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._runner is not None and not self._runner.is_done()

    @property
    def settings(self) -> Optional[SessionSettings]:
        return self._settings

    @property
    def runner(self) -> Optional[IntervalRunner]:
        return self._runner

    @staticmethod
    def build_variant(settings: SessionSettings) -> RunnerVariant:
        """Choose the runner variant for a session."""
        return settings.variant

    def start(self, settings: SessionSettings):
        """
        Start a new session, stopping any session still running.

        Args:
            settings: Session inputs
        """
        with self._lock:
            if self._runner is not None:
                self._finish("stopped")

            variant = self.build_variant(settings)
            self._settings = settings
            self._session_id += 1
            self.status = SessionStatus.RUNNING
            # Ticks block on the lock until the runner is registered
            self._runner = self._create_runner(variant, settings, self._session_id)

            self._logger.info(
                f"Session started: {self._describe(variant)}, "
                f"key '{settings.key}' every {format_duration(settings.interval)}"
            )
            self.session_started.emit(settings)

    def stop(self):
        """Stop the current session. Does nothing when idle."""
        with self._lock:
            if self._runner is None:
                return
            self._finish("stopped")

    def shutdown(self):
        """Stop without reporting, for application exit."""
        with self._lock:
            runner, self._runner = self._runner, None
            if runner is not None:
                runner.stop()
                self.status = SessionStatus.STOPPED
                self._logger.info("Session shut down")

    def _create_runner(self, variant: RunnerVariant, settings: SessionSettings, session_id: int) -> IntervalRunner:
        if isinstance(variant, FixedDuration):
            return FixedDurationRunner(
                variant.total,
                lambda elapsed, remaining: self._on_fixed_tick(session_id, settings, elapsed, remaining),
                logger=self._logger,
                on_error=self._on_tick_error,
            )
        if isinstance(variant, Forever):
            return ForeverRunner(
                lambda elapsed: self._on_forever_tick(session_id, settings, elapsed),
                logger=self._logger,
                on_error=self._on_tick_error,
            )
        raise TypeError(f"Unknown runner variant: {variant!r}")

    def _is_current(self, session_id: int) -> bool:
        with self._lock:
            return session_id == self._session_id and self._runner is not None

    def _on_forever_tick(self, session_id: int, settings: SessionSettings, elapsed: timedelta):
        if not self._is_current(session_id):
            return
        self.tick_updated.emit(elapsed, None)
        self._try_pressing_key(settings, elapsed)

    def _on_fixed_tick(self, session_id: int, settings: SessionSettings, elapsed: timedelta, remaining: timedelta):
        if not self._is_current(session_id):
            return
        if remaining == ZERO:
            with self._lock:
                if self._is_current(session_id):
                    self._finish("completed")
            return
        self.tick_updated.emit(elapsed, remaining)
        self._try_pressing_key(settings, elapsed)

    def _try_pressing_key(self, settings: SessionSettings, elapsed: timedelta):
        if is_divisible_in_seconds(elapsed, settings.interval):
            self._key_presser.press()
            self._logger.info(f"Key pressed at {format_duration(elapsed)}")
            self.key_pressed.emit(elapsed)

    def _on_tick_error(self, error: Exception):
        self.error_occurred.emit(str(error))

    def _finish(self, reason: str):
        """Stop the current runner and report the session end. Caller holds the lock."""
        runner, self._runner = self._runner, None
        runner.stop()
        self.status = SessionStatus.COMPLETED if reason == "completed" else SessionStatus.STOPPED
        self._logger.info(f"Session {reason}")
        self.session_finished.emit(reason)

    @staticmethod
    def _describe(variant: RunnerVariant) -> str:
        if isinstance(variant, FixedDuration):
            return f"fixed duration {format_duration(variant.total)}"
        return "forever"
