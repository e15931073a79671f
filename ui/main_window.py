"""
Main Window.
Switches between the input and output pages and drives the session controller.
"""
import logging
from datetime import timedelta
from typing import Optional

from PyQt5.QtWidgets import QMainWindow, QStackedWidget, QStatusBar, QApplication
from PyQt5.QtCore import pyqtSlot

from core.session_controller import SessionController
from data.models import FixedDuration, SessionSettings
from ui.input_view import InputView
from ui.output_view import OutputView
from utils.config_manager import ConfigManager


class MainWindow(QMainWindow):
    """Fixed-size window holding the input and output pages."""

    def __init__(self, config: ConfigManager, controller: SessionController, logger: logging.Logger,
                 defaults: Optional[SessionSettings] = None):
        super().__init__()
        self.config = config
        self.controller = controller
        self.logger = logger
        self.defaults = defaults or config.session_settings()
        self.exit_on_completion = bool(config.get('session.exit_on_completion', True))

        self.setWindowTitle(config.get('app.title', "Just Move It"))
        self.setFixedSize(int(config.get('app.window_width', 300)),
                          int(config.get('app.window_height', 200)))

        self._init_ui()
        self._connect_signals()

    def _init_ui(self):
        """Initialize UI components."""
        self.pages = QStackedWidget(self)
        self.input_view = InputView(self.defaults, self)
        self.output_view = OutputView(self)
        self.pages.addWidget(self.input_view)
        self.pages.addWidget(self.output_view)
        self.setCentralWidget(self.pages)

        self.status_bar = QStatusBar(self)
        self.setStatusBar(self.status_bar)

    def _connect_signals(self):
        self.input_view.start_requested.connect(self._on_start_requested)
        self.output_view.stop_requested.connect(self._on_stop_requested)
        self.output_view.exit_requested.connect(self.close)

        self.controller.tick_updated.connect(self._on_tick_updated)
        self.controller.session_finished.connect(self._on_session_finished)
        self.controller.error_occurred.connect(self._on_error)

    def center(self):
        """Move the window to the middle of the primary screen."""
        screen = QApplication.primaryScreen()
        if screen is None:
            return
        frame = self.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        self.move(frame.topLeft())

    # --- Slots ---

    @pyqtSlot(object)
    def _on_start_requested(self, settings: SessionSettings):
        variant = settings.variant
        remaining = variant.total if isinstance(variant, FixedDuration) else None
        self.output_view.reset(remaining)
        self.output_view.update_interval_duration(settings.interval)
        self.pages.setCurrentWidget(self.output_view)
        self.status_bar.clearMessage()
        self.controller.start(settings)

    @pyqtSlot()
    def _on_stop_requested(self):
        self.controller.stop()

    @pyqtSlot(object, object)
    def _on_tick_updated(self, elapsed: timedelta, remaining: Optional[timedelta]):
        self.output_view.update_labels(elapsed, remaining)

    @pyqtSlot(str)
    def _on_session_finished(self, reason: str):
        if reason == "completed" and self.exit_on_completion:
            self.logger.info("Run time completed, exiting")
            self.close()
            return
        self.pages.setCurrentWidget(self.input_view)
        self.status_bar.showMessage(f"Session {reason}", 3000)

    @pyqtSlot(str)
    def _on_error(self, message: str):
        self.status_bar.showMessage(f"Error: {message}", 10000)

    def closeEvent(self, event):
        """Handle application close."""
        self.logger.info("Exiting application")
        self.controller.shutdown()
        event.accept()
