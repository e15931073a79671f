"""
Output View.
Shows the running session's elapsed and remaining time.
"""
from datetime import timedelta
from typing import Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QLabel, QPushButton
)
from PyQt5.QtCore import pyqtSignal

from utils.duration import ZERO, format_duration


FOREVER_TEXT = "Forever"


class OutputView(QWidget):
    """Status page shown while a session runs."""

    # Signals
    stop_requested = pyqtSignal()
    exit_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._init_ui()

    def _init_ui(self):
        """Initialize UI components."""
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.interval_label = QLabel(format_duration(ZERO))
        self.elapsed_label = QLabel(format_duration(ZERO))
        self.remaining_label = QLabel(FOREVER_TEXT)
        self.elapsed_label.setStyleSheet("font-weight: bold;")

        form.addRow("Interval:", self.interval_label)
        form.addRow("Elapsed:", self.elapsed_label)
        form.addRow("Remaining:", self.remaining_label)
        layout.addLayout(form)

        button_layout = QHBoxLayout()
        self.stop_btn = QPushButton("Stop")
        self.stop_btn.setStyleSheet("background-color: #f44336; color: white; font-weight: bold;")
        self.stop_btn.clicked.connect(lambda: self.stop_requested.emit())
        self.exit_btn = QPushButton("Exit")
        self.exit_btn.clicked.connect(lambda: self.exit_requested.emit())
        button_layout.addWidget(self.stop_btn)
        button_layout.addStretch()
        button_layout.addWidget(self.exit_btn)
        layout.addLayout(button_layout)

    def update_labels(self, elapsed: timedelta, remaining: Optional[timedelta]):
        """Show elapsed time and remaining time (None for forever runs)."""
        self.elapsed_label.setText(format_duration(elapsed))
        self.remaining_label.setText(FOREVER_TEXT if remaining is None else format_duration(remaining))

    def update_interval_duration(self, interval: timedelta):
        self.interval_label.setText(format_duration(interval))

    def reset(self, remaining: Optional[timedelta] = None):
        self.update_labels(ZERO, remaining)
