"""
Input View.
Collects the key-press interval and the optional fixed run time.
"""
from datetime import timedelta

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout,
    QPushButton, QSpinBox, QCheckBox, QMessageBox
)
from PyQt5.QtCore import pyqtSignal

from data.models import SessionSettings
from utils.duration import to_seconds


class InputView(QWidget):
    """Form shown before a session starts."""

    # Signals
    start_requested = pyqtSignal(object)  # SessionSettings

    def __init__(self, defaults: SessionSettings, parent=None):
        super().__init__(parent)
        self.key = defaults.key
        self._init_ui(defaults)

    def _init_ui(self, defaults: SessionSettings):
        """Initialize UI components."""
        layout = QVBoxLayout(self)
        form = QFormLayout()

        # Interval between key presses
        self.interval_spin = QSpinBox()
        self.interval_spin.setRange(1, 24 * 3600)
        self.interval_spin.setSuffix(" s")
        self.interval_spin.setValue(to_seconds(defaults.interval))
        form.addRow("Press every:", self.interval_spin)

        # Fixed run time
        self.fixed_time_check = QCheckBox("Run for fixed time")
        self.fixed_time_check.setChecked(defaults.fixed_time_enabled)
        form.addRow(self.fixed_time_check)

        total_minutes = to_seconds(defaults.execution_duration) // 60
        duration_layout = QHBoxLayout()
        self.hours_spin = QSpinBox()
        self.hours_spin.setRange(0, 99)
        self.hours_spin.setSuffix(" h")
        self.hours_spin.setValue(total_minutes // 60)
        self.minutes_spin = QSpinBox()
        self.minutes_spin.setRange(0, 59)
        self.minutes_spin.setSuffix(" m")
        self.minutes_spin.setValue(total_minutes % 60)
        duration_layout.addWidget(self.hours_spin)
        duration_layout.addWidget(self.minutes_spin)
        form.addRow("Duration:", duration_layout)

        self.fixed_time_check.toggled.connect(self.hours_spin.setEnabled)
        self.fixed_time_check.toggled.connect(self.minutes_spin.setEnabled)
        self.hours_spin.setEnabled(defaults.fixed_time_enabled)
        self.minutes_spin.setEnabled(defaults.fixed_time_enabled)

        layout.addLayout(form)

        # Buttons
        button_layout = QHBoxLayout()
        button_layout.addStretch()
        self.start_btn = QPushButton("Start")
        self.start_btn.setDefault(True)
        self.start_btn.setStyleSheet("background-color: #4CAF50; color: white; font-weight: bold;")
        self.start_btn.clicked.connect(self._on_start_clicked)
        button_layout.addWidget(self.start_btn)
        layout.addLayout(button_layout)

    def get_interval_duration(self) -> timedelta:
        return timedelta(seconds=self.interval_spin.value())

    def get_execution_duration(self) -> timedelta:
        return timedelta(hours=self.hours_spin.value(), minutes=self.minutes_spin.value())

    def is_fixed_time_enabled(self) -> bool:
        return self.fixed_time_check.isChecked()

    def get_settings(self) -> SessionSettings:
        """Return the form contents as session settings."""
        return SessionSettings(
            interval=self.get_interval_duration(),
            fixed_time_enabled=self.is_fixed_time_enabled(),
            execution_duration=self.get_execution_duration(),
            key=self.key,
        )

    def _on_start_clicked(self):
        try:
            settings = self.get_settings()
        except ValueError as e:
            QMessageBox.warning(self, "Invalid Input", str(e))
            return
        self.start_requested.emit(settings)
