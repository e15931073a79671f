"""Shared fixtures: a headless Qt application and a recording key presser."""
import os
import threading
import time

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5.QtWidgets import QApplication  # noqa: E402

from core.exceptions import KeyPressError  # noqa: E402


class FakeKeyPresser:
    """Records presses instead of touching the keyboard."""

    def __init__(self, fail: bool = False):
        self.key = "f15"
        self.fail = fail
        self.presses = []
        self.threads = []
        self._lock = threading.Lock()

    def press(self):
        with self._lock:
            self.threads.append(threading.current_thread().name)
            if self.fail:
                raise KeyPressError("keyboard unavailable")
            self.presses.append(time.monotonic())


def wait_for(predicate, timeout: float = 5.0, interval: float = 0.02) -> bool:
    """Pump Qt events until predicate() is true or the timeout expires."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        QApplication.processEvents()
        if predicate():
            return True
        time.sleep(interval)
    QApplication.processEvents()
    return predicate()


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def key_presser():
    return FakeKeyPresser()
