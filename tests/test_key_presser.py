"""Tests for KeyPresser with the pyautogui module faked out."""
import sys
import types

import pytest

from core.exceptions import KeyPressError
from core.key_presser import KeyPresser


@pytest.fixture
def fake_pyautogui(monkeypatch):
    module = types.ModuleType("pyautogui")
    module.KEYBOARD_KEYS = ["f13", "f14", "f15", "shift"]
    module.FAILSAFE = True
    module.PAUSE = 0.1
    module.pressed = []
    module.press = module.pressed.append
    monkeypatch.setitem(sys.modules, "pyautogui", module)
    return module


class TestKeyPresser:

    def test_press_sends_key(self, fake_pyautogui):
        presser = KeyPresser("F15")

        presser.press()
        presser.press()

        assert fake_pyautogui.pressed == ["f15", "f15"]
        assert fake_pyautogui.FAILSAFE is False

    def test_unknown_key_rejected(self, fake_pyautogui):
        presser = KeyPresser("hyper")
        with pytest.raises(KeyPressError, match="Unknown key"):
            presser.initialize()

    def test_backend_failure_wrapped(self, fake_pyautogui):
        def broken(key):
            raise OSError("no display")

        fake_pyautogui.press = broken
        presser = KeyPresser("f15")

        with pytest.raises(KeyPressError, match="no display"):
            presser.press()

    def test_missing_binding(self, monkeypatch):
        monkeypatch.setitem(sys.modules, "pyautogui", None)
        with pytest.raises(KeyPressError, match="unavailable"):
            KeyPresser("f15").initialize()
