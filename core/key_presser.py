"""
Key Presser.
Synthesizes a harmless key press so the host does not go idle.
"""
import logging
import threading
from typing import Optional

from core.exceptions import KeyPressError


class KeyPresser:
    """Presses one configured key through pyautogui."""

    def __init__(self, key: str, logger: Optional[logging.Logger] = None):
        self.key = key.lower()
        self._logger = logger or logging.getLogger(__name__)
        self._backend = None
        self._lock = threading.Lock()

    def initialize(self):
        """
        Load the platform binding and validate the key.

        pyautogui needs a display, so it is imported here rather than at
        module load.

        Raises:
            KeyPressError: If the binding is unavailable or the key unknown
        """
        if self._backend is not None:
            return

        try:
            import pyautogui
        except Exception as e:
            raise KeyPressError(f"Keyboard binding unavailable: {e}") from e

        if self.key not in pyautogui.KEYBOARD_KEYS:
            raise KeyPressError(f"Unknown key: {self.key}")

        # Key presses never move the mouse
        pyautogui.FAILSAFE = False
        pyautogui.PAUSE = 0
        self._backend = pyautogui
        self._logger.info(f"Keyboard binding ready, key: {self.key}")

    def press(self):
        """Press and release the key."""
        with self._lock:
            self.initialize()
            try:
                self._backend.press(self.key)
            except Exception as e:
                raise KeyPressError(f"Failed to press {self.key}: {e}") from e
