"""
Common Runner Exceptions
"""


class JustMoveItException(Exception):
    """Base exception for application errors."""
    pass


class InvalidDurationError(JustMoveItException, ValueError):
    """Duration is negative or not a whole number of seconds."""
    pass


class RunnerStateError(JustMoveItException, RuntimeError):
    """Runner or engine used outside its single-use lifecycle."""
    pass


class KeyPressError(JustMoveItException):
    """Platform key binding failed."""
    pass
