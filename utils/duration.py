"""Helpers for whole-second durations."""
from datetime import timedelta

from core.exceptions import InvalidDurationError

ZERO = timedelta(0)
ONE_SECOND = timedelta(seconds=1)


def validate_whole_seconds(duration: timedelta, name: str = "duration") -> timedelta:
    """
    Reject durations that are not non-negative whole seconds.

    Args:
        duration: Value to check
        name: Label used in error messages

    Returns:
        The same duration

    Raises:
        TypeError: If duration is not a timedelta
        InvalidDurationError: If negative or fractional
    """
    if not isinstance(duration, timedelta):
        raise TypeError(f"{name} must be a timedelta, got {type(duration).__name__}")
    if duration < ZERO:
        raise InvalidDurationError(f"{name} must not be negative: {duration}")
    if duration.microseconds:
        raise InvalidDurationError(f"{name} must be a whole number of seconds: {duration}")
    return duration


def to_seconds(duration: timedelta) -> int:
    """Whole seconds in a duration."""
    return duration // ONE_SECOND


def from_minutes(minutes: int) -> timedelta:
    return timedelta(minutes=minutes)


def is_divisible_in_seconds(elapsed: timedelta, interval: timedelta) -> bool:
    """True when elapsed is an exact multiple of interval (a zero interval never divides)."""
    interval_seconds = to_seconds(interval)
    if interval_seconds <= 0:
        return False
    return to_seconds(elapsed) % interval_seconds == 0


def format_duration(duration: timedelta) -> str:
    """Format as HH:MM:SS; hours are not wrapped at 24."""
    total = to_seconds(duration)
    sign = "-" if total < 0 else ""
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
