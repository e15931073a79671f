"""Data models for the keep-awake application."""
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Union

from utils.duration import ONE_SECOND, from_minutes, validate_whole_seconds


DEFAULT_KEY = "f15"


class SessionStatus(Enum):
    """Session status enumeration."""
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    STOPPED = "stopped"


@dataclass(frozen=True)
class FixedDuration:
    """Runner variant that stops after a total execution time."""
    total: timedelta

    def __post_init__(self):
        validate_whole_seconds(self.total, "total")


@dataclass(frozen=True)
class Forever:
    """Runner variant that runs until stopped."""
    pass


RunnerVariant = Union[FixedDuration, Forever]


@dataclass
class SessionSettings:
    """Inputs for one keep-awake session."""
    interval: timedelta = field(default_factory=lambda: from_minutes(1))
    fixed_time_enabled: bool = False
    execution_duration: timedelta = field(default_factory=lambda: from_minutes(60))
    key: str = DEFAULT_KEY

    def __post_init__(self):
        """Validate settings."""
        validate_whole_seconds(self.interval, "interval")
        if self.interval < ONE_SECOND:
            raise ValueError("interval must be at least one second")
        validate_whole_seconds(self.execution_duration, "execution_duration")
        if not self.key:
            raise ValueError("key must not be empty")

    @property
    def variant(self) -> RunnerVariant:
        """Runner variant chosen by the fixed-time flag."""
        if self.fixed_time_enabled:
            return FixedDuration(total=self.execution_duration)
        return Forever()
