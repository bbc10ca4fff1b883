"""Clock — источники монотонного времени для TimePoint.now()."""

from .monotonic import (
    ClockConfig,
    ClockSource,
    ClockUnavailableError,
    ManualClock,
    MonotonicClock,
    SystemMonotonicClock,
    default_clock,
    make_clock,
)

__all__ = [
    "ClockConfig",
    "ClockSource",
    "ClockUnavailableError",
    "ManualClock",
    "MonotonicClock",
    "SystemMonotonicClock",
    "default_clock",
    "make_clock",
]
