"""
timepoint — монотонные точки времени и интервалы с насыщающей арифметикой.

Contains:
- core/domain/ : Duration, TimePoint, Interval
- core/math/   : 64-битные границы и насыщающие примитивы
- clock/       : источники монотонного времени для TimePoint.now()
"""

from timepoint.clock import (
    ClockConfig,
    ClockSource,
    ClockUnavailableError,
    ManualClock,
    MonotonicClock,
    SystemMonotonicClock,
    make_clock,
)
from timepoint.core.domain import (
    DISTANT_FUTURE,
    ZERO,
    Duration,
    Interval,
    IntervalUnit,
    TimePoint,
    duration_from_interval,
    duration_from_timedelta,
    hours,
    microseconds,
    milliseconds,
    minutes,
    nanoseconds,
    seconds,
)
from timepoint.core.math import INT64_MAX, INT64_MIN, UINT64_MAX, DurationOverflowError

__all__ = [
    # Value types
    "Duration",
    "TimePoint",
    "DISTANT_FUTURE",
    "ZERO",
    # Unit constructors
    "nanoseconds",
    "microseconds",
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
    # Bridging
    "Interval",
    "IntervalUnit",
    "duration_from_interval",
    "duration_from_timedelta",
    # Clock
    "ClockConfig",
    "ClockSource",
    "ClockUnavailableError",
    "ManualClock",
    "MonotonicClock",
    "SystemMonotonicClock",
    "make_clock",
    # Ranges / errors
    "INT64_MIN",
    "INT64_MAX",
    "UINT64_MAX",
    "DurationOverflowError",
]
