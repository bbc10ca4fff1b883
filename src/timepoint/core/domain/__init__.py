"""
Domain value objects.

Contains Duration, TimePoint and the external Interval representation.
"""

from timepoint.core.domain.duration import (
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_NANOSECOND,
    NANOS_PER_SECOND,
    ZERO,
    Duration,
    duration_from_interval,
    duration_from_timedelta,
    hours,
    microseconds,
    milliseconds,
    minutes,
    nanoseconds,
    seconds,
)
from timepoint.core.domain.interval import Interval, IntervalUnit
from timepoint.core.domain.time_point import DISTANT_FUTURE, TimePoint

__all__ = [
    # Duration
    "Duration",
    "ZERO",
    "NANOS_PER_NANOSECOND",
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "nanoseconds",
    "microseconds",
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
    "duration_from_interval",
    "duration_from_timedelta",
    # Interval
    "Interval",
    "IntervalUnit",
    # TimePoint
    "TimePoint",
    "DISTANT_FUTURE",
]
