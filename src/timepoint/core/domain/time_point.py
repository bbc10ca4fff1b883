"""
TimePoint — Точка монотонного времени

Immutable Pydantic модель: беззнаковое 64-битное количество наносекунд
от произвольной эпохи (обычно старт машины/процесса).

SENTINEL:
UINT64_MAX зарезервирован как DISTANT_FUTURE ("бесконечно далёкое будущее")
и поглощает все операции. Насыщение сложения до потолка даёт то же самое
значение: "насыщено до UINT64_MAX" и "является DISTANT_FUTURE" означают одно и то же.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. DISTANT_FUTURE ± d == DISTANT_FUTURE для любого Duration d
2. Арифметика никогда не делает wrap: результат насыщается к 0, UINT64_MAX,
   INT64_MIN или INT64_MAX
3. Порядок совпадает с порядком сырых значений
"""

import logging
from typing import Final, Optional

from pydantic import BaseModel, Field

from timepoint.clock.monotonic import MonotonicClock, default_clock
from timepoint.core.domain.duration import Duration
from timepoint.core.math.int_ranges import (
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    saturate_int64,
    saturate_uint64,
)

logger = logging.getLogger(__name__)


# =============================================================================
# TIMEPOINT MODEL
# =============================================================================


class TimePoint(BaseModel):
    """
    Точка монотонного времени с наносекундным разрешением.

    Immutable модель (frozen=True). Равенство, порядок и hash определяются
    полем uptime_nanoseconds; DISTANT_FUTURE всегда позже любой другой точки.
    """

    uptime_nanoseconds: int = Field(
        ..., ge=0, le=UINT64_MAX, description="Наносекунды от эпохи монотонных часов (uint64)"
    )

    model_config = {"frozen": True, "strict": True}

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def now(cls, clock: Optional[MonotonicClock] = None) -> "TimePoint":
        """
        Текущая точка времени.

        Args:
            clock: Источник времени (default: системные монотонные часы)
        """
        clock = clock or default_clock()
        return cls(uptime_nanoseconds=saturate_uint64(clock.now_ns()))

    @classmethod
    def distant_future(cls) -> "TimePoint":
        return DISTANT_FUTURE

    @classmethod
    def from_monotonic_ns(cls, value: int) -> "TimePoint":
        """TimePoint из отсчёта time.monotonic_ns() (значение переносится как есть)"""
        return cls(uptime_nanoseconds=value)

    def to_monotonic_ns(self) -> int:
        return self.uptime_nanoseconds

    @property
    def is_distant_future(self) -> bool:
        return self.uptime_nanoseconds == UINT64_MAX

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __sub__(self, other: object) -> "Duration | TimePoint":
        """
        TimePoint - TimePoint → Duration, TimePoint - Duration → TimePoint.

        Разность двух точек (в порядке приоритета):
        1. DISTANT_FUTURE - DISTANT_FUTURE → 0
        2. DISTANT_FUTURE - t → INT64_MAX
        3. t - DISTANT_FUTURE → INT64_MIN
        4. иначе разность, насыщенная в [INT64_MIN, INT64_MAX]
        """
        if isinstance(other, TimePoint):
            return self._difference(other)
        if isinstance(other, Duration):
            return self._minus_duration(other)
        return NotImplemented

    def __add__(self, other: object) -> "TimePoint":
        """
        TimePoint + Duration → TimePoint.

        - DISTANT_FUTURE поглощает любой Duration (в т.ч. отрицательный)
        - Отрицательный Duration: вычитание модуля с полом в 0
        - Неотрицательный Duration: сложение с насыщением до UINT64_MAX
        """
        if not isinstance(other, Duration):
            return NotImplemented

        if self.is_distant_future:
            return self

        raw = self.uptime_nanoseconds
        delta = other.nanoseconds

        if delta < 0:
            magnitude = -delta
            if magnitude > raw:
                logger.debug("TimePoint %d + %d ns clamped to 0", raw, delta)
                return TimePoint(uptime_nanoseconds=0)
            return TimePoint(uptime_nanoseconds=raw - magnitude)

        total = raw + delta
        if total > UINT64_MAX:
            logger.debug("TimePoint %d + %d ns saturated to distant future", raw, delta)
        return TimePoint(uptime_nanoseconds=saturate_uint64(total))

    __radd__ = __add__

    def _difference(self, other: "TimePoint") -> Duration:
        if self.is_distant_future and other.is_distant_future:
            return Duration(nanoseconds=0)
        if self.is_distant_future:
            return Duration(nanoseconds=INT64_MAX)
        if other.is_distant_future:
            return Duration(nanoseconds=INT64_MIN)

        return Duration(
            nanoseconds=saturate_int64(self.uptime_nanoseconds - other.uptime_nanoseconds)
        )

    def _minus_duration(self, other: Duration) -> "TimePoint":
        if self.is_distant_future:
            return self

        raw = self.uptime_nanoseconds
        delta = other.nanoseconds

        if delta < 0:
            # Вычитание отрицательного интервала: сложение его модуля
            magnitude = -delta
            headroom = UINT64_MAX - raw
            if magnitude > headroom:
                logger.debug("TimePoint %d - %d ns saturated to distant future", raw, delta)
                return DISTANT_FUTURE
            return TimePoint(uptime_nanoseconds=raw + magnitude)

        if raw > delta:
            return TimePoint(uptime_nanoseconds=raw - delta)

        if raw < delta:
            logger.debug("TimePoint %d - %d ns clamped to 0", raw, delta)
        return TimePoint(uptime_nanoseconds=0)

    # -------------------------------------------------------------------------
    # Сравнения (полный порядок по uptime_nanoseconds)
    # -------------------------------------------------------------------------

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self.uptime_nanoseconds < other.uptime_nanoseconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self.uptime_nanoseconds <= other.uptime_nanoseconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self.uptime_nanoseconds > other.uptime_nanoseconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self.uptime_nanoseconds >= other.uptime_nanoseconds


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DISTANT_FUTURE: Final[TimePoint] = TimePoint(uptime_nanoseconds=UINT64_MAX)
