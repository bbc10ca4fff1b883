"""
Duration — Знаковый интервал времени в наносекундах

Immutable Pydantic модель: знаковое 64-битное количество наносекунд.
Является результатом TimePoint - TimePoint и операндом смещения TimePoint.

ПОЛИТИКА ПЕРЕПОЛНЕНИЯ:
Конструкторы единиц (seconds, minutes, ...) и операторы + - * / НЕ насыщают.
Результат вне [INT64_MIN, INT64_MAX] → DurationOverflowError.
Вызывающая сторона обязана не выходить за диапазон; насыщение выполняется
только в арифметике TimePoint.
"""

from datetime import timedelta
from typing import Final, Optional

from pydantic import BaseModel, Field

from timepoint.core.domain.interval import Interval, IntervalUnit
from timepoint.core.math.int_ranges import (
    INT64_MAX,
    INT64_MIN,
    checked_int64,
    trunc_divide,
)

# =============================================================================
# МНОЖИТЕЛИ ЕДИНИЦ (наносекунд в единице)
# =============================================================================

NANOS_PER_NANOSECOND: Final[int] = 1
NANOS_PER_MICROSECOND: Final[int] = 1_000
NANOS_PER_MILLISECOND: Final[int] = 1_000_000
NANOS_PER_SECOND: Final[int] = 1_000_000_000
NANOS_PER_MINUTE: Final[int] = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: Final[int] = 60 * NANOS_PER_MINUTE


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# DURATION MODEL
# =============================================================================


class Duration(BaseModel):
    """
    Знаковый интервал времени с наносекундным разрешением.

    Immutable модель (frozen=True); все операции возвращают новый экземпляр,
    поэтому += -= *= /= перепривязывают имя, а не мутируют значение.
    Равенство, порядок и hash определяются полем nanoseconds.
    """

    nanoseconds: int = Field(
        ..., ge=INT64_MIN, le=INT64_MAX, description="Количество наносекунд (int64)"
    )

    model_config = {"frozen": True, "strict": True}

    # -------------------------------------------------------------------------
    # Арифметика Duration ⊕ Duration
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(
            nanoseconds=checked_int64(
                self.nanoseconds + other.nanoseconds, "Duration addition"
            )
        )

    def __sub__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(
            nanoseconds=checked_int64(
                self.nanoseconds - other.nanoseconds, "Duration subtraction"
            )
        )

    # -------------------------------------------------------------------------
    # Масштабирование целым числом
    # -------------------------------------------------------------------------

    def __mul__(self, factor: object) -> "Duration":
        if not _is_int(factor):
            return NotImplemented
        return Duration(
            nanoseconds=checked_int64(self.nanoseconds * factor, "Duration multiplication")
        )

    __rmul__ = __mul__

    def __truediv__(self, divisor: object) -> "Duration":
        """
        Деление на целое с усечением к нулю.

        Raises:
            ZeroDivisionError: Если divisor == 0
            DurationOverflowError: INT64_MIN / -1
        """
        if not _is_int(divisor):
            return NotImplemented
        return Duration(
            nanoseconds=checked_int64(
                trunc_divide(self.nanoseconds, divisor), "Duration division"
            )
        )

    def __neg__(self) -> "Duration":
        return Duration(nanoseconds=checked_int64(-self.nanoseconds, "Duration negation"))

    def __abs__(self) -> "Duration":
        return Duration(
            nanoseconds=checked_int64(abs(self.nanoseconds), "Duration absolute value")
        )

    # -------------------------------------------------------------------------
    # Сравнения (полный порядок по nanoseconds)
    # -------------------------------------------------------------------------

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds < other.nanoseconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds <= other.nanoseconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds > other.nanoseconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds >= other.nanoseconds

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def total_seconds(self) -> float:
        """Длительность в секундах (float, возможна потеря точности)"""
        return self.nanoseconds / NANOS_PER_SECOND

    def to_interval(self) -> Interval:
        """Внешний интервал в наносекундах (без потерь)"""
        return Interval(IntervalUnit.NANOSECONDS, self.nanoseconds)

    def to_timedelta(self) -> timedelta:
        """
        Конверсия в datetime.timedelta.

        timedelta хранит микросекунды: остаток меньше микросекунды
        отбрасывается с усечением к нулю.
        """
        return timedelta(
            microseconds=trunc_divide(self.nanoseconds, NANOS_PER_MICROSECOND)
        )

    @classmethod
    def from_interval(cls, interval: Interval) -> Optional["Duration"]:
        return duration_from_interval(interval)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> "Duration":
        return duration_from_timedelta(value)


# =============================================================================
# КОНСТРУКТОРЫ ЕДИНИЦ
# =============================================================================


def _from_units(value: int, factor: int, unit: str) -> Duration:
    if not _is_int(value):
        raise TypeError(f"{unit} value must be an int, got {type(value).__name__}")
    return Duration(nanoseconds=checked_int64(value * factor, f"{unit}({value})"))


def nanoseconds(value: int) -> Duration:
    return _from_units(value, NANOS_PER_NANOSECOND, "nanoseconds")


def microseconds(value: int) -> Duration:
    return _from_units(value, NANOS_PER_MICROSECOND, "microseconds")


def milliseconds(value: int) -> Duration:
    return _from_units(value, NANOS_PER_MILLISECOND, "milliseconds")


def seconds(value: int) -> Duration:
    return _from_units(value, NANOS_PER_SECOND, "seconds")


def minutes(value: int) -> Duration:
    return _from_units(value, NANOS_PER_MINUTE, "minutes")


def hours(value: int) -> Duration:
    """
    Duration из часов.

    Raises:
        DurationOverflowError: Если value * 3.6e12 вне int64 (|value| > ~2.56e6)
    """
    return _from_units(value, NANOS_PER_HOUR, "hours")


ZERO: Final[Duration] = Duration(nanoseconds=0)


# =============================================================================
# BRIDGING
# =============================================================================

_INTERVAL_CONSTRUCTORS = {
    IntervalUnit.NANOSECONDS: nanoseconds,
    IntervalUnit.MICROSECONDS: microseconds,
    IntervalUnit.MILLISECONDS: milliseconds,
    IntervalUnit.SECONDS: seconds,
}


def duration_from_interval(interval: Interval) -> Optional[Duration]:
    """
    Конверсия внешнего интервала в Duration.

    Args:
        interval: Внешний интервал

    Returns:
        Duration для nanoseconds/microseconds/milliseconds/seconds;
        None для "never" и любой нераспознанной единицы.

    Raises:
        DurationOverflowError: Если значение не помещается в int64 наносекунд
    """
    constructor = _INTERVAL_CONSTRUCTORS.get(interval.unit)
    if constructor is None:
        return None
    return constructor(interval.value)


def duration_from_timedelta(value: timedelta) -> Duration:
    """
    Конверсия datetime.timedelta в Duration (без потерь).

    Raises:
        DurationOverflowError: Если timedelta не помещается в int64 наносекунд
    """
    total_micros = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
    return Duration(
        nanoseconds=checked_int64(
            total_micros * NANOS_PER_MICROSECOND, "timedelta conversion"
        )
    )
