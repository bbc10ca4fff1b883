"""
Interval — внешнее представление именованного интервала

Размеченное значение (единица + число), в котором интервалы приходят из
внешних таймерных API: наносекунды, микросекунды, миллисекунды, секунды
или "never" (интервал, который никогда не истекает).

Преобразование в Duration живёт в duration.py (duration_from_interval).
"""

from enum import Enum
from typing import NamedTuple


class IntervalUnit(str, Enum):
    """Единица внешнего интервала"""

    NANOSECONDS = "nanoseconds"
    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    NEVER = "never"


class Interval(NamedTuple):
    """
    Внешний интервал: значение в заданной единице.

    Для IntervalUnit.NEVER значение игнорируется.
    """

    unit: IntervalUnit
    value: int = 0

    @classmethod
    def never(cls) -> "Interval":
        return cls(IntervalUnit.NEVER)

    @property
    def is_never(self) -> bool:
        return self.unit == IntervalUnit.NEVER
