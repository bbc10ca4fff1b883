"""Monotonic clock — источники монотонного времени для TimePoint.now().

Часы передаются в TimePoint.now() явно (dependency injection), чтобы
логику, зависящую от времени, можно было тестировать без реального ожидания:
- SystemMonotonicClock: системные монотонные часы (stateless)
- ManualClock: детерминированные часы для тестов
- ClockConfig / make_clock: выбор источника
"""

import logging
import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol, runtime_checkable

from timepoint.core.math.int_ranges import validate_uint64

logger = logging.getLogger(__name__)


class ClockUnavailableError(RuntimeError):
    """Запрошенный источник часов недоступен на этой платформе."""

    pass


class ClockSource(str, Enum):
    """Источник монотонного времени.

    - MONOTONIC: time.monotonic_ns (CLOCK_MONOTONIC, без учёта сна)
    - PERF_COUNTER: time.perf_counter_ns (максимальное разрешение)
    - BOOTTIME: CLOCK_BOOTTIME (Linux, с учётом сна)
    """
    MONOTONIC = "monotonic"
    PERF_COUNTER = "perf_counter"
    BOOTTIME = "boottime"


@dataclass(frozen=True)
class ClockConfig:
    """Конфигурация часов, используемых TimePoint.now()."""

    source: ClockSource = ClockSource.MONOTONIC


@runtime_checkable
class MonotonicClock(Protocol):
    """Монотонные часы с наносекундным счётчиком.

    Эпоха произвольна; осмысленна только разность двух отсчётов.
    """

    def now_ns(self) -> int:
        ...


def _boottime_ns() -> int:
    return time.clock_gettime_ns(time.CLOCK_BOOTTIME)


def _reader_for(source: ClockSource) -> Callable[[], int]:
    if source == ClockSource.MONOTONIC:
        return time.monotonic_ns
    if source == ClockSource.PERF_COUNTER:
        return time.perf_counter_ns
    if source == ClockSource.BOOTTIME:
        if not hasattr(time, "CLOCK_BOOTTIME"):
            raise ClockUnavailableError("CLOCK_BOOTTIME is not available on this platform")
        return _boottime_ns
    raise ClockUnavailableError(f"Unknown clock source: {source!r}")


class SystemMonotonicClock:
    """Системные монотонные часы.

    Не хранят изменяемого состояния: одно чтение счётчика на вызов,
    безопасно из любого количества потоков.
    """

    __slots__ = ("_source", "_read")

    def __init__(self, source: ClockSource = ClockSource.MONOTONIC) -> None:
        self._source = ClockSource(source)
        self._read = _reader_for(self._source)

    @property
    def source(self) -> ClockSource:
        return self._source

    def now_ns(self) -> int:
        return int(self._read())

    def __repr__(self) -> str:
        return f"SystemMonotonicClock(source={self._source.value!r})"


class ManualClock:
    """Часы с ручным управлением для тестов.

    Значение меняется только через set()/advance(); чтение и запись
    защищены блокировкой.
    """

    def __init__(self, start_ns: int = 0) -> None:
        validate_uint64(start_ns, "start_ns")
        self._now_ns = start_ns
        self._lock = threading.Lock()

    def now_ns(self) -> int:
        with self._lock:
            return self._now_ns

    def set(self, value_ns: int) -> None:
        """
        Args:
            value_ns: новое значение счётчика

        Raises:
            ValueError: если value_ns вне [0, UINT64_MAX]
        """
        validate_uint64(value_ns, "value_ns")
        with self._lock:
            self._now_ns = value_ns

    def advance(self, delta_ns: int) -> int:
        """Сдвигает часы на delta_ns и возвращает новое значение.

        Raises:
            ValueError: если результат вне [0, UINT64_MAX]
        """
        with self._lock:
            new_value = self._now_ns + delta_ns
            validate_uint64(new_value, "advanced clock value")
            self._now_ns = new_value
            return new_value

    def __repr__(self) -> str:
        return f"ManualClock(now_ns={self.now_ns()})"


def make_clock(config: Optional[ClockConfig] = None) -> MonotonicClock:
    """Создание часов по конфигурации.

    Args:
        config: конфигурация (default: ClockConfig())

    Raises:
        ClockUnavailableError: если источник недоступен на платформе
    """
    config = config or ClockConfig()
    clock = SystemMonotonicClock(config.source)
    logger.debug("clock source selected: %s", config.source.value)
    return clock


_default_clock: MonotonicClock = SystemMonotonicClock()


def default_clock() -> MonotonicClock:
    """Часы процесса по умолчанию (CLOCK_MONOTONIC)."""
    return _default_clock
