"""
Тесты для TimePoint

Проверяет:
1. Разность двух точек (sentinel-случаи и насыщение в int64)
2. Сложение/вычитание Duration на границах диапазона
3. Поглощение DISTANT_FUTURE
4. Порядок, равенство, immutability
5. now() с системными и ручными часами
"""

import random

import pytest
from pydantic import ValidationError

from timepoint.clock import ManualClock
from timepoint.core.domain.duration import Duration, nanoseconds, seconds
from timepoint.core.domain.time_point import DISTANT_FUTURE, TimePoint
from timepoint.core.math.int_ranges import INT64_MAX, INT64_MIN, UINT64_MAX


def tp(raw: int) -> TimePoint:
    return TimePoint(uptime_nanoseconds=raw)


# =============================================================================
# TIMEPOINT - TIMEPOINT
# =============================================================================


class TestTimePointDifference:
    """Тесты разности двух TimePoint"""

    def test_max_minus_max_is_zero(self) -> None:
        """Sentinel - sentinel == 0"""
        assert tp(UINT64_MAX) - tp(UINT64_MAX) == nanoseconds(0)
        assert DISTANT_FUTURE - DISTANT_FUTURE == nanoseconds(0)

    def test_max_minus_any_is_int64_max(self) -> None:
        """Sentinel - t == INT64_MAX для любого t != sentinel"""
        for _ in range(50):
            other = tp(random.randrange(0, UINT64_MAX))
            assert DISTANT_FUTURE - other == nanoseconds(INT64_MAX)

    def test_any_minus_max_is_int64_min(self) -> None:
        """t - sentinel == INT64_MIN для любого t != sentinel"""
        for _ in range(50):
            other = tp(random.randrange(0, UINT64_MAX))
            assert other - DISTANT_FUTURE == nanoseconds(INT64_MIN)

    def test_max_minus_min(self) -> None:
        assert tp(UINT64_MAX) - tp(0) == nanoseconds(INT64_MAX)

    def test_min_minus_max(self) -> None:
        assert tp(0) - tp(UINT64_MAX) == nanoseconds(INT64_MIN)

    @pytest.mark.parametrize("raw", [0, 1, 12345, INT64_MAX, UINT64_MAX - 1, UINT64_MAX])
    def test_self_difference_is_zero(self, raw: int) -> None:
        assert tp(raw) - tp(raw) == nanoseconds(0)

    def test_ordinary_difference(self) -> None:
        assert tp(5_000) - tp(2_000) == nanoseconds(3_000)
        assert tp(2_000) - tp(5_000) == nanoseconds(-3_000)

    def test_large_positive_difference_saturates(self) -> None:
        """Разность больше INT64_MAX насыщается, а не делает wrap"""
        assert tp(UINT64_MAX - 1) - tp(0) == nanoseconds(INT64_MAX)
        assert tp(INT64_MAX + 10) - tp(5) == nanoseconds(INT64_MAX)

    def test_large_negative_difference_saturates(self) -> None:
        assert tp(0) - tp(UINT64_MAX - 1) == nanoseconds(INT64_MIN)
        assert tp(5) - tp(INT64_MAX + 10) == nanoseconds(INT64_MIN)

    def test_difference_at_exact_int64_boundary(self) -> None:
        assert tp(INT64_MAX) - tp(0) == nanoseconds(INT64_MAX)
        assert tp(0) - tp(INT64_MAX) == nanoseconds(-INT64_MAX)

    def test_now_minus_min_is_positive(self) -> None:
        assert TimePoint.now() - tp(0) > nanoseconds(0)

    def test_max_minus_now_is_positive(self) -> None:
        assert DISTANT_FUTURE - TimePoint.now() > nanoseconds(0)

    def test_now_minus_max_is_negative(self) -> None:
        assert TimePoint.now() - DISTANT_FUTURE < nanoseconds(0)

    def test_min_minus_now_is_negative(self) -> None:
        assert tp(0) - TimePoint.now() < nanoseconds(0)


# =============================================================================
# TIMEPOINT ± DURATION НА ВЕРХНЕЙ ГРАНИЦЕ
# =============================================================================


class TestTimePointAtMax:
    """Сложение и вычитание Duration около UINT64_MAX"""

    def test_max_plus_max_interval(self) -> None:
        assert tp(UINT64_MAX) + nanoseconds(INT64_MAX) == DISTANT_FUTURE

    def test_max_minus_max_interval(self) -> None:
        """Sentinel поглощает вычитание"""
        assert tp(UINT64_MAX) - nanoseconds(INT64_MAX) == DISTANT_FUTURE

    def test_max_minus_one_plus_max_interval(self) -> None:
        assert tp(UINT64_MAX - 1) + nanoseconds(INT64_MAX) == DISTANT_FUTURE

    def test_max_minus_one_minus_max_interval(self) -> None:
        result = tp(UINT64_MAX - 1) - nanoseconds(INT64_MAX)
        assert result == tp(UINT64_MAX - 1 - INT64_MAX)

    def test_max_plus_min_interval(self) -> None:
        """Sentinel поглощает даже отрицательный интервал"""
        assert tp(UINT64_MAX) + nanoseconds(INT64_MIN) == DISTANT_FUTURE

    def test_max_minus_min_interval(self) -> None:
        assert tp(UINT64_MAX) - nanoseconds(INT64_MIN) == DISTANT_FUTURE

    def test_max_minus_one_plus_min_interval(self) -> None:
        result = tp(UINT64_MAX - 1) + nanoseconds(INT64_MIN)
        assert result == tp(UINT64_MAX - 1 - 2**63)

    def test_max_minus_one_minus_min_interval(self) -> None:
        """Вычитание очень отрицательного интервала насыщается вверх"""
        assert tp(UINT64_MAX - 1) - nanoseconds(INT64_MIN) == DISTANT_FUTURE

    @pytest.mark.parametrize(
        "duration",
        [nanoseconds(0), nanoseconds(1), nanoseconds(-1), seconds(-10), seconds(10),
         nanoseconds(INT64_MIN), nanoseconds(INT64_MAX)],
    )
    def test_distant_future_absorbs(self, duration: Duration) -> None:
        assert DISTANT_FUTURE + duration == DISTANT_FUTURE
        assert DISTANT_FUTURE - duration == DISTANT_FUTURE
        assert (DISTANT_FUTURE + duration).is_distant_future


# =============================================================================
# TIMEPOINT ± DURATION НА НИЖНЕЙ ГРАНИЦЕ
# =============================================================================


class TestTimePointAtMin:
    """Сложение и вычитание Duration около 0"""

    def test_min_plus_max_interval(self) -> None:
        assert tp(0) + nanoseconds(INT64_MAX) == tp(INT64_MAX)

    def test_min_minus_max_interval(self) -> None:
        """Пол в 0, без wrap"""
        assert tp(0) - nanoseconds(INT64_MAX) == tp(0)

    def test_min_plus_one_plus_max_interval(self) -> None:
        assert tp(1) + nanoseconds(INT64_MAX) == tp(2**63)

    def test_min_plus_one_minus_max_interval(self) -> None:
        assert tp(1) - nanoseconds(INT64_MAX) == tp(0)

    def test_min_plus_min_interval(self) -> None:
        assert tp(0) + nanoseconds(INT64_MIN) == tp(0)

    def test_min_minus_min_interval(self) -> None:
        assert tp(0) - nanoseconds(INT64_MIN) == tp(2**63)

    def test_min_plus_one_plus_min_interval(self) -> None:
        assert tp(1) + nanoseconds(INT64_MIN) == tp(0)

    def test_min_plus_one_minus_min_interval(self) -> None:
        assert tp(1) - nanoseconds(INT64_MIN) == tp(2**63 + 1)

    def test_subtract_equal_duration_gives_zero(self) -> None:
        assert tp(1_000) - nanoseconds(1_000) == tp(0)


class TestTimePointOrdinaryArithmetic:
    """Обычная арифметика вдали от границ"""

    def test_add_and_subtract(self) -> None:
        start = tp(10_000_000_000)
        assert start + seconds(1) == tp(11_000_000_000)
        assert start - seconds(1) == tp(9_000_000_000)
        assert start + seconds(-1) == tp(9_000_000_000)
        assert start - seconds(-1) == tp(11_000_000_000)

    def test_duration_plus_time_point(self) -> None:
        assert seconds(2) + tp(1) == tp(2_000_000_001)

    def test_offset_then_difference(self) -> None:
        start = tp(42)
        assert (start + nanoseconds(100)) - start == nanoseconds(100)

    def test_unsupported_operand_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            tp(1) + 5  # type: ignore[operator]
        with pytest.raises(TypeError):
            tp(1) - 5  # type: ignore[operator]


# =============================================================================
# СРАВНЕНИЯ И IMMUTABILITY
# =============================================================================


class TestTimePointComparison:
    """Порядок и равенство по сырым значениям"""

    def test_ordering_matches_raw_values(self) -> None:
        raws = [random.randrange(0, UINT64_MAX + 1) for _ in range(100)] + [0, UINT64_MAX]
        points = sorted(tp(r) for r in raws)
        assert [p.uptime_nanoseconds for p in points] == sorted(raws)

    def test_sentinel_is_after_everything(self) -> None:
        assert DISTANT_FUTURE > tp(UINT64_MAX - 1)
        assert tp(0) < DISTANT_FUTURE
        assert DISTANT_FUTURE >= tp(UINT64_MAX)
        assert tp(UINT64_MAX) <= DISTANT_FUTURE

    def test_equality_and_hash(self) -> None:
        assert tp(7) == tp(7)
        assert tp(7) != tp(8)
        assert hash(tp(7)) == hash(tp(7))
        assert len({tp(7), tp(7), tp(8)}) == 2

    def test_saturated_value_is_sentinel(self) -> None:
        """Насыщение до потолка даёт sentinel"""
        saturated = tp(UINT64_MAX - 5) + seconds(1)
        assert saturated == DISTANT_FUTURE
        assert saturated.is_distant_future
        assert saturated - DISTANT_FUTURE == nanoseconds(0)

    def test_immutability(self) -> None:
        point = tp(1)
        with pytest.raises(ValidationError, match="frozen"):
            point.uptime_nanoseconds = 2  # type: ignore[misc]

    @pytest.mark.parametrize("raw", [-1, UINT64_MAX + 1])
    def test_out_of_range_rejected(self, raw: int) -> None:
        with pytest.raises(ValidationError):
            tp(raw)

    def test_non_int_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TimePoint(uptime_nanoseconds=1.5)  # type: ignore[arg-type]


# =============================================================================
# NOW / BRIDGING
# =============================================================================


class TestTimePointNow:
    """now() и конверсии в/из монотонного отсчёта"""

    def test_now_uses_injected_clock(self) -> None:
        clock = ManualClock(start_ns=1_000)
        assert TimePoint.now(clock) == tp(1_000)

        clock.advance(500)
        assert TimePoint.now(clock) - tp(1_000) == nanoseconds(500)

    def test_now_is_monotonic(self) -> None:
        first = TimePoint.now()
        second = TimePoint.now()
        assert second >= first

    def test_distant_future_accessor(self) -> None:
        assert TimePoint.distant_future() is DISTANT_FUTURE
        assert DISTANT_FUTURE.uptime_nanoseconds == UINT64_MAX

    def test_monotonic_ns_roundtrip(self) -> None:
        point = TimePoint.from_monotonic_ns(123_456_789)
        assert point.to_monotonic_ns() == 123_456_789
        assert TimePoint.from_monotonic_ns(UINT64_MAX) == DISTANT_FUTURE
