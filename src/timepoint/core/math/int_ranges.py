"""
Int Ranges — 64-битные границы и насыщающие примитивы

Модуль задаёт границы целочисленных диапазонов, в которых живут Duration
и TimePoint, и примитивы для работы на этих границах:
- Насыщение (clamp) в знаковый/беззнаковый 64-битный диапазон
- Проверенное приведение (checked), которое бросает исключение вместо wrap
- Деление с усечением к нулю (семантика машинного целочисленного деления)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат saturate_* всегда лежит в целевом диапазоне
2. checked_int64 никогда не возвращает значение вне [INT64_MIN, INT64_MAX]
3. Wraparound не происходит ни в одной операции
"""

from typing import Final

# =============================================================================
# ГРАНИЦЫ ДИАПАЗОНОВ
# =============================================================================

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
UINT64_MAX: Final[int] = 2**64 - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DurationOverflowError(OverflowError):
    """
    Результат арифметики над Duration вышел за знаковый 64-битный диапазон.

    Конструкторы единиц и операторы + - * / у Duration не насыщают:
    вызывающая сторона обязана оставаться в диапазоне.
    """

    pass


# =============================================================================
# НАСЫЩЕНИЕ
# =============================================================================


def saturate_int64(value: int) -> int:
    """
    Насыщающее приведение в [INT64_MIN, INT64_MAX].

    Examples:
        >>> saturate_int64(2**64)
        9223372036854775807
        >>> saturate_int64(-(2**64))
        -9223372036854775808
        >>> saturate_int64(42)
        42
    """
    if value > INT64_MAX:
        return INT64_MAX
    if value < INT64_MIN:
        return INT64_MIN
    return value


def saturate_uint64(value: int) -> int:
    """
    Насыщающее приведение в [0, UINT64_MAX].

    Отрицательные значения прижимаются к нулю, слишком большие к UINT64_MAX.
    """
    if value > UINT64_MAX:
        return UINT64_MAX
    if value < 0:
        return 0
    return value


# =============================================================================
# ПРОВЕРЕННАЯ АРИФМЕТИКА
# =============================================================================


def checked_int64(value: int, operation: str = "arithmetic") -> int:
    """
    Проверка, что value помещается в знаковый 64-битный диапазон.

    Args:
        value: Результат операции (произвольной точности)
        operation: Описание операции (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        DurationOverflowError: Если value вне [INT64_MIN, INT64_MAX]
    """
    if value < INT64_MIN or value > INT64_MAX:
        raise DurationOverflowError(
            f"{operation} overflows signed 64-bit range: {value}"
        )
    return value


def trunc_divide(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Оператор // в Python округляет к минус бесконечности; здесь нужна
    семантика машинного деления: -7 / 2 == -3.

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> trunc_divide(7, 2)
        3
        >>> trunc_divide(-7, 2)
        -3
        >>> trunc_divide(7, -2)
        -3
    """
    if denominator == 0:
        raise ZeroDivisionError("integer division by zero")

    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_uint64(value: int, name: str) -> None:
    """
    Валидация, что значение является целым в [0, UINT64_MAX].

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или вне диапазона
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0 or value > UINT64_MAX:
        raise ValueError(f"{name} must be in [0, {UINT64_MAX}], got {value}")
