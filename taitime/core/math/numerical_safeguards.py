"""
Numerical Safeguards: проверки float на входе в целочисленную модель времени

Модуль защищает конструкторы, принимающие float секунды:
- NaN/Inf никогда не попадают в Span/Instant
- Отрицательные значения не попадают в неотрицательный Span
- Float сравнения учитывают машинную точность

Вся арифметика Span/Instant целочисленная; float появляется только
на границах (конверсия из/в секунды, симуляция шума часов).
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность: половина наносекунды
EPS_SECONDS_ABS: Final[float] = 5e-10

# Относительная толерантность для больших смещений (double ~ 15.9 значащих цифр)
EPS_SECONDS_REL: Final[float] = 1e-15


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close_seconds(
    a: float,
    b: float,
    rel_tol: float = EPS_SECONDS_REL,
    abs_tol: float = EPS_SECONDS_ABS,
) -> bool:
    """
    Сравнение двух значений в секундах с точностью до наносекунды.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close_seconds(1.0, 1.0 + 1e-10)
        True
        >>> is_close_seconds(1.0, 1.0 + 2e-9)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Examples:
        >>> clamp(-1.0, 0.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
