"""
Time Units: единицы времени и конверсии

Единственный допустимый способ преобразований между:
- целыми секундами + наносекундной долей (Span)
- float секундами (знаковые дельты между Instant)

Reference point (epoch): 01 Jan 1900 00:00:00 TAI, как в NTP и TAI.
"""

import math
from typing import Final


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество наносекунд в секунде (верхняя граница дробной части, exclusive)
NANOS_PER_SECOND: Final[int] = 1_000_000_000

# Множитель наносекунды -> секунды
NANOS_TO_SECONDS: Final[float] = 1e-9

# Множитель секунды -> наносекунды (для float)
SECONDS_TO_NANOS: Final[float] = 1e9

# Описание опорной точки
REFERENCE_EPOCH_LABEL: Final[str] = "1900-01-01T00:00:00 TAI"

# Секунд от опорной точки до UNIX epoch (1970-01-01)
UNIX_EPOCH_OFFSET_SECONDS: Final[int] = 2_208_988_800


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def normalize_parts(seconds: int, nanos: int) -> tuple[int, int]:
    """
    Нормализация (seconds, nanos): перенос целых секунд из наносекунд.

    Args:
        seconds: Целые секунды (>= 0)
        nanos: Наносекунды (>= 0, может быть >= 1e9)

    Returns:
        (seconds, nanos) с nanos в [0, 1e9)

    Examples:
        >>> normalize_parts(1, 2_500_000_000)
        (3, 500000000)
    """
    carry, nanos = divmod(nanos, NANOS_PER_SECOND)
    return seconds + carry, nanos


def parts_to_seconds(seconds: int, nanos: int) -> float:
    """
    Конверсия: (seconds, nanos) -> float секунды.

    Формула: seconds + nanos * 1e-9
    """
    return float(seconds) + float(nanos) * NANOS_TO_SECONDS


def seconds_to_parts(value: float) -> tuple[int, int]:
    """
    Конверсия: неотрицательные float секунды -> (seconds, nanos).

    Целая часть округляется до ближайшей секунды, остаток
    (value - round(value)) * 1e9 округляется до наносекунды.
    Отрицательный остаток занимает одну секунду из целой части,
    чтобы дробная часть оставалась в [0, 1e9).

    Args:
        value: Секунды (>= 0, finite)

    Returns:
        (seconds, nanos) с nanos в [0, 1e9)

    Examples:
        >>> seconds_to_parts(159.000000159)
        (159, 159)
        >>> seconds_to_parts(0.75)
        (0, 750000000)
    """
    whole = round(value)
    nanos = round((value - whole) * SECONDS_TO_NANOS)
    if nanos < 0:
        whole -= 1
        nanos += NANOS_PER_SECOND
    return normalize_parts(int(whole), int(nanos))


def chunk_count(total_seconds: float, chunk_seconds: float) -> int:
    """
    Количество интервалов длины chunk_seconds, покрывающих total_seconds.

    Returns:
        ceil(total / chunk), 0 для нулевого total
    """
    if total_seconds <= 0.0:
        return 0
    return math.ceil(total_seconds / chunk_seconds)


def full_chunks_and_remainder(total_seconds: float, chunk_seconds: float) -> tuple[int, float]:
    """
    Разбиение total_seconds на полные интервалы chunk_seconds и остаток.

    Returns:
        (количество полных интервалов, остаток в [0, chunk_seconds))

    Examples:
        >>> full_chunks_and_remainder(61.0, 60.0)
        (1, 1.0)
    """
    if total_seconds <= 0.0:
        return 0, 0.0
    full = math.floor(total_seconds / chunk_seconds)
    return full, max(total_seconds - full * chunk_seconds, 0.0)
