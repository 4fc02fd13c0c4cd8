"""
Clock Noise: симуляция дрейфа генератора часов

ClockNoise добавляет к измеренному Span реальный дрейф часов. Например, если
аппарат измеряет время распространения сигнала по высокоточному генератору,
в спецификации генератора указана его стабильность. На коротких интервалах
(до нескольких минут) дрейф обычно пренебрежимо мал, но в высокоточных
системах он даёт заметную ошибку (например, километры в двусторонней
радиолокации).

Стабильность задаётся в частях на миллион (ppm) на опорный интервал; для
ppb умножьте значение на 1e-3.

ВАЖНО: стабильность нелинейна. 15 ppm на 15 минут НЕ равно 1 ppm на минуту.

Модель: Span делится на k полных опорных интервалов и неполный остаток R.
Каждый интервал длины L дрейфует как N(L, ppm * 1e-6 * L) независимо, поэтому
сумма полных интервалов берётся одной выборкой N(k * L, sqrt(k) * sigma),
остаток: второй выборкой N(R, ppm * 1e-6 * R). Память не зависит от длины Span.

Модуль работает только с неотрицательным Span и не зависит от Instant.
"""

import logging
import math
from dataclasses import dataclass
from typing import Final

import numpy as np

from taitime.core.domain.span import Span
from taitime.core.domain.units import chunk_count, full_chunks_and_remainder
from taitime.core.math.numerical_safeguards import (
    clamp,
    validate_non_negative,
    validate_positive,
)

logger = logging.getLogger("taitime.sim")


# =============================================================================
# CONSTANTS
# =============================================================================

# Опорные интервалы спецификаций стабильности (секунды)
REFERENCE_SPAN_1SEC: Final[float] = 1.0
REFERENCE_SPAN_1MIN: Final[float] = 60.0
REFERENCE_SPAN_15MIN: Final[float] = 900.0

# ppm -> доля
PPM_TO_FRACTION: Final[float] = 1e-6

# Общий для процесса генератор случайных чисел
_DEFAULT_RNG = np.random.default_rng()


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ClockNoiseConfig:
    """Конфигурация генератора шума часов.

    Параметры стабильности генератора.
    """

    # Стабильность в ppm на опорный интервал
    ppm: float

    # Опорный интервал (секунды)
    reference_span_seconds: float = REFERENCE_SPAN_1SEC

    def __post_init__(self):
        validate_non_negative(self.ppm, "ppm")
        validate_positive(self.reference_span_seconds, "reference_span_seconds")

    @property
    def drift_fraction(self) -> float:
        """Стандартное отклонение на секунду интервала (доля)"""
        return self.ppm * PPM_TO_FRACTION

    @property
    def sigma_seconds(self) -> float:
        """Стандартное отклонение на один опорный интервал (секунды)"""
        return self.drift_fraction * self.reference_span_seconds


# =============================================================================
# CLOCK NOISE
# =============================================================================


class ClockNoise:
    """
    Генератор шума часов.

    Examples:
        >>> # Часы IRIS: 1 ppb на одну секунду
        >>> nasa_iris = ClockNoise.with_ppm_over_1sec(1e-3)
        >>> noisy = nasa_iris.noise_up(Span.new(8 * 60, 0))
        >>> abs(noisy.as_seconds() - 480.0) < 1.0
        True
    """

    def __init__(self, config: ClockNoiseConfig, rng: np.random.Generator | None = None):
        self.config = config
        self._rng = rng if rng is not None else _DEFAULT_RNG

    @classmethod
    def with_ppm_over(
        cls, ppm: float, span_seconds: float, seed: int | None = None
    ) -> "ClockNoise":
        """
        Генератор со стабильностью ppm на интервал span_seconds.

        Args:
            ppm: Стабильность в частях на миллион
            span_seconds: Опорный интервал (секунды)
            seed: Seed для воспроизводимости (None: общий генератор процесса)
        """
        rng = np.random.default_rng(seed) if seed is not None else None
        return cls(ClockNoiseConfig(ppm=ppm, reference_span_seconds=span_seconds), rng=rng)

    @classmethod
    def with_ppm_over_1sec(cls, ppm: float, seed: int | None = None) -> "ClockNoise":
        """Стабильность в ppm на **одну** секунду."""
        return cls.with_ppm_over(ppm, REFERENCE_SPAN_1SEC, seed)

    @classmethod
    def with_ppm_over_1min(cls, ppm: float, seed: int | None = None) -> "ClockNoise":
        """Стабильность в ppm на **одну минуту** (60 секунд)."""
        return cls.with_ppm_over(ppm, REFERENCE_SPAN_1MIN, seed)

    @classmethod
    def with_ppm_over_15min(cls, ppm: float, seed: int | None = None) -> "ClockNoise":
        """Стабильность в ppm на **пятнадцать минут** (900 секунд)."""
        return cls.with_ppm_over(ppm, REFERENCE_SPAN_15MIN, seed)

    def noise_up(self, noiseless: Span) -> Span:
        """
        Зашумлённая версия noiseless Span.

        Args:
            noiseless: Истинный промежуток времени

        Returns:
            Span с дрейфом часов (никогда не отрицательный)
        """
        reference = self.config.reference_span_seconds
        total = noiseless.as_seconds()
        n_chunks = chunk_count(total, reference)
        if n_chunks == 0:
            return Span.zero()

        # Сумма k полных интервалов ~ N(k * L, sqrt(k) * sigma): одна выборка вместо k
        full_chunks, partial = full_chunks_and_remainder(total, reference)
        drift = 0.0
        if full_chunks:
            drift += self._rng.normal(
                loc=full_chunks * reference,
                scale=math.sqrt(full_chunks) * self.config.sigma_seconds,
            )
        if partial > 0.0:
            drift += self._rng.normal(loc=partial, scale=partial * self.config.drift_fraction)
        drift = clamp(float(drift), min_value=0.0)

        logger.debug(
            "Clock noise: %s -> %.9fs over %d chunk(s) of %.1fs",
            noiseless,
            drift,
            n_chunks,
            reference,
        )
        return Span.from_seconds(drift)


def add_noise(
    span: Span,
    stability_ppm: float,
    reference_span: Span,
    rng: np.random.Generator | None = None,
) -> Span:
    """
    Функциональная форма ClockNoise.noise_up.

    Args:
        span: Истинный промежуток времени
        stability_ppm: Стабильность в ppm на reference_span
        reference_span: Опорный интервал
        rng: Генератор (None: общий генератор процесса)

    Raises:
        ValueError: Если stability_ppm < 0 или reference_span нулевой
    """
    config = ClockNoiseConfig(ppm=stability_ppm, reference_span_seconds=reference_span.as_seconds())
    return ClockNoise(config, rng=rng).noise_up(span)
