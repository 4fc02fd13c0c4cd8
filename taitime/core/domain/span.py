"""
Span: неотрицательный промежуток времени (Magnitude)

Immutable Pydantic модель: целые секунды + наносекундная доля в [0, 1e9).
Знака нет: вычитание большего Span из меньшего запрещено и поднимает
SpanUnderflowError. Знаковая арифметика строится поверх в Instant.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from taitime.core.domain.units import (
    NANOS_PER_SECOND,
    normalize_parts,
    parts_to_seconds,
    seconds_to_parts,
)
from taitime.core.math.numerical_safeguards import validate_non_negative


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SpanUnderflowError(ArithmeticError):
    """
    Результат вычитания Span был бы отрицательным.

    Для Instant это всегда дефект логики смены полярности, а не
    штатная ошибка выполнения.
    """

    pass


# =============================================================================
# SPAN MODEL
# =============================================================================


class Span(BaseModel):
    """
    Неотрицательный промежуток времени.

    Наносекунды >= 1e9 при создании переносятся в секунды.
    Все операции возвращают новый экземпляр.
    """

    seconds: int = Field(0, ge=0, description="Целые секунды")
    nanos: int = Field(0, ge=0, lt=NANOS_PER_SECOND, description="Наносекундная доля")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def carry_nanos(cls, data: Any) -> Any:
        """Перенос целых секунд из наносекунд до проверки полей."""
        if isinstance(data, dict):
            seconds = data.get("seconds", 0)
            nanos = data.get("nanos", 0)
            if (
                isinstance(seconds, int)
                and isinstance(nanos, int)
                and seconds >= 0
                and nanos >= NANOS_PER_SECOND
            ):
                seconds, nanos = normalize_parts(seconds, nanos)
                data = {**data, "seconds": seconds, "nanos": nanos}
        return data

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, seconds: int = 0, nanos: int = 0) -> "Span":
        """Span из целых секунд и наносекунд."""
        return cls(seconds=seconds, nanos=nanos)

    @classmethod
    def zero(cls) -> "Span":
        return cls(seconds=0, nanos=0)

    @classmethod
    def from_seconds(cls, value: float) -> "Span":
        """
        Span из float секунд.

        Raises:
            ValueError: Если value отрицательное или NaN/Inf
        """
        validate_non_negative(value, "value")
        seconds, nanos = seconds_to_parts(value)
        return cls(seconds=seconds, nanos=nanos)

    # -------------------------------------------------------------------------
    # Чтение
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.seconds == 0 and self.nanos == 0

    def as_seconds(self) -> float:
        """Длина промежутка в секундах: seconds + nanos * 1e-9"""
        return parts_to_seconds(self.seconds, self.nanos)

    def total_nanos(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanos

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Span":
        if not isinstance(other, Span):
            return NotImplemented
        return Span(seconds=self.seconds + other.seconds, nanos=self.nanos + other.nanos)

    def __sub__(self, other: object) -> "Span":
        if not isinstance(other, Span):
            return NotImplemented
        if other > self:
            raise SpanUnderflowError(f"Span underflow: {self!r} - {other!r} would be negative")

        seconds = self.seconds - other.seconds
        nanos = self.nanos - other.nanos
        if nanos < 0:
            seconds -= 1
            nanos += NANOS_PER_SECOND
        return Span(seconds=seconds, nanos=nanos)

    # -------------------------------------------------------------------------
    # Сравнение: по (seconds, nanos)
    # -------------------------------------------------------------------------

    def _key(self) -> tuple[int, int]:
        return self.seconds, self.nanos

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self._key() >= other._key()

    def __repr__(self) -> str:
        return f"Span(seconds={self.seconds}, nanos={self.nanos})"

    def __str__(self) -> str:
        return f"{self.seconds}.{self.nanos:09d}s"
