"""
Instant: точка на временной оси относительно опорной точки

Опорная точка: 01 Jan 1900 00:00:00 TAI (как в NTP и TAI).

Immutable Pydantic модель: (Polarity, Span). Знаковое смещение от опорной
точки представлено неотрицательным Span и одним битом полярности.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Zero-collapse: Instant с нулевым magnitude И ЕСТЬ опорная точка,
   независимо от сохранённой полярности. Все такие Instant равны.
2. Смена полярности: если результат операции проходит через опорную точку,
   полярность меняется, а magnitude пересчитывается как оставшееся
   абсолютное смещение.
3. Span.__sub__ никогда не вызывается с большим вычитаемым: ветвление
   по условию span >= magnitude исключает SpanUnderflowError.

Порядок хронологический: среди BEFORE больший magnitude раньше.
"""

import logging

from pydantic import BaseModel, Field

from taitime.core.domain.polarity import Polarity
from taitime.core.domain.span import Span
from taitime.core.domain.units import REFERENCE_EPOCH_LABEL, parts_to_seconds, seconds_to_parts
from taitime.core.math.numerical_safeguards import is_valid_float

logger = logging.getLogger("taitime.instant")


# =============================================================================
# INSTANT MODEL
# =============================================================================


class Instant(BaseModel):
    """
    Точка во времени относительно опорной точки (TAI epoch).

    Поля сериализуются как "polarity" и "magnitude".
    Все операции возвращают новый экземпляр.

    Examples:
        >>> epoch = Instant.new(0, 0, Polarity.AFTER)
        >>> Instant.new(0, 0, Polarity.BEFORE) == epoch
        True
        >>> Instant.new(1, 0, Polarity.BEFORE) < epoch < Instant.new(1, 0, Polarity.AFTER)
        True
        >>> (Instant.new(159, 0, Polarity.BEFORE) + Span.new(160, 0)).polarity()
        <Polarity.AFTER: 'after'>
    """

    side: Polarity = Field(..., alias="polarity", description="Сторона опорной точки")
    span: Span = Field(..., alias="magnitude", description="Смещение от опорной точки")

    # Immutable; наружу всегда "polarity"/"magnitude", внутренние имена принимаются на входе
    model_config = {"frozen": True, "populate_by_name": True, "serialize_by_alias": True}

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, seconds: int, nanos: int, polarity: Polarity) -> "Instant":
        """
        Instant из целых секунд, наносекунд и полярности.

        Наносекунды >= 1e9 переносятся в секунды (см. Span).
        """
        return cls(polarity=polarity, magnitude=Span.new(seconds, nanos))

    @classmethod
    def from_span(cls, magnitude: Span, polarity: Polarity) -> "Instant":
        return cls(polarity=polarity, magnitude=magnitude)

    @classmethod
    def from_precise_seconds(cls, value: float, polarity: Polarity = Polarity.AFTER) -> "Instant":
        """
        Instant из float секунд относительно опорной точки.

        Целые секунды: round(value); наносекунды: round((value - round(value)) * 1e9),
        отрицательный остаток занимает одну секунду.
        Отрицательное value означает противоположную сторону от polarity.

        Args:
            value: Смещение в секундах
            polarity: Сторона опорной точки

        Raises:
            ValueError: Если value NaN/Inf

        Examples:
            >>> Instant.from_precise_seconds(159 + 159 * 1e-9, Polarity.AFTER) == Instant.new(159, 159, Polarity.AFTER)
            True
        """
        if not is_valid_float(value):
            raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")

        if value < 0:
            value = -value
            polarity = polarity.flipped()

        seconds, nanos = seconds_to_parts(value)
        return cls.new(seconds, nanos, polarity)

    @classmethod
    def epoch(cls) -> "Instant":
        """Опорная точка: 01 Jan 1900 00:00:00 TAI"""
        return cls.new(0, 0, Polarity.AFTER)

    # -------------------------------------------------------------------------
    # Чтение
    # -------------------------------------------------------------------------

    def seconds(self) -> int:
        """Целые секунды смещения от опорной точки"""
        return self.span.seconds

    def nanos(self) -> int:
        """Наносекундная доля смещения"""
        return self.span.nanos

    def polarity(self) -> Polarity:
        return self.side

    def magnitude(self) -> Span:
        return self.span

    def duration(self) -> Span:
        """Синоним magnitude()"""
        return self.span

    def is_epoch(self) -> bool:
        return self.span.is_zero()

    def as_seconds(self) -> float:
        """
        Знаковое смещение от опорной точки в секундах.

        Returns:
            -magnitude для BEFORE, +magnitude для AFTER, 0.0 для опорной точки
        """
        if self.is_epoch():
            return 0.0
        value = self.span.as_seconds()
        return -value if self.side is Polarity.BEFORE else value

    def to_json_dict(self) -> dict:
        """Сериализация в JSON-совместимый dict, проверенный по схеме instant.json"""
        from taitime.core.contracts import dump_instant

        return dump_instant(self)

    @classmethod
    def from_json_dict(cls, data: dict) -> "Instant":
        """
        Загрузка из JSON-совместимого dict с проверкой по схеме instant.json.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют контракту
        """
        from taitime.core.contracts import load_instant

        return load_instant(data)

    # -------------------------------------------------------------------------
    # Равенство и порядок
    # -------------------------------------------------------------------------

    def _chrono_key(self) -> tuple[int, int, int]:
        """
        Ключ хронологического порядка.

        BEFORE: (0, -seconds, -nanos), опорная точка: (1, 0, 0),
        AFTER: (2, seconds, nanos).
        """
        if self.is_epoch():
            return 1, 0, 0
        if self.side is Polarity.BEFORE:
            return 0, -self.span.seconds, -self.span.nanos
        return 2, self.span.seconds, self.span.nanos

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        spans_eq = self.span == other.span
        if spans_eq and self.span.is_zero():
            # Полярность не проверяется для опорной точки
            return True
        return spans_eq and self.side is other.side

    def __hash__(self) -> int:
        return hash(self._chrono_key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._chrono_key() < other._chrono_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._chrono_key() <= other._chrono_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._chrono_key() > other._chrono_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._chrono_key() >= other._chrono_key()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, delta: object) -> "Instant":
        """
        Instant + Span -> Instant

        Examples:
            >>> Instant.new(159, 10, Polarity.AFTER) + Span.new(5, 2) == Instant.new(164, 12, Polarity.AFTER)
            True
            >>> Instant.new(0, 5, Polarity.BEFORE) + Span.new(0, 6) == Instant.new(0, 1, Polarity.AFTER)
            True
        """
        if not isinstance(delta, Span):
            return NotImplemented
        if delta.is_zero():
            return self

        if self.side is Polarity.AFTER:
            # Сложение после опорной точки тривиально
            return Instant.from_span(self.span + delta, Polarity.AFTER)

        if delta >= self.span:
            # Переход через опорную точку; ровно ноль считается AFTER
            logger.debug("Polarity crossing on add: %r + %r", self, delta)
            return Instant.from_span(delta - self.span, Polarity.AFTER)

        return Instant.from_span(self.span - delta, Polarity.BEFORE)

    def __sub__(self, other: object) -> "Instant | float":
        """
        Instant - Span -> Instant
        Instant - Instant -> float (знаковые секунды)

        Examples:
            >>> Instant.new(159, 0, Polarity.AFTER) - Span.new(160, 0) == Instant.new(1, 0, Polarity.BEFORE)
            True
            >>> Instant.new(159, 10, Polarity.BEFORE) - Instant.new(159, 10, Polarity.AFTER)
            -318.00000002
        """
        if isinstance(other, Span):
            return self._sub_span(other)
        if isinstance(other, Instant):
            return self._sub_instant(other)
        return NotImplemented

    def _sub_span(self, delta: Span) -> "Instant":
        if delta.is_zero():
            return self

        if self.side is Polarity.BEFORE:
            # Вычитание до опорной точки тривиально
            return Instant.from_span(self.span + delta, Polarity.BEFORE)

        if delta >= self.span:
            logger.debug("Polarity crossing on sub: %r - %r", self, delta)
            return Instant.from_span(delta - self.span, Polarity.BEFORE)

        return Instant.from_span(self.span - delta, Polarity.AFTER)

    def _sub_instant(self, other: "Instant") -> float:
        if self == other:
            return 0.0

        if self.side is other.side:
            if self.span > other.span:
                delta = self.span - other.span
                delta_secs = parts_to_seconds(delta.seconds, delta.nanos)
            else:
                delta = other.span - self.span
                delta_secs = -parts_to_seconds(delta.seconds, delta.nanos)
            # До опорной точки больший magnitude означает более раннее время
            if self.side is Polarity.BEFORE:
                return -delta_secs
            return delta_secs

        # Разные стороны: расстояние = сумма magnitude
        total = self.span + other.span
        delta_secs = parts_to_seconds(total.seconds, total.nanos)
        if other.side is Polarity.AFTER:
            # self до опорной точки, other после: результат отрицательный
            return -delta_secs
        return delta_secs

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"Instant(seconds={self.span.seconds}, nanos={self.span.nanos}, polarity={str(self.side)})"

    def __str__(self) -> str:
        if self.is_epoch():
            return REFERENCE_EPOCH_LABEL
        return f"{self.span} {self.side.value} {REFERENCE_EPOCH_LABEL}"
