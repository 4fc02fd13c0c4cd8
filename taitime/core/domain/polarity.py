"""
Polarity: сторона опорной точки (TAI epoch, 01 Jan 1900)

BEFORE: magnitude отсчитывается назад от опорной точки.
AFTER: magnitude отсчитывается вперёд от опорной точки.

Полный порядок: BEFORE < AFTER.
"""

from enum import Enum


class Polarity(str, Enum):
    """Сторона опорной точки, на которой лежит Instant"""

    BEFORE = "before"
    AFTER = "after"

    @property
    def rank(self) -> int:
        """Порядковый номер: BEFORE=0, AFTER=1"""
        return 0 if self is Polarity.BEFORE else 1

    def flipped(self) -> "Polarity":
        """Противоположная сторона"""
        return Polarity.AFTER if self is Polarity.BEFORE else Polarity.BEFORE

    # Порядок по rank, а не по строковому значению ("after" < "before" лексически)
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Polarity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Polarity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Polarity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Polarity):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.value.capitalize()
