"""
Domain models and value objects.

Contains the time primitives: Span (nonnegative magnitude), Polarity, Instant.
"""

from taitime.core.domain.instant import Instant
from taitime.core.domain.polarity import Polarity
from taitime.core.domain.span import Span, SpanUnderflowError
from taitime.core.domain.units import (
    NANOS_PER_SECOND,
    NANOS_TO_SECONDS,
    REFERENCE_EPOCH_LABEL,
    SECONDS_TO_NANOS,
    UNIX_EPOCH_OFFSET_SECONDS,
    normalize_parts,
    parts_to_seconds,
    seconds_to_parts,
)

__all__ = [
    # Units module
    "NANOS_PER_SECOND",
    "NANOS_TO_SECONDS",
    "SECONDS_TO_NANOS",
    "REFERENCE_EPOCH_LABEL",
    "UNIX_EPOCH_OFFSET_SECONDS",
    "normalize_parts",
    "parts_to_seconds",
    "seconds_to_parts",
    # Span model
    "Span",
    "SpanUnderflowError",
    # Polarity
    "Polarity",
    # Instant model
    "Instant",
]
