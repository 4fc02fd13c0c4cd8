"""
taitime: precise instants relative to the TAI epoch (01 Jan 1900).

An Instant is a nonnegative Span plus a Polarity (before/after the epoch);
arithmetic behaves as signed arithmetic, flipping polarity when crossing
the epoch.
"""

from taitime.core.domain import Instant, Polarity, Span, SpanUnderflowError

__version__ = "0.1.0"

__all__ = [
    "Instant",
    "Polarity",
    "Span",
    "SpanUnderflowError",
]
