"""
Core math modules для taitime

Проверки float на границе целочисленной модели времени.
"""

from taitime.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_SECONDS_ABS,
    EPS_SECONDS_REL,
    # NaN/Inf checks
    is_valid_float,
    # Epsilon comparisons
    is_close_seconds,
    # Utilities
    clamp,
    # Validation
    validate_non_negative,
    validate_positive,
)

__all__ = [
    # Epsilon constants
    "EPS_SECONDS_ABS",
    "EPS_SECONDS_REL",
    # NaN/Inf checks
    "is_valid_float",
    # Epsilon comparisons
    "is_close_seconds",
    # Utilities
    "clamp",
    # Validation
    "validate_non_negative",
    "validate_positive",
]
