"""
Core math modules

Численные примитивы для частот и периодов с гарантией тотальности.
"""

from src.core.math.tolerance import (
    # Constants
    FPS_APPROX_EQUAL_THRESHOLD_HZ,
    FPS_QUOTIENT_EPSILON,
    NANOS_PER_SECOND,
    NSECS_MAX,
    # Conversions
    frequency_to_period_nanos,
    period_nanos_to_frequency,
    round_half_away,
    saturate_nanos,
    # Comparisons
    ceil_ratio,
    is_within_threshold,
    # Validation
    validate_threshold,
)

__all__ = [
    # Tolerance — Constants
    "FPS_APPROX_EQUAL_THRESHOLD_HZ",
    "FPS_QUOTIENT_EPSILON",
    "NANOS_PER_SECOND",
    "NSECS_MAX",
    # Tolerance — Conversions
    "frequency_to_period_nanos",
    "period_nanos_to_frequency",
    "round_half_away",
    "saturate_nanos",
    # Tolerance — Comparisons
    "ceil_ratio",
    "is_within_threshold",
    # Tolerance — Validation
    "validate_threshold",
]
