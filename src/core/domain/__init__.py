"""
Domain models and value objects.

Contains the display refresh-rate value types: Frequency, FpsRange, FpsRanges,
FrameRateCategory, and the opt-in approximate comparison scope.
"""

from src.core.domain.fps import Frequency, Nanoseconds, hz
from src.core.domain.fps_compare import (
    FpsApproxEqual,
    approx_quotient,
    is_approx_equal,
    is_approx_less,
    is_strictly_less,
)
from src.core.domain.fps_range import FpsRange, FpsRanges
from src.core.domain.fps_approx_ops import (
    ApproxFps,
    ApproxFpsRange,
    ApproxFpsRanges,
    approx,
)
from src.core.domain.frame_rate_category import FrameRateCategory

__all__ = [
    # Frequency
    "Frequency",
    "Nanoseconds",
    "hz",
    # Comparison predicates
    "is_strictly_less",
    "is_approx_equal",
    "is_approx_less",
    "approx_quotient",
    "FpsApproxEqual",
    # Ranges
    "FpsRange",
    "FpsRanges",
    # Approximate scope
    "approx",
    "ApproxFps",
    "ApproxFpsRange",
    "ApproxFpsRanges",
    # Categories
    "FrameRateCategory",
]
