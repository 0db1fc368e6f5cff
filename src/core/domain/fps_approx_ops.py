"""
FpsApproxOps — Явно подключаемая область приблизительных сравнений

Стандартные операторы Frequency / FpsRange / FpsRanges сравнивают ТОЧНО
(field-wise ==, без упорядочения). Приблизительная семантика доступна только
через обёртку approx():

    approx(hz(60)) == Frequency.from_period_nanos(16_666_667)   # True
    hz(60) == Frequency.from_period_nanos(16_666_667)           # False
    approx(hz(90)) / hz(60)                                     # 2

Обёртки не хешируемы: приблизительное равенство не транзитивно.
"""

from dataclasses import dataclass

from src.core.domain.fps import Frequency
from src.core.domain.fps_compare import approx_quotient, is_approx_equal, is_approx_less
from src.core.domain.fps_range import FpsRange, FpsRanges


def _unwrap_fps(other: object) -> Frequency | None:
    if isinstance(other, ApproxFps):
        return other.fps
    if isinstance(other, Frequency):
        return other
    return None


# =============================================================================
# FREQUENCY
# =============================================================================


@dataclass(frozen=True, eq=False)
class ApproxFps:
    """Frequency с приблизительными операторами == != < <= > >= и /."""

    fps: Frequency

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        rhs = _unwrap_fps(other)
        if rhs is None:
            return NotImplemented
        return is_approx_equal(self.fps, rhs)

    def __ne__(self, other: object) -> bool:
        rhs = _unwrap_fps(other)
        if rhs is None:
            return NotImplemented
        return not is_approx_equal(self.fps, rhs)

    def __lt__(self, other: object) -> bool:
        rhs = _unwrap_fps(other)
        if rhs is None:
            return NotImplemented
        return is_approx_less(self.fps, rhs)

    def __gt__(self, other: object) -> bool:
        rhs = _unwrap_fps(other)
        if rhs is None:
            return NotImplemented
        return is_approx_less(rhs, self.fps)

    def __le__(self, other: object) -> bool:
        rhs = _unwrap_fps(other)
        if rhs is None:
            return NotImplemented
        return not is_approx_less(rhs, self.fps)

    def __ge__(self, other: object) -> bool:
        rhs = _unwrap_fps(other)
        if rhs is None:
            return NotImplemented
        return not is_approx_less(self.fps, rhs)

    def __truediv__(self, other: object) -> int:
        """
        Целое число периодов other в одном периоде self.

        Raises:
            ZeroDivisionError: Если other invalid
        """
        rhs = _unwrap_fps(other)
        if rhs is None:
            return NotImplemented
        return approx_quotient(self.fps, rhs)

    def __rtruediv__(self, other: object) -> int:
        lhs = _unwrap_fps(other)
        if lhs is None:
            return NotImplemented
        return approx_quotient(lhs, self.fps)

    def __str__(self) -> str:
        return str(self.fps)


# =============================================================================
# RANGES
# =============================================================================


@dataclass(frozen=True, eq=False)
class ApproxFpsRange:
    """FpsRange с field-wise приблизительным равенством."""

    fps_range: FpsRange

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ApproxFpsRange):
            other = other.fps_range
        if not isinstance(other, FpsRange):
            return NotImplemented
        return is_approx_equal(self.fps_range.min, other.min) and is_approx_equal(
            self.fps_range.max, other.max
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __str__(self) -> str:
        return str(self.fps_range)


@dataclass(frozen=True, eq=False)
class ApproxFpsRanges:
    """FpsRanges с приблизительным равенством physical и render."""

    fps_ranges: FpsRanges

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ApproxFpsRanges):
            other = other.fps_ranges
        if not isinstance(other, FpsRanges):
            return NotImplemented
        return approx(self.fps_ranges.physical) == other.physical and approx(
            self.fps_ranges.render
        ) == other.render

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __str__(self) -> str:
        return str(self.fps_ranges)


# =============================================================================
# ENTRY POINT
# =============================================================================


def approx(value: Frequency | FpsRange | FpsRanges) -> ApproxFps | ApproxFpsRange | ApproxFpsRanges:
    """
    Подключение приблизительных операторов для значения.

    Raises:
        TypeError: Если тип значения не поддерживается
    """
    if isinstance(value, Frequency):
        return ApproxFps(value)
    if isinstance(value, FpsRange):
        return ApproxFpsRange(value)
    if isinstance(value, FpsRanges):
        return ApproxFpsRanges(value)
    if isinstance(value, (ApproxFps, ApproxFpsRange, ApproxFpsRanges)):
        return value

    raise TypeError(f"approx() expects Frequency, FpsRange or FpsRanges, got {type(value).__name__}")
