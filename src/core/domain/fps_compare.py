"""
FpsCompare — Приблизительные сравнения частот

Частоты, полученные разными путями (литерал 60 Hz и период 16_666_667 ns),
отличаются на float-шум. Эти функции сравнивают с абсолютным порогом
FPS_APPROX_EQUAL_THRESHOLD_HZ и являются строительными блоками для approx().

ВНИМАНИЕ:
- is_approx_equal НЕ является отношением эквивалентности (нет транзитивности)
- is_approx_less НЕ задаёт strict weak order
"""

from dataclasses import dataclass

from src.core.domain.fps import Frequency
from src.core.math.tolerance import (
    FPS_APPROX_EQUAL_THRESHOLD_HZ,
    FPS_QUOTIENT_EPSILON,
    ceil_ratio,
    is_within_threshold,
)


def is_strictly_less(lhs: Frequency, rhs: Frequency) -> bool:
    """Точное сравнение: lhs.value < rhs.value."""
    return lhs.value < rhs.value


def is_approx_equal(
    lhs: Frequency,
    rhs: Frequency,
    threshold: float = FPS_APPROX_EQUAL_THRESHOLD_HZ,
) -> bool:
    """
    Приблизительное равенство: abs(lhs.value - rhs.value) < threshold.

    Рефлексивно и симметрично, но не транзитивно. Два invalid экземпляра
    равны (оба value == 0).

    Args:
        lhs: Первая частота
        rhs: Вторая частота
        threshold: Абсолютный порог в Hz (default: 0.001)

    Raises:
        ValueError: Если threshold невалиден
    """
    return is_within_threshold(lhs.value, rhs.value, threshold)


def is_approx_less(
    lhs: Frequency,
    rhs: Frequency,
    threshold: float = FPS_APPROX_EQUAL_THRESHOLD_HZ,
) -> bool:
    """Строго меньше и не приблизительно равно."""
    return is_strictly_less(lhs, rhs) and not is_approx_equal(lhs, rhs, threshold)


def approx_quotient(lhs: Frequency, rhs: Frequency) -> int:
    """
    Сколько периодов rhs помещается в один период lhs.

    ceil(lhs / rhs - 0.00001): 120/60 → 2, 90/60 → 2, 60/60 → 1.

    Raises:
        ZeroDivisionError: Если rhs invalid (value == 0)
    """
    return ceil_ratio(lhs.value, rhs.value, FPS_QUOTIENT_EPSILON)


@dataclass(frozen=True)
class FpsApproxEqual:
    """
    Предикат приблизительного равенства частот.

    Для передачи в алгоритмы, ожидающие binary predicate:

        same = FpsApproxEqual()
        any(same(fps, candidate) for candidate in supported)
    """

    threshold: float = FPS_APPROX_EQUAL_THRESHOLD_HZ

    def __call__(self, lhs: Frequency, rhs: Frequency) -> bool:
        return is_approx_equal(lhs, rhs, self.threshold)
