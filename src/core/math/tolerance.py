"""
Tolerance — Float-примитивы для частот и периодов

Модуль содержит численные примитивы, на которых построен тип Frequency:
- Конверсия частота ↔ период (наносекунды) с насыщением в int64
- Округление half-away-from-zero (как std::round)
- Сравнение float с фиксированным абсолютным порогом
- Целочисленное отношение частот с epsilon-смещением вниз

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Конверсии тотальны: ни одна не бросает исключение на числовом входе
2. Период всегда в диапазоне [0, NSECS_MAX]
3. Абсолютный порог не масштабируется с величиной (известное ограничение)
"""

import math
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Наносекунд в секунде (int, чтобы деление на большие периоды было точным)
NANOS_PER_SECOND: Final[int] = 1_000_000_000

# Максимальный период в наносекундах (int64, как nsecs_t)
NSECS_MAX: Final[int] = 2**63 - 1

# Порог приблизительного равенства частот (Hz)
# TODO: заменить на сравнение по ULP-расстоянию, когда пороги будут пересмотрены
FPS_APPROX_EQUAL_THRESHOLD_HZ: Final[float] = 0.001

# Смещение вниз для целочисленного отношения частот
# Гасит шум float сразу над целой границей (60/60 → 1, не 2)
FPS_QUOTIENT_EPSILON: Final[float] = 0.00001


# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def validate_threshold(threshold: float, name: str = "threshold") -> None:
    """
    Валидация порога сравнения.

    Args:
        threshold: Порог (должен быть конечным и положительным)
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если порог <= 0 или NaN/Inf
    """
    if not math.isfinite(threshold):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {threshold}")

    if threshold <= 0:
        raise ValueError(f"{name} must be positive, got {threshold}")


# =============================================================================
# КОНВЕРСИЯ ЧАСТОТА ↔ ПЕРИОД
# =============================================================================


def round_half_away(value: float) -> int:
    """
    Округление до ближайшего целого, половины — от нуля.

    В отличие от встроенного round() (banker's rounding):
        >>> round_half_away(60.5)
        61
        >>> round_half_away(-0.5)
        -1

    Для NaN/Inf возвращает 0 (значение вне целочисленной области).
    """
    if not math.isfinite(value):
        return 0

    if value >= 0:
        return math.floor(value + 0.5)
    return math.ceil(value - 0.5)


def saturate_nanos(nanos: int) -> int:
    """Ограничение периода диапазоном [0, NSECS_MAX]."""
    return max(0, min(nanos, NSECS_MAX))


def frequency_to_period_nanos(frequency: float) -> int:
    """
    Конверсия: частота (Hz) → период (ns).

    period = round(1e9 / frequency), с насыщением в NSECS_MAX.

    Args:
        frequency: Частота в Hz

    Returns:
        Период в наносекундах; 0 для неположительной частоты или NaN

    Examples:
        >>> frequency_to_period_nanos(60.0)
        16666667
        >>> frequency_to_period_nanos(0.0)
        0
    """
    if not frequency > 0:
        return 0

    period = NANOS_PER_SECOND / frequency

    # Субнормальные частоты дают period = inf
    if math.isinf(period):
        return NSECS_MAX

    return saturate_nanos(round_half_away(period))


def period_nanos_to_frequency(period: int) -> float:
    """
    Конверсия: период (ns) → частота (Hz).

    frequency = 1e9 / period

    Args:
        period: Период в наносекундах

    Returns:
        Частота в Hz; 0.0 для неположительного периода
    """
    if period <= 0:
        return 0.0

    return NANOS_PER_SECOND / period


# =============================================================================
# СРАВНЕНИЯ С АБСОЛЮТНЫМ ПОРОГОМ
# =============================================================================


def is_within_threshold(
    a: float,
    b: float,
    threshold: float = FPS_APPROX_EQUAL_THRESHOLD_HZ,
) -> bool:
    """
    Строгое сравнение разности с абсолютным порогом: abs(a - b) < threshold.

    Не является отношением эквивалентности: из a≈b и b≈c не следует a≈c.

    Args:
        a: Первое значение
        b: Второе значение
        threshold: Абсолютный порог (default: FPS_APPROX_EQUAL_THRESHOLD_HZ)

    Returns:
        True если значения отличаются меньше, чем на threshold

    Raises:
        ValueError: Если threshold невалиден
    """
    validate_threshold(threshold)
    return abs(a - b) < threshold


def ceil_ratio(
    numerator: float,
    denominator: float,
    eps: float = FPS_QUOTIENT_EPSILON,
) -> int:
    """
    Целочисленное отношение с округлением вверх и смещением вниз на eps.

    ceil(numerator / denominator - eps)

    Examples:
        >>> ceil_ratio(90.0, 60.0)
        2
        >>> ceil_ratio(60.0, 60.0)
        1

    Raises:
        ZeroDivisionError: Если denominator == 0
        ValueError: Если eps невалиден
    """
    validate_threshold(eps, name="eps")
    return math.ceil(numerator / denominator - eps)
