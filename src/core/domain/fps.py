"""
Frequency — Частота кадров/обновления дисплея (Fps)

Immutable Pydantic модель: частота в Hz вместе с периодом в наносекундах.
Оба представления хранятся, чтобы не пересчитывать их и чтобы
from_value(x).get_value() == x выполнялось бит-в-бит.

Конверсия частота → период → частота НЕ обратима точно (период округляется),
поэтому стандартный == сравнивает точно, а приблизительные сравнения
вынесены в fps_compare / fps_approx_ops и требуют явного выбора:

    fps = hz(60)
    assert approx(fps) == Frequency.from_period_nanos(16_666_667)
"""

import math
from typing import NewType

from pydantic import BaseModel, Field, model_validator

from src.core.math.tolerance import (
    NSECS_MAX,
    frequency_to_period_nanos,
    period_nanos_to_frequency,
    round_half_away,
    saturate_nanos,
)

# Период в наносекундах
Nanoseconds = NewType("Nanoseconds", int)


# =============================================================================
# FREQUENCY MODEL
# =============================================================================


class Frequency(BaseModel):
    """
    Частота (Fps) с производным периодом.

    Invalid (нулевой) экземпляр: value == 0 и period_ns == 0.
    Frequency() — invalid.

    Экземпляры создаются фабриками from_value / from_period_nanos, которые
    никогда не бросают исключений: неположительный вход даёт invalid.
    """

    value: float = Field(default=0.0, ge=0, description="Частота (Hz)")
    period_ns: int = Field(default=0, ge=0, le=NSECS_MAX, description="Период (ns)")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_invalid_has_no_period(self) -> "Frequency":
        """Нулевая частота не может иметь ненулевой период."""
        if self.value == 0 and self.period_ns != 0:
            raise ValueError(
                f"invalid frequency must have zero period, got period_ns={self.period_ns}"
            )
        return self

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def from_value(cls, frequency: float) -> "Frequency":
        """
        Создание из частоты (Hz).

        period_ns = round(1e9 / frequency). Неположительная или
        неконечная (NaN/Inf) частота даёт invalid экземпляр.

        Examples:
            >>> Frequency.from_value(60).get_period_nanos()
            16666667
            >>> Frequency.from_value(-1).is_valid()
            False
        """
        if not (frequency > 0 and math.isfinite(frequency)):
            return cls()
        return cls(value=frequency, period_ns=frequency_to_period_nanos(frequency))

    @classmethod
    def from_period_nanos(cls, period: int) -> "Frequency":
        """
        Создание из периода (ns).

        value = 1e9 / period. Неположительный период даёт invalid экземпляр.
        Периоды больше NSECS_MAX насыщаются до NSECS_MAX.
        """
        if period <= 0:
            return cls()
        period = saturate_nanos(period)
        return cls(value=period_nanos_to_frequency(period), period_ns=period)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def is_valid(self) -> bool:
        return self.value > 0

    def get_value(self) -> float:
        return self.value

    def get_int_value(self) -> int:
        """Частота, округлённая до ближайшего целого (половины — вверх)."""
        return round_half_away(self.value)

    def get_period(self) -> Nanoseconds:
        return Nanoseconds(self.period_ns)

    def get_period_nanos(self) -> int:
        return self.period_ns

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __truediv__(self, divisor: int) -> "Frequency":
        """
        Точное деление частоты на целый делитель через период.

        hz(120) / 2 == Frequency.from_period_nanos(2 * hz(120).period_ns)

        Делитель 0 (или отрицательный) даёт invalid экземпляр.
        Деление на Frequency доступно только через approx().
        """
        if isinstance(divisor, bool) or not isinstance(divisor, int):
            return NotImplemented
        return Frequency.from_period_nanos(self.period_ns * divisor)

    def __str__(self) -> str:
        return f"{self.value:.2f} Hz"


def hz(frequency: float) -> Frequency:
    """
    Литерал частоты: hz(60) — то же, что Frequency.from_value(60).

    Args:
        frequency: Частота в Hz (int или float)

    Returns:
        Frequency (invalid для frequency <= 0)
    """
    return Frequency.from_value(float(frequency))
