"""
FpsRange / FpsRanges — Диапазоны частот

Immutable Pydantic модели:
- FpsRange: включительный интервал [min, max] частот
- FpsRanges: пара physical (режим дисплея) + render (частота свапа кадров)

Все проверки включения используют приблизительные сравнения.
Порядок min <= max не проверяется — за корректность отвечает вызывающий код.
"""

import sys

from pydantic import BaseModel, Field

from src.core.domain.fps import Frequency
from src.core.domain.fps_compare import is_approx_less


def _fps_max() -> Frequency:
    return Frequency.from_value(sys.float_info.max)


# =============================================================================
# FPS RANGE
# =============================================================================


class FpsRange(BaseModel):
    """
    Диапазон частот [min, max].

    По умолчанию — неограниченный: от invalid (0 Hz) до максимальной
    представимой частоты.
    """

    min: Frequency = Field(default_factory=Frequency, description="Нижняя граница")
    max: Frequency = Field(default_factory=_fps_max, description="Верхняя граница")

    model_config = {"frozen": True}

    def includes(self, item: "Frequency | FpsRange") -> bool:
        """
        Проверка включения частоты или диапазона.

        - Frequency: min <= fps <= max (приблизительно)
        - FpsRange: min <= other.min и max >= other.max (приблизительно)

        Raises:
            TypeError: Если item не Frequency и не FpsRange
        """
        if isinstance(item, Frequency):
            return not is_approx_less(item, self.min) and not is_approx_less(self.max, item)

        if isinstance(item, FpsRange):
            return not is_approx_less(item.min, self.min) and not is_approx_less(
                self.max, item.max
            )

        raise TypeError(f"FpsRange.includes expects Frequency or FpsRange, got {type(item).__name__}")

    def __str__(self) -> str:
        return f"[{self.min}, {self.max}]"


# =============================================================================
# FPS RANGES
# =============================================================================


class FpsRanges(BaseModel):
    """
    Пара диапазонов physical / render.

    valid() проверяет, что render не превышает то, что выдерживает режим
    дисплея. При создании инвариант не проверяется.
    """

    # Диапазон частот обновления режима дисплея
    physical: FpsRange = Field(default_factory=FpsRange)

    # Диапазон частот рендеринга (частота свапа кадров)
    render: FpsRange = Field(default_factory=FpsRange)

    model_config = {"frozen": True}

    def valid(self) -> bool:
        """physical.max >= render.max (приблизительно)."""
        return not is_approx_less(self.physical.max, self.render.max)

    def __str__(self) -> str:
        return f"{{physical={self.physical}, render={self.render}}}"
