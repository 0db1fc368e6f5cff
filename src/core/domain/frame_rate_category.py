"""
FrameRateCategory — Категория частоты кадров слоя

Категории упорядочены по возрастанию требуемой частоты (Default < ... < High),
поэтому enum целочисленный: планировщик сравнивает категории напрямую.
"""

from enum import IntEnum


class FrameRateCategory(IntEnum):
    """Категория частоты кадров слоя"""

    DEFAULT = 0
    NO_PREFERENCE = 1
    LOW = 2
    NORMAL = 3
    HIGH_HINT = 4
    HIGH = 5

    def __str__(self) -> str:
        # HIGH_HINT → "HighHint"
        return "".join(part.capitalize() for part in self.name.split("_"))
