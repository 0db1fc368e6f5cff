"""
Тесты для FpsRange / FpsRanges

Проверяет:
1. Диапазон по умолчанию (неограниченный)
2. includes(Frequency) и includes(FpsRange) с приблизительными границами
3. FpsRanges.valid()
4. Immutability и точное равенство
5. Строковое представление
"""

import sys

import pytest
from pydantic import ValidationError

from src.core.domain import Frequency, FpsRange, FpsRanges, hz


@pytest.fixture
def range_30_90() -> FpsRange:
    """Диапазон [30 Hz, 90 Hz]"""
    return FpsRange(min=hz(30), max=hz(90))


# =============================================================================
# FPS RANGE
# =============================================================================


class TestFpsRangeDefaults:
    """Тесты диапазона по умолчанию"""

    def test_default_bounds(self) -> None:
        """От invalid до максимальной представимой частоты"""
        fps_range = FpsRange()
        assert fps_range.min == Frequency()
        assert fps_range.max.get_value() == sys.float_info.max
        assert fps_range.max.is_valid()

    def test_default_includes_everything(self) -> None:
        """Неограниченный диапазон включает любую частоту"""
        fps_range = FpsRange()
        assert fps_range.includes(Frequency())
        assert fps_range.includes(hz(60))
        assert fps_range.includes(hz(1e9))

    def test_default_includes_any_range(self, range_30_90: FpsRange) -> None:
        """Неограниченный диапазон включает любой диапазон"""
        assert FpsRange().includes(range_30_90)
        assert FpsRange().includes(FpsRange())


class TestFpsRangeIncludesFrequency:
    """Тесты для FpsRange.includes(Frequency)"""

    def test_inside(self, range_30_90: FpsRange) -> None:
        """Частота внутри диапазона"""
        assert range_30_90.includes(hz(60))

    def test_bounds_inclusive(self, range_30_90: FpsRange) -> None:
        """Границы включены"""
        assert range_30_90.includes(hz(30))
        assert range_30_90.includes(hz(90))

    def test_bounds_within_tolerance(self, range_30_90: FpsRange) -> None:
        """Частота в пределах порога от границы включена"""
        assert range_30_90.includes(hz(29.9999))
        assert range_30_90.includes(hz(90.0005))
        assert range_30_90.includes(Frequency.from_period_nanos(11_111_111))

    def test_outside(self, range_30_90: FpsRange) -> None:
        """Частота вне диапазона"""
        assert not range_30_90.includes(hz(10))
        assert not range_30_90.includes(hz(29.99))
        assert not range_30_90.includes(hz(91))
        assert not range_30_90.includes(Frequency())


class TestFpsRangeIncludesRange:
    """Тесты для FpsRange.includes(FpsRange)"""

    def test_nested(self, range_30_90: FpsRange) -> None:
        """Вложенный диапазон"""
        assert range_30_90.includes(FpsRange(min=hz(40), max=hz(80)))

    def test_self(self, range_30_90: FpsRange) -> None:
        """Диапазон включает сам себя"""
        assert range_30_90.includes(range_30_90)

    def test_min_below(self, range_30_90: FpsRange) -> None:
        """Нижняя граница выходит за пределы"""
        assert not range_30_90.includes(FpsRange(min=hz(20), max=hz(90)))

    def test_max_above(self, range_30_90: FpsRange) -> None:
        """Верхняя граница выходит за пределы"""
        assert not range_30_90.includes(FpsRange(min=hz(30), max=hz(120)))

    def test_bounds_within_tolerance(self, range_30_90: FpsRange) -> None:
        """Границы, полученные из периодов, считаются совпадающими"""
        derived = FpsRange(
            min=Frequency.from_period_nanos(33_333_333),
            max=Frequency.from_period_nanos(11_111_111),
        )
        assert range_30_90.includes(derived)
        assert derived.includes(range_30_90)


class TestFpsRangeModel:
    """Тесты Pydantic-модели FpsRange"""

    def test_unsupported_item_raises(self, range_30_90: FpsRange) -> None:
        """includes принимает только Frequency или FpsRange"""
        with pytest.raises(TypeError, match="expects Frequency or FpsRange"):
            range_30_90.includes(60.0)  # type: ignore[arg-type]

    def test_ordering_not_enforced(self) -> None:
        """min > max допустим, но ничего не включает"""
        inverted = FpsRange(min=hz(90), max=hz(30))
        assert not inverted.includes(hz(60))

    def test_immutable(self, range_30_90: FpsRange) -> None:
        """FpsRange должен быть immutable (frozen=True)"""
        with pytest.raises(ValidationError):
            range_30_90.min = hz(24)  # type: ignore

    def test_exact_equality(self, range_30_90: FpsRange) -> None:
        """Стандартное равенство — точное"""
        assert range_30_90 == FpsRange(min=hz(30), max=hz(90))
        assert range_30_90 != FpsRange(
            min=Frequency.from_period_nanos(33_333_333),
            max=Frequency.from_period_nanos(11_111_111),
        )

    def test_str(self, range_30_90: FpsRange) -> None:
        """Формат '[min, max]'"""
        assert str(range_30_90) == "[30.00 Hz, 90.00 Hz]"


# =============================================================================
# FPS RANGES
# =============================================================================


class TestFpsRanges:
    """Тесты для FpsRanges"""

    def test_default_valid(self) -> None:
        """Оба диапазона неограничены → valid"""
        ranges = FpsRanges()
        assert ranges.valid()
        assert ranges.physical == FpsRange()
        assert ranges.render == FpsRange()

    def test_equal_max_valid(self) -> None:
        """physical.max == render.max → valid"""
        ranges = FpsRanges(physical=FpsRange(max=hz(120)), render=FpsRange(max=hz(120)))
        assert ranges.valid()

    def test_render_below_physical_valid(self) -> None:
        """render.max < physical.max → valid"""
        ranges = FpsRanges(physical=FpsRange(max=hz(120)), render=FpsRange(max=hz(60)))
        assert ranges.valid()

    def test_render_above_physical_invalid(self) -> None:
        """render.max > physical.max → invalid"""
        ranges = FpsRanges(physical=FpsRange(max=hz(60)), render=FpsRange(max=hz(120)))
        assert not ranges.valid()

    def test_render_above_within_tolerance_valid(self) -> None:
        """Превышение в пределах порога допустимо"""
        ranges = FpsRanges(
            physical=FpsRange(max=Frequency.from_period_nanos(8_333_334)),
            render=FpsRange(max=hz(120)),
        )
        # 1e9 / 8_333_334 ≈ 119.99999 Hz
        assert ranges.valid()

    def test_not_enforced_at_construction(self) -> None:
        """Невалидная пара создаётся без ошибок"""
        FpsRanges(physical=FpsRange(max=hz(30)), render=FpsRange(max=hz(144)))

    def test_immutable(self) -> None:
        """FpsRanges должен быть immutable (frozen=True)"""
        ranges = FpsRanges()
        with pytest.raises(ValidationError):
            ranges.render = FpsRange(max=hz(60))  # type: ignore

    def test_str(self) -> None:
        """Формат '{physical=..., render=...}'"""
        ranges = FpsRanges(
            physical=FpsRange(min=hz(30), max=hz(120)),
            render=FpsRange(min=hz(30), max=hz(60)),
        )
        assert (
            str(ranges)
            == "{physical=[30.00 Hz, 120.00 Hz], render=[30.00 Hz, 60.00 Hz]}"
        )
