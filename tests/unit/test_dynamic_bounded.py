"""
Тесты для DynamicBounded

Проверяет:
1. Создание с границами и коррекцию инвертированных границ
2. Сеттеры границ: no-op при нарушении min <= max
3. Немедленное ограничение значения при изменении границ
4. Clamp и wrap с границами экземпляра
5. Равенство: значение и обе границы
6. Определение типов (базовый тип и wrap на уровне типа)
"""

import logging
from decimal import Decimal

import pytest

from src.bounded.domain import BoundsDefinitionError, DynamicBounded, StaticBounded

IntBounded = DynamicBounded[int]
Step = DynamicBounded[int, True]
Hue = DynamicBounded[float, True]


# =============================================================================
# СОЗДАНИЕ
# =============================================================================


class TestConstruction:
    """Тесты создания"""

    def test_defaults_to_float_clamp(self) -> None:
        gain = DynamicBounded(0.5, 0.0, 1.0)
        assert gain.value == 0.5
        assert gain.min == 0.0
        assert gain.max == 1.0
        assert DynamicBounded.numeric_type is float
        assert DynamicBounded.wrap is False

    def test_value_clamped_on_construction(self) -> None:
        assert IntBounded(50, 0, 10).value == 10
        assert IntBounded(-50, 0, 10).value == 0

    def test_value_wrapped_on_construction(self) -> None:
        assert Step(200, 0, 127).value == 72
        assert Step(-10, 0, 127).value == 118

    def test_inverted_bounds_corrected(self) -> None:
        """min > max: max поднимается до min, значение ограничивается"""
        value = IntBounded(5, 10, 0)
        assert (value.min, value.max) == (10, 10)
        assert value.value == 10

    def test_inverted_bounds_corrected_float(self) -> None:
        value = DynamicBounded(5, 10, 0)
        assert (value.min, value.max) == (10.0, 10.0)
        assert value.value == 10.0

    def test_bounds_coerced_to_numeric_type(self) -> None:
        value = DynamicBounded(1, 0, 2)
        assert isinstance(value.min, float)
        assert isinstance(value.value, float)

    def test_no_default_construction(self) -> None:
        with pytest.raises(TypeError):
            DynamicBounded()  # type: ignore[call-arg]
        with pytest.raises(TypeError):
            DynamicBounded(1.0)  # type: ignore[call-arg]

    @pytest.mark.parametrize("bad_bound", [float("nan"), float("inf"), "a", None])
    def test_invalid_bound_rejected(self, bad_bound: object) -> None:
        with pytest.raises(BoundsDefinitionError, match="finite number"):
            DynamicBounded(0.0, bad_bound, 1.0)

    def test_bounds_from_bounded_values(self) -> None:
        value = IntBounded(5, StaticBounded[int, 0, 10](2), StaticBounded[int, 0, 10](8))
        assert (value.min, value.max) == (2, 8)

    def test_non_representable_bound_rejected(self) -> None:
        """Как и у StaticBounded: 0.5 не является границей int"""
        with pytest.raises(BoundsDefinitionError, match="not representable"):
            IntBounded(5, 0.5, 10)
        assert IntBounded(5, 0.0, 10.0).min == 0


# =============================================================================
# ГРАНИЦЫ
# =============================================================================


class TestBoundSetters:
    """Тесты сеттеров границ"""

    def test_min_setter_noop_when_above_max(self) -> None:
        value = IntBounded(5, 0, 10)
        value.min = 15
        assert (value.min, value.max) == (0, 10)
        assert value.value == 5

    def test_max_setter_noop_when_below_min(self) -> None:
        value = IntBounded(5, 0, 10)
        value.max = -1
        assert (value.min, value.max) == (0, 10)
        assert value.value == 5

    def test_equal_bounds_allowed(self) -> None:
        value = IntBounded(5, 0, 10)
        value.min = 10
        assert (value.min, value.max) == (10, 10)
        assert value.value == 10

    def test_min_setter_reclamps_value(self) -> None:
        """Изменение границы сразу ограничивает хранимое значение"""
        value = IntBounded(5, 0, 10)
        value.min = 7
        assert value.min == 7
        assert value.value == 7

    def test_max_setter_reclamps_value(self) -> None:
        value = DynamicBounded(0.9, 0.0, 1.0)
        value.max = 0.5
        assert value.max == 0.5
        assert value.value == 0.5

    def test_widening_keeps_value(self) -> None:
        value = IntBounded(5, 0, 10)
        value.max = 100
        value.min = -100
        assert value.value == 5

    def test_bound_change_rewraps_value(self) -> None:
        """В режиме wrap значение переносится в новый диапазон"""
        step = Step(100, 0, 127)
        step.max = 63
        assert step.value == 36

    @pytest.mark.parametrize("bad_bound", [float("nan"), float("inf"), "x", None])
    def test_invalid_bound_ignored(self, bad_bound: object) -> None:
        value = DynamicBounded(0.5, 0.0, 1.0)
        value.min = bad_bound
        value.max = bad_bound
        assert (value.min, value.max) == (0.0, 1.0)

    def test_rejected_setter_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        value = IntBounded(5, 0, 10)
        with caplog.at_level(logging.DEBUG, logger="src.bounded.domain.dynamic_bounded"):
            value.min = 15
        assert "Rejected min" in caplog.text

    def test_non_representable_bound_ignored(self) -> None:
        value = IntBounded(5, 0, 10)
        value.max = 7.5
        assert value.max == 10
        value.max = 7.0
        assert value.max == 7

    def test_invariants_hold_through_mutation_sequence(self) -> None:
        value = IntBounded(0, -5, 5)
        for step, bound in enumerate([3, -8, 12, 4, -2, 20, -20, 7, 0, 15]):
            if step % 2:
                value.max = bound
            else:
                value.min = bound
            value += bound
            assert value.min <= value.max
            assert value.min <= value.value <= value.max


# =============================================================================
# ПРИСВАИВАНИЕ И ОПЕРАЦИИ
# =============================================================================


class TestAssignmentAndOperations:
    """Тесты присваивания и составных операций"""

    def test_clamp_assignment(self) -> None:
        value = IntBounded(0, 0, 127)
        value.value = 200
        assert value.value == 127

    def test_wrap_assignment(self) -> None:
        step = Step(0, 0, 127)
        step.value = 200
        assert step.value == 72
        step.value = -10
        assert step.value == 118

    def test_compound_clamp(self) -> None:
        gain = DynamicBounded(0.5, 0.0, 1.0)
        gain += 0.75
        assert gain.value == 1.0
        gain -= 2
        assert gain.value == 0.0
        gain.increment()
        assert gain.value == 1.0

    def test_compound_wrap_float(self) -> None:
        hue = Hue(350.0, 0.0, 360.0)
        hue += 20
        assert hue.value == pytest.approx(10.0)
        hue -= 30
        assert hue.value == pytest.approx(340.0)

    def test_postfix(self) -> None:
        step = Step(127, 0, 127)
        assert step.post_increment() == 127
        assert step.value == 0
        assert step.post_decrement() == 0
        assert step.value == 127

    def test_float_divide_by_zero_clamps(self) -> None:
        gain = DynamicBounded(1.0, 0.0, 2.0)
        gain /= 0.0
        assert gain.value == 2.0
        gain.value = 0.0
        gain /= 0.0
        assert gain.value == 0.0

    def test_float_divide_by_zero_wraps_to_min(self) -> None:
        hue = Hue(90.0, 10.0, 360.0)
        hue /= 0
        assert hue.value == 10.0

    def test_integral_divide_by_zero_raises(self) -> None:
        value = IntBounded(5, 0, 10)
        with pytest.raises(ZeroDivisionError):
            value /= 0
        assert value.value == 5

    def test_decimal_type(self) -> None:
        DecimalBounded = DynamicBounded[Decimal]
        value = DecimalBounded(Decimal("0.5"), Decimal("0"), Decimal("1"))
        value += Decimal("0.7")
        assert value.value == Decimal("1")


class TestNormalize:
    """Тесты normalize()"""

    def test_fraction_of_range(self) -> None:
        assert DynamicBounded(2.5, 0.0, 10.0).normalize() == 0.25

    def test_follows_bound_changes(self) -> None:
        value = DynamicBounded(5.0, 0.0, 10.0)
        value.max = 20.0
        assert value.normalize() == 0.25

    def test_zero_range_policy(self) -> None:
        assert DynamicBounded(3.0, 3.0, 3.0).normalize() == 0.0


# =============================================================================
# РАВЕНСТВО И ТИПЫ
# =============================================================================


class TestEquality:
    """Тесты равенства"""

    def test_equal_value_and_bounds(self) -> None:
        assert IntBounded(5, 0, 10) == IntBounded(5, 0, 10)

    def test_different_bounds_unequal(self) -> None:
        assert IntBounded(5, 0, 10) != IntBounded(5, 0, 20)
        assert IntBounded(5, 0, 10) != IntBounded(5, -1, 10)

    def test_different_values_unequal(self) -> None:
        assert IntBounded(5, 0, 10) != IntBounded(6, 0, 10)

    def test_different_types_unequal(self) -> None:
        assert IntBounded(5, 0, 10) != DynamicBounded(5, 0, 10)
        assert IntBounded(5, 0, 10) != Step(5, 0, 10)

    def test_default_type_equals_float_subscription(self) -> None:
        """DynamicBounded и DynamicBounded[float] — одинаковые значения и границы"""
        assert DynamicBounded[float] is DynamicBounded
        assert DynamicBounded(1.0, 0.0, 2.0) == DynamicBounded[float, False](1.0, 0.0, 2.0)

    def test_keyword_subclass_with_same_semantics_equal(self) -> None:
        class Level(DynamicBounded, numeric_type=int):
            pass

        assert Level(5, 0, 10) == IntBounded(5, 0, 10)
        assert Level(5, 0, 10) != Step(5, 0, 10)

    def test_raw_number_comparison(self) -> None:
        assert IntBounded(5, 0, 10) == 5

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(IntBounded(5, 0, 10))

    def test_repr(self) -> None:
        assert repr(IntBounded(5, 0, 10)) == "DynamicBounded[int](5, min=0, max=10)"


class TestTypeDefinition:
    """Тесты определения динамических типов"""

    def test_subscription_is_cached(self) -> None:
        assert DynamicBounded[int] is IntBounded
        assert DynamicBounded[int, False] is IntBounded
        assert DynamicBounded[int, True] is Step

    def test_subclass_with_keywords(self) -> None:
        class Pan(DynamicBounded, numeric_type=float, wrap=False):
            pass

        pan = Pan(2.0, -1.0, 1.0)
        assert pan.value == 1.0

    def test_non_numeric_type_rejected(self) -> None:
        with pytest.raises(BoundsDefinitionError, match="numeric_type"):
            DynamicBounded[str]

    def test_non_bool_wrap_rejected(self) -> None:
        with pytest.raises(BoundsDefinitionError, match="wrap must be bool"):
            DynamicBounded[int, "yes"]

    def test_wrong_parameter_count_rejected(self) -> None:
        with pytest.raises(BoundsDefinitionError, match="expects"):
            DynamicBounded[int, True, 3]

    def test_integer_wrap_rejected_after_bool_cached(self) -> None:
        assert DynamicBounded[int, True] is Step
        with pytest.raises(BoundsDefinitionError, match="wrap must be bool"):
            DynamicBounded[int, 1]
        with pytest.raises(BoundsDefinitionError, match="wrap must be bool"):
            DynamicBounded[float, 0]
