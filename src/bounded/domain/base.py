"""
BoundedValue — Общее поведение ограниченных значений

Базовый класс для StaticBounded и DynamicBounded. Наследник обязан
предоставить атрибуты numeric_type, wrap, min и max (атрибуты класса или
свойства экземпляра).

Границы применяются только при присваивании: значение ведёт себя как
базовый числовой тип во всём остальном, т.е. результат a + b — обычное
число, которое может лежать вне [min, max].

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Хранимое значение всегда в [min, max]
2. Составные операции (+=, -=, *=, /=, //=, increment, decrement):
   сырой результат в арифметике базового типа → алгоритм ограничения
3. Чтение (value, get(), int(), float()) не применяет ограничение повторно
4. Экземпляры изменяемы и поэтому нехэшируемы
5. Деление на ноль для непрерывного типа даёт ±inf (0/0 → NaN) как в IEEE 754,
   затем алгоритм ограничения: clamp → ближайшая граница, wrap/NaN → min.
   Для дискретного типа деление на ноль поднимает ZeroDivisionError
"""

import logging
import math
from typing import Any, ClassVar

from src.bounded.math.enforcement import enforce_bounds, normalize_in_range
from src.bounded.math.numerical_safeguards import (
    is_discrete_type,
    is_nan,
    is_numeric_value,
    is_valid_number,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BoundsDefinitionError(ValueError):
    """
    Некорректное определение ограниченного типа или границ.

    Возникает при определении типа (инвертированные или нечисловые границы,
    неподдерживаемый базовый тип), но никогда при присваивании значения:
    значения вне диапазона исправляются молча.
    """

    pass


def coerce_bound(numeric_type: type, label: str, bound: Any) -> Any:
    """
    Приведение границы к базовому типу.

    Args:
        numeric_type: Базовый тип ограниченного значения
        label: Имя границы для сообщения об ошибке ("min"/"max")
        bound: Число или ограниченное значение

    Returns:
        Граница типа numeric_type

    Raises:
        BoundsDefinitionError: Если граница не конечное число или не
            представима в numeric_type без потерь (0.5 для int)
    """
    if isinstance(bound, BoundedValue):
        bound = bound.value
    if not is_numeric_value(bound) or not is_valid_number(bound):
        raise BoundsDefinitionError(f"{label} must be a finite number, got {bound!r}")
    coerced = numeric_type(bound)
    if coerced != bound:
        raise BoundsDefinitionError(
            f"{label} {bound!r} is not representable as {numeric_type.__name__}"
        )
    return coerced


# =============================================================================
# BOUNDED VALUE
# =============================================================================


class BoundedValue:
    """
    Числовое значение, ограниченное диапазоном [min, max] при каждой записи.

    Арифметика:
        - Бинарные операторы (+, -, *, /, //, %, унарные) возвращают сырое
          значение базового типа
        - Операторы in-place и именованные методы изменяют значение
          и возвращают self
        - post_increment/post_decrement возвращают предыдущее значение
    """

    __slots__ = ("_value",)

    numeric_type: ClassVar[type]
    wrap: ClassVar[bool] = False

    # Переопределяются наследником (атрибуты класса или свойства)
    min: Any
    max: Any

    # Изменяемый тип с __eq__
    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Запись
    # -------------------------------------------------------------------------

    @classmethod
    def _coerce(cls, raw: Any) -> Any:
        """Приведение к базовому типу; NaN/inf остаются как есть для алгоритма."""
        if isinstance(raw, BoundedValue):
            raw = raw._value
        if not is_numeric_value(raw):
            raise TypeError(
                f"{cls.__name__} accepts numeric values only, got {type(raw).__name__}"
            )
        if isinstance(raw, cls.numeric_type) or not is_valid_number(raw):
            return raw
        return cls.numeric_type(raw)

    def _assign(self, raw: Any) -> None:
        self._value = enforce_bounds(
            self._coerce(raw),
            self.min,
            self.max,
            wrap=self.wrap,
            discrete=is_discrete_type(self.numeric_type),
        )

    @property
    def value(self) -> Any:
        """Хранимое значение базового типа."""
        return self._value

    @value.setter
    def value(self, raw: Any) -> None:
        self._assign(raw)

    def get(self) -> Any:
        return self._value

    def set(self, raw: Any) -> None:
        """Присваивание с применением алгоритма ограничения."""
        self._assign(raw)

    def normalize(self) -> float:
        """
        Позиция значения в диапазоне по шкале [0, 1].

        Для диапазона нулевой длины (min == max) возвращает 0.0.
        """
        return normalize_in_range(self._value, self.min, self.max)

    # -------------------------------------------------------------------------
    # Составные операции
    # -------------------------------------------------------------------------

    def _operand(self, other: Any) -> Any:
        return self._coerce(other)

    def add(self, other: Any) -> "BoundedValue":
        self._assign(self._value + self._operand(other))
        return self

    def subtract(self, other: Any) -> "BoundedValue":
        self._assign(self._value - self._operand(other))
        return self

    def multiply(self, other: Any) -> "BoundedValue":
        self._assign(self._value * self._operand(other))
        return self

    def divide(self, other: Any) -> "BoundedValue":
        """
        Деление с последующим ограничением.

        Для дискретного типа деление целочисленное с усечением к нулю
        (как у целых чисел фиксированной ширины): -7 / 2 → -3.

        Для непрерывного типа деление на ноль даёт ±inf или NaN,
        которые затем ограничиваются (clamp → граница, wrap → min).

        Raises:
            ZeroDivisionError: При делении на ноль для дискретного типа
        """
        divisor = self._operand(other)
        discrete = is_discrete_type(self.numeric_type)
        if not discrete and divisor == 0:
            self._assign(self._divided_by_zero(divisor))
        elif discrete and is_valid_number(divisor):
            self._assign(_truncating_div(self._value, divisor))
        else:
            self._assign(self._value / divisor)
        return self

    def floor_divide(self, other: Any) -> "BoundedValue":
        divisor = self._operand(other)
        if not is_discrete_type(self.numeric_type) and divisor == 0:
            self._assign(self._divided_by_zero(divisor))
        else:
            self._assign(self._value // divisor)
        return self

    def _divided_by_zero(self, divisor: Any) -> float:
        """Результат IEEE 754 для value / ±0: знаковая бесконечность или NaN."""
        logger.debug("%s divided by zero at value=%r", type(self).__name__, self._value)
        if self._value == 0 or is_nan(self._value):
            return math.nan
        sign = math.copysign(1.0, float(self._value)) * math.copysign(1.0, float(divisor))
        return math.copysign(math.inf, sign)

    def increment(self) -> "BoundedValue":
        """Префиксный инкремент: +1 с ограничением, возвращает self."""
        return self.add(1)

    def decrement(self) -> "BoundedValue":
        """Префиксный декремент: -1 с ограничением, возвращает self."""
        return self.subtract(1)

    def post_increment(self) -> Any:
        """Постфиксный инкремент: возвращает значение до изменения."""
        previous = self._value
        self.add(1)
        return previous

    def post_decrement(self) -> Any:
        """Постфиксный декремент: возвращает значение до изменения."""
        previous = self._value
        self.subtract(1)
        return previous

    __iadd__ = add
    __isub__ = subtract
    __imul__ = multiply
    __itruediv__ = divide
    __ifloordiv__ = floor_divide

    # -------------------------------------------------------------------------
    # Чтение как базовый тип
    # -------------------------------------------------------------------------

    def __int__(self) -> int:
        return int(self._value)

    def __float__(self) -> float:
        return float(self._value)

    def __index__(self) -> int:
        if not is_discrete_type(self.numeric_type):
            raise TypeError(f"{type(self).__name__} is not an integral type")
        return int(self._value)

    def __bool__(self) -> bool:
        return bool(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __format__(self, format_spec: str) -> str:
        return format(self._value, format_spec)

    # -------------------------------------------------------------------------
    # Бинарная арифметика: результат — сырое значение
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> Any:
        other = _raw(other)
        return NotImplemented if other is NotImplemented else self._value + other

    def __radd__(self, other: Any) -> Any:
        other = _raw(other)
        return NotImplemented if other is NotImplemented else other + self._value

    def __sub__(self, other: Any) -> Any:
        other = _raw(other)
        return NotImplemented if other is NotImplemented else self._value - other

    def __rsub__(self, other: Any) -> Any:
        other = _raw(other)
        return NotImplemented if other is NotImplemented else other - self._value

    def __mul__(self, other: Any) -> Any:
        other = _raw(other)
        return NotImplemented if other is NotImplemented else self._value * other

    def __rmul__(self, other: Any) -> Any:
        other = _raw(other)
        return NotImplemented if other is NotImplemented else other * self._value

    def __truediv__(self, other: Any) -> Any:
        other = _raw(other)
        return NotImplemented if other is NotImplemented else self._value / other

    def __rtruediv__(self, other: Any) -> Any:
        other = _raw(other)
        return NotImplemented if other is NotImplemented else other / self._value

    def __floordiv__(self, other: Any) -> Any:
        other = _raw(other)
        return NotImplemented if other is NotImplemented else self._value // other

    def __rfloordiv__(self, other: Any) -> Any:
        other = _raw(other)
        return NotImplemented if other is NotImplemented else other // self._value

    def __neg__(self) -> Any:
        return -self._value

    def __pos__(self) -> Any:
        return +self._value

    def __abs__(self) -> Any:
        return abs(self._value)

    # -------------------------------------------------------------------------
    # Сравнение порядка
    # -------------------------------------------------------------------------

    def __lt__(self, other: Any) -> bool:
        other = _raw(other)
        return NotImplemented if other is NotImplemented else self._value < other

    def __le__(self, other: Any) -> bool:
        other = _raw(other)
        return NotImplemented if other is NotImplemented else self._value <= other

    def __gt__(self, other: Any) -> bool:
        other = _raw(other)
        return NotImplemented if other is NotImplemented else self._value > other

    def __ge__(self, other: Any) -> bool:
        other = _raw(other)
        return NotImplemented if other is NotImplemented else self._value >= other


def _raw(other: Any) -> Any:
    if isinstance(other, BoundedValue):
        return other._value
    if is_numeric_value(other):
        return other
    return NotImplemented


def _truncating_div(dividend: int, divisor: int) -> int:
    # // округляет вниз; для отрицательного частного сдвигаем к нулю
    quotient = dividend // divisor
    if quotient < 0 and quotient * divisor != dividend:
        quotient += 1
    return quotient
