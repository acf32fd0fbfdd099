"""
StaticBounded — Значение с границами, фиксированными на уровне типа

Границы (min, max), режим wrap и базовый тип являются атрибутами класса
и не хранятся в экземпляре: два экземпляра одного типа всегда имеют
одинаковые границы, поэтому равенство сводится к сравнению значений.

Один класс на каждую комбинацию (numeric_type, min, max, wrap):

    MidiNote = StaticBounded[int, 0, 127]
    Phase = StaticBounded[float, 0.0, 1.0, True]

    class Velocity(StaticBounded, numeric_type=int, min=0, max=127):
        pass

Подписка кэшируется: StaticBounded[int, 0, 127] is StaticBounded[int, 0, 127].
Некорректные границы отвергаются при определении типа (BoundsDefinitionError),
значения вне диапазона при создании экземпляра исправляются молча.
"""

import types
from functools import lru_cache
from typing import Any, ClassVar

from src.bounded.domain.base import BoundedValue, BoundsDefinitionError, coerce_bound
from src.bounded.math.numerical_safeguards import is_numeric_type, is_numeric_value


class StaticBounded(BoundedValue):
    """
    Ограниченное значение со статическими границами.

    Экземпляр создаётся только с начальным значением: конструктора по
    умолчанию нет. Начальное значение проходит через алгоритм ограничения.
    """

    __slots__ = ()

    min: ClassVar[Any]
    max: ClassVar[Any]

    _parameterized: ClassVar[bool] = False

    def __init_subclass__(
        cls,
        numeric_type: type | None = None,
        min: Any = None,
        max: Any = None,
        wrap: bool | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)

        if numeric_type is None and min is None and max is None and wrap is None:
            # Наследник конкретного типа сохраняет его границы
            return
        if wrap is None:
            wrap = False

        low, high = _validate_definition(numeric_type, min, max, wrap)
        cls.numeric_type = numeric_type
        cls.min = low
        cls.max = high
        cls.wrap = wrap
        cls._parameterized = True

    def __class_getitem__(cls, params: Any) -> type["StaticBounded"]:
        if not isinstance(params, tuple) or len(params) not in (3, 4):
            raise BoundsDefinitionError(
                "StaticBounded expects [numeric_type, min, max] or "
                f"[numeric_type, min, max, wrap], got {params!r}"
            )
        numeric_type, low, high, *rest = params
        wrap = rest[0] if rest else False
        # Ключ кэша: границы, уже приведённые к numeric_type
        low, high = _validate_definition(numeric_type, low, high, wrap)
        return _static_type(numeric_type, low, high, wrap)

    def __init__(self, value: Any) -> None:
        if not self._parameterized:
            raise BoundsDefinitionError(
                f"{type(self).__name__} has no bounds: use StaticBounded[T, min, max] "
                "or subclass with numeric_type/min/max"
            )
        self._assign(value)

    def __eq__(self, other: Any) -> bool:
        if type(other) is type(self):
            return self._value == other._value
        if isinstance(other, BoundedValue):
            return False
        if is_numeric_value(other):
            return self._value == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


@lru_cache(maxsize=None, typed=True)
def _static_type(
    numeric_type: type, min: Any, max: Any, wrap: bool = False
) -> type[StaticBounded]:
    name = f"StaticBounded[{getattr(numeric_type, '__name__', numeric_type)}, {min!r}, {max!r}"
    name += ", wrap]" if wrap else "]"

    def body(namespace: dict[str, Any]) -> None:
        namespace["__slots__"] = ()
        namespace["__module__"] = __name__

    return types.new_class(
        name,
        (StaticBounded,),
        {"numeric_type": numeric_type, "min": min, "max": max, "wrap": wrap},
        body,
    )


def _validate_definition(numeric_type: Any, low: Any, high: Any, wrap: Any) -> tuple[Any, Any]:
    """
    Проверка определения статического типа.

    Returns:
        Границы, приведённые к numeric_type

    Raises:
        BoundsDefinitionError: Если тип не числовой, границы не заданы,
            не конечны, не представимы в numeric_type или min > max
    """
    if not is_numeric_type(numeric_type):
        raise BoundsDefinitionError(f"numeric_type must be an ordered numeric type, got {numeric_type!r}")

    if not isinstance(wrap, bool):
        raise BoundsDefinitionError(f"wrap must be bool, got {wrap!r}")

    low = coerce_bound(numeric_type, "min", low)
    high = coerce_bound(numeric_type, "max", high)
    if low > high:
        raise BoundsDefinitionError(f"min must be <= max, got min={low!r}, max={high!r}")

    return low, high
