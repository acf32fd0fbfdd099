"""
DynamicBounded — Значение с границами, изменяемыми во время выполнения

Границы хранятся в экземпляре и могут меняться после создания. Базовый тип
и режим wrap фиксированы на уровне типа:

    Gain = DynamicBounded[float]          # тот же класс, что и DynamicBounded
    Hue = DynamicBounded[float, True]
    Step = DynamicBounded[int, True]

    gain = Gain(0.5, 0.0, 1.0)
    gain.max = 2.0

ПОЛИТИКА ИЗМЕНЕНИЯ ГРАНИЦ:
1. Конструктор: при min > max верхняя граница поднимается до min,
   затем значение ограничивается получившимся диапазоном
2. Сеттер min применяется только если new_min <= max, иначе молча игнорируется
   (сеттер max симметричен); инвариант min <= max не нарушается никогда
3. Успешное изменение границы сразу применяет алгоритм ограничения
   к хранимому значению: значение всегда в [min, max]
"""

import logging
import types
from functools import lru_cache
from typing import Any, ClassVar

from src.bounded.domain.base import BoundedValue, BoundsDefinitionError, coerce_bound
from src.bounded.math.enforcement import correct_bounds
from src.bounded.math.numerical_safeguards import is_numeric_type, is_numeric_value

logger = logging.getLogger(__name__)


class DynamicBounded(BoundedValue):
    """
    Ограниченное значение с границами экземпляра.

    По умолчанию базовый тип float и режим clamp. Равенство требует
    совпадения значения и обеих границ.
    """

    __slots__ = ("_min", "_max")

    numeric_type: ClassVar[type] = float
    wrap: ClassVar[bool] = False

    def __init_subclass__(
        cls,
        numeric_type: type | None = None,
        wrap: bool | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)

        numeric_type = cls.numeric_type if numeric_type is None else numeric_type
        wrap = cls.wrap if wrap is None else wrap
        _validate_definition(numeric_type, wrap)
        cls.numeric_type = numeric_type
        cls.wrap = wrap

    def __class_getitem__(cls, params: Any) -> type["DynamicBounded"]:
        if not isinstance(params, tuple):
            params = (params,)
        if len(params) not in (1, 2):
            raise BoundsDefinitionError(
                f"DynamicBounded expects [numeric_type] or [numeric_type, wrap], got {params!r}"
            )
        numeric_type, *rest = params
        wrap = rest[0] if rest else False
        _validate_definition(numeric_type, wrap)
        return _dynamic_type(numeric_type, wrap)

    def __init__(self, value: Any, min_value: Any, max_value: Any) -> None:
        low = coerce_bound(self.numeric_type, "min", min_value)
        high = coerce_bound(self.numeric_type, "max", max_value)
        self._min, self._max = correct_bounds(low, high)
        self._assign(value)

    # -------------------------------------------------------------------------
    # Границы
    # -------------------------------------------------------------------------

    @property
    def min(self) -> Any:
        return self._min

    @min.setter
    def min(self, new_min: Any) -> None:
        candidate = self._bound_candidate(new_min)
        if candidate is None or not candidate <= self._max:
            logger.debug("Rejected min=%r for max=%r", new_min, self._max)
            return
        self._min = candidate
        self._assign(self._value)

    @property
    def max(self) -> Any:
        return self._max

    @max.setter
    def max(self, new_max: Any) -> None:
        candidate = self._bound_candidate(new_max)
        if candidate is None or not self._min <= candidate:
            logger.debug("Rejected max=%r for min=%r", new_max, self._min)
            return
        self._max = candidate
        self._assign(self._value)

    @classmethod
    def _bound_candidate(cls, bound: Any) -> Any:
        """Граница базового типа или None, если значение не может быть границей."""
        try:
            return coerce_bound(cls.numeric_type, "bound", bound)
        except BoundsDefinitionError:
            return None

    # -------------------------------------------------------------------------
    # Равенство и представление
    # -------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if (
            isinstance(other, DynamicBounded)
            and other.numeric_type is self.numeric_type
            and other.wrap == self.wrap
        ):
            return (
                self._value == other._value
                and self._min == other._min
                and self._max == other._max
            )
        if isinstance(other, BoundedValue):
            return False
        if is_numeric_value(other):
            return self._value == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r}, min={self._min!r}, max={self._max!r})"


@lru_cache(maxsize=None, typed=True)
def _dynamic_type(numeric_type: type, wrap: bool = False) -> type[DynamicBounded]:
    if numeric_type is DynamicBounded.numeric_type and wrap is DynamicBounded.wrap:
        return DynamicBounded

    name = f"DynamicBounded[{getattr(numeric_type, '__name__', numeric_type)}"
    name += ", wrap]" if wrap else "]"

    def body(namespace: dict[str, Any]) -> None:
        namespace["__slots__"] = ()
        namespace["__module__"] = __name__

    return types.new_class(
        name,
        (DynamicBounded,),
        {"numeric_type": numeric_type, "wrap": wrap},
        body,
    )


def _validate_definition(numeric_type: Any, wrap: Any) -> None:
    """
    Raises:
        BoundsDefinitionError: Если тип не числовой или wrap не bool
    """
    if not is_numeric_type(numeric_type):
        raise BoundsDefinitionError(
            f"numeric_type must be an ordered numeric type, got {numeric_type!r}"
        )
    if not isinstance(wrap, bool):
        raise BoundsDefinitionError(f"wrap must be bool, got {wrap!r}")
