"""
Bound Enforcement — Алгоритм ограничения значения при присваивании

Общий примитив для StaticBounded и DynamicBounded: по кандидату v и тройке
(min, max, wrap) вычисляет хранимое значение.

АЛГОРИТМ:
    wrap == False:
        stored = clamp(v, min, max)
    wrap == True:
        min <= v <= max → stored = v (границы сохраняются точно)
        иначе:
            length = max - min (+1 для дискретного типа: [0, 127] — 128 значений)
            stored = min + floor_mod(v - min, length)

ВЫРОЖДЕННЫЕ СЛУЧАИ:
- max == min, clamp: результат min
- max == min, wrap: length == 0 для непрерывного типа → результат min
  (деление на ноль не выполняется); для дискретного length == 1 → min
- NaN → min (в обоих режимах)
- ±inf в режиме wrap → min (нет позиции на цикле); в режиме clamp → граница

normalize_in_range при max == min возвращает 0.0.
"""

import logging
from typing import Any, Final

from src.bounded.math.modulo import floor_mod
from src.bounded.math.numerical_safeguards import (
    clamp,
    is_nan,
    is_valid_number,
    safe_divide,
)

logger = logging.getLogger(__name__)

# Результат normalize_in_range для диапазона нулевой длины
ZERO_RANGE_NORMALIZED: Final[float] = 0.0


def wrap_length(low: Any, high: Any, discrete: bool) -> Any:
    """
    Длина цикла для режима wrap.

    Для дискретного типа замкнутый диапазон [low, high] содержит
    high - low + 1 значений, поэтому длина увеличивается на единицу.

    Examples:
        >>> wrap_length(0, 127, discrete=True)
        128
        >>> wrap_length(0.0, 1.0, discrete=False)
        1.0
    """
    length = high - low
    if discrete:
        length += 1
    return length


def enforce_bounds(value: Any, low: Any, high: Any, wrap: bool, discrete: bool) -> Any:
    """
    Хранимое значение для кандидата value в диапазоне [low, high].

    Args:
        value: Кандидат (результат присваивания или составной операции)
        low: Нижняя граница (low <= high)
        high: Верхняя граница
        wrap: True — циклическое ограничение, False — clamp
        discrete: True для целочисленного базового типа

    Returns:
        Значение в [low, high]

    Examples:
        >>> enforce_bounds(200, 0, 127, wrap=False, discrete=True)
        127
        >>> enforce_bounds(200, 0, 127, wrap=True, discrete=True)
        72
        >>> enforce_bounds(-10, 0, 127, wrap=True, discrete=True)
        118
    """
    if is_nan(value):
        logger.debug("NaN candidate replaced with lower bound %s", low)
        return low

    if not wrap:
        return clamp(value, low, high)

    if low <= value <= high:
        return value

    if not is_valid_number(value):
        logger.debug("Non-finite candidate %s wrapped to lower bound %s", value, low)
        return low

    length = wrap_length(low, high, discrete)
    if not length > 0:
        return low

    wrapped = low + floor_mod(value - low, length)
    # low + remainder может округлиться за high для float
    return clamp(wrapped, low, high)


def normalize_in_range(value: Any, low: Any, high: Any) -> float:
    """
    Позиция значения в диапазоне по шкале [0, 1].

    Args:
        value: Значение в [low, high]
        low: Нижняя граница
        high: Верхняя граница

    Returns:
        (value - low) / (high - low) как float; ZERO_RANGE_NORMALIZED при high == low

    Examples:
        >>> normalize_in_range(64, 0, 128)
        0.5
        >>> normalize_in_range(3, 3, 3)
        0.0
    """
    return safe_divide(value - low, high - low, fallback=ZERO_RANGE_NORMALIZED)


def correct_bounds(low: Any, high: Any) -> tuple[Any, Any]:
    """
    Коррекция инвертированных границ: при low > high верхняя граница
    поднимается до нижней.

    Examples:
        >>> correct_bounds(10, 0)
        (10, 10)
        >>> correct_bounds(0, 10)
        (0, 10)
    """
    if low > high:
        logger.debug("Inverted bounds (%s, %s): max raised to min", low, high)
        return low, low
    return low, high
