"""
Modulo — Знаково-корректный остаток от деления

Модуль предоставляет floor_mod: остаток, который всегда лежит в [0, length)
независимо от знака делимого.

Встроенные операции дают разные результаты для отрицательного делимого:
- math.fmod и Decimal.__mod__ усекают к нулю: fmod(-10, 128) == -10
- int.__mod__ и float.__mod__ округляют вниз, но float % может вернуть
  ровно length для крошечных отрицательных значений (-1e-20 % 1.0 == 1.0)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Для любого length > 0: 0 <= floor_mod(x, length) < length
2. Тип результата совпадает с типом операндов (int остаётся int)
3. length <= 0 — ошибка программиста (ValueError), а не silent fallback
"""

import math
from decimal import Decimal
from fractions import Fraction
from numbers import Integral
from typing import TypeVar

N = TypeVar("N", int, float, Fraction, Decimal)


def floor_mod(dividend: N, length: N) -> N:
    """
    Знаково-корректный остаток: результат всегда в [0, length).

    Args:
        dividend: Делимое любого знака
        length: Длина цикла (строго положительная)

    Returns:
        Остаток в [0, length)

    Raises:
        ValueError: Если length <= 0 или один из операндов не является
            конечным числом (NaN, ±inf)

    Examples:
        >>> floor_mod(200, 128)
        72
        >>> floor_mod(-10, 128)
        118
        >>> floor_mod(-0.25, 1.0)
        0.75
    """
    if not _is_finite(length) or not length > 0:
        raise ValueError(f"length must be positive and finite, got {length}")
    if not _is_finite(dividend):
        raise ValueError(f"dividend must be finite, got {dividend}")

    if isinstance(dividend, Integral) and isinstance(length, Integral):
        # Целочисленный % в Python округляет вниз: знак результата = знак делителя
        return dividend % length

    if isinstance(dividend, float) or isinstance(length, float):
        remainder = math.fmod(dividend, length)
        if remainder < 0:
            remainder += length
    else:
        # Fraction, Decimal: точная арифметика, floor без потери точности
        remainder = dividend - length * math.floor(dividend / length)

    # -tiny + length округляется до length
    if remainder >= length:
        remainder -= length

    return remainder


def _is_finite(value: N) -> bool:
    if isinstance(value, Integral):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)
