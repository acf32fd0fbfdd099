"""
Numerical Safeguards — Безопасные примитивы для ограниченных значений

Модуль собирает численные защиты, на которых построен алгоритм ограничения:
- Классификация числовых типов (дискретный/непрерывный)
- NaN/Inf проверки для любых упорядоченных числовых типов
- Clamp в замкнутый диапазон [low, high]
- Безопасное деление с fallback при нулевом знаменателе

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит (возвращается fallback)
2. clamp никогда не возвращает значение вне [low, high] для упорядоченных входов
3. bool не считается числовым типом параметра
"""

import math
from decimal import Decimal
from numbers import Integral, Real
from typing import Any

# =============================================================================
# КЛАССИФИКАЦИЯ ЧИСЛОВЫХ ТИПОВ
# =============================================================================


def is_numeric_type(numeric_type: Any) -> bool:
    """
    Проверка, пригоден ли тип как базовый тип ограниченного значения.

    Допустимы упорядоченные числовые типы: int, float, Fraction, Decimal
    и numpy-скаляры, зарегистрированные в numbers. bool исключён.

    Args:
        numeric_type: Проверяемый тип

    Returns:
        True если тип упорядоченный и числовой
    """
    if not isinstance(numeric_type, type) or issubclass(numeric_type, bool):
        return False
    return issubclass(numeric_type, (Real, Decimal))


def is_discrete_type(numeric_type: type) -> bool:
    """
    Дискретный (целочисленный) тип: диапазон [min, max] содержит
    max - min + 1 различных значений.
    """
    return issubclass(numeric_type, Integral)


def is_numeric_value(value: Any) -> bool:
    """Проверка значения (не типа): bool отвергается так же, как в is_numeric_type."""
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_nan(value: Any) -> bool:
    """
    NaN для любого числового типа.

    Decimal('NaN') не поддерживает math.isnan без потери сигнала,
    поэтому проверяется через is_nan() самого Decimal.
    """
    if isinstance(value, Integral):
        return False
    if isinstance(value, Decimal):
        return value.is_nan()
    return math.isnan(value)


def is_valid_number(value: Any) -> bool:
    """
    Проверка, является ли значение конечным (не NaN, не ±Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    if isinstance(value, Integral):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


# =============================================================================
# CLAMP И БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def clamp(value: Any, low: Any, high: Any) -> Any:
    """
    Ограничение значения замкнутым диапазоном [low, high].

    При low == high результат всегда low. Вызывающая сторона гарантирует
    low <= high.

    Args:
        value: Исходное значение
        low: Нижняя граница
        high: Верхняя граница

    Returns:
        low если value < low, high если value > high, иначе value

    Examples:
        >>> clamp(200, 0, 127)
        127
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(5, 5, 5)
        5
    """
    if value < low:
        return low
    if value > high:
        return high
    return value


def safe_divide(numerator: Any, denominator: Any, fallback: float = 0.0) -> float:
    """
    Деление с результатом float и защитой от нулевого знаменателя.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        fallback: Значение при нулевом знаменателе или невалидном результате

    Returns:
        float(numerator) / float(denominator) или fallback

    Examples:
        >>> safe_divide(64, 128)
        0.5
        >>> safe_divide(0, 0)
        0.0
    """
    if denominator == 0:
        return fallback

    result = float(numerator) / float(denominator)

    if not math.isfinite(result):
        return fallback
    return result
