"""
Math primitives для ограниченных значений

Знаково-корректный modulo, численные защиты и алгоритм ограничения,
общий для статических и динамических границ.
"""

# Modulo
from src.bounded.math.modulo import floor_mod

# Numerical Safeguards
from src.bounded.math.numerical_safeguards import (
    clamp,
    is_discrete_type,
    is_nan,
    is_numeric_type,
    is_numeric_value,
    is_valid_number,
    safe_divide,
)

# Bound Enforcement
from src.bounded.math.enforcement import (
    ZERO_RANGE_NORMALIZED,
    correct_bounds,
    enforce_bounds,
    normalize_in_range,
    wrap_length,
)

__all__ = [
    # Modulo
    "floor_mod",
    # Numerical Safeguards
    "clamp",
    "is_discrete_type",
    "is_nan",
    "is_numeric_type",
    "is_numeric_value",
    "is_valid_number",
    "safe_divide",
    # Bound Enforcement — Constants
    "ZERO_RANGE_NORMALIZED",
    # Bound Enforcement — Functions
    "correct_bounds",
    "enforce_bounds",
    "normalize_in_range",
    "wrap_length",
]
