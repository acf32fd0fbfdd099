"""
Domain models: ограниченные значения и описания параметров.
"""

from src.bounded.domain.base import BoundedValue, BoundsDefinitionError
from src.bounded.domain.dynamic_bounded import DynamicBounded
from src.bounded.domain.parameter import NumericKind, ParameterSetSpec, ParameterSpec
from src.bounded.domain.static_bounded import StaticBounded

__all__ = [
    # Base
    "BoundedValue",
    "BoundsDefinitionError",
    # Bounded values
    "StaticBounded",
    "DynamicBounded",
    # Parameter specs
    "NumericKind",
    "ParameterSpec",
    "ParameterSetSpec",
]
