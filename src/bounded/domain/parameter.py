"""
ParameterSpec — Декларативное описание параметров

Immutable Pydantic модели, описывающие параметры (например, параметры
управления аудио-движка) как данные: имя, базовый тип, границы, значение
по умолчанию, режим wrap и вид границ (статические или динамические).

Из описания строится ограниченное значение:

    spec = ParameterSpec(name="cutoff", kind="int", min_value=0, max_value=127, default=64)
    cutoff = spec.build()        # StaticBounded[int, 0, 127](64)

    specs = ParameterSetSpec.from_mapping({
        "cutoff": {"kind": "int", "min_value": 0, "max_value": 127, "default": 64},
        "phase": {"min_value": 0.0, "max_value": 1.0, "default": 0.0, "wrap": True},
    })
    values = specs.build({"phase": 1.25})

Описание строже, чем значения: инвертированные границы и нецелые границы
для kind="int" отвергаются (ValidationError), тогда как значение по
умолчанию вне диапазона молча ограничивается при build().
"""

import logging
import math
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from src.bounded.domain.base import BoundedValue
from src.bounded.domain.dynamic_bounded import DynamicBounded
from src.bounded.domain.static_bounded import StaticBounded

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class NumericKind(str, Enum):
    """Базовый тип параметра"""

    INT = "int"
    FLOAT = "float"

    @property
    def numeric_type(self) -> type:
        return int if self is NumericKind.INT else float


# =============================================================================
# PARAMETER SPEC
# =============================================================================


class ParameterSpec(BaseModel):
    """
    Описание одного ограниченного параметра.

    Immutable модель (frozen=True): изменение описания создаёт новый экземпляр.
    """

    name: str = Field(..., min_length=1, description="Имя параметра")
    kind: NumericKind = Field(NumericKind.FLOAT, description="Базовый тип (int/float)")
    min_value: int | float = Field(..., description="Нижняя граница")
    max_value: int | float = Field(..., description="Верхняя граница (>= min_value)")
    default: int | float = Field(..., description="Начальное значение")
    wrap: bool = Field(False, description="Циклическое ограничение вместо clamp")
    dynamic: bool = Field(False, description="Границы изменяемы во время выполнения")

    model_config = {"frozen": True}

    @field_validator("min_value", "max_value", "default")
    @classmethod
    def validate_finite(cls, v: int | float) -> int | float:
        if not math.isfinite(v):
            raise ValueError(f"value must be finite, got {v}")
        return v

    @model_validator(mode="after")
    def validate_bounds(self) -> "ParameterSpec":
        """
        Проверка согласованности границ.

        - min_value <= max_value
        - для kind="int" границы и default — целые числа
        """
        if self.min_value > self.max_value:
            raise ValueError(
                f"min_value {self.min_value} exceeds max_value {self.max_value} "
                f"for parameter '{self.name}'"
            )

        if self.kind is NumericKind.INT:
            for label in ("min_value", "max_value", "default"):
                v = getattr(self, label)
                if isinstance(v, float) and not v.is_integer():
                    raise ValueError(
                        f"{label} {v} is not an integer for int parameter '{self.name}'"
                    )

        return self

    def static_type(self) -> type[StaticBounded]:
        """Статический ограниченный тип для этих границ (кэшируется)."""
        numeric_type = self.kind.numeric_type
        return StaticBounded[
            numeric_type,
            numeric_type(self.min_value),
            numeric_type(self.max_value),
            self.wrap,
        ]

    def dynamic_type(self) -> type[DynamicBounded]:
        """Динамический ограниченный тип с базовым типом и режимом wrap параметра."""
        return DynamicBounded[self.kind.numeric_type, self.wrap]

    def build(self, value: Optional[Any] = None) -> BoundedValue:
        """
        Создание ограниченного значения.

        Args:
            value: Начальное значение (default если None)

        Returns:
            StaticBounded или DynamicBounded (если dynamic=True)
        """
        initial = self.default if value is None else value

        if self.dynamic:
            return self.dynamic_type()(initial, self.min_value, self.max_value)
        return self.static_type()(initial)


# =============================================================================
# PARAMETER SET SPEC
# =============================================================================


class ParameterSetSpec(BaseModel):
    """
    Набор описаний параметров с уникальными именами.
    """

    parameters: list[ParameterSpec] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("parameters")
    @classmethod
    def validate_unique_names(cls, v: list[ParameterSpec]) -> list[ParameterSpec]:
        seen: set[str] = set()
        for spec in v:
            if spec.name in seen:
                raise ValueError(f"duplicate parameter name '{spec.name}'")
            seen.add(spec.name)
        return v

    @classmethod
    def from_mapping(cls, data: Mapping[str, Mapping[str, Any]]) -> "ParameterSetSpec":
        """
        Загрузка из словаря {имя: поля ParameterSpec без name}.

        Raises:
            ValidationError: Если описание параметра некорректно
        """
        return cls(parameters=[{"name": name, **fields} for name, fields in data.items()])

    @property
    def names(self) -> list[str]:
        return [spec.name for spec in self.parameters]

    def get(self, name: str) -> ParameterSpec:
        """
        Raises:
            KeyError: Если параметр не описан
        """
        for spec in self.parameters:
            if spec.name == name:
                return spec
        raise KeyError(f"Unknown parameter: {name}")

    def build(self, overrides: Optional[Mapping[str, Any]] = None) -> dict[str, BoundedValue]:
        """
        Создание ограниченных значений всех параметров.

        Args:
            overrides: Начальные значения вместо default (по имени)

        Returns:
            {имя: ограниченное значение} в порядке описания

        Raises:
            KeyError: Если overrides содержит неописанный параметр
        """
        overrides = dict(overrides or {})
        unknown = set(overrides) - set(self.names)
        if unknown:
            raise KeyError(f"Unknown parameter(s): {', '.join(sorted(unknown))}")

        values = {spec.name: spec.build(overrides.get(spec.name)) for spec in self.parameters}
        logger.debug("Built %d bounded parameters", len(values))
        return values
