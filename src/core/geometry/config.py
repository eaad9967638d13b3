"""Конфигурация геометрических запросов."""

from dataclasses import dataclass
from enum import Enum

from src.core.math.numerical_safeguards import validate_non_negative
from src.core.math.sqrt_strategies import SqrtMethod, SqrtStrategy, get_sqrt_strategy


class ArithmeticPolicy(str, Enum):
    """Арифметика промежуточных вычислений.

    EXACT: разности, произведения и деления в неограниченной арифметике
    Python (true division).
    LEGACY: разности вычисляются в представлении T (заворачивание для
    узких целых), наклон и площадь используют целочисленное деление с
    усечением для целых T, площадь конвертируется в T перед absolute.
    """
    EXACT = "exact"
    LEGACY = "legacy"


@dataclass(frozen=True)
class GeometryConfig:
    """Конфигурация CoordinateGeometry.

    - sqrt_method: стратегия квадратного корня (EXACT / FAST)
    - arithmetic: политика промежуточной арифметики
    - strict: True → вырожденная геометрия поднимает исключение,
      False → сообщение через reporter и sentinel 0.0
    - degenerate_tolerance: |area| <= tolerance считается нулевой площадью
    """
    sqrt_method: SqrtMethod = SqrtMethod.EXACT
    arithmetic: ArithmeticPolicy = ArithmeticPolicy.EXACT
    strict: bool = False
    degenerate_tolerance: float = 0.0

    def __post_init__(self) -> None:
        # Допускаем строковые значения ("fast", "legacy")
        object.__setattr__(self, "sqrt_method", SqrtMethod(self.sqrt_method))
        object.__setattr__(self, "arithmetic", ArithmeticPolicy(self.arithmetic))
        validate_non_negative(self.degenerate_tolerance, "degenerate_tolerance")

    @property
    def sqrt_strategy(self) -> SqrtStrategy:
        return get_sqrt_strategy(self.sqrt_method)
