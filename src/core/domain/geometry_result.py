"""
GeometryResult — типизированный результат геометрического запроса

Позволяет отличить "наклон действительно равен 0" от "наклон не
определён": значение сопровождается outcome. Сообщения диагностики
совпадают с текстом, который lenient-режим выводит в stdout.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from src.core.errors import (
    DegenerateGeometryError,
    DegenerateTriangleError,
    UndefinedSlopeError,
)

# =============================================================================
# ДИАГНОСТИЧЕСКИЕ СООБЩЕНИЯ
# =============================================================================

UNDEFINED_SLOPE_MESSAGE: Final[str] = "Undefined slope for vertical line."

ZERO_AREA_RADIUS_MESSAGE: Final[str] = "Area of the triangle is 0. Unable to find the radius."

# Значение, возвращаемое вместо неопределённого результата
DEGENERATE_SENTINEL: Final[float] = 0.0


# =============================================================================
# ENUMS
# =============================================================================


class GeometryOutcome(str, Enum):
    """Исход геометрического запроса"""

    OK = "ok"
    UNDEFINED_SLOPE = "undefined_slope"
    DEGENERATE_TRIANGLE = "degenerate_triangle"

    @property
    def message(self) -> str:
        """Диагностическое сообщение (пустое для OK)"""
        return _MESSAGES[self]


_MESSAGES: Final[dict[GeometryOutcome, str]] = {
    GeometryOutcome.OK: "",
    GeometryOutcome.UNDEFINED_SLOPE: UNDEFINED_SLOPE_MESSAGE,
    GeometryOutcome.DEGENERATE_TRIANGLE: ZERO_AREA_RADIUS_MESSAGE,
}

_ERRORS: Final[dict[GeometryOutcome, type[DegenerateGeometryError]]] = {
    GeometryOutcome.UNDEFINED_SLOPE: UndefinedSlopeError,
    GeometryOutcome.DEGENERATE_TRIANGLE: DegenerateTriangleError,
}


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class GeometryResult:
    """Результат запроса: значение + исход."""

    value: float
    outcome: GeometryOutcome = GeometryOutcome.OK

    # Для отладки
    details: str = ""

    @classmethod
    def success(cls, value: float, details: str = "") -> "GeometryResult":
        return cls(value=value, outcome=GeometryOutcome.OK, details=details)

    @classmethod
    def degenerate(cls, outcome: GeometryOutcome, details: str = "") -> "GeometryResult":
        """Вырожденный исход со значением-sentinel (0.0)"""
        if outcome is GeometryOutcome.OK:
            raise ValueError("degenerate() requires a non-OK outcome")
        return cls(value=DEGENERATE_SENTINEL, outcome=outcome, details=details)

    @property
    def ok(self) -> bool:
        return self.outcome is GeometryOutcome.OK

    @property
    def message(self) -> str:
        return self.outcome.message

    def unwrap(self) -> float:
        """
        Значение для OK, иначе исключение.

        Raises:
            UndefinedSlopeError: outcome == UNDEFINED_SLOPE
            DegenerateTriangleError: outcome == DEGENERATE_TRIANGLE
        """
        if self.ok:
            return self.value
        raise self.to_error()

    def value_or(self, fallback: float) -> float:
        return self.value if self.ok else fallback

    def to_error(self) -> DegenerateGeometryError:
        """Исключение, соответствующее вырожденному исходу"""
        if self.ok:
            raise ValueError("OK result has no matching error")
        return _ERRORS[self.outcome](self.message, self.outcome, self.value)
