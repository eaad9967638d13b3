"""Geometry — запросы над координатами, конфигурация и диагностика.

- queries: чистые функции (distance, manhattan_distance, slope,
  triangle_area, circumradius)
- calculator: фасад CoordinateGeometry (lenient / strict)
- reporting: вывод диагностики (stdout / logging / null)
"""

from .calculator import CoordinateGeometry
from .config import ArithmeticPolicy, GeometryConfig
from .queries import (
    circumradius,
    coordinate_difference,
    distance,
    manhattan_distance,
    slope,
    triangle_area,
)
from .reporting import (
    ConsoleReporter,
    DiagnosticReporter,
    LoggingReporter,
    NullReporter,
)

__all__ = [
    "CoordinateGeometry",
    "ArithmeticPolicy",
    "GeometryConfig",
    "circumradius",
    "coordinate_difference",
    "distance",
    "manhattan_distance",
    "slope",
    "triangle_area",
    "ConsoleReporter",
    "DiagnosticReporter",
    "LoggingReporter",
    "NullReporter",
]
