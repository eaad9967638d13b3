"""
Исключения для координат и геометрических запросов.

Вырожденная геометрия (вертикальная линия, треугольник нулевой площади)
по умолчанию не является ошибкой: чистые запросы возвращают
GeometryResult, а исключения поднимаются только в strict-режиме или при
явном GeometryResult.unwrap().
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.core.domain.geometry_result import GeometryOutcome


class GeometryError(Exception):
    """Базовое исключение модуля"""


class NumericTypeMismatchError(GeometryError, TypeError):
    """Арифметика над координатами с разными числовыми представлениями"""


class DegenerateGeometryError(GeometryError):
    """
    Вырожденная геометрия: результат не определён.

    Attributes:
        outcome: GeometryOutcome, описывающий причину
        sentinel: значение, которое lenient-режим вернул бы вместо ошибки
    """

    def __init__(self, message: str, outcome: "GeometryOutcome", sentinel: float = 0.0):
        super().__init__(message)
        self.outcome = outcome
        self.sentinel = sentinel


class UndefinedSlopeError(DegenerateGeometryError):
    """Наклон вертикальной линии (dx == 0) не определён"""


class DegenerateTriangleError(DegenerateGeometryError):
    """Площадь треугольника равна 0, радиус описанной окружности не определён"""
