"""CoordinateGeometry — фасад геометрических запросов с политикой вырожденности.

Режимы:
- lenient (default): вырожденный результат → сообщение через reporter
  (по умолчанию строка в stdout) и возврат 0.0
- strict (GeometryConfig(strict=True)): вырожденный результат →
  UndefinedSlopeError / DegenerateTriangleError

Методы *_result возвращают GeometryResult без побочных эффектов в обоих
режимах.
"""

import logging
from typing import Optional

from src.core.domain.coordinate import Coordinate
from src.core.domain.geometry_result import GeometryResult
from src.core.geometry import queries
from src.core.geometry.config import GeometryConfig
from src.core.geometry.reporting import ConsoleReporter, DiagnosticReporter
from src.core.math.numeric_types import Number, NumericType, absolute

logger = logging.getLogger(__name__)


class CoordinateGeometry:
    """Геометрические запросы над Coordinate с настраиваемыми sqrt,
    арифметикой и обработкой вырожденной геометрии.

    Stateless: экземпляр можно разделять между вызовами.
    """

    def __init__(
        self,
        config: Optional[GeometryConfig] = None,
        reporter: Optional[DiagnosticReporter] = None,
    ):
        """
        Args:
            config: конфигурация (default: GeometryConfig())
            reporter: получатель диагностики lenient-режима
                (default: ConsoleReporter → stdout)
        """
        self.config = config or GeometryConfig()
        self.reporter = reporter if reporter is not None else ConsoleReporter()
        self.sqrt_strategy = self.config.sqrt_strategy

    # -------------------------------------------------------------------------
    # Числовые помощники
    # -------------------------------------------------------------------------

    def sqrt(self, value: float) -> float:
        return self.sqrt_strategy.sqrt(value)

    def inv_sqrt(self, value: float) -> float:
        return self.sqrt_strategy.inv_sqrt(value)

    @staticmethod
    def absolute(value: Number, numeric_type: NumericType) -> Number:
        return absolute(value, numeric_type)

    # -------------------------------------------------------------------------
    # Запросы без вырожденных случаев
    # -------------------------------------------------------------------------

    def distance(self, a: Coordinate, b: Coordinate) -> float:
        return queries.distance(a, b, self.sqrt_strategy, self.config.arithmetic)

    def manhattan_distance(self, a: Coordinate, b: Coordinate) -> float:
        return queries.manhattan_distance(a, b, self.config.arithmetic)

    def triangle_area(self, a: Coordinate, b: Coordinate, c: Coordinate) -> float:
        return queries.triangle_area(a, b, c, self.config.arithmetic)

    # -------------------------------------------------------------------------
    # Запросы с вырожденными случаями
    # -------------------------------------------------------------------------

    def slope_result(self, a: Coordinate, b: Coordinate) -> GeometryResult:
        return queries.slope(a, b, self.config.arithmetic)

    def slope(self, a: Coordinate, b: Coordinate) -> float:
        """Наклон AB; вертикальная линия → сообщение и 0.0 (strict: исключение)."""
        return self._resolve(self.slope_result(a, b))

    def circumradius_result(self, a: Coordinate, b: Coordinate, c: Coordinate) -> GeometryResult:
        return queries.circumradius(
            a,
            b,
            c,
            sqrt_strategy=self.sqrt_strategy,
            policy=self.config.arithmetic,
            tolerance=self.config.degenerate_tolerance,
        )

    def circumradius(self, a: Coordinate, b: Coordinate, c: Coordinate) -> float:
        """Радиус описанной окружности; нулевая площадь → сообщение и 0.0
        (strict: исключение)."""
        return self._resolve(self.circumradius_result(a, b, c))

    def _resolve(self, result: GeometryResult) -> float:
        if result.ok:
            return result.value

        logger.debug(
            "Degenerate geometry: outcome=%s details=%s strict=%s",
            result.outcome.value,
            result.details,
            self.config.strict,
        )

        if self.config.strict:
            raise result.to_error()

        self.reporter.report(result)
        return result.value
