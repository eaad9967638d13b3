"""
Geometry Queries — чистые геометрические функции над координатами

Функции не выводят сообщений и не поднимают исключений для вырожденной
геометрии: неопределённый наклон и нулевая площадь возвращаются как
GeometryResult с outcome != OK и значением-sentinel 0.0.

ФОРМУЛЫ:
    (dx, dy) = A - B
    distance           = sqrt(dx² + dy²)
    manhattan_distance = |dx| + |dy|
    slope              = dy / dx                       (dx == 0 → UNDEFINED_SLOPE)
    triangle_area      = |A.x(B.y-C.y) + B.x(C.y-A.y) + C.x(A.y-B.y)| / 2
                         (любые две точки совпадают → 0)
    circumradius       = |AB| × |BC| × |CA| / 4 / area (area == 0 → DEGENERATE_TRIANGLE)

Все операнды должны иметь одинаковый numeric_type.
"""

from typing import Final

from src.core.domain.coordinate import Coordinate, equals, require_same_type
from src.core.domain.geometry_result import GeometryOutcome, GeometryResult
from src.core.geometry.config import ArithmeticPolicy
from src.core.math.numeric_types import Number, NumericType, absolute, trunc_div
from src.core.math.numerical_safeguards import is_zero, validate_non_negative
from src.core.math.sqrt_strategies import EXACT_SQRT, SqrtStrategy

# Целые типы уже этой разрядности продвигаются до int в LEGACY-выражениях
LEGACY_PROMOTION_BITS: Final[int] = 32


# =============================================================================
# РАЗНОСТИ
# =============================================================================


def legacy_expression(value: Number, numeric_type: NumericType) -> Number:
    """
    Значение промежуточного выражения в LEGACY-арифметике.

    Целые T уже 32 бит продвигаются до int: выражение (частное, удвоенная
    площадь, сумма модулей) не заворачивается в T. Для 32/64-битных целых
    и float типов выражение вычисляется в T.

    Examples:
        >>> legacy_expression(128, NumericType.INT8)
        128
        >>> legacy_expression(2**32 - 12 + 2**32, NumericType.UINT32)
        4294967284
    """
    if numeric_type.is_integral and numeric_type.bits < LEGACY_PROMOTION_BITS:
        return value
    return numeric_type.convert(value)


def coordinate_difference(
    a: Coordinate,
    b: Coordinate,
    policy: ArithmeticPolicy = ArithmeticPolicy.EXACT,
) -> tuple[Number, Number]:
    """
    Разность A - B по компонентам.

    EXACT: без переполнения (UINT16: (0,0) - (3,4) → (-3, -4)).
    LEGACY: в представлении T (UINT16: (0,0) - (3,4) → (65533, 65532)).

    Raises:
        NumericTypeMismatchError: разные numeric_type
    """
    if policy is ArithmeticPolicy.LEGACY:
        diff = a - b
        return diff.x, diff.y

    require_same_type(a, b)
    return a.x - b.x, a.y - b.y


# =============================================================================
# РАССТОЯНИЯ
# =============================================================================


def distance(
    a: Coordinate,
    b: Coordinate,
    sqrt_strategy: SqrtStrategy = EXACT_SQRT,
    policy: ArithmeticPolicy = ArithmeticPolicy.EXACT,
) -> float:
    """
    Евклидово расстояние sqrt(dx² + dy²).

    Сумма квадратов накапливается в неограниченной арифметике в обоих
    режимах; в LEGACY сами dx, dy уже завёрнуты в T.

    Examples:
        >>> distance(Coordinate(0, 0), Coordinate(3, 4))
        5.0
    """
    dx, dy = coordinate_difference(a, b, policy)
    return sqrt_strategy.sqrt(float(dx * dx + dy * dy))


def manhattan_distance(
    a: Coordinate,
    b: Coordinate,
    policy: ArithmeticPolicy = ArithmeticPolicy.EXACT,
) -> float:
    """
    Манхэттенское расстояние |dx| + |dy|.

    В LEGACY модуль берётся через absolute() в представлении T, т.е. для
    беззнаковых типов завёрнутая разность остаётся как есть. Сумма
    32/64-битных модулей заворачивается в T.
    """
    dx, dy = coordinate_difference(a, b, policy)

    if policy is ArithmeticPolicy.LEGACY:
        numeric_type = a.numeric_type
        total = absolute(dx, numeric_type) + absolute(dy, numeric_type)
        return float(legacy_expression(total, numeric_type))

    return float(abs(dx) + abs(dy))


# =============================================================================
# НАКЛОН
# =============================================================================


def slope(
    a: Coordinate,
    b: Coordinate,
    policy: ArithmeticPolicy = ArithmeticPolicy.EXACT,
) -> GeometryResult:
    """
    Наклон отрезка AB: dy / dx.

    Args:
        a: Первая точка
        b: Вторая точка
        policy: EXACT → true division; LEGACY → для целых T деление с
            усечением к нулю (частное 32/64-битных T заворачивается в T)

    Returns:
        GeometryResult:
            - OK со значением наклона
            - UNDEFINED_SLOPE со значением 0.0 если dx == 0

    Examples:
        >>> slope(Coordinate(0, 0), Coordinate(0, 5)).outcome.value
        'undefined_slope'
    """
    dx, dy = coordinate_difference(a, b, policy)

    if dx == 0:
        return GeometryResult.degenerate(
            GeometryOutcome.UNDEFINED_SLOPE,
            details=f"vertical line through {a} and {b}",
        )

    if policy is ArithmeticPolicy.LEGACY:
        numeric_type = a.numeric_type
        if numeric_type.is_integral:
            value = legacy_expression(trunc_div(dy, dx), numeric_type)
        else:
            value = numeric_type.convert(dy / dx)
        return GeometryResult.success(float(value))

    return GeometryResult.success(dy / dx)


# =============================================================================
# ТРЕУГОЛЬНИК
# =============================================================================


def triangle_area(
    a: Coordinate,
    b: Coordinate,
    c: Coordinate,
    policy: ArithmeticPolicy = ArithmeticPolicy.EXACT,
) -> float:
    """
    Площадь треугольника ABC (формула шнурования), неотрицательная.

    Если любые две точки совпадают, возвращается 0 без отдельного сигнала.
    Коллинеарные различные точки дают 0 естественным образом.

    LEGACY для целых T: удвоенная площадь (завёрнутая в T для 32/64 бит)
    делится на 2 с усечением, затем конвертируется в T и проходит
    absolute() в T. Для беззнаковых T отрицательная ориентация даёт
    завёрнутое значение (65530 вместо 6 для UINT16, 2147483642 для UINT32).
    """
    if equals(a, b) or equals(a, c) or equals(b, c):
        return 0.0

    if policy is ArithmeticPolicy.LEGACY:
        numeric_type = a.numeric_type
        bc = b - c
        ca = c - a
        ab = a - b
        doubled = a.x * bc.y + b.x * ca.y + c.x * ab.y
        if numeric_type.is_integral:
            half = trunc_div(legacy_expression(doubled, numeric_type), 2)
        else:
            half = doubled / 2
        return float(absolute(numeric_type.convert(half), numeric_type))

    require_same_type(a, b)
    require_same_type(a, c)
    doubled = a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y)
    return abs(doubled) / 2


def circumradius(
    a: Coordinate,
    b: Coordinate,
    c: Coordinate,
    sqrt_strategy: SqrtStrategy = EXACT_SQRT,
    policy: ArithmeticPolicy = ArithmeticPolicy.EXACT,
    tolerance: float = 0.0,
) -> GeometryResult:
    """
    Радиус окружности, проходящей через A, B, C.

    R = |AB| × |BC| × |CA| / (4 × area)

    Args:
        a, b, c: Вершины треугольника
        sqrt_strategy: Стратегия sqrt для длин сторон
        policy: Политика арифметики (для площади и длин)
        tolerance: |area| <= tolerance считается нулевой (default: 0.0, точно)

    Returns:
        GeometryResult:
            - OK с радиусом
            - DEGENERATE_TRIANGLE со значением 0.0 если площадь нулевая

    Raises:
        ValueError: tolerance < 0 или NaN/Inf
    """
    validate_non_negative(tolerance, "tolerance")

    area = triangle_area(a, b, c, policy)

    if is_zero(area, tolerance):
        return GeometryResult.degenerate(
            GeometryOutcome.DEGENERATE_TRIANGLE,
            details=f"triangle {a}, {b}, {c} has area {area}",
        )

    ab = distance(a, b, sqrt_strategy, policy)
    bc = distance(b, c, sqrt_strategy, policy)
    ca = distance(c, a, sqrt_strategy, policy)

    return GeometryResult.success(ab * bc * ca / 4 / area)
