"""
Domain models and value objects.

Contains the Coordinate value type and the typed geometry result.
"""

from src.core.domain.coordinate import (
    Coordinate,
    add,
    add_assign,
    equals,
    format_component,
    subtract,
    subtract_assign,
)
from src.core.domain.geometry_result import (
    DEGENERATE_SENTINEL,
    UNDEFINED_SLOPE_MESSAGE,
    ZERO_AREA_RADIUS_MESSAGE,
    GeometryOutcome,
    GeometryResult,
)

__all__ = [
    # Coordinate model
    "Coordinate",
    "add",
    "add_assign",
    "subtract",
    "subtract_assign",
    "equals",
    "format_component",
    # Geometry result
    "DEGENERATE_SENTINEL",
    "UNDEFINED_SLOPE_MESSAGE",
    "ZERO_AREA_RADIUS_MESSAGE",
    "GeometryOutcome",
    "GeometryResult",
]
