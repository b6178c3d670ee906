"""Domain layer - coordinate parsing and polygon containment."""

from geo_polygon.domain.contracts import CoordinateContainer
from geo_polygon.domain.errors import GeoError, InvalidArgumentTypeError, InvalidFormatError
from geo_polygon.domain.models import (
    ContainmentResult,
    Coordinate,
    CoordinateCollection,
    NamedPolygon,
    Point,
    Polygon,
)

__all__ = [
    "ContainmentResult",
    "Coordinate",
    "CoordinateCollection",
    "CoordinateContainer",
    "GeoError",
    "InvalidArgumentTypeError",
    "InvalidFormatError",
    "NamedPolygon",
    "Point",
    "Polygon",
]
