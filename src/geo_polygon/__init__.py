"""Geographic coordinates parsing and point-in-polygon classification."""

from geo_polygon.domain.errors import GeoError, InvalidArgumentTypeError, InvalidFormatError
from geo_polygon.domain.models import (
    ContainmentResult,
    Coordinate,
    CoordinateCollection,
    Point,
    Polygon,
)

__all__ = [
    "ContainmentResult",
    "Coordinate",
    "CoordinateCollection",
    "GeoError",
    "InvalidArgumentTypeError",
    "InvalidFormatError",
    "Point",
    "Polygon",
]
