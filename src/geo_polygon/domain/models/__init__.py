"""Domain models for coordinates and polygons."""

from geo_polygon.domain.models.containment import ContainmentResult
from geo_polygon.domain.models.coordinate import Coordinate, Point
from geo_polygon.domain.models.coordinate_collection import CoordinateCollection
from geo_polygon.domain.models.named_polygon import NamedPolygon
from geo_polygon.domain.models.polygon import Polygon

__all__ = [
    "ContainmentResult",
    "Coordinate",
    "CoordinateCollection",
    "NamedPolygon",
    "Point",
    "Polygon",
]
