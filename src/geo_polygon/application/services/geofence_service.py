"""Geofence service."""

import logging
from collections.abc import Iterable

from geo_polygon.domain.models.containment import ContainmentResult
from geo_polygon.domain.models.coordinate import Point
from geo_polygon.domain.models.named_polygon import NamedPolygon

logger = logging.getLogger(__name__)


class GeofenceService:
    """Service for classifying points against a set of named polygons.

    Polygons are scanned in registration order. The polygons must not be
    mutated while a classification is running.
    """

    def __init__(self, polygons: Iterable[NamedPolygon], check_vertex: bool = True) -> None:
        """Initialize with named polygons."""
        self._polygons = list(polygons)
        self._check_vertex = check_vertex

    @property
    def polygon_names(self) -> list[str]:
        return [named.name for named in self._polygons]

    def classify(self, point: Point) -> dict[str, ContainmentResult]:
        """Classify a point against every polygon.

        Returns:
            Mapping of polygon name to containment result, in registration order.
        """
        results: dict[str, ContainmentResult] = {}
        for named in self._polygons:
            result = named.polygon.contain_point(point, check_vertex=self._check_vertex)
            logger.debug(f"Point {point} is {result.name} of polygon '{named.name}'")
            results[named.name] = result
        return results

    def locate(self, point: Point) -> list[str]:
        """Return the names of all polygons the point is not outside of."""
        return [
            name
            for name, result in self.classify(point).items()
            if result is not ContainmentResult.OUTSIDE
        ]

    def first_match(self, point: Point) -> str | None:
        """Return the name of the first polygon containing the point, or None."""
        for named in self._polygons:
            result = named.polygon.contain_point(point, check_vertex=self._check_vertex)
            if result is not ContainmentResult.OUTSIDE:
                return named.name
        logger.debug(f"Point {point} is outside all {len(self._polygons)} polygon(s)")
        return None
