"""Polygon domain model and point containment test."""

from collections.abc import Iterable, Iterator
from typing import Any

from geo_polygon.domain.contracts.coordinate_container import CoordinateContainer
from geo_polygon.domain.errors import InvalidArgumentTypeError
from geo_polygon.domain.models.containment import ContainmentResult
from geo_polygon.domain.models.coordinate import Coordinate, Point
from geo_polygon.domain.models.coordinate_collection import CoordinateCollection


class Polygon:
    """Ordered sequence of vertices with a ray-casting containment test.

    Edges are the consecutive vertex pairs. No closing edge from the last
    vertex back to the first is added, so a closed ring must repeat its first
    vertex at the end.
    """

    def __init__(self, vertices: Any = None, revert: bool = False) -> None:
        """Initialize the polygon.

        Args:
            vertices: None for an empty polygon, a list/tuple of coordinates
                (or raw coordinate values), or any CoordinateContainer which
                is then used as the vertex storage.
            revert: Treat raw coordinate values as longitude-first.

        Raises:
            InvalidArgumentTypeError: If vertices is of any other type.
        """
        self.revert = revert

        if vertices is None or isinstance(vertices, (list, tuple)):
            self._vertices: CoordinateContainer = CoordinateCollection(revert=revert)
        elif isinstance(vertices, CoordinateContainer):
            self._vertices = vertices
        else:
            raise InvalidArgumentTypeError(
                "Polygon vertices must be None, a list or a CoordinateContainer", vertices
            )

        if isinstance(vertices, (list, tuple)):
            self.extend(vertices)

    def _coerce(self, value: Any) -> Coordinate:
        return Coordinate.parse(value, revert=self.revert)

    @property
    def vertices(self) -> CoordinateContainer:
        """The underlying vertex storage."""
        return self._vertices

    @property
    def has_vertices(self) -> bool:
        """Whether the polygon holds at least one vertex."""
        return len(self._vertices) > 0

    def add(self, coordinate: Any) -> None:
        """Append a vertex; raw values are parsed with the polygon's revert flag."""
        self._vertices.add(self._coerce(coordinate))

    def extend(self, coordinates: Iterable[Any]) -> None:
        """Append vertices in order after the existing ones."""
        for coordinate in coordinates:
            self.add(coordinate)

    def set(self, index: int, coordinate: Any) -> None:
        """Replace the vertex at index, or append when index equals the vertex count."""
        self._vertices.set(index, self._coerce(coordinate))

    def get(self, index: int) -> Coordinate | None:
        """Get the vertex at index, or None if out of range."""
        return self._vertices.get(index)

    def remove(self, index: int) -> Coordinate | None:
        """Remove and return the vertex at index, or None if absent."""
        return self._vertices.remove(index)

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._vertices)

    def to_list(self) -> list[list[float]]:
        """Return the vertices as [[latitude, longitude], ...]."""
        return [vertex.to_list() for vertex in self._vertices]

    def to_json(self) -> str:
        return CoordinateCollection(self._vertices).to_json()

    def contain_point(self, point: Point, check_vertex: bool = True) -> ContainmentResult:
        """Classify a point against the polygon.

        Casts a ray along the point's longitude line and counts edge crossings.
        All comparisons are exact; there is no tolerance for floating point
        noise.

        Args:
            point: Location to classify.
            check_vertex: Report VERTEX when the point equals a vertex.

        Returns:
            VERTEX, BOUNDARY, INSIDE (odd crossing count) or OUTSIDE.
        """
        if check_vertex and point in self._vertices:
            return ContainmentResult.VERTEX

        vertices = list(self._vertices)
        lat = point.latitude
        lon = point.longitude
        intersections = 0

        for vertex1, vertex2 in zip(vertices, vertices[1:]):
            lat1, lon1 = vertex1.latitude, vertex1.longitude
            lat2, lon2 = vertex2.latitude, vertex2.longitude

            # Point lies on an edge of constant longitude
            if lon1 == lon2 == lon and min(lat1, lat2) < lat < max(lat1, lat2):
                return ContainmentResult.BOUNDARY

            if (
                min(lon1, lon2) < lon <= max(lon1, lon2)
                and lat <= max(lat1, lat2)
                and lon1 != lon2
            ):
                lat_intersect = (lon - lon1) * (lat2 - lat1) / (lon2 - lon1) + lat1
                if lat_intersect == lat:
                    return ContainmentResult.BOUNDARY
                if lat1 == lat2 or lat <= lat_intersect:
                    intersections += 1

        if intersections % 2 != 0:
            return ContainmentResult.INSIDE
        return ContainmentResult.OUTSIDE
