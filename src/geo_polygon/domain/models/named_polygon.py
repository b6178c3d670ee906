"""Named polygon domain model."""

from dataclasses import dataclass

from geo_polygon.domain.models.polygon import Polygon


@dataclass(frozen=True)
class NamedPolygon:
    """A polygon registered under a name, e.g. a delivery zone or a district."""

    name: str
    polygon: Polygon
