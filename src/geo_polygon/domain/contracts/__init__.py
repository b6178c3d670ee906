"""Domain contracts (protocols) implemented by models and adapters."""

from geo_polygon.domain.contracts.coordinate_container import CoordinateContainer

__all__ = ["CoordinateContainer"]
