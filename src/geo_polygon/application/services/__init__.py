"""Application services."""

from geo_polygon.application.services.geofence_service import GeofenceService

__all__ = ["GeofenceService"]
