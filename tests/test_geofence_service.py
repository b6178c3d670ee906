"""Tests for the geofence application service."""

from unittest.mock import MagicMock

import pytest

from geo_polygon.application.services import GeofenceService
from geo_polygon.domain.models import ContainmentResult, NamedPolygon, Point, Polygon


@pytest.fixture
def polygons() -> list[NamedPolygon]:
    """Create two overlapping squares and a distant one."""
    return [
        NamedPolygon("west", Polygon([[0, 0], [0, 10], [10, 10], [10, 0], [0, 0]])),
        NamedPolygon("east", Polygon([[0, 5], [0, 15], [10, 15], [10, 5], [0, 5]])),
        NamedPolygon("far", Polygon([[50, 50], [50, 60], [60, 60], [60, 50], [50, 50]])),
    ]


@pytest.fixture
def service(polygons: list[NamedPolygon]) -> GeofenceService:
    """Create a service over the sample polygons."""
    return GeofenceService(polygons)


def test_polygon_names_in_registration_order(service: GeofenceService) -> None:
    """Given registered polygons, when listing names, then registration order is kept."""
    assert service.polygon_names == ["west", "east", "far"]


def test_classify_returns_result_per_polygon(service: GeofenceService) -> None:
    """Given a point in the overlap, when classifying, then every polygon reports a result."""
    results = service.classify(Point(latitude=5, longitude=7))

    assert results == {
        "west": ContainmentResult.INSIDE,
        "east": ContainmentResult.INSIDE,
        "far": ContainmentResult.OUTSIDE,
    }


def test_classify_reports_boundary_and_vertex(service: GeofenceService) -> None:
    """Given a point on an edge of one polygon, when classifying, then BOUNDARY is reported."""
    results = service.classify(Point(latitude=5, longitude=10))

    assert results["west"] is ContainmentResult.BOUNDARY
    assert results["east"] is ContainmentResult.INSIDE
    assert service.classify(Point(latitude=50, longitude=50))["far"] is ContainmentResult.VERTEX


def test_locate_returns_names_not_outside(service: GeofenceService) -> None:
    """Given a point, when locating, then all polygons not reporting OUTSIDE are returned."""
    assert service.locate(Point(latitude=5, longitude=7)) == ["west", "east"]
    assert service.locate(Point(latitude=5, longitude=12)) == ["east"]
    assert service.locate(Point(latitude=30, longitude=30)) == []


def test_first_match(service: GeofenceService) -> None:
    """Given a point, when asking for the first match, then the first containing polygon wins."""
    assert service.first_match(Point(latitude=5, longitude=7)) == "west"
    assert service.first_match(Point(latitude=55, longitude=55)) == "far"
    assert service.first_match(Point(latitude=30, longitude=30)) is None


def test_check_vertex_is_passed_to_polygons() -> None:
    """Given check_vertex disabled, when classifying, then polygons are queried without it."""
    polygon = MagicMock(spec=Polygon)
    polygon.contain_point.return_value = ContainmentResult.INSIDE
    service = GeofenceService([NamedPolygon("mock", polygon)], check_vertex=False)
    point = Point(latitude=1, longitude=2)

    result = service.first_match(point)

    assert result == "mock"
    polygon.contain_point.assert_called_once_with(point, check_vertex=False)


def test_empty_service_matches_nothing() -> None:
    """Given no polygons, when classifying, then nothing matches."""
    service = GeofenceService([])
    point = Point(latitude=1, longitude=2)

    assert service.classify(point) == {}
    assert service.first_match(point) is None
