"""Tests for the polygon configuration loader."""

from pathlib import Path

import pytest

from geo_polygon.adapters.config import AppConfig, PolygonConfigurationLoader
from geo_polygon.domain.models import ContainmentResult, Coordinate, NamedPolygon

EXAMPLE_CONFIG = Path(__file__).resolve().parent.parent / "polygons.example.toml"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove configuration variables that may leak in from the environment."""
    for name in ("REVERT", "CHECK_VERTEX", "LOG_LEVEL", "CONFIG_FILE"):
        monkeypatch.delenv(name, raising=False)


def test_load_polygon_from_data_builds_named_polygon() -> None:
    """Given a polygon entry, when loading, then a NamedPolygon with parsed vertices results."""
    named = PolygonConfigurationLoader.load_polygon_from_data(
        {"name": "strip", "vertices": ["0, 0", [1, 0]]}, AppConfig(config_file=None)
    )

    assert isinstance(named, NamedPolygon)
    assert named.name == "strip"
    assert named.polygon.to_list() == [[0.0, 0.0], [1.0, 0.0]]


def test_load_polygon_from_data_uses_global_revert() -> None:
    """Given revert in the app config, when loading, then vertices are read longitude-first."""
    named = PolygonConfigurationLoader.load_polygon_from_data(
        {"name": "strip", "vertices": [[20, 10]]}, AppConfig(config_file=None, revert=True)
    )

    assert named is not None
    assert named.polygon.get(0) == Coordinate(latitude=10, longitude=20)


def test_load_polygon_from_data_prefers_polygon_revert() -> None:
    """Given revert on the polygon entry, when loading, then it overrides the app config."""
    named = PolygonConfigurationLoader.load_polygon_from_data(
        {"name": "strip", "vertices": [[20, 10]], "revert": False},
        AppConfig(config_file=None, revert=True),
    )

    assert named is not None
    assert named.polygon.get(0) == Coordinate(latitude=20, longitude=10)



def test_load_polygon_from_data_ignores_non_boolean_revert(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Given revert = "false" as a string, when loading, then it is ignored with a warning."""
    with caplog.at_level("WARNING"):
        named = PolygonConfigurationLoader.load_polygon_from_data(
            {"name": "strip", "vertices": [[20, 10]], "revert": "false"},
            AppConfig(config_file=None),
        )

    assert named is not None
    assert named.polygon.revert is False
    assert named.polygon.get(0) == Coordinate(latitude=20, longitude=10)
    assert "non-boolean revert" in caplog.text


@pytest.mark.parametrize(
    "data",
    [
        "not a dict",
        {"vertices": [[0, 0]]},
        {"name": "", "vertices": [[0, 0]]},
        {"name": "zone", "vertices": "0, 0"},
    ],
)
def test_load_polygon_from_data_skips_malformed_entries(data: object) -> None:
    """Given a malformed entry, when loading, then None is returned."""
    result = PolygonConfigurationLoader.load_polygon_from_data(
        data,  # type: ignore[arg-type]
        AppConfig(config_file=None),
    )

    assert result is None


def test_load_raises_on_unparsable_vertex(tmp_path: Path) -> None:
    """Given a vertex in no known notation, when loading, then ValueError names the polygon."""
    path = tmp_path / "polygons.toml"
    path.write_text('[[polygons]]\nname = "broken"\nvertices = ["0, 0", "nowhere"]\n')

    with pytest.raises(ValueError, match="Invalid vertex in polygon 'broken'"):
        PolygonConfigurationLoader.load(AppConfig(config_file=str(path)))


def test_load_example_config() -> None:
    """Given the shipped example config, when loading, then all polygons are usable."""
    polygons = PolygonConfigurationLoader.load(AppConfig(config_file=str(EXAMPLE_CONFIG)))

    names = [named.name for named in polygons]
    assert names == ["unit-square", "pittsburgh-downtown", "geojson-order"]

    by_name = {named.name: named.polygon for named in polygons}
    assert by_name["unit-square"].contain_point(Coordinate.parse("5, 5")) == (
        ContainmentResult.INSIDE
    )
    assert by_name["geojson-order"].get(0) == Coordinate(latitude=48.10, longitude=11.50)
    assert by_name["geojson-order"].contain_point(Coordinate.parse("48.15, 11.6")) == (
        ContainmentResult.INSIDE
    )
