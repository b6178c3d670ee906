"""Polygon configuration loader."""

import logging
from typing import Any

from geo_polygon.adapters.config.app_config import AppConfig
from geo_polygon.domain.errors import GeoError
from geo_polygon.domain.models.named_polygon import NamedPolygon
from geo_polygon.domain.models.polygon import Polygon

logger = logging.getLogger(__name__)


class PolygonConfigurationLoader:
    """Loads named polygons from app config."""

    @staticmethod
    def load_polygon_from_data(
        polygon_data: dict[str, Any], config: AppConfig
    ) -> NamedPolygon | None:
        """Load a single named polygon from data dict.

        Returns None if the entry has no usable name or vertex list.

        Raises:
            GeoError: If a vertex cannot be parsed.
        """
        if not isinstance(polygon_data, dict):
            return None

        name = polygon_data.get("name")
        if not name or not isinstance(name, str):
            return None

        vertices = polygon_data.get("vertices", [])
        if not isinstance(vertices, list):
            logger.warning(f"Polygon '{name}' has no vertex list, skipping")
            return None

        # Per-polygon revert, fallback to global config
        revert = polygon_data.get("revert", config.revert)
        if not isinstance(revert, bool):
            logger.warning(
                f"Polygon '{name}' has non-boolean revert {revert!r}, using {config.revert}"
            )
            revert = config.revert

        return NamedPolygon(name=name, polygon=Polygon(vertices, revert=revert))

    @staticmethod
    def load(config: AppConfig) -> list[NamedPolygon]:
        """Load all named polygons from app config.

        Raises:
            ValueError: If a polygon contains an unparsable vertex.
        """
        polygons_data = config.get_polygons_config()
        named_polygons: list[NamedPolygon] = []

        for polygon_data in polygons_data:
            try:
                named_polygon = PolygonConfigurationLoader.load_polygon_from_data(
                    polygon_data, config
                )
            except GeoError as e:
                raise ValueError(
                    f"Invalid vertex in polygon '{polygon_data.get('name')}': {e}"
                ) from e
            if named_polygon is None:
                continue
            if len(named_polygon.polygon) < 2:
                logger.warning(
                    f"Polygon '{named_polygon.name}' has fewer than two vertices "
                    "and will never contain a point"
                )
            named_polygons.append(named_polygon)

        logger.info(f"Loaded {len(named_polygons)} polygon(s) from {config.config_file}")
        return named_polygons
