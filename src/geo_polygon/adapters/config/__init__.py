"""Configuration adapters."""

from geo_polygon.adapters.config.app_config import AppConfig
from geo_polygon.adapters.config.polygon_configuration_loader import PolygonConfigurationLoader

__all__ = ["AppConfig", "PolygonConfigurationLoader"]
