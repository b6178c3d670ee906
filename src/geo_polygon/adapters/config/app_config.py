"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Coordinate handling
    revert: bool = Field(
        default=False,
        description="Treat coordinate pairs as longitude-first (e.g. GeoJSON, Yandex)",
    )
    check_vertex: bool = Field(
        default=True,
        description="Report points that coincide with a vertex as VERTEX instead of testing them",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Log level name, e.g. 'INFO' or 'DEBUG'")

    # TOML config file path
    config_file: str | None = Field(
        default="polygons.example.toml",
        description="Path to TOML configuration file with named polygons",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse TOML file, updating coordinate defaults."""
        if not self.config_file:
            raise ValueError("config_file must be set to load polygons configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        # Update defaults from TOML if present
        defaults = toml_data.get("defaults", {})
        if isinstance(defaults, dict):
            for key in ("revert", "check_vertex"):
                if key not in defaults:
                    continue
                if not isinstance(defaults[key], bool):
                    raise ValueError(f"TOML config 'defaults.{key}' must be true or false")
                setattr(self, key, defaults[key])

        return toml_data

    def get_polygons_config(self) -> list[dict[str, Any]]:
        """Parse and return polygon definitions as a list of dicts from the TOML file.

        Each entry has a 'name' and a 'vertices' list; vertices are coordinate
        strings or two-element arrays.

        Raises ValueError if polygon names are missing or not unique.
        """
        toml_data = self._load_toml_data()

        polygons = toml_data.get("polygons", [])
        if not isinstance(polygons, list):
            raise ValueError("TOML config 'polygons' must be a list")

        result: list[dict[str, Any]] = []
        for polygon in polygons:
            if not isinstance(polygon, dict):
                continue
            if "name" not in polygon:
                raise ValueError("All polygons must have a 'name' field")
            if not isinstance(polygon["name"], str):
                raise ValueError(f"Polygon name must be a string, got {polygon['name']!r}")
            result.append(polygon)

        names = [polygon["name"] for polygon in result]
        if len(names) != len(set(names)):
            duplicates = {name for name in names if names.count(name) > 1}
            raise ValueError(f"Polygon names must be unique. Duplicate names found: {duplicates}")

        return result
