"""Coordinate domain model."""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from geo_polygon.domain.coordinate_parser import to_decimal_degrees
from geo_polygon.domain.errors import InvalidArgumentTypeError, InvalidFormatError
from geo_polygon.domain.normalization import normalize_latitude, normalize_longitude


class Coordinate(BaseModel):
    """A normalized (latitude, longitude) pair.

    Latitude is clamped to [-90, 90] and longitude wrapped into (-180, 180]
    both on construction and on every assignment, so an un-normalized value
    is never observable. Equality is exact on the normalized pair.
    """

    model_config = ConfigDict(validate_assignment=True)

    latitude: float = Field(allow_inf_nan=False)
    longitude: float = Field(allow_inf_nan=False)

    @field_validator("latitude")
    @classmethod
    def validate_latitude(cls, v: float) -> float:
        """Clamp latitude into [-90, 90]."""
        return normalize_latitude(v)

    @field_validator("longitude")
    @classmethod
    def validate_longitude(cls, v: float) -> float:
        """Wrap longitude into (-180, 180]."""
        return normalize_longitude(v)

    @classmethod
    def from_pair(cls, pair: Sequence[Any], revert: bool = False) -> "Coordinate":
        """Create a coordinate from an ordered pair of numbers.

        Args:
            pair: Two numeric values, latitude first unless revert is set.
            revert: Treat the pair as longitude-first (e.g. GeoJSON, Yandex).

        Raises:
            InvalidArgumentTypeError: If the pair does not hold exactly two numbers.
        """
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise InvalidArgumentTypeError(
                "Coordinates must be given as a string or a two-element sequence", pair
            )
        first, second = pair
        latitude, longitude = (second, first) if revert else (first, second)
        try:
            return cls(latitude=latitude, longitude=longitude)
        except ValidationError as e:
            raise InvalidArgumentTypeError(
                f"Coordinate values must be finite numbers, got {pair!r}", pair
            ) from e

    @classmethod
    def from_string(cls, text: str, revert: bool = False) -> "Coordinate":
        """Create a coordinate from text in any supported notation.

        Raises:
            InvalidArgumentTypeError: If text is not a string.
            InvalidFormatError: If text matches no supported notation or a value
                overflows to infinity.
        """
        if not isinstance(text, str):
            raise InvalidArgumentTypeError("Coordinates must be given as a string", text)
        first, second = to_decimal_degrees(text)
        latitude, longitude = (second, first) if revert else (first, second)
        try:
            return cls(latitude=latitude, longitude=longitude)
        except ValidationError as e:
            raise InvalidFormatError(text) from e

    @classmethod
    def parse(cls, value: Any, revert: bool = False) -> "Coordinate":
        """Create a coordinate from a string, a two-element sequence or another coordinate.

        Existing Coordinate instances are returned unchanged; revert is not
        applied to them.
        """
        if isinstance(value, Coordinate):
            return value
        if isinstance(value, str):
            return cls.from_string(value, revert=revert)
        return cls.from_pair(value, revert=revert)

    def to_list(self) -> list[float]:
        """Return [latitude, longitude]."""
        return [self.latitude, self.longitude]

    def is_equal(self, other: "Coordinate") -> bool:
        """Check whether both coordinates have identical normalized values."""
        return self.to_list() == other.to_list()

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"


# A query location; structurally identical to a polygon vertex.
Point = Coordinate
