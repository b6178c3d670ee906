"""Errors raised by the coordinate and polygon domain."""

from typing import Any


class GeoError(Exception):
    """Base class for all geo_polygon errors."""


class InvalidArgumentTypeError(GeoError, TypeError):
    """Raised when a constructor receives a value of an unsupported type."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidFormatError(GeoError, ValueError):
    """Raised when a coordinate string is in no supported notation or holds an unusable value."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unrecognized coordinate notation: {value!r}")
        self.value = value
