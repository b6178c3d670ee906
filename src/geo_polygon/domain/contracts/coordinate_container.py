"""Protocol for ordered coordinate storage."""

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from geo_polygon.domain.models.coordinate import Coordinate


@runtime_checkable
class CoordinateContainer(Protocol):
    """Ordered, indexable storage of coordinates with membership testing."""

    def add(self, coordinate: "Coordinate") -> None:
        """Append a coordinate."""
        ...

    def get(self, index: int) -> "Coordinate | None":
        """Get the coordinate at index.

        Args:
            index: Zero-based position.

        Returns:
            The coordinate, or None if index is out of range.
        """
        ...

    def set(self, index: int, coordinate: "Coordinate") -> None:
        """Store a coordinate at index."""
        ...

    def remove(self, index: int) -> "Coordinate | None":
        """Remove and return the coordinate at index, or None if absent."""
        ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator["Coordinate"]: ...

    def __contains__(self, coordinate: object) -> bool: ...
