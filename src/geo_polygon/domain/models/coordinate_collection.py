"""List-backed coordinate collection."""

import json
from collections.abc import Iterable, Iterator
from typing import Any

from geo_polygon.domain.models.coordinate import Coordinate


class CoordinateCollection:
    """Ordered collection of coordinates.

    Raw values (strings or two-element sequences) passed to the constructor,
    add() or set() are converted with Coordinate.parse using the collection's
    revert flag.
    """

    def __init__(self, elements: Iterable[Any] = (), revert: bool = False) -> None:
        """Initialize with optional elements in order."""
        self.revert = revert
        self._elements: list[Coordinate] = []
        for element in elements:
            self.add(element)

    def _coerce(self, value: Any) -> Coordinate:
        return Coordinate.parse(value, revert=self.revert)

    def add(self, coordinate: Any) -> None:
        """Append a coordinate."""
        self._elements.append(self._coerce(coordinate))

    def get(self, index: int) -> Coordinate | None:
        """Get the coordinate at index, or None if out of range."""
        if 0 <= index < len(self._elements):
            return self._elements[index]
        return None

    def set(self, index: int, coordinate: Any) -> None:
        """Replace the coordinate at index, or append when index equals the length.

        Raises:
            IndexError: If index is negative or beyond the end of the collection.
        """
        value = self._coerce(coordinate)
        if 0 <= index < len(self._elements):
            self._elements[index] = value
        elif index == len(self._elements):
            self._elements.append(value)
        else:
            raise IndexError(
                f"Index {index} out of range for collection of {len(self._elements)} coordinates"
            )

    def remove(self, index: int) -> Coordinate | None:
        """Remove and return the coordinate at index; later coordinates shift down."""
        if 0 <= index < len(self._elements):
            return self._elements.pop(index)
        return None

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._elements)

    def __contains__(self, coordinate: object) -> bool:
        if not isinstance(coordinate, Coordinate):
            return False
        return any(element.is_equal(coordinate) for element in self._elements)

    def to_list(self) -> list[list[float]]:
        """Return the coordinates as [[latitude, longitude], ...]."""
        return [element.to_list() for element in self._elements]

    def to_json(self) -> str:
        """Serialize the coordinates as a JSON array of [latitude, longitude] arrays."""
        return json.dumps(self.to_list())

    @classmethod
    def from_json(cls, data: str, revert: bool = False) -> "CoordinateCollection":
        """Build a collection from a JSON array of two-element arrays."""
        return cls(json.loads(data), revert=revert)
