"""Point-in-polygon classification result."""

from enum import IntEnum


class ContainmentResult(IntEnum):
    """Where a point lies relative to a polygon."""

    OUTSIDE = 0
    INSIDE = 1
    VERTEX = 2
    BOUNDARY = 3
