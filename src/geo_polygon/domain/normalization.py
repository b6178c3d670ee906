"""Latitude and longitude normalization."""

import math


def normalize_latitude(latitude: float) -> float:
    """Clamp a latitude to [-90, 90]."""
    return float(max(-90.0, min(90.0, latitude)))


def normalize_longitude(longitude: float) -> float:
    """Wrap a longitude into (-180, 180].

    The antimeridian check runs on the truncated integer value, so any input
    whose whole-degree part is congruent to 180 (e.g. 180, 540, 180.5) maps to
    exactly 180.0. An input of -180 is not caught by that check and is
    returned as -180.0.
    """
    if math.fmod(int(longitude), 360) == 180:
        return 180.0
    mod = math.fmod(longitude, 360)
    if mod < -180:
        return mod + 360
    if mod > 180:
        return mod - 360
    return mod
