"""Parser for human-entered coordinate notations.

Each notation is a matcher that takes the raw text and returns the two
decimal-degree values in textual order, or None when the text does not fit.
Matchers are tried in a fixed order and the first hit wins; the order matters
for ambiguous inputs and must not be changed.

Patterns are anchored at the end of the text only, so leading noise such as
a label ("Pittsburgh: 40.446195, -79.948862") is tolerated.

See http://en.wikipedia.org/wiki/Geographic_coordinate_conversion
"""

import re
from collections.abc import Callable

from geo_polygon.domain.errors import InvalidFormatError

DecimalPair = tuple[float, float]
Matcher = Callable[[str], DecimalPair | None]

_FLAGS = re.ASCII | re.IGNORECASE

# 40.446195, -79.948862
_DECIMAL_PAIR = re.compile(r"(-?[0-9]{1,2}\.?\d*)[, ] ?(-?[0-9]{1,3}\.?\d*)$", _FLAGS)

# 40° 26.7717, -79° 56.93172
_SIGNED_DEGREES_MINUTES = re.compile(
    r"(-?[0-9]{1,2})\D+([0-9]{1,2}\.?\d*)[, ] ?(-?[0-9]{1,3})\D+([0-9]{1,2}\.?\d*)$",
    _FLAGS,
)

# 40.446195N 79.948862W
_DECIMAL_HEMISPHERE = re.compile(
    r"([0-9]{1,2}\.?\d*)\D*([ns])[, ] ?([0-9]{1,3}\.?\d*)\D*([we])$",
    _FLAGS,
)

# 40°26.7717S 79°56.93172E
# 25°59.86′N,21°09.81′W
_DEGREES_MINUTES_HEMISPHERE = re.compile(
    r"([0-9]{1,2})\D+([0-9]{1,2}\.?\d*)\D*([ns])[, ] ?"
    r"([0-9]{1,3})\D+([0-9]{1,2}\.?\d*)\D*([we])$",
    _FLAGS,
)

# 40:26:46N, 079:56:55W
# 40:26:46.302N 079:56:55.903W
# 40°26′47″N 079°58′36″W
# 40d 26′ 47″ N 079d 58′ 36″ W
_DEGREES_MINUTES_SECONDS_HEMISPHERE = re.compile(
    r"([0-9]{1,2})\D+([0-9]{1,2})\D+([0-9]{1,2}\.?\d*)\D*([ns])[, ] ?"
    r"([0-9]{1,3})\D+([0-9]{1,2})\D+([0-9]{1,2}\.?\d*)\D*([we])$",
    _FLAGS,
)


def _apply_hemisphere(magnitude: float, hemisphere: str) -> float:
    """Return the magnitude signed by its hemisphere letter (N/E positive, S/W negative)."""
    return magnitude if hemisphere.upper() in ("N", "E") else -magnitude


def match_decimal_pair(text: str) -> DecimalPair | None:
    """Match a plain signed decimal pair."""
    match = _DECIMAL_PAIR.search(text)
    if not match:
        return None
    return float(match.group(1)), float(match.group(2))


def match_signed_degrees_minutes(text: str) -> DecimalPair | None:
    """Match signed degrees with decimal minutes and no hemisphere letters.

    Only the longitude carries its degree sign over to the minutes; the
    latitude minutes are always added.
    """
    match = _SIGNED_DEGREES_MINUTES.search(text)
    if not match:
        return None
    lat_degrees, lat_minutes, lon_degrees, lon_minutes = (float(g) for g in match.groups())
    latitude = lat_degrees + lat_minutes / 60
    if lon_degrees < 0:
        longitude = lon_degrees - lon_minutes / 60
    else:
        longitude = lon_degrees + lon_minutes / 60
    return latitude, longitude


def match_decimal_hemisphere(text: str) -> DecimalPair | None:
    """Match decimal degrees followed by hemisphere letters."""
    match = _DECIMAL_HEMISPHERE.search(text)
    if not match:
        return None
    latitude, lat_hemisphere, longitude, lon_hemisphere = match.groups()
    return (
        _apply_hemisphere(float(latitude), lat_hemisphere),
        _apply_hemisphere(float(longitude), lon_hemisphere),
    )


def match_degrees_minutes_hemisphere(text: str) -> DecimalPair | None:
    """Match degrees and decimal minutes followed by hemisphere letters."""
    match = _DEGREES_MINUTES_HEMISPHERE.search(text)
    if not match:
        return None
    lat_deg, lat_min, lat_hemisphere, lon_deg, lon_min, lon_hemisphere = match.groups()
    latitude = float(lat_deg) + float(lat_min) / 60
    longitude = float(lon_deg) + float(lon_min) / 60
    return (
        _apply_hemisphere(latitude, lat_hemisphere),
        _apply_hemisphere(longitude, lon_hemisphere),
    )


def match_degrees_minutes_seconds_hemisphere(text: str) -> DecimalPair | None:
    """Match degrees, minutes and decimal seconds followed by hemisphere letters."""
    match = _DEGREES_MINUTES_SECONDS_HEMISPHERE.search(text)
    if not match:
        return None
    (
        lat_deg,
        lat_min,
        lat_sec,
        lat_hemisphere,
        lon_deg,
        lon_min,
        lon_sec,
        lon_hemisphere,
    ) = match.groups()
    latitude = float(lat_deg) + (float(lat_min) * 60 + float(lat_sec)) / 3600
    longitude = float(lon_deg) + (float(lon_min) * 60 + float(lon_sec)) / 3600
    return (
        _apply_hemisphere(latitude, lat_hemisphere),
        _apply_hemisphere(longitude, lon_hemisphere),
    )


MATCHERS: tuple[Matcher, ...] = (
    match_decimal_pair,
    match_signed_degrees_minutes,
    match_decimal_hemisphere,
    match_degrees_minutes_hemisphere,
    match_degrees_minutes_seconds_hemisphere,
)


def to_decimal_degrees(text: str) -> DecimalPair:
    """Convert a coordinate string into two decimal-degree values in textual order.

    Args:
        text: Coordinate string in one of the supported notations.

    Returns:
        The two values as written (first, second), not yet normalized.

    Raises:
        InvalidFormatError: If no notation matches.
    """
    for matcher in MATCHERS:
        result = matcher(text)
        if result is not None:
            return result
    raise InvalidFormatError(text)
