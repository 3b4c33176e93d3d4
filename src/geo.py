"""Great-circle distance on a spherical Earth.

Coordinates are validated when models are built, but `distance_km` does not
trust that: an out-of-range or non-finite coordinate yields NaN instead of a
plausible-looking number. Callers drop NaN distances.
"""

from __future__ import annotations

import math

from src.models import Coordinate

EARTH_RADIUS_KM = 6371.0


def _valid(c: Coordinate) -> bool:
    return (
        math.isfinite(c.latitude)
        and math.isfinite(c.longitude)
        and -90.0 <= c.latitude <= 90.0
        and -180.0 <= c.longitude <= 180.0
    )


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance between two coordinates, in kilometres."""
    if not (_valid(a) and _valid(b)):
        return math.nan
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = lat2 - lat1
    d_lon = math.radians(b.longitude) - math.radians(a.longitude)
    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    # rounding can push h a hair above 1 for antipodal points
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(min(1.0, h)))
