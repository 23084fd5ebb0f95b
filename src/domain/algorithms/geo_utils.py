from __future__ import annotations

import math

from src.domain.models import GeoPoint

EARTH_RADIUS_KM = 6371.0
_RAD_PER_DEG = math.pi / 180.0


def haversine_distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in kilometers, rounded to 2 decimals.

    Inputs are trusted to be in range (GeoPoint enforces it). Rounding uses
    the built-in `round`, i.e. half-even on the binary value.
    """

    lat1 = a.lat * _RAD_PER_DEG
    lat2 = b.lat * _RAD_PER_DEG
    dlat = (b.lat - a.lat) * _RAD_PER_DEG
    dlon = (b.lon - a.lon) * _RAD_PER_DEG

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    )
    c = 2.0 * math.atan2(math.sqrt(s), math.sqrt(1.0 - s))
    return round(EARTH_RADIUS_KM * c, 2)


def is_within_radius(a: GeoPoint, b: GeoPoint, radius_km: float = 10.0) -> bool:
    return haversine_distance_km(a, b) <= radius_km
