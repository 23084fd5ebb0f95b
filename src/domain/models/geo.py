from __future__ import annotations

from dataclasses import dataclass

LAT_RANGE = (-90.0, 90.0)
LON_RANGE = (-180.0, 180.0)


def valid_lat(value: float) -> bool:
    return LAT_RANGE[0] <= value <= LAT_RANGE[1]


def valid_lon(value: float) -> bool:
    return LON_RANGE[0] <= value <= LON_RANGE[1]


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A WGS84 coordinate in decimal degrees.

    Out-of-range (and NaN) values are rejected here, so nothing downstream
    ever computes a distance from a bogus point.
    """

    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not valid_lat(self.lat):
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not valid_lon(self.lon):
            raise ValueError(f"Invalid longitude: {self.lon}")
