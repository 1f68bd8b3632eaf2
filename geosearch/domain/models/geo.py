from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from geosearch.domain.exceptions import OutOfRangeError

LAT_MIN = -90.0
LAT_MAX = 90.0
LON_MIN = -180.0
LON_MAX = 180.0


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A (latitude, longitude) pair in degrees.

    Equality is exact on both fields; no tolerance is applied.
    """

    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not (LAT_MIN <= self.lat <= LAT_MAX):
            raise OutOfRangeError(f"Invalid latitude: {self.lat}")
        if not (LON_MIN <= self.lon <= LON_MAX):
            raise OutOfRangeError(f"Invalid longitude: {self.lon}")

    @staticmethod
    def from_position(position: Sequence[float]) -> "GeoPoint":
        """Build a point from a GeoJSON ``[lon, lat]`` position."""

        if len(position) != 2:
            raise OutOfRangeError(f"Expected a [lon, lat] pair, got {position!r}")
        lon, lat = position
        return GeoPoint(lat=float(lat), lon=float(lon))

    def as_position(self) -> tuple[float, float]:
        # GeoJSON / MongoDB order: longitude first.
        return (self.lon, self.lat)

    def is_origin(self) -> bool:
        return self.lat == 0.0 and self.lon == 0.0

    def same_latitude(self, other: "GeoPoint") -> bool:
        return self.lat == other.lat

    def same_longitude(self, other: "GeoPoint") -> bool:
        return self.lon == other.lon
