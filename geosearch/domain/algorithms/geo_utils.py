from __future__ import annotations

ONE_METER_IN_MILES = 0.0006213712
MILES_PER_DEGREE = 69.0
EARTH_EQUATORIAL_RADIUS_M = 6378100.0


def meters_to_degrees(distance_m: float) -> float:
    """Convert meters to degrees of arc for planar (2d index) operators.

    Flat-earth approximation: one degree is taken as 69 miles everywhere, so
    the result drifts for longitudes away from the equator.
    """

    return distance_m * ONE_METER_IN_MILES / MILES_PER_DEGREE


def meters_to_radians(distance_m: float) -> float:
    """Convert meters to radians for spherical operators ($centerSphere, $nearSphere)."""

    return distance_m / EARTH_EQUATORIAL_RADIUS_M
