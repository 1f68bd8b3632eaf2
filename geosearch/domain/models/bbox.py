from __future__ import annotations

from dataclasses import dataclass, field

from geosearch.domain.exceptions import InvalidBoxError, InvalidBoxReason

from .geo import LON_MAX, GeoPoint

# MongoDB rejects exactly +/-180 as an ambiguous longitude in polygon and box
# queries, so split boxes stop just short of the antimeridian.
ANTIMERIDIAN_LON = 179.99999

# Hemisphere-fit thresholds in degrees (strict upper bounds).
EAST_WEST_MAX_LAT_SPAN = 90.0
EAST_WEST_MAX_LON_SPAN = 90.0
NORTH_SOUTH_MAX_LAT_SPAN = 180.0
NORTH_SOUTH_MAX_LON_SPAN = 45.0

Position = tuple[float, float]


@dataclass(frozen=True, slots=True)
class GeoBoundingBox:
    """Axis-aligned box spanned by a lower-left and an upper-right corner.

    The two remaining corners are derived once at construction. A box whose
    lower-left longitude is greater than its upper-right longitude wraps
    across the antimeridian.
    """

    lower_left: GeoPoint
    upper_right: GeoPoint
    upper_left: GeoPoint = field(init=False, compare=False)
    lower_right: GeoPoint = field(init=False, compare=False)

    def __post_init__(self) -> None:
        ll, ur = self.lower_left, self.upper_right
        if ll is None or ur is None:
            raise InvalidBoxError(
                InvalidBoxReason.NULL_CORNER, "Bounding box corner is missing"
            )
        if ll == ur:
            raise InvalidBoxError(
                InvalidBoxReason.DEGENERATE_SINGLE_POINT,
                f"Bounding box is a single point: {ll}",
            )
        if ll.same_latitude(ur) or ll.same_longitude(ur):
            raise InvalidBoxError(
                InvalidBoxReason.SAME_LATITUDE_OR_LONGITUDE,
                f"Bounding box corners share latitude or longitude: {ll}, {ur}",
            )
        if ll.is_origin() and ur.is_origin():
            raise InvalidBoxError(
                InvalidBoxReason.BOTH_CORNERS_ZERO, "Both bounding box corners are 0.0"
            )

        object.__setattr__(self, "upper_left", GeoPoint(lat=ur.lat, lon=ll.lon))
        object.__setattr__(self, "lower_right", GeoPoint(lat=ll.lat, lon=ur.lon))

    def is_over_antimeridian(self) -> bool:
        return self.lower_left.lon > self.upper_right.lon

    def split_by_antimeridian(self) -> list["GeoBoundingBox"]:
        """Return at most two boxes that together cover this one.

        A box that does not cross the antimeridian is returned as is. A
        crossing box is cut into a western part ending at +179.99999 and an
        eastern part starting at -179.99999. A part is dropped when its corner
        already lies on or beyond that cut, since only a sliver of at most
        0.00001 degrees would remain on that side.
        """

        if not self.is_over_antimeridian():
            return [self]

        parts: list[GeoBoundingBox] = []
        if self.lower_left.lon < ANTIMERIDIAN_LON:
            parts.append(
                GeoBoundingBox(
                    lower_left=self.lower_left,
                    upper_right=GeoPoint(lat=self.upper_left.lat, lon=ANTIMERIDIAN_LON),
                )
            )
        if self.upper_right.lon > -ANTIMERIDIAN_LON:
            parts.append(
                GeoBoundingBox(
                    lower_left=GeoPoint(lat=self.lower_right.lat, lon=-ANTIMERIDIAN_LON),
                    upper_right=self.upper_right,
                )
            )
        return parts

    def lat_span(self) -> float:
        return abs(self.upper_left.lat - self.lower_left.lat)

    def lon_span(self) -> float:
        if self.is_over_antimeridian():
            return (LON_MAX - abs(self.lower_left.lon)) + (
                LON_MAX - abs(self.lower_right.lon)
            )
        return abs(self.lower_right.lon - self.lower_left.lon)

    def fits_within_hemisphere(self) -> bool:
        """Whether a GeoJSON polygon of this box is safe for ``$geoWithin``.

        MongoDB interprets a polygon larger than a hemisphere as the smaller
        complementary region, so the box must stay under either the east/west
        or the north/south span limits.
        """

        lat_span = self.lat_span()
        lon_span = self.lon_span()

        if lat_span < EAST_WEST_MAX_LAT_SPAN and lon_span < EAST_WEST_MAX_LON_SPAN:
            return True
        return (
            lat_span < NORTH_SOUTH_MAX_LAT_SPAN and lon_span < NORTH_SOUTH_MAX_LON_SPAN
        )

    def polygon_ring(self) -> tuple[Position, ...]:
        """Closed exterior ring: lower-left, upper-left, upper-right, lower-right, lower-left."""

        return self.polygon() + (self.lower_left.as_position(),)

    def polygon(self) -> tuple[Position, ...]:
        return (
            self.lower_left.as_position(),
            self.upper_left.as_position(),
            self.upper_right.as_position(),
            self.lower_right.as_position(),
        )
