from __future__ import annotations

from dataclasses import dataclass

from geosearch.domain.models import GeoBoundingBox

from .clauses import FieldCondition, geo_within_box, geo_within_ring_polygon

DEFAULT_POINT_FIELD = "gl"


@dataclass(frozen=True, slots=True)
class SpatialQueryBuilder:
    """Builds the ``$geoWithin`` clause for one box that does not cross the antimeridian.

    A box that fits within a hemisphere is sent as a GeoJSON ring polygon,
    which MongoDB evaluates with spherical geometry. Larger boxes fall back to
    the planar ``$box`` operator, which is valid at any extent.
    """

    field: str = DEFAULT_POINT_FIELD

    def build(self, box: GeoBoundingBox) -> FieldCondition:
        if box.is_over_antimeridian():
            raise ValueError(
                "Bounding box crosses the antimeridian; split it before building a query"
            )
        if box.fits_within_hemisphere():
            return geo_within_ring_polygon(self.field, box)
        return geo_within_box(self.field, box)
