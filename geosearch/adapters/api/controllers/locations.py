from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from geosearch.adapters.api.dependencies import get_geo_search_service
from geosearch.adapters.api.schemas.locations import (
    AddLocationsResponseSchema,
    AddLocationsSchema,
    BoundingBoxSearchSchema,
    GeoPointSchema,
    InvalidBoxResponseSchema,
    InvalidBoxSchema,
    LocationSchema,
)
from geosearch.app.services.geo_search_service import GeoSearchService
from geosearch.app.services.location_codec import DESCRIPTION_FIELD
from geosearch.domain.exceptions import InvalidBoxError
from geosearch.domain.models import GeoBoundingBox, GeoPoint, Location
from geosearch.domain.query import eq

router = APIRouter(prefix="/locations", tags=["locations"])


def _location_to_schema(location: Location) -> LocationSchema:
    return LocationSchema(
        point=(
            GeoPointSchema(lat=location.point.lat, lon=location.point.lon)
            if location.point is not None
            else None
        ),
        description=location.description,
    )


@router.post(
    "/search",
    response_model=list[LocationSchema],
    responses={
        422: {
            "model": InvalidBoxResponseSchema,
            "description": "Degenerate bounding box",
        }
    },
)
def search_locations(
    req: BoundingBoxSearchSchema,
    service: GeoSearchService = Depends(get_geo_search_service),
) -> list[LocationSchema]:
    try:
        box = GeoBoundingBox(
            lower_left=GeoPoint(lat=req.lower_left.lat, lon=req.lower_left.lon),
            upper_right=GeoPoint(lat=req.upper_right.lat, lon=req.upper_right.lon),
        )
    except InvalidBoxError as exc:
        detail = InvalidBoxSchema(reason=exc.reason.value, message=str(exc))
        raise HTTPException(status_code=422, detail=detail.model_dump()) from exc

    extra = eq(DESCRIPTION_FIELD, req.description) if req.description else None
    return [_location_to_schema(loc) for loc in service.search(box, extra=extra)]


@router.post("", response_model=AddLocationsResponseSchema, status_code=201)
def add_locations(
    req: AddLocationsSchema,
    service: GeoSearchService = Depends(get_geo_search_service),
) -> AddLocationsResponseSchema:
    locations = [
        Location(
            point=(
                GeoPoint(lat=item.point.lat, lon=item.point.lon)
                if item.point is not None
                else None
            ),
            description=item.description,
        )
        for item in req.locations
    ]
    return AddLocationsResponseSchema(inserted=service.add_locations(locations))
