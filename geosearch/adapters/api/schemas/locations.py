from __future__ import annotations

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class LocationSchema(BaseModel):
    point: GeoPointSchema | None = None
    description: str | None = None


class BoundingBoxSearchSchema(BaseModel):
    lower_left: GeoPointSchema
    upper_right: GeoPointSchema
    # Optional exact-match filter on the description, AND-ed with the box.
    description: str | None = None


class AddLocationsSchema(BaseModel):
    locations: list[LocationSchema] = []


class AddLocationsResponseSchema(BaseModel):
    inserted: int


class InvalidBoxSchema(BaseModel):
    reason: str
    message: str


class InvalidBoxResponseSchema(BaseModel):
    detail: InvalidBoxSchema
