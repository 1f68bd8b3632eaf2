from .clauses import (
    AllOf,
    AnyOf,
    Clause,
    FieldCondition,
    all_,
    and_,
    eq,
    exists,
    geo_within_box,
    geo_within_polygon,
    geo_within_ring_polygon,
    gt,
    gte,
    in_,
    lt,
    lte,
    mod,
    ne,
    near,
    near_sphere,
    not_in,
    or_,
    regex,
    size,
    within_center,
    within_center_sphere,
    within_polygon,
)
from .spatial import DEFAULT_POINT_FIELD, SpatialQueryBuilder

__all__ = [
    "AllOf",
    "AnyOf",
    "Clause",
    "DEFAULT_POINT_FIELD",
    "FieldCondition",
    "SpatialQueryBuilder",
    "all_",
    "and_",
    "eq",
    "exists",
    "geo_within_box",
    "geo_within_polygon",
    "geo_within_ring_polygon",
    "gt",
    "gte",
    "in_",
    "lt",
    "lte",
    "mod",
    "ne",
    "near",
    "near_sphere",
    "not_in",
    "or_",
    "regex",
    "size",
    "within_center",
    "within_center_sphere",
    "within_polygon",
]
