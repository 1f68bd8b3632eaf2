"""Immutable query clauses rendered to MongoDB query documents.

Every constructor returns a new clause; composing with ``&`` / ``|`` builds a
new node instead of mutating either operand, so a clause can be reused in any
number of queries.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

from geosearch.domain.algorithms.geo_utils import meters_to_degrees
from geosearch.domain.models import GeoBoundingBox, GeoPoint

GEO_WITHIN = "$geoWithin"
GEOMETRY = "$geometry"
BOX = "$box"
POLYGON = "$polygon"
CENTER = "$center"
CENTER_SPHERE = "$centerSphere"


@dataclass(frozen=True, slots=True)
class _Document:
    """Frozen stand-in for a query sub-document."""

    items: tuple[tuple[str, Any], ...]

    def keys(self) -> tuple[str, ...]:
        return tuple(key for key, _ in self.items)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return _Document(tuple((str(k), _freeze(v)) for k, v in value.items()))
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _render(value: Any) -> Any:
    if isinstance(value, _Document):
        return {k: _render(v) for k, v in value.items}
    if isinstance(value, tuple):
        return [_render(v) for v in value]
    return value


class Clause:
    """Base class of every query clause."""

    __slots__ = ()

    def to_query(self) -> dict[str, Any]:
        raise NotImplementedError

    def __and__(self, other: "Clause") -> "AllOf":
        return and_(self, other)

    def __or__(self, other: "Clause") -> "AnyOf":
        return or_(self, other)


@dataclass(frozen=True, slots=True)
class FieldCondition(Clause):
    """``{field: expression}``; the expression is a literal or an operator document.

    The expression is frozen on construction so the clause holds no mutable
    containers.
    """

    field: str
    expression: Any

    @staticmethod
    def of(field: str, expression: Any) -> "FieldCondition":
        return FieldCondition(field=field, expression=_freeze(expression))

    @property
    def operators(self) -> tuple[str, ...]:
        if not isinstance(self.expression, _Document):
            return ()
        return tuple(k for k in self.expression.keys() if k.startswith("$"))

    def to_query(self) -> dict[str, Any]:
        return {self.field: _render(self.expression)}


@dataclass(frozen=True, slots=True)
class AllOf(Clause):
    clauses: tuple[Clause, ...]

    def to_query(self) -> dict[str, Any]:
        return {"$and": [c.to_query() for c in self.clauses]}


@dataclass(frozen=True, slots=True)
class AnyOf(Clause):
    clauses: tuple[Clause, ...]

    def to_query(self) -> dict[str, Any]:
        return {"$or": [c.to_query() for c in self.clauses]}


# Logical composition


def and_(*clauses: Clause) -> AllOf:
    flat: list[Clause] = []
    for clause in clauses:
        flat.extend(clause.clauses if isinstance(clause, AllOf) else (clause,))
    return AllOf(tuple(flat))


def or_(*clauses: Clause) -> AnyOf:
    flat: list[Clause] = []
    for clause in clauses:
        flat.extend(clause.clauses if isinstance(clause, AnyOf) else (clause,))
    return AnyOf(tuple(flat))


# Comparison and membership


def eq(field: str, value: Any) -> FieldCondition:
    return FieldCondition.of(field, value)


def ne(field: str, value: Any) -> FieldCondition:
    return FieldCondition.of(field, {"$ne": value})


def gt(field: str, value: Any) -> FieldCondition:
    return FieldCondition.of(field, {"$gt": value})


def gte(field: str, value: Any) -> FieldCondition:
    return FieldCondition.of(field, {"$gte": value})


def lt(field: str, value: Any) -> FieldCondition:
    return FieldCondition.of(field, {"$lt": value})


def lte(field: str, value: Any) -> FieldCondition:
    return FieldCondition.of(field, {"$lte": value})


def in_(field: str, values: Iterable[Any]) -> FieldCondition:
    return FieldCondition.of(field, {"$in": list(values)})


def not_in(field: str, values: Iterable[Any]) -> FieldCondition:
    return FieldCondition.of(field, {"$nin": list(values)})


def all_(field: str, values: Iterable[Any]) -> FieldCondition:
    return FieldCondition.of(field, {"$all": list(values)})


def size(field: str, length: int) -> FieldCondition:
    return FieldCondition.of(field, {"$size": int(length)})


def mod(field: str, divisor: int, remainder: int) -> FieldCondition:
    return FieldCondition.of(field, {"$mod": [divisor, remainder]})


def exists(field: str, present: bool = True) -> FieldCondition:
    return FieldCondition.of(field, {"$exists": bool(present)})


# Compiled-pattern flags and the MongoDB $options letters they map to.
_REGEX_OPTIONS = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)


def regex(field: str, pattern: str | re.Pattern[str], options: str = "") -> FieldCondition:
    """Match strings against ``pattern``.

    Flags on a compiled pattern become ``$options``; ``re.UNICODE`` is implied
    for str patterns and dropped. Any other flag has no MongoDB equivalent and
    raises ``ValueError``.
    """
    letters = set(options)
    unknown = letters - {letter for _, letter in _REGEX_OPTIONS}
    if unknown:
        raise ValueError(f"Unsupported regex options: {''.join(sorted(unknown))}")

    if isinstance(pattern, re.Pattern):
        remaining = pattern.flags & ~re.UNICODE
        for flag, letter in _REGEX_OPTIONS:
            if remaining & flag:
                letters.add(letter)
                remaining &= ~flag
        if remaining:
            raise ValueError(
                f"Regex flags {re.RegexFlag(remaining)!r} have no $options equivalent"
            )
        pattern = pattern.pattern

    expression: dict[str, Any] = {"$regex": pattern}
    if letters:
        expression["$options"] = "".join(sorted(letters))
    return FieldCondition.of(field, expression)


# Geospatial


def geo_within_box(field: str, box: GeoBoundingBox) -> FieldCondition:
    """Planar box over the lower-left and upper-right corners. Valid at any extent."""

    corners = [box.lower_left.as_position(), box.upper_right.as_position()]
    return FieldCondition.of(field, {GEO_WITHIN: {BOX: corners}})


def geo_within_ring_polygon(field: str, box: GeoBoundingBox) -> FieldCondition:
    """GeoJSON Polygon with the box's closed ring as its only (exterior) ring.

    Only correct when the box fits within a hemisphere.
    """

    geometry = {"type": "Polygon", "coordinates": [list(box.polygon_ring())]}
    return FieldCondition.of(field, {GEO_WITHIN: {GEOMETRY: geometry}})


def geo_within_polygon(field: str, box: GeoBoundingBox) -> FieldCondition:
    return FieldCondition.of(field, {GEO_WITHIN: {POLYGON: list(box.polygon())}})


def within_polygon(field: str, points: Sequence[GeoPoint]) -> FieldCondition:
    return FieldCondition.of(
        field, {GEO_WITHIN: {POLYGON: [p.as_position() for p in points]}}
    )


def within_center(field: str, center: GeoPoint, radius: float) -> FieldCondition:
    return FieldCondition.of(
        field, {GEO_WITHIN: {CENTER: [center.as_position(), radius]}}
    )


def within_center_sphere(
    field: str, center: GeoPoint, radius_rad: float
) -> FieldCondition:
    return FieldCondition.of(
        field, {GEO_WITHIN: {CENTER_SPHERE: [center.as_position(), radius_rad]}}
    )


def near(
    field: str, point: GeoPoint, max_distance_m: float | None = None
) -> FieldCondition:
    operators: dict[str, Any] = {"$near": point.as_position()}
    if max_distance_m is not None:
        operators["$maxDistance"] = meters_to_degrees(max_distance_m)
    return FieldCondition.of(field, operators)


def near_sphere(
    field: str, point: GeoPoint, max_distance: float | None = None
) -> FieldCondition:
    operators: dict[str, Any] = {"$nearSphere": point.as_position()}
    if max_distance is not None:
        operators["$maxDistance"] = max_distance
    return FieldCondition.of(field, operators)
