from __future__ import annotations

import copy
import re
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

from shapely.geometry import Point, Polygon

from geosearch.app.ports.output import ILocationStore
from geosearch.domain.exceptions import StoreQueryFailedError

_MISSING = object()


@dataclass(slots=True)
class InMemoryLocationStore(ILocationStore):
    """Process-local document store.

    Evaluates the subset of the MongoDB query language that the search
    service emits, with planar geometry (shapely) for the ``$geoWithin``
    shapes. Used when no MongoDB is configured and in tests.
    """

    documents: list[dict[str, Any]] = field(default_factory=list)

    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def find(self, query: Mapping[str, Any]) -> list[Mapping[str, Any]]:
        with self._lock:
            snapshot = list(self.documents)
        return [copy.deepcopy(doc) for doc in snapshot if _matches(doc, query)]

    def insert_many(self, documents: Iterable[Mapping[str, Any]]) -> int:
        docs = [copy.deepcopy(dict(d)) for d in documents]
        with self._lock:
            self.documents.extend(docs)
        return len(docs)

    def clear(self) -> None:
        with self._lock:
            self.documents.clear()


def _matches(doc: Mapping[str, Any], query: Mapping[str, Any]) -> bool:
    for key, condition in query.items():
        if key == "$and":
            if not all(_matches(doc, q) for q in condition):
                return False
        elif key == "$or":
            if not any(_matches(doc, q) for q in condition):
                return False
        elif key.startswith("$"):
            raise StoreQueryFailedError(f"Unsupported top-level operator: {key}")
        elif not _matches_field(_lookup(doc, key), condition):
            return False
    return True


def _lookup(doc: Mapping[str, Any], path: str) -> Any:
    value: Any = doc
    for part in path.split("."):
        if not isinstance(value, Mapping) or part not in value:
            return _MISSING
        value = value[part]
    return value


def _is_operator_doc(condition: Any) -> bool:
    return (
        isinstance(condition, Mapping)
        and bool(condition)
        and all(str(k).startswith("$") for k in condition)
    )


_REGEX_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL, "x": re.VERBOSE}


def _compile_regex(pattern: Any, options: str) -> re.Pattern[str]:
    flags = 0
    for letter in options:
        if letter not in _REGEX_FLAGS:
            raise StoreQueryFailedError(f"Unsupported regex option: {letter}")
        flags |= _REGEX_FLAGS[letter]
    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        raise StoreQueryFailedError(f"Invalid regex {pattern!r}: {exc}") from exc


def _matches_field(value: Any, condition: Any) -> bool:
    if not _is_operator_doc(condition):
        return _equals(value, condition)
    ops = dict(condition)
    options = ops.pop("$options", None)
    if options is not None:
        if "$regex" not in ops:
            raise StoreQueryFailedError("$options needs a $regex")
        ops["$regex"] = _compile_regex(ops["$regex"], options)
    return all(_apply_operator(op, value, arg) for op, arg in ops.items())


def _equals(value: Any, expected: Any) -> bool:
    if value is _MISSING:
        return expected is None
    if value == expected:
        return True
    return isinstance(value, list) and expected in value


def _compare(value: Any, arg: Any, check: Callable[[Any, Any], bool]) -> bool:
    if value is _MISSING:
        return False
    try:
        return check(value, arg)
    except TypeError:
        return False


def _apply_operator(op: str, value: Any, arg: Any) -> bool:
    if op == "$eq":
        return _equals(value, arg)
    if op == "$ne":
        return not _equals(value, arg)
    if op == "$gt":
        return _compare(value, arg, lambda a, b: a > b)
    if op == "$gte":
        return _compare(value, arg, lambda a, b: a >= b)
    if op == "$lt":
        return _compare(value, arg, lambda a, b: a < b)
    if op == "$lte":
        return _compare(value, arg, lambda a, b: a <= b)
    if op == "$in":
        return any(_equals(value, candidate) for candidate in arg)
    if op == "$nin":
        return not any(_equals(value, candidate) for candidate in arg)
    if op == "$exists":
        return (value is not _MISSING) == bool(arg)
    if op == "$regex":
        if not isinstance(arg, re.Pattern):
            arg = _compile_regex(arg, "")
        return isinstance(value, str) and arg.search(value) is not None
    if op == "$all":
        return isinstance(value, list) and all(item in value for item in arg)
    if op == "$size":
        return isinstance(value, list) and len(value) == arg
    if op == "$mod":
        divisor, remainder = arg
        return _compare(value, arg, lambda a, _: a % divisor == remainder)
    if op == "$geoWithin":
        return _geo_within(value, arg)
    raise StoreQueryFailedError(f"Unsupported operator: {op}")


def _as_point(value: Any) -> Point | None:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        return None
    lon, lat = value
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in (lon, lat)):
        return None
    return Point(lon, lat)


def _geo_within(value: Any, shape: Mapping[str, Any]) -> bool:
    point = _as_point(value)

    if "$box" in shape:
        (x1, y1), (x2, y2) = shape["$box"]
        if point is None:
            return False
        return (
            min(x1, x2) <= point.x <= max(x1, x2)
            and min(y1, y2) <= point.y <= max(y1, y2)
        )
    if "$polygon" in shape:
        return point is not None and Polygon(shape["$polygon"]).covers(point)
    if "$center" in shape:
        center, radius = shape["$center"]
        return point is not None and Point(*center).distance(point) <= radius
    if "$geometry" in shape:
        geometry = shape["$geometry"]
        if geometry.get("type") != "Polygon":
            raise StoreQueryFailedError(
                f"Unsupported $geometry type: {geometry.get('type')}"
            )
        rings = geometry["coordinates"]
        return point is not None and Polygon(rings[0], rings[1:]).covers(point)

    raise StoreQueryFailedError(f"Unsupported $geoWithin shape: {sorted(shape)}")
