from __future__ import annotations

from numbers import Real
from typing import Any, Mapping

from geosearch.domain.exceptions import MalformedDocumentError, OutOfRangeError
from geosearch.domain.models import GeoPoint, Location
from geosearch.domain.query import DEFAULT_POINT_FIELD

DESCRIPTION_FIELD = "d"


def encode_location(
    location: Location, *, point_field: str = DEFAULT_POINT_FIELD
) -> dict[str, Any]:
    """Store representation: ``{"gl": [lon, lat], "d": description}``."""

    document: dict[str, Any] = {DESCRIPTION_FIELD: location.description}
    if location.point is not None:
        document[point_field] = list(location.point.as_position())
    return document


def decode_location(
    document: Mapping[str, Any], *, point_field: str = DEFAULT_POINT_FIELD
) -> Location:
    """Read a stored document back into a Location.

    Raises MalformedDocumentError when the point field is missing or is not a
    ``[lon, lat]`` pair of in-range numbers.
    """

    raw_description = document.get(DESCRIPTION_FIELD)
    description = None if raw_description is None else str(raw_description)

    raw_point = document.get(point_field)
    if raw_point is None:
        raise MalformedDocumentError(
            f"Document has no '{point_field}' field", description=description
        )
    if (
        isinstance(raw_point, (str, bytes, Mapping))
        or not hasattr(raw_point, "__len__")
        or len(raw_point) != 2
        or not all(
            isinstance(v, Real) and not isinstance(v, bool) for v in raw_point
        )
    ):
        raise MalformedDocumentError(
            f"Field '{point_field}' is not a [lon, lat] pair: {raw_point!r}",
            description=description,
        )

    try:
        point = GeoPoint.from_position(raw_point)
    except OutOfRangeError as exc:
        raise MalformedDocumentError(str(exc), description=description) from exc

    return Location(point=point, description=description)
