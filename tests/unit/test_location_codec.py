from __future__ import annotations

import pytest

from geosearch.app.services.location_codec import decode_location, encode_location
from geosearch.domain.exceptions import MalformedDocumentError
from geosearch.domain.models import GeoPoint, Location


def test_encode_stores_point_as_lon_lat() -> None:
    location = Location(point=GeoPoint(lat=50.91147, lon=6.94336), description="Cologne")
    assert encode_location(location) == {"gl": [6.94336, 50.91147], "d": "Cologne"}


def test_encode_omits_missing_point() -> None:
    assert encode_location(Location(point=None, description="nowhere")) == {
        "d": "nowhere"
    }


def test_decode_swaps_to_lat_lon() -> None:
    location = decode_location({"_id": 1, "gl": [133.81348, 34.11124], "d": "Hiroshima"})
    assert location == Location(
        point=GeoPoint(lat=34.11124, lon=133.81348), description="Hiroshima"
    )


def test_decode_honours_custom_point_field() -> None:
    location = decode_location({"loc": [1.0, 2.0], "d": "x"}, point_field="loc")
    assert location.point == GeoPoint(lat=2.0, lon=1.0)


def test_decode_accepts_integer_coordinates() -> None:
    assert decode_location({"gl": [8, 50], "d": "x"}).point == GeoPoint(lat=50.0, lon=8.0)


@pytest.mark.parametrize(
    "document",
    [
        {"d": "no point"},
        {"gl": None, "d": "null point"},
        {"gl": [1.0], "d": "short"},
        {"gl": [1.0, 2.0, 3.0], "d": "long"},
        {"gl": "1,2", "d": "string"},
        {"gl": {"lon": 1.0, "lat": 2.0}, "d": "mapping"},
        {"gl": [True, 2.0], "d": "bool"},
        {"gl": [200.0, 2.0], "d": "out of range"},
    ],
)
def test_decode_rejects_malformed_point(document) -> None:
    with pytest.raises(MalformedDocumentError) as exc_info:
        decode_location(document)
    assert exc_info.value.description == document["d"]
