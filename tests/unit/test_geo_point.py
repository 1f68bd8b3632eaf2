import pytest
from geosearch.domain.exceptions import OutOfRangeError
from geosearch.domain.models.geo import GeoPoint


def test_geo_point_accepts_valid_coordinates() -> None:
    p = GeoPoint(lat=50.91147, lon=6.94336)
    assert p.lat == 50.91147
    assert p.lon == 6.94336


@pytest.mark.parametrize(("lat", "lon"), [(-90.0, -180.0), (90.0, 180.0)])
def test_geo_point_bounds_are_inclusive(lat: float, lon: float) -> None:
    p = GeoPoint(lat=lat, lon=lon)
    assert (p.lat, p.lon) == (lat, lon)


@pytest.mark.parametrize(
    ("lat", "lon"),
    [
        (-90.0001, 0.0),
        (90.0001, 0.0),
        (0.0, -180.0001),
        (0.0, 180.0001),
    ],
)
def test_geo_point_rejects_out_of_range_coordinates(lat: float, lon: float) -> None:
    with pytest.raises(OutOfRangeError):
        GeoPoint(lat=lat, lon=lon)


def test_out_of_range_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        GeoPoint(lat=91.0, lon=0.0)


def test_equality_is_exact() -> None:
    assert GeoPoint(lat=10.0, lon=20.0) == GeoPoint(lat=10.0, lon=20.0)
    assert GeoPoint(lat=10.0, lon=20.0) != GeoPoint(lat=10.0, lon=20.0000001)


def test_position_is_lon_lat_order() -> None:
    p = GeoPoint(lat=34.11124, lon=133.81348)
    assert p.as_position() == (133.81348, 34.11124)
    assert GeoPoint.from_position([133.81348, 34.11124]) == p


def test_is_origin() -> None:
    assert GeoPoint(lat=0.0, lon=0.0).is_origin()
    assert not GeoPoint(lat=0.0, lon=1.0).is_origin()
