from __future__ import annotations

import pytest

from geosearch.domain.models import GeoPoint, Location

SAMPLE_LOCATIONS: dict[str, Location] = {
    name: Location(point=GeoPoint(lat=lat, lon=lon), description=name)
    for name, lat, lon in (
        ("Cologne", 50.91147, 6.94336),
        ("Frankfurt", 50.08689, 8.67920),
        ("Berlin", 52.49094, 13.38135),
        ("Aleutian Islands", 51.90658, -176.70410),
        ("Hiroshima", 34.11124, 133.81348),
        ("Los Angeles", 34.27878, -118.21289),
        ("Thailand", 17.57858, 100.37109),
    )
}


@pytest.fixture
def sample_locations() -> dict[str, Location]:
    return dict(SAMPLE_LOCATIONS)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
