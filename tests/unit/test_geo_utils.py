from __future__ import annotations

import pytest

from geosearch.domain.algorithms.geo_utils import meters_to_degrees, meters_to_radians


def test_zero_meters_is_zero() -> None:
    assert meters_to_degrees(0.0) == 0.0
    assert meters_to_radians(0.0) == 0.0


def test_meters_to_degrees_uses_69_miles_per_degree() -> None:
    # Rough sanity check: 1 degree is about 111km on the flat-earth approximation.
    assert meters_to_degrees(111_045.0) == pytest.approx(1.0, rel=1e-3)
    assert meters_to_degrees(2_000.0) == pytest.approx(2 * meters_to_degrees(1_000.0))


def test_meters_to_radians_uses_equatorial_radius() -> None:
    assert meters_to_radians(6_378_100.0) == pytest.approx(1.0)
