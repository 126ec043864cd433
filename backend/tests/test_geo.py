from __future__ import annotations

import math

import pytest

from backend.discovery.geo import EARTH_RADIUS_KM, distance_km
from backend.discovery.models import Coordinate

HELSINKI = Coordinate(lon=24.93837, lat=60.16985)
TALLINN = Coordinate(lon=24.75353, lat=59.43696)


def test_distance_to_self_is_zero():
    assert distance_km(HELSINKI, HELSINKI) == 0.0


def test_distance_is_symmetric():
    assert distance_km(HELSINKI, TALLINN) == pytest.approx(distance_km(TALLINN, HELSINKI))


def test_one_degree_of_latitude():
    expected = math.pi * EARTH_RADIUS_KM / 180
    d = distance_km(Coordinate(0.0, 0.0), Coordinate(0.0, 1.0))
    assert d == pytest.approx(expected)
    assert d == pytest.approx(111.195, abs=0.001)


def test_helsinki_to_tallinn():
    assert distance_km(HELSINKI, TALLINN) == pytest.approx(82.2, abs=1.0)


def test_out_of_range_coordinates_do_not_fail():
    d = distance_km(Coordinate(200.0, 95.0), Coordinate(-200.0, -95.0))
    assert math.isfinite(d)
    assert d >= 0.0


def test_pole_mirrored_points_do_not_fail():
    for lat in range(91, 180):
        for dlon in (180.0, -180.0, 540.0):
            d = distance_km(Coordinate(0.0, float(lat)), Coordinate(dlon, 180.0 - lat))
            assert math.isfinite(d), (lat, dlon)
            assert d >= 0.0


def test_nan_propagates():
    assert math.isnan(distance_km(Coordinate(float("nan"), 0.0), Coordinate(0.0, 0.0)))
