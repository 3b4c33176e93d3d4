import math

import pytest

from src.geo import EARTH_RADIUS_KM, distance_km
from src.models import Coordinate


def _c(lat: float, lon: float) -> Coordinate:
    return Coordinate(latitude=lat, longitude=lon)


def test_quarter_great_circle():
    d = distance_km(_c(0, 0), _c(0, 90))
    assert d == pytest.approx(10007.5, abs=0.1)
    assert d == pytest.approx(math.pi * EARTH_RADIUS_KM / 2)


def test_identity():
    for c in (_c(0, 0), _c(40.7128, -74.006), _c(-33.86, 151.2), _c(90, 0)):
        assert distance_km(c, c) == 0


@pytest.mark.parametrize(
    "a,b",
    [
        ((40.7128, -74.006), (51.5074, -0.1278)),
        ((-33.86, 151.2), (35.68, 139.69)),
        ((0, -179.9), (0, 179.9)),
        ((89.9, 10), (-89.9, -170)),
    ],
)
def test_symmetry(a, b):
    ab = distance_km(_c(*a), _c(*b))
    ba = distance_km(_c(*b), _c(*a))
    assert ab == pytest.approx(ba, rel=1e-9)


def test_antipodal_points_do_not_overflow():
    d = distance_km(_c(0, 0), _c(0, 180))
    assert d == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_crossing_antimeridian_is_short():
    assert distance_km(_c(0, -179.9), _c(0, 179.9)) < 25


def test_out_of_range_coordinate_is_nan():
    bad = Coordinate.model_construct(latitude=120.0, longitude=0.0)
    assert math.isnan(distance_km(bad, _c(0, 0)))
    assert math.isnan(distance_km(_c(0, 0), bad))


def test_non_finite_coordinate_is_nan():
    bad = Coordinate.model_construct(latitude=0.0, longitude=math.nan)
    assert math.isnan(distance_km(_c(0, 0), bad))
