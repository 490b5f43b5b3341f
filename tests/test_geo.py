import math
import pytest

from domain.vehicle import Coordinate
from matching.geo import distance_km, trip_distances


def test_same_point_is_zero():
    p = Coordinate(51.5, -0.12)
    assert distance_km(p, p) == 0.0


def test_symmetric():
    a, b = Coordinate(37.77, -122.42), Coordinate(34.05, -118.24)
    assert distance_km(a, b) == pytest.approx(distance_km(b, a))


def test_one_degree_of_longitude_at_equator():
    assert distance_km(Coordinate(0, 0), Coordinate(0, 1)) == pytest.approx(111.2, abs=0.5)


def test_non_finite_propagates_nan():
    assert math.isnan(distance_km(Coordinate(float("nan"), 0), Coordinate(0, 1)))


def test_trip_distances_start_at_house(make_input):
    inp = make_input()
    commute, holiday, total = trip_distances(inp)
    assert commute == pytest.approx(13.6, abs=0.2)
    # SF -> LA is roughly 560 km as the crow flies
    assert 540 < holiday < 580
    assert total == pytest.approx(commute + holiday)
