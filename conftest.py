"""Shared pytest fixtures."""

import pytest

from geocoordinate import GeoCoordinate

SAMPLE_POINTS = [
    (0.0, 0.0),
    (180.0, 90.0),
    (-180.0, -90.0),
    (180.0, -90.0),
    (-180.0, 90.0),
    (-74.0445, 40.6892),
    (28.2293, -25.7479),
    (139.6503, 35.6762),
    (-0.1278, 51.5074),
    (-122.419416, 37.774929),
    (151.2093, -33.8688),
    (0.0000001, -0.0000001),
]


@pytest.fixture
def jakarta():
    """A point south of Jakarta."""
    return GeoCoordinate(106.709437, -6.329094)


@pytest.fixture(params=SAMPLE_POINTS, ids=lambda p: f"{p[0]},{p[1]}")
def sample_point(request):
    """Spread of valid points, including the corners of the range."""
    return request.param
