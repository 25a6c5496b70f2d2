"""Unit tests for packages.cafes.geo module."""

import pytest

from packages.cafes.geo import (
    DEFAULT_RADIUS_M,
    MAX_RADIUS_M,
    bounding_box,
    haversine_distance,
    nearest,
    normalize_radius,
    parse_int_prefix,
    round_coordinate,
)

BERLIN = (52.5200, 13.4050)


@pytest.mark.unit
class TestDistance:
    def test_zero_distance(self):
        assert haversine_distance(*BERLIN, *BERLIN) == 0

    def test_known_distance(self):
        # Berlin to Hamburg is roughly 255 km
        distance = haversine_distance(*BERLIN, 53.5511, 9.9937)
        assert 250_000 < distance < 260_000


@pytest.mark.unit
class TestBoundingBox:
    def test_contains_center(self):
        box = bounding_box(*BERLIN, 2000)
        assert box.min_lat < BERLIN[0] < box.max_lat
        assert box.min_lng < BERLIN[1] < box.max_lng

    def test_clamped_at_pole(self):
        box = bounding_box(89.99, 179.99, MAX_RADIUS_M)
        assert box.max_lat == 90.0
        assert box.max_lng == 180.0


@pytest.mark.unit
class TestNormalizeRadius:
    @pytest.mark.parametrize(
        "radius, expected",
        [
            (None, DEFAULT_RADIUS_M),
            ("abc", DEFAULT_RADIUS_M),
            ("", DEFAULT_RADIUS_M),
            ("500", 500),
            ("1500.5", 1500),
            (" 800m", 800),
            (750.9, 750),
            ("-300", DEFAULT_RADIUS_M),
            ("0", DEFAULT_RADIUS_M),
            (True, DEFAULT_RADIUS_M),
            (50000, MAX_RADIUS_M),
        ],
    )
    def test_normalize(self, radius, expected):
        assert normalize_radius(radius) == expected

    def test_custom_default_and_maximum(self):
        assert normalize_radius(None, default=5000, maximum=20000) == 5000
        assert normalize_radius("25000", default=5000, maximum=20000) == 20000


@pytest.mark.unit
class TestParseIntPrefix:
    @pytest.mark.parametrize(
        "radius, expected",
        [("1500.5", 1500), ("+42", 42), ("-7", -7), ("x1", None), (float("nan"), None)],
    )
    def test_parse(self, radius, expected):
        assert parse_int_prefix(radius) == expected


@pytest.mark.unit
class TestNearest:
    def test_filters_and_sorts(self):
        cafes = [
            {"id": "far", "latitude": 52.5400, "longitude": 13.4050},
            {"id": "near", "latitude": 52.5205, "longitude": 13.4050},
            {"id": "out", "latitude": 53.5511, "longitude": 9.9937},
        ]
        result = nearest(*BERLIN, 5000, cafes)
        assert [cafe["id"] for cafe, _ in result] == ["near", "far"]
        assert result[0][1] < result[1][1]

    def test_limit(self):
        cafes = [{"id": str(i), "latitude": 52.52, "longitude": 13.405} for i in range(5)]
        assert len(nearest(*BERLIN, 1000, cafes, limit=3)) == 3

    def test_round_coordinate(self):
        assert round_coordinate(52.520008) == 52.52
