import math

import pytest
from pydantic import ValidationError

from discovery.geo import EARTH_RADIUS_KM, distance_km, with_distance
from discovery.schemas import Coordinate

POINTS = [
    Coordinate(lat=0, lng=0),
    Coordinate(lat=-8.6705, lng=115.2126),
    Coordinate(lat=51.5074, lng=-0.1278),
    Coordinate(lat=-33.8688, lng=151.2093),
    Coordinate(lat=90, lng=0),
    Coordinate(lat=-90, lng=180),
]


class TestDistance:
    @pytest.mark.parametrize("a", POINTS)
    @pytest.mark.parametrize("b", POINTS)
    def test_symmetric(self, a, b):
        assert distance_km(a, b) == pytest.approx(distance_km(b, a), abs=1e-9)

    @pytest.mark.parametrize("a", POINTS)
    def test_same_point_is_zero(self, a):
        assert distance_km(a, a) == pytest.approx(0, abs=1e-6)

    def test_one_degree_of_longitude_at_equator(self):
        d = distance_km(Coordinate(lat=0, lng=0), Coordinate(lat=0, lng=1))
        assert d == pytest.approx(111.19, abs=0.01)

    def test_antipodal_points_are_finite(self):
        d = distance_km(Coordinate(lat=0, lng=0), Coordinate(lat=0, lng=180))
        assert math.isfinite(d)
        assert d == pytest.approx(math.pi * EARTH_RADIUS_KM, rel=1e-9)

    def test_riyadh_to_jeddah(self):
        riyadh = Coordinate(lat=24.7116, lng=46.6846)
        jeddah = Coordinate(lat=21.6231, lng=39.1104)
        assert distance_km(riyadh, jeddah) == pytest.approx(850, abs=50)


class TestCoordinate:
    @pytest.mark.parametrize("lat,lng", [(91, 0), (-90.5, 0), (0, 180.1), (0, -181)])
    def test_out_of_range_rejected(self, lat, lng):
        with pytest.raises(ValidationError):
            Coordinate(lat=lat, lng=lng)

    def test_immutable(self):
        c = Coordinate(lat=1, lng=2)
        with pytest.raises(ValidationError):
            c.lat = 3


class TestWithDistance:
    def test_attaches_distance_without_touching_source(self, make_provider):
        p = make_provider("p", 0, 1)
        out = with_distance(p, Coordinate(lat=0, lng=0))
        assert out.distance_km == pytest.approx(111.19, abs=0.01)
        assert p.distance_km is None
        assert out is not p

    def test_unknown_when_provider_has_no_coordinate(self, make_provider):
        out = with_distance(make_provider("p"), Coordinate(lat=0, lng=0))
        assert out.distance_km is None

    def test_unknown_when_viewer_missing(self, make_provider):
        p = make_provider("p", 0, 1, distance_km=12.0)
        assert with_distance(p, None).distance_km is None
