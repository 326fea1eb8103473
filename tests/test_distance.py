"""Unit tests for great-circle distances."""

from ticket_to_europe.domain.distance import distance_km, haversine_km, route_distance_km
from ticket_to_europe.domain.entities import City, Coordinate

LONDON = City("London", Coordinate(51.5074, -0.1278))
PARIS = City("Paris", Coordinate(48.8566, 2.3522))
BRUSSELS = City("Brussels", Coordinate(50.8503, 4.3517))


class TestHaversine:
    def test_same_point_is_zero(self):
        assert haversine_km(51.5, -0.12, 51.5, -0.12) == 0.0

    def test_london_paris(self):
        d = distance_km(LONDON.coordinate, PARIS.coordinate)
        assert 342.5 < d < 345.0

    def test_symmetric(self):
        d1 = distance_km(LONDON.coordinate, BRUSSELS.coordinate)
        d2 = distance_km(BRUSSELS.coordinate, LONDON.coordinate)
        assert abs(d1 - d2) < 1e-6

    def test_one_degree_on_equator(self):
        # 2 * pi * 6371 / 360
        assert abs(haversine_km(0.0, 0.0, 0.0, 1.0) - 111.19) < 0.01


class TestRouteDistance:
    def test_single_city_route_is_zero(self):
        assert route_distance_km([LONDON]) == 0.0

    def test_empty_route_is_zero(self):
        assert route_distance_km([]) == 0.0

    def test_sums_consecutive_legs(self):
        expected = distance_km(LONDON.coordinate, PARIS.coordinate) + distance_km(
            PARIS.coordinate, BRUSSELS.coordinate
        )
        assert abs(route_distance_km([LONDON, PARIS, BRUSSELS]) - expected) < 1e-9
