"""
Unit tests for the geo utilities: distances, transport bands, airports and paths.
"""
import pytest

from src.geo import (
    calculate_distance,
    calculate_path_distance,
    find_nearest_airport,
    generate_curved_path,
    generate_flight_path,
    get_airport_by_code,
    get_nearest_airport_pair,
    get_transport_recommendation,
    is_in_india,
    is_international_route,
    simplify_path,
)

DELHI = (28.6139, 77.2090)
MUMBAI = (19.0760, 72.8777)
LONDON = (51.5074, -0.1278)


class TestDistance:
    """Test Haversine distance and the India bounds checks."""

    def test_delhi_to_mumbai(self):
        distance = calculate_distance(*DELHI, *MUMBAI)
        assert 1130 < distance < 1170

    def test_distance_is_rounded_to_one_decimal(self):
        distance = calculate_distance(*DELHI, *MUMBAI)
        assert distance == round(distance, 1)

    def test_same_point_is_zero(self):
        assert calculate_distance(*DELHI, *DELHI) == 0.0

    def test_distance_is_symmetric(self):
        assert calculate_distance(*DELHI, *MUMBAI) == calculate_distance(*MUMBAI, *DELHI)

    def test_antipodal_points_are_half_the_circumference(self):
        distance = calculate_distance(-82, -179, 82, 1)
        assert distance == pytest.approx(20015.1, abs=0.2)

    def test_is_in_india(self):
        assert is_in_india(*DELHI) is True
        assert is_in_india(*LONDON) is False

    def test_international_route_needs_exactly_one_end_in_india(self):
        assert is_international_route(*DELHI, *LONDON) is True
        assert is_international_route(*LONDON, *DELHI) is True
        assert is_international_route(*DELHI, *MUMBAI) is False
        assert is_international_route(*LONDON, 40.7128, -74.0060) is False


class TestTransportRecommendation:
    """Test the distance bands."""

    def test_short_trip_is_road(self):
        rec = get_transport_recommendation(100)
        assert rec.recommended_mode == "road"
        assert rec.alternative_modes == []
        assert rec.estimated_duration == "2 hours"
        assert not rec.requires_airport
        assert not rec.requires_railway

    def test_medium_trip_is_train_with_road_alternative(self):
        rec = get_transport_recommendation(500)
        assert rec.recommended_mode == "train"
        assert rec.alternative_modes == ["road"]
        assert rec.requires_railway is True
        assert rec.requires_airport is False
        assert rec.estimated_duration == "6 hours"

    def test_long_trip_adds_flight_alternative(self):
        rec = get_transport_recommendation(1200)
        assert rec.recommended_mode == "train"
        assert rec.alternative_modes == ["flight", "road"]
        assert rec.requires_airport is True
        assert rec.requires_railway is True
        assert rec.estimated_duration == "15 hours by train"

    def test_very_long_trip_is_multi_modal(self):
        rec = get_transport_recommendation(2400)
        assert rec.recommended_mode == "multi-modal"
        assert rec.alternative_modes == ["flight"]
        assert rec.requires_airport is True
        assert rec.estimated_duration == "3 hours"

    @pytest.mark.parametrize("distance,mode", [
        (299.9, "road"),
        (300, "train"),
        (799.9, "train"),
        (2000, "multi-modal"),
    ])
    def test_band_boundaries(self, distance, mode):
        assert get_transport_recommendation(distance).recommended_mode == mode

    @pytest.mark.parametrize("distance,duration", [
        (150, "3 hours"),
        (90, "2 hours"),
        (360, "5 hours"),
        (1000, "13 hours by train"),
        (2800, "4 hours"),
    ])
    def test_half_hours_round_up(self, distance, duration):
        assert get_transport_recommendation(distance).estimated_duration == duration

    def test_to_dict(self):
        data = get_transport_recommendation(100).to_dict()
        assert data["distance"] == 100
        assert data["recommended_mode"] == "road"


class TestAirports:
    """Test airport lookups."""

    def test_nearest_domestic_airport(self):
        airport = find_nearest_airport(18.5204, 73.8567)
        assert airport.code == "PNQ"

    def test_international_scope_includes_foreign_airports(self):
        airport = find_nearest_airport(25.2048, 55.2708, scope="international")
        assert airport.code == "DXB"

    def test_domestic_scope_only_returns_indian_airports(self):
        airport = find_nearest_airport(25.2048, 55.2708, scope="domestic")
        assert airport.country == "India"

    def test_domestic_pair(self):
        pair = get_nearest_airport_pair(*DELHI, *MUMBAI)
        assert pair.source_airport.code == "DEL"
        assert pair.dest_airport.code == "BOM"
        assert pair.road_to_source_airport > 0

    def test_international_pair(self):
        pair = get_nearest_airport_pair(*DELHI, *LONDON)
        assert pair.source_airport.code == "DEL"
        assert pair.dest_airport.code == "LHR"

    def test_pair_to_dict(self):
        data = get_nearest_airport_pair(*DELHI, *MUMBAI).to_dict()
        assert set(data) == {
            "source_airport", "dest_airport", "road_to_source_airport", "road_from_dest_airport",
        }
        assert data["source_airport"]["code"] == "DEL"

    def test_lookup_by_code_is_case_insensitive(self):
        assert get_airport_by_code("bom").city == "Mumbai"

    def test_unknown_code(self):
        assert get_airport_by_code("XXX") is None


class TestFlightPath:
    """Test path generation and simplification."""

    def test_path_has_num_points_plus_one(self):
        path = generate_flight_path(*DELHI, *MUMBAI, num_points=10)
        assert len(path) == 11

    def test_path_endpoints(self):
        path = generate_flight_path(*DELHI, *MUMBAI, num_points=10)
        assert path[0] == pytest.approx(DELHI, abs=1e-6)
        assert path[-1] == pytest.approx(MUMBAI, abs=1e-6)

    def test_identical_endpoints(self):
        path = generate_flight_path(*DELHI, *DELHI, num_points=4)
        assert path == [DELHI] * 5

    def test_antipodal_flight_path(self):
        path = generate_flight_path(-82, -179, 82, 1, num_points=4)
        assert len(path) == 5
        assert path[0] == pytest.approx((-82, -179), abs=1e-6)

    def test_num_points_must_be_positive(self):
        with pytest.raises(ValueError):
            generate_flight_path(*DELHI, *MUMBAI, num_points=0)

    def test_curved_path_endpoints(self):
        path = generate_curved_path(*DELHI, *MUMBAI, num_points=10, curvature=0.3)
        assert len(path) == 11
        assert path[0] == pytest.approx(DELHI)
        assert path[-1] == pytest.approx(MUMBAI)

    def test_curved_path_bends_away_from_midpoint(self):
        midpoint = ((DELHI[0] + MUMBAI[0]) / 2, (DELHI[1] + MUMBAI[1]) / 2)
        straight = generate_curved_path(*DELHI, *MUMBAI, num_points=2, curvature=0)
        curved = generate_curved_path(*DELHI, *MUMBAI, num_points=2, curvature=0.3)
        assert straight[1] == pytest.approx(midpoint)
        assert curved[1] != pytest.approx(midpoint)

    def test_path_distance(self):
        assert calculate_path_distance([(0.0, 0.0), (0.0, 1.0)]) == pytest.approx(111.2, abs=0.1)

    def test_path_distance_of_single_point(self):
        assert calculate_path_distance([(0.0, 0.0)]) == 0.0

    def test_simplify_collinear_points(self):
        path = [(0.0, 0.0), (0.0, 1.0), (0.0, 2.0), (0.0, 3.0)]
        assert simplify_path(path) == [(0.0, 0.0), (0.0, 3.0)]

    def test_simplify_keeps_corners(self):
        path = [(0.0, 0.0), (1.0, 1.0), (0.0, 2.0)]
        assert simplify_path(path, tolerance=0.01) == path

    def test_simplify_short_path_unchanged(self):
        path = [(0.0, 0.0), (1.0, 1.0)]
        assert simplify_path(path) == path
