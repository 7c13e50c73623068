"""
Geo module - distance, airport and path utilities for route planning.
"""
from src.geo.distance import (
    calculate_distance,
    get_transport_recommendation,
    is_in_india,
    is_international_route,
    TransportRecommendation,
)
from src.geo.airports import (
    Airport,
    AirportPair,
    INDIAN_AIRPORTS,
    INTERNATIONAL_AIRPORTS,
    find_nearest_airport,
    get_nearest_airport_pair,
    get_airport_by_code,
)
from src.geo.flight_path import (
    generate_flight_path,
    generate_curved_path,
    calculate_path_distance,
    simplify_path,
)

__all__ = [
    "calculate_distance",
    "get_transport_recommendation",
    "is_in_india",
    "is_international_route",
    "TransportRecommendation",
    "Airport",
    "AirportPair",
    "INDIAN_AIRPORTS",
    "INTERNATIONAL_AIRPORTS",
    "find_nearest_airport",
    "get_nearest_airport_pair",
    "get_airport_by_code",
    "generate_flight_path",
    "generate_curved_path",
    "calculate_path_distance",
    "simplify_path",
]
