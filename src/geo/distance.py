"""
Distance Calculator - great-circle distance and transport mode advice.

Distances are in kilometers on a spherical Earth (R = 6371 km).
"""
import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

EARTH_RADIUS_KM = 6371.0

# Approximate bounding box of India
INDIA_BOUNDS = {
    "min_lat": 6.5,
    "max_lat": 35.5,
    "min_lon": 68.0,
    "max_lon": 97.5,
}


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Unrounded Haversine distance in kilometers."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push a past 1 for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great-circle distance between two coordinates using the Haversine formula.

    Args:
        lat1: Source latitude
        lon1: Source longitude
        lat2: Destination latitude
        lon2: Destination longitude

    Returns:
        Distance in kilometers, rounded to one decimal place
    """
    return round(haversine_km(lat1, lon1, lat2, lon2), 1)


def _hours(distance: float, speed_kmh: int) -> int:
    """Whole hours at ``speed_kmh``, halves rounded up."""
    return int(math.floor(distance / speed_kmh + 0.5))


@dataclass
class TransportRecommendation:
    distance: float
    recommended_mode: str
    alternative_modes: List[str] = field(default_factory=list)
    requires_airport: bool = False
    requires_railway: bool = False
    estimated_duration: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def get_transport_recommendation(distance: float) -> TransportRecommendation:
    """
    Recommend transport modes for a trip length.

    Bands:
        < 300 km        road only (60 km/h)
        300 - 800 km    train, road as alternative (80 km/h)
        800 - 2000 km   train, flight or road as alternatives
        >= 2000 km      multi-modal with flight (800 km/h)

    Args:
        distance: Distance in kilometers

    Returns:
        TransportRecommendation for the band the distance falls in
    """
    if distance < 300:
        return TransportRecommendation(
            distance=distance,
            recommended_mode="road",
            estimated_duration=f"{_hours(distance, 60)} hours",
        )
    if distance < 800:
        return TransportRecommendation(
            distance=distance,
            recommended_mode="train",
            alternative_modes=["road"],
            requires_railway=True,
            estimated_duration=f"{_hours(distance, 80)} hours",
        )
    if distance < 2000:
        return TransportRecommendation(
            distance=distance,
            recommended_mode="train",
            alternative_modes=["flight", "road"],
            requires_airport=True,
            requires_railway=True,
            estimated_duration=f"{_hours(distance, 80)} hours by train",
        )
    return TransportRecommendation(
        distance=distance,
        recommended_mode="multi-modal",
        alternative_modes=["flight"],
        requires_airport=True,
        estimated_duration=f"{_hours(distance, 800)} hours",
    )


def is_in_india(lat: float, lon: float) -> bool:
    """Check if coordinates fall inside India's approximate bounds."""
    return (
        INDIA_BOUNDS["min_lat"] <= lat <= INDIA_BOUNDS["max_lat"]
        and INDIA_BOUNDS["min_lon"] <= lon <= INDIA_BOUNDS["max_lon"]
    )


def is_international_route(source_lat: float, source_lon: float, dest_lat: float, dest_lon: float) -> bool:
    """True when exactly one end of the route is inside India."""
    return is_in_india(source_lat, source_lon) != is_in_india(dest_lat, dest_lon)
