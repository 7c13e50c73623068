"""
Airport Finder - nearest airports for multi-modal routing.

The airport list is small and static, so lookups are a linear scan.
"""
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from src.geo.distance import haversine_km, is_in_india

DOMESTIC = "domestic"
INTERNATIONAL = "international"


@dataclass(frozen=True)
class Airport:
    code: str  # IATA code
    name: str
    city: str
    country: str
    lat: float
    lon: float
    type: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


INDIAN_AIRPORTS: List[Airport] = [
    # International hubs
    Airport("DEL", "Indira Gandhi International Airport", "Delhi", "India", 28.5562, 77.1000, INTERNATIONAL),
    Airport("BOM", "Chhatrapati Shivaji Maharaj International Airport", "Mumbai", "India", 19.0896, 72.8656, INTERNATIONAL),
    Airport("MAA", "Chennai International Airport", "Chennai", "India", 12.9941, 80.1709, INTERNATIONAL),
    Airport("BLR", "Kempegowda International Airport", "Bangalore", "India", 13.1979, 77.7063, INTERNATIONAL),
    Airport("HYD", "Rajiv Gandhi International Airport", "Hyderabad", "India", 17.2403, 78.4294, INTERNATIONAL),
    Airport("CCU", "Netaji Subhas Chandra Bose International Airport", "Kolkata", "India", 22.6547, 88.4467, INTERNATIONAL),
    Airport("COK", "Cochin International Airport", "Kochi", "India", 10.1520, 76.3872, INTERNATIONAL),
    Airport("AMD", "Sardar Vallabhbhai Patel International Airport", "Ahmedabad", "India", 23.0772, 72.6347, INTERNATIONAL),
    # Major domestic airports
    Airport("PNQ", "Pune Airport", "Pune", "India", 18.5821, 73.9197, DOMESTIC),
    Airport("GOI", "Goa International Airport", "Goa", "India", 15.3808, 73.8314, INTERNATIONAL),
    Airport("JAI", "Jaipur International Airport", "Jaipur", "India", 26.8242, 75.8122, INTERNATIONAL),
    Airport("IXC", "Chandigarh International Airport", "Chandigarh", "India", 30.6735, 76.7884, INTERNATIONAL),
    Airport("SXR", "Sheikh ul-Alam International Airport", "Srinagar", "India", 33.9871, 74.7742, DOMESTIC),
    Airport("IXB", "Bagdogra Airport", "Bagdogra", "India", 26.6812, 88.3286, DOMESTIC),
    Airport("TRV", "Trivandrum International Airport", "Trivandrum", "India", 8.4821, 76.9200, INTERNATIONAL),
]

INTERNATIONAL_AIRPORTS: List[Airport] = [
    Airport("DXB", "Dubai International Airport", "Dubai", "UAE", 25.2532, 55.3657, INTERNATIONAL),
    Airport("SIN", "Singapore Changi Airport", "Singapore", "Singapore", 1.3644, 103.9915, INTERNATIONAL),
    Airport("LHR", "London Heathrow Airport", "London", "UK", 51.4700, -0.4543, INTERNATIONAL),
    Airport("JFK", "John F. Kennedy International Airport", "New York", "USA", 40.6413, -73.7781, INTERNATIONAL),
    Airport("KUL", "Kuala Lumpur International Airport", "Kuala Lumpur", "Malaysia", 2.7456, 101.7072, INTERNATIONAL),
    Airport("BKK", "Suvarnabhumi Airport", "Bangkok", "Thailand", 13.6900, 100.7501, INTERNATIONAL),
    Airport("HKG", "Hong Kong International Airport", "Hong Kong", "China", 22.3080, 113.9185, INTERNATIONAL),
]

ALL_AIRPORTS: List[Airport] = INDIAN_AIRPORTS + INTERNATIONAL_AIRPORTS


@dataclass
class AirportPair:
    source_airport: Airport
    dest_airport: Airport
    road_to_source_airport: float  # km
    road_from_dest_airport: float  # km

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source_airport": self.source_airport.to_dict(),
            "dest_airport": self.dest_airport.to_dict(),
            "road_to_source_airport": self.road_to_source_airport,
            "road_from_dest_airport": self.road_from_dest_airport,
        }


def find_nearest_airport(lat: float, lon: float, scope: str = DOMESTIC) -> Optional[Airport]:
    """
    Find the airport closest to a location.

    Args:
        lat: Latitude
        lon: Longitude
        scope: 'domestic' searches Indian airports only,
               'international' searches every known airport

    Returns:
        Nearest airport, or None when the candidate list is empty
    """
    candidates = INDIAN_AIRPORTS if scope == DOMESTIC else ALL_AIRPORTS

    nearest: Optional[Airport] = None
    min_distance = float("inf")

    for airport in candidates:
        distance = haversine_km(lat, lon, airport.lat, airport.lon)
        if distance < min_distance:
            min_distance = distance
            nearest = airport

    return nearest


def get_nearest_airport_pair(
    source_lat: float,
    source_lon: float,
    dest_lat: float,
    dest_lon: float,
) -> Optional[AirportPair]:
    """
    Find departure and arrival airports for a route.

    The search stays domestic only when both ends are inside India.
    Road legs to and from the airports are rounded to 0.1 km.
    """
    both_domestic = is_in_india(source_lat, source_lon) and is_in_india(dest_lat, dest_lon)
    scope = DOMESTIC if both_domestic else INTERNATIONAL

    source_airport = find_nearest_airport(source_lat, source_lon, scope)
    dest_airport = find_nearest_airport(dest_lat, dest_lon, scope)

    if source_airport is None or dest_airport is None:
        return None

    return AirportPair(
        source_airport=source_airport,
        dest_airport=dest_airport,
        road_to_source_airport=round(
            haversine_km(source_lat, source_lon, source_airport.lat, source_airport.lon), 1
        ),
        road_from_dest_airport=round(
            haversine_km(dest_lat, dest_lon, dest_airport.lat, dest_airport.lon), 1
        ),
    )


def get_airport_by_code(code: str) -> Optional[Airport]:
    """Look up an airport by IATA code (case-insensitive)."""
    code = code.upper()
    for airport in ALL_AIRPORTS:
        if airport.code == code:
            return airport
    return None
