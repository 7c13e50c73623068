"""
Flight Path Generator - polylines for map display.

Paths are lists of (lat, lon) tuples in degrees.
"""
import math
from typing import List, Tuple

from src.geo.distance import haversine_km

LatLng = Tuple[float, float]


def generate_flight_path(
    start_lat: float,
    start_lon: float,
    end_lat: float,
    end_lon: float,
    num_points: int = 50,
) -> List[LatLng]:
    """
    Interpolate points along the great circle between two locations.

    Args:
        start_lat: Starting latitude
        start_lon: Starting longitude
        end_lat: Ending latitude
        end_lon: Ending longitude
        num_points: Number of segments; the path has num_points + 1 points

    Returns:
        List of (lat, lon) tuples from start to end
    """
    if num_points < 1:
        raise ValueError("num_points must be at least 1")

    lat1, lon1 = math.radians(start_lat), math.radians(start_lon)
    lat2, lon2 = math.radians(end_lat), math.radians(end_lon)

    # Angular distance between the endpoints
    h = (
        math.sin((lat1 - lat2) / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin((lon1 - lon2) / 2) ** 2
    )
    d = 2 * math.asin(math.sqrt(min(1.0, max(0.0, h))))

    if d == 0:
        return [(start_lat, start_lon)] * (num_points + 1)

    path: List[LatLng] = []
    for i in range(num_points + 1):
        f = i / num_points

        a = math.sin((1 - f) * d) / math.sin(d)
        b = math.sin(f * d) / math.sin(d)

        x = a * math.cos(lat1) * math.cos(lon1) + b * math.cos(lat2) * math.cos(lon2)
        y = a * math.cos(lat1) * math.sin(lon1) + b * math.cos(lat2) * math.sin(lon2)
        z = a * math.sin(lat1) + b * math.sin(lat2)

        lat = math.atan2(z, math.sqrt(x * x + y * y))
        lon = math.atan2(y, x)

        path.append((math.degrees(lat), math.degrees(lon)))

    return path


def generate_curved_path(
    start_lat: float,
    start_lon: float,
    end_lat: float,
    end_lon: float,
    num_points: int = 30,
    curvature: float = 0.3,
) -> List[LatLng]:
    """
    Quadratic Bezier arc between two points, for short hops.

    The control point sits on the perpendicular bisector of the segment,
    offset by ``curvature`` times the segment length.
    """
    if num_points < 1:
        raise ValueError("num_points must be at least 1")

    mid_lat = (start_lat + end_lat) / 2
    mid_lon = (start_lon + end_lon) / 2

    d_lat = end_lat - start_lat
    d_lon = end_lon - start_lon
    length = math.sqrt(d_lat * d_lat + d_lon * d_lon)

    perp_lat, perp_lon = -d_lon, d_lat
    perp_mag = math.sqrt(perp_lat * perp_lat + perp_lon * perp_lon)

    if perp_mag == 0:
        control_lat, control_lon = mid_lat, mid_lon
    else:
        control_lat = mid_lat + (perp_lat / perp_mag) * length * curvature
        control_lon = mid_lon + (perp_lon / perp_mag) * length * curvature

    path: List[LatLng] = []
    for i in range(num_points + 1):
        t = i / num_points
        mt = 1 - t

        lat = mt * mt * start_lat + 2 * mt * t * control_lat + t * t * end_lat
        lon = mt * mt * start_lon + 2 * mt * t * control_lon + t * t * end_lon

        path.append((lat, lon))

    return path


def calculate_path_distance(path: List[LatLng]) -> float:
    """Sum of Haversine segment lengths in km, rounded to 0.1."""
    if len(path) < 2:
        return 0.0

    total = 0.0
    for (lat1, lon1), (lat2, lon2) in zip(path, path[1:]):
        total += haversine_km(lat1, lon1, lat2, lon2)

    return round(total, 1)


def _perpendicular_distance(point: LatLng, line_start: LatLng, line_end: LatLng) -> float:
    """Planar distance from a point to the closest point of a segment."""
    px, py = point
    x1, y1 = line_start
    x2, y2 = line_end

    dx = x2 - x1
    dy = y2 - y1

    mag_sq = dx * dx + dy * dy
    if mag_sq == 0:
        return math.hypot(px - x1, py - y1)

    u = ((px - x1) * dx + (py - y1) * dy) / mag_sq

    if u < 0:
        closest_x, closest_y = x1, y1
    elif u > 1:
        closest_x, closest_y = x2, y2
    else:
        closest_x, closest_y = x1 + u * dx, y1 + u * dy

    return math.hypot(px - closest_x, py - closest_y)


def simplify_path(path: List[LatLng], tolerance: float = 0.01) -> List[LatLng]:
    """
    Douglas-Peucker simplification.

    Args:
        path: Original path
        tolerance: Maximum allowed deviation, in degrees

    Returns:
        Simplified path; the first and last points are always kept
    """
    if len(path) <= 2:
        return list(path)

    max_distance = 0.0
    max_index = 0
    for i in range(1, len(path) - 1):
        distance = _perpendicular_distance(path[i], path[0], path[-1])
        if distance > max_distance:
            max_distance = distance
            max_index = i

    if max_distance > tolerance:
        left = simplify_path(path[:max_index + 1], tolerance)
        right = simplify_path(path[max_index:], tolerance)
        return left[:-1] + right

    return [path[0], path[-1]]
