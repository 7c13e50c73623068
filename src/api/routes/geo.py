"""
Geo Routes - Distance, airports and map polylines.

These endpoints are pure computation; nothing touches a database.
"""
from fastapi import APIRouter, Query

from src.core.exceptions import NotFoundError
from src.core.logging_config import get_logger
from src.geo import (
    calculate_distance,
    calculate_path_distance,
    find_nearest_airport,
    generate_curved_path,
    generate_flight_path,
    get_airport_by_code,
    get_nearest_airport_pair,
    get_transport_recommendation,
    is_international_route,
    simplify_path,
)
from src.geo.airports import DOMESTIC, INTERNATIONAL
from src.models.common import ApiResponse
from src.models.geo import FlightPathRequest, SimplifyRequest

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/geo",
    tags=["Geo"],
)


def _points(path):
    return [{"lat": lat, "lng": lon} for lat, lon in path]


@router.get("/distance", response_model=ApiResponse, summary="Distance and transport recommendation")
async def distance(
    source_lat: float = Query(..., ge=-90, le=90, alias="sourceLat"),
    source_lon: float = Query(..., ge=-180, le=180, alias="sourceLon"),
    dest_lat: float = Query(..., ge=-90, le=90, alias="destLat"),
    dest_lon: float = Query(..., ge=-180, le=180, alias="destLon"),
) -> ApiResponse:
    km = calculate_distance(source_lat, source_lon, dest_lat, dest_lon)
    recommendation = get_transport_recommendation(km)
    return ApiResponse(data={
        "distanceKm": km,
        "international": is_international_route(source_lat, source_lon, dest_lat, dest_lon),
        "recommendation": recommendation.to_dict(),
    })


@router.get("/airports/nearest", response_model=ApiResponse, summary="Nearest airport to a point")
async def nearest_airport(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    scope: str = Query(default=DOMESTIC, pattern=f"^({DOMESTIC}|{INTERNATIONAL})$"),
) -> ApiResponse:
    airport = find_nearest_airport(lat, lon, scope)
    if airport is None:
        raise NotFoundError("Airport")
    return ApiResponse(data={
        **airport.to_dict(),
        "distanceKm": calculate_distance(lat, lon, airport.lat, airport.lon),
    })


@router.get("/airports/pair", response_model=ApiResponse, summary="Departure and arrival airports for a route")
async def airport_pair(
    source_lat: float = Query(..., ge=-90, le=90, alias="sourceLat"),
    source_lon: float = Query(..., ge=-180, le=180, alias="sourceLon"),
    dest_lat: float = Query(..., ge=-90, le=90, alias="destLat"),
    dest_lon: float = Query(..., ge=-180, le=180, alias="destLon"),
) -> ApiResponse:
    pair = get_nearest_airport_pair(source_lat, source_lon, dest_lat, dest_lon)
    if pair is None:
        raise NotFoundError("Airport pair")
    return ApiResponse(data=pair.to_dict())


@router.get("/airports/{code}", response_model=ApiResponse, summary="Airport by IATA code")
async def airport_by_code(code: str) -> ApiResponse:
    airport = get_airport_by_code(code)
    if airport is None:
        raise NotFoundError("Airport", code.upper())
    return ApiResponse(data=airport.to_dict())


@router.post("/flight-path", response_model=ApiResponse, summary="Polyline between two points")
async def flight_path(payload: FlightPathRequest) -> ApiResponse:
    if payload.curved:
        path = generate_curved_path(
            payload.start_lat, payload.start_lon, payload.end_lat, payload.end_lon,
            num_points=payload.num_points, curvature=payload.curvature,
        )
    else:
        path = generate_flight_path(
            payload.start_lat, payload.start_lon, payload.end_lat, payload.end_lon,
            num_points=payload.num_points,
        )
    return ApiResponse(
        data={"path": _points(path), "distanceKm": round(calculate_path_distance(path), 1)},
        count=len(path),
    )


@router.post(
    "/simplify",
    response_model=ApiResponse,
    summary="Reduce a polyline's points",
    description="Douglas-Peucker simplification; the first and last points are always kept.",
)
async def simplify(payload: SimplifyRequest) -> ApiResponse:
    path = [(p.lat, p.lng) for p in payload.path]
    simplified = simplify_path(path, payload.tolerance)
    logger.debug(f"Simplified path from {len(path)} to {len(simplified)} points")
    return ApiResponse(data={"path": _points(simplified)}, count=len(simplified))
