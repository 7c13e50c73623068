"""
Saved Route Routes - Routes computed in the planner and stored for admins.
"""
from fastapi import APIRouter, Depends

from src.core.logging_config import get_logger
from src.models.common import ApiResponse
from src.models.fleet import SavedRouteCreate
from src.services.fleet_service import FleetService, get_fleet_service

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/routes",
    tags=["Saved Routes"],
)


@router.post("/save", response_model=ApiResponse, status_code=201, summary="Save a planned route")
def save_route(payload: SavedRouteCreate, service: FleetService = Depends(get_fleet_service)) -> ApiResponse:
    route = service.save_route(payload)
    return ApiResponse(data=route, message="Route saved successfully")


@router.get("/list", response_model=ApiResponse, summary="List saved routes, newest first")
def list_routes(service: FleetService = Depends(get_fleet_service)) -> ApiResponse:
    routes = service.list_routes()
    return ApiResponse(data=routes, count=len(routes))


@router.get("/last", response_model=ApiResponse, summary="Most recently saved route")
def last_route(service: FleetService = Depends(get_fleet_service)) -> ApiResponse:
    return ApiResponse(data=service.last_route())


@router.delete("/delete-all", response_model=ApiResponse, summary="Delete every saved route")
def delete_all_routes(service: FleetService = Depends(get_fleet_service)) -> ApiResponse:
    deleted = service.delete_all_routes()
    logger.warning(f"All saved routes deleted ({deleted})")
    return ApiResponse(
        data={"deletedCount": deleted},
        message=f"Deleted {deleted} routes",
        count=deleted,
    )
