"""
Fleet Routes - Vehicles and trips in the admin database.

Endpoints:
- /api/admin/vehicles : list, create, update, delete (?id=), get by id
- /api/admin/trips    : list (filters), create, update, delete (?id=), get by id
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from src.core.exceptions import ValidationError
from src.core.logging_config import get_logger
from src.models.common import ApiResponse, ErrorResponse
from src.models.fleet import TripCreate, TripUpdate, VehicleCreate, VehicleUpdate
from src.services.fleet_service import FleetService, get_fleet_service

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/admin",
    tags=["Fleet"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        404: {"model": ErrorResponse, "description": "Record not found"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)


def _require(value: Optional[str], label: str) -> str:
    if not value:
        raise ValidationError(f"{label} is required", field="id")
    return value


# ============================================================
# Vehicles
# ============================================================

@router.get("/vehicles", response_model=ApiResponse, summary="List all vehicles")
def list_vehicles(service: FleetService = Depends(get_fleet_service)) -> ApiResponse:
    vehicles = service.list_vehicles()
    return ApiResponse(data=vehicles, count=len(vehicles))


@router.get("/vehicles/{vehicle_id}", response_model=ApiResponse, summary="Get one vehicle")
def get_vehicle(vehicle_id: str, service: FleetService = Depends(get_fleet_service)) -> ApiResponse:
    return ApiResponse(data=service.get_vehicle(vehicle_id))


@router.post(
    "/vehicles",
    response_model=ApiResponse,
    status_code=201,
    summary="Add a vehicle",
    description="""
    Required: `name`, `plateNumber`, `model`.

    Defaults: `status` Idle, `fuelLevel` 100, `lastMaintenance` now,
    `assignedTo` null. The id is generated as `vehicle_<ms>` when omitted.
    """,
)
def create_vehicle(payload: VehicleCreate, service: FleetService = Depends(get_fleet_service)) -> ApiResponse:
    vehicle = service.create_vehicle(payload)
    return ApiResponse(data=vehicle, message="Vehicle added successfully")


@router.put("/vehicles", response_model=ApiResponse, summary="Update a vehicle")
def update_vehicle(payload: VehicleUpdate, service: FleetService = Depends(get_fleet_service)) -> ApiResponse:
    return ApiResponse(data=service.update_vehicle(payload), message="Vehicle updated successfully")


@router.delete("/vehicles", response_model=ApiResponse, summary="Delete a vehicle")
def delete_vehicle(
    id: Optional[str] = Query(default=None, description="Vehicle id"),
    service: FleetService = Depends(get_fleet_service),
) -> ApiResponse:
    service.delete_vehicle(_require(id, "Vehicle ID"))
    return ApiResponse(message="Vehicle deleted successfully")


# ============================================================
# Trips
# ============================================================

@router.get("/trips", response_model=ApiResponse, summary="List trips, newest first")
def list_trips(
    status: Optional[str] = Query(default=None),
    vehicle_id: Optional[str] = Query(default=None, alias="vehicleId"),
    employee_name: Optional[str] = Query(default=None, alias="employeeName"),
    service: FleetService = Depends(get_fleet_service),
) -> ApiResponse:
    trips = service.list_trips(status=status, vehicle_id=vehicle_id, employee_name=employee_name)
    return ApiResponse(data=trips, count=len(trips))


@router.get("/trips/{trip_id}", response_model=ApiResponse, summary="Get one trip")
def get_trip(trip_id: str, service: FleetService = Depends(get_fleet_service)) -> ApiResponse:
    return ApiResponse(data=service.get_trip(trip_id))


@router.post("/trips", response_model=ApiResponse, status_code=201, summary="Create a trip")
def create_trip(payload: TripCreate, service: FleetService = Depends(get_fleet_service)) -> ApiResponse:
    return ApiResponse(data=service.create_trip(payload), message="Trip created successfully")


@router.put("/trips", response_model=ApiResponse, summary="Update a trip")
def update_trip(payload: TripUpdate, service: FleetService = Depends(get_fleet_service)) -> ApiResponse:
    return ApiResponse(data=service.update_trip(payload), message="Trip updated successfully")


@router.delete("/trips", response_model=ApiResponse, summary="Delete a trip")
def delete_trip(
    id: Optional[str] = Query(default=None, description="Trip id"),
    service: FleetService = Depends(get_fleet_service),
) -> ApiResponse:
    service.delete_trip(_require(id, "Trip ID"))
    return ApiResponse(message="Trip deleted successfully")
