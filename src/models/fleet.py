"""
Request models for the admin (fleet) endpoints.

Create models declare the required fields; update models accept any
additional field and only carry what the client actually sent.
"""
from typing import Any, Dict, List, Literal, Optional

from pydantic import ConfigDict, Field

from src.models.common import CamelModel

VehicleStatus = Literal["On Trip", "Idle", "Maintenance"]
TripStatus = Literal["Ongoing", "Completed", "Planned", "Cancelled"]


class VehicleCreate(CamelModel):
    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    plate_number: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    status: VehicleStatus = "Idle"
    fuel_level: float = Field(default=100, ge=0, le=100, description="Percentage")
    last_maintenance: Optional[str] = Field(default=None, description="ISO date")
    assigned_to: Optional[str] = None


class VehicleUpdate(CamelModel):
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., min_length=1)
    name: Optional[str] = None
    plate_number: Optional[str] = None
    model: Optional[str] = None
    status: Optional[VehicleStatus] = None
    fuel_level: Optional[float] = Field(default=None, ge=0, le=100)
    last_maintenance: Optional[str] = None
    assigned_to: Optional[str] = None


class TripCreate(CamelModel):
    id: Optional[str] = None
    vehicle_id: str = Field(..., min_length=1)
    employee_name: str = Field(..., min_length=1)
    source: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: TripStatus = "Planned"
    expenses: List[Dict[str, Any]] = Field(default_factory=list)
    plan: Dict[str, Any] = Field(default_factory=dict)


class TripUpdate(CamelModel):
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., min_length=1)
    status: Optional[TripStatus] = None
    end_date: Optional[str] = None


class SavedRouteCreate(CamelModel):
    """A route computed in the route planner and assigned by an admin."""
    source: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    vehicle_type: str = Field(..., min_length=1)
    distance: float
    emissions: float
    vehicle_year: Optional[int] = None
    model_year: Optional[int] = None
    route_source: Optional[str] = None
    fuel_type: Optional[str] = None
    route_type: Optional[str] = None
    traffic: Optional[str] = None
    claimed_efficiency: Optional[float] = None
    claimed_efficiency_unit: Optional[str] = None
    electricity_source: Optional[str] = None
    eco_tip: Optional[str] = None


class AdminSeedRequest(CamelModel):
    username: str = "admin"
    password: str = "123"


class InitDbRequest(CamelModel):
    include_sample_data: bool = False


class SeedEmployeesRequest(CamelModel):
    clear_existing: bool = False


class EmployeeSeedRequest(CamelModel):
    name: Optional[str] = None
    employee_id: Optional[str] = None
    assigned_vehicle_id: Optional[str] = None
