"""
Request models for the employee endpoints.
"""
from typing import Any, Dict, List, Literal, Optional

from pydantic import ConfigDict, Field

from src.models.common import CamelModel

ReviewStatus = Literal["pending", "approved", "rejected"]


class EmergencyContactEntry(CamelModel):
    name: str
    phone: str
    relationship: Optional[str] = None


class EmployeeCreate(CamelModel):
    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    employee_id: str = Field(..., min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    assigned_vehicle_id: Optional[str] = None
    emergency_contacts: List[EmergencyContactEntry] = Field(default_factory=list)


class EmployeeUpdate(CamelModel):
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., min_length=1)
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    assigned_vehicle_id: Optional[str] = None


class ProfileUpdate(CamelModel):
    model_config = ConfigDict(extra="allow")

    employee_id: str = Field(..., min_length=1)
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    assigned_vehicle_id: Optional[str] = None
    emergency_contacts: Optional[List[EmergencyContactEntry]] = None


class ExpenseCreate(CamelModel):
    id: Optional[str] = None
    type: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0)
    date: str = Field(..., min_length=1, description="YYYY-MM-DD")
    employee_id: str = Field(..., min_length=1)
    trip_id: Optional[str] = None


class ExpenseUpdate(CamelModel):
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., min_length=1)
    type: Optional[str] = None
    amount: Optional[float] = Field(default=None, gt=0)
    date: Optional[str] = None
    status: Optional[ReviewStatus] = None
    trip_id: Optional[str] = None


class OdometerStatusUpdate(CamelModel):
    id: str = Field(..., min_length=1)
    status: str = Field(..., min_length=1)
    admin_notes: Optional[str] = None


class OdometerSubmission(CamelModel):
    """Form fields of an odometer submission (the photo travels separately)."""
    odometer_value: int = Field(..., ge=0)
    vehicle_id: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    timestamp: Optional[str] = None
    trip_id: Optional[str] = None
    driver_id: str = "current-user"
    exif_data: Optional[Dict[str, Any]] = None
