"""
Request models for the relational endpoints (tours, participants,
route plans, emergency contacts, users).

These payloads use snake_case, matching the column names.
"""
from datetime import date, time
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class UpdatePayload(BaseModel):
    """
    Base for partial updates addressed by a public identifier.

    Unknown keys are kept so the service can reject them by name.
    """
    model_config = ConfigDict(extra="allow")

    def changes(self, key: str) -> dict:
        data = self.model_dump(exclude_unset=True)
        data.pop(key, None)
        return data


class UserCreate(BaseModel):
    email: str = Field(..., min_length=3)
    name: str = Field(..., min_length=1)
    role: str = "employee"


class TourDestinationIn(BaseModel):
    destination_name: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    visit_date: Optional[date] = None
    visit_time: Optional[time] = None
    duration_hours: Optional[float] = None
    cost: Optional[float] = None
    description: Optional[str] = None
    order_sequence: Optional[int] = None


class TourCreate(BaseModel):
    tour_id: str = Field(..., min_length=1)
    tour_name: str = Field(..., min_length=1)
    description: Optional[str] = None
    start_date: date
    end_date: date
    duration_days: Optional[int] = None
    max_participants: int = Field(default=50, ge=1)
    price_per_person: Optional[float] = None
    total_budget: Optional[float] = None
    organizer_id: Optional[int] = None
    status: str = "planning"
    destinations: List[TourDestinationIn] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_dates(self) -> "TourCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class TourUpdate(UpdatePayload):
    tour_id: str = Field(..., min_length=1)


class ParticipantCreate(BaseModel):
    tour_id: str = Field(..., min_length=1, description="Public tour identifier")
    user_id: int
    payment_status: str = "pending"
    payment_amount: Optional[float] = None
    special_requirements: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None


class ParticipantUpdate(UpdatePayload):
    id: int


class RoutePlanCreate(BaseModel):
    plan_id: str = Field(..., min_length=1)
    source: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    source_lat: Optional[float] = None
    source_lng: Optional[float] = None
    dest_lat: Optional[float] = None
    dest_lng: Optional[float] = None
    distance_km: Optional[float] = None
    estimated_time_minutes: Optional[int] = None
    route_polyline: Optional[Any] = None
    traffic_condition: Optional[str] = None
    weather_condition: Optional[str] = None
    fuel_cost: Optional[float] = None
    toll_cost: Optional[float] = None
    total_cost: Optional[float] = None
    status: str = "planned"
    created_by: Optional[int] = None


class RoutePlanUpdate(UpdatePayload):
    plan_id: str = Field(..., min_length=1)


class EmergencyContactCreate(BaseModel):
    contact_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    email: Optional[str] = None
    contact_type: str = Field(..., min_length=1)
    service_area: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    address: Optional[str] = None
    is_24_7: bool = False
    priority: int = 1
    is_active: bool = True


class EmergencyContactUpdate(UpdatePayload):
    contact_id: str = Field(..., min_length=1)
