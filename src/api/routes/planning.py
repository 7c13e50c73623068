"""
Planning Routes - Route plans, emergency contacts and users (relational store).
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from src.core.exceptions import ValidationError
from src.core.logging_config import get_logger
from src.models.common import ApiResponse, ErrorResponse
from src.models.tour import (
    EmergencyContactCreate,
    EmergencyContactUpdate,
    RoutePlanCreate,
    RoutePlanUpdate,
    UserCreate,
)
from src.services.tour_service import TourService, get_tour_service

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Planning"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        404: {"model": ErrorResponse, "description": "Record not found"},
    },
)


# ============================================================
# Route plans
# ============================================================

@router.get("/route-planner", response_model=ApiResponse, summary="List route plans or get one")
def get_route_plans(
    plan_id: Optional[str] = Query(default=None, alias="planId"),
    user_id: Optional[int] = Query(default=None, alias="userId"),
    service: TourService = Depends(get_tour_service),
) -> ApiResponse:
    if plan_id:
        return ApiResponse(data=service.get_route_plan(plan_id))
    plans = service.list_route_plans(created_by=user_id)
    return ApiResponse(data=plans, count=len(plans))


@router.post("/route-planner", response_model=ApiResponse, status_code=201, summary="Create a route plan")
def create_route_plan(payload: RoutePlanCreate, service: TourService = Depends(get_tour_service)) -> ApiResponse:
    return ApiResponse(data=service.create_route_plan(payload), message="Route plan created successfully")


@router.put("/route-planner", response_model=ApiResponse, summary="Update a route plan")
def update_route_plan(payload: RoutePlanUpdate, service: TourService = Depends(get_tour_service)) -> ApiResponse:
    return ApiResponse(data=service.update_route_plan(payload), message="Route plan updated successfully")


@router.delete("/route-planner", response_model=ApiResponse, summary="Delete a route plan")
def delete_route_plan(
    plan_id: Optional[str] = Query(default=None, alias="planId"),
    service: TourService = Depends(get_tour_service),
) -> ApiResponse:
    if not plan_id:
        raise ValidationError("Plan ID is required", field="planId")
    service.delete_route_plan(plan_id)
    return ApiResponse(message="Route plan deleted successfully")


# ============================================================
# Emergency contacts
# ============================================================

@router.get(
    "/emergency-contacts",
    response_model=ApiResponse,
    summary="List emergency contacts",
    description="Ordered by priority, then name. `area` matches the service area case-insensitively.",
)
def list_emergency_contacts(
    contact_type: Optional[str] = Query(default=None, alias="type"),
    area: Optional[str] = Query(default=None),
    active: Optional[bool] = Query(default=None),
    service: TourService = Depends(get_tour_service),
) -> ApiResponse:
    contacts = service.list_emergency_contacts(contact_type=contact_type, area=area, active=active)
    return ApiResponse(data=contacts, count=len(contacts))


@router.post("/emergency-contacts", response_model=ApiResponse, status_code=201, summary="Add an emergency contact")
def create_emergency_contact(
    payload: EmergencyContactCreate,
    service: TourService = Depends(get_tour_service),
) -> ApiResponse:
    return ApiResponse(data=service.create_emergency_contact(payload), message="Emergency contact created successfully")


@router.put("/emergency-contacts", response_model=ApiResponse, summary="Update an emergency contact")
def update_emergency_contact(
    payload: EmergencyContactUpdate,
    service: TourService = Depends(get_tour_service),
) -> ApiResponse:
    return ApiResponse(data=service.update_emergency_contact(payload), message="Emergency contact updated successfully")


@router.delete("/emergency-contacts", response_model=ApiResponse, summary="Delete an emergency contact")
def delete_emergency_contact(
    contact_id: Optional[str] = Query(default=None, alias="contactId"),
    service: TourService = Depends(get_tour_service),
) -> ApiResponse:
    if not contact_id:
        raise ValidationError("Contact ID is required", field="contactId")
    service.delete_emergency_contact(contact_id)
    return ApiResponse(message="Emergency contact deleted successfully")


# ============================================================
# Users
# ============================================================

@router.get("/users", response_model=ApiResponse, summary="List users")
def list_users(service: TourService = Depends(get_tour_service)) -> ApiResponse:
    users = service.list_users()
    return ApiResponse(data=users, count=len(users))


@router.post("/users", response_model=ApiResponse, status_code=201, summary="Create a user")
def create_user(payload: UserCreate, service: TourService = Depends(get_tour_service)) -> ApiResponse:
    return ApiResponse(data=service.create_user(payload), message="User created successfully")
