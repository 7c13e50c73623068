"""
Tour Routes - Tours and tour participants (relational store).

Endpoints:
- /api/tours               : list (?organizerId) or detail (?tourId), create, update, delete (?tourId=)
- /api/tours/participants  : list (?tourId, ?userId), register, update, unregister (?participantId=)
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from src.core.exceptions import ValidationError
from src.core.logging_config import get_logger
from src.models.common import ApiResponse, ErrorResponse
from src.models.tour import ParticipantCreate, ParticipantUpdate, TourCreate, TourUpdate
from src.services.tour_service import TourService, get_tour_service

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/tours",
    tags=["Tours"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request or booking rule violated"},
        404: {"model": ErrorResponse, "description": "Record not found"},
    },
)


@router.get("", response_model=ApiResponse, summary="List tours or get one with details")
def get_tours(
    tour_id: Optional[str] = Query(default=None, alias="tourId"),
    organizer_id: Optional[int] = Query(default=None, alias="organizerId"),
    service: TourService = Depends(get_tour_service),
) -> ApiResponse:
    if tour_id:
        return ApiResponse(data=service.get_tour(tour_id))
    tours = service.list_tours(organizer_id=organizer_id)
    return ApiResponse(data=tours, count=len(tours))


@router.post(
    "",
    response_model=ApiResponse,
    status_code=201,
    summary="Create a tour",
    description="The tour and its `destinations` are written in one transaction.",
)
def create_tour(payload: TourCreate, service: TourService = Depends(get_tour_service)) -> ApiResponse:
    return ApiResponse(data=service.create_tour(payload), message="Tour created successfully")


@router.put("", response_model=ApiResponse, summary="Update a tour")
def update_tour(payload: TourUpdate, service: TourService = Depends(get_tour_service)) -> ApiResponse:
    return ApiResponse(data=service.update_tour(payload), message="Tour updated successfully")


@router.delete("", response_model=ApiResponse, summary="Delete a tour with its destinations and participants")
def delete_tour(
    tour_id: Optional[str] = Query(default=None, alias="tourId"),
    service: TourService = Depends(get_tour_service),
) -> ApiResponse:
    if not tour_id:
        raise ValidationError("Tour ID is required", field="tourId")
    service.delete_tour(tour_id)
    return ApiResponse(message="Tour deleted successfully")


# ============================================================
# Participants
# ============================================================

@router.get("/participants", response_model=ApiResponse, summary="List tour participants")
def list_participants(
    tour_id: Optional[str] = Query(default=None, alias="tourId"),
    user_id: Optional[int] = Query(default=None, alias="userId"),
    service: TourService = Depends(get_tour_service),
) -> ApiResponse:
    participants = service.list_participants(tour_id=tour_id, user_id=user_id)
    return ApiResponse(data=participants, count=len(participants))


@router.post(
    "/participants",
    response_model=ApiResponse,
    status_code=201,
    summary="Register a user for a tour",
    description="Fails with 400 when the user is already registered or the tour is full.",
)
def register_participant(payload: ParticipantCreate, service: TourService = Depends(get_tour_service)) -> ApiResponse:
    return ApiResponse(data=service.register_participant(payload), message="Registered for tour successfully")


@router.put("/participants", response_model=ApiResponse, summary="Update a registration")
def update_participant(payload: ParticipantUpdate, service: TourService = Depends(get_tour_service)) -> ApiResponse:
    return ApiResponse(data=service.update_participant(payload), message="Participant updated successfully")


@router.delete("/participants", response_model=ApiResponse, summary="Cancel a registration")
def unregister_participant(
    participant_id: Optional[int] = Query(default=None, alias="participantId"),
    service: TourService = Depends(get_tour_service),
) -> ApiResponse:
    if participant_id is None:
        raise ValidationError("Participant ID is required", field="participantId")
    service.unregister_participant(participant_id)
    return ApiResponse(message="Unregistered from tour successfully")
