"""
AI Routes - LLM-backed helpers.

Trip planning, geocoding, receipt parsing, transliteration and vehicle
insights answer 500 when the model is unavailable. Road snapping,
attractions and place search always answer, with fallback data if needed.
"""
from fastapi import APIRouter, Depends

from src.core.logging_config import get_logger
from src.models.ai import (
    AttractionRequest,
    ExpenseParseRequest,
    GeocodeRequest,
    PlaceSearchRequest,
    RoadSnapRequest,
    TransliterationRequest,
    TripPlanRequest,
    VehicleInsightsRequest,
)
from src.models.common import ApiResponse, ErrorResponse
from src.services.ai_service import AIService, get_ai_service

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/ai",
    tags=["AI"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "AI model unavailable"},
    },
)


@router.post("/trip-plan", response_model=ApiResponse, summary="Estimate distance, duration and costs of a trip")
def plan_trip(payload: TripPlanRequest, service: AIService = Depends(get_ai_service)) -> ApiResponse:
    plan = service.plan_trip(payload.source, payload.destination, payload.vehicle_type)
    return ApiResponse(data=plan.model_dump(by_alias=True))


@router.post("/geocode", response_model=ApiResponse, summary="Resolve a place name to coordinates")
def geocode(payload: GeocodeRequest, service: AIService = Depends(get_ai_service)) -> ApiResponse:
    return ApiResponse(data=service.geocode(payload.location).model_dump(by_alias=True))


@router.post(
    "/parse-expense",
    response_model=ApiResponse,
    summary="Read expenses from a receipt photo",
    description="`photoDataUri` must be `data:<mimetype>;base64,<encoded_data>`.",
)
def parse_expense(payload: ExpenseParseRequest, service: AIService = Depends(get_ai_service)) -> ApiResponse:
    result = service.parse_expense(payload.photo_data_uri)
    return ApiResponse(data=result.model_dump(by_alias=True), count=len(result.expenses))


@router.post("/transliterate", response_model=ApiResponse, summary="Extract and transliterate text from an image")
def transliterate(payload: TransliterationRequest, service: AIService = Depends(get_ai_service)) -> ApiResponse:
    result = service.transliterate(payload.photo_data_uri, payload.target_language)
    return ApiResponse(data=result.model_dump(by_alias=True))


@router.post("/vehicle-insights", response_model=ApiResponse, summary="Operational insights from monthly fleet figures")
def vehicle_insights(payload: VehicleInsightsRequest, service: AIService = Depends(get_ai_service)) -> ApiResponse:
    return ApiResponse(data=service.vehicle_insights(payload).model_dump(by_alias=True))


@router.post("/snap-to-roads", response_model=ApiResponse, summary="Snap a rough path to the road network")
def snap_to_roads(payload: RoadSnapRequest, service: AIService = Depends(get_ai_service)) -> ApiResponse:
    result = service.snap_to_roads(payload.path)
    return ApiResponse(data=result.model_dump(by_alias=True), count=len(result.snapped_points))


@router.post("/attractions", response_model=ApiResponse, summary="Must-visit attractions of a destination")
def attractions(payload: AttractionRequest, service: AIService = Depends(get_ai_service)) -> ApiResponse:
    result = service.destination_attractions(payload.destination, payload.country)
    return ApiResponse(data=result.model_dump(by_alias=True), count=len(result.attractions))


@router.post("/place-search", response_model=ApiResponse, summary="Travel information about a place")
def place_search(payload: PlaceSearchRequest, service: AIService = Depends(get_ai_service)) -> ApiResponse:
    result = service.search_places(payload.query)
    return ApiResponse(data=result.model_dump(by_alias=True), count=len(result.results))
