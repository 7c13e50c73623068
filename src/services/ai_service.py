"""
AI Service - Prompt wrappers around the LLM client.

Each method builds a prompt, asks the LLM for JSON and returns the
validated pydantic model. Two kinds of wrapper exist:

1. Strict (trip plan, geocode, expense parsing, transliteration,
   vehicle insights): a failed call raises LLMError.
2. Forgiving (road snapping, attractions, place search, chat): a failed
   call returns prepared fallback data instead.
"""
from datetime import datetime
from typing import List, Optional

from src.core.exceptions import LLMError, ValidationError
from src.core.logging_config import get_logger
from src.llm.client import LLMClient, get_llm_client, parse_data_uri
from src.llm.prompts import (
    MAX_QUERY_LENGTH,
    TRIP_DISCLAIMER,
    get_attractions_prompt,
    get_canned_reply,
    get_chat_system_prompt,
    get_chat_user_prompt,
    get_expense_parser_prompt,
    get_geocoder_prompt,
    get_place_search_prompt,
    get_road_snapper_prompt,
    get_transliteration_prompt,
    get_trip_planner_prompt,
    get_vehicle_insights_prompt,
)
from src.models.ai import (
    AttractionsResult,
    ChatReply,
    Coordinates,
    ExpenseParseResult,
    LatLngPoint,
    PlaceInfo,
    PlaceSearchResult,
    RoadSnapResult,
    TouristAttraction,
    TransliterationResult,
    TripPlan,
    VehicleInsights,
    VehicleInsightsRequest,
)

logger = get_logger(__name__)

FALLBACK_BEST_TIME = "October to March"
FALLBACK_TRAVEL_TIP = "Book accommodations in advance during peak season"


class AIService:
    """
    Service for the AI-assisted features.

    Example:
        >>> service = AIService()
        >>> plan = service.plan_trip("Mumbai", "Pune", "Van")
        >>> plan.disclaimer
        'All values are estimates. ...'
    """

    def __init__(self, llm_client: Optional[LLMClient] = None):
        self.llm_client = llm_client or get_llm_client()

    # --------------------------------------------------------
    # Strict wrappers
    # --------------------------------------------------------

    def plan_trip(self, source: str, destination: str, vehicle_type: Optional[str] = None) -> TripPlan:
        logger.info(f"Planning trip: {source} -> {destination} ({vehicle_type or 'any vehicle'})")
        plan = self.llm_client.generate_structured(
            get_trip_planner_prompt(source, destination, vehicle_type),
            TripPlan,
        )
        # The model paraphrases the disclaimer often enough that we pin it.
        return plan.model_copy(update={"disclaimer": TRIP_DISCLAIMER})

    def geocode(self, location: str) -> Coordinates:
        try:
            return self.llm_client.generate_structured(get_geocoder_prompt(location), Coordinates)
        except LLMError as e:
            logger.error(f"Geocoding failed for '{location}': {e.details}")
            raise LLMError(
                "Unable to geocode location, AI model may be temporarily unavailable.",
                details=e.details,
            )

    def parse_expense(self, photo_data_uri: str) -> ExpenseParseResult:
        image = parse_data_uri(photo_data_uri)
        try:
            return self.llm_client.generate_structured(
                get_expense_parser_prompt(), ExpenseParseResult, images=[image]
            )
        except LLMError as e:
            raise LLMError(
                "Unable to parse expense, AI model may be temporarily unavailable.",
                details=e.details,
            )

    def transliterate(self, photo_data_uri: str, target_language: str) -> TransliterationResult:
        image = parse_data_uri(photo_data_uri)
        try:
            return self.llm_client.generate_structured(
                get_transliteration_prompt(target_language), TransliterationResult, images=[image]
            )
        except LLMError as e:
            raise LLMError(
                "Unable to extract text, AI model may be temporarily unavailable.",
                details=e.details,
            )

    def vehicle_insights(self, summary: VehicleInsightsRequest) -> VehicleInsights:
        prompt = get_vehicle_insights_prompt(
            total_vehicles=summary.total_vehicles,
            ongoing_trips=summary.ongoing_trips,
            total_expenses=summary.total_expenses,
            fuel_consumption=summary.fuel_consumption,
        )
        return self.llm_client.generate_structured(prompt, VehicleInsights)

    # --------------------------------------------------------
    # Wrappers with fallback data
    # --------------------------------------------------------

    def snap_to_roads(self, path: List[LatLngPoint]) -> RoadSnapResult:
        if not path:
            return RoadSnapResult(snapped_points=[])
        try:
            return self.llm_client.generate_structured(get_road_snapper_prompt(path), RoadSnapResult)
        except LLMError as e:
            logger.warning(f"Road snapping failed, returning original path: {e.details}")
            return RoadSnapResult(snapped_points=list(path))

    def destination_attractions(self, destination: str, country: Optional[str] = None) -> AttractionsResult:
        try:
            return self.llm_client.generate_structured(
                get_attractions_prompt(destination, country), AttractionsResult
            )
        except LLMError as e:
            logger.warning(f"Attractions lookup failed for '{destination}', using fallback: {e.details}")
            return self._fallback_attractions(destination)

    def search_places(self, query: str) -> PlaceSearchResult:
        try:
            return self.llm_client.generate_structured(get_place_search_prompt(query), PlaceSearchResult)
        except LLMError as e:
            logger.warning(f"Place search failed for '{query}', using fallback: {e.details}")
            return self._fallback_place_search(query)

    def chat(self, query: str, context: Optional[str] = None) -> ChatReply:
        """
        Answer a travel question.

        Raises:
            ValidationError: If the query is blank, or longer than MAX_QUERY_LENGTH
                before surrounding whitespace is stripped
        """
        raw = query or ""
        query = raw.strip()
        if not query:
            raise ValidationError("Query is required and must be a string", field="query")
        if len(raw) > MAX_QUERY_LENGTH:
            raise ValidationError(
                f"Query is too long. Please keep it under {MAX_QUERY_LENGTH} characters.",
                field="query",
            )

        try:
            text = self.llm_client.generate(
                get_chat_user_prompt(query, context),
                system_prompt=get_chat_system_prompt(),
            )
            return ChatReply(response=text, timestamp=datetime.utcnow(), source="llm")
        except LLMError as e:
            logger.warning(f"Chat model unavailable, using canned reply: {e.details}")
            return ChatReply(response=get_canned_reply(query), timestamp=datetime.utcnow(), source="fallback")

    @staticmethod
    def _fallback_attractions(destination: str) -> AttractionsResult:
        return AttractionsResult(
            destination=destination,
            attractions=[
                TouristAttraction(
                    name=f"{destination} City Center",
                    type="Landmark",
                    description="Explore the heart of the city with local markets and culture",
                    rating=4.0,
                    must_visit=True,
                ),
                TouristAttraction(
                    name="Local Museum",
                    type="Museum",
                    description="Learn about the rich history and heritage",
                    rating=4.2,
                    must_visit=False,
                ),
                TouristAttraction(
                    name="Popular Viewpoint",
                    type="Viewpoint",
                    description="Get panoramic views of the destination",
                    rating=4.5,
                    must_visit=True,
                ),
            ],
            best_time_to_visit=FALLBACK_BEST_TIME,
            travel_tip=FALLBACK_TRAVEL_TIP,
        )

    @staticmethod
    def _fallback_place_search(query: str) -> PlaceSearchResult:
        return PlaceSearchResult(
            search_query=query,
            results=[
                PlaceInfo(
                    name=query,
                    location="India",
                    type="Destination",
                    description=f"{query} is a popular travel destination. Plan your trip and explore amazing places.",
                    best_for=["Sightseeing", "Culture", "Food"],
                    best_time_to_visit=FALLBACK_BEST_TIME,
                    famous_for=["Tourist attractions", "Local culture", "Cuisine"],
                    nearby_places=[],
                    travel_tip=FALLBACK_TRAVEL_TIP,
                    estimated_budget="₹2,000 - ₹5,000 per day",
                )
            ],
        )


def get_ai_service() -> AIService:
    """FastAPI dependency provider."""
    return AIService()
