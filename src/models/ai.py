"""
Schemas for the AI endpoints.

Output models double as the contract the LLM's JSON must satisfy; a
response that fails validation is treated like a failed call.
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from src.models.common import CamelModel

ExpenseCategory = Literal["Travel", "Food", "Hotel", "Tickets", "Misc"]


# ============================================================
# Trip planning
# ============================================================

class TripPlanRequest(CamelModel):
    source: str = Field(..., min_length=1, description="The starting point of the trip.")
    destination: str = Field(..., min_length=1, description="The final destination of the trip.")
    vehicle_type: Optional[str] = Field(default=None, description='e.g. "Truck", "Van", "Car"')


class TripPlan(CamelModel):
    source: str
    destination: str
    distance: str = Field(..., description="Estimated total distance in kilometers.")
    duration: str = Field(..., description="Estimated total duration, e.g. '5 hours 30 minutes'.")
    estimated_fuel_cost: float
    estimated_toll_cost: float
    suggested_route: str
    disclaimer: str


# ============================================================
# Geocoding and roads
# ============================================================

class GeocodeRequest(CamelModel):
    location: str = Field(..., min_length=1)


class Coordinates(CamelModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class LatLngPoint(CamelModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class RoadSnapRequest(CamelModel):
    path: List[LatLngPoint] = Field(default_factory=list)


class RoadSnapResult(CamelModel):
    snapped_points: List[LatLngPoint]


# ============================================================
# Image-based parsing
# ============================================================

class ExpenseParseRequest(CamelModel):
    photo_data_uri: str = Field(..., description="data:<mimetype>;base64,<encoded_data>")


class ParsedExpense(CamelModel):
    type: ExpenseCategory
    amount: float
    date: str = Field(..., description="YYYY-MM-DD")


class ExpenseParseResult(CamelModel):
    expenses: List[ParsedExpense]


class TransliterationRequest(CamelModel):
    photo_data_uri: str
    target_language: str = Field(..., min_length=1, description="e.g. 'Hindi', 'English', 'Tamil'")


class TransliterationResult(CamelModel):
    extracted_text: str


# ============================================================
# Fleet insights
# ============================================================

class VehicleInsightsRequest(CamelModel):
    total_vehicles: int = Field(..., ge=0)
    ongoing_trips: int = Field(..., ge=0)
    total_expenses: float = Field(..., ge=0)
    fuel_consumption: float = Field(..., ge=0, description="Liters for the month")


class VehicleInsights(CamelModel):
    efficiency_insight: str
    cost_saving_suggestion: str
    anomaly_detection: str


# ============================================================
# Destinations
# ============================================================

class AttractionRequest(CamelModel):
    destination: str = Field(..., min_length=1)
    country: Optional[str] = None


class TouristAttraction(CamelModel):
    name: str
    type: str
    description: str
    rating: float = Field(..., ge=1, le=5)
    must_visit: bool


class AttractionsResult(CamelModel):
    destination: str
    attractions: List[TouristAttraction]
    best_time_to_visit: str
    travel_tip: str


class PlaceSearchRequest(CamelModel):
    query: str = Field(..., min_length=1)


class PlaceInfo(CamelModel):
    name: str
    location: str
    type: str
    description: str
    best_for: List[str]
    best_time_to_visit: str
    famous_for: List[str]
    nearby_places: List[str]
    travel_tip: str
    estimated_budget: str


class PlaceSearchResult(CamelModel):
    results: List[PlaceInfo]
    search_query: str


# ============================================================
# Chat assistant
# ============================================================

class ChatRequest(CamelModel):
    query: str = Field(..., description="The user's travel question")
    context: Optional[str] = None


class ChatReply(CamelModel):
    response: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    source: Literal["llm", "fallback"] = "llm"
