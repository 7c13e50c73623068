"""
API tests for the AI endpoints and the chat assistant (LLM mocked).
"""
from src.core.exceptions import LLMError
from src.models.ai import (
    AttractionsResult,
    Coordinates,
    ExpenseParseResult,
    LatLngPoint,
    RoadSnapResult,
    TransliterationResult,
    TripPlan,
    VehicleInsights,
)

PHOTO = "data:image/png;base64,aGVsbG8="


class TestTripPlanRoute:
    """Test /api/ai/trip-plan."""

    def test_plan(self, client, llm):
        llm.generate_structured.return_value = TripPlan(
            source="Mumbai",
            destination="Pune",
            distance="150 km",
            duration="3 hours",
            estimated_fuel_cost=1500,
            estimated_toll_cost=320,
            suggested_route="Mumbai-Pune Expressway",
            disclaimer="",
        )

        response = client.post("/api/ai/trip-plan", json={"source": "Mumbai", "destination": "Pune", "vehicleType": "Van"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["estimatedTollCost"] == 320
        assert data["suggestedRoute"] == "Mumbai-Pune Expressway"
        assert data["disclaimer"].startswith("All values are estimates")

    def test_plan_llm_down(self, client, llm):
        llm.generate_structured.side_effect = LLMError()

        response = client.post("/api/ai/trip-plan", json={"source": "Mumbai", "destination": "Pune"})

        assert response.status_code == 500
        assert response.json()["code"] == "llm_error"

    def test_plan_missing_destination(self, client):
        response = client.post("/api/ai/trip-plan", json={"source": "Mumbai"})

        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields: destination"


class TestImageRoutes:
    """Test expense parsing and transliteration."""

    def test_parse_expense(self, client, llm):
        llm.generate_structured.return_value = ExpenseParseResult(expenses=[
            {"type": "Hotel", "amount": 3200, "date": "2024-05-02"},
            {"type": "Food", "amount": 450, "date": "2024-05-02"},
        ])

        body = client.post("/api/ai/parse-expense", json={"photoDataUri": PHOTO}).json()

        assert body["count"] == 2
        assert body["data"]["expenses"][0]["type"] == "Hotel"

    def test_parse_expense_bad_uri(self, client, llm):
        response = client.post("/api/ai/parse-expense", json={"photoDataUri": "receipt.png"})

        assert response.status_code == 400
        llm.generate_structured.assert_not_called()

    def test_parse_expense_llm_down(self, client, llm):
        llm.generate_structured.side_effect = LLMError()

        response = client.post("/api/ai/parse-expense", json={"photoDataUri": PHOTO})

        assert response.status_code == 500
        assert response.json()["error"] == "Unable to parse expense, AI model may be temporarily unavailable."

    def test_transliterate(self, client, llm):
        llm.generate_structured.return_value = TransliterationResult(extracted_text="Chennai Central")

        response = client.post("/api/ai/transliterate", json={"photoDataUri": PHOTO, "targetLanguage": "English"})

        assert response.json()["data"] == {"extractedText": "Chennai Central"}


class TestLookupRoutes:
    """Test geocoding, insights, road snapping and destination lookups."""

    def test_geocode(self, client, llm):
        llm.generate_structured.return_value = Coordinates(latitude=15.2993, longitude=74.124)

        body = client.post("/api/ai/geocode", json={"location": "Goa"}).json()

        assert body["data"] == {"latitude": 15.2993, "longitude": 74.124}

    def test_geocode_failure(self, client, llm):
        llm.generate_structured.side_effect = LLMError()

        response = client.post("/api/ai/geocode", json={"location": "Goa"})

        assert response.status_code == 500
        assert response.json()["error"].startswith("Unable to geocode location")

    def test_vehicle_insights(self, client, llm):
        llm.generate_structured.return_value = VehicleInsights(
            efficiency_insight="30% of the fleet is on the road",
            cost_saving_suggestion="Schedule refuelling at partner pumps",
            anomaly_detection="Fuel spend is within normal range",
        )

        response = client.post("/api/ai/vehicle-insights", json={
            "totalVehicles": 10, "ongoingTrips": 3, "totalExpenses": 52000, "fuelConsumption": 410,
        })

        assert response.status_code == 200
        assert set(response.json()["data"]) == {"efficiencyInsight", "costSavingSuggestion", "anomalyDetection"}

    def test_vehicle_insights_rejects_negative(self, client):
        response = client.post("/api/ai/vehicle-insights", json={
            "totalVehicles": -1, "ongoingTrips": 0, "totalExpenses": 0, "fuelConsumption": 0,
        })
        assert response.status_code == 400

    def test_snap_to_roads(self, client, llm):
        llm.generate_structured.return_value = RoadSnapResult(snapped_points=[LatLngPoint(lat=19.0, lng=72.8)])

        body = client.post("/api/ai/snap-to-roads", json={"path": [{"lat": 19.01, "lng": 72.81}]}).json()

        assert body["data"]["snappedPoints"] == [{"lat": 19.0, "lng": 72.8}]
        assert body["count"] == 1

    def test_snap_falls_back(self, client, llm):
        llm.generate_structured.side_effect = LLMError()
        path = [{"lat": 19.01, "lng": 72.81}, {"lat": 19.02, "lng": 72.83}]

        body = client.post("/api/ai/snap-to-roads", json={"path": path}).json()

        assert body["success"] is True
        assert body["data"]["snappedPoints"] == path

    def test_attractions(self, client, llm):
        llm.generate_structured.return_value = AttractionsResult(
            destination="Agra",
            attractions=[{
                "name": "Taj Mahal", "type": "Monument", "description": "Marble mausoleum",
                "rating": 4.9, "mustVisit": True,
            }],
            best_time_to_visit="October to March",
            travel_tip="Visit at sunrise",
        )

        body = client.post("/api/ai/attractions", json={"destination": "Agra"}).json()

        assert body["data"]["attractions"][0]["mustVisit"] is True

    def test_attractions_fallback(self, client, llm):
        llm.generate_structured.side_effect = LLMError()

        body = client.post("/api/ai/attractions", json={"destination": "Agra"}).json()

        assert body["count"] == 3
        assert body["data"]["bestTimeToVisit"] == "October to March"

    def test_place_search_fallback(self, client, llm):
        llm.generate_structured.side_effect = LLMError()

        body = client.post("/api/ai/place-search", json={"query": "Munnar"}).json()

        assert body["data"]["searchQuery"] == "Munnar"
        assert body["data"]["results"][0]["name"] == "Munnar"


class TestChatRoute:
    """Test /api/chat."""

    def test_reply(self, client, llm):
        llm.generate.return_value = "Carry light cotton clothes."

        body = client.post("/api/chat", json={"query": "What should I pack?"}).json()

        assert body["data"]["response"] == "Carry light cotton clothes."
        assert body["data"]["source"] == "llm"
        assert "timestamp" in body["data"]

    def test_canned_reply(self, client, llm):
        llm.generate.side_effect = LLMError()

        body = client.post("/api/chat", json={"query": "When is the best time for Kerala?"}).json()

        assert body["success"] is True
        assert body["data"]["source"] == "fallback"
        assert body["data"]["response"].startswith("Kerala is beautiful")

    def test_empty_query(self, client):
        response = client.post("/api/chat", json={"query": "   "})

        assert response.status_code == 400
        assert response.json()["error"] == "Query is required and must be a string"

    def test_query_too_long(self, client):
        response = client.post("/api/chat", json={"query": "x" * 1001})

        assert response.status_code == 400
        assert response.json()["error"] == "Query is too long. Please keep it under 1000 characters."

    def test_padded_query_over_limit(self, client):
        response = client.post("/api/chat", json={"query": "  " + "x" * 999})
        assert response.status_code == 400

    def test_missing_query(self, client):
        response = client.post("/api/chat", json={})

        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields: query"
