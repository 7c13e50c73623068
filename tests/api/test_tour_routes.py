"""
API tests for tours, participants, route plans, emergency contacts and users.
"""
import pytest

TOUR = {
    "tour_id": "KERALA-01",
    "tour_name": "Kerala Backwaters",
    "start_date": "2024-11-10",
    "end_date": "2024-11-14",
    "max_participants": 1,
    "destinations": [
        {"destination_name": "Alleppey", "latitude": 9.4981, "longitude": 76.3388},
    ],
}


@pytest.fixture
def user_id(client):
    response = client.post("/api/users", json={"email": "ravi@example.com", "name": "Ravi"})
    return response.json()["data"]["id"]


@pytest.fixture
def tour(client):
    return client.post("/api/tours", json=TOUR).json()["data"]


class TestTourRoutes:
    """Test /api/tours."""

    def test_create(self, client):
        response = client.post("/api/tours", json=TOUR)

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["duration_days"] == 5
        assert data["destinations"][0]["order_sequence"] == 1

    def test_create_with_bad_dates(self, client):
        response = client.post("/api/tours", json={**TOUR, "end_date": "2024-11-01"})

        assert response.status_code == 400
        assert "end_date must not be before start_date" in response.json()["error"]

    def test_create_missing_fields(self, client):
        response = client.post("/api/tours", json={"tour_id": "X"})

        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields: tour_name, start_date, end_date"

    def test_list_and_get(self, client, tour):
        listing = client.get("/api/tours").json()
        assert listing["count"] == 1

        detail = client.get("/api/tours", params={"tourId": "KERALA-01"}).json()
        assert detail["data"]["tour_name"] == "Kerala Backwaters"
        assert detail["data"]["participants"] == []

    def test_get_unknown(self, client):
        response = client.get("/api/tours", params={"tourId": "NOPE"})

        assert response.status_code == 404
        assert response.json()["error"] == "Tour not found"

    def test_update_rejects_read_only_field(self, client, tour):
        response = client.put("/api/tours", json={"tour_id": "KERALA-01", "current_participants": 9})

        assert response.status_code == 400
        assert response.json()["error"] == "Unknown or read-only fields: current_participants"

    def test_update_null_name(self, client, tour):
        response = client.put("/api/tours", json={"tour_id": "KERALA-01", "tour_name": None})

        assert response.status_code == 400
        assert response.json()["code"] == "validation_error"

    def test_null_capacity_never_reaches_registration(self, client, tour, user_id):
        response = client.put("/api/tours", json={"tour_id": "KERALA-01", "max_participants": None})
        assert response.status_code == 400

        registration = client.post(
            "/api/tours/participants", json={"tour_id": "KERALA-01", "user_id": user_id}
        )
        assert registration.status_code == 201

    def test_update(self, client, tour):
        response = client.put("/api/tours", json={"tour_id": "KERALA-01", "status": "confirmed"})
        assert response.json()["data"]["status"] == "confirmed"

    def test_delete_requires_id(self, client):
        response = client.delete("/api/tours")
        assert response.status_code == 400

    def test_delete(self, client, tour):
        assert client.delete("/api/tours", params={"tourId": "KERALA-01"}).status_code == 200
        assert client.get("/api/tours", params={"tourId": "KERALA-01"}).status_code == 404


class TestParticipantRoutes:
    """Test /api/tours/participants."""

    def test_register(self, client, tour, user_id):
        response = client.post("/api/tours/participants", json={"tour_id": "KERALA-01", "user_id": user_id})

        assert response.status_code == 201
        assert response.json()["data"]["user_email"] == "ravi@example.com"

    def test_duplicate_registration(self, client, tour, user_id):
        client.post("/api/tours/participants", json={"tour_id": "KERALA-01", "user_id": user_id})

        response = client.post("/api/tours/participants", json={"tour_id": "KERALA-01", "user_id": user_id})

        assert response.status_code == 400
        assert response.json()["code"] == "booking_error"
        assert response.json()["error"] == "User is already registered for this tour"

    def test_tour_full(self, client, tour, user_id):
        other = client.post("/api/users", json={"email": "meera@example.com", "name": "Meera"}).json()["data"]["id"]
        client.post("/api/tours/participants", json={"tour_id": "KERALA-01", "user_id": user_id})

        response = client.post("/api/tours/participants", json={"tour_id": "KERALA-01", "user_id": other})

        assert response.status_code == 400
        assert response.json()["error"] == "Tour is full"

    def test_list_and_cancel(self, client, tour, user_id):
        participant = client.post(
            "/api/tours/participants", json={"tour_id": "KERALA-01", "user_id": user_id}
        ).json()["data"]

        listing = client.get("/api/tours/participants", params={"tourId": "KERALA-01"}).json()
        assert listing["count"] == 1

        response = client.delete("/api/tours/participants", params={"participantId": participant["id"]})
        assert response.status_code == 200

        detail = client.get("/api/tours", params={"tourId": "KERALA-01"}).json()["data"]
        assert detail["current_participants"] == 0


class TestPlanningRoutes:
    """Test route plans, emergency contacts and users."""

    def test_route_plan_lifecycle(self, client, user_id):
        created = client.post("/api/route-planner", json={
            "plan_id": "RP-9", "source": "Delhi", "destination": "Agra", "created_by": user_id,
        })
        assert created.status_code == 201

        by_user = client.get("/api/route-planner", params={"userId": user_id}).json()
        assert by_user["count"] == 1

        one = client.get("/api/route-planner", params={"planId": "RP-9"}).json()
        assert one["data"]["destination"] == "Agra"

        assert client.delete("/api/route-planner", params={"planId": "RP-9"}).status_code == 200
        assert client.get("/api/route-planner", params={"planId": "RP-9"}).status_code == 404

    def test_route_plan_delete_requires_id(self, client):
        response = client.delete("/api/route-planner")
        assert response.json()["error"] == "Plan ID is required"

    def test_emergency_contacts(self, client):
        client.post("/api/emergency-contacts", json={
            "contact_id": "EC-1", "name": "Highway Patrol", "phone": "1033",
            "contact_type": "police", "service_area": "NH48",
        })
        client.post("/api/emergency-contacts", json={
            "contact_id": "EC-2", "name": "Rural Hospital", "phone": "108",
            "contact_type": "medical", "is_active": False,
        })

        assert client.get("/api/emergency-contacts").json()["count"] == 2
        assert client.get("/api/emergency-contacts", params={"type": "police"}).json()["count"] == 1
        assert client.get("/api/emergency-contacts", params={"active": "true"}).json()["count"] == 1

    def test_duplicate_user_email(self, client, user_id):
        response = client.post("/api/users", json={"email": "ravi@example.com", "name": "Ravi Again"})
        assert response.status_code == 400

    def test_list_users(self, client, user_id):
        assert client.get("/api/users").json()["count"] == 1
