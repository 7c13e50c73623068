"""
API tests for vehicles, trips, saved routes and the admin endpoints.
"""
from pymongo.errors import PyMongoError

from tests.conftest import FakeCursor

VEHICLE = {"name": "Van 1", "plateNumber": "MH-01-AB-1234", "model": "Tata Ace"}


class TestVehicleRoutes:
    """Test /api/admin/vehicles."""

    def test_create(self, client, fake_mongo):
        response = client.post("/api/admin/vehicles", json=VEHICLE)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Vehicle added successfully"
        assert body["data"]["status"] == "Idle"
        assert body["data"]["id"].startswith("vehicle_")
        fake_mongo.admin["vehicles"].insert_one.assert_called_once()

    def test_create_missing_fields(self, client):
        response = client.post("/api/admin/vehicles", json={"name": "Van 1"})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["code"] == "validation_error"
        assert body["error"] == "Missing required fields: plateNumber, model"

    def test_create_invalid_value(self, client):
        response = client.post("/api/admin/vehicles", json={**VEHICLE, "fuelLevel": 140})

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid request: fuelLevel")

    def test_list(self, client, fake_mongo):
        fake_mongo.admin["vehicles"].find.return_value = FakeCursor([
            {"id": "vehicle_1", "name": "Van 1"},
            {"id": "vehicle_2", "name": "Van 2"},
        ])

        body = client.get("/api/admin/vehicles").json()

        assert body["count"] == 2
        assert [v["id"] for v in body["data"]] == ["vehicle_1", "vehicle_2"]

    def test_get_missing(self, client):
        response = client.get("/api/admin/vehicles/vehicle_1")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": "Vehicle not found",
            "code": "not_found",
            "details": "id=vehicle_1",
        }

    def test_update(self, client):
        response = client.put("/api/admin/vehicles", json={"id": "vehicle_1", "status": "Maintenance"})

        assert response.status_code == 200
        assert response.json()["data"] == {"id": "vehicle_1", "status": "Maintenance"}

    def test_update_without_fields(self, client):
        response = client.put("/api/admin/vehicles", json={"id": "vehicle_1"})

        assert response.status_code == 400
        assert response.json()["error"] == "No fields to update"

    def test_delete_requires_id(self, client):
        response = client.delete("/api/admin/vehicles")

        assert response.status_code == 400
        assert response.json()["error"] == "Vehicle ID is required"

    def test_delete(self, client, fake_mongo):
        response = client.delete("/api/admin/vehicles", params={"id": "vehicle_1"})

        assert response.status_code == 200
        fake_mongo.admin["vehicles"].delete_one.assert_called_once_with({"id": "vehicle_1"})

    def test_unexpected_error(self, client, fake_mongo):
        fake_mongo.admin["vehicles"].find.side_effect = RuntimeError("socket closed")

        response = client.get("/api/admin/vehicles")

        assert response.status_code == 500
        body = response.json()
        assert body["code"] == "internal_error"
        assert body["details"] is None

    def test_store_failure(self, client, fake_mongo):
        fake_mongo.admin["vehicles"].find.side_effect = PyMongoError("connection refused")

        response = client.get("/api/admin/vehicles")

        assert response.status_code == 500
        assert response.json()["code"] == "database_error"
        assert response.json()["error"] == "Database operation failed"

    def test_security_headers(self, client):
        response = client.get("/api/admin/vehicles")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"


class TestTripRoutes:
    """Test /api/admin/trips."""

    def test_create(self, client):
        response = client.post("/api/admin/trips", json={
            "vehicleId": "vehicle_1",
            "employeeName": "Ravi",
            "source": "Mumbai",
            "destination": "Pune",
        })

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["id"].startswith("trip_")
        assert data["status"] == "Planned"

    def test_list_passes_filters(self, client, fake_mongo):
        response = client.get("/api/admin/trips", params={"status": "Ongoing", "vehicleId": "vehicle_1"})

        assert response.status_code == 200
        fake_mongo.admin["trips"].find.assert_called_once_with({"status": "Ongoing", "vehicleId": "vehicle_1"})

    def test_invalid_status(self, client):
        response = client.put("/api/admin/trips", json={"id": "trip_1", "status": "Lost"})
        assert response.status_code == 400

    def test_delete_missing_trip(self, client, fake_mongo):
        fake_mongo.admin["trips"].delete_one.return_value.deleted_count = 0

        response = client.delete("/api/admin/trips", params={"id": "trip_1"})

        assert response.status_code == 404
        assert response.json()["error"] == "Trip not found"


class TestSavedRouteRoutes:
    """Test /api/routes."""

    def test_save(self, client):
        response = client.post("/api/routes/save", json={
            "source": "Mumbai",
            "destination": "Pune",
            "vehicleType": "Car",
            "distance": 148.2,
            "emissions": 20.5,
        })

        assert response.status_code == 201
        assert response.json()["data"]["routeSource"] == "OSM"

    def test_last_when_empty(self, client):
        response = client.get("/api/routes/last")

        assert response.status_code == 404
        assert response.json()["error"] == "Route not found"

    def test_last(self, client, fake_mongo):
        fake_mongo.admin["routes"].find_one.return_value = {"source": "Mumbai", "destination": "Pune"}

        response = client.get("/api/routes/last")

        assert response.json()["data"]["destination"] == "Pune"

    def test_delete_all(self, client, fake_mongo):
        fake_mongo.admin["routes"].delete_many.return_value.deleted_count = 3

        body = client.delete("/api/routes/delete-all").json()

        assert body["data"] == {"deletedCount": 3}
        assert body["count"] == 3


class TestAdminRoutes:
    """Test setup and maintenance endpoints."""

    def test_init_db_usage(self, client):
        body = client.get("/api/admin/init-db").json()
        assert "includeSampleData" in body["data"]["options"]

    def test_init_db(self, client, fake_mongo):
        body = client.post("/api/admin/init-db").json()

        assert body["success"] is True
        assert "vehicles" in body["data"]["adminDb"]["collections"]
        assert body["data"]["errors"] == []
        fake_mongo.admin["vehicles"].update_one.assert_not_called()

    def test_init_db_with_sample_data(self, client, fake_mongo):
        body = client.post("/api/admin/init-db", json={"includeSampleData": True}).json()

        assert body["data"]["adminDb"]["message"].endswith("(with sample data)")
        assert fake_mongo.admin["vehicles"].update_one.call_count == 2

    def test_create_admin(self, client):
        body = client.post("/api/admin/create-admin").json()

        assert body["message"] == "Admin user created successfully"
        assert body["data"]["username"] == "admin"
        assert "passwordHash" not in body["data"]

    def test_create_admin_twice(self, client, fake_mongo):
        fake_mongo.admin["admins"].find_one.return_value = {"username": "admin", "passwordHash": "x"}

        body = client.post("/api/admin/create-admin").json()

        assert body["message"] == "Admin user already exists"

    def test_fleet_summary(self, client):
        body = client.get("/api/admin/fleet-summary").json()
        assert body["data"]["totalVehicles"] == 0

    def test_connection_ok(self, client):
        response = client.get("/api/test-connection")

        assert response.status_code == 200
        assert response.json()["data"]["adminDb"]["connected"] is True

    def test_connection_down(self, client, fake_mongo):
        fake_mongo.healthy = False

        response = client.get("/api/test-connection")

        assert response.status_code == 500
        assert response.json()["success"] is False
