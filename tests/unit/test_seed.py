"""
Unit tests for the sample data loaders.
"""
import pytest
from pymongo.errors import PyMongoError

from src.core.exceptions import ValidationError
from src.database.seed import FLEET_EMPLOYEES, SampleData


@pytest.fixture
def sample_data(document_store):
    return SampleData(document_store)


class TestSeedEmployees:
    """Test the staff roster."""

    def test_inserts_roster(self, sample_data, document_store):
        result = sample_data.seed_employees()

        assert result == {"clearedCount": 0, "insertedCount": 15, "totalEmployees": 15}
        stored = document_store.get_employee_collection("employees").find_one({"employeeId": "EMP011"})
        assert stored["department"] == "Maintenance"
        assert stored["email"] == "daniel.garcia@fleetflow.com"
        assert stored["id"].startswith("emp_")
        assert len(stored["emergencyContacts"]) == 2

    def test_clear_existing(self, sample_data):
        sample_data.seed_employees()

        result = sample_data.seed_employees(clear_existing=True)

        assert result["clearedCount"] == len(FLEET_EMPLOYEES)
        assert result["totalEmployees"] == 15

    def test_without_clearing_adds_to_existing(self, sample_data):
        sample_data.seed_employees()
        assert sample_data.seed_employees()["totalEmployees"] == 30


class TestSingleEmployee:
    """Test the placeholder employee."""

    def test_defaults(self, sample_data, document_store):
        result = sample_data.seed_employee()

        stored = document_store.get_employee_collection("employees").find_one({})
        assert result["insertedId"] == str(stored["_id"])
        assert stored["name"] == "John Doe"
        assert stored["employeeId"] == "EMP001"
        assert stored["assignedVehicleId"] is None

    def test_count(self, sample_data):
        sample_data.seed_employee(name="Asha", employee_id="E-1")
        sample_data.seed_employee(name="Ravi", employee_id="E-2")

        assert sample_data.employee_count()["count"] == 2


class TestPopulateAllData:
    """Test the full sample data set."""

    def test_summary(self, sample_data):
        result = sample_data.populate_all_data()

        assert result["summary"] == {
            "vehiclesCreated": 3,
            "employeesCreated": 2,
            "tripsCreated": 2,
            "routesCreated": 2,
            "expensesCreated": 3,
            "maintenanceCreated": 2,
            "fuelCreated": 2,
            "totalErrors": 0,
        }
        assert result["timestamp"]

    def test_replaces_existing_records(self, sample_data, document_store):
        document_store.get_admin_collection("vehicles").insert_one({"id": "old", "plateNumber": "OLD-1"})
        document_store.get_employee_collection("expenses").insert_one({"id": "old", "amount": 1})

        sample_data.populate_all_data()

        vehicles = document_store.get_admin_collection("vehicles")
        assert vehicles.count_documents({}) == 3
        assert vehicles.find_one({"id": "old"}) is None
        assert document_store.get_employee_collection("expenses").count_documents({}) == 3

    def test_failed_inserts_are_collected(self, fake_mongo):
        fake_mongo.admin["vehicles"].insert_one.side_effect = PyMongoError("write failed")

        result = SampleData(fake_mongo).populate_all_data()

        assert result["results"]["vehicles"]["created"] == 0
        assert len(result["results"]["vehicles"]["errors"]) == 3
        assert result["results"]["vehicles"]["errors"][0].startswith("Vehicle vehicle_001")
        assert result["summary"]["tripsCreated"] == 2
        assert result["summary"]["totalErrors"] == 3


class TestSetupFleetData:
    """Test the demo fleet."""

    def test_setup(self, sample_data, document_store):
        document_store.get_employee_collection("employees").insert_one({"id": "emp_x"})

        result = sample_data.setup_fleet_data()

        assert result["summary"] == {"vehiclesCreated": 3, "employeesCreated": 2, "totalErrors": 0}
        assert document_store.get_employee_collection("employees").count_documents({}) == 0
        profile = document_store.get_employee_collection("employee_profiles").find_one({"employeeId": "EMP002"})
        assert profile["assignedVehicleId"] == "vehicle_002"
        claims = list(document_store.get_employee_collection("expenses").find({}))
        assert {c["status"] for c in claims} == {"approved"}


class TestDumpCollections:
    """Test reading collections back by type."""

    def test_all(self, sample_data):
        sample_data.populate_all_data()

        data = sample_data.dump_collections()

        assert set(data) == {"vehicles", "trips", "routes", "expenses", "maintenance", "fuel", "employees"}
        assert len(data["maintenance"]) == 2
        assert data["employees"][0]["email"].endswith("@fleetflow.com")
        assert isinstance(data["fuel"][0]["_id"], str)

    def test_single_type(self, sample_data):
        sample_data.populate_all_data()

        data = sample_data.dump_collections("fuel")

        assert list(data) == ["fuel"]
        assert {r["location"] for r in data["fuel"]} == {"New York Gas Station", "Los Angeles Gas Station"}

    def test_unknown_type(self, sample_data):
        with pytest.raises(ValidationError) as exc_info:
            sample_data.dump_collections("invoices")
        assert exc_info.value.field == "type"
