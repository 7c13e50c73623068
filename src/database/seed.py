"""
Sample Data - Seed and dump the document databases.

Used by the admin maintenance endpoints:
- seed_employees      : the fleet staff roster into `employees`
- seed_employee       : one placeholder employee
- setup_fleet_data    : vehicles, profiles and two expense claims (replaces existing)
- populate_all_data   : every collection the dashboard reads (replaces existing)
- dump_collections    : read collections back by type

Each insert is attempted on its own; failures are collected per category
rather than aborting the run.
"""
import time
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from pymongo.errors import PyMongoError

from src.core.exceptions import ValidationError
from src.core.logging_config import get_logger
from src.database.documents import DocumentRepository
from src.database.mongo import MongoConnection

logger = get_logger(__name__)


FLEET_EMPLOYEES: List[Dict[str, Any]] = [
    {"name": "Michael Rodriguez", "employeeId": "EMP001", "position": "Senior Driver",
     "assignedVehicleId": "vehicle_001", "contacts": [("Maria Rodriguez", "Spouse"), ("Carlos Rodriguez", "Brother")]},
    {"name": "Sarah Johnson", "employeeId": "EMP002", "position": "Driver",
     "assignedVehicleId": "vehicle_002", "contacts": [("David Johnson", "Husband"), ("Lisa Johnson", "Sister")]},
    {"name": "James Wilson", "employeeId": "EMP003", "position": "Driver",
     "assignedVehicleId": "vehicle_003", "contacts": [("Emily Wilson", "Wife"), ("Robert Wilson", "Father")]},
    {"name": "Lisa Chen", "employeeId": "EMP004", "position": "Driver",
     "contacts": [("Kevin Chen", "Husband"), ("Amy Chen", "Mother")]},
    {"name": "Robert Martinez", "employeeId": "EMP005", "position": "Driver",
     "contacts": [("Carmen Martinez", "Wife"), ("Antonio Martinez", "Brother")]},
    {"name": "Jennifer Davis", "employeeId": "EMP006", "position": "Driver",
     "contacts": [("Mark Davis", "Husband"), ("Susan Davis", "Sister")]},
    {"name": "Thomas Anderson", "employeeId": "EMP007", "position": "Driver",
     "contacts": [("Patricia Anderson", "Wife"), ("Michael Anderson", "Son")]},
    {"name": "Amanda Taylor", "employeeId": "EMP008", "position": "Driver",
     "contacts": [("John Taylor", "Husband"), ("Rachel Taylor", "Sister")]},
    {"name": "Christopher Brown", "employeeId": "EMP009", "position": "Driver",
     "contacts": [("Michelle Brown", "Wife"), ("Daniel Brown", "Brother")]},
    {"name": "Jessica White", "employeeId": "EMP010", "position": "Driver",
     "contacts": [("Steven White", "Husband"), ("Karen White", "Mother")]},
    {"name": "Daniel Garcia", "employeeId": "EMP011", "position": "Fleet Mechanic", "department": "Maintenance",
     "contacts": [("Isabella Garcia", "Wife"), ("Miguel Garcia", "Father")]},
    {"name": "Ashley Miller", "employeeId": "EMP012", "position": "Fleet Mechanic", "department": "Maintenance",
     "contacts": [("Ryan Miller", "Husband"), ("Nicole Miller", "Sister")]},
    {"name": "Kevin Thompson", "employeeId": "EMP013", "position": "Fleet Supervisor",
     "contacts": [("Laura Thompson", "Wife"), ("Brian Thompson", "Brother")]},
    {"name": "Nicole Lee", "employeeId": "EMP014", "position": "Fleet Coordinator",
     "contacts": [("Jason Lee", "Husband"), ("Michelle Lee", "Sister")]},
    {"name": "Ryan Clark", "employeeId": "EMP015", "position": "Driver",
     "contacts": [("Stephanie Clark", "Wife"), ("Matthew Clark", "Brother")]},
]

SAMPLE_VEHICLES: List[Dict[str, Any]] = [
    {
        "id": "vehicle_001",
        "name": "Volvo Prime Mover VNL 860",
        "plateNumber": "TRK-001",
        "model": "Volvo Prime Mover VNL 860",
        "status": "Idle",
        "fuelLevel": 75,
        "lastMaintenance": "2024-06-15T00:00:00.000Z",
        "assignedTo": "EMP001",
    },
    {
        "id": "vehicle_002",
        "name": "Ford Transit Van Transit-250",
        "plateNumber": "VAN-002",
        "model": "Ford Transit Van Transit-250",
        "status": "Idle",
        "fuelLevel": 90,
        "lastMaintenance": "2024-07-20T00:00:00.000Z",
        "assignedTo": "EMP002",
    },
    {
        "id": "vehicle_003",
        "name": "Scania Rigid Truck",
        "plateNumber": "TRK-003",
        "model": "Scania Rigid Truck",
        "status": "Maintenance",
        "fuelLevel": 20,
        "lastMaintenance": "2025-09-13T00:00:00.000Z",
        "assignedTo": None,
    },
]

SAMPLE_TRIPS: List[Dict[str, Any]] = [
    {
        "id": "trip_001",
        "vehicleId": "vehicle_001",
        "employeeName": "Raja",
        "source": "New York",
        "destination": "Boston",
        "startDate": "2024-09-10T08:00:00.000Z",
        "endDate": "2024-09-10T16:00:00.000Z",
        "status": "Completed",
        "expenses": [],
        "plan": {"source": "New York", "destination": "Boston", "distance": 200,
                 "estimatedTime": "8 hours", "route": "I-95 N"},
    },
    {
        "id": "trip_002",
        "vehicleId": "vehicle_002",
        "employeeName": "Ram",
        "source": "Los Angeles",
        "destination": "San Francisco",
        "startDate": "2024-09-12T09:00:00.000Z",
        "endDate": None,
        "status": "Ongoing",
        "expenses": [],
        "plan": {"source": "Los Angeles", "destination": "San Francisco", "distance": 380,
                 "estimatedTime": "6 hours", "route": "I-5 N"},
    },
]

SAMPLE_ROUTES: List[Dict[str, Any]] = [
    {
        "source": "New York", "destination": "Boston", "vehicleType": "Truck", "vehicleYear": 2023,
        "fuelType": "Diesel", "distance": 200.0, "emissions": 45.2, "routeSource": "OSM",
        "routeType": "Highway", "traffic": "Normal", "date": "2024-09-10T00:00:00",
    },
    {
        "source": "Los Angeles", "destination": "San Francisco", "vehicleType": "Van", "vehicleYear": 2022,
        "fuelType": "Gasoline", "distance": 380.0, "emissions": 67.8, "routeSource": "OSM",
        "routeType": "Highway", "traffic": "Heavy", "date": "2024-09-12T00:00:00",
    },
]

SAMPLE_EXPENSES: List[Dict[str, Any]] = [
    {"id": "expense_001", "employeeId": "EMP001", "type": "Fuel", "amount": 17575.0,
     "date": "2024-09-10", "tripId": "trip_001", "status": "approved"},
    {"id": "expense_002", "employeeId": "EMP002", "type": "Fuel", "amount": 45000.0,
     "date": "2024-09-12", "tripId": "trip_002", "status": "pending"},
    {"id": "expense_003", "employeeId": "EMP001", "type": "Toll", "amount": 2500.0,
     "date": "2024-09-10", "tripId": "trip_001", "status": "approved"},
]

SAMPLE_MAINTENANCE: List[Dict[str, Any]] = [
    {"id": "maint_001", "vehicleId": "vehicle_001", "type": "Regular Service",
     "description": "Oil change and filter replacement", "cost": 150.0,
     "date": "2024-06-15T00:00:00.000Z", "mileage": 50000, "status": "completed"},
    {"id": "maint_002", "vehicleId": "vehicle_003", "type": "Engine Repair",
     "description": "Engine overhaul and parts replacement", "cost": 2500.0,
     "date": "2024-09-13T00:00:00.000Z", "mileage": 75000, "status": "in_progress"},
]

SAMPLE_FUEL: List[Dict[str, Any]] = [
    {"id": "fuel_001", "vehicleId": "vehicle_001", "amount": 50.5, "cost": 175.75,
     "date": "2024-09-10T08:00:00.000Z", "location": "New York Gas Station", "mileage": 50000},
    {"id": "fuel_002", "vehicleId": "vehicle_002", "amount": 45.0, "cost": 180.0,
     "date": "2024-09-12T09:00:00.000Z", "location": "Los Angeles Gas Station", "mileage": 35000},
]

# type -> (database, collection)
DUMP_TARGETS = {
    "vehicles": ("admin", "vehicles"),
    "trips": ("admin", "trips"),
    "routes": ("admin", "routes"),
    "expenses": ("employee", "expenses"),
    "maintenance": ("admin", "maintenance_records"),
    "fuel": ("admin", "fuel_records"),
    "employees": ("employee", "employee_profiles"),
}


def _now() -> str:
    return datetime.utcnow().isoformat()


def _sample_profiles() -> List[Dict[str, Any]]:
    now = _now()
    return [
        {
            "id": f"emp_00{index}",
            "name": name,
            "employeeId": f"EMP00{index}",
            "email": f"{name.lower()}@fleetflow.com",
            "phone": f"+1-555-0{index}01",
            "department": "Operations",
            "position": "Driver",
            "assignedVehicleId": f"vehicle_00{index}",
            "emergencyContacts": [
                {"name": f"{name} Emergency", "phone": f"+1-555-0{index}02", "relationship": "Spouse"}
            ],
            "createdAt": now,
            "updatedAt": now,
        }
        for index, name in enumerate(["Raja", "Ram"], start=1)
    ]


def _roster_document(entry: Dict[str, Any]) -> Dict[str, Any]:
    number = entry["employeeId"][3:]
    now = _now()
    return {
        "id": f"emp_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}",
        "name": entry["name"],
        "employeeId": entry["employeeId"],
        "email": f"{entry['name'].lower().replace(' ', '.')}@fleetflow.com",
        "phone": f"+1-555-{number[1:]}01",
        "department": entry.get("department", "Operations"),
        "position": entry["position"],
        "assignedVehicleId": entry.get("assignedVehicleId"),
        "emergencyContacts": [
            {"name": name, "phone": f"+1-555-{number[1:]}0{offset}", "relationship": relationship}
            for offset, (name, relationship) in enumerate(entry["contacts"], start=2)
        ],
        "createdAt": now,
        "updatedAt": now,
    }


def _insert_each(repo: DocumentRepository, docs: List[Dict[str, Any]], label: str) -> Dict[str, Any]:
    result: Dict[str, Any] = {"created": 0, "errors": []}
    for doc in docs:
        try:
            repo.insert(dict(doc))
            result["created"] += 1
        except PyMongoError as e:
            name = doc.get("id") or f"{doc.get('source')}-{doc.get('destination')}"
            result["errors"].append(f"{label} {name}: {e}")
    return result


class SampleData:
    """
    Seeds and dumps the admin and employee databases.

    Example:
        >>> SampleData(mongo).populate_all_data()["summary"]["vehiclesCreated"]
        3
    """

    def __init__(self, mongo: MongoConnection):
        self.mongo = mongo

    def _admin(self, name: str) -> DocumentRepository:
        return DocumentRepository(self.mongo.get_admin_collection(name))

    def _employee(self, name: str) -> DocumentRepository:
        return DocumentRepository(self.mongo.get_employee_collection(name))

    def seed_employees(self, clear_existing: bool = False) -> Dict[str, int]:
        """Insert the staff roster into `employees`, optionally clearing it first."""
        employees = self._employee("employees")
        cleared = employees.delete_all() if clear_existing else 0

        inserted = _insert_each(
            employees,
            [_roster_document(entry) for entry in FLEET_EMPLOYEES],
            "Employee",
        )
        if inserted["errors"]:
            logger.warning(f"Employee seeding errors: {inserted['errors']}")

        logger.info(f"Seeded {inserted['created']} employees (cleared {cleared})")
        return {
            "clearedCount": cleared,
            "insertedCount": inserted["created"],
            "totalEmployees": employees.count(),
        }

    def seed_employee(
        self,
        name: Optional[str] = None,
        employee_id: Optional[str] = None,
        assigned_vehicle_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        employee = self._employee("employees").insert({
            "id": f"emp_{int(time.time() * 1000)}",
            "name": name or "John Doe",
            "employeeId": employee_id or "EMP001",
            "assignedVehicleId": assigned_vehicle_id,
            "createdAt": _now(),
            "note": "Seeded via /api/employee/seed",
        })
        return {"insertedId": employee["_id"], "db": self.mongo.employee_db_name}

    def employee_count(self) -> Dict[str, Any]:
        return {"db": self.mongo.employee_db_name, "count": self._employee("employees").count()}

    def setup_fleet_data(self) -> Dict[str, Any]:
        """Replace vehicles, employees and profiles with the three-vehicle demo fleet."""
        self._admin("vehicles").delete_all()
        self._employee("employees").delete_all()
        self._employee("employee_profiles").delete_all()

        results = {
            "vehicles": _insert_each(self._admin("vehicles"), SAMPLE_VEHICLES, "Vehicle"),
            "employees": _insert_each(self._employee("employee_profiles"), _sample_profiles(), "Employee"),
        }
        claims = [
            {**claim, "status": "approved"}
            for claim in SAMPLE_EXPENSES if claim["type"] == "Fuel"
        ]
        claims_result = _insert_each(self._employee("expenses"), claims, "Expense")
        if claims_result["errors"]:
            logger.warning(f"Sample expense errors: {claims_result['errors']}")

        logger.info("Fleet demo data set up")
        return {
            "results": results,
            "summary": {
                "vehiclesCreated": results["vehicles"]["created"],
                "employeesCreated": results["employees"]["created"],
                "totalErrors": sum(len(r["errors"]) for r in results.values()),
            },
            "timestamp": _now(),
        }

    def populate_all_data(self) -> Dict[str, Any]:
        """Replace every dashboard collection with sample data."""
        for name in ("vehicles", "trips", "routes", "maintenance_records", "fuel_records"):
            self._admin(name).delete_all()
        for name in ("employee_profiles", "expenses"):
            self._employee(name).delete_all()

        results = {
            "vehicles": _insert_each(self._admin("vehicles"), SAMPLE_VEHICLES, "Vehicle"),
            "employees": _insert_each(self._employee("employee_profiles"), _sample_profiles(), "Employee"),
            "trips": _insert_each(self._admin("trips"), SAMPLE_TRIPS, "Trip"),
            "routes": _insert_each(self._admin("routes"), SAMPLE_ROUTES, "Route"),
            "expenses": _insert_each(self._employee("expenses"), SAMPLE_EXPENSES, "Expense"),
            "maintenance": _insert_each(self._admin("maintenance_records"), SAMPLE_MAINTENANCE, "Maintenance"),
            "fuel": _insert_each(self._admin("fuel_records"), SAMPLE_FUEL, "Fuel"),
        }
        summary = {f"{name}Created": result["created"] for name, result in results.items()}
        summary["totalErrors"] = sum(len(r["errors"]) for r in results.values())

        logger.info(f"Sample data populated: {summary}")
        return {"results": results, "summary": summary, "timestamp": _now()}

    def dump_collections(self, data_type: str = "all") -> Dict[str, List[Dict[str, Any]]]:
        """
        Read whole collections back.

        Args:
            data_type: "all" or one of DUMP_TARGETS

        Raises:
            ValidationError: For an unknown type
        """
        if data_type != "all" and data_type not in DUMP_TARGETS:
            raise ValidationError(
                f"Invalid type. Must be one of: all, {', '.join(DUMP_TARGETS)}", field="type"
            )

        data = {}
        for name, (database, collection) in DUMP_TARGETS.items():
            if data_type in ("all", name):
                repo = self._admin(collection) if database == "admin" else self._employee(collection)
                data[name] = repo.list()
        return data
