"""
Database Initialization - Create tables, indexes and sample data.

Relational tables are created from the ORM metadata. Document collections
need no schema, but their indexes are created here.
"""
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Tuple

from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from src.core.logging_config import get_logger
from src.database.connection import DatabaseConnection, get_database
from src.database.documents import DocumentRepository
from src.database.models import Base
from src.database.mongo import MongoConnection

logger = get_logger(__name__)

ADMIN_COLLECTIONS = [
    "vehicles",
    "trips",
    "admins",
    "routes",
    "fleet_settings",
    "maintenance_records",
    "fuel_records",
]

EMPLOYEE_COLLECTIONS = [
    "employees",
    "employee_profiles",
    "odometer_readings",
    "expenses",
    "employee_trips",
    "emergency_contacts",
    "reminders",
    "employee_settings",
]

# (collection, [(field, direction)], unique)
IndexSpec = Tuple[str, List[Tuple[str, int]], bool]

ADMIN_INDEXES: List[IndexSpec] = [
    ("vehicles", [("plateNumber", ASCENDING)], True),
    ("vehicles", [("status", ASCENDING)], False),
    ("vehicles", [("assignedTo", ASCENDING)], False),
    ("trips", [("vehicleId", ASCENDING)], False),
    ("trips", [("employeeName", ASCENDING)], False),
    ("trips", [("status", ASCENDING)], False),
    ("trips", [("startDate", DESCENDING)], False),
    ("routes", [("date", DESCENDING)], False),
]

EMPLOYEE_INDEXES: List[IndexSpec] = [
    ("employee_profiles", [("employeeId", ASCENDING)], True),
    ("employee_profiles", [("assignedVehicleId", ASCENDING)], False),
    ("odometer_readings", [("driverId", ASCENDING)], False),
    ("odometer_readings", [("vehicleId", ASCENDING)], False),
    ("odometer_readings", [("status", ASCENDING)], False),
    ("odometer_readings", [("submittedAt", DESCENDING)], False),
    ("expenses", [("employeeId", ASCENDING)], False),
    ("expenses", [("status", ASCENDING)], False),
    ("expenses", [("date", DESCENDING)], False),
    ("expenses", [("tripId", ASCENDING)], False),
]


def init_sql_tables(db: Optional[DatabaseConnection] = None) -> bool:
    """
    Create relational tables if they don't exist.

    Returns:
        True if tables were created successfully
    """
    try:
        db = db or get_database()
        Base.metadata.create_all(db.engine)
        logger.info("Relational tables initialized successfully")
        return True

    except Exception as e:
        logger.error(f"Failed to initialize relational tables: {e}")
        raise


def drop_sql_tables(db: Optional[DatabaseConnection] = None) -> bool:
    """
    Drop relational tables (use with caution!).

    This is mainly for testing/development purposes.
    """
    try:
        db = db or get_database()
        Base.metadata.drop_all(db.engine)
        logger.warning("Relational tables dropped")
        return True

    except Exception as e:
        logger.error(f"Failed to drop relational tables: {e}")
        raise


def _create_indexes(get_collection, names: List[str], specs: List[IndexSpec], errors: List[str]) -> List[str]:
    initialized = []
    for name in names:
        try:
            get_collection(name).create_index([("createdAt", ASCENDING)])
            initialized.append(name)
        except PyMongoError as e:
            errors.append(f"Failed to create collection {name}: {e}")

    for name, keys, unique in specs:
        try:
            get_collection(name).create_index(keys, unique=unique)
        except PyMongoError as e:
            errors.append(f"Failed to create index {keys} on {name}: {e}")
    return initialized


def _sample_vehicles() -> List[Dict[str, Any]]:
    now = datetime.utcnow()
    return [
        {
            "id": "vehicle_001",
            "name": "Fleet Car 1",
            "plateNumber": "ABC-123",
            "model": "Toyota Camry 2023",
            "status": "Idle",
            "fuelLevel": 85,
            "lastMaintenance": now.isoformat(),
            "assignedTo": None,
        },
        {
            "id": "vehicle_002",
            "name": "Fleet Car 2",
            "plateNumber": "XYZ-789",
            "model": "Honda Accord 2022",
            "status": "On Trip",
            "fuelLevel": 60,
            "lastMaintenance": (now - timedelta(days=30)).isoformat(),
            "assignedTo": "john.doe",
        },
    ]


def _sample_profile() -> Dict[str, Any]:
    now = datetime.utcnow().isoformat()
    return {
        "id": "emp_001",
        "name": "John Doe",
        "employeeId": "EMP001",
        "email": "john.doe@company.com",
        "phone": "+1-555-0123",
        "department": "Sales",
        "position": "Sales Representative",
        "assignedVehicleId": "vehicle_002",
        "emergencyContacts": [
            {"name": "Jane Doe", "phone": "+1-555-0124", "relationship": "Spouse"}
        ],
        "createdAt": now,
        "updatedAt": now,
    }


def init_document_indexes(mongo: MongoConnection, include_sample_data: bool = False) -> Dict[str, Any]:
    """
    Create collection indexes in both document databases.

    Individual failures are collected rather than raised so one bad index
    does not block the rest.

    Returns:
        {"adminDb": {...}, "employeeDb": {...}, "errors": [...]}
    """
    errors: List[str] = []

    admin = _create_indexes(mongo.get_admin_collection, ADMIN_COLLECTIONS, ADMIN_INDEXES, errors)
    employee = _create_indexes(mongo.get_employee_collection, EMPLOYEE_COLLECTIONS, EMPLOYEE_INDEXES, errors)

    results = {
        "adminDb": {
            "collections": admin,
            "message": f"Admin database initialized with {len(admin)} collections",
        },
        "employeeDb": {
            "collections": employee,
            "message": f"Employee database initialized with {len(employee)} collections",
        },
        "errors": errors,
    }

    if include_sample_data:
        try:
            vehicles = DocumentRepository(mongo.get_admin_collection("vehicles"))
            for vehicle in _sample_vehicles():
                vehicles.upsert(vehicle["id"], vehicle)

            profile = _sample_profile()
            profiles = DocumentRepository(mongo.get_employee_collection("employee_profiles"), key="employeeId")
            profiles.upsert(profile["employeeId"], profile)

            results["adminDb"]["message"] += " (with sample data)"
            results["employeeDb"]["message"] += " (with sample data)"
        except PyMongoError as e:
            errors.append(f"Failed to insert sample data: {e}")

    logger.info(f"Document indexes initialized: admin={len(admin)}, employee={len(employee)}, errors={len(errors)}")
    return results


if __name__ == "__main__":
    print("Initializing relational tables...")
    init_sql_tables()
    print("Done!")
