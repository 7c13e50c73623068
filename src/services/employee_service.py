"""
Employee Service - Business logic for the employee database.

Collections served:
- employees          : employee records managed by admins
- employee_profiles  : self-service profiles keyed by employeeId
- expenses           : expense claims (always created as pending)
- odometer_readings  : odometer photos submitted from the field
"""
import time
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from pymongo.errors import DuplicateKeyError

from src.core.config import get_settings
from src.core.exceptions import NotFoundError, ValidationError
from src.core.logging_config import get_logger
from src.database.documents import DocumentRepository, newest_first, update_fields
from src.database.mongo import MongoConnection, get_mongo
from src.models.employee import (
    EmployeeCreate,
    EmployeeUpdate,
    ExpenseCreate,
    ExpenseUpdate,
    OdometerStatusUpdate,
    OdometerSubmission,
    ProfileUpdate,
)

logger = get_logger(__name__)

REVIEW_STATUSES = ("pending", "approved", "rejected")
ODOMETER_URL_PREFIX = "/uploads/odometer"


def _now() -> str:
    return datetime.utcnow().isoformat()


class EmployeeService:
    """
    Service for employee records, profiles, expenses and odometer readings.

    Args:
        mongo: Document store connection (global singleton if omitted)
        upload_dir: Root directory for uploaded photos (settings if omitted)
    """

    def __init__(self, mongo: Optional[MongoConnection] = None, upload_dir: Optional[str] = None):
        self.mongo = mongo or get_mongo()
        self.upload_dir = Path(upload_dir or get_settings().upload_dir)

        self.employees = DocumentRepository(self.mongo.get_employee_collection("employees"))
        self.profiles = DocumentRepository(
            self.mongo.get_employee_collection("employee_profiles"), key="employeeId"
        )
        self.expenses = DocumentRepository(self.mongo.get_employee_collection("expenses"))
        self.odometer = DocumentRepository(self.mongo.get_employee_collection("odometer_readings"))

    # ============================================================
    # Employees
    # ============================================================

    def list_employees(self) -> List[Dict[str, Any]]:
        return self.employees.list(sort=newest_first("createdAt"))

    def create_employee(self, payload: EmployeeCreate) -> Dict[str, Any]:
        now = _now()
        doc = payload.to_document()
        doc["id"] = payload.id or f"emp_{int(time.time() * 1000)}"
        doc["createdAt"] = now
        doc["updatedAt"] = now

        employee = self.employees.insert(doc)
        logger.info(f"Employee created: {employee['id']} ({payload.employee_id})")
        return employee

    def update_employee(self, payload: EmployeeUpdate) -> Dict[str, Any]:
        fields = update_fields(payload, "id")
        fields["updatedAt"] = _now()
        if not self.employees.update(payload.id, fields):
            raise NotFoundError("Employee", payload.id)
        return {"id": payload.id, **fields}

    def delete_employee(self, employee_id: str) -> None:
        if not self.employees.delete(employee_id):
            raise NotFoundError("Employee", employee_id)
        logger.info(f"Employee deleted: {employee_id}")

    # ============================================================
    # Profiles
    # ============================================================

    def get_profile(self, employee_id: Optional[str]) -> Dict[str, Any]:
        if not employee_id:
            raise ValidationError("Employee ID is required", field="employeeId")
        profile = self.profiles.get(employee_id)
        if profile is None:
            raise NotFoundError("Employee profile", employee_id)
        return profile

    def create_profile(self, payload: EmployeeCreate) -> Dict[str, Any]:
        now = _now()
        doc = payload.to_document()
        doc["id"] = payload.id or f"emp_{int(time.time() * 1000)}"
        doc["createdAt"] = now
        doc["updatedAt"] = now

        try:
            profile = self.profiles.insert(doc)
        except DuplicateKeyError:
            raise ValidationError(
                f"A profile for employee {payload.employee_id} already exists", field="employeeId"
            )
        logger.info(f"Employee profile created: {payload.employee_id}")
        return profile

    def update_profile(self, payload: ProfileUpdate) -> Dict[str, Any]:
        fields = update_fields(payload, "employeeId")
        fields["updatedAt"] = _now()
        if not self.profiles.update(payload.employee_id, fields):
            raise NotFoundError("Employee profile", payload.employee_id)
        return {"employeeId": payload.employee_id, **fields}

    # ============================================================
    # Expenses
    # ============================================================

    def list_expenses(
        self,
        employee_id: Optional[str] = None,
        status: Optional[str] = None,
        trip_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        filters = {}
        if employee_id:
            filters["employeeId"] = employee_id
        if status:
            filters["status"] = status
        if trip_id:
            filters["tripId"] = trip_id
        return self.expenses.list(filters, sort=newest_first("date"))

    def create_expense(self, payload: ExpenseCreate) -> Dict[str, Any]:
        doc = payload.to_document()
        doc["id"] = payload.id or str(uuid.uuid4())
        doc["amount"] = float(payload.amount)
        doc["status"] = "pending"
        doc["createdAt"] = _now()

        expense = self.expenses.insert(doc)
        logger.info(f"Expense created: {expense['id']} {payload.type} {payload.amount} ({payload.employee_id})")
        return expense

    def update_expense(self, payload: ExpenseUpdate) -> Dict[str, Any]:
        fields = update_fields(payload, "id")
        if "amount" in fields and fields["amount"] is not None:
            fields["amount"] = float(fields["amount"])
        fields["updatedAt"] = _now()
        if not self.expenses.update(payload.id, fields):
            raise NotFoundError("Expense", payload.id)
        return {"id": payload.id, **fields}

    def delete_expense(self, expense_id: str) -> None:
        if not self.expenses.delete(expense_id):
            raise NotFoundError("Expense", expense_id)
        logger.info(f"Expense deleted: {expense_id}")

    # ============================================================
    # Odometer readings
    # ============================================================

    def _store_photo(self, content: bytes, filename: Optional[str]) -> Path:
        """Write the photo under <upload_dir>/odometer and return its path."""
        extension = Path(filename or "").suffix.lstrip(".").lower() or "jpg"
        stored_name = f"{uuid.uuid4()}.{extension}"

        target_dir = self.upload_dir / "odometer"
        target_dir.mkdir(parents=True, exist_ok=True)
        target = target_dir / stored_name
        target.write_bytes(content)
        return target

    def submit_odometer(
        self,
        submission: OdometerSubmission,
        photo: Optional[bytes],
        photo_filename: Optional[str] = None,
    ) -> Dict[str, Any]:
        if not photo:
            raise ValidationError("Missing required fields: photo", field="photo")

        photo_path = self._store_photo(photo, photo_filename)
        photo_url = f"{ODOMETER_URL_PREFIX}/{photo_path.name}"
        doc = {
            "id": str(uuid.uuid4()),
            "photoUrl": photo_url,
            "odometerValue": submission.odometer_value,
            "vehicleId": submission.vehicle_id,
            "tripId": submission.trip_id,
            "driverId": submission.driver_id,
            "latitude": submission.latitude,
            "longitude": submission.longitude,
            "timestamp": submission.timestamp or _now(),
            "exifData": submission.exif_data,
            "status": "pending",
            "submittedAt": _now(),
        }

        try:
            reading = self.odometer.insert(doc)
        except Exception:
            photo_path.unlink(missing_ok=True)
            raise
        logger.info(
            f"Odometer reading submitted: vehicle={submission.vehicle_id} "
            f"value={submission.odometer_value} photo={photo_url}"
        )
        return reading

    def list_odometer(self, status: Optional[str] = None, driver_id: Optional[str] = None) -> List[Dict[str, Any]]:
        filters = {}
        if status:
            filters["status"] = status
        if driver_id:
            filters["driverId"] = driver_id
        return self.odometer.list(filters, sort=newest_first("submittedAt"))

    def update_odometer_status(self, payload: OdometerStatusUpdate) -> Dict[str, Any]:
        if payload.status not in REVIEW_STATUSES:
            raise ValidationError(
                f"Invalid status. Must be one of: {', '.join(REVIEW_STATUSES)}", field="status"
            )

        fields = {"status": payload.status, "updatedAt": _now()}
        if payload.admin_notes is not None:
            fields["adminNotes"] = payload.admin_notes

        if not self.odometer.update(payload.id, fields):
            raise NotFoundError("Odometer reading", payload.id)
        logger.info(f"Odometer reading {payload.id} marked {payload.status}")
        return {"id": payload.id, **fields}


def get_employee_service() -> EmployeeService:
    """FastAPI dependency provider."""
    return EmployeeService()
