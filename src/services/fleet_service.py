"""
Fleet Service - Business logic for the admin database.

Collections served:
- vehicles : fleet vehicles
- trips    : trips with embedded expenses and plan
- routes   : routes saved from the route planner
- admins   : admin accounts

Routes stay thin: they validate the request body and call one method here.
"""
import hashlib
import time
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from pymongo.errors import DuplicateKeyError

from src.analytics import summarize_fleet
from src.core.exceptions import NotFoundError, ValidationError
from src.core.logging_config import get_logger
from src.database.documents import DocumentRepository, newest_first, update_fields
from src.database.mongo import MongoConnection, get_mongo
from src.models.fleet import SavedRouteCreate, TripCreate, TripUpdate, VehicleCreate, VehicleUpdate

logger = get_logger(__name__)

DEFAULT_ROUTE_SOURCE = "OSM"


def _millis() -> int:
    return int(time.time() * 1000)


def _now() -> str:
    return datetime.utcnow().isoformat()


def hash_password(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


class FleetService:
    """
    Service for vehicles, trips, saved routes and admin accounts.

    Example:
        >>> service = FleetService()
        >>> vehicle = service.create_vehicle(VehicleCreate(name="Van 1", plate_number="MH-01", model="Tata Ace"))
        >>> vehicle["status"]
        'Idle'
    """

    def __init__(self, mongo: Optional[MongoConnection] = None):
        self.mongo = mongo or get_mongo()
        self.vehicles = DocumentRepository(self.mongo.get_admin_collection("vehicles"))
        self.trips = DocumentRepository(self.mongo.get_admin_collection("trips"))
        self.routes = DocumentRepository(self.mongo.get_admin_collection("routes"))
        self.admins = DocumentRepository(self.mongo.get_admin_collection("admins"), key="username")
        self.expense_claims = DocumentRepository(self.mongo.get_employee_collection("expenses"))

    # ============================================================
    # Vehicles
    # ============================================================

    def list_vehicles(self) -> List[Dict[str, Any]]:
        return self.vehicles.list()

    def get_vehicle(self, vehicle_id: str) -> Dict[str, Any]:
        vehicle = self.vehicles.get(vehicle_id)
        if vehicle is None:
            raise NotFoundError("Vehicle", vehicle_id)
        return vehicle

    def create_vehicle(self, payload: VehicleCreate) -> Dict[str, Any]:
        doc = payload.to_document()
        doc["id"] = payload.id or f"vehicle_{_millis()}"
        doc["lastMaintenance"] = payload.last_maintenance or _now()

        try:
            vehicle = self.vehicles.insert(doc)
        except DuplicateKeyError:
            raise ValidationError(
                f"A vehicle with plate number {payload.plate_number} already exists",
                field="plateNumber",
            )

        logger.info(f"Vehicle created: {vehicle['id']} ({vehicle['plateNumber']})")
        return vehicle

    def update_vehicle(self, payload: VehicleUpdate) -> Dict[str, Any]:
        fields = update_fields(payload)
        try:
            updated = self.vehicles.update(payload.id, fields)
        except DuplicateKeyError:
            raise ValidationError(
                f"A vehicle with plate number {fields.get('plateNumber')} already exists",
                field="plateNumber",
            )
        if not updated:
            raise NotFoundError("Vehicle", payload.id)
        logger.info(f"Vehicle updated: {payload.id} fields={sorted(fields)}")
        return {"id": payload.id, **fields}

    def delete_vehicle(self, vehicle_id: str) -> None:
        if not self.vehicles.delete(vehicle_id):
            raise NotFoundError("Vehicle", vehicle_id)
        logger.info(f"Vehicle deleted: {vehicle_id}")

    # ============================================================
    # Trips
    # ============================================================

    def list_trips(
        self,
        status: Optional[str] = None,
        vehicle_id: Optional[str] = None,
        employee_name: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        filters = {}
        if status:
            filters["status"] = status
        if vehicle_id:
            filters["vehicleId"] = vehicle_id
        if employee_name:
            filters["employeeName"] = employee_name
        return self.trips.list(filters, sort=newest_first("startDate"))

    def get_trip(self, trip_id: str) -> Dict[str, Any]:
        trip = self.trips.get(trip_id)
        if trip is None:
            raise NotFoundError("Trip", trip_id)
        return trip

    def create_trip(self, payload: TripCreate) -> Dict[str, Any]:
        doc = payload.to_document()
        doc["id"] = payload.id or f"trip_{_millis()}"
        doc["startDate"] = payload.start_date or _now()

        trip = self.trips.insert(doc)
        logger.info(f"Trip created: {trip['id']} {trip['source']} -> {trip['destination']}")
        return trip

    def update_trip(self, payload: TripUpdate) -> Dict[str, Any]:
        fields = update_fields(payload)
        if not self.trips.update(payload.id, fields):
            raise NotFoundError("Trip", payload.id)
        logger.info(f"Trip updated: {payload.id} fields={sorted(fields)}")
        return {"id": payload.id, **fields}

    def delete_trip(self, trip_id: str) -> None:
        if not self.trips.delete(trip_id):
            raise NotFoundError("Trip", trip_id)
        logger.info(f"Trip deleted: {trip_id}")

    # ============================================================
    # Saved routes
    # ============================================================

    def save_route(self, payload: SavedRouteCreate) -> Dict[str, Any]:
        doc = {
            "source": payload.source,
            "destination": payload.destination,
            "vehicleType": payload.vehicle_type,
            "vehicleYear": payload.vehicle_year if payload.vehicle_year is not None else payload.model_year,
            "distance": float(payload.distance),
            "emissions": float(payload.emissions),
            "routeSource": payload.route_source or DEFAULT_ROUTE_SOURCE,
            "fuelType": payload.fuel_type,
            "routeType": payload.route_type,
            "traffic": payload.traffic,
            "claimedEfficiency": payload.claimed_efficiency,
            "claimedEfficiencyUnit": payload.claimed_efficiency_unit,
            "electricitySource": payload.electricity_source,
            "ecoTip": payload.eco_tip,
            "date": _now(),
        }
        route = self.routes.insert(doc)
        logger.info(f"Route saved: {payload.source} -> {payload.destination} ({route['distance']} km)")
        return route

    def list_routes(self) -> List[Dict[str, Any]]:
        return self.routes.list(sort=newest_first("date"))

    def last_route(self) -> Dict[str, Any]:
        route = self.routes.latest("date")
        if route is None:
            raise NotFoundError("Route")
        return route

    def delete_all_routes(self) -> int:
        return self.routes.delete_all()

    # ============================================================
    # Admin accounts
    # ============================================================

    @staticmethod
    def _public_admin(doc: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in doc.items() if k != "passwordHash"}

    def ensure_admin(self, username: str = "admin", password: str = "123") -> Tuple[Dict[str, Any], bool]:
        """
        Create the admin account unless it exists.

        Returns:
            (admin without password hash, created)
        """
        existing = self.admins.get(username)
        if existing is not None:
            return self._public_admin(existing), False

        admin = self.admins.insert({
            "username": username,
            "passwordHash": hash_password(password),
            "role": "admin",
            "createdAt": _now(),
        })
        logger.info(f"Admin account created: {username}")
        return self._public_admin(admin), True

    def get_admin(self, username: str = "admin") -> Dict[str, Any]:
        admin = self.admins.get(username)
        if admin is None:
            raise NotFoundError("Admin user", username)
        return self._public_admin(admin)

    # ============================================================
    # Summary
    # ============================================================

    def fleet_summary(self) -> Dict[str, Any]:
        return summarize_fleet(self.vehicles.list(), self.trips.list(), self.expense_claims.list())


def get_fleet_service() -> FleetService:
    """FastAPI dependency provider."""
    return FleetService()
