"""
Tour Service - Business logic for the relational store.

Handles:
- Tours with their destinations and participants
- Participant registration (capacity and duplicate checks)
- Route plans
- Emergency contacts
- Users

Updates only touch whitelisted columns; anything else is rejected with a
400 so a typo never silently does nothing.
"""
from datetime import date, datetime, time
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import Date, DateTime, Time
from sqlalchemy.exc import IntegrityError

from src.core.exceptions import BookingError, NotFoundError, ValidationError
from src.core.logging_config import get_logger
from src.database.connection import DatabaseConnection, get_database
from src.database.models import (
    EmergencyContact,
    RoutePlan,
    TourDestination,
    TourParticipant,
    TourPlan,
    User,
)
from src.models.tour import (
    EmergencyContactCreate,
    EmergencyContactUpdate,
    ParticipantCreate,
    ParticipantUpdate,
    RoutePlanCreate,
    RoutePlanUpdate,
    TourCreate,
    TourUpdate,
    UserCreate,
)

logger = get_logger(__name__)

TOUR_FIELDS = {
    "tour_name", "description", "start_date", "end_date", "duration_days",
    "max_participants", "price_per_person", "total_budget", "status", "organizer_id",
}
PARTICIPANT_FIELDS = {
    "payment_status", "payment_amount", "special_requirements",
    "emergency_contact_name", "emergency_contact_phone", "status",
}
ROUTE_PLAN_FIELDS = {
    "source", "destination", "source_lat", "source_lng", "dest_lat", "dest_lng",
    "distance_km", "estimated_time_minutes", "route_polyline", "traffic_condition",
    "weather_condition", "fuel_cost", "toll_cost", "total_cost", "status",
}
CONTACT_FIELDS = {
    "name", "phone", "email", "contact_type", "service_area", "latitude",
    "longitude", "address", "is_24_7", "priority", "is_active",
}


def _coerce(model, name: str, value: Any) -> Any:
    """Convert JSON strings into the Python types date/time columns expect."""
    if value is None or not isinstance(value, str):
        return value
    column_type = model.__table__.columns[name].type
    try:
        if isinstance(column_type, DateTime):
            return datetime.fromisoformat(value)
        if isinstance(column_type, Date):
            return date.fromisoformat(value)
        if isinstance(column_type, Time):
            return time.fromisoformat(value)
    except ValueError:
        raise ValidationError(f"Invalid value for {name}: {value}", field=name)
    return value


def _flush_update(session, resource: str) -> None:
    """Flush pending changes, reporting constraint violations as a 400."""
    try:
        session.flush()
    except IntegrityError as e:
        raise ValidationError(f"{resource} could not be updated", field=str(e.orig))


def _apply_changes(instance, changes: Dict[str, Any], allowed: Iterable[str]) -> List[str]:
    """
    Set whitelisted attributes on ``instance``.

    Raises:
        ValidationError: If no fields were given, any field is not updatable,
            or a NOT NULL column is set to null
    """
    if not changes:
        raise ValidationError("No fields to update")

    unknown = sorted(set(changes) - set(allowed))
    if unknown:
        raise ValidationError(f"Unknown or read-only fields: {', '.join(unknown)}", field=unknown[0])

    model = type(instance)
    columns = model.__table__.columns
    nulled = sorted(name for name, value in changes.items() if value is None and not columns[name].nullable)
    if nulled:
        raise ValidationError(f"Fields cannot be null: {', '.join(nulled)}", field=nulled[0])

    for name, value in changes.items():
        setattr(instance, name, _coerce(model, name, value))
    return sorted(changes)


def _check_capacity(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError("max_participants must be a positive integer", field="max_participants")


class TourService:
    """
    Service for tours, route plans, emergency contacts and users.

    Every public method runs in its own session; multi-step operations
    (tour creation, registration) commit or roll back as a unit.
    """

    def __init__(self, db: Optional[DatabaseConnection] = None):
        self.db = db or get_database()

    # ============================================================
    # Tours
    # ============================================================

    @staticmethod
    def _participant_dict(participant: TourParticipant) -> Dict[str, Any]:
        data = participant.to_dict()
        data["user_name"] = participant.user.name if participant.user else None
        data["user_email"] = participant.user.email if participant.user else None
        data["tour_name"] = participant.tour.tour_name if participant.tour else None
        data["tour_code"] = participant.tour.tour_id if participant.tour else None
        return data

    def _tour_detail(self, tour: TourPlan) -> Dict[str, Any]:
        data = tour.to_dict()
        data["destinations"] = [d.to_dict() for d in tour.destinations]
        data["participants"] = [self._participant_dict(p) for p in tour.participants]
        return data

    @staticmethod
    def _find_tour(session, tour_id: str) -> TourPlan:
        tour = session.query(TourPlan).filter(TourPlan.tour_id == tour_id).first()
        if tour is None:
            raise NotFoundError("Tour", tour_id)
        return tour

    def list_tours(self, organizer_id: Optional[int] = None) -> List[Dict[str, Any]]:
        with self.db.get_session() as session:
            query = session.query(TourPlan)
            if organizer_id is not None:
                query = query.filter(TourPlan.organizer_id == organizer_id)
            tours = query.order_by(TourPlan.created_at.desc(), TourPlan.id.desc()).all()
            return [t.to_dict() for t in tours]

    def get_tour(self, tour_id: str) -> Dict[str, Any]:
        with self.db.get_session() as session:
            return self._tour_detail(self._find_tour(session, tour_id))

    def create_tour(self, payload: TourCreate) -> Dict[str, Any]:
        """Create a tour and its destinations in one transaction."""
        data = payload.model_dump(exclude={"destinations"})
        if data["duration_days"] is None:
            data["duration_days"] = (payload.end_date - payload.start_date).days + 1

        try:
            with self.db.transaction() as session:
                if session.query(TourPlan.id).filter(TourPlan.tour_id == payload.tour_id).first():
                    raise ValidationError(f"Tour {payload.tour_id} already exists", field="tour_id")

                tour = TourPlan(current_participants=0, **data)
                for index, destination in enumerate(payload.destinations, start=1):
                    fields = destination.model_dump()
                    if fields["order_sequence"] is None:
                        fields["order_sequence"] = index
                    tour.destinations.append(TourDestination(**fields))

                session.add(tour)
                session.flush()
                result = self._tour_detail(tour)
        except IntegrityError as e:
            raise ValidationError("Tour could not be created", field=str(e.orig))

        logger.info(f"Tour created: {payload.tour_id} with {len(payload.destinations)} destinations")
        return result

    def update_tour(self, payload: TourUpdate) -> Dict[str, Any]:
        with self.db.get_session() as session:
            changes = payload.changes("tour_id")
            if "max_participants" in changes:
                _check_capacity(changes["max_participants"])
            tour = self._find_tour(session, payload.tour_id)
            updated = _apply_changes(tour, changes, TOUR_FIELDS)
            _flush_update(session, "Tour")
            result = tour.to_dict()

        logger.info(f"Tour updated: {payload.tour_id} fields={updated}")
        return result

    def delete_tour(self, tour_id: str) -> None:
        with self.db.get_session() as session:
            session.delete(self._find_tour(session, tour_id))
        logger.info(f"Tour deleted: {tour_id}")

    # ============================================================
    # Participants
    # ============================================================

    def list_participants(self, tour_id: Optional[str] = None, user_id: Optional[int] = None) -> List[Dict[str, Any]]:
        with self.db.get_session() as session:
            query = session.query(TourParticipant).join(TourPlan, TourParticipant.tour_id == TourPlan.id)
            if tour_id:
                query = query.filter(TourPlan.tour_id == tour_id)
            if user_id is not None:
                query = query.filter(TourParticipant.user_id == user_id)
            participants = query.order_by(
                TourParticipant.registration_date.desc(), TourParticipant.id.desc()
            ).all()
            return [self._participant_dict(p) for p in participants]

    def register_participant(self, payload: ParticipantCreate) -> Dict[str, Any]:
        """
        Register a user for a tour.

        Raises:
            NotFoundError: Unknown tour or user
            BookingError: Already registered, or the tour is full
        """
        with self.db.transaction() as session:
            tour = (
                session.query(TourPlan)
                .filter(TourPlan.tour_id == payload.tour_id)
                .with_for_update()
                .first()
            )
            if tour is None:
                raise NotFoundError("Tour", payload.tour_id)
            if session.get(User, payload.user_id) is None:
                raise NotFoundError("User", str(payload.user_id))

            duplicate = (
                session.query(TourParticipant.id)
                .filter(TourParticipant.tour_id == tour.id, TourParticipant.user_id == payload.user_id)
                .first()
            )
            if duplicate:
                raise BookingError("User is already registered for this tour")

            if (tour.current_participants or 0) >= tour.max_participants:
                raise BookingError("Tour is full", details=f"max_participants={tour.max_participants}")

            participant = TourParticipant(
                tour_id=tour.id,
                **payload.model_dump(exclude={"tour_id"}),
            )
            session.add(participant)
            tour.current_participants = (tour.current_participants or 0) + 1
            session.flush()
            result = self._participant_dict(participant)

        logger.info(f"User {payload.user_id} registered for tour {payload.tour_id}")
        return result

    def update_participant(self, payload: ParticipantUpdate) -> Dict[str, Any]:
        with self.db.get_session() as session:
            participant = session.get(TourParticipant, payload.id)
            if participant is None:
                raise NotFoundError("Participant", str(payload.id))
            _apply_changes(participant, payload.changes("id"), PARTICIPANT_FIELDS)
            _flush_update(session, "Participant")
            return self._participant_dict(participant)

    def unregister_participant(self, participant_id: int) -> None:
        with self.db.transaction() as session:
            participant = session.get(TourParticipant, participant_id)
            if participant is None:
                raise NotFoundError("Participant", str(participant_id))

            tour = participant.tour
            if tour is not None and tour.current_participants:
                tour.current_participants -= 1
            session.delete(participant)

        logger.info(f"Participant {participant_id} unregistered")

    # ============================================================
    # Route plans
    # ============================================================

    @staticmethod
    def _find_plan(session, plan_id: str) -> RoutePlan:
        plan = session.query(RoutePlan).filter(RoutePlan.plan_id == plan_id).first()
        if plan is None:
            raise NotFoundError("Route plan", plan_id)
        return plan

    def list_route_plans(self, created_by: Optional[int] = None) -> List[Dict[str, Any]]:
        with self.db.get_session() as session:
            query = session.query(RoutePlan)
            if created_by is not None:
                query = query.filter(RoutePlan.created_by == created_by)
            return [p.to_dict() for p in query.order_by(RoutePlan.created_at.desc(), RoutePlan.id.desc()).all()]

    def get_route_plan(self, plan_id: str) -> Dict[str, Any]:
        with self.db.get_session() as session:
            return self._find_plan(session, plan_id).to_dict()

    def create_route_plan(self, payload: RoutePlanCreate) -> Dict[str, Any]:
        try:
            with self.db.get_session() as session:
                if session.query(RoutePlan.id).filter(RoutePlan.plan_id == payload.plan_id).first():
                    raise ValidationError(f"Route plan {payload.plan_id} already exists", field="plan_id")
                plan = RoutePlan(**payload.model_dump())
                session.add(plan)
                session.flush()
                result = plan.to_dict()
        except IntegrityError as e:
            raise ValidationError("Route plan could not be created", field=str(e.orig))

        logger.info(f"Route plan created: {payload.plan_id} {payload.source} -> {payload.destination}")
        return result

    def update_route_plan(self, payload: RoutePlanUpdate) -> Dict[str, Any]:
        with self.db.get_session() as session:
            plan = self._find_plan(session, payload.plan_id)
            _apply_changes(plan, payload.changes("plan_id"), ROUTE_PLAN_FIELDS)
            _flush_update(session, "Route plan")
            return plan.to_dict()

    def delete_route_plan(self, plan_id: str) -> None:
        with self.db.get_session() as session:
            session.delete(self._find_plan(session, plan_id))
        logger.info(f"Route plan deleted: {plan_id}")

    # ============================================================
    # Emergency contacts
    # ============================================================

    @staticmethod
    def _find_contact(session, contact_id: str) -> EmergencyContact:
        contact = session.query(EmergencyContact).filter(EmergencyContact.contact_id == contact_id).first()
        if contact is None:
            raise NotFoundError("Emergency contact", contact_id)
        return contact

    def list_emergency_contacts(
        self,
        contact_type: Optional[str] = None,
        area: Optional[str] = None,
        active: Optional[bool] = None,
    ) -> List[Dict[str, Any]]:
        with self.db.get_session() as session:
            query = session.query(EmergencyContact)
            if contact_type:
                query = query.filter(EmergencyContact.contact_type == contact_type)
            if area:
                query = query.filter(EmergencyContact.service_area.ilike(f"%{area}%"))
            if active is not None:
                query = query.filter(EmergencyContact.is_active == active)
            contacts = query.order_by(EmergencyContact.priority.asc(), EmergencyContact.name.asc()).all()
            return [c.to_dict() for c in contacts]

    def create_emergency_contact(self, payload: EmergencyContactCreate) -> Dict[str, Any]:
        try:
            with self.db.get_session() as session:
                if session.query(EmergencyContact.id).filter(
                    EmergencyContact.contact_id == payload.contact_id
                ).first():
                    raise ValidationError(f"Contact {payload.contact_id} already exists", field="contact_id")
                contact = EmergencyContact(**payload.model_dump())
                session.add(contact)
                session.flush()
                return contact.to_dict()
        except IntegrityError as e:
            raise ValidationError("Emergency contact could not be created", field=str(e.orig))

    def update_emergency_contact(self, payload: EmergencyContactUpdate) -> Dict[str, Any]:
        with self.db.get_session() as session:
            contact = self._find_contact(session, payload.contact_id)
            _apply_changes(contact, payload.changes("contact_id"), CONTACT_FIELDS)
            _flush_update(session, "Emergency contact")
            return contact.to_dict()

    def delete_emergency_contact(self, contact_id: str) -> None:
        with self.db.get_session() as session:
            session.delete(self._find_contact(session, contact_id))
        logger.info(f"Emergency contact deleted: {contact_id}")

    # ============================================================
    # Users
    # ============================================================

    def list_users(self) -> List[Dict[str, Any]]:
        with self.db.get_session() as session:
            return [u.to_dict() for u in session.query(User).order_by(User.id.asc()).all()]

    def create_user(self, payload: UserCreate) -> Dict[str, Any]:
        try:
            with self.db.get_session() as session:
                if session.query(User.id).filter(User.email == payload.email).first():
                    raise ValidationError(f"A user with email {payload.email} already exists", field="email")
                user = User(**payload.model_dump())
                session.add(user)
                session.flush()
                return user.to_dict()
        except IntegrityError as e:
            raise ValidationError("User could not be created", field=str(e.orig))


def get_tour_service() -> TourService:
    """FastAPI dependency provider."""
    return TourService()
