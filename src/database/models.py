"""
Database Models - SQLAlchemy ORM models for the relational store.

This module defines the tables for:
- Users
- Tour plans, their destinations and participants
- Route plans
- Emergency contacts

Public identifiers (tour_id, plan_id, contact_id) are strings chosen by
the client; the integer primary keys are internal.
"""
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Dict

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    JSON,
    Numeric,
    String,
    Text,
    Time,
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def _plain(value: Any) -> Any:
    """Convert column values to JSON-friendly types."""
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return value


class SerializableMixin:
    """Adds a column-wise to_dict()."""

    def to_dict(self) -> Dict[str, Any]:
        return {
            column.name: _plain(getattr(self, column.name))
            for column in self.__table__.columns
        }


class User(SerializableMixin, Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)
    name = Column(String(255), nullable=False)
    role = Column(String(50), default="employee")
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class TourPlan(SerializableMixin, Base):
    """
    An organized tour.

    current_participants is a counter kept in step with the
    tour_participants rows by the registration service.
    """
    __tablename__ = "tour_plans"

    id = Column(Integer, primary_key=True, autoincrement=True)
    tour_id = Column(String(100), unique=True, nullable=False)
    tour_name = Column(String(255), nullable=False)
    description = Column(Text)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    duration_days = Column(Integer)
    max_participants = Column(Integer, nullable=False, default=50)
    current_participants = Column(Integer, default=0)
    price_per_person = Column(Numeric(10, 2))
    total_budget = Column(Numeric(10, 2))
    status = Column(String(50), default="planning")
    organizer_id = Column(Integer, ForeignKey("users.id"))
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    destinations = relationship(
        "TourDestination",
        back_populates="tour",
        cascade="all, delete-orphan",
        order_by="TourDestination.order_sequence",
    )
    participants = relationship(
        "TourParticipant",
        back_populates="tour",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index("idx_tour_plans_organizer", "organizer_id"),
        Index("idx_tour_plans_dates", "start_date", "end_date"),
    )


class TourDestination(SerializableMixin, Base):
    __tablename__ = "tour_destinations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    tour_id = Column(Integer, ForeignKey("tour_plans.id", ondelete="CASCADE"), index=True)
    destination_name = Column(String(255), nullable=False)
    latitude = Column(Numeric(10, 8), nullable=False)
    longitude = Column(Numeric(11, 8), nullable=False)
    visit_date = Column(Date)
    visit_time = Column(Time)
    duration_hours = Column(Numeric(4, 2))
    cost = Column(Numeric(10, 2))
    description = Column(Text)
    order_sequence = Column(Integer)
    created_at = Column(DateTime, default=datetime.utcnow)

    tour = relationship("TourPlan", back_populates="destinations")


class TourParticipant(SerializableMixin, Base):
    __tablename__ = "tour_participants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    tour_id = Column(Integer, ForeignKey("tour_plans.id", ondelete="CASCADE"), index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True)
    registration_date = Column(DateTime, default=datetime.utcnow)
    payment_status = Column(String(50), default="pending")
    payment_amount = Column(Numeric(10, 2))
    special_requirements = Column(Text)
    emergency_contact_name = Column(String(255))
    emergency_contact_phone = Column(String(50))
    status = Column(String(50), default="registered")
    created_at = Column(DateTime, default=datetime.utcnow)

    tour = relationship("TourPlan", back_populates="participants")
    user = relationship("User")


class RoutePlan(SerializableMixin, Base):
    __tablename__ = "route_plans"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plan_id = Column(String(100), unique=True, nullable=False)
    source = Column(String(255), nullable=False)
    destination = Column(String(255), nullable=False)
    source_lat = Column(Numeric(10, 8))
    source_lng = Column(Numeric(11, 8))
    dest_lat = Column(Numeric(10, 8))
    dest_lng = Column(Numeric(11, 8))
    distance_km = Column(Numeric(10, 2))
    estimated_time_minutes = Column(Integer)
    route_polyline = Column(JSON)
    traffic_condition = Column(String(50))
    weather_condition = Column(String(50))
    fuel_cost = Column(Numeric(10, 2))
    toll_cost = Column(Numeric(10, 2))
    total_cost = Column(Numeric(10, 2))
    status = Column(String(50), default="planned")
    created_by = Column(Integer, ForeignKey("users.id"))
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index("idx_route_plans_source_dest", "source", "destination"),
        Index("idx_route_plans_created_by", "created_by"),
    )


class EmergencyContact(SerializableMixin, Base):
    __tablename__ = "emergency_contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    contact_id = Column(String(100), unique=True, nullable=False)
    name = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    email = Column(String(255))
    contact_type = Column(String(50), nullable=False)
    service_area = Column(String(255))
    latitude = Column(Numeric(10, 8))
    longitude = Column(Numeric(11, 8))
    address = Column(Text)
    is_24_7 = Column(Boolean, default=False)
    priority = Column(Integer, default=1)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index("idx_emergency_contacts_type", "contact_type"),
        Index("idx_emergency_contacts_location", "latitude", "longitude"),
    )
