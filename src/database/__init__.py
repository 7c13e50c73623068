"""
Database module - relational and document store access.

This module handles:
- PostgreSQL connection management (tours, route plans, contacts, users)
- MongoDB admin/employee client management (fleet and employee records)
- ORM models and document helpers
- Table and index initialization
"""
from src.database.connection import DatabaseConnection, get_database, reset_database
from src.database.mongo import MongoConnection, get_mongo, reset_mongo
from src.database.documents import DocumentRepository, serialize_document, update_fields
from src.database.models import (
    Base,
    User,
    TourPlan,
    TourDestination,
    TourParticipant,
    RoutePlan,
    EmergencyContact,
)
from src.database.init_db import init_sql_tables, drop_sql_tables, init_document_indexes

__all__ = [
    # Relational
    "DatabaseConnection",
    "get_database",
    "reset_database",
    # Documents
    "MongoConnection",
    "get_mongo",
    "reset_mongo",
    "DocumentRepository",
    "serialize_document",
    "update_fields",
    # Models
    "Base",
    "User",
    "TourPlan",
    "TourDestination",
    "TourParticipant",
    "RoutePlan",
    "EmergencyContact",
    # Init
    "init_sql_tables",
    "drop_sql_tables",
    "init_document_indexes",
]
