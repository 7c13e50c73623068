"""
Shared fixtures.

The environment is pinned before any application module is imported:
SQL runs on in-memory SQLite, logs and uploads go to a temp directory and
no LLM key is set. MongoDB is replaced by FakeMongo, whose collections
are MagicMocks preloaded with realistic pymongo results. Tests that need
writes to be readable back use the mongomock-backed document_store.
"""
import os
import tempfile
from collections import defaultdict
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import mongomock
import pytest

_TMP_DIR = tempfile.mkdtemp(prefix="fleet-tests-")

os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_INIT_DB"] = "false"
os.environ["LOG_DIR"] = os.path.join(_TMP_DIR, "logs")
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_DIR, "uploads")
os.environ["GOOGLE_API_KEY"] = ""
os.environ["GROQ_API_KEY"] = ""
os.environ["MONGODB_URI"] = "mongodb://localhost:27017"

from bson import ObjectId  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from src.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from src.api.main import app  # noqa: E402
from src.database.connection import DatabaseConnection, get_database  # noqa: E402
from src.database.models import Base  # noqa: E402
from src.database.mongo import MongoConnection, get_mongo  # noqa: E402
from src.llm.client import LLMClient  # noqa: E402
from src.services.ai_service import AIService, get_ai_service  # noqa: E402
from src.services.employee_service import EmployeeService, get_employee_service  # noqa: E402
from src.services.fleet_service import FleetService, get_fleet_service  # noqa: E402
from src.services.tour_service import TourService, get_tour_service  # noqa: E402


class FakeCursor:
    """Iterable stand-in for a pymongo cursor that records sort()."""

    def __init__(self, docs: List[Dict[str, Any]]):
        self.docs = docs
        self.sort_spec = None

    def sort(self, spec):
        self.sort_spec = spec
        return self

    def __iter__(self):
        return iter(self.docs)


def make_collection(docs: Optional[List[Dict[str, Any]]] = None, name: str = "collection") -> MagicMock:
    collection = MagicMock()
    collection.name = name
    collection.find.return_value = FakeCursor(docs or [])
    collection.find_one.return_value = None
    collection.insert_one.return_value.inserted_id = ObjectId()
    collection.update_one.return_value.matched_count = 1
    collection.delete_one.return_value.deleted_count = 1
    collection.delete_many.return_value.deleted_count = 0
    return collection


class FakeMongo:
    """Duck-typed MongoConnection with one MagicMock per collection name."""

    def __init__(self):
        self.admin = defaultdict(make_collection)
        self.employee = defaultdict(make_collection)
        self.healthy = True

    def get_admin_collection(self, name: str) -> MagicMock:
        return self.admin[name]

    def get_employee_collection(self, name: str) -> MagicMock:
        return self.employee[name]

    def ping(self) -> Dict[str, Any]:
        report = {"connected": self.healthy, "collections": [], "error": None if self.healthy else "down"}
        return {"adminDb": dict(report), "employeeDb": dict(report), "timestamp": "2024-01-01T00:00:00"}

    def close(self) -> None:
        pass


@pytest.fixture
def fake_mongo() -> FakeMongo:
    return FakeMongo()


@pytest.fixture
def sql_db():
    """Fresh in-memory SQLite database with every table created."""
    db = DatabaseConnection("sqlite://")
    Base.metadata.create_all(db.engine)
    yield db
    db.close()


@pytest.fixture
def llm() -> MagicMock:
    return MagicMock(spec=LLMClient)


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def document_store() -> MongoConnection:
    """MongoConnection over in-memory mongomock clients, so writes can be read back."""
    return MongoConnection(admin_client=mongomock.MongoClient(), employee_client=mongomock.MongoClient())


@pytest.fixture
def client(fake_mongo, sql_db, llm, upload_dir):
    """TestClient with every store and the LLM replaced."""
    app.dependency_overrides[get_mongo] = lambda: fake_mongo
    app.dependency_overrides[get_database] = lambda: sql_db
    app.dependency_overrides[get_fleet_service] = lambda: FleetService(fake_mongo)
    app.dependency_overrides[get_employee_service] = lambda: EmployeeService(fake_mongo, upload_dir=str(upload_dir))
    app.dependency_overrides[get_tour_service] = lambda: TourService(sql_db)
    app.dependency_overrides[get_ai_service] = lambda: AIService(llm)

    yield TestClient(app, raise_server_exceptions=False)

    app.dependency_overrides.clear()


@pytest.fixture
def store_client(document_store, sql_db, llm, upload_dir):
    """TestClient whose document databases keep what is written to them."""
    app.dependency_overrides[get_mongo] = lambda: document_store
    app.dependency_overrides[get_database] = lambda: sql_db
    app.dependency_overrides[get_fleet_service] = lambda: FleetService(document_store)
    app.dependency_overrides[get_employee_service] = lambda: EmployeeService(
        document_store, upload_dir=str(upload_dir)
    )
    app.dependency_overrides[get_tour_service] = lambda: TourService(sql_db)
    app.dependency_overrides[get_ai_service] = lambda: AIService(llm)

    yield TestClient(app, raise_server_exceptions=False)

    app.dependency_overrides.clear()
