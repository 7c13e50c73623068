"""
Document Store Connection Management.

The fleet data is split across two logical MongoDB databases:
- admin    : vehicles, trips, saved routes, admin users
- employee : employee records, profiles, expenses, odometer readings

The two databases may live on separate clusters or share one. When both
URIs are equal a single MongoClient (and its connection pool) serves both.
"""
from datetime import datetime
from typing import Any, Dict, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from src.core.config import get_settings
from src.core.logging_config import get_logger

logger = get_logger(__name__)

WRITE_TEST_COLLECTION = "connection_test"


class MongoConnection:
    """
    Holds the admin and employee MongoDB clients.

    Clients can be injected (tests pass mocks); otherwise they are created
    from settings. pymongo connects lazily, so construction never blocks.

    Example:
        >>> mongo = MongoConnection()
        >>> vehicles = mongo.get_admin_collection("vehicles")
        >>> vehicles.count_documents({})
    """

    def __init__(
        self,
        admin_client: Optional[MongoClient] = None,
        employee_client: Optional[MongoClient] = None,
    ):
        settings = get_settings()
        self.admin_db_name = settings.mongodb_db_admin
        self.employee_db_name = settings.mongodb_db_employee

        self.admin_client = admin_client or MongoClient(settings.mongodb_uri_admin)

        if employee_client is not None:
            self.employee_client = employee_client
        elif settings.same_mongo_cluster():
            self.employee_client = self.admin_client
        else:
            self.employee_client = MongoClient(settings.mongodb_uri_employee)

        shared = self.employee_client is self.admin_client
        logger.info(
            f"MongoDB clients initialized: admin_db={self.admin_db_name}, "
            f"employee_db={self.employee_db_name}, shared_client={shared}"
        )

    @property
    def admin_db(self) -> Database:
        return self.admin_client[self.admin_db_name]

    @property
    def employee_db(self) -> Database:
        return self.employee_client[self.employee_db_name]

    def get_admin_collection(self, name: str) -> Collection:
        """Get a collection from the admin database."""
        return self.admin_db[name]

    def get_employee_collection(self, name: str) -> Collection:
        """Get a collection from the employee database."""
        return self.employee_db[name]

    def ping(self) -> Dict[str, Any]:
        """
        Check both databases.

        For each database: list collections, then insert and remove a test
        document. Failures are reported per database instead of raised.

        Returns:
            {"adminDb": {...}, "employeeDb": {...}, "timestamp": ...}
        """
        return {
            "adminDb": self._check_database(self.admin_db, "Admin"),
            "employeeDb": self._check_database(self.employee_db, "Employee"),
            "timestamp": datetime.utcnow().isoformat(),
        }

    def _check_database(self, db: Database, label: str) -> Dict[str, Any]:
        report: Dict[str, Any] = {"connected": False, "collections": [], "error": None}

        try:
            report["collections"] = db.list_collection_names()
            report["connected"] = True
        except PyMongoError as e:
            logger.error(f"{label} DB connection check failed: {e}")
            report["error"] = str(e)
            return report

        try:
            write_test = db[WRITE_TEST_COLLECTION]
            write_test.insert_one({
                "test": True,
                "timestamp": datetime.utcnow(),
                "message": f"{label} DB write test successful",
            })
            write_test.delete_many({"test": True})
        except PyMongoError as e:
            logger.warning(f"{label} DB write test failed: {e}")
            report["error"] = f"Write test failed: {e}"

        return report

    def close(self) -> None:
        """Close both clients (once, when shared)."""
        self.admin_client.close()
        if self.employee_client is not self.admin_client:
            self.employee_client.close()
        logger.info("MongoDB connections closed")


_mongo_connection: Optional[MongoConnection] = None


def get_mongo() -> MongoConnection:
    """Get or create the process-wide MongoConnection."""
    global _mongo_connection
    if _mongo_connection is None:
        _mongo_connection = MongoConnection()
    return _mongo_connection


def reset_mongo() -> None:
    """Close and forget the singleton connection."""
    global _mongo_connection
    if _mongo_connection is not None:
        _mongo_connection.close()
    _mongo_connection = None
