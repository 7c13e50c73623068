"""
Unit tests for MongoConnection with mocked clients.
"""
from unittest.mock import MagicMock

from pymongo.errors import PyMongoError

from src.database.mongo import MongoConnection


class TestMongoConnection:
    """Test client sharing, collection access and ping reports."""

    def test_single_cluster_shares_client(self):
        client = MagicMock()
        mongo = MongoConnection(admin_client=client)
        assert mongo.employee_client is client

    def test_collections_come_from_named_databases(self):
        admin, employee = MagicMock(), MagicMock()
        mongo = MongoConnection(admin_client=admin, employee_client=employee)

        mongo.get_admin_collection("vehicles")
        mongo.get_employee_collection("expenses")

        admin.__getitem__.assert_called_with("admin_db")
        employee.__getitem__.assert_called_with("emp_db")

    def test_ping_reports_both_databases(self):
        client = MagicMock()
        client.__getitem__.return_value.list_collection_names.return_value = ["vehicles"]
        mongo = MongoConnection(admin_client=client)

        report = mongo.ping()

        assert report["adminDb"]["connected"] is True
        assert report["adminDb"]["collections"] == ["vehicles"]
        assert report["employeeDb"]["error"] is None
        assert "timestamp" in report

    def test_ping_reports_failure_without_raising(self):
        admin, employee = MagicMock(), MagicMock()
        admin.__getitem__.return_value.list_collection_names.side_effect = PyMongoError("refused")
        mongo = MongoConnection(admin_client=admin, employee_client=employee)

        report = mongo.ping()

        assert report["adminDb"]["connected"] is False
        assert "refused" in report["adminDb"]["error"]
        assert report["employeeDb"]["connected"] is True

    def test_write_failure_keeps_connected_flag(self):
        client = MagicMock()
        db = client.__getitem__.return_value
        db.list_collection_names.return_value = []
        db.__getitem__.return_value.insert_one.side_effect = PyMongoError("read only")
        mongo = MongoConnection(admin_client=client)

        report = mongo.ping()

        assert report["adminDb"]["connected"] is True
        assert report["adminDb"]["error"].startswith("Write test failed")

    def test_close_shared_client_once(self):
        client = MagicMock()
        mongo = MongoConnection(admin_client=client)
        mongo.close()
        client.close.assert_called_once()
