"""
Document helpers shared by the admin and employee services.

Records are addressed by an application-level string key (``id`` for most
collections, ``employeeId`` for profiles), never by Mongo's ``_id``.
"""
from typing import Any, Dict, List, Optional, Sequence, Tuple

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.collection import Collection

from src.core.exceptions import ValidationError
from src.core.logging_config import get_logger

logger = get_logger(__name__)

SortSpec = Sequence[Tuple[str, int]]


def serialize_document(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Return a JSON-friendly copy of a document (``_id`` as string)."""
    if doc is None:
        return None
    result = dict(doc)
    if isinstance(result.get("_id"), ObjectId):
        result["_id"] = str(result["_id"])
    return result


def newest_first(field: str) -> SortSpec:
    return [(field, DESCENDING)]


def update_fields(payload, key: str = "id") -> Dict[str, Any]:
    """
    Fields a partial-update payload actually carried, in camelCase.

    The lookup key and ``_id`` are dropped.

    Raises:
        ValidationError: If nothing is left to update
    """
    fields = payload.model_dump(by_alias=True, exclude_unset=True)
    fields.pop(key, None)
    fields.pop("_id", None)
    if not fields:
        raise ValidationError("No fields to update")
    return fields


class DocumentRepository:
    """
    Thin CRUD wrapper around a single collection.

    Example:
        >>> repo = DocumentRepository(mongo.get_admin_collection("vehicles"))
        >>> repo.insert({"id": "vehicle_1", "name": "Van"})
        >>> repo.update("vehicle_1", {"status": "On Trip"})
        True
    """

    def __init__(self, collection: Collection, key: str = "id"):
        self.collection = collection
        self.key = key

    def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        sort: Optional[SortSpec] = None,
    ) -> List[Dict[str, Any]]:
        """Return matching documents, optionally sorted."""
        cursor = self.collection.find(filters or {})
        if sort:
            cursor = cursor.sort(list(sort))
        return [serialize_document(doc) for doc in cursor]

    def get(self, key_value: Any) -> Optional[Dict[str, Any]]:
        return serialize_document(self.collection.find_one({self.key: key_value}))

    def latest(self, field: str) -> Optional[Dict[str, Any]]:
        """Most recent document by ``field``, or None for an empty collection."""
        return serialize_document(self.collection.find_one({}, sort=list(newest_first(field))))

    def insert(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        """Insert and return the stored document including its ``_id``."""
        stored = dict(doc)
        result = self.collection.insert_one(stored)
        stored["_id"] = result.inserted_id
        return serialize_document(stored)

    def update(self, key_value: Any, fields: Dict[str, Any]) -> bool:
        """``$set`` the given fields; False when no document matched."""
        fields = {k: v for k, v in fields.items() if k != "_id"}
        result = self.collection.update_one({self.key: key_value}, {"$set": fields})
        return result.matched_count > 0

    def upsert(self, key_value: Any, doc: Dict[str, Any]) -> None:
        self.collection.update_one({self.key: key_value}, {"$set": doc}, upsert=True)

    def delete(self, key_value: Any) -> bool:
        """Delete one document; False when nothing was deleted."""
        result = self.collection.delete_one({self.key: key_value})
        return result.deleted_count > 0

    def delete_all(self) -> int:
        result = self.collection.delete_many({})
        logger.info(f"Deleted {result.deleted_count} documents from {self.collection.name}")
        return result.deleted_count

    def count(self) -> int:
        return self.collection.count_documents({})
