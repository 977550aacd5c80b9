"""
MongoDB Record Repository
=========================

Concrete implementation of RecordRepository using MongoDB.
"""
import logging
from typing import Any, Dict, Optional

from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError
from pymongo.errors import PyMongoError

from mpocket.domain.constants.record_fields import RecordFields
from mpocket.domain.exceptions import DuplicateKeyError, StoreError
from mpocket.domain.models.record import Record
from mpocket.domain.repositories.record_repository import RecordRepository
from mpocket.infrastructure.db.mongo_connection import MongoClientManager

logger = logging.getLogger(__name__)


class MongoRecordRepository(RecordRepository):
    """
    MongoDB implementation of RecordRepository.

    Owns the records collection and its unique indexes on mobile, email and
    pancard. Indexes are created once, right after the first successful
    connect.
    """

    COLLECTION_NAME = "mpockets"

    def __init__(self, client: MongoClientManager, collection_name: Optional[str] = None):
        """
        Args:
            client: Shared MongoDB client manager
            collection_name: Overrides COLLECTION_NAME
        """
        self._client = client
        self._collection_name = collection_name or self.COLLECTION_NAME
        self._collection: Optional[Collection] = None

    def ensure_connected(self) -> None:
        """Connect and prepare the collection (no-op after the first call)."""
        if self._collection is not None:
            return

        collection = self._client.get_collection(self._collection_name)
        try:
            for field_name in RecordFields.UNIQUE:
                collection.create_index([(field_name, ASCENDING)], unique=True)
        except PyMongoError as e:
            raise StoreError(f"Failed to create unique indexes: {e}") from e
        self._collection = collection

    @property
    def collection(self) -> Collection:
        self.ensure_connected()
        return self._collection

    def _to_entity(self, doc: dict) -> Record:
        """Convert MongoDB document to Record entity."""
        doc = dict(doc)
        record_id = doc.pop(RecordFields.MONGO_ID, None)
        return Record(
            mobile=doc.pop(RecordFields.MOBILE, None),
            name=doc.pop(RecordFields.NAME, None),
            dob=doc.pop(RecordFields.DOB, None),
            email=doc.pop(RecordFields.EMAIL, None),
            employee_type=doc.pop(RecordFields.EMPLOYEE_TYPE, None),
            pancard=doc.pop(RecordFields.PANCARD, None),
            extra=doc,
            id=str(record_id) if record_id is not None else None,
        )

    def _to_document(self, record: Record) -> dict:
        """Convert Record entity to MongoDB document."""
        doc = record.to_dict()
        # Let MongoDB assign the ObjectId
        if record.id is None:
            doc.pop(RecordFields.MONGO_ID, None)
        return doc

    def find_one(self, predicate: Dict[str, Any]) -> Optional[Record]:
        """Find the first record matching a predicate."""
        try:
            doc = self.collection.find_one(predicate)
        except PyMongoError as e:
            raise StoreError(str(e)) from e
        if not doc:
            return None
        return self._to_entity(doc)

    def insert(self, record: Record) -> Record:
        """Insert a new record and return it with its assigned id."""
        doc = self._to_document(record)
        try:
            result = self.collection.insert_one(doc)
        except MongoDuplicateKeyError as e:
            details = dict(e.details or {})
            details.setdefault("code", e.code)
            details.setdefault("errmsg", str(e))
            raise DuplicateKeyError(str(e), details=details) from e
        except PyMongoError as e:
            raise StoreError(str(e)) from e

        record.id = str(result.inserted_id)
        return record
