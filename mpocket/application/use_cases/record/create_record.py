"""
Create Record Use Case
======================

Business use case for creating a record iff no conflicting record exists.
"""
import logging

from mpocket.domain.exceptions import DuplicateRecordError
from mpocket.domain.models.record import Record
from mpocket.domain.repositories.record_repository import RecordRepository

logger = logging.getLogger(__name__)

DUPLICATE_ENTRY_MESSAGE = "❌ Duplicate entry: Mobile, Email, or PAN already exists"


class CreateRecordUseCase:
    """
    Use case for creating a record.

    Two layers guard uniqueness: an $or lookup on mobile/email/pancard before
    the insert, and the store's unique indexes at insert time. Concurrent
    requests can both pass the lookup; the index then rejects the loser with
    DuplicateKeyError, which is propagated to the caller unchanged.
    """

    def __init__(self, record_repository: RecordRepository):
        """
        Initialize use case with repository.

        Args:
            record_repository: Repository for record persistence
        """
        self._repository = record_repository

    def execute(self, record: Record) -> Record:
        """
        Execute the create record use case.

        Args:
            record: Record to create

        Returns:
            Created record with its store-assigned id

        Raises:
            StoreConnectionError: If the store cannot be reached
            DuplicateRecordError: If a record with the same mobile, email or pancard exists
            DuplicateKeyError: If the store rejects the insert on a unique index
            StoreError: On any other storage fault
        """
        self._repository.ensure_connected()

        existing = self._repository.find_duplicate(record)
        if existing:
            conflicting = [
                field_name
                for field_name, value in record.unique_keys().items()
                if existing.unique_keys().get(field_name) == value
            ]
            logger.info("Duplicate record rejected on %s", ", ".join(conflicting))
            raise DuplicateRecordError(DUPLICATE_ENTRY_MESSAGE, conflicting_fields=conflicting)

        created = self._repository.insert(record)
        logger.info("Record %s created", created.id)
        return created
