"""
Record Repository Interface
===========================

Abstract interface for record data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from mpocket.domain.models.record import Record


class RecordRepository(ABC):
    """
    Abstract repository for record persistence operations.

    This interface defines the contract for record data access.
    Concrete implementations should be in the infrastructure layer.
    """

    @abstractmethod
    def ensure_connected(self) -> None:
        """
        Make sure the underlying store is reachable.

        Idempotent: once connected, later calls return immediately.

        Raises:
            StoreConnectionError: If the store cannot be reached
        """
        pass

    @abstractmethod
    def find_one(self, predicate: Dict[str, Any]) -> Optional[Record]:
        """
        Find the first record matching a predicate.

        Args:
            predicate: Store query document

        Returns:
            Record entity if found, None otherwise

        Raises:
            StoreError: On any storage fault
        """
        pass

    @abstractmethod
    def insert(self, record: Record) -> Record:
        """
        Persist a new record.

        Args:
            record: Record entity to insert

        Returns:
            The inserted record, with its store-assigned id

        Raises:
            DuplicateKeyError: If a unique index rejects the record
            StoreError: On any other storage fault
        """
        pass

    def find_duplicate(self, record: Record) -> Optional[Record]:
        """
        Find a record sharing any one of the unique keys with ``record``.

        Args:
            record: Candidate record

        Returns:
            The first conflicting record, or None
        """
        return self.find_one(
            {"$or": [{field: value} for field, value in record.unique_keys().items()]}
        )
