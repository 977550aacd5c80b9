from typing import TYPE_CHECKING
from ...domain.repositories.record_repository import RecordRepository
from ...infrastructure.db.mongo_connection import MongoClientManager
from ...infrastructure.db.mongo_record_repository import MongoRecordRepository

if TYPE_CHECKING:
    from ..container import DIContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register all repository implementations.
        Gets database client from database provider and creates repository instances.
        """
        mongo_client = container.get(MongoClientManager)

        container.register_singleton(
            RecordRepository,
            MongoRecordRepository(
                mongo_client,
                collection_name=container.settings.records_collection,
            ),
        )
