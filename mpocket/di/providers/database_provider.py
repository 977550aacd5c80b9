from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import MongoClientManager

if TYPE_CHECKING:
    from ..container import DIContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register the MongoDB client manager.
        No connection is made here; repositories connect on first use.
        """
        settings = container.settings
        options = {}
        if container.client_factory is not None:
            options["client_factory"] = container.client_factory

        container.register_singleton(
            MongoClientManager,
            MongoClientManager(
                mongo_uri=settings.mongo_uri,
                database_name=settings.mongo_database_name,
                timeout_ms=settings.mongo_timeout_ms,
                **options,
            ),
        )
