from typing import TYPE_CHECKING
from ...domain.repositories.record_repository import RecordRepository
from ...application.services.record_service import RecordService

if TYPE_CHECKING:
    from ..container import DIContainer


class RecordProvider:
    """Record service provider - registers record-related services"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register record service.
        Service is created with repository from container.
        """
        container.register_singleton(
            RecordService,
            RecordService(
                record_repository=container.get(RecordRepository)
            )
        )
