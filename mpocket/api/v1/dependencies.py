"""
Dependency Container
====================

FastAPI dependencies backed by the DI container.
"""
from mpocket.application.services.record_service import RecordService
from mpocket.di.container import get_container


def get_record_service() -> RecordService:
    """
    Get record service instance (singleton).

    Returns:
        RecordService instance
    """
    container = get_container()
    return container.get(RecordService)
