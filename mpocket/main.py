"""
FastAPI Application
===================

Main FastAPI app setup with routes and access gates.

Run with:
    python -m mpocket.main
    uvicorn mpocket.main:app --port 3000
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from mpocket import __version__
from mpocket.api.middleware import register_gates
from mpocket.api.v1 import record_router
from mpocket.core.config import Settings, get_settings
from mpocket.di.container import DIContainer, set_container
from mpocket.domain.repositories.record_repository import RecordRepository
from mpocket.infrastructure.db.mongo_connection import MongoClientManager

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(application: FastAPI):
    """
    Application lifespan handler.

    Connects to MongoDB before serving. A StoreConnectionError is not caught:
    it aborts startup so the process exits without serving any request.
    """
    container: DIContainer = application.state.container
    container.get(RecordRepository).ensure_connected()
    logger.info("🚀 Record store ready")

    yield

    container.get(MongoClientManager).close()
    logger.info("🛑 MongoDB connection closed")


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[DIContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Settings to use (defaults to get_settings())
        container: DI container to use (defaults to one built from settings)

    Returns:
        Configured FastAPI application instance

    Raises:
        ConfigurationError: If MONGO_URI or AUTH_KEY is missing
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    settings.validate()

    container = container or DIContainer(settings)
    set_container(container)

    application = FastAPI(
        title="mpocket Record API",
        description="Create person/employee records with unique mobile, email and PAN",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.container = container

    register_gates(application, auth_key=settings.auth_key, header_name=settings.auth_header)

    application.include_router(record_router)

    @application.get("/")
    async def root():
        """Root endpoint."""
        return {
            "status": "running",
            "service": "mpocket Record API",
            "version": __version__,
            "docs": "/docs",
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
