"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, enrollments_service.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from enrollments_service.api.deps.dependencies import get_service_cache
from enrollments_service.boundary.db import create_all_tables
from enrollments_service.configs import get_settings
from enrollments_service.observability.logger import configure_logging
from enrollments_service.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from .routers import enrollments_router, health_router
from .routers.enrollments import request_validation_error_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup", extra={"environment": settings.environment})

    if settings.database.create_tables_on_startup:
        await create_all_tables()

    yield

    # Shutdown
    await get_service_cache().aclose()
    logger.info("Remote service clients closed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Enrollments Service API",
        description="Enrollment records validated against the courses and students services",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Body parsing failures use the enrollment error body
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(enrollments_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "enrollments_service.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
