"""API routers."""

from .enrollments import router as enrollments_router
from .health import router as health_router

__all__ = [
    "enrollments_router",
    "health_router",
]
