"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: enrollments_service.configs, enrollments_service.application, enrollments_service.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from enrollments_service.application.services import EnrollmentService
from enrollments_service.boundary.clients import CourseServiceClient, StudentServiceClient
from enrollments_service.boundary.db import get_async_db
from enrollments_service.configs import Settings, get_settings


class ServiceCache:
    """Container for shared, long-lived client instances."""

    def __init__(self):
        self._student_client = None
        self._course_client = None

    @property
    def student_client(self) -> StudentServiceClient:
        """Get cached students service client."""
        if self._student_client is None:
            remote = get_settings().remote_services
            self._student_client = StudentServiceClient(
                base_url=remote.students_base_url,
                timeout_seconds=remote.timeout_seconds,
                retry_attempts=remote.retry_attempts,
                retry_backoff_seconds=remote.retry_backoff_seconds,
            )
        return self._student_client

    @property
    def course_client(self) -> CourseServiceClient:
        """Get cached courses service client."""
        if self._course_client is None:
            remote = get_settings().remote_services
            self._course_client = CourseServiceClient(
                base_url=remote.courses_base_url,
                timeout_seconds=remote.timeout_seconds,
                retry_attempts=remote.retry_attempts,
                retry_backoff_seconds=remote.retry_backoff_seconds,
            )
        return self._course_client

    async def aclose(self) -> None:
        """Close open clients and clear the cache."""
        for client in (self._student_client, self._course_client):
            if client is not None:
                await client.aclose()
        self._student_client = None
        self._course_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_student_client() -> StudentServiceClient:
    """Get shared students service client."""
    return get_service_cache().student_client


def get_course_client() -> CourseServiceClient:
    """Get shared courses service client."""
    return get_service_cache().course_client


def get_enrollment_service(
    db: AsyncSession = Depends(get_async_db),
    student_client: StudentServiceClient = Depends(get_student_client),
    course_client: CourseServiceClient = Depends(get_course_client),
    settings: Settings = Depends(get_settings_dependency),
) -> EnrollmentService:
    """
    Get enrollment service instance.

    Args:
        db: Async database session (injected via Depends)
        student_client: Students service client (injected via Depends)
        course_client: Courses service client (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        EnrollmentService: Enrollment service bound to this request's session
    """
    return EnrollmentService(
        db=db,
        student_client=student_client,
        course_client=course_client,
        concurrent_lookups=settings.remote_services.concurrent_lookups,
    )
