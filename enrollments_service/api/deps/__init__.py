"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_course_client,
    get_enrollment_service,
    get_service_cache,
    get_settings_dependency,
    get_student_client,
)

__all__ = [
    "get_course_client",
    "get_enrollment_service",
    "get_service_cache",
    "get_settings_dependency",
    "get_student_client",
]
