"""API and remote-service schemas."""

from enrollments_service.models.common import ErrorResponse
from enrollments_service.models.enrollment import (
    EnrollmentRequest,
    EnrollmentResponse,
    Semester,
)
from enrollments_service.models.snapshots import CourseSnapshot, StudentSnapshot

__all__ = [
    "CourseSnapshot",
    "EnrollmentRequest",
    "EnrollmentResponse",
    "ErrorResponse",
    "Semester",
    "StudentSnapshot",
]
