"""Enrollment domain rules: error taxonomy and request validation."""

from enrollments_service.core.exceptions import (
    CourseNotFoundError,
    EnrollmentConflictError,
    EnrollmentNotFoundError,
    EnrollmentServiceError,
    EnrollmentStoreError,
    EnrollmentValidationError,
    InfrastructureError,
    InvalidCourseIdError,
    InvalidEnrollmentIdError,
    InvalidIdentifierError,
    InvalidStudentIdError,
    RemoteServiceError,
    RemoteServiceUnavailableError,
    ResourceNotFoundError,
    StudentNotFoundError,
)
from enrollments_service.core.validation import validate_enrollment_request

__all__ = [
    "CourseNotFoundError",
    "EnrollmentConflictError",
    "EnrollmentNotFoundError",
    "EnrollmentServiceError",
    "EnrollmentStoreError",
    "EnrollmentValidationError",
    "InfrastructureError",
    "InvalidCourseIdError",
    "InvalidEnrollmentIdError",
    "InvalidIdentifierError",
    "InvalidStudentIdError",
    "RemoteServiceError",
    "RemoteServiceUnavailableError",
    "ResourceNotFoundError",
    "StudentNotFoundError",
    "validate_enrollment_request",
]
