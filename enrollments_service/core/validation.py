"""
Enrollment request validation pipeline.

Required fields are checked in a fixed order and the first missing one
fails the request; later checks never run.

Dependencies: enrollments_service.core.exceptions
System role: Local precondition gate before any remote call
"""

from typing import Callable, Protocol

from enrollments_service.core.exceptions import EnrollmentValidationError


class EnrollmentFields(Protocol):
    enrollment_year: int | None
    semester: object | None
    student_id: str | None
    course_id: str | None


def is_present(value: object) -> bool:
    """True unless the value is missing or a blank string."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def _has(field: str) -> Callable[[EnrollmentFields], bool]:
    return lambda request: is_present(getattr(request, field, None))


# Order is part of the contract.
REQUIRED_FIELD_CHECKS: tuple[tuple[str, Callable[[EnrollmentFields], bool], str], ...] = (
    ("enrollment_year", _has("enrollment_year"), "Enrollment year is required"),
    ("semester", _has("semester"), "Semester is required"),
    ("student_id", _has("student_id"), "Student id is required"),
    ("course_id", _has("course_id"), "Course id is required"),
)


def validate_enrollment_request(request):
    """
    Run the required-field checks over an enrollment request.

    Args:
        request: Object exposing enrollment_year, semester, student_id, course_id

    Returns:
        The same request, unchanged

    Raises:
        EnrollmentValidationError: For the first check that fails
    """
    for field, check, message in REQUIRED_FIELD_CHECKS:
        if not check(request):
            raise EnrollmentValidationError(field, message)
    return request
