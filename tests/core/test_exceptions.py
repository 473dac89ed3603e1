"""
Test suite for enrollment error messages.

The messages are part of the HTTP contract.
"""

import pytest

from enrollments_service.core.exceptions import (
    CourseNotFoundError,
    EnrollmentConflictError,
    EnrollmentNotFoundError,
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


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (EnrollmentNotFoundError("E1"), "Enrollment with id=E1 is not found"),
        (StudentNotFoundError("S1"), "Student with id=S1 is not found"),
        (CourseNotFoundError("C-404"), "Course with id=C-404 is not found"),
        (InvalidEnrollmentIdError("Enrollment123"), "Enrollment id=Enrollment123 is invalid"),
        (InvalidStudentIdError("bad"), "Student id=bad is invalid"),
        (InvalidCourseIdError("123"), "Course id=123 is invalid"),
        (EnrollmentConflictError("E1"), "Enrollment with id=E1 already exists"),
    ],
)
def test_messages_name_entity_and_identifier(error, message: str) -> None:
    assert str(error) == message
    assert error.message == message


def test_not_found_and_invalid_identifier_are_distinct_families() -> None:
    assert not issubclass(StudentNotFoundError, InvalidIdentifierError)
    assert not issubclass(InvalidStudentIdError, ResourceNotFoundError)


def test_remote_failures_are_infrastructure_errors_not_not_found() -> None:
    error = RemoteServiceUnavailableError("Students", "request timed out")

    assert isinstance(error, RemoteServiceError)
    assert isinstance(error, InfrastructureError)
    assert not isinstance(error, ResourceNotFoundError)
    assert error.message == "Students service error: request timed out"
