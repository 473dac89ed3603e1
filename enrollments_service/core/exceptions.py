"""
Enrollment error taxonomy.

Every failure an enrollment operation can end in is one of these types.
The API layer maps each family onto a single HTTP status.

Dependencies: none
System role: Shared error vocabulary for clients, orchestrator and API
"""


class EnrollmentServiceError(Exception):
    """Base class for all enrollment service errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class EnrollmentValidationError(EnrollmentServiceError):
    """Raised when a required request field is missing. No I/O was performed."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class ResourceNotFoundError(EnrollmentServiceError):
    """Raised when a referenced entity does not exist."""

    resource = "Resource"

    def __init__(self, resource_id: str):
        self.resource_id = resource_id
        super().__init__(f"{self.resource} with id={resource_id} is not found")


class EnrollmentNotFoundError(ResourceNotFoundError):
    resource = "Enrollment"


class StudentNotFoundError(ResourceNotFoundError):
    resource = "Student"


class CourseNotFoundError(ResourceNotFoundError):
    resource = "Course"


class InvalidIdentifierError(EnrollmentServiceError):
    """Raised when an identifier is malformed, before existence could be checked."""

    resource = "Resource"

    def __init__(self, resource_id: str):
        self.resource_id = resource_id
        super().__init__(f"{self.resource} id={resource_id} is invalid")


class InvalidEnrollmentIdError(InvalidIdentifierError):
    resource = "Enrollment"


class InvalidStudentIdError(InvalidIdentifierError):
    resource = "Student"


class InvalidCourseIdError(InvalidIdentifierError):
    resource = "Course"


class EnrollmentConflictError(EnrollmentServiceError):
    """Raised when an add presents an enrollment id that is already stored."""

    def __init__(self, enrollment_id: str):
        self.enrollment_id = enrollment_id
        super().__init__(f"Enrollment with id={enrollment_id} already exists")


class InfrastructureError(EnrollmentServiceError):
    """A dependency failed. Safe to retry at the caller's discretion."""


class RemoteServiceError(InfrastructureError):
    """Remote service answered with an unexpected status or payload."""

    def __init__(self, service: str, detail: str, status_code: int | None = None):
        self.service = service
        self.status_code = status_code
        super().__init__(f"{service} service error: {detail}")


class RemoteServiceUnavailableError(RemoteServiceError):
    """Remote service could not be reached or timed out."""


class EnrollmentStoreError(InfrastructureError):
    """The enrollment store failed unexpectedly."""
